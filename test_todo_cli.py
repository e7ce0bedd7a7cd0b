#!/usr/bin/env python3
"""
Tests for the application entry point and logging setup.
"""

import sys
import logging
from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

import todo
from utils.constants import APP_NAME, APP_VERSION, LOGGER_NAME, MSG_GOODBYE
from utils.logging_config import ColoredFormatter, setup_logging, get_logger, set_log_level


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Leave the application logger quiet and handler-free after each test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        todo.main(['--version'])

    assert exc_info.value.code == 0
    assert f"{APP_NAME} {APP_VERSION}" in capsys.readouterr().out


def test_unknown_flag_is_rejected():
    with pytest.raises(SystemExit) as exc_info:
        todo.main(['--bogus'])
    assert exc_info.value.code == 2


@pytest.mark.parametrize("argv, level", [
    ([], logging.WARNING),
    (['-v'], logging.INFO),
    (['--verbose'], logging.INFO),
    (['-d'], logging.DEBUG),
    (['--debug', '--verbose'], logging.DEBUG),
])
def test_log_level_from_flags(argv, level):
    args = todo.create_main_parser().parse_args(argv)
    assert todo.get_log_level(args) == level


def test_main_runs_menu_until_exit(capsys):
    with patch('builtins.input', side_effect=['5']):
        exit_code = todo.main([])

    assert exit_code == 0
    assert MSG_GOODBYE in capsys.readouterr().out
    assert logging.getLogger(LOGGER_NAME).level == logging.WARNING


def test_main_debug_prints_system_info(capsys):
    with patch('builtins.input', side_effect=['5']):
        exit_code = todo.main(['--debug', '--no-colors'])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert f"{APP_NAME} v{APP_VERSION}" in out
    assert "Python " in out


def test_main_passes_color_preference():
    with patch('todo.launch_interactive_mode', return_value=0) as mock_launch:
        assert todo.main(['--no-colors']) == 0
    mock_launch.assert_called_once_with(use_colors=False, debug=False)


def test_launch_reports_unexpected_error(capsys):
    failing = MagicMock()
    failing.return_value.run.side_effect = RuntimeError("boom")

    with patch('todo.InteractiveInterface', failing):
        exit_code = todo.launch_interactive_mode(use_colors=False)

    assert exit_code == 1
    assert "Error in interactive mode: boom" in capsys.readouterr().err


def test_run_exits_with_main_code():
    with patch('todo.main', return_value=0):
        with pytest.raises(SystemExit) as exc_info:
            todo.run()
    assert exc_info.value.code == 0


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "logs" / "todo.log"
    logger = setup_logging(logging.INFO, log_file=log_file, use_colors=False)
    logger.info("Application started")

    assert len(logger.handlers) == 2
    assert "Application started" in log_file.read_text(encoding='utf-8')


def test_setup_logging_replaces_handlers():
    setup_logging(use_colors=False)
    logger = setup_logging(use_colors=False)
    assert len(logger.handlers) == 1


def test_get_logger_nests_module_names():
    assert get_logger().name == LOGGER_NAME
    assert get_logger("core.item_store").name == f"{LOGGER_NAME}.core.item_store"
    assert get_logger(f"{LOGGER_NAME}.ui").name == f"{LOGGER_NAME}.ui"


def test_set_log_level_updates_handlers():
    logger = setup_logging(logging.INFO, use_colors=False)
    set_log_level(logger, logging.ERROR)

    assert logger.level == logging.ERROR
    assert all(handler.level == logging.ERROR for handler in logger.handlers)


def test_colored_formatter_leaves_record_untouched():
    formatter = ColoredFormatter('%(levelname)s %(message)s')
    record = logging.LogRecord("todo_app", logging.ERROR, __file__, 1, "failed", None, None)

    assert formatter.format(record) == "\033[31mERROR\033[0m failed"
    assert record.levelname == "ERROR"
