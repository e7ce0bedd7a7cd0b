#!/usr/bin/env python3
"""
To-Do List App - Main Application Entry Point
=============================================

A console-based to-do list manager. The user adds, removes, edits and
displays to-do items through a numbered text menu. Items are kept in memory
only and are discarded when the program exits.

Usage:
    # Interactive mode (text menu)
    python todo.py

    # Show diagnostic logging while using the menu
    python todo.py --debug

    # Help
    python todo.py --help
"""

import sys
import logging
import argparse
from typing import List, Optional

from utils.constants import APP_NAME, APP_VERSION, APP_DESCRIPTION, MSG_CANCELLED
from utils.logging_config import setup_logging
from ui.interactive import InteractiveInterface


def create_main_parser() -> argparse.ArgumentParser:
    """
    Create the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='todo',
        description=f"{APP_NAME} v{APP_VERSION}\n{APP_DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Launch the menu
  python todo.py

  # Launch without ANSI colors
  python todo.py --no-colors
        """
    )

    parser.add_argument('--version', action='version', version=f'{APP_NAME} {APP_VERSION}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('-d', '--debug', action='store_true', help='Enable debug output')
    parser.add_argument('--no-colors', action='store_true', help='Disable colored output')

    return parser


def get_log_level(args: argparse.Namespace) -> int:
    """Map the verbosity flags to a logging level."""
    if args.debug:
        return logging.DEBUG
    elif args.verbose:
        return logging.INFO
    return logging.WARNING


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main application entry point.

    Parses the global flags, configures logging and runs the interactive
    interface.

    Args:
        argv: Command-line arguments, sys.argv[1:] if omitted

    Returns:
        Process exit code
    """
    parser = create_main_parser()
    args = parser.parse_args(argv)

    use_colors = not args.no_colors
    setup_logging(level=get_log_level(args), use_colors=use_colors)

    if args.debug:
        print_system_info()

    return launch_interactive_mode(use_colors=use_colors, debug=args.debug)


def launch_interactive_mode(use_colors: bool = True, debug: bool = False) -> int:
    """
    Launch the interactive menu-driven interface.

    Args:
        use_colors: Whether to use colored output
        debug: Whether to print a traceback for unexpected errors

    Returns:
        Exit code from the interface, or 1 on an unexpected error
    """
    try:
        interface = InteractiveInterface(use_colors=use_colors)
        return interface.run()
    except KeyboardInterrupt:
        print(f"\n\n{MSG_CANCELLED}")
        return 0
    except Exception as e:
        print(f"Error in interactive mode: {e}", file=sys.stderr)
        if debug:
            import traceback
            traceback.print_exc()
        return 1


def print_system_info():
    """Print system and application information."""
    import platform

    print(f"{APP_NAME} v{APP_VERSION}")
    print(f"Python {platform.python_version()}")
    print(f"Platform: {platform.system()} {platform.release()}")
    print()


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    run()
