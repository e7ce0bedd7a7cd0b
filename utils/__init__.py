"""
Utility modules.

This package contains shared utility functions and configurations:
- Logging configuration
- Shared constants and console messages
"""

from .logging_config import setup_logging, get_logger, set_log_level
from .constants import (
    APP_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
    LOGGER_NAME,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_DATE_FORMAT,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'set_log_level',
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
    'LOGGER_NAME',
    'DEFAULT_LOG_FORMAT',
    'DEFAULT_LOG_DATE_FORMAT',
]
