"""Common models and helpers used across tshack modules."""

from .logging import (
    LoggingConfig,
    add_console_sink,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    get_default_log_file_path,
    get_log_file_path,
    setup_cli_logging,
)
from .models import AppInfo, AppPaths
from .paths import get_data_directory, get_preferences_path

__all__ = [
    "AppInfo",
    "AppPaths",
    "LoggingConfig",
    "add_console_sink",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory",
    "get_default_log_file_path",
    "get_log_file_path",
    "get_preferences_path",
    "setup_cli_logging",
]
