"""Loguru setup for the tshack CLI and for library use.

The package logger is disabled on import. The CLI writes a rotating log file
under the XDG data directory; ``--verbose`` additionally mirrors records to
stderr, which is the quickest way to follow the live loop's timers and child
processes while it runs.
"""

import sys
from pathlib import Path
from typing import Any, Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from tshack.constants import APP_NAME

from .models import AppInfo, AppPaths
from .paths import get_data_directory

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss.SSS}</dim> | <level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: LogLevel = Field(default="INFO")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")
    console_level: LogLevel = Field(default="DEBUG")


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, paths: AppPaths) -> int | None:
    """Route package logs to the rotating CLI log file.

    Returns the handler id, or None when file logging is disabled.
    """
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})
    if not config.enabled:
        return None

    logger.enable(APP_NAME)
    log_file = get_log_file_path(config, paths)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler_id = logger.add(log_file, **_file_sink_options(app_info, config))
    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level, format=config.format)
    return handler_id


def add_console_sink(level: str = "DEBUG", *, colorize: bool | None = None) -> int:
    """Mirror package logs to stderr, keeping any file sink in place."""
    logger.enable(APP_NAME)
    return logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=colorize)


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.remove()
    return add_console_sink(level, colorize=False)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def get_log_file_path(config: LoggingConfig, paths: AppPaths) -> Path:
    if config.log_file:
        return Path(config.log_file).expanduser()
    return get_default_log_file_path(paths)


def get_default_log_file_path(paths: AppPaths) -> Path:
    return get_data_directory(paths) / "logs" / paths.log_filename


def _file_sink_options(app_info: AppInfo, config: LoggingConfig) -> dict[str, Any]:
    options: dict[str, Any] = {
        "level": config.log_level,
        "rotation": config.rotation,
        "retention": config.retention,
        "diagnose": app_info.environment == "dev",
    }
    if config.format == "json":
        options["serialize"] = True
    else:
        options["format"] = FILE_FORMAT
    return options
