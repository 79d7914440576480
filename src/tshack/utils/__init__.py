from .dicts import deep_merge
from .process import CommandFailedError, CommandNotFoundError, CommandPermissionError, ProcessError, run_command
from .validation import first_validation_error

__all__ = [
    "CommandFailedError",
    "CommandNotFoundError",
    "CommandPermissionError",
    "ProcessError",
    "deep_merge",
    "first_validation_error",
    "run_command",
]
