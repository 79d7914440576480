"""User-facing error rendering."""

from __future__ import annotations

import typer

from tshack.live import LiveError, WatchError
from tshack.preferences import (
    PreferencesError,
    PreferencesIOError,
    PreferencesParseError,
    PreferencesValidationError,
)
from tshack.utils import CommandFailedError, CommandNotFoundError, CommandPermissionError, ProcessError
from tshack.workspace import (
    InvalidNameError,
    PathExistsError,
    TemplateNotFoundError,
    WorkspaceError,
    WorkspaceIOError,
)

type CliError = WorkspaceError | ProcessError | PreferencesError | LiveError


def describe_error(error: CliError) -> str:
    match error:
        case PreferencesParseError(path=path, line=line, column=column, message=message):
            return f"{path}:{line}:{column}: {message}"
        case PreferencesValidationError(path=path, field=field, message=message) if field:
            return f"{path}: {field}: {message}"
        case PreferencesValidationError(path=path, message=message) | PreferencesIOError(path=path, message=message):
            return f"{path}: {message}"
        case _:
            return error.message


def handle_error(error: CliError) -> None:
    """Print an error (and a hint where one helps) to stderr."""
    match error:
        case PathExistsError():
            typer.secho(f"error: {error.message}", err=True, fg=typer.colors.RED)
        case TemplateNotFoundError(name=name, available=available):
            typer.secho(f"error: template '{name}' not found", err=True, fg=typer.colors.RED)
            if available:
                typer.secho(f"hint: available templates are {', '.join(available)}", err=True, fg=typer.colors.CYAN)
        case CommandNotFoundError(command=command):
            typer.secho(f"error: '{command[0]}' command not found", err=True, fg=typer.colors.RED)
            typer.secho(
                "hint: install it or pick another one with --editor / --package-manager or 'tshack setup'",
                err=True,
                fg=typer.colors.CYAN,
            )
        case CommandFailedError(message=message) | CommandPermissionError(message=message):
            typer.secho(f"error: {message}", err=True, fg=typer.colors.RED)
        case InvalidNameError(message=message) | WorkspaceIOError(message=message):
            typer.secho(f"error: {message}", err=True, fg=typer.colors.RED)
        case PreferencesParseError() | PreferencesValidationError() | PreferencesIOError():
            typer.secho(f"error: preferences: {describe_error(error)}", err=True, fg=typer.colors.RED)
        case WatchError(path=path, message=message):
            typer.secho(f"error: {message}", err=True, fg=typer.colors.RED)
            typer.secho(
                f"hint: check that {path.parent} still exists and the OS file watch limit is not reached",
                err=True,
                fg=typer.colors.CYAN,
            )
        case _:  # pragma: no cover - fallback for unexpected subclasses
            typer.secho(f"error: {error.message}", err=True, fg=typer.colors.RED)


def fail(error: CliError) -> typer.Exit:
    handle_error(error)
    return typer.Exit(code=1)
