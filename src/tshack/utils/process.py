"""Subprocess helpers for the external tools tshack drives."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import BaseModel
from result import Err, Ok, Result


class ProcessError(BaseModel):
    """Base error for external commands."""

    command: list[str]
    message: str


class CommandNotFoundError(ProcessError):
    """Executable not found on PATH."""

    pass


class CommandPermissionError(ProcessError):
    """Executable exists but may not be run."""

    pass


class CommandFailedError(ProcessError):
    """Command exited with a non-zero status."""

    returncode: int


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Run a command attached to the current terminal and wait for it."""
    command = list(args)
    try:
        subprocess.run(command, cwd=cwd, env=env, check=True)
        return Ok(None)
    except FileNotFoundError:
        return Err(CommandNotFoundError(command=command, message=f"{command[0]} command not found"))
    except PermissionError:
        return Err(CommandPermissionError(command=command, message=f"{command[0]} is not executable"))
    except subprocess.CalledProcessError as e:
        return Err(
            CommandFailedError(
                command=command,
                returncode=e.returncode,
                message=f"'{' '.join(command)}' exited with status {e.returncode}",
            )
        )
