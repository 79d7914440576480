"""Interactive shell handoff after a project is created."""

from __future__ import annotations

import os
from pathlib import Path

from result import Result

from tshack.utils import ProcessError, run_command


def default_shell() -> str:
    return os.environ.get("SHELL") or os.environ.get("COMSPEC") or "/bin/sh"


def open_shell(directory: Path) -> Result[None, ProcessError]:
    """Start the user's shell inside ``directory`` and wait for it to exit."""
    return run_command([default_shell()], cwd=directory)
