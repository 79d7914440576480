"""Editor launching."""

from __future__ import annotations

import shlex
from pathlib import Path

from result import Result

from tshack.common import create_logger
from tshack.preferences import Preferences
from tshack.utils import ProcessError, run_command

logger = create_logger("tools.editor")


def editor_command(preferences: Preferences, target: Path) -> list[str]:
    # editor commands may carry flags, e.g. "code --wait"
    return [*shlex.split(preferences.editor.command), str(target)]


def open_in_editor(preferences: Preferences, target: Path) -> Result[None, ProcessError]:
    """Open ``target`` in the configured editor, attached to the terminal."""
    command = editor_command(preferences, target)
    logger.info("Opening editor", command=command)
    return run_command(command, cwd=target if target.is_dir() else target.parent).inspect_err(
        lambda error: logger.error("Editor failed", command=command, error=error.message)
    )
