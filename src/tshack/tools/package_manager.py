"""Package manager invocations used while scaffolding projects."""

from __future__ import annotations

import shlex
from pathlib import Path

from result import Result

from tshack.common import create_logger
from tshack.preferences import Preferences
from tshack.utils import ProcessError, run_command

logger = create_logger("tools.package_manager")


def install_command(preferences: Preferences) -> list[str]:
    return [preferences.package_manager, "install"]


def create_command(preferences: Preferences, generator: str) -> list[str]:
    """``<pm> create <generator args...> .`` run inside the new project folder."""
    return [preferences.package_manager, "create", *shlex.split(generator), "."]


def install_dependencies(preferences: Preferences, project_dir: Path) -> Result[None, ProcessError]:
    command = install_command(preferences)
    logger.info("Installing project dependencies", command=command, cwd=str(project_dir))
    return run_command(command, cwd=project_dir).inspect_err(
        lambda error: logger.error("Dependency install failed", command=command, error=error.message)
    )


def create_with_package_manager(
    preferences: Preferences,
    project_dir: Path,
    generator: str,
) -> Result[None, ProcessError]:
    command = create_command(preferences, generator)
    logger.info("Running project generator", command=command, cwd=str(project_dir))
    return run_command(command, cwd=project_dir).inspect_err(
        lambda error: logger.error("Project generator failed", command=command, error=error.message)
    )
