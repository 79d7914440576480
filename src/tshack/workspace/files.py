"""Filesystem operations over the workspace folders."""

from __future__ import annotations

import shutil
from importlib.resources import as_file
from importlib.resources.abc import Traversable
from pathlib import Path

from result import Err, Ok, Result, is_err

from tshack.common import create_logger
from tshack.constants import DEFAULT_SCRIPT_CONTENT, SCRIPT_SUFFIX

from .models import InvalidNameError, PathExistsError, Workspace, WorkspaceError, WorkspaceIOError

logger = create_logger("workspace")


def validate_name(name: str) -> Result[str, InvalidNameError]:
    """Reject names that would escape the workspace folders."""
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        return Err(InvalidNameError(name=name, message=f"Invalid name: {name!r}"))
    return Ok(name)


def ensure_path_does_not_exist(path: Path, kind: str) -> Result[Path, PathExistsError]:
    if path.exists():
        return Err(PathExistsError(path=path, kind=kind, message=f"{kind} {path} already exists."))
    return Ok(path)


def create_directory(path: Path) -> Result[Path, WorkspaceError]:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Err(WorkspaceIOError(path=path, message=f"Failed to create directory: {e}"))
    return Ok(path)


def copy_template(template: Traversable, target_path: Path) -> Result[Path, WorkspaceError]:
    logger.debug("Copying template", template=template.name, target=str(target_path))
    try:
        with as_file(template) as template_path:
            shutil.copytree(
                template_path,
                target_path,
                dirs_exist_ok=True,
                ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
            )
    except (OSError, shutil.Error) as e:
        return Err(WorkspaceIOError(path=target_path, message=f"Failed to copy template: {e}"))
    return Ok(target_path)


def create_project_from_template(path: Path, template: Traversable) -> Result[Path, WorkspaceError]:
    """Create ``path`` and fill it with a copy of ``template``.

    An existing ``path`` is left untouched and reported as an error.
    """
    return (
        ensure_path_does_not_exist(path, "Folder")
        .and_then(create_directory)
        .and_then(lambda target: copy_template(template, target))
        .inspect(lambda target: logger.info("Project created", path=str(target), template=template.name))
    )


def create_standalone_file(path: Path, content: str = DEFAULT_SCRIPT_CONTENT) -> Result[Path, WorkspaceError]:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        return Err(WorkspaceIOError(path=path, message=f"Failed to write file: {e}"))

    logger.info("Script created", path=str(path))
    return Ok(path)


def list_projects(workspace: Workspace) -> list[str] | None:
    """Project folder entries, or None when the projects folder does not exist."""
    if not workspace.projects_dir.is_dir():
        return None
    return sorted(entry.name for entry in workspace.projects_dir.iterdir())


def list_scripts(workspace: Workspace) -> list[str] | None:
    """Script file names, or None when the scripts folder does not exist."""
    if not workspace.scripts_dir.is_dir():
        return None
    return sorted(
        entry.name for entry in workspace.scripts_dir.iterdir() if entry.is_file() and entry.suffix == SCRIPT_SUFFIX
    )


def delete_project(workspace: Workspace, name: str) -> Result[bool, WorkspaceError]:
    """Remove a project folder.

    Returns Ok(False) when there is nothing to delete.
    """
    name_result = validate_name(name)
    if is_err(name_result):
        return name_result

    path = workspace.project_path(name)

    if not path.exists() and not path.is_symlink():
        logger.debug("Project not found", name=name, path=str(path))
        return Ok(False)

    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        logger.error("Project delete failed", name=name, path=str(path), error=str(e))
        return Err(WorkspaceIOError(path=path, message=f"Failed to delete project '{name}': {e}"))

    logger.info("Project deleted", name=name, path=str(path))
    return Ok(True)
