"""Workspace layout and error models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from tshack.constants import PROJECTS_DIR_NAME, SCRIPT_SUFFIX, SCRIPTS_DIR_NAME
from tshack.preferences import Preferences


class PlaygroundKind(str, Enum):
    """What ``new`` creates."""

    PROJECT = "project"
    FILE = "file"


class ListFilter(str, Enum):
    """Which workspace folders ``list`` shows."""

    ALL = "all"
    PROJECTS = "projects"
    SCRIPTS = "scripts"


@dataclass(frozen=True)
class Workspace:
    """Root directory holding ``projects/`` and ``scripts/``."""

    root: Path

    @classmethod
    def from_preferences(cls, preferences: Preferences) -> Workspace:
        return cls(root=preferences.default_workspace_path)

    @property
    def projects_dir(self) -> Path:
        return self.root / PROJECTS_DIR_NAME

    @property
    def scripts_dir(self) -> Path:
        return self.root / SCRIPTS_DIR_NAME

    def project_path(self, name: str) -> Path:
        return self.projects_dir / name

    def script_path(self, name: str) -> Path:
        return self.scripts_dir / script_filename(name)


def script_filename(name: str) -> str:
    return name if name.endswith(SCRIPT_SUFFIX) else f"{name}{SCRIPT_SUFFIX}"


class WorkspaceError(BaseModel):
    """Base workspace error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class PathExistsError(WorkspaceError):
    """Target of a create operation already exists."""

    path: Path
    kind: str


class TemplateNotFoundError(WorkspaceError):
    """Requested template is not shipped with tshack."""

    name: str
    available: list[str]


class WorkspaceIOError(WorkspaceError):
    """Filesystem operation failed."""

    path: Path


class InvalidNameError(WorkspaceError):
    """Name cannot be used as a single folder or file name."""

    name: str
