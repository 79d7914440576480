"""Pydantic models for tshack user preferences and their errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _default_workspace_path() -> Path:
    return Path.home() / "ts-hacks"


def _require_command(value: str) -> str:
    if not value.strip():
        raise ValueError("must name a command")
    return value


class EditorPreferences(BaseModel):
    """Editor settings (``editor`` key)."""

    model_config = ConfigDict(extra="allow")

    command: str = "code"

    @field_validator("command", mode="after")
    @classmethod
    def command_not_blank(cls, value: str) -> str:
        return _require_command(value)


class Preferences(BaseModel):
    """User preferences persisted as JSON (~/.tshack).

    Keys are camelCase on disk and snake_case in Python. Unknown keys are kept
    so that rewriting the file never drops them.
    """

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    editor: EditorPreferences = Field(default_factory=EditorPreferences)
    package_manager: str = "pnpm"
    default_workspace_path: Path = Field(default_factory=_default_workspace_path)

    @field_validator("package_manager", mode="after")
    @classmethod
    def package_manager_not_blank(cls, value: str) -> str:
        return _require_command(value)

    @field_validator("default_workspace_path", mode="after")
    @classmethod
    def expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    def to_json_data(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)


class PreferencesIOError(BaseModel):
    """File I/O error reading or writing preferences."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class PreferencesParseError(BaseModel):
    """Preferences file is not valid JSON."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class PreferencesValidationError(BaseModel):
    """Preferences file does not match the schema."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    field: str | None = None
    message: str


type PreferencesError = PreferencesIOError | PreferencesParseError | PreferencesValidationError
