"""In-memory preference overrides from the environment and command-line flags."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from tshack.constants import PREFERENCES_ENV_PREFIX
from tshack.utils import deep_merge

from .models import Preferences


def apply_env_overrides(preferences: Preferences, environ: Mapping[str, str] | None = None) -> Preferences:
    """Apply TSHACK_PREFS__<FIELD>[__<SUBFIELD>] environment overrides."""
    environ = os.environ if environ is None else environ
    override_data: dict[str, object] = {}

    for key, value in environ.items():
        if not key.upper().startswith(PREFERENCES_ENV_PREFIX):
            continue
        path = key[len(PREFERENCES_ENV_PREFIX) :].strip("_")
        if not path:
            continue
        segments = [segment.lower() for segment in path.split("__") if segment]
        _insert_override(override_data, segments, value)

    if not override_data:
        return preferences

    merged = deep_merge(preferences.model_dump(), override_data)
    return Preferences.model_validate(merged)


def apply_overrides(
    preferences: Preferences,
    *,
    editor: str | None = None,
    package_manager: str | None = None,
    workspace: Path | str | None = None,
) -> Preferences:
    """Return a copy with the non-empty overrides applied; the original is left as is."""
    override_data: dict[str, object] = {}
    if editor:
        override_data["editor"] = {"command": editor}
    if package_manager:
        override_data["package_manager"] = package_manager
    if workspace:
        override_data["default_workspace_path"] = workspace

    if not override_data:
        return preferences

    merged = deep_merge(preferences.model_dump(), override_data)
    return Preferences.model_validate(merged)


def _insert_override(data: dict[str, object], path: list[str], value: object) -> None:
    cursor = data
    *parents, leaf = path
    for segment in parents:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[leaf] = value
