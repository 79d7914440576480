"""Public preferences API for tshack."""

from __future__ import annotations

from .models import (
    EditorPreferences,
    Preferences,
    PreferencesError,
    PreferencesIOError,
    PreferencesParseError,
    PreferencesValidationError,
)
from .protocol import PreferencesStore
from .resolver import apply_env_overrides, apply_overrides
from .store import FilePreferencesStore

__all__ = [
    "EditorPreferences",
    "FilePreferencesStore",
    "Preferences",
    "PreferencesError",
    "PreferencesIOError",
    "PreferencesParseError",
    "PreferencesStore",
    "PreferencesValidationError",
    "apply_env_overrides",
    "apply_overrides",
]
