"""Preferences store protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from .models import Preferences, PreferencesError


class PreferencesStore(Protocol):
    """Protocol for loading and saving user preferences."""

    def load(self) -> Result[Preferences, PreferencesError]: ...

    def save(self, preferences: Preferences) -> Result[None, PreferencesError]: ...
