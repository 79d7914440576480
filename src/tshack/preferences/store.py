"""File-based preferences store implementation."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
from result import Err, Ok, Result

from tshack.common import create_logger
from tshack.utils import first_validation_error

from .models import (
    Preferences,
    PreferencesError,
    PreferencesIOError,
    PreferencesParseError,
    PreferencesValidationError,
)
from .protocol import PreferencesStore

logger = create_logger("preferences")


class FilePreferencesStore(PreferencesStore):
    """Preferences kept in a single JSON document.

    A missing file is created with the defaults on first load. A file that
    cannot be read or parsed is reported and never rewritten by ``load``.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Result[Preferences, PreferencesError]:
        logger.debug("Loading preferences", path=str(self.path))

        if not self.path.exists():
            defaults = Preferences()
            logger.info("Preferences file not found, creating defaults", path=str(self.path))
            return self.save(defaults).map(lambda _: defaults)

        return (
            self._read()
            .and_then(self._parse)
            .and_then(self._validate)
            .inspect_err(lambda error: logger.warning("Preferences load failed", error=error.message))
        )

    def save(self, preferences: Preferences) -> Result[None, PreferencesError]:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(preferences.to_json_data(), indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Preferences write error", path=str(self.path), error=str(exc))
            return Err(PreferencesIOError(path=self.path, message=str(exc)))

        logger.debug("Preferences saved", path=str(self.path))
        return Ok(None)

    def _read(self) -> Result[str, PreferencesError]:
        try:
            return Ok(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            return Err(PreferencesIOError(path=self.path, message=str(exc)))

    def _parse(self, raw_text: str) -> Result[object, PreferencesError]:
        try:
            return Ok(json.loads(raw_text))
        except json.JSONDecodeError as exc:
            return Err(
                PreferencesParseError(
                    path=self.path,
                    line=exc.lineno,
                    column=exc.colno,
                    message=exc.msg,
                )
            )

    def _validate(self, data: object) -> Result[Preferences, PreferencesError]:
        if not isinstance(data, dict):
            return Err(
                PreferencesValidationError(
                    path=self.path,
                    message="Preferences root must be a JSON object.",
                )
            )

        try:
            preferences = Preferences.model_validate(data)
        except ValidationError as exc:
            field, message = first_validation_error(exc)
            return Err(PreferencesValidationError(path=self.path, field=field, message=message))

        logger.debug("Preferences validated", path=str(self.path))
        return Ok(preferences)
