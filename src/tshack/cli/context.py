"""Per-invocation state shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

import typer
from pydantic import ValidationError
from result import Err, Ok

from tshack.preferences import FilePreferencesStore, Preferences, apply_env_overrides, apply_overrides
from tshack.settings import Settings
from tshack.utils import first_validation_error
from tshack.workspace import Workspace

from .errors import describe_error


@dataclass
class CliContext:
    settings: Settings

    @property
    def store(self) -> FilePreferencesStore:
        return self.settings.to_preferences_store()

    def load_preferences(
        self,
        *,
        editor: str | None = None,
        package_manager: str | None = None,
        env_overrides: bool = True,
    ) -> Preferences:
        """Load preferences, falling back to defaults when the file is unusable.

        Flag overrides only apply to the returned copy and are never saved.
        """
        match self.store.load():
            case Ok(preferences):
                pass
            case Err(error):
                typer.secho(
                    f"warning: failed to load preferences, using defaults ({describe_error(error)})",
                    err=True,
                    fg=typer.colors.YELLOW,
                )
                preferences = Preferences()

        if env_overrides:
            try:
                preferences = apply_env_overrides(preferences)
            except ValidationError as e:
                field, message = first_validation_error(e)
                typer.secho(
                    f"warning: ignoring preference overrides from the environment ({field}: {message})",
                    err=True,
                    fg=typer.colors.YELLOW,
                )
        return apply_overrides(preferences, editor=editor, package_manager=package_manager)

    def workspace(self, preferences: Preferences) -> Workspace:
        return Workspace.from_preferences(preferences)


def get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        ctx.obj = CliContext(settings=Settings())
    return ctx.obj
