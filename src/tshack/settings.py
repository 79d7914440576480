from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tshack.common import AppInfo, AppPaths, LoggingConfig, get_preferences_path
from tshack.constants import ENV_PREFIX
from tshack.preferences import FilePreferencesStore


class LiveSettings(BaseModel):
    """Tuning for the live-reload loop."""

    runner_command: str = "tsx"
    debounce_ms: int = Field(default=300, ge=0)
    kill_grace_ms: int = Field(default=100, ge=0)
    stability_ms: int = Field(default=100, ge=0)

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    @property
    def kill_grace_seconds(self) -> float:
        return self.kill_grace_ms / 1000


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()
    logging: LoggingConfig = LoggingConfig()
    live: LiveSettings = LiveSettings()

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_preferences_store(self) -> FilePreferencesStore:
        return FilePreferencesStore(path=get_preferences_path(self.paths))


__all__ = [
    "LiveSettings",
    "Settings",
]
