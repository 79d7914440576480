"""Messages, states and errors of the live-reload loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class SupervisorState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


class RunOutcome(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"
    SUPERSEDED = "superseded"


@dataclass(frozen=True)
class FileChanged:
    pass


@dataclass(frozen=True)
class DebounceElapsed:
    generation: int


@dataclass(frozen=True)
class RunFinished:
    run_id: int
    returncode: int


@dataclass(frozen=True)
class Interrupted:
    pass


type SessionEvent = FileChanged | DebounceElapsed | RunFinished | Interrupted


class LiveError(BaseModel):
    """Base error for the live-reload loop."""

    model_config = ConfigDict(extra="forbid")

    message: str


class InstallError(LiveError):
    """Package manager could not add the scanned dependencies."""

    packages: list[str]
    returncode: int | None = None


class SpawnError(LiveError):
    """Script runner could not be started."""

    command: list[str]


class WatchError(LiveError):
    """File watcher stopped with an error."""

    path: Path
