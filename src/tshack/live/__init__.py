"""Live-reload execution of a single script."""

from .installer import DependencyInstaller
from .models import InstallError, LiveError, RunOutcome, SpawnError, SupervisorState, WatchError
from .scanner import extract_dependencies, read_dependencies
from .session import LiveSession, build_session
from .supervisor import ProcessSupervisor
from .watcher import watch_file

__all__ = [
    "DependencyInstaller",
    "InstallError",
    "LiveError",
    "LiveSession",
    "ProcessSupervisor",
    "RunOutcome",
    "SpawnError",
    "SupervisorState",
    "WatchError",
    "build_session",
    "extract_dependencies",
    "read_dependencies",
    "watch_file",
]
