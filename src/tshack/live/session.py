"""Live-reload loop: watch one script, debounce edits, re-run it."""

from __future__ import annotations

import asyncio
import signal
from functools import partial
from pathlib import Path
from typing import Protocol

import typer
from result import Err, Ok, Result

from tshack.common import create_logger

from .installer import DependencyInstaller
from .models import (
    DebounceElapsed,
    FileChanged,
    Interrupted,
    LiveError,
    RunFinished,
    RunOutcome,
    SessionEvent,
    SpawnError,
    SupervisorState,
    WatchError,
)
from .scanner import read_dependencies
from .supervisor import ExitCallback, ProcessSupervisor
from .watcher import WatchSource, watch_file

logger = create_logger("live.session")

SEPARATOR = "─" * 50


class Supervisor(Protocol):
    @property
    def state(self) -> SupervisorState: ...

    async def start(self, path: Path, on_exit: ExitCallback) -> Result[int, SpawnError]: ...

    async def stop(self) -> None: ...

    def finish(self, run_id: int, returncode: int) -> RunOutcome: ...


class LiveSession:
    """One ``live`` invocation.

    All events (file changes, debounce timer, child exit, interrupt) are queued
    and handled by a single control loop, so execute cycles never overlap and
    at most one debounce timer is pending.
    """

    def __init__(
        self,
        script_path: Path,
        installer: DependencyInstaller,
        supervisor: Supervisor,
        *,
        debounce: float = 0.3,
        watch: WatchSource = watch_file,
        handle_signals: bool = True,
    ) -> None:
        self.script_path = script_path
        self.installer = installer
        self.supervisor = supervisor
        self.debounce = debounce
        self.cycles = 0
        self._watch = watch
        self._handle_signals = handle_signals
        self._queue: asyncio.Queue[SessionEvent] = asyncio.Queue()
        self._stop_event = asyncio.Event()
        self._timer: asyncio.TimerHandle | None = None
        self._generation = 0
        self._interrupted = False

    @property
    def has_pending_timer(self) -> bool:
        return self._timer is not None

    def interrupt(self) -> None:
        self._interrupted = True
        self._queue.put_nowait(Interrupted())

    async def run(self) -> Result[None, LiveError]:
        """Watch and re-run the script until interrupted.

        Returns an error when the file watcher fails; the child process is
        stopped either way.
        """
        loop = asyncio.get_running_loop()
        logger.info("Live session started", path=str(self.script_path))

        watcher = asyncio.create_task(self._pump_changes())
        watcher.add_done_callback(self._on_watcher_done)
        signals_installed = self._install_signal_handler(loop)

        if self.script_path.exists():
            self._queue.put_nowait(FileChanged())

        try:
            await self._control_loop(loop)
        finally:
            if signals_installed:
                loop.remove_signal_handler(signal.SIGINT)
            outcome = await self._shutdown(watcher)

        logger.info("Live session stopped", path=str(self.script_path), cycles=self.cycles)
        return outcome

    async def _control_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        while True:
            match await self._queue.get():
                case FileChanged():
                    self._reset_timer(loop)
                case DebounceElapsed(generation=generation):
                    if generation != self._generation:
                        continue
                    self._timer = None
                    await self._execute()
                case RunFinished(run_id=run_id, returncode=returncode):
                    self._report(run_id, returncode)
                case Interrupted():
                    typer.secho("\nStopping file execution...", fg=typer.colors.YELLOW)
                    return

    def _reset_timer(self, loop: asyncio.AbstractEventLoop) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._generation += 1
        self._timer = loop.call_later(self.debounce, self._queue.put_nowait, DebounceElapsed(self._generation))

    async def _execute(self) -> None:
        self.cycles += 1
        logger.debug("Execute cycle", cycle=self.cycles, path=str(self.script_path))

        if self.supervisor.state is SupervisorState.RUNNING:
            typer.secho("Restarting...", fg=typer.colors.YELLOW)
            await self.supervisor.stop()

        await self._sync_dependencies()
        if self._interrupted:
            # interrupt arrived during the install
            logger.debug("Interrupted before run start", cycle=self.cycles)
            return

        typer.secho(f"\nExecuting {self.script_path.name}...", fg=typer.colors.BLUE)
        typer.secho(SEPARATOR, dim=True)

        match await self.supervisor.start(self.script_path, self._on_exit):
            case Ok(run_id):
                logger.debug("Run started", run_id=run_id)
            case Err(error):
                typer.secho(SEPARATOR, dim=True)
                typer.secho(f"Execution failed: {error.message}", err=True, fg=typer.colors.RED)
                typer.secho("Watching for changes...\n", dim=True)

    async def _sync_dependencies(self) -> None:
        try:
            packages = read_dependencies(self.script_path)
        except OSError as e:
            logger.warning("Could not scan script for imports", path=str(self.script_path), error=str(e))
            return

        match await self.installer.install(self.installer.missing_packages(packages)):
            case Ok():
                pass
            case Err(error):
                # a misdetected package must not stop the script from running
                logger.warning("Dependency install failed", packages=error.packages, error=error.message)
                typer.secho(f"Dependency install failed: {error.message}", err=True, fg=typer.colors.RED)

    def _on_exit(self, run_id: int, returncode: int) -> None:
        self._queue.put_nowait(RunFinished(run_id=run_id, returncode=returncode))

    def _report(self, run_id: int, returncode: int) -> None:
        outcome = self.supervisor.finish(run_id, returncode)
        logger.debug("Run finished", run_id=run_id, returncode=returncode, outcome=outcome.value)

        match outcome:
            case RunOutcome.SUPERSEDED:
                return
            case RunOutcome.COMPLETED:
                typer.secho(SEPARATOR, dim=True)
                typer.secho("Execution completed", fg=typer.colors.GREEN)
            case RunOutcome.FAILED:
                typer.secho(SEPARATOR, dim=True)
                typer.secho(f"Execution failed (exit code {returncode})", err=True, fg=typer.colors.RED)
        typer.secho("Watching for changes...\n", dim=True)

    async def _pump_changes(self) -> None:
        async for _ in self._watch(self.script_path, self._stop_event):
            self._queue.put_nowait(FileChanged())

    def _on_watcher_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        if task.exception() is not None:
            logger.error("File watcher stopped", path=str(self.script_path), error=str(task.exception()))
            self.interrupt()

    def _install_signal_handler(self, loop: asyncio.AbstractEventLoop) -> bool:
        if not self._handle_signals:
            return False
        try:
            loop.add_signal_handler(signal.SIGINT, self.interrupt)
        except (NotImplementedError, RuntimeError):
            # KeyboardInterrupt is raised instead where the loop cannot own SIGINT
            return False
        return True

    async def _shutdown(self, watcher: asyncio.Task[None]) -> Result[None, LiveError]:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        await self.supervisor.stop()

        self._stop_event.set()
        if not watcher.done():
            watcher.cancel()
        try:
            await watcher
        except asyncio.CancelledError:
            pass
        except OSError as e:
            return Err(WatchError(path=self.script_path, message=f"File watcher stopped: {e}"))
        return Ok(None)


def build_session(
    script_path: Path,
    *,
    package_manager: str,
    runner: list[str],
    debounce: float,
    kill_grace: float,
    stability_ms: int,
) -> LiveSession:
    return LiveSession(
        script_path,
        DependencyInstaller(package_manager, script_path.parent),
        ProcessSupervisor(runner, kill_grace=kill_grace),
        debounce=debounce,
        watch=partial(watch_file, stability_ms=stability_ms),
    )
