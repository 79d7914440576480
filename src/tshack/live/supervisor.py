"""Single-slot supervision of the script runner process."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Callable, Sequence
from pathlib import Path

from result import Err, Ok, Result

from tshack.common import create_logger

from .models import RunOutcome, SpawnError, SupervisorState

logger = create_logger("live.supervisor")

type ExitCallback = Callable[[int, int], None]


class ProcessSupervisor:
    """Owns at most one running child process.

    ``start`` always stops the previous child first, and ``stop`` only clears
    the handle once the child has exited, so two children are never alive at
    the same time.
    """

    def __init__(
        self,
        runner: Sequence[str],
        *,
        kill_grace: float = 0.1,
        env: dict[str, str] | None = None,
    ) -> None:
        self.runner = list(runner)
        self.kill_grace = kill_grace
        self._env = env
        self._process: asyncio.subprocess.Process | None = None
        self._waiters: set[asyncio.Task[None]] = set()
        self._run_id = 0
        self._current_run: int | None = None
        self._stopped_runs: set[int] = set()

    @property
    def state(self) -> SupervisorState:
        if self._process is None or self._process.returncode is not None:
            return SupervisorState.IDLE
        return SupervisorState.RUNNING

    @property
    def current_run(self) -> int | None:
        return self._current_run

    def command_for(self, path: Path) -> list[str]:
        return [*self.runner, str(path)]

    async def start(self, path: Path, on_exit: ExitCallback) -> Result[int, SpawnError]:
        """Launch the runner on ``path``; ``on_exit(run_id, returncode)`` fires when it ends."""
        await self.stop()

        command = self.command_for(path)
        env = {**(self._env if self._env is not None else os.environ), "FORCE_COLOR": "true"}
        try:
            process = await asyncio.create_subprocess_exec(*command, env=env)
        except (FileNotFoundError, PermissionError) as e:
            logger.error("Runner spawn failed", command=command, error=str(e))
            return Err(SpawnError(command=command, message=f"Failed to start '{command[0]}': {e}"))

        self._run_id += 1
        run_id = self._run_id
        self._process = process
        self._current_run = run_id
        waiter = asyncio.create_task(self._wait_for_exit(run_id, process, on_exit))
        self._waiters.add(waiter)
        waiter.add_done_callback(self._waiters.discard)
        logger.debug("Runner started", run_id=run_id, pid=process.pid, command=command)
        return Ok(run_id)

    async def stop(self) -> None:
        """Terminate the running child, escalating to kill after the grace interval."""
        process = self._process
        if process is None:
            return

        run_id = self._current_run
        self._current_run = None

        if process.returncode is None:
            # a run that already exited keeps its own report
            if run_id is not None:
                self._stopped_runs.add(run_id)
            logger.debug("Stopping runner", run_id=run_id, pid=process.pid)
            try:
                process.terminate()
            except ProcessLookupError:
                pass
            try:
                await asyncio.wait_for(process.wait(), timeout=self.kill_grace)
            except TimeoutError:
                logger.debug("Runner ignored terminate, killing", run_id=run_id, pid=process.pid)
                try:
                    process.kill()
                except ProcessLookupError:
                    pass
                await process.wait()

        self._process = None

    def finish(self, run_id: int, returncode: int) -> RunOutcome:
        """Classify a child exit and release the slot if it was the current run."""
        if run_id in self._stopped_runs:
            self._stopped_runs.discard(run_id)
            return RunOutcome.SUPERSEDED

        if run_id == self._current_run:
            self._process = None
            self._current_run = None
        return RunOutcome.COMPLETED if returncode == 0 else RunOutcome.FAILED

    async def _wait_for_exit(self, run_id: int, process: asyncio.subprocess.Process, on_exit: ExitCallback) -> None:
        returncode = await process.wait()
        logger.debug("Runner exited", run_id=run_id, returncode=returncode)
        on_exit(run_id, returncode)
