"""Filesystem change source for a single file."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from pathlib import Path

from watchfiles import Change, awatch

type WatchSource = Callable[[Path, asyncio.Event], AsyncIterator[object]]


def _file_filter(target: Path) -> Callable[[Change, str], bool]:
    def accepts(change: Change, path: str) -> bool:
        return change in (Change.added, Change.modified) and Path(path).resolve() == target

    return accepts


def watch_file(path: Path, stop_event: asyncio.Event, *, stability_ms: int = 100) -> AsyncIterator[object]:
    """Yield one item per settled batch of writes to ``path``.

    The parent directory is watched so that editors which save by writing a
    temporary file and renaming it over the original keep being observed.
    """
    target = path.resolve()
    return awatch(
        target.parent,
        watch_filter=_file_filter(target),
        stop_event=stop_event,
        debounce=stability_ms,
        step=min(50, stability_ms) or 1,
        recursive=False,
    )
