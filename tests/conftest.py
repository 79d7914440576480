from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from tshack.common import disable_library_logging


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Isolated HOME with no tshack environment overrides."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    monkeypatch.setenv("NO_COLOR", "1")
    for key in list(os.environ.keys()):
        if key.startswith("TSHACK_"):
            monkeypatch.delenv(key, raising=False)
    yield home_dir
    disable_library_logging()


@pytest.fixture
def workspace_root(home: Path) -> Path:
    """Workspace folder recorded in a preferences file that uses harmless tools."""
    root = home / "ts-hacks"
    (home / ".tshack").write_text(
        json.dumps(
            {
                "editor": {"command": "true"},
                "packageManager": "true",
                "defaultWorkspacePath": str(root),
            }
        ),
        encoding="utf-8",
    )
    return root
