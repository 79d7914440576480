from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from result import Ok, is_err, is_ok

from tshack.preferences import Preferences
from tshack.tools import create_command, create_with_package_manager, install_command, install_dependencies
from tshack.tools.shell import default_shell
from tshack.utils import CommandFailedError


@pytest.fixture
def preferences() -> Preferences:
    return Preferences(package_manager="yarn")


def test_install_command(preferences: Preferences) -> None:
    assert install_command(preferences) == ["yarn", "install"]


@pytest.mark.parametrize(
    ("generator", "expected"),
    [
        ("vite", ["yarn", "create", "vite", "."]),
        ("vite --template react-ts", ["yarn", "create", "vite", "--template", "react-ts", "."]),
    ],
)
def test_create_command(preferences: Preferences, generator: str, expected: list[str]) -> None:
    assert create_command(preferences, generator) == expected


def test_install_dependencies_runs_in_project(preferences: Preferences, tmp_path: Path) -> None:
    with patch("tshack.tools.package_manager.run_command", return_value=Ok(None)) as mock_run:
        result = install_dependencies(preferences, tmp_path)

    assert is_ok(result)
    mock_run.assert_called_once_with(["yarn", "install"], cwd=tmp_path)


def test_create_with_package_manager_propagates_failure(tmp_path: Path) -> None:
    result = create_with_package_manager(Preferences(package_manager="false"), tmp_path, "vite")

    assert is_err(result)
    assert isinstance(result.unwrap_err(), CommandFailedError)


def test_default_shell_prefers_shell_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHELL", "/usr/bin/fish")

    assert default_shell() == "/usr/bin/fish"


def test_default_shell_falls_back_to_sh(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SHELL", raising=False)
    monkeypatch.delenv("COMSPEC", raising=False)

    assert default_shell() == "/bin/sh"
