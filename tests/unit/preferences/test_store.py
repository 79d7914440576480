from __future__ import annotations

import json
from pathlib import Path

import pytest
from result import is_err, is_ok

from tshack.preferences import (
    FilePreferencesStore,
    Preferences,
    PreferencesParseError,
    PreferencesValidationError,
)


@pytest.fixture
def store(tmp_path: Path) -> FilePreferencesStore:
    return FilePreferencesStore(path=tmp_path / ".tshack")


@pytest.fixture(autouse=True)
def _home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


def test_load_creates_defaults_when_file_missing(store: FilePreferencesStore, tmp_path: Path) -> None:
    result = store.load()

    assert is_ok(result)
    preferences = result.unwrap()
    assert preferences.editor.command == "code"
    assert preferences.package_manager == "pnpm"
    assert preferences.default_workspace_path == tmp_path / "home" / "ts-hacks"

    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data == {
        "editor": {"command": "code"},
        "packageManager": "pnpm",
        "defaultWorkspacePath": str(tmp_path / "home" / "ts-hacks"),
    }


def test_load_twice_returns_equal_preferences(store: FilePreferencesStore) -> None:
    first = store.load().unwrap()
    written = store.path.read_text(encoding="utf-8")

    second = store.load().unwrap()

    assert first == second
    assert store.path.read_text(encoding="utf-8") == written


def test_load_reads_camel_case_keys(store: FilePreferencesStore, tmp_path: Path) -> None:
    store.path.write_text(
        json.dumps(
            {
                "editor": {"command": "vim"},
                "packageManager": "bun",
                "defaultWorkspacePath": str(tmp_path / "hacks"),
            }
        ),
        encoding="utf-8",
    )

    preferences = store.load().unwrap()

    assert preferences.editor.command == "vim"
    assert preferences.package_manager == "bun"
    assert preferences.default_workspace_path == tmp_path / "hacks"


def test_load_fills_missing_keys_with_defaults(store: FilePreferencesStore) -> None:
    store.path.write_text('{"packageManager": "yarn"}', encoding="utf-8")

    preferences = store.load().unwrap()

    assert preferences.package_manager == "yarn"
    assert preferences.editor.command == "code"


def test_load_expands_user_in_workspace_path(store: FilePreferencesStore, tmp_path: Path) -> None:
    store.path.write_text('{"defaultWorkspacePath": "~/playgrounds"}', encoding="utf-8")

    preferences = store.load().unwrap()

    assert preferences.default_workspace_path == tmp_path / "home" / "playgrounds"


def test_load_reports_parse_error_and_keeps_file(store: FilePreferencesStore) -> None:
    store.path.write_text("{ not json", encoding="utf-8")

    result = store.load()

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, PreferencesParseError)
    assert error.line == 1
    assert store.path.read_text(encoding="utf-8") == "{ not json"


@pytest.mark.parametrize(
    ("content", "field"),
    [
        ("[1, 2]", None),
        ('{"packageManager": 5}', "packageManager"),
        ('{"editor": "vim"}', "editor"),
        ('{"editor": {"command": ""}}', "editor.command"),
        ('{"packageManager": "  "}', "packageManager"),
    ],
)
def test_load_reports_validation_errors(store: FilePreferencesStore, content: str, field: str | None) -> None:
    store.path.write_text(content, encoding="utf-8")

    result = store.load()

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, PreferencesValidationError)
    assert error.field == field
    assert store.path.read_text(encoding="utf-8") == content


def test_save_preserves_unknown_keys(store: FilePreferencesStore) -> None:
    store.path.write_text(
        json.dumps({"packageManager": "npm", "theme": "dark", "editor": {"command": "vim", "args": ["-p"]}}),
        encoding="utf-8",
    )
    preferences = store.load().unwrap()

    updated = preferences.model_copy(update={"package_manager": "bun"})
    assert is_ok(store.save(updated))

    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data["packageManager"] == "bun"
    assert data["theme"] == "dark"
    assert data["editor"] == {"command": "vim", "args": ["-p"]}


def test_save_writes_indented_json(store: FilePreferencesStore, tmp_path: Path) -> None:
    preferences = Preferences(default_workspace_path=tmp_path / "ws")

    assert is_ok(store.save(preferences))

    text = store.path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert '\n  "packageManager": "pnpm"' in text


def test_save_reports_io_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")
    store = FilePreferencesStore(path=blocker / ".tshack")

    result = store.save(Preferences())

    assert is_err(result)
    assert result.unwrap_err().path == blocker / ".tshack"
