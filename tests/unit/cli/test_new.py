from __future__ import annotations

import json
import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

from tshack.cli.main import app

runner = CliRunner()


def test_new_project_from_default_template(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new", "demo"])

    project = workspace_root / "projects" / "demo"
    assert result.exit_code == 0, result.output
    assert "Creating playground: demo..." in result.output
    assert f"✓ Playground ready: {project}" in result.output
    assert (project / "package.json").is_file()
    assert (project / "src" / "index.ts").is_file()


def test_new_project_with_named_template(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new", "api", "-t", "express"])

    assert result.exit_code == 0, result.output
    manifest = json.loads((workspace_root / "projects" / "api" / "package.json").read_text(encoding="utf-8"))
    assert "express" in manifest["dependencies"]


def test_new_existing_project_is_left_untouched(workspace_root: Path) -> None:
    project = workspace_root / "projects" / "demo"
    project.mkdir(parents=True)
    (project / "notes.txt").write_text("keep me", encoding="utf-8")

    result = runner.invoke(app, ["new", "demo"])

    assert result.exit_code == 1
    assert f"Folder {project} already exists." in result.stderr
    assert [p.name for p in project.iterdir()] == ["notes.txt"]


def test_new_unknown_template_lists_available(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new", "demo", "--template", "nope"])

    assert result.exit_code == 1
    assert "template 'nope' not found" in result.stderr
    assert "basic, express, fullstack" in result.stderr
    assert not (workspace_root / "projects" / "demo").exists()


def test_new_standalone_file(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new", "scratch", "--type", "file"])

    script = workspace_root / "scripts" / "scratch.ts"
    assert result.exit_code == 0, result.output
    assert script.read_text(encoding="utf-8") == "// Your TypeScript code here"
    assert "✓ Standalone file ready" in result.output


def test_new_standalone_file_refuses_to_overwrite(workspace_root: Path) -> None:
    script = workspace_root / "scripts" / "scratch.ts"
    script.parent.mkdir(parents=True)
    script.write_text("console.log('mine')", encoding="utf-8")

    result = runner.invoke(app, ["new", "scratch.ts", "--type", "file"])

    assert result.exit_code == 1
    assert "already exists" in result.stderr
    assert script.read_text(encoding="utf-8") == "console.log('mine')"


def test_new_prompts_for_name_and_generates_one_when_blank(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new"], input="\n")

    assert result.exit_code == 0, result.output
    names = [p.name for p in (workspace_root / "projects").iterdir()]
    assert len(names) == 1
    assert re.fullmatch(r"playground-\d+", names[0])


def test_new_prompts_for_file_name(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new", "--type", "file"], input="typed\n")

    assert result.exit_code == 0, result.output
    assert (workspace_root / "scripts" / "typed.ts").is_file()


def test_new_rejects_path_like_names(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new", "../escape"])

    assert result.exit_code == 1
    assert "Invalid name" in result.stderr
    assert not (workspace_root / "escape").exists()


def test_new_with_generator_failure(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new", "web", "--create", "vite@latest", "--package-manager", "false"])

    assert result.exit_code == 1
    assert "Running: false create vite@latest ." in result.output
    assert "Failed to create project using package manager command" in result.stderr


def test_new_with_generator_success(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new", "web", "--create", "vite@latest"])

    assert result.exit_code == 0, result.output
    assert (workspace_root / "projects" / "web").is_dir()
    assert "✓ Project ready" in result.output


def test_new_missing_editor_fails_with_hint(workspace_root: Path) -> None:
    result = runner.invoke(app, ["new", "demo", "--editor", "no-such-editor-xyz"])

    assert result.exit_code == 1
    assert "'no-such-editor-xyz' command not found" in result.stderr
    assert "hint:" in result.stderr


def test_new_flag_overrides_are_not_saved(workspace_root: Path, home: Path) -> None:
    before = (home / ".tshack").read_text(encoding="utf-8")

    result = runner.invoke(app, ["new", "demo", "--editor", "true", "--packageManager", "true"])

    assert result.exit_code == 0, result.output
    assert (home / ".tshack").read_text(encoding="utf-8") == before


def test_new_creates_preferences_on_first_run(home: Path) -> None:
    result = runner.invoke(app, ["new", "first", "--type", "file", "--editor", "true"])

    assert result.exit_code == 0, result.output
    data = json.loads((home / ".tshack").read_text(encoding="utf-8"))
    assert data["editor"] == {"command": "code"}
    assert data["packageManager"] == "pnpm"
    assert (home / "ts-hacks" / "scripts" / "first.ts").is_file()


def test_new_with_corrupt_preferences_warns_and_uses_defaults(home: Path) -> None:
    (home / ".tshack").write_text("{ broken", encoding="utf-8")

    result = runner.invoke(app, ["new", "demo", "--type", "file", "--editor", "true"])

    assert result.exit_code == 0, result.output
    assert "warning: failed to load preferences, using defaults" in result.stderr
    assert (home / ".tshack").read_text(encoding="utf-8") == "{ broken"
    assert (home / "ts-hacks" / "scripts" / "demo.ts").is_file()


def test_new_honours_preference_env_overrides(
    workspace_root: Path, home: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    other = home / "elsewhere"
    monkeypatch.setenv("TSHACK_PREFS__DEFAULT_WORKSPACE_PATH", str(other))

    result = runner.invoke(app, ["new", "demo", "--type", "file"])

    assert result.exit_code == 0, result.output
    assert (other / "scripts" / "demo.ts").is_file()


def test_new_ignores_blank_editor_from_env(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TSHACK_PREFS__EDITOR__COMMAND", " ")

    result = runner.invoke(app, ["new", "demo", "--type", "file"])

    assert result.exit_code == 0, result.output
    assert "warning: ignoring preference overrides from the environment (editor.command:" in result.stderr
    assert (workspace_root / "scripts" / "demo.ts").is_file()
