from __future__ import annotations

import asyncio
import json
import shlex
import sys
from pathlib import Path

import pytest
from result import Result as Outcome
from typer.testing import CliRunner, Result

import tshack.cli.commands.live as live_command
from tshack.cli.main import app
from tshack.live import LiveError, LiveSession

RUNNER = CliRunner()
pytestmark = pytest.mark.e2e


def _create_env(base: Path) -> dict[str, str]:
    home = base / "home"
    xdg_data = base / "xdg-data"
    for path in (home, xdg_data):
        path.mkdir(parents=True, exist_ok=True)
    return {
        "HOME": str(home),
        "XDG_DATA_HOME": str(xdg_data),
        "NO_COLOR": "1",
    }


def _invoke(args: list[str], env: dict[str, str], input: str | None = None) -> Result:
    result = RUNNER.invoke(app, args, env=env, input=input)
    assert result.exit_code == 0, result.output
    return result


def test_playground_lifecycle(tmp_path: Path) -> None:
    env = _create_env(tmp_path)
    workspace = tmp_path / "ws"

    _invoke(["setup", "--editor", "true", "--package-manager", "true", "--workspace", str(workspace)], env)
    saved = json.loads((tmp_path / "home" / ".tshack").read_text(encoding="utf-8"))
    assert saved["defaultWorkspacePath"] == str(workspace)

    _invoke(["new", "one"], env)
    _invoke(["new", "two", "-t", "fullstack"], env)
    _invoke(["new", "scratch", "--type", "file"], env)

    listing = _invoke(["list"], env)
    assert "• one" in listing.output
    assert "• two" in listing.output
    assert "• scratch.ts" in listing.output
    assert (workspace / "projects" / "two" / "src" / "client" / "index.html").is_file()

    _invoke(["delete", "one", "--force"], env)
    _invoke(["delete"], env, input="two\ny\n")

    listing = _invoke(["list", "--type", "projects"], env)
    assert "No projects found." in listing.output


def test_existing_project_is_never_overwritten(tmp_path: Path) -> None:
    env = _create_env(tmp_path)
    _invoke(["setup", "--editor", "true", "--package-manager", "true", "--workspace", str(tmp_path / "ws")], env)
    _invoke(["new", "demo"], env)
    marker = tmp_path / "ws" / "projects" / "demo" / "src" / "index.ts"
    marker.write_text("// edited", encoding="utf-8")

    result = RUNNER.invoke(app, ["new", "demo", "-t", "express"], env=env)

    assert result.exit_code == 1
    assert marker.read_text(encoding="utf-8") == "// edited"


def _stopping_after(delay: float):
    real_build_session = live_command.build_session

    def build(*args, **kwargs) -> LiveSession:
        session = real_build_session(*args, **kwargs)
        run = session.run

        async def run_then_stop() -> Outcome[None, LiveError]:
            asyncio.get_running_loop().call_later(delay, session.interrupt)
            return await run()

        session.run = run_then_stop  # type: ignore[method-assign]
        return session

    return build


def test_live_runs_new_script_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env = _create_env(tmp_path)
    workspace = tmp_path / "ws"
    _invoke(["setup", "--editor", "true", "--package-manager", "true", "--workspace", str(workspace)], env)

    # stand-in runner: records each run next to the script
    code = "import sys; open(sys.argv[1] + '.runs', 'a').write('run\\n')"
    env["TSHACK_LIVE__RUNNER_COMMAND"] = shlex.join([sys.executable, "-c", code])
    monkeypatch.setattr(live_command, "build_session", _stopping_after(2.0))

    result = _invoke(["live", "foo"], env)

    script = workspace / "scripts" / "foo.ts"
    assert script.read_text(encoding="utf-8") == "// Your TypeScript code here"
    assert (workspace / "scripts" / "foo.ts.runs").read_text(encoding="utf-8") == "run\n"
    assert "Executing foo.ts..." in result.output
    assert "Execution completed" in result.output
    assert "Stopping file execution..." in result.output
