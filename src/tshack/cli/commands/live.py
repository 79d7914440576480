"""``tshack live``: edit a script and re-run it on every save."""

from __future__ import annotations

import asyncio
import shlex

import typer
from result import Err, Ok, is_err

from tshack.live import build_session
from tshack.tools import open_in_editor
from tshack.workspace import create_standalone_file, script_filename, validate_name

from ..context import get_context
from ..errors import fail
from ..options import EditorOption, NameArgument, PackageManagerOption
from ..prompts import prompt_for_name


def live(
    ctx: typer.Context,
    name: NameArgument = None,
    editor: EditorOption = None,
    package_manager: PackageManagerOption = None,
) -> None:
    """Create and run a TypeScript file with live reloading.

    The script lives in the workspace's scripts folder. Imported packages are
    added there with the package manager before each run. Press Ctrl+C to stop.
    """
    cli = get_context(ctx)
    preferences = cli.load_preferences(editor=editor, package_manager=package_manager)
    workspace = cli.workspace(preferences)

    match validate_name(prompt_for_name(name, "Enter script name")):
        case Ok(valid):
            file_name = script_filename(valid)
        case Err(error):
            raise fail(error)
    file_path = workspace.script_path(file_name)

    if not file_path.exists():
        typer.secho(f"Creating new file: {file_name}...", fg=typer.colors.BLUE)
        match create_standalone_file(file_path):
            case Ok():
                pass
            case Err(error):
                raise fail(error)

    typer.secho("Opening in editor...", fg=typer.colors.GREEN)
    match open_in_editor(preferences, file_path):
        case Ok():
            pass
        case Err(error):
            raise fail(error)
    typer.secho(f"✓ Standalone file ready: {file_path}", fg=typer.colors.GREEN)

    live_settings = cli.settings.live
    session = build_session(
        file_path,
        package_manager=preferences.package_manager,
        runner=shlex.split(live_settings.runner_command),
        debounce=live_settings.debounce_seconds,
        kill_grace=live_settings.kill_grace_seconds,
        stability_ms=live_settings.stability_ms,
    )

    typer.secho("Starting live execution mode...", fg=typer.colors.CYAN)
    typer.secho(f"Watching: {file_path}", dim=True)
    typer.secho("Press Ctrl+C to stop", dim=True)

    try:
        outcome = asyncio.run(session.run())
    except KeyboardInterrupt:
        typer.secho("\nStopping file execution...", fg=typer.colors.YELLOW)
        return

    if is_err(outcome):
        raise fail(outcome.unwrap_err())
