"""``tshack setup``: view and change the saved preferences."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok

from tshack.constants import PACKAGE_MANAGER_CHOICES
from tshack.preferences import Preferences, apply_overrides

from ..context import get_context
from ..errors import fail
from ..options import EditorOption, PackageManagerOption
from ..prompts import prompt_optional, select_one

KEEP_CURRENT = "keep"

WorkspaceOption = Annotated[
    Path | None,
    typer.Option(
        "--workspace",
        "--defaultWorkspacePath",
        help="Folder holding the projects/ and scripts/ folders.",
    ),
]


def setup(
    ctx: typer.Context,
    editor: EditorOption = None,
    package_manager: PackageManagerOption = None,
    workspace: WorkspaceOption = None,
) -> None:
    """Configure the editor, package manager and workspace folder.

    Without options every value is asked for interactively.
    """
    cli = get_context(ctx)
    preferences = cli.load_preferences(env_overrides=False)

    _print_preferences("Current configuration", preferences)

    if not (editor or package_manager or workspace):
        editor = prompt_optional("Enter editor command")
        choice = select_one(
            f"Choose package manager ('{KEEP_CURRENT}' keeps {preferences.package_manager})",
            [KEEP_CURRENT, *PACKAGE_MANAGER_CHOICES],
            default=KEEP_CURRENT,
        )
        package_manager = None if choice == KEEP_CURRENT else choice
        workspace_answer = prompt_optional("Enter default workspace path")
        workspace = Path(workspace_answer) if workspace_answer else None

    updated = apply_overrides(preferences, editor=editor, package_manager=package_manager, workspace=workspace)

    match cli.store.save(updated):
        case Ok():
            pass
        case Err(error):
            raise fail(error)

    _print_preferences("Updated configuration", updated)


def _print_preferences(title: str, preferences: Preferences) -> None:
    typer.secho(f"\n{title}:", fg=typer.colors.BLUE, bold=True)
    typer.secho(f"  • Editor: {preferences.editor.command}", fg=typer.colors.GREEN)
    typer.secho(f"  • Package Manager: {preferences.package_manager}", fg=typer.colors.GREEN)
    typer.secho(f"  • Default Workspace: {preferences.default_workspace_path}", fg=typer.colors.GREEN)
