"""``tshack delete``: remove playground projects."""

from __future__ import annotations

from typing import Annotated

import typer
from result import Err, Ok

from tshack.workspace import Workspace, delete_project, list_projects

from ..context import get_context
from ..errors import fail
from ..prompts import confirm, select_many

ForceOption = Annotated[bool, typer.Option("--force", "-f", help="Skip the confirmation prompt.")]


def delete(
    ctx: typer.Context,
    name: Annotated[str | None, typer.Argument(help="Project to delete (select interactively when omitted).")] = None,
    force: ForceOption = False,
) -> None:
    """Delete one or more playground projects."""
    cli = get_context(ctx)
    workspace = cli.workspace(cli.load_preferences())

    if name:
        if not force and not _confirm_deletion([name]):
            typer.secho("Deletion cancelled.", fg=typer.colors.YELLOW)
            return
        _delete_one(workspace, name)
        return

    projects = list_projects(workspace) or []
    if not projects:
        typer.secho("No projects found to delete.", fg=typer.colors.YELLOW)
        return

    selected = select_many(
        "Select projects to delete",
        projects,
        empty_message="Please select at least one project to delete.",
    )

    if not force and not _confirm_deletion(selected):
        typer.secho("Deletion cancelled.", fg=typer.colors.YELLOW)
        return

    for project in selected:
        _delete_one(workspace, project)

    typer.secho("\nAll selected projects have been deleted.", fg=typer.colors.GREEN)


def _confirm_deletion(projects: list[str]) -> bool:
    typer.secho("\nThe following projects will be deleted:", fg=typer.colors.YELLOW)
    for project in projects:
        typer.secho(f"  • {project}", fg=typer.colors.RED)
    return confirm("Are you sure you want to delete these projects?", default=False)


def _delete_one(workspace: Workspace, name: str) -> None:
    match delete_project(workspace, name):
        case Ok(True):
            typer.secho(f"✓ Deleted project: {name}", fg=typer.colors.GREEN)
        case Ok(False):
            typer.secho(f"Project '{name}' not found.", fg=typer.colors.YELLOW)
        case Err(error):
            raise fail(error)
