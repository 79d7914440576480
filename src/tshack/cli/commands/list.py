"""``tshack list``: show the workspace contents."""

from __future__ import annotations

from typing import Annotated

import typer

from tshack.workspace import ListFilter, list_projects, list_scripts

from ..context import get_context

ListFilterOption = Annotated[
    ListFilter,
    typer.Option("--type", "-t", case_sensitive=False, help="What to list: all, projects or scripts."),
]


def list_workspace(ctx: typer.Context, type: ListFilterOption = ListFilter.ALL) -> None:
    """List all projects and scripts in the workspace."""
    cli = get_context(ctx)
    workspace = cli.workspace(cli.load_preferences())

    if type in (ListFilter.ALL, ListFilter.PROJECTS):
        _print_section("Projects", "projects", list_projects(workspace))

    if type in (ListFilter.ALL, ListFilter.SCRIPTS):
        _print_section("Scripts", "scripts", list_scripts(workspace))


def _print_section(title: str, noun: str, entries: list[str] | None) -> None:
    if entries is None:
        typer.secho(f"No {noun} directory found.", fg=typer.colors.YELLOW)
        return

    if not entries:
        typer.secho(f"No {noun} found.", fg=typer.colors.YELLOW)
        return

    typer.secho(f"\n{title}:", fg=typer.colors.BLUE, bold=True)
    for entry in entries:
        typer.secho(f"  • {entry}", fg=typer.colors.GREEN)
