"""``tshack new``: scaffold a playground project or a standalone script."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok, is_err

from tshack.common import create_logger
from tshack.constants import DEFAULT_TEMPLATE
from tshack.preferences import Preferences
from tshack.tools import create_command, create_with_package_manager, install_dependencies, open_in_editor, open_shell
from tshack.utils import CommandNotFoundError
from tshack.workspace import (
    PlaygroundKind,
    Workspace,
    create_directory,
    create_project_from_template,
    create_standalone_file,
    ensure_path_does_not_exist,
    get_template_path,
    script_filename,
    validate_name,
)

from ..context import get_context
from ..errors import fail, handle_error
from ..options import EditorOption, NameArgument, PackageManagerOption
from ..prompts import confirm, is_interactive, prompt_for_name

logger = create_logger("cli.new")

TemplateOption = Annotated[
    str,
    typer.Option("--template", "-t", help="Template for project creation (basic, express, fullstack)."),
]
KindOption = Annotated[
    PlaygroundKind,
    typer.Option("--type", case_sensitive=False, help="Type of playground to create (project or file)."),
]
CreateOption = Annotated[
    str | None,
    typer.Option(
        "--create",
        help="Scaffold with '<package manager> create <ARGS> .' instead of a template, e.g. --create 'vite@latest'.",
    ),
]
ShellOption = Annotated[
    bool | None,
    typer.Option(
        "--shell/--no-shell",
        help="Open a shell in the new project afterwards (asked when interactive).",
        show_default=False,
    ),
]


def new(
    ctx: typer.Context,
    name: NameArgument = None,
    template: TemplateOption = DEFAULT_TEMPLATE,
    kind: KindOption = PlaygroundKind.PROJECT,
    create: CreateOption = None,
    editor: EditorOption = None,
    package_manager: PackageManagerOption = None,
    shell: ShellOption = None,
) -> None:
    """Create a new TypeScript playground or standalone file.

    Examples:

        # Project from the default template
        tshack new sandbox

        # Project generated by the package manager
        tshack new web --create "vite@latest -- --template vanilla-ts"

        # Standalone script
        tshack new scratch --type file
    """
    cli = get_context(ctx)
    preferences = cli.load_preferences(editor=editor, package_manager=package_manager)
    workspace = cli.workspace(preferences)

    match kind:
        case PlaygroundKind.FILE:
            _create_file(preferences, workspace, name)
        case PlaygroundKind.PROJECT if create:
            _create_with_generator(preferences, workspace, name, create, shell)
        case PlaygroundKind.PROJECT:
            _create_from_template(preferences, workspace, name, template, shell)


def _create_from_template(
    preferences: Preferences,
    workspace: Workspace,
    name: str | None,
    template: str,
    shell: bool | None,
) -> None:
    project_name = _resolve_name(name)
    project_path = workspace.project_path(project_name)

    match ensure_path_does_not_exist(project_path, "Folder").and_then(lambda _: get_template_path(template)):
        case Ok(template_path):
            pass
        case Err(error):
            raise fail(error)

    typer.secho(f"Creating playground: {project_name}...", fg=typer.colors.BLUE)
    created = create_project_from_template(project_path, template_path)
    if is_err(created):
        raise fail(created.unwrap_err())

    installed = install_dependencies(preferences, project_path)
    if is_err(installed):
        raise fail(installed.unwrap_err())

    _open_and_finish(preferences, project_path, f"Playground ready: {project_path}", shell)


def _create_with_generator(
    preferences: Preferences,
    workspace: Workspace,
    name: str | None,
    generator: str,
    shell: bool | None,
) -> None:
    project_name = _resolve_name(name)
    project_path = workspace.project_path(project_name)

    match ensure_path_does_not_exist(project_path, "Folder").and_then(create_directory):
        case Ok():
            pass
        case Err(error):
            raise fail(error)

    typer.secho(f"Creating project using package manager: {project_name}...", fg=typer.colors.BLUE)
    typer.secho(f"Running: {' '.join(create_command(preferences, generator))}", fg=typer.colors.BLUE)

    match create_with_package_manager(preferences, project_path, generator):
        case Ok():
            pass
        case Err(error):
            typer.secho("Failed to create project using package manager command", err=True, fg=typer.colors.RED)
            raise fail(error)

    _open_and_finish(preferences, project_path, f"Project ready: {project_path}", shell)


def _create_file(preferences: Preferences, workspace: Workspace, name: str | None) -> None:
    file_name = script_filename(_resolve_name(name))
    file_path = workspace.script_path(file_name)

    match ensure_path_does_not_exist(file_path, "File"):
        case Ok():
            pass
        case Err(error):
            raise fail(error)

    typer.secho(f"Creating standalone file: {file_name}...", fg=typer.colors.BLUE)
    match create_standalone_file(file_path):
        case Ok():
            pass
        case Err(error):
            raise fail(error)

    _open_and_finish(preferences, file_path, f"Standalone file ready: {file_path}", shell=False)


def _resolve_name(name: str | None) -> str:
    match validate_name(prompt_for_name(name)):
        case Ok(valid):
            return valid
        case Err(error):
            raise fail(error)


def _open_and_finish(preferences: Preferences, target: Path, ready_message: str, shell: bool | None) -> None:
    typer.secho("Opening in editor...", fg=typer.colors.GREEN)
    match open_in_editor(preferences, target):
        case Ok():
            pass
        case Err(error):
            raise fail(error)

    typer.secho(f"✓ {ready_message}", fg=typer.colors.GREEN)

    if shell is None:
        shell = is_interactive() and confirm("Would you like to change to the project directory?", default=True)
    if shell:
        _enter_project(target)


def _enter_project(project_path: Path) -> None:
    typer.secho("\nChanging to project directory...", fg=typer.colors.BLUE)
    match open_shell(project_path):
        case Err(CommandNotFoundError() as error):
            handle_error(error)
        case Err(error):
            # the shell's exit status is whatever the user's last command returned
            logger.debug("Shell exited", error=error.message)
        case Ok():
            pass
