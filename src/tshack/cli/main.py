from __future__ import annotations

import os
from typing import Annotated

import typer

from tshack.common import add_console_sink, create_logger, setup_cli_logging
from tshack.settings import Settings

from .commands import delete as delete_commands
from .commands import list as list_commands
from .commands import live as live_commands
from .commands import new as new_commands
from .commands import setup as setup_commands
from .context import CliContext

logger = create_logger("cli")

app = typer.Typer(
    help="Quick TypeScript playground CLI.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command("new")(new_commands.new)
app.command("live")(live_commands.live)
app.command("list")(list_commands.list_workspace)
app.command("delete")(delete_commands.delete)
app.command("setup")(setup_commands.setup)


def _print_version(value: bool) -> None:
    if value:
        settings = Settings()
        typer.echo(f"{settings.app.project_name} {settings.app.version}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Mirror debug logs to stderr.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_print_version, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    settings = Settings()
    ctx.obj = CliContext(settings=settings)

    if verbose:
        handler_id = add_console_sink(settings.logging.console_level, colorize=False if ctx.color is False else None)
        ctx.call_on_close(lambda: logger.remove(handler_id))

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    settings = Settings()
    setup_cli_logging(
        app_info=settings.app,
        config=settings.logging,
        paths=settings.paths,
    )


def main() -> None:
    """Entrypoint for the tshack CLI."""
    _setup_logging()
    app()
