"""Option types shared by several commands."""

from __future__ import annotations

from typing import Annotated

import typer

EditorOption = Annotated[
    str | None,
    typer.Option("--editor", help="Override the editor command to use (e.g., code, vim, nano)."),
]
PackageManagerOption = Annotated[
    str | None,
    typer.Option(
        "--package-manager",
        "--packageManager",
        help="Override the package manager to use (e.g., npm, pnpm, yarn, bun).",
    ),
]
NameArgument = Annotated[
    str | None,
    typer.Argument(help="Name of the playground or script (prompted for when omitted)."),
]
