"""Interactive prompts built on typer/click."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence

import click
import typer


def is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def prompt_for_name(name: str | None, message: str = "Enter project name") -> str:
    """Return ``name`` or ask for one; a blank answer yields ``playground-<epoch ms>``."""
    if name:
        return name
    answer = typer.prompt(message, default="", show_default=False)
    return answer.strip() or f"playground-{int(time.time() * 1000)}"


def prompt_optional(message: str) -> str | None:
    """Free-text prompt where a blank answer means "keep the current value"."""
    answer = typer.prompt(f"{message} (leave empty to keep current)", default="", show_default=False)
    return answer.strip() or None


def select_one(message: str, choices: Sequence[str], default: str) -> str:
    return typer.prompt(message, type=click.Choice(list(choices)), default=default, show_choices=True)


def select_many(message: str, choices: Sequence[str], *, empty_message: str) -> list[str]:
    """Checkbox-style selection: numbers or names, separated by commas or spaces."""
    for index, choice in enumerate(choices, start=1):
        typer.echo(f"  {index}) {choice}")
    return typer.prompt(
        f"{message} (numbers or names, comma-separated)",
        value_proc=_parse_selection(choices, empty_message),
    )


def confirm(message: str, *, default: bool = False) -> bool:
    return typer.confirm(message, default=default)


def _parse_selection(choices: Sequence[str], empty_message: str) -> Callable[[str], list[str]]:
    def parse(raw: str) -> list[str]:
        selected: list[str] = []
        for token in raw.replace(",", " ").split():
            if token.isdigit() and 1 <= int(token) <= len(choices):
                value = choices[int(token) - 1]
            elif token in choices:
                value = token
            else:
                raise click.BadParameter(f"'{token}' is not one of the listed choices.")
            if value not in selected:
                selected.append(value)
        if not selected:
            raise click.BadParameter(empty_message)
        return selected

    return parse
