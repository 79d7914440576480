"""Project templates shipped inside the package."""

from __future__ import annotations

from importlib.resources import files
from importlib.resources.abc import Traversable

from result import Err, Ok, Result

from .models import TemplateNotFoundError


def get_templates_root() -> Traversable:
    # may live inside a zip; materialize with as_file() before copying
    return files("tshack") / "templates"


def available_templates(root: Traversable | None = None) -> list[str]:
    root = root or get_templates_root()
    if not root.is_dir():
        return []
    return sorted(entry.name for entry in root.iterdir() if entry.is_dir() and not entry.name.startswith("_"))


def get_template_path(name: str, root: Traversable | None = None) -> Result[Traversable, TemplateNotFoundError]:
    root = root or get_templates_root()
    available = available_templates(root)
    if name in available:
        return Ok(root / name)

    return Err(
        TemplateNotFoundError(
            name=name,
            available=available,
            message=f"Template '{name}' not found (available: {', '.join(available) or 'none'})",
        )
    )
