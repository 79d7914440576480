"""Import scanning for scripts.

This is a heuristic over ``from "<specifier>"`` clauses, not a module resolver:
type-only imports, re-exports, path aliases and ``node:`` built-ins are not
treated specially. Scoped names collapse to their first segment as well.
"""

from __future__ import annotations

import re
from pathlib import Path

_IMPORT_PATTERN = re.compile(r"""from\s+['"]([^./'"][^'"]*)['"]""")


def extract_dependencies(text: str) -> list[str]:
    """Package names imported via non-relative specifiers, in first-seen order."""
    packages: dict[str, None] = {}
    for match in _IMPORT_PATTERN.finditer(text):
        package = match.group(1).split("/")[0]
        packages.setdefault(package, None)
    return list(packages)


def read_dependencies(path: Path) -> list[str]:
    return extract_dependencies(path.read_text(encoding="utf-8"))
