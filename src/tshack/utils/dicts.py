"""Dictionary helpers used across tshack."""

from __future__ import annotations

from collections.abc import Mapping

__all__ = ["deep_merge"]


def deep_merge(base: Mapping[str, object], override: Mapping[str, object]) -> dict[str, object]:
    """Recursively merge two mappings, giving precedence to override."""
    result: dict[str, object] = dict(base)

    for key, override_value in override.items():
        if override_value is None:
            continue

        existing_value = result.get(key)

        if isinstance(existing_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(dict(existing_value), dict(override_value))
        else:
            result[key] = override_value

    return result
