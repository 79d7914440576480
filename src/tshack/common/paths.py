"""Path discovery utilities for tshack."""

from __future__ import annotations

import os
from pathlib import Path

from .models import AppPaths


def get_preferences_path(paths: AppPaths) -> Path:
    """Get the per-user preferences file.

    Returns ~/{preferences_filename}, resolved against the current HOME.
    """
    return Path.home() / paths.preferences_filename


def get_data_directory(paths: AppPaths) -> Path:
    """Get XDG data directory.

    Returns ~/.local/share/{data_dir_name} (or XDG_DATA_HOME/{data_dir_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / paths.data_dir_name
