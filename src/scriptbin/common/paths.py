"""Path discovery utilities for scriptbin."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def expand_user_path(path: str | Path) -> Path:
    """Expand a leading ``~`` to the user's home directory.

    Paths without a tilde, or when no home directory can be determined,
    are returned unchanged.
    """
    raw = str(path)
    if not raw.startswith("~"):
        return Path(raw)
    try:
        return Path(raw).expanduser()
    except RuntimeError:
        return Path(raw)


def get_home_directory() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


def get_executable_path() -> Path | None:
    """Return the resolved path of the running entry point, if known."""
    if not sys.argv or not sys.argv[0]:
        return None
    try:
        return Path(sys.argv[0]).resolve(strict=False)
    except OSError:
        return None


def get_working_directory() -> Path | None:
    try:
        return Path.cwd()
    except OSError:
        return None


def get_data_directory(data_dir_name: str) -> Path:
    """Get XDG data directory for the application.

    Returns ~/.local/share/{data_dir_name} (or XDG_DATA_HOME/{data_dir_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / data_dir_name
