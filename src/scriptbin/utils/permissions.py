"""Owner-execute permission helpers."""

from __future__ import annotations

import stat
from pathlib import Path

from pydantic import BaseModel
from result import Err, Ok, Result


class PermissionChangeError(BaseModel):
    """Failed to change a file's mode bits."""

    path: Path
    message: str


def is_executable(path: Path) -> bool:
    """Return True if the owner-execute bit is set.

    A missing file or a failing stat reports False rather than an error.
    """
    try:
        mode = path.stat().st_mode
    except OSError:
        return False
    return bool(mode & stat.S_IXUSR)


def set_executable(path: Path) -> Result[None, PermissionChangeError]:
    """Add the owner-execute bit, leaving every other permission bit as is."""
    try:
        mode = stat.S_IMODE(path.stat().st_mode)
        path.chmod(mode | stat.S_IXUSR)
    except OSError as exc:
        return Err(PermissionChangeError(path=path, message=str(exc)))
    return Ok(None)
