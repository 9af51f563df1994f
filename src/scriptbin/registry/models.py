"""Data and error models for the scripts and binaries directories."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

SCRIPT_SUFFIX = ".sh"


class ScriptEntry(BaseModel):
    """A ``<name>.sh`` file in the scripts directory."""

    model_config = ConfigDict(extra="ignore")

    name: str
    path: Path
    executable: bool


class BinaryEntry(BaseModel):
    """An executable file in the binaries directory."""

    model_config = ConfigDict(extra="ignore")

    name: str
    path: Path


class ReadyOutcome(BaseModel):
    """Result of making a single script executable."""

    model_config = ConfigDict(extra="ignore")

    name: str
    path: Path
    already_executable: bool


class BaseRegistryError(BaseModel):
    """Base registry error model."""

    model_config = ConfigDict(extra="forbid")

    message: str


class ScriptNotFoundError(BaseRegistryError):
    name: str
    directory: Path


class BinaryNotFoundError(BaseRegistryError):
    name: str
    directory: Path


class ScriptSourceNotFoundError(BaseRegistryError):
    """Script to add does not exist."""

    path: Path


class InvalidScriptError(BaseRegistryError):
    """Script to add does not carry the .sh extension."""

    path: Path


class ScriptNotExecutableError(BaseRegistryError):
    name: str
    path: Path


class ScriptRunError(BaseRegistryError):
    """Script failed to start or exited non-zero."""

    name: str
    returncode: int | None = None


class RegistryIOError(BaseRegistryError):
    """Filesystem failure (stat, chmod, copy, remove, listing)."""

    path: Path


RegistryError = (
    ScriptNotFoundError
    | BinaryNotFoundError
    | ScriptSourceNotFoundError
    | InvalidScriptError
    | ScriptNotExecutableError
    | ScriptRunError
    | RegistryIOError
)


def script_filename(name: str) -> str:
    return name if name.endswith(SCRIPT_SUFFIX) else f"{name}{SCRIPT_SUFFIX}"


def script_name(filename: str) -> str:
    return filename.removesuffix(SCRIPT_SUFFIX)


__all__ = [
    "BaseRegistryError",
    "BinaryEntry",
    "BinaryNotFoundError",
    "InvalidScriptError",
    "ReadyOutcome",
    "RegistryError",
    "RegistryIOError",
    "SCRIPT_SUFFIX",
    "ScriptEntry",
    "ScriptNotExecutableError",
    "ScriptNotFoundError",
    "ScriptRunError",
    "ScriptSourceNotFoundError",
    "script_filename",
    "script_name",
]
