"""Script registry: the scripts directory and the binaries directory."""

from .api import ScriptRegistry
from .models import (
    BinaryEntry,
    BinaryNotFoundError,
    InvalidScriptError,
    ReadyOutcome,
    RegistryError,
    RegistryIOError,
    ScriptEntry,
    ScriptNotExecutableError,
    ScriptNotFoundError,
    ScriptRunError,
    ScriptSourceNotFoundError,
)

__all__ = [
    "BinaryEntry",
    "BinaryNotFoundError",
    "InvalidScriptError",
    "ReadyOutcome",
    "RegistryError",
    "RegistryIOError",
    "ScriptEntry",
    "ScriptNotExecutableError",
    "ScriptNotFoundError",
    "ScriptRunError",
    "ScriptRegistry",
    "ScriptSourceNotFoundError",
]
