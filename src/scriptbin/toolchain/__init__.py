"""Toolchain dispatcher: build a source file into a standalone binary."""

from .api import Compiler, binary_name_for
from .builders import BuildRequest, build
from .models import (
    BinaryPermissionError,
    CompilationError,
    CompiledBinary,
    Language,
    SourceNotFoundError,
    ToolchainCommands,
    ToolchainError,
    ToolchainIOError,
    UnsupportedExtensionError,
)

__all__ = [
    "BinaryPermissionError",
    "BuildRequest",
    "CompilationError",
    "CompiledBinary",
    "Compiler",
    "Language",
    "SourceNotFoundError",
    "ToolchainCommands",
    "ToolchainError",
    "ToolchainIOError",
    "UnsupportedExtensionError",
    "binary_name_for",
    "build",
]
