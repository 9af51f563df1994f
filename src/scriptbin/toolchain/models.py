"""Data and error models for the toolchain dispatcher."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Language(str, Enum):
    """Source languages the dispatcher knows how to build."""

    GO = "go"
    PYTHON = "python"
    V = "v"
    RUST = "rust"
    C = "c"
    CPP = "cpp"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_extension(cls, extension: str) -> Language:
        """Map a file extension (with leading dot, any case) to a language."""
        return _EXTENSIONS.get(extension.lower(), cls.UNSUPPORTED)

    @classmethod
    def from_path(cls, path: Path) -> Language:
        return cls.from_extension(path.suffix)


_EXTENSIONS: dict[str, Language] = {
    ".go": Language.GO,
    ".py": Language.PYTHON,
    ".v": Language.V,
    ".rs": Language.RUST,
    ".c": Language.C,
    ".cpp": Language.CPP,
    ".cc": Language.CPP,
    ".cxx": Language.CPP,
}


class ToolchainCommands(BaseModel):
    """Executable names looked up on PATH for each toolchain."""

    model_config = ConfigDict(extra="forbid")

    go: str = "go"
    pyinstaller: str = "pyinstaller"
    v: str = "v"
    cargo: str = "cargo"
    rustc: str = "rustc"
    cc: str = "gcc"
    cxx: str = "g++"


class CompiledBinary(BaseModel):
    """A binary produced by a successful compile."""

    model_config = ConfigDict(extra="ignore")

    source: Path
    language: Language
    output: Path


class BaseToolchainError(BaseModel):
    """Base toolchain error model."""

    model_config = ConfigDict(extra="forbid")

    message: str


class SourceNotFoundError(BaseToolchainError):
    """Source file to compile does not exist."""

    path: Path


class UnsupportedExtensionError(BaseToolchainError):
    """No toolchain is registered for the source's extension."""

    path: Path
    extension: str


class CompilationError(BaseToolchainError):
    """The external toolchain failed to start or exited non-zero."""

    language: Language
    command: list[str] | None = None
    returncode: int | None = None


class ToolchainIOError(BaseToolchainError):
    """Filesystem failure while preparing the binaries directory."""

    path: Path


class BinaryPermissionError(BaseToolchainError):
    """The produced binary could not be made executable."""

    path: Path


ToolchainError = (
    SourceNotFoundError | UnsupportedExtensionError | CompilationError | ToolchainIOError | BinaryPermissionError
)


__all__ = [
    "BaseToolchainError",
    "BinaryPermissionError",
    "CompilationError",
    "CompiledBinary",
    "Language",
    "SourceNotFoundError",
    "ToolchainCommands",
    "ToolchainError",
    "ToolchainIOError",
    "UnsupportedExtensionError",
]
