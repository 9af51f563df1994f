"""User-facing rendering of errors and usage failures."""

from __future__ import annotations

from typing import NoReturn

import typer

from scriptbin.config import ConfigError, ConfigIOError, ConfigParseError, ConfigValidationError
from scriptbin.registry import (
    BinaryNotFoundError,
    InvalidScriptError,
    RegistryError,
    RegistryIOError,
    ScriptNotExecutableError,
    ScriptNotFoundError,
    ScriptRunError,
    ScriptSourceNotFoundError,
)
from scriptbin.toolchain import (
    BinaryPermissionError,
    CompilationError,
    Language,
    SourceNotFoundError,
    ToolchainError,
    ToolchainIOError,
    UnsupportedExtensionError,
)

SUPPORTED_EXTENSIONS = ".go, .py, .v, .rs, .c, .cpp, .cc, .cxx"


def _error(message: str) -> None:
    typer.secho(f"error: {message}", err=True, fg=typer.colors.RED)


def _hint(message: str) -> None:
    typer.secho(f"hint: {message}", err=True, fg=typer.colors.CYAN)


def usage_error(usage: str, detail: str | None = None) -> NoReturn:
    """Print a usage message and exit with status 1."""
    if detail:
        _error(detail)
    typer.echo(f"Usage: {usage}", err=True)
    raise typer.Exit(code=1)


def handle_config_error(error: ConfigError) -> None:
    match error:
        case ConfigParseError(path=path, line=line, column=column, message=message):
            location = f"{path}:{line}:{column}" if line is not None else str(path)
            _error(f"{message} ({location})")
            _hint("fix or delete the file to recreate it with defaults")
        case ConfigValidationError(path=path, field=field, message=message):
            prefix = f"invalid config value for '{field}'" if field else "invalid config"
            _error(f"{prefix}: {message}" + (f" ({path})" if path else ""))
        case ConfigIOError(path=path, message=message):
            _error(f"error loading config: {message}" + (f" ({path})" if path else ""))
        case _:  # pragma: no cover - fallback for unexpected subclasses
            _error(error.message)


def handle_registry_error(error: RegistryError) -> None:
    match error:
        case ScriptNotFoundError(name=name, directory=directory):
            _error(f"script '{name}' not found in {directory}")
            _hint("use 'scripts list' to see available scripts")
        case BinaryNotFoundError(name=name, directory=directory):
            _error(f"binary '{name}' not found in {directory}")
            _hint("use 'scripts list' to see available binaries")
        case ScriptNotExecutableError(name=name):
            _error(f"script '{name}' is not executable")
            _hint(f"run 'scripts ready {name}' to make it executable")
        case ScriptSourceNotFoundError(path=path):
            _error(f"script {path} does not exist")
        case InvalidScriptError(path=path, message=message):
            _error(f"{message} ({path})")
        case ScriptRunError(message=message):
            _error(message)
        case RegistryIOError(message=message):
            _error(message)
        case _:  # pragma: no cover - fallback for unexpected subclasses
            _error(error.message)


def handle_toolchain_error(error: ToolchainError) -> None:
    match error:
        case SourceNotFoundError(path=path):
            _error(f"source file {path} not found")
        case UnsupportedExtensionError(message=message):
            _error(message)
            _hint(f"supported extensions: {SUPPORTED_EXTENSIONS}")
        case CompilationError(language=language, command=command, returncode=returncode):
            _error(f"{language.value} compilation failed")
            typer.echo(f"  {error.message}", err=True)
            if language == Language.PYTHON:
                _hint("make sure PyInstaller is installed")
            elif command and returncode is None:
                _hint(f"make sure '{command[0]}' is installed and on your PATH")
        case ToolchainIOError(message=message) | BinaryPermissionError(message=message):
            _error(message)
        case _:  # pragma: no cover - fallback for unexpected subclasses
            _error(error.message)
