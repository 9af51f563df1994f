"""Compile a source file into the binaries directory."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result, is_err

from scriptbin.common import create_logger
from scriptbin.utils.permissions import set_executable
from scriptbin.utils.process import ProcessRunner

from .builders import BuildRequest, build
from .models import (
    BinaryPermissionError,
    CompiledBinary,
    Language,
    SourceNotFoundError,
    ToolchainCommands,
    ToolchainError,
    ToolchainIOError,
)

logger = create_logger("toolchain")


def binary_name_for(source: Path) -> str:
    """Default binary name: the source file name without its extension."""
    return source.stem


class Compiler:
    """Toolchain dispatcher.

    Each call makes a single, synchronous attempt. Nothing is retried and
    partial artifacts left by a failing toolchain are not cleaned up.
    """

    def __init__(
        self,
        bin_dir: Path,
        runner: ProcessRunner,
        commands: ToolchainCommands | None = None,
    ) -> None:
        self._bin_dir = bin_dir
        self._runner = runner
        self._commands = commands or ToolchainCommands()

    def compile(self, source: Path, output_name: str | None = None) -> Result[CompiledBinary, ToolchainError]:
        logger.info("Compiling source", source=str(source), output_name=output_name)

        if not source.exists():
            return Err(SourceNotFoundError(path=source, message=f"source file {source} does not exist"))

        output = self._bin_dir / (output_name or binary_name_for(source))
        prepare_result = self._ensure_bin_dir()
        if is_err(prepare_result):
            return prepare_result

        request = BuildRequest(source=source, output=output, language=Language.from_path(source))

        return (
            build(request, self._runner, self._commands)
            .and_then(lambda _: self._mark_executable(output))
            .map(lambda _: CompiledBinary(source=source, language=request.language, output=output))
            .inspect(lambda binary: logger.success("Compiled", source=str(source), output=str(binary.output)))
            .inspect_err(lambda error: logger.error("Compile failed", source=str(source), error=error.message))
        )

    def _ensure_bin_dir(self) -> Result[None, ToolchainError]:
        try:
            self._bin_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            return Err(ToolchainIOError(path=self._bin_dir, message=f"failed to create bin directory: {exc}"))
        return Ok(None)

    def _mark_executable(self, output: Path) -> Result[None, ToolchainError]:
        return set_executable(output).map_err(
            lambda error: BinaryPermissionError(
                path=output,
                message=f"failed to make binary executable: {error.message}",
            )
        )
