"""Per-language build invocations."""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from result import Err, Ok, Result

from scriptbin.common import create_logger
from scriptbin.utils.process import ProcessRunner

from .models import CompilationError, Language, ToolchainCommands, ToolchainError, UnsupportedExtensionError

logger = create_logger("toolchain.builders")

CARGO_MANIFEST = "Cargo.toml"


@dataclass(frozen=True, slots=True)
class BuildRequest:
    source: Path
    output: Path
    language: Language


def build(request: BuildRequest, runner: ProcessRunner, commands: ToolchainCommands) -> Result[None, ToolchainError]:
    """Run the single toolchain invocation that matches the request's language."""
    source, output = str(request.source), str(request.output)

    match request.language:
        case Language.GO:
            return _run_toolchain(Language.GO, [commands.go, "build", "-o", output, source], runner)
        case Language.PYTHON:
            command = [
                commands.pyinstaller,
                "--onefile",
                "--distpath",
                str(request.output.parent),
                "--name",
                request.output.name,
                source,
            ]
            return _run_toolchain(Language.PYTHON, command, runner)
        case Language.V:
            return _run_toolchain(Language.V, [commands.v, "-prod", "-o", output, source], runner)
        case Language.RUST:
            return _build_rust(request, runner, commands)
        case Language.C:
            return _run_toolchain(Language.C, [commands.cc, "-o", output, source], runner)
        case Language.CPP:
            return _run_toolchain(Language.CPP, [commands.cxx, "-o", output, source], runner)
        case Language.UNSUPPORTED:
            extension = request.source.suffix.lower()
            return Err(
                UnsupportedExtensionError(
                    path=request.source,
                    extension=extension,
                    message=f"unsupported file extension: {extension or '(none)'}",
                )
            )
        case _:
            raise ValueError(f"Unexpected language: {request.language}")


def _build_rust(
    request: BuildRequest,
    runner: ProcessRunner,
    commands: ToolchainCommands,
) -> Result[None, ToolchainError]:
    project_dir = request.source.parent
    if not (project_dir / CARGO_MANIFEST).is_file():
        return _run_toolchain(Language.RUST, [commands.rustc, "-o", str(request.output), str(request.source)], runner)

    logger.debug("Cargo project detected", project_dir=str(project_dir))
    return _run_toolchain(Language.RUST, [commands.cargo, "build", "--release"], runner, cwd=project_dir).and_then(
        lambda _: _copy_release_binary(request)
    )


def _copy_release_binary(request: BuildRequest) -> Result[None, ToolchainError]:
    binary_name = request.source.stem
    release_binary = request.source.parent / "target" / "release" / binary_name

    if not release_binary.is_file():
        return Err(
            CompilationError(
                language=Language.RUST,
                message=(
                    f"cargo build succeeded but {release_binary} was not produced "
                    f"(the crate's binary must be named '{binary_name}')"
                ),
            )
        )

    try:
        shutil.copy(release_binary, request.output)
    except OSError as exc:
        return Err(
            CompilationError(
                language=Language.RUST,
                message=f"failed to copy {release_binary} to {request.output}: {exc}",
            )
        )
    return Ok(None)


def _run_toolchain(
    language: Language,
    command: Sequence[str],
    runner: ProcessRunner,
    *,
    cwd: Path | None = None,
) -> Result[None, ToolchainError]:
    match runner.run(command, cwd=cwd):
        case Ok(outcome) if outcome.succeeded:
            return Ok(None)
        case Ok(outcome):
            return Err(
                CompilationError(
                    language=language,
                    command=outcome.command,
                    returncode=outcome.returncode,
                    message=f"{command[0]} exited with status {outcome.returncode}",
                )
            )
        case Err(error):
            return Err(
                CompilationError(
                    language=language,
                    command=error.command,
                    message=f"failed to run {command[0]}: {error.message}",
                )
            )
