"""Operations over the scripts and binaries directories."""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path

from result import Err, Ok, Result, is_err

from scriptbin.common import create_logger
from scriptbin.config import ScriptsConfig
from scriptbin.constants import APP_NAME
from scriptbin.utils.permissions import is_executable, set_executable
from scriptbin.utils.process import ProcessRunner

from .models import (
    SCRIPT_SUFFIX,
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
    script_filename,
    script_name,
)

logger = create_logger("registry")


class ScriptRegistry:
    """Script and binary management API."""

    def __init__(self, script_dir: Path, bin_dir: Path, *, tool_binary: str = APP_NAME) -> None:
        self._script_dir = script_dir
        self._bin_dir = bin_dir
        self._tool_binary = tool_binary

    @classmethod
    def from_config(cls, config: ScriptsConfig, *, tool_binary: str = APP_NAME) -> ScriptRegistry:
        return cls(config.script_dir, config.bin_dir, tool_binary=tool_binary)

    @property
    def script_dir(self) -> Path:
        return self._script_dir

    @property
    def bin_dir(self) -> Path:
        return self._bin_dir

    def script_path(self, name: str) -> Path:
        return self._script_dir / script_filename(name)

    def binary_path(self, name: str) -> Path:
        return self._bin_dir / name

    def list_scripts(self) -> Result[list[ScriptEntry], RegistryError]:
        """List every ``*.sh`` entry with its executable status."""
        if not self._script_dir.is_dir():
            return Ok([])

        try:
            paths = sorted(self._script_dir.glob(f"*{SCRIPT_SUFFIX}"))
        except OSError as exc:
            return Err(RegistryIOError(path=self._script_dir, message=f"failed to list scripts: {exc}"))

        return Ok(
            [ScriptEntry(name=script_name(path.name), path=path, executable=is_executable(path)) for path in paths]
        )

    def list_binaries(self) -> Result[list[BinaryEntry], RegistryError]:
        """List executable files in the binaries directory, skipping the tool's own binary."""
        if not self._bin_dir.is_dir():
            return Ok([])

        try:
            paths = sorted(self._bin_dir.iterdir())
        except OSError as exc:
            return Err(RegistryIOError(path=self._bin_dir, message=f"failed to list binaries: {exc}"))

        return Ok(
            [
                BinaryEntry(name=path.name, path=path)
                for path in paths
                if not path.is_dir() and path.name != self._tool_binary and is_executable(path)
            ]
        )

    def ready_all(self) -> Result[list[ReadyOutcome], RegistryError]:
        """Make every script executable. The first chmod failure aborts the batch."""
        logger.info("Making all scripts executable", script_dir=str(self._script_dir))

        listing = self.list_scripts()
        if is_err(listing):
            return listing

        outcomes: list[ReadyOutcome] = []
        for entry in listing.unwrap():
            result = self._make_ready(entry.path)
            if is_err(result):
                return result
            outcomes.append(result.unwrap())

        return Ok(outcomes)

    def ready(self, name: str) -> Result[ReadyOutcome, RegistryError]:
        path = self.script_path(name)
        if not path.exists():
            return Err(self._script_not_found(name))
        return self._make_ready(path)

    def add(self, source: Path) -> Result[ScriptEntry, RegistryError]:
        """Copy a ``.sh`` file into the scripts directory and make the copy executable."""
        logger.info("Adding script", source=str(source), script_dir=str(self._script_dir))

        if not source.exists():
            return Err(ScriptSourceNotFoundError(path=source, message=f"script {source} does not exist"))

        if not source.name.endswith(SCRIPT_SUFFIX):
            return Err(InvalidScriptError(path=source, message=f"script must have {SCRIPT_SUFFIX} extension"))

        destination = self._script_dir / source.name
        try:
            self._script_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, destination)
        except OSError as exc:
            return Err(RegistryIOError(path=destination, message=f"failed to copy script: {exc}"))

        return (
            set_executable(destination)
            .map_err(
                lambda error: RegistryIOError(
                    path=destination,
                    message=f"failed to make script executable: {error.message}",
                )
            )
            .map(lambda _: ScriptEntry(name=script_name(destination.name), path=destination, executable=True))
            .inspect(lambda entry: logger.success("Script added", name=entry.name, path=str(entry.path)))
        )

    def remove_script(self, name: str) -> Result[Path, RegistryError]:
        path = self.script_path(name)
        if not path.exists():
            return Err(self._script_not_found(name))
        return self._remove(path)

    def remove_binary(self, name: str) -> Result[Path, RegistryError]:
        path = self.binary_path(name)
        if not path.exists():
            return Err(
                BinaryNotFoundError(
                    name=name,
                    directory=self._bin_dir,
                    message=f"binary '{name}' not found in {self._bin_dir}",
                )
            )
        return self._remove(path)

    def resolve_runnable(self, name: str) -> Result[Path, RegistryError]:
        """Resolve a script name to a path that exists and carries the execute bit."""
        path = self.script_path(name)
        if not path.exists():
            return Err(self._script_not_found(name))

        if not is_executable(path):
            return Err(
                ScriptNotExecutableError(
                    name=script_name(name),
                    path=path,
                    message=f"script '{script_name(name)}' is not executable",
                )
            )

        return Ok(path)

    def run(self, name: str, args: Sequence[str], runner: ProcessRunner) -> Result[None, RegistryError]:
        """Run a script with ``args`` forwarded verbatim. Not retried."""
        return self.resolve_runnable(name).and_then(lambda path: self._spawn(script_name(name), path, args, runner))

    def _spawn(self, name: str, path: Path, args: Sequence[str], runner: ProcessRunner) -> Result[None, RegistryError]:
        logger.info("Running script", name=name, path=str(path), args=list(args))

        match runner.run([str(path), *args]):
            case Ok(outcome) if outcome.succeeded:
                return Ok(None)
            case Ok(outcome):
                logger.warning("Script exited non-zero", name=name, returncode=outcome.returncode)
                return Err(
                    ScriptRunError(
                        name=name,
                        returncode=outcome.returncode,
                        message=f"script '{name}' exited with status {outcome.returncode}",
                    )
                )
            case Err(error):
                logger.error("Script failed to start", name=name, error=error.message)
                return Err(ScriptRunError(name=name, message=f"failed to run script '{name}': {error.message}"))

    def _make_ready(self, path: Path) -> Result[ReadyOutcome, RegistryError]:
        name = script_name(path.name)
        if is_executable(path):
            return Ok(ReadyOutcome(name=name, path=path, already_executable=True))

        return (
            set_executable(path)
            .map_err(
                lambda error: RegistryIOError(
                    path=path,
                    message=f"failed to make {path.name} executable: {error.message}",
                )
            )
            .map(lambda _: ReadyOutcome(name=name, path=path, already_executable=False))
            .inspect(lambda outcome: logger.debug("Script made executable", name=outcome.name))
        )

    def _remove(self, path: Path) -> Result[Path, RegistryError]:
        try:
            path.unlink()
        except OSError as exc:
            return Err(RegistryIOError(path=path, message=f"failed to remove {path.name}: {exc}"))

        logger.info("Removed", path=str(path))
        return Ok(path)

    def _script_not_found(self, name: str) -> ScriptNotFoundError:
        display_name = script_name(name)
        return ScriptNotFoundError(
            name=display_name,
            directory=self._script_dir,
            message=f"script '{display_name}' not found in {self._script_dir}",
        )
