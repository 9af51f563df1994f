"""External process invocation."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel
from result import Err, Ok, Result

from scriptbin.common import create_logger

logger = create_logger("process")


class ProcessOutcome(BaseModel):
    """Exit status of a finished process."""

    command: list[str]
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class ProcessSpawnError(BaseModel):
    """Process could not be started (missing executable, permission denied, ...)."""

    command: list[str]
    message: str


class ProcessRunner(Protocol):
    """Protocol for running external commands."""

    def run(self, command: Sequence[str], *, cwd: Path | None = None) -> Result[ProcessOutcome, ProcessSpawnError]:
        """Run a command to completion.

        A non-zero exit is not an error at this level; callers inspect
        ``ProcessOutcome.returncode``.
        """
        ...


class SubprocessRunner:
    """ProcessRunner backed by ``subprocess.run``.

    stdin, stdout and stderr are inherited from the parent, so toolchain
    diagnostics and script output go straight to the terminal. Only the exit
    status is carried back.
    """

    def run(self, command: Sequence[str], *, cwd: Path | None = None) -> Result[ProcessOutcome, ProcessSpawnError]:
        argv = [str(part) for part in command]
        logger.debug("Running command", command=argv, cwd=str(cwd) if cwd else None)

        try:
            completed = subprocess.run(argv, cwd=cwd, check=False)
        except OSError as exc:
            logger.error("Command failed to start", command=argv, error=str(exc))
            return Err(ProcessSpawnError(command=argv, message=str(exc)))

        logger.debug("Command finished", command=argv, returncode=completed.returncode)
        return Ok(ProcessOutcome(command=argv, returncode=completed.returncode))
