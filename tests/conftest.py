from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from result import Err, Ok, Result

from scriptbin.utils.process import ProcessOutcome, ProcessSpawnError


@dataclass
class FakeRunner:
    """ProcessRunner double that records every command instead of spawning it."""

    returncode: int = 0
    spawn_error: str | None = None
    on_run: Callable[[list[str], Path | None], None] | None = None
    calls: list[tuple[list[str], Path | None]] = field(default_factory=list)

    def run(self, command: Sequence[str], *, cwd: Path | None = None) -> Result[ProcessOutcome, ProcessSpawnError]:
        argv = [str(part) for part in command]
        self.calls.append((argv, cwd))
        if self.spawn_error is not None:
            return Err(ProcessSpawnError(command=argv, message=self.spawn_error))
        if self.on_run is not None:
            self.on_run(argv, cwd)
        return Ok(ProcessOutcome(command=argv, returncode=self.returncode))

    @property
    def commands(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def script_dir(tmp_path: Path) -> Path:
    return tmp_path / "scripts_bin"


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    return tmp_path / "programs"


def write_script(directory: Path, filename: str, body: str = "#!/bin/sh\n", mode: int = 0o644) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(body, encoding="utf-8")
    path.chmod(mode)
    return path


@pytest.fixture
def make_script() -> Callable[..., Path]:
    return write_script
