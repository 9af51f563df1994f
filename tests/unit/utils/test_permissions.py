from __future__ import annotations

import stat
from pathlib import Path

from result import is_err, is_ok

from scriptbin.utils.permissions import PermissionChangeError, is_executable, set_executable


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def test_is_executable_reports_owner_bit(tmp_path: Path) -> None:
    path = tmp_path / "tool.sh"
    path.write_text("#!/bin/sh\n")

    path.chmod(0o644)
    assert is_executable(path) is False

    path.chmod(0o744)
    assert is_executable(path) is True


def test_is_executable_ignores_group_and_other_bits(tmp_path: Path) -> None:
    path = tmp_path / "tool.sh"
    path.write_text("#!/bin/sh\n")
    path.chmod(0o655)

    assert is_executable(path) is False


def test_is_executable_returns_false_for_missing_file(tmp_path: Path) -> None:
    assert is_executable(tmp_path / "missing.sh") is False


def test_set_executable_adds_owner_bit_and_keeps_other_bits(tmp_path: Path) -> None:
    path = tmp_path / "tool.sh"
    path.write_text("#!/bin/sh\n")
    path.chmod(0o640)

    result = set_executable(path)

    assert is_ok(result)
    assert _mode(path) == 0o740


def test_set_executable_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "tool.sh"
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)

    assert is_ok(set_executable(path))
    assert _mode(path) == 0o755


def test_set_executable_missing_file_returns_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.sh"

    result = set_executable(missing)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, PermissionChangeError)
    assert error.path == missing
