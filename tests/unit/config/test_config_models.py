from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from scriptbin.config import ScriptsConfig


def test_parses_json_aliases() -> None:
    config = ScriptsConfig.model_validate({"scriptDir": "/opt/scripts", "binDir": "/opt/bin"})

    assert config.script_dir == Path("/opt/scripts")
    assert config.bin_dir == Path("/opt/bin")


def test_accepts_field_names() -> None:
    config = ScriptsConfig(script_dir="/opt/scripts", bin_dir="/opt/bin")

    assert config.script_dir == Path("/opt/scripts")


def test_expands_leading_tilde(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    config = ScriptsConfig.model_validate({"scriptDir": "~/scripts", "binDir": "~/bin"})

    assert config.script_dir == tmp_path / "scripts"
    assert config.bin_dir == tmp_path / "bin"


def test_rejects_relative_paths() -> None:
    with pytest.raises(ValidationError, match="path must be absolute"):
        ScriptsConfig.model_validate({"scriptDir": "scripts", "binDir": "/opt/bin"})


def test_requires_both_keys() -> None:
    with pytest.raises(ValidationError):
        ScriptsConfig.model_validate({"scriptDir": "/opt/scripts"})


def test_ignores_unknown_keys() -> None:
    config = ScriptsConfig.model_validate({"scriptDir": "/a", "binDir": "/b", "editor": "vim"})

    assert config.to_json_payload() == {"scriptDir": "/a", "binDir": "/b"}


def test_json_payload_uses_camel_case_keys() -> None:
    config = ScriptsConfig(script_dir="/opt/scripts", bin_dir="/opt/bin")

    assert config.to_json_payload() == {"scriptDir": "/opt/scripts", "binDir": "/opt/bin"}
