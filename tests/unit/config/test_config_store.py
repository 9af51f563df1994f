from __future__ import annotations

import json
from pathlib import Path

import pytest
from result import is_err, is_ok

from scriptbin.config import (
    ConfigIOError,
    ConfigLocations,
    ConfigParseError,
    ConfigStoreSettings,
    ConfigValidationError,
    FileConfigStore,
    ScriptsConfig,
)


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


def _store(home: Path, settings: ConfigStoreSettings | None = None) -> FileConfigStore:
    locations = ConfigLocations(executable=None, working_dir=None, home=home)
    return FileConfigStore(settings or ConfigStoreSettings(), locations=locations)


def _config_path(home: Path) -> Path:
    return home / ".config" / "scripts" / ".config.json"


def test_load_creates_file_with_defaults(home: Path) -> None:
    result = _store(home).load()

    assert is_ok(result)
    config = result.unwrap()
    assert config.script_dir == home / "code" / "personal" / "scripts" / "scripts_bin"
    assert config.bin_dir == home / "opt" / "programs"

    written = json.loads(_config_path(home).read_text(encoding="utf-8"))
    assert written == {
        "scriptDir": str(home / "code" / "personal" / "scripts" / "scripts_bin"),
        "binDir": str(home / "opt" / "programs"),
    }


def test_defaults_are_written_with_two_space_indent(home: Path) -> None:
    _store(home).load()

    text = _config_path(home).read_text(encoding="utf-8")
    assert text.startswith('{\n  "scriptDir": ')
    assert text.endswith("}\n")


def test_load_reads_existing_file(home: Path) -> None:
    path = _config_path(home)
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"scriptDir": "/srv/scripts", "binDir": "~/bin"}), encoding="utf-8")

    config = _store(home).load().unwrap()

    assert config.script_dir == Path("/srv/scripts")
    assert config.bin_dir == home / "bin"


def test_save_then_load_round_trips(home: Path) -> None:
    store = _store(home)
    config = ScriptsConfig(script_dir="/srv/scripts", bin_dir="/srv/bin")

    assert is_ok(store.save(config))

    assert store.load().unwrap() == config


def test_save_creates_parent_directories(home: Path) -> None:
    store = _store(home)

    store.save(ScriptsConfig(script_dir="/a", bin_dir="/b"))

    assert _config_path(home).is_file()


def test_malformed_json_returns_parse_error_with_location(home: Path) -> None:
    path = _config_path(home)
    path.parent.mkdir(parents=True)
    path.write_text('{\n  "scriptDir": \n}\n', encoding="utf-8")

    result = _store(home).load()

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ConfigParseError)
    assert error.path == path
    assert error.line == 3


def test_invalid_utf8_returns_parse_error(home: Path) -> None:
    path = _config_path(home)
    path.parent.mkdir(parents=True)
    path.write_bytes(b'{"scriptDir": "/a\xff", "binDir": "/b"}')

    result = _store(home).load()

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ConfigParseError)
    assert error.path == path
    assert "UTF-8" in error.message


def test_deeply_nested_json_returns_parse_error(home: Path) -> None:
    path = _config_path(home)
    path.parent.mkdir(parents=True)
    path.write_text("[" * 100_000 + "]" * 100_000, encoding="utf-8")

    error = _store(home).load().unwrap_err()

    assert isinstance(error, ConfigParseError)
    assert error.line is None


def test_non_object_root_is_a_validation_error(home: Path) -> None:
    path = _config_path(home)
    path.parent.mkdir(parents=True)
    path.write_text("[]", encoding="utf-8")

    error = _store(home).load().unwrap_err()

    assert isinstance(error, ConfigValidationError)
    assert "JSON object" in error.message


def test_relative_path_is_a_validation_error(home: Path) -> None:
    path = _config_path(home)
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"scriptDir": "scripts", "binDir": "/b"}), encoding="utf-8")

    error = _store(home).load().unwrap_err()

    assert isinstance(error, ConfigValidationError)
    assert error.field == "scriptDir"
    assert error.path == path


def test_missing_key_is_a_validation_error(home: Path) -> None:
    path = _config_path(home)
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"scriptDir": "/a"}), encoding="utf-8")

    error = _store(home).load().unwrap_err()

    assert isinstance(error, ConfigValidationError)
    assert error.field == "binDir"


def test_existing_file_is_not_overwritten_on_error(home: Path) -> None:
    path = _config_path(home)
    path.parent.mkdir(parents=True)
    path.write_text("not json", encoding="utf-8")

    _store(home).load()

    assert path.read_text(encoding="utf-8") == "not json"


def test_unresolvable_location_returns_io_error() -> None:
    store = FileConfigStore(
        ConfigStoreSettings(),
        locations=ConfigLocations(executable=None, working_dir=None, home=None),
    )

    error = store.load().unwrap_err()

    assert isinstance(error, ConfigIOError)
    assert error.message == "Could not determine config directory."


def test_config_file_override_is_used(home: Path, tmp_path: Path) -> None:
    override = tmp_path / "elsewhere" / "config.json"

    store = _store(home, ConfigStoreSettings(config_file=override))
    store.load()

    assert override.is_file()
    assert not _config_path(home).exists()


def test_unwritable_location_returns_io_error(home: Path, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    store = _store(home, ConfigStoreSettings(config_file=blocker / "config.json"))
    error = store.load().unwrap_err()

    assert isinstance(error, ConfigIOError)
