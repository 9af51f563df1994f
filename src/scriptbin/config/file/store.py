"""File-based configuration store implementation."""

from __future__ import annotations

import json
from functools import partial
from pathlib import Path

from pydantic import ValidationError
from result import Err, Ok, Result, is_err

from scriptbin.common import create_logger

from ..models import (
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    ConfigValidationError,
    ScriptsConfig,
)
from ..protocol import ConfigStore
from .paths import ConfigLocations, resolve_config_path
from .settings import ConfigStoreSettings

logger = create_logger("config")


class FileConfigStore(ConfigStore):
    def __init__(self, settings: ConfigStoreSettings, locations: ConfigLocations | None = None) -> None:
        self.settings = settings
        self.locations = locations or ConfigLocations.from_environment()

    def config_path(self) -> Result[Path, ConfigError]:
        path = resolve_config_path(self.locations, self.settings)
        if path is None:
            return Err(ConfigIOError(message="Could not determine config directory."))
        return Ok(path)

    def load(self) -> Result[ScriptsConfig, ConfigError]:
        """Load the config file, writing defaults first when it does not exist."""
        return (
            self.config_path()
            .and_then(self._load_or_create)
            .inspect_err(lambda error: logger.error("Config load failed", error=error.message))
        )

    def save(self, config: ScriptsConfig) -> Result[None, ConfigError]:
        return (
            self.config_path()
            .and_then(partial(self._write_config, config))
            .inspect_err(lambda error: logger.error("Config save failed", error=error.message))
        )

    def default_config(self) -> Result[ScriptsConfig, ConfigError]:
        defaults = self.settings.defaults
        try:
            return Ok(ScriptsConfig(script_dir=defaults.script_dir, bin_dir=defaults.bin_dir))
        except ValidationError as exc:
            return Err(_validation_error(exc, path=None))

    def _load_or_create(self, path: Path) -> Result[ScriptsConfig, ConfigError]:
        logger.debug("Loading config file", path=str(path))

        if not path.exists():
            logger.info("Config file not found, creating defaults", path=str(path))
            default_result = self.default_config()
            if is_err(default_result):
                return default_result
            config = default_result.unwrap()
            return self._write_config(config, path).map(lambda _: config)

        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Config file read error", path=str(path), error=str(exc))
            return Err(ConfigIOError(path=path, message=f"Failed to read config file: {exc}"))
        except UnicodeDecodeError as exc:
            logger.error("Config file is not UTF-8", path=str(path), position=exc.start)
            return Err(
                ConfigParseError(
                    path=path,
                    message=f"Failed to parse config file: invalid UTF-8 at byte {exc.start}",
                )
            )

        try:
            data = json.loads(raw_text)
        except RecursionError:
            logger.error("Config JSON nested too deeply", path=str(path))
            return Err(ConfigParseError(path=path, message="Failed to parse config file: nesting too deep"))
        except json.JSONDecodeError as exc:
            logger.error("Config JSON parse error", path=str(path), line=exc.lineno, column=exc.colno, error=exc.msg)
            return Err(
                ConfigParseError(
                    path=path,
                    line=exc.lineno,
                    column=exc.colno,
                    message=f"Failed to parse config file: {exc.msg}",
                )
            )

        if not isinstance(data, dict):
            logger.error("Config must be a mapping", path=str(path))
            return Err(
                ConfigValidationError(
                    path=path,
                    message="Configuration root must be a JSON object.",
                )
            )

        try:
            config = ScriptsConfig.model_validate(data)
        except ValidationError as exc:
            error = _validation_error(exc, path=path)
            logger.error("Config validation error", path=str(path), field=error.field, error=error.message)
            return Err(error)

        logger.debug("Config loaded", script_dir=str(config.script_dir), bin_dir=str(config.bin_dir))
        return Ok(config)

    def _write_config(self, config: ScriptsConfig, path: Path) -> Result[None, ConfigError]:
        payload = json.dumps(config.to_json_payload(), indent=2)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            return Err(ConfigIOError(path=path, message=f"Failed to write config file: {exc}"))

        logger.debug("Config written", path=str(path))
        return Ok(None)


def _validation_error(exc: ValidationError, path: Path | None) -> ConfigValidationError:
    details = exc.errors()
    field = None
    message = str(exc)
    if details:
        first = details[0]
        loc = first.get("loc") or ()
        field = ".".join(str(part) for part in loc) or None
        message = first.get("msg", message)
    return ConfigValidationError(path=path, field=field, message=message)
