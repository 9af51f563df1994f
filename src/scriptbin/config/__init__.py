"""Public configuration API for scriptbin."""

from __future__ import annotations

from .file import (
    ConfigDefaults,
    ConfigFileNames,
    ConfigLocations,
    ConfigStoreSettings,
    FileConfigStore,
    resolve_config_dir,
    resolve_config_path,
)
from .models import (
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    ConfigValidationError,
    ScriptsConfig,
)
from .protocol import ConfigStore

__all__ = [
    "ConfigDefaults",
    "ConfigError",
    "ConfigFileNames",
    "ConfigIOError",
    "ConfigLocations",
    "ConfigParseError",
    "ConfigStore",
    "ConfigStoreSettings",
    "ConfigValidationError",
    "FileConfigStore",
    "ScriptsConfig",
    "resolve_config_dir",
    "resolve_config_path",
]
