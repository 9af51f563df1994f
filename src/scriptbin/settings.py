from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptbin.common import AppInfo, AppPaths, LoggingConfig
from scriptbin.config.file import ConfigDefaults, ConfigFileNames, ConfigStoreSettings
from scriptbin.constants import ENV_PREFIX
from scriptbin.toolchain.models import ToolchainCommands


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()
    logging: LoggingConfig = LoggingConfig()
    toolchain: ToolchainCommands = ToolchainCommands()
    config_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_config_store_settings(self) -> ConfigStoreSettings:
        return ConfigStoreSettings(
            filenames=ConfigFileNames(
                config_file=self.paths.config_filename,
                scripts_marker=self.paths.scripts_marker,
                tool_binary=self.paths.tool_binary_name,
                fallback_dir=self.paths.config_dir_name,
            ),
            defaults=ConfigDefaults(
                script_dir=self.paths.default_script_dir,
                bin_dir=self.paths.default_bin_dir,
            ),
            config_file=Path(self.config_file).expanduser() if self.config_file else None,
        )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None

__all__ = [
    "AppInfo",
    "AppPaths",
    "Settings",
    "get_settings",
]
