"""File-based config store settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ConfigFileNames:
    """Names used while locating the config file.

    Attributes:
        config_file: Filename of the config file inside the resolved directory
        scripts_marker: Subdirectory that marks a scripts installation
        tool_binary: Name of the tool's own executable
        fallback_dir: Directory under ~/.config used when nothing else matches
    """

    config_file: str = ".config.json"
    scripts_marker: str = "scripts_bin"
    tool_binary: str = "scripts"
    fallback_dir: str = "scripts"


@dataclass(frozen=True)
class ConfigDefaults:
    """Values written when the config file does not exist yet."""

    script_dir: str = "~/code/personal/scripts/scripts_bin"
    bin_dir: str = "~/opt/programs"


@dataclass(frozen=True)
class ConfigStoreSettings:
    """Complete settings for file-based config store."""

    filenames: ConfigFileNames = field(default_factory=ConfigFileNames)
    defaults: ConfigDefaults = field(default_factory=ConfigDefaults)
    config_file: Path | None = None

    @property
    def config_filename(self) -> str:
        return self.filenames.config_file

    @property
    def scripts_marker(self) -> str:
        return self.filenames.scripts_marker

    @property
    def tool_binary(self) -> str:
        return self.filenames.tool_binary

    @property
    def fallback_dir(self) -> str:
        return self.filenames.fallback_dir
