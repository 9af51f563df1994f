from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from scriptbin.common import get_executable_path, get_home_directory, get_working_directory
from scriptbin.utils.permissions import is_executable

from .settings import ConfigStoreSettings


@dataclass(frozen=True, slots=True)
class ConfigLocations:
    """Process locations the config search starts from."""

    executable: Path | None
    working_dir: Path | None
    home: Path | None

    @classmethod
    def from_environment(cls) -> ConfigLocations:
        return cls(
            executable=get_executable_path(),
            working_dir=get_working_directory(),
            home=get_home_directory(),
        )


def resolve_config_dir(locations: ConfigLocations, settings: ConfigStoreSettings) -> Path | None:
    """Pick the directory holding the config file.

    Checked in order:
    1. the executable's directory, when it looks like a scripts installation
    2. the working directory, when it contains the scripts marker directory
    3. ~/.config/{fallback_dir}

    Returns None when none of the locations is known.
    """
    if locations.executable is not None:
        exec_dir = locations.executable.parent
        if _is_installation_dir(exec_dir, settings):
            return exec_dir

    if locations.working_dir is not None and (locations.working_dir / settings.scripts_marker).is_dir():
        return locations.working_dir

    if locations.home is not None:
        return locations.home / ".config" / settings.fallback_dir

    return None


def resolve_config_path(locations: ConfigLocations, settings: ConfigStoreSettings) -> Path | None:
    if settings.config_file is not None:
        return settings.config_file

    config_dir = resolve_config_dir(locations, settings)
    if config_dir is None:
        return None
    return config_dir / settings.config_filename


def _is_installation_dir(directory: Path, settings: ConfigStoreSettings) -> bool:
    if (directory / settings.scripts_marker).is_dir():
        return True
    tool_binary = directory / settings.tool_binary
    return tool_binary.is_file() and is_executable(tool_binary)
