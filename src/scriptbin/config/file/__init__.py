from .paths import ConfigLocations, resolve_config_dir, resolve_config_path
from .settings import ConfigDefaults, ConfigFileNames, ConfigStoreSettings
from .store import FileConfigStore

__all__ = [
    "ConfigDefaults",
    "ConfigFileNames",
    "ConfigLocations",
    "ConfigStoreSettings",
    "FileConfigStore",
    "resolve_config_dir",
    "resolve_config_path",
]
