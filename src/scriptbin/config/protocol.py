"""Configuration storage protocol."""

from typing import Protocol

from result import Result

from .models import ConfigError, ScriptsConfig


class ConfigStore(Protocol):
    """Protocol for configuration storage and retrieval."""

    def load(self) -> Result[ScriptsConfig, ConfigError]:
        """Load configuration, creating it with defaults when absent."""
        ...

    def save(self, config: ScriptsConfig) -> Result[None, ConfigError]:
        """Persist configuration, creating parent directories as needed."""
        ...
