"""Pydantic models for the scripts configuration file and its errors."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scriptbin.common import expand_user_path


class ScriptsConfig(BaseModel):
    """Configuration stored in ``.config.json``.

    Serialized as a flat JSON object with exactly the keys ``scriptDir`` and
    ``binDir``. Both paths are absolute once the leading ``~`` is expanded.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    script_dir: Path = Field(alias="scriptDir")
    bin_dir: Path = Field(alias="binDir")

    @field_validator("script_dir", "bin_dir", mode="before")
    @classmethod
    def _expand_home(cls, value: Any) -> Any:
        if isinstance(value, str | Path):
            return expand_user_path(value)
        return value

    @field_validator("script_dir", "bin_dir")
    @classmethod
    def _require_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"path must be absolute, got '{value}'")
        return value

    def to_json_payload(self) -> dict[str, str]:
        return self.model_dump(mode="json", by_alias=True)


class ConfigIOError(BaseModel):
    """File I/O error reading or writing configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path | None = None
    message: str


class ConfigParseError(BaseModel):
    """Malformed JSON in the configuration file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Well-formed JSON that does not describe a valid configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path | None = None
    field: str | None = None
    message: str


type ConfigError = ConfigIOError | ConfigParseError | ConfigValidationError
