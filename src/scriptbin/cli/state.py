"""Per-invocation state shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass, field

import typer
from result import Err, Ok

from scriptbin.config import FileConfigStore, ScriptsConfig
from scriptbin.config.file import ConfigLocations
from scriptbin.registry import ScriptRegistry
from scriptbin.settings import Settings
from scriptbin.toolchain import Compiler
from scriptbin.utils.process import ProcessRunner, SubprocessRunner

from .errors import handle_config_error


@dataclass
class CliState:
    settings: Settings = field(default_factory=Settings)
    runner: ProcessRunner = field(default_factory=SubprocessRunner)
    locations: ConfigLocations | None = None

    def config_store(self) -> FileConfigStore:
        return FileConfigStore(
            settings=self.settings.to_config_store_settings(),
            locations=self.locations,
        )

    def load_config(self) -> ScriptsConfig:
        """Load the config file or exit with status 1."""
        match self.config_store().load():
            case Ok(config):
                return config
            case Err(error):
                handle_config_error(error)
                raise typer.Exit(code=1)

    def registry(self) -> ScriptRegistry:
        return ScriptRegistry.from_config(self.load_config(), tool_binary=self.settings.paths.tool_binary_name)

    def compiler(self) -> Compiler:
        return Compiler(
            bin_dir=self.load_config().bin_dir,
            runner=self.runner,
            commands=self.settings.toolchain,
        )


def get_state(ctx: typer.Context) -> CliState:
    return ctx.ensure_object(CliState)
