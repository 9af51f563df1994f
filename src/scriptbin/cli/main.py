from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Annotated

import typer

from scriptbin.common import create_logger, setup_cli_logging
from scriptbin.settings import get_settings

from .commands import compile as compile_commands
from .commands import scripts as scripts_commands
from .routing import ScriptFallbackGroup
from .state import get_state

logger = create_logger("cli")

EPILOG = (
    "Any other first argument runs <scriptDir>/<name>.sh with the remaining arguments, "
    "e.g. 'scripts gitprune --dry-run'."
)

app = typer.Typer(
    cls=ScriptFallbackGroup,
    help="Manage and run shell scripts, and compile sources into binaries.",
    epilog=EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
scripts_commands.register(app)
compile_commands.register(app)


@app.command("help")
def show_help(ctx: typer.Context) -> None:
    """Show this help message."""
    root = ctx.find_root()
    typer.echo(root.get_help())


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    get_state(ctx)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)


def invoked_command(argv: Sequence[str]) -> str | None:
    """First non-option token: the subcommand or the script being run."""
    return next((arg for arg in argv if not arg.startswith("-")), None)


def _setup_logging() -> None:
    settings = get_settings()
    if settings.logging.enabled:
        setup_cli_logging(
            app_info=settings.app,
            config=settings.logging,
            data_dir_name=settings.paths.data_dir_name,
            command=invoked_command(sys.argv[1:]),
        )
        logger.debug("CLI logging initialized", config=settings.logging.model_dump())


def main() -> None:
    """Entrypoint for the scripts CLI."""
    _setup_logging()
    app(prog_name="scripts")
