"""CLI commands for the scripts and binaries directories."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok, is_err

from ..errors import handle_registry_error, usage_error
from ..routing import RUN_COMMAND
from ..state import get_state

PASSTHROUGH_SETTINGS = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}
EXTRA_ARGS_SETTINGS = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
}

READY_USAGE = "scripts ready <script_name> | scripts ready -a|--all"
ADD_USAGE = "scripts add <script.sh>"
RM_USAGE = "scripts rm <name> | scripts rm --bin|-b <binary_name>"


def run_script(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Script name (without .sh)")],
) -> None:
    """Run <scriptDir>/<name>.sh, forwarding every remaining argument."""
    state = get_state(ctx)
    registry = state.registry()

    match registry.run(name, ctx.args, state.runner):
        case Ok(_):
            return
        case Err(error):
            handle_registry_error(error)
            raise typer.Exit(code=1)


def list_entries(ctx: typer.Context) -> None:
    """List available scripts and binaries.

    Examples:

        scripts list
    """
    registry = get_state(ctx).registry()

    scripts_result = registry.list_scripts()
    binaries_result = registry.list_binaries()
    for result in (scripts_result, binaries_result):
        if is_err(result):
            handle_registry_error(result.unwrap_err())
            raise typer.Exit(code=1)

    scripts = scripts_result.unwrap()
    binaries = binaries_result.unwrap()

    if not scripts and not binaries:
        typer.echo("No scripts or binaries found.")
        typer.echo(f"Scripts directory: {registry.script_dir}")
        typer.echo(f"Binaries directory: {registry.bin_dir}")
        return

    if scripts:
        typer.secho("Available scripts:", bold=True)
        for entry in scripts:
            status = "executable" if entry.executable else "not executable"
            color = typer.colors.GREEN if entry.executable else typer.colors.YELLOW
            typer.echo(f"  {entry.name} (" + typer.style(status, fg=color) + ")")

    if binaries:
        if scripts:
            typer.echo()
        typer.secho(f"Available binaries ({registry.bin_dir}):", bold=True)
        for binary in binaries:
            typer.echo(f"  {binary.name}")


def ready(
    ctx: typer.Context,
    name: Annotated[str | None, typer.Argument(help="Script name to make executable")] = None,
    all_scripts: Annotated[bool, typer.Option("--all", "-a", help="Make every script executable")] = False,
) -> None:
    """Make scripts in the scripts directory executable.

    Examples:

        scripts ready myscript

        scripts ready -a
    """
    unknown_flags = [arg for arg in [name or "", *ctx.args] if arg.startswith("-")]
    if unknown_flags:
        usage_error(READY_USAGE, f"unknown flag: {unknown_flags[0]}")

    registry = get_state(ctx).registry()

    if all_scripts:
        if name is not None or ctx.args:
            usage_error(READY_USAGE, "--all does not take a script name")
        match registry.ready_all():
            case Ok(outcomes):
                if not outcomes:
                    typer.echo(f"No scripts found in {registry.script_dir}")
                for outcome in outcomes:
                    _echo_ready(outcome.name, outcome.already_executable)
            case Err(error):
                handle_registry_error(error)
                raise typer.Exit(code=1)
        return

    if name is None:
        usage_error(READY_USAGE)
    if ctx.args:
        usage_error(READY_USAGE, "only one script name is allowed")

    match registry.ready(name):
        case Ok(outcome):
            _echo_ready(outcome.name, outcome.already_executable)
        case Err(error):
            handle_registry_error(error)
            raise typer.Exit(code=1)


def add(
    ctx: typer.Context,
    source: Annotated[str | None, typer.Argument(help="Path to a .sh script")] = None,
) -> None:
    """Copy a script into the scripts directory and make it executable.

    Examples:

        scripts add myscript.sh

        scripts add ./path/to/script.sh
    """
    if source is None:
        usage_error(ADD_USAGE)

    registry = get_state(ctx).registry()

    match registry.add(Path(source)):
        case Ok(entry):
            typer.secho(f"✓ Added {entry.path.name} to {registry.script_dir}", fg=typer.colors.GREEN)
        case Err(error):
            handle_registry_error(error)
            raise typer.Exit(code=1)


def remove(
    ctx: typer.Context,
    name: Annotated[str | None, typer.Argument(help="Script or binary name")] = None,
    binary: Annotated[bool, typer.Option("--bin", "-b", help="Remove a compiled binary instead")] = False,
) -> None:
    """Remove a script, or a binary with --bin.

    Examples:

        scripts rm myscript

        scripts rm --bin myapp
    """
    if name is None:
        usage_error(RM_USAGE)

    registry = get_state(ctx).registry()
    result = registry.remove_binary(name) if binary else registry.remove_script(name)
    kind = "binary" if binary else "script"

    match result:
        case Ok(_):
            typer.secho(f"✓ Removed {kind} {name}", fg=typer.colors.GREEN)
        case Err(error):
            handle_registry_error(error)
            raise typer.Exit(code=1)


def _echo_ready(name: str, already_executable: bool) -> None:
    if already_executable:
        typer.echo(f"• {name}.sh already executable")
    else:
        typer.secho(f"✓ {name}.sh made executable", fg=typer.colors.GREEN)


def register(app: typer.Typer) -> None:
    app.command(
        RUN_COMMAND,
        hidden=True,
        add_help_option=False,
        context_settings=PASSTHROUGH_SETTINGS,
    )(run_script)
    app.command("list")(list_entries)
    app.command("ready", context_settings=EXTRA_ARGS_SETTINGS)(ready)
    app.command("add")(add)
    app.command("rm")(remove)
