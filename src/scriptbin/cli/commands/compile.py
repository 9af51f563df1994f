"""CLI command for compiling sources into the binaries directory."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok

from ..errors import handle_toolchain_error, usage_error
from ..state import get_state

COMPILE_USAGE = "scripts compile <source> [--name|-n <binary_name>]"


def compile_source(
    ctx: typer.Context,
    source: Annotated[str | None, typer.Argument(help="Source file (.go, .py, .v, .rs, .c, .cpp, .cc, .cxx)")] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Binary name (default: source file name without extension)"),
    ] = None,
) -> None:
    """Compile a source file to a binary in the binaries directory.

    Supported: Go, Python (PyInstaller), V, Rust, C, C++.

    Examples:

        scripts compile main.go

        scripts compile main.go --name myapp

        scripts compile hello.c -n utility
    """
    if source is None:
        usage_error(COMPILE_USAGE)

    compiler = get_state(ctx).compiler()

    match compiler.compile(Path(source), output_name=name):
        case Ok(binary):
            typer.secho(f"✓ Compiled {source} to {binary.output}", fg=typer.colors.GREEN)
        case Err(error):
            handle_toolchain_error(error)
            raise typer.Exit(code=1)


def register(app: typer.Typer) -> None:
    app.command("compile")(compile_source)
