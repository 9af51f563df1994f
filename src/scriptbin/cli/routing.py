"""Command resolution for the root CLI group."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import click
from typer.core import TyperGroup

RUN_COMMAND = "run"
USAGE_EXIT_CODE = 1


@contextmanager
def _usage_exit_code() -> Iterator[None]:
    try:
        yield
    except click.UsageError as exc:
        exc.exit_code = USAGE_EXIT_CODE
        raise


class ScriptFallbackGroup(TyperGroup):
    """Root group that treats any unknown first token as a script name.

    ``scripts deploy --dry-run`` resolves to the hidden run command with
    ``["deploy", "--dry-run"]`` as its arguments. The token ``run`` itself is
    also a script name; the run command is never addressed by name.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        token = args[0] if args else None
        if token is not None and (token == RUN_COMMAND or token not in self.commands):
            return RUN_COMMAND, self.commands[RUN_COMMAND], args
        return super().resolve_command(ctx, args)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        with _usage_exit_code():
            return super().parse_args(ctx, args)

    def invoke(self, ctx: click.Context) -> Any:
        with _usage_exit_code():
            return super().invoke(ctx)
