"""CLI output helpers — JSON/human output, failures, usage-printing groups."""
from __future__ import annotations

import json
import sys
from typing import Any, NoReturn

import click


def output(data: dict[str, object], human: bool = False) -> None:
    """Print result as JSON (default) or human-readable key: value lines."""
    if human:
        for k, v in data.items():
            if isinstance(v, (list, dict)):
                click.echo(f"{k}: {json.dumps(v, indent=2, default=str)}")
            else:
                click.echo(f"{k}: {v}")
    else:
        click.echo(json.dumps(data, indent=2, default=str))


def fail(message: str) -> NoReturn:
    """Report a terminal failure on stderr and exit 1."""
    click.echo(message, err=True)
    sys.exit(1)


class UsageGroup(click.Group):
    """Group that prints a one-line usage to stdout and exits 2 when the
    subcommand is missing or unknown.

    The group callback calls show_usage() itself when
    ctx.invoked_subcommand is None.
    """

    def __init__(self, *args: Any, usage_line: str = "", **kwargs: Any) -> None:
        kwargs.setdefault("invoke_without_command", True)
        super().__init__(*args, **kwargs)
        self.usage_line = usage_line

    def show_usage(self, ctx: click.Context) -> NoReturn:
        click.echo(self.usage_line or ctx.get_usage())
        ctx.exit(2)

    def resolve_command(self, ctx: click.Context, args: list[str]):
        cmd_name = click.utils.make_str(args[0])
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing:
            self.show_usage(ctx)
        return super().resolve_command(ctx, args)

