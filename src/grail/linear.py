"""`grail-linear` — placeholder issue-tracker lookups.

Returns fixed JSON so the prompt's issue-tracker hint has something to
call before a real Linear integration exists.
"""

from __future__ import annotations

import click

from grail.output import UsageGroup

USAGE = "usage: grail-linear me|issues|issue <id>"


@click.group(cls=UsageGroup, usage_line=USAGE)
@click.pass_context
def linear(ctx: click.Context) -> None:
    """Issue-tracker stub."""
    if ctx.invoked_subcommand is None:
        ctx.command.show_usage(ctx)


@linear.command()
def me() -> None:
    """Show the current user."""
    click.echo('{"me":true}')


@linear.command()
def issues() -> None:
    """List issues assigned to the current user."""
    click.echo("[]")


@linear.command()
@click.argument("issue_id", required=False, default="")
def issue(issue_id: str) -> None:
    """Show one issue."""
    click.echo('{"id":"example"}')


if __name__ == "__main__":
    linear()
