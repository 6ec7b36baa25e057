"""Click CLI entrypoint — `grailx <subcommand>`.

Every call is stateless: manifests and the plugin registry are re-read
from the project root on each invocation.
"""

from __future__ import annotations

import logging
import sys

import click

from grail.errors import GrailError
from grail.output import UsageGroup, fail, output

USAGE = (
    "usage: grailx prompt | grailx run --agent '<command>' | "
    "grailx plugins [list|add|rm] | grailx init | grailx manifest"
)
PLUGINS_USAGE = "usage: grailx plugins [list|add|rm]"

AGENT_HANDOFF = "---\nRun this agent command in the same shell:"

STARTER_MANIFEST: dict[str, object] = {
    "name": "grail",
    "version": "0.1.0",
    "description": "Terminal toolbelt for docs retrieval, sessions and issue context.",
    "commands": [
        {"name": "web.search", "desc": "Search the web for official docs"},
    ],
    "env": {},
    "schemas": {},
    "examples": [],
}


def _aggregate(ctx: click.Context):
    from grail.manifest import aggregate_manifest
    try:
        return aggregate_manifest(ctx.obj["project_root"])
    except GrailError as exc:
        fail(str(exc))


def _registry(ctx: click.Context):
    from grail.plugins import PluginRegistry
    return PluginRegistry(ctx.obj["project_root"])


@click.group(cls=UsageGroup, usage_line=USAGE)
@click.version_option(package_name="grail-toolbelt")
@click.option(
    "--project-root",
    type=click.Path(file_okay=False),
    default=None,
    help="Project directory (default: $GRAIL_PROJECT_ROOT, then cwd)",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr")
@click.pass_context
def cli(ctx: click.Context, project_root: str | None, verbose: bool) -> None:
    """grailx — build a toolbelt prompt for terminal AI agents."""
    from grail.defaults import resolve_project_root
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["project_root"] = resolve_project_root(project_root)
    if ctx.invoked_subcommand is None:
        ctx.command.show_usage(ctx)


# =========================================================================
# Prompt
# =========================================================================

@cli.command()
@click.pass_context
def prompt(ctx: click.Context) -> None:
    """Print the agent prompt built from the project's manifests."""
    from grail.prompts import build_agent_prompt
    click.echo(build_agent_prompt(_aggregate(ctx)))


@cli.command()
@click.option("--agent", default="", help="Agent command to run")
@click.pass_context
def run(ctx: click.Context, agent: str) -> None:
    """Print the prompt, then the agent command to run with it."""
    from grail.prompts import build_agent_prompt
    if not agent:
        fail('usage: grailx run --agent "<command>"')
    click.echo(build_agent_prompt(_aggregate(ctx)))
    click.echo(AGENT_HANDOFF)
    click.echo(agent)


@cli.command()
@click.option("--human", is_flag=True, help="Human-readable output instead of JSON")
@click.pass_context
def manifest(ctx: click.Context, human: bool) -> None:
    """Show the aggregated manifest as JSON."""
    output(_aggregate(ctx).to_dict(), human)


@cli.command()
@click.option("--force", is_flag=True, help="Overwrite an existing manifest")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a starter grail.manifest.json in the project root."""
    from grail.defaults import resolve_manifest_path
    from grail.fs import write_json
    path = resolve_manifest_path(ctx.obj["project_root"])
    if path.exists() and not force:
        fail(f"{path} already exists; use --force to overwrite")
    try:
        write_json(path, STARTER_MANIFEST)
    except OSError as exc:
        fail(f"cannot write {path}: {exc}")
    click.echo(f"wrote {path}")


# =========================================================================
# Plugins
# =========================================================================

@cli.group(cls=UsageGroup, usage_line=PLUGINS_USAGE)
@click.pass_context
def plugins(ctx: click.Context) -> None:
    """Manage the project's plugin list (.grail/config.json)."""
    if ctx.invoked_subcommand is None:
        ctx.command.show_usage(ctx)


@plugins.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print the registry as JSON")
@click.pass_context
def plugins_list(ctx: click.Context, as_json: bool) -> None:
    """List registered plugins in merge order."""
    try:
        entries = _registry(ctx).load()
    except GrailError as exc:
        fail(str(exc))
    if as_json:
        output({"plugins": entries})
        return
    for entry in entries:
        click.echo(entry)


@plugins.command("add")
@click.argument("ref", required=False, default="")
@click.pass_context
def plugins_add(ctx: click.Context, ref: str) -> None:
    """Register a plugin by name or manifest path."""
    try:
        _registry(ctx).add(ref)
    except GrailError as exc:
        fail(str(exc))


@plugins.command("rm")
@click.argument("ref", required=False, default="")
@click.pass_context
def plugins_rm(ctx: click.Context, ref: str) -> None:
    """Unregister a plugin."""
    try:
        _registry(ctx).remove(ref)
    except GrailError as exc:
        fail(str(exc))


if __name__ == "__main__":
    cli()
