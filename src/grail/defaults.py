"""Shared constants — env var names, file names, resolvers.

Single source of truth for where grail keeps its per-project state.
"""

from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------

ENV_PROJECT_ROOT = "GRAIL_PROJECT_ROOT"

# ---------------------------------------------------------------------------
# Project-relative locations
# ---------------------------------------------------------------------------

MANIFEST_SUFFIX = ".json"

# Base manifest, written by `grailx init`
MANIFEST_FILE_NAME = "grail.manifest.json"

# Plugin manifests for bare-name lookup and the directory scan fallback
PLUGINS_DIR_NAME = "plugins"

# Hidden per-project config holding the plugin registry
CONFIG_DIR_NAME = ".grail"
CONFIG_FILE_NAME = "config.json"


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def resolve_project_root(project_root: str | Path | None = None) -> Path:
    """Resolve project root: explicit arg > GRAIL_PROJECT_ROOT > cwd."""
    if project_root:
        return Path(project_root).expanduser()
    explicit = os.getenv(ENV_PROJECT_ROOT)
    if explicit:
        return Path(explicit).expanduser()
    return Path.cwd()


def resolve_manifest_path(project_root: str | Path | None = None) -> Path:
    return resolve_project_root(project_root) / MANIFEST_FILE_NAME


def resolve_plugins_dir(project_root: str | Path | None = None) -> Path:
    return resolve_project_root(project_root) / PLUGINS_DIR_NAME


def resolve_config_path(project_root: str | Path | None = None) -> Path:
    """Resolve the registry config: <root>/.grail/config.json."""
    return resolve_project_root(project_root) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def has_manifest_suffix(name: str) -> bool:
    """Case-insensitive check for the manifest file suffix."""
    return name.lower().endswith(MANIFEST_SUFFIX)
