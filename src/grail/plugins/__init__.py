"""Plugins — the persisted plugin list and reference resolution."""

from grail.plugins.registry import PluginRegistry
from grail.plugins.resolver import resolve_plugin_path

__all__ = [
    "PluginRegistry",
    "resolve_plugin_path",
]
