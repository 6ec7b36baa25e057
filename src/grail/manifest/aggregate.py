"""Build the project's aggregate manifest: base manifest plus plugins."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from grail.defaults import (
    resolve_manifest_path,
    resolve_plugins_dir,
    resolve_project_root,
)
from grail.errors import DecodeError, NotInitialized
from grail.manifest.merge import merge_manifests
from grail.manifest.model import Manifest
from grail.manifest.store import ManifestStore
from grail.plugins.registry import PluginRegistry
from grail.plugins.resolver import resolve_plugin_path

log = logging.getLogger(__name__)


class ManifestAggregator:
    """Load the base manifest and fold plugin manifests onto it.

    Plugin source: the registry entries in registry order when the
    registry is non-empty, otherwise every manifest file found under
    plugins/. Plugin manifests that fail to load are skipped; only the
    base manifest and the registry itself can abort a run.
    """

    def __init__(
        self,
        project_root: str | Path | None = None,
        store: ManifestStore | None = None,
        registry: PluginRegistry | None = None,
    ) -> None:
        self.project_root = resolve_project_root(project_root)
        self.store = store if store is not None else ManifestStore()
        self.registry = registry if registry is not None else PluginRegistry(self.project_root)

    def plugin_locations(self) -> list[Path]:
        """Ordered plugin manifest locations for this run."""
        entries = self.registry.load()
        if entries:
            return [resolve_plugin_path(e, self.project_root) for e in entries]
        return list(self.store.discover(resolve_plugins_dir(self.project_root)))

    def aggregate(self) -> Manifest:
        agg = self.store.load(resolve_manifest_path(self.project_root))
        for plugin in self._load_plugins(self.plugin_locations()):
            agg = merge_manifests(agg, plugin)
        if agg.is_empty():
            raise NotInitialized()
        return agg

    def _load_plugins(self, locations: Iterable[Path]) -> Iterable[Manifest]:
        for location in locations:
            try:
                yield self.store.load(location)
            except (DecodeError, OSError) as exc:
                log.debug("skipping plugin manifest %s: %s", location, exc)


def aggregate_manifest(project_root: str | Path | None = None) -> Manifest:
    """Aggregate the manifest for a project using the on-disk stores."""
    return ManifestAggregator(project_root).aggregate()
