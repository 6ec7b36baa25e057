"""Manifests — load, merge and aggregate tool manifests."""

from grail.manifest.aggregate import ManifestAggregator, aggregate_manifest
from grail.manifest.merge import MERGE_RULES, merge_manifests
from grail.manifest.model import Manifest
from grail.manifest.store import ManifestStore

__all__ = [
    "MERGE_RULES",
    "Manifest",
    "ManifestAggregator",
    "ManifestStore",
    "aggregate_manifest",
    "merge_manifests",
]
