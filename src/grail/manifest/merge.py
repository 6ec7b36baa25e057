"""Combine two manifests field by field.

Rules per field:

    name, version, description   base wins
    commands, examples           base ++ other
    env, schemas                 union, other wins on shared keys

Neither input is mutated.
"""

from __future__ import annotations

from typing import Any, Callable

from grail.manifest.model import Manifest


def _keep_base(base: Any, other: Any) -> Any:
    return base


def _concat(base: list, other: list) -> list:
    return [*base, *other]


def _union_other_wins(base: dict, other: dict) -> dict:
    merged = dict(base)
    merged.update(other)
    return merged


MERGE_RULES: dict[str, Callable[[Any, Any], Any]] = {
    "name": _keep_base,
    "version": _keep_base,
    "description": _keep_base,
    "commands": _concat,
    "env": _union_other_wins,
    "schemas": _union_other_wins,
    "examples": _concat,
}


def merge_manifests(base: Manifest, other: Manifest) -> Manifest:
    """Return a new Manifest folding `other` onto `base`."""
    return Manifest(**{
        name: rule(getattr(base, name), getattr(other, name))
        for name, rule in MERGE_RULES.items()
    })
