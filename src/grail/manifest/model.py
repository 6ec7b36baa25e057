"""The Manifest value type and its JSON shape check."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SCALAR_FIELDS = ("name", "version", "description")


class ShapeError(ValueError):
    """Raised by Manifest.from_dict when a field has the wrong JSON type."""


@dataclass(frozen=True)
class Manifest:
    name: str = ""
    version: str = ""
    description: str = ""
    commands: list[dict[str, Any]] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    schemas: dict[str, dict[str, Any]] = field(default_factory=dict)
    examples: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        """True when there is nothing worth prompting with.

        Examples alone do not count, nor do the identity fields.
        """
        return not self.commands and not self.env and not self.schemas

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "commands": [dict(c) for c in self.commands],
            "env": dict(self.env),
            "schemas": {k: dict(v) for k, v in self.schemas.items()},
            "examples": list(self.examples),
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "Manifest":
        """Build a Manifest from decoded JSON.

        A null document and missing or null fields become empty defaults.
        Unknown keys are ignored. A field of the wrong type raises ShapeError.
        """
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ShapeError(f"top-level value must be an object, got {_json_type(raw)}")

        scalars: dict[str, str] = {}
        for key in SCALAR_FIELDS:
            value = raw.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ShapeError(f"'{key}' must be a string, got {_json_type(value)}")
            scalars[key] = value

        commands = _list_of(raw, "commands", dict, "an object")
        examples = _list_of(raw, "examples", str, "a string")
        env = _map_of(raw, "env", str, "a string")
        schemas = _map_of(raw, "schemas", dict, "an object")

        return cls(
            commands=[dict(c) for c in commands],
            env=env,
            schemas={k: dict(v) for k, v in schemas.items()},
            examples=examples,
            **scalars,
        )


def _list_of(raw: dict, key: str, item_type: type, type_name: str) -> list:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ShapeError(f"'{key}' must be an array, got {_json_type(value)}")
    for i, item in enumerate(value):
        if not isinstance(item, item_type):
            raise ShapeError(f"'{key}[{i}]' must be {type_name}, got {_json_type(item)}")
    return list(value)


def _map_of(raw: dict, key: str, value_type: type, type_name: str) -> dict:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ShapeError(f"'{key}' must be an object, got {_json_type(value)}")
    for k, v in value.items():
        if not isinstance(v, value_type):
            raise ShapeError(f"'{key}.{k}' must be {type_name}, got {_json_type(v)}")
    return dict(value)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
