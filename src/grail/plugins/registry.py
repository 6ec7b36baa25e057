"""Ordered, duplicate-free plugin list persisted in .grail/config.json.

Document shape: {"plugins": ["name", "path/to/manifest.json", ...]}

Every mutation is load, modify, rewrite the whole file. Two processes
mutating the registry at once are not coordinated; the last writer wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from grail.defaults import resolve_config_path, resolve_project_root
from grail.errors import RegistryDecodeError, StateWriteError, UsageError
from grail.fs import write_json

log = logging.getLogger(__name__)


class PluginRegistry:
    def __init__(self, project_root: str | Path | None = None) -> None:
        self.project_root = resolve_project_root(project_root)
        self.path = resolve_config_path(self.project_root)

    def load(self) -> list[str]:
        """Return the plugin list. Missing or unreadable file → []."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            log.debug("plugin registry %s not readable (%s); treating as empty", self.path, exc)
            return []
        except UnicodeDecodeError as exc:
            raise RegistryDecodeError(self.path, f"not UTF-8: {exc}") from exc

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RegistryDecodeError(self.path, str(exc)) from exc

        if raw is None:
            return []
        if not isinstance(raw, dict):
            raise RegistryDecodeError(self.path, "top-level value must be an object")
        plugins = raw.get("plugins")
        if plugins is None:
            return []
        if not isinstance(plugins, list) or not all(isinstance(p, str) for p in plugins):
            raise RegistryDecodeError(self.path, "'plugins' must be an array of strings")
        return list(plugins)

    def save(self, entries: list[str]) -> None:
        try:
            write_json(self.path, {"plugins": list(entries)})
        except OSError as exc:
            raise StateWriteError(self.path, exc) from exc
        log.debug("wrote %d plugin(s) to %s", len(entries), self.path)

    def add(self, entry: str) -> bool:
        """Append entry unless already present. Returns True if appended."""
        if not entry:
            raise UsageError("usage: grailx plugins add <name|path>")
        entries = self.load()
        if entry in entries:
            return False
        entries.append(entry)
        self.save(entries)
        return True

    def remove(self, entry: str) -> bool:
        """Drop every occurrence of entry. Returns True if anything was removed."""
        if not entry:
            raise UsageError("usage: grailx plugins rm <name|path>")
        entries = self.load()
        kept = [e for e in entries if e != entry]
        self.save(kept)
        return len(kept) != len(entries)
