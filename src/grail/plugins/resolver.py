"""Map a plugin reference to a manifest file location."""

from __future__ import annotations

from pathlib import Path

from grail.defaults import MANIFEST_SUFFIX, PLUGINS_DIR_NAME, has_manifest_suffix


def resolve_plugin_path(entry: str, project_root: str | Path) -> Path:
    """Resolve a registry entry. Never fails; a bad location just won't load.

    - `*.json` (any case): absolute paths unchanged, relative ones joined
      to the project root.
    - anything else is a bare name: <root>/plugins/<name>.json
    """
    root = Path(project_root)
    if has_manifest_suffix(entry):
        path = Path(entry)
        return path if path.is_absolute() else root / path
    return root / PLUGINS_DIR_NAME / f"{entry}{MANIFEST_SUFFIX}"
