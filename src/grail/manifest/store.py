"""Read manifest documents from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from grail.defaults import has_manifest_suffix
from grail.errors import ManifestDecodeError
from grail.manifest.model import Manifest, ShapeError

log = logging.getLogger(__name__)


class ManifestStore:
    """Filesystem-backed manifest reader.

    The aggregator only calls load() and discover(), so tests can swap in
    any object with the same two methods.
    """

    def load(self, location: str | Path) -> Manifest:
        """Read the manifest at location.

        A missing or unreadable file, or an unusable path such as one with
        a NUL byte, gives an empty Manifest. A file that exists but is not
        a valid manifest raises ManifestDecodeError.
        """
        path = Path(location)
        try:
            raw_bytes = path.read_bytes()
        except (OSError, ValueError) as exc:
            log.debug("manifest %s not readable (%s); using empty manifest", path, exc)
            return Manifest()

        try:
            data = json.loads(raw_bytes.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise ManifestDecodeError(path, f"not UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ManifestDecodeError(path, str(exc)) from exc

        try:
            return Manifest.from_dict(data)
        except ShapeError as exc:
            raise ManifestDecodeError(path, str(exc)) from exc

    def discover(self, directory: str | Path) -> list[Path]:
        """List manifest files under directory, recursively, in lexical order.

        Entries of each directory are sorted by name; a subdirectory is
        walked at the point it sorts. Symlinked directories are not
        followed. Missing directories yield nothing.
        """
        found: list[Path] = []
        self._walk(Path(directory), found)
        return found

    def _walk(self, directory: Path, found: list[Path]) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError:
            return
        for entry in entries:
            if entry.is_symlink() and entry.is_dir():
                continue
            if entry.is_dir():
                self._walk(entry, found)
            elif has_manifest_suffix(entry.name):
                found.append(entry)
