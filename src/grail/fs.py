"""Filesystem helpers — atomic writes and JSON reads for grail's state files."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def atomic_write_file(path: str | Path, content: str) -> Path:
    """Write content to path atomically (write-to-temp, then rename).

    Creates missing parent directories. Returns the final path.
    """
    path = Path(path)
    d = path.parent
    d.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=d, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
    return path


def write_json(path: str | Path, data: Any) -> Path:
    """Rewrite a whole JSON file atomically, 2-space indented."""
    return atomic_write_file(path, json.dumps(data, indent=2) + "\n")

