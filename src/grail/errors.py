"""Error taxonomy for grail.

Missing files are never an error: the store and the registry recover them
as empty defaults. Everything below reaches the CLI, which prints the
message to stderr and exits 1.
"""

from __future__ import annotations

from pathlib import Path


class GrailError(Exception):
    """Base class for every failure grail reports to the user."""


class DecodeError(GrailError, ValueError):
    """A document exists but is not valid JSON of the expected shape."""

    kind = "document"

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Corrupt {self.kind} {self.path}: {reason}")


class ManifestDecodeError(DecodeError):
    kind = "manifest"


class RegistryDecodeError(DecodeError):
    kind = "plugin registry"


class StateWriteError(GrailError):
    """A state file (manifest or registry) could not be written."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        super().__init__(f"cannot write {self.path}: {cause}")


class UsageError(GrailError):
    """A required argument was missing or empty."""


class NotInitialized(GrailError):
    """Aggregation produced no commands, env hints or schemas."""

    def __init__(self, message: str = "no manifests found; run 'grailx init' first") -> None:
        super().__init__(message)
