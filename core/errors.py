"""Error types raised by metadata persistence."""

from __future__ import annotations


class MetadataError(Exception):
    """Base class for metadata persistence errors."""


class ConcurrentModificationError(MetadataError):
    """The metadata file changed on disk since it was last loaded or saved.

    Nothing is written when this is raised. Callers decide whether to retry
    with ``force=True`` (after asking the user) or to abandon the save.
    """

    def __init__(self, path: str, expected_digest: str | None, actual_digest: str) -> None:
        self.path = path
        self.expected_digest = expected_digest
        self.actual_digest = actual_digest
        super().__init__(f"Metadata file was modified externally: {path}")


class MetadataSaveError(MetadataError):
    """Writing the metadata file failed; the original error is chained."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save metadata to {path}: {reason}")
