"""Core domain models for culling metadata."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MetadataRecord:
    """Snapshot of one directory's pin/skip marks as exchanged with storage.

    Attributes:
        pinned: Basenames marked "keep", in the order they were pinned.
        skipped: Basenames marked "reject", in the order they were skipped.
        source_digest: SHA-256 of the backing file as last read or written,
            or None if this record was never loaded from or saved to disk.
    """

    pinned: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    source_digest: str | None = None
