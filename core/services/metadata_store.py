"""In-memory pin/skip marks for a single directory.

`MetadataStore` exclusively owns its two ordered lists. Callers only ever see
tuples or fresh `MetadataRecord` copies, so no outside reference can mutate
the store or break the rule that a name is never both pinned and skipped.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.models import MetadataRecord


def _unique(names: Iterable[str]) -> list[str]:
    """Return `names` without duplicates, keeping first occurrences."""
    seen: set[str] = set()
    result: list[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result


class MetadataStore:
    """Tracks which filenames are pinned (keep) and skipped (reject)."""

    def __init__(
        self,
        pinned: Iterable[str] = (),
        skipped: Iterable[str] = (),
        source_digest: str | None = None,
    ) -> None:
        self._pinned: list[str] = _unique(pinned)
        pinned_set = set(self._pinned)
        # A name listed in both stays pinned
        self._skipped: list[str] = [n for n in _unique(skipped) if n not in pinned_set]
        self.source_digest = source_digest

    @classmethod
    def from_record(cls, record: MetadataRecord) -> MetadataStore:
        """Build a store from a loaded record, copying its lists."""
        return cls(record.pinned, record.skipped, record.source_digest)

    def to_record(self) -> MetadataRecord:
        """Return a detached snapshot suitable for persistence."""
        return MetadataRecord(
            pinned=list(self._pinned),
            skipped=list(self._skipped),
            source_digest=self.source_digest,
        )

    @property
    def pinned(self) -> tuple[str, ...]:
        """Pinned basenames in pin order."""
        return tuple(self._pinned)

    @property
    def skipped(self) -> tuple[str, ...]:
        """Skipped basenames in skip order."""
        return tuple(self._skipped)

    @property
    def pinned_count(self) -> int:
        return len(self._pinned)

    @property
    def skipped_count(self) -> int:
        return len(self._skipped)

    def is_pinned(self, filename: str) -> bool:
        return filename in self._pinned

    def is_skipped(self, filename: str) -> bool:
        return filename in self._skipped

    def toggle_pinned(self, filename: str) -> bool:
        """Pin `filename` if it is not pinned, otherwise unpin it.

        Returns:
            True if the file is pinned after the call.
        """
        if filename in self._pinned:
            self._pinned.remove(filename)
            return False
        self._pinned.append(filename)
        if filename in self._skipped:
            self._skipped.remove(filename)
        return True

    def mark_skipped(self, filename: str) -> None:
        """Skip `filename`, unpinning it if needed."""
        if filename not in self._skipped:
            self._skipped.append(filename)
        if filename in self._pinned:
            self._pinned.remove(filename)

    def unmark_skipped(self, filename: str) -> None:
        if filename in self._skipped:
            self._skipped.remove(filename)

    def remove_file(self, filename: str) -> None:
        """Forget every mark for `filename` (e.g., after it was deleted)."""
        if filename in self._pinned:
            self._pinned.remove(filename)
        if filename in self._skipped:
            self._skipped.remove(filename)

    def clear_pinned(self) -> None:
        self._pinned.clear()
