"""Core service interfaces and shared data structures.

This module defines the result dataclasses returned by batch operations and
the small protocols the catalog and sorting services depend on, so that
`core` never imports from `infrastructure`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol


@dataclass
class CopyFailure:
    """A single file that could not be copied.

    Attributes:
        filename: Basename of the pinned file.
        message: Reason reported by the copy primitive.
    """

    filename: str
    message: str


@dataclass
class CopyResult:
    """Outcome of copying the pinned set to a destination.

    Attributes:
        copied: Files copied successfully.
        total: Number of pinned names, regardless of outcome.
        errors: Per-file failures, in pinned order.
    """

    copied: int
    total: int
    errors: list[CopyFailure] = field(default_factory=list)

    @property
    def missing(self) -> int:
        """Pinned names that were neither copied nor failed (absent at the source)."""
        return self.total - self.copied - len(self.errors)


class MarkLookup(Protocol):
    """Read-only view of pin/skip membership keyed by basename."""

    def is_pinned(self, filename: str) -> bool:
        """Return True if `filename` is pinned."""
        raise NotImplementedError

    def is_skipped(self, filename: str) -> bool:
        """Return True if `filename` is skipped."""
        raise NotImplementedError


class DateReader(Protocol):
    """Returns the capture timestamp of an image, or None when unavailable."""

    def __call__(self, path: str) -> datetime | None:
        raise NotImplementedError
