"""Sorting service for image catalogs.

Images are ordered by capture timestamp first, with undated images after all
dated ones, and by a natural (digit-aware, case-insensitive) basename order.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
import os
import re

from core.constants import FAR_FUTURE
from core.services.interfaces import DateReader

_DIGITS_RE = re.compile(r"(\d+)")

NaturalKey = tuple[str | int, ...]


def natural_sort_key(filename: str) -> NaturalKey:
    """Split a lower-cased name into alternating text and integer runs.

    `re.split` with a capturing group always yields text at even positions and
    digits at odd positions, so two keys never compare str against int.
    """
    parts = _DIGITS_RE.split(filename.lower())
    return tuple(int(part) if i % 2 else part for i, part in enumerate(parts))


class SortService:
    """Provides the catalog ordering for lists of image paths."""

    def sort_key(
        self, path: str, date_reader: DateReader | None = None
    ) -> tuple[datetime, NaturalKey]:
        """Return the `(timestamp or FAR_FUTURE, natural key)` tuple for `path`."""
        taken = date_reader(path) if date_reader is not None else None
        if taken is not None and taken.tzinfo is not None:
            # Mixed aware/naive datetimes cannot be compared
            taken = taken.replace(tzinfo=None)
        return (taken or FAR_FUTURE, natural_sort_key(os.path.basename(path)))

    def sort_paths(
        self,
        paths: Iterable[str],
        date_reader: DateReader | None = None,
    ) -> list[str]:
        """Return `paths` sorted by capture date then natural name.

        Args:
            paths: Image paths to order.
            date_reader: Optional callable returning a capture timestamp for a
                path. Each path is read exactly once.
        """
        decorated = [(self.sort_key(p, date_reader), p) for p in paths]
        decorated.sort(key=lambda x: x[0])
        return [p for _, p in decorated]
