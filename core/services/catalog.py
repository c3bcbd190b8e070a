"""Ordered, skip-aware, circular image catalog with a cursor.

The catalog holds absolute image paths in display order and an index into
them. Marks are looked up by basename through a `MarkLookup` (normally the
directory's `MetadataStore`) on every navigation step, so marking changes made
between steps are always honored.

Every search is two bounded scans: one strictly past the cursor, then, only if
that finds nothing, one over the whole range from the opposite boundary. The
second scan may land on the cursor itself. There is never a third pass.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import os

from core.services.interfaces import MarkLookup


class ImageCatalog:
    """Navigable sequence of image paths for one directory."""

    def __init__(self, paths: Iterable[str], marks: MarkLookup) -> None:
        self._paths: list[str] = list(paths)
        self._marks = marks
        self._index = 0

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._paths))

    @property
    def size(self) -> int:
        return len(self._paths)

    @property
    def is_empty(self) -> bool:
        return not self._paths

    @property
    def index(self) -> int:
        """Cursor position; meaningless when the catalog is empty."""
        return self._index

    @property
    def position(self) -> int:
        """1-based cursor position, or 0 when empty."""
        return self._index + 1 if self._paths else 0

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._paths)

    def current(self) -> str | None:
        """Return the path under the cursor, or None when empty."""
        if not self._paths:
            return None
        return self._paths[self._index]

    def _is_visible(self, index: int) -> bool:
        return not self._marks.is_skipped(os.path.basename(self._paths[index]))

    def _is_pinned(self, index: int) -> bool:
        return self._marks.is_pinned(os.path.basename(self._paths[index]))

    def _scan_forward(self, accept: Callable[[int], bool]) -> int | None:
        count = len(self._paths)
        for i in range(self._index + 1, count):
            if accept(i):
                return i
        # Wrap: one full pass from the start, which may end on the cursor
        for i in range(count):
            if accept(i):
                return i
        return None

    def _scan_backward(self, accept: Callable[[int], bool]) -> int | None:
        count = len(self._paths)
        for i in range(self._index - 1, -1, -1):
            if accept(i):
                return i
        for i in range(count - 1, -1, -1):
            if accept(i):
                return i
        return None

    def _move_to(self, index: int | None) -> str | None:
        if index is None:
            return None
        self._index = index
        return self._paths[index]

    def navigate_next(self) -> str | None:
        """Move to the next non-skipped image, wrapping at the end.

        Returns:
            The new current path, or None if the catalog is empty or every
            entry is skipped (the cursor is left unchanged).
        """
        if not self._paths:
            return None
        return self._move_to(self._scan_forward(self._is_visible))

    def navigate_prev(self) -> str | None:
        """Move to the previous non-skipped image, wrapping at the start."""
        if not self._paths:
            return None
        return self._move_to(self._scan_backward(self._is_visible))

    def navigate_forward(self, steps: int) -> str | None:
        """Apply `navigate_next` `steps` times and return the current path."""
        for _ in range(steps):
            self.navigate_next()
        return self.current()

    def navigate_backward(self, steps: int) -> str | None:
        """Apply `navigate_prev` `steps` times and return the current path."""
        for _ in range(steps):
            self.navigate_prev()
        return self.current()

    def navigate_next_pinned(self) -> str | None:
        """Move to the next pinned image, wrapping; no-op if nothing is pinned."""
        if not self._paths:
            return None
        return self._move_to(self._scan_forward(self._is_pinned))

    def navigate_prev_pinned(self) -> str | None:
        """Move to the previous pinned image, wrapping; no-op if nothing is pinned."""
        if not self._paths:
            return None
        return self._move_to(self._scan_backward(self._is_pinned))

    def jump_to_file(self, path: str | None) -> bool:
        """Point the cursor at `path`, matched exactly first and by basename second.

        Returns:
            True if the file was found; otherwise the cursor is unchanged.
        """
        if not path:
            return False
        try:
            idx = self._paths.index(path)
        except ValueError:
            name = os.path.basename(path)
            idx = next(
                (i for i, p in enumerate(self._paths) if os.path.basename(p) == name), None
            )
        if idx is None:
            return False
        self._index = idx
        return True

    def remove_current(self) -> str | None:
        """Drop the entry under the cursor and return its path.

        The cursor stays on the same index, which now holds the following
        entry; if the removed entry was last it moves to the new last entry.
        """
        if not self._paths:
            return None
        removed = self._paths.pop(self._index)
        if self._paths and self._index >= len(self._paths):
            self._index = len(self._paths) - 1
        elif not self._paths:
            self._index = 0
        return removed

    def remove(self, path: str) -> bool:
        """Drop `path` wherever it is, keeping the cursor on the same image.

        Returns:
            True if `path` was in the catalog.
        """
        try:
            idx = self._paths.index(path)
        except ValueError:
            return False
        if idx == self._index:
            self.remove_current()
            return True
        del self._paths[idx]
        if idx < self._index:
            self._index -= 1
        return True
