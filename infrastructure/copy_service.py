"""Batch copy of pinned images to a destination directory.

Copies are best-effort: each failure is recorded and the batch continues.
Pinned names that no longer exist in the source directory are left out
silently; they still count toward the total.
"""

from __future__ import annotations

from collections.abc import Callable
import os
import shutil

from loguru import logger

from core.services.interfaces import CopyFailure, CopyResult
from core.services.metadata_store import MetadataStore


class FileCopier:
    """Copies the pinned set of a `MetadataStore` between directories."""

    def __init__(self, copy_func: Callable[[str, str], object] | None = None) -> None:
        self._copy = copy_func or shutil.copy2

    def check_existing(self, store: MetadataStore, dest_dir: str) -> list[str]:
        """Return pinned names that already exist in `dest_dir`, in pin order."""
        return [name for name in store.pinned if os.path.exists(os.path.join(dest_dir, name))]

    def copy_pinned(self, store: MetadataStore, source_dir: str, dest_dir: str) -> CopyResult:
        """Copy every pinned file from `source_dir` to `dest_dir`, overwriting."""
        pinned = store.pinned
        copied = 0
        errors: list[CopyFailure] = []
        for name in pinned:
            src = os.path.join(source_dir, name)
            if not os.path.exists(src):
                logger.debug("Pinned file missing at source, skipped: {}", src)
                continue
            dest = os.path.join(dest_dir, name)
            try:
                self._copy(src, dest)
                copied += 1
            except OSError as ex:
                logger.warning("Failed to copy {} to {}: {}", src, dest, ex)
                errors.append(CopyFailure(filename=name, message=str(ex)))

        logger.info(
            "Copied {} of {} pinned files to {} ({} failed)",
            copied,
            len(pinned),
            dest_dir,
            len(errors),
        )
        return CopyResult(copied=copied, total=len(pinned), errors=errors)
