"""Builds an `ImageCatalog` from a directory on disk."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import os

from loguru import logger

from core.constants import SUPPORTED_EXTENSIONS
from core.services.catalog import ImageCatalog
from core.services.interfaces import DateReader, MarkLookup
from core.services.sort_service import SortService
from infrastructure.utils import get_exif_datetime_original


class CatalogBuilder:
    """Lists, filters and sorts the images of a directory.

    Args:
        lister: Returns entry names for a directory (default `os.listdir`).
        date_reader: Returns a capture timestamp for a path, or None.
        sorter: Sorting service (defaults to `SortService`).
    """

    def __init__(
        self,
        lister: Callable[[str], Iterable[str]] | None = None,
        date_reader: DateReader | None = None,
        sorter: SortService | None = None,
    ) -> None:
        self._lister = lister or os.listdir
        self._date_reader = date_reader or get_exif_datetime_original
        self._sorter = sorter or SortService()

    def build(
        self,
        directory: str | None,
        store: MarkLookup,
        supported_extensions: Iterable[str] = SUPPORTED_EXTENSIONS,
        initial_file: str | None = None,
    ) -> ImageCatalog:
        """Return the sorted catalog for `directory`.

        An absent or unreadable directory yields an empty catalog. The cursor
        starts on `initial_file` when it is found, else on the first image.
        """
        if not directory or not os.path.isdir(directory):
            logger.warning("Image directory not found: {}", directory)
            return ImageCatalog([], store)

        root = os.path.abspath(directory)
        try:
            names = list(self._lister(root))
        except OSError as ex:
            logger.warning("Cannot list {}: {}", root, ex)
            return ImageCatalog([], store)

        extensions = {e.lower() for e in supported_extensions}
        paths = [
            os.path.join(root, name)
            for name in names
            if os.path.splitext(name)[1].lower() in extensions
        ]
        catalog = ImageCatalog(self._sorter.sort_paths(paths, self._date_reader), store)
        if initial_file and not catalog.jump_to_file(initial_file):
            logger.debug("Initial file not in catalog: {}", initial_file)
        logger.info("Catalog built for {}: {} images", root, catalog.size)
        return catalog
