"""ViewModel for one culling session over a single directory."""

from __future__ import annotations

import os

from loguru import logger

from app.viewmodels.image_vm import ImageVM
from core.errors import ConcurrentModificationError, MetadataSaveError
from core.services.catalog import ImageCatalog
from core.services.interfaces import CopyResult
from core.services.metadata_store import MetadataStore
from infrastructure.catalog_builder import CatalogBuilder
from infrastructure.copy_service import FileCopier
from infrastructure.yaml_repository import YamlMetadataRepository, metadata_path


class SessionVM:
    """Main culling view-model.

    Mediates between the metadata repository, the catalog and the copier so a
    front end only forwards user intents (next, pin, skip, copy...).
    """

    def __init__(
        self,
        repo: YamlMetadataRepository | None = None,
        builder: CatalogBuilder | None = None,
        copier: FileCopier | None = None,
        autosave: bool = True,
        advance_after_skip: bool = True,
    ) -> None:
        """Create a SessionVM.

        Args:
            repo: Metadata repository (defaults to `YamlMetadataRepository`).
            builder: Catalog builder (defaults to `CatalogBuilder`).
            copier: Pinned-file copier (defaults to `FileCopier`).
            autosave: Save metadata after every marking action.
            advance_after_skip: Move to the next image after `skip_current`.
        """
        self._repo = repo or YamlMetadataRepository()
        self._builder = builder or CatalogBuilder()
        self._copier = copier or FileCopier()
        self._autosave = autosave
        self._advance_after_skip = advance_after_skip
        self.directory: str | None = None
        self.store = MetadataStore()
        self.catalog = ImageCatalog([], self.store)
        self.metadata_warning: str | None = None
        self.has_conflict = False

    def open_directory(self, directory: str, initial_file: str | None = None) -> None:
        """Load metadata and images for `directory`."""
        self.directory = os.path.abspath(directory)
        self.store = self._repo.load_store(metadata_path(self.directory))
        self.metadata_warning = self._repo.last_load_error
        self.has_conflict = False
        self.catalog = self._builder.build(self.directory, self.store, initial_file=initial_file)
        logger.info(
            "Session opened: {} ({} images, {} pinned, {} skipped)",
            self.directory,
            self.catalog.size,
            self.store.pinned_count,
            self.store.skipped_count,
        )

    def reload(self) -> None:
        """Rebuild the catalog, keeping the current image selected if it still exists."""
        if self.directory is None:
            return
        self.catalog = self._builder.build(
            self.directory, self.store, initial_file=self.catalog.current()
        )

    def _current_name(self) -> str | None:
        path = self.catalog.current()
        return os.path.basename(path) if path else None

    def toggle_pin_current(self) -> bool | None:
        """Toggle the pin on the current image; None when there is no image."""
        name = self._current_name()
        if name is None:
            return None
        pinned = self.store.toggle_pinned(name)
        self._after_mutation()
        return pinned

    def skip_current(self) -> str | None:
        """Skip the current image and (by default) advance to the next one."""
        name = self._current_name()
        if name is None:
            return None
        self.store.mark_skipped(name)
        self._after_mutation()
        if self._advance_after_skip:
            self.catalog.navigate_next()
        return self.catalog.current()

    def unskip_current(self) -> None:
        name = self._current_name()
        if name is None:
            return
        self.store.unmark_skipped(name)
        self._after_mutation()

    def clear_pins(self) -> None:
        self.store.clear_pinned()
        self._after_mutation()

    def forget_current(self) -> str | None:
        """Drop the current image after it was deleted outside the session."""
        path = self.catalog.remove_current()
        if path is None:
            return None
        self.store.remove_file(os.path.basename(path))
        self._after_mutation()
        return path

    def _after_mutation(self) -> None:
        if self._autosave:
            self.save()

    def next(self) -> str | None:
        return self.catalog.navigate_next()

    def prev(self) -> str | None:
        return self.catalog.navigate_prev()

    def forward(self, steps: int) -> str | None:
        return self.catalog.navigate_forward(steps)

    def backward(self, steps: int) -> str | None:
        return self.catalog.navigate_backward(steps)

    def next_pinned(self) -> str | None:
        return self.catalog.navigate_next_pinned()

    def prev_pinned(self) -> str | None:
        return self.catalog.navigate_prev_pinned()

    def jump_to(self, path: str) -> bool:
        return self.catalog.jump_to_file(path)

    def save(self, force: bool = False) -> bool:
        """Persist the metadata for the current directory.

        Returns:
            True on success. On an external modification `has_conflict` is
            set and nothing is written; call again with `force=True` once the
            user confirms overwriting.
        """
        if self.directory is None:
            return False
        try:
            self._repo.save_store(metadata_path(self.directory), self.store, force=force)
        except ConcurrentModificationError as ex:
            logger.warning("Save refused: {}", ex)
            self.has_conflict = True
            return False
        except MetadataSaveError as ex:
            logger.error("Save failed: {}", ex)
            return False
        self.has_conflict = False
        return True

    def existing_in(self, dest_dir: str) -> list[str]:
        """Pinned names that would be overwritten in `dest_dir`."""
        return self._copier.check_existing(self.store, dest_dir)

    def copy_pinned_to(self, dest_dir: str) -> CopyResult:
        """Copy pinned images of the current directory to `dest_dir`."""
        if self.directory is None:
            return CopyResult(copied=0, total=self.store.pinned_count)
        return self._copier.copy_pinned(self.store, self.directory, dest_dir)

    def current_image(self) -> ImageVM | None:
        path = self.catalog.current()
        if path is None:
            return None
        name = os.path.basename(path)
        return ImageVM(
            path=path, is_pinned=self.store.is_pinned(name), is_skipped=self.store.is_skipped(name)
        )

    @property
    def position_text(self) -> str:
        """Cursor position as "n/total", empty when there are no images."""
        if self.catalog.is_empty:
            return ""
        return f"{self.catalog.position}/{self.catalog.size}"

    @staticmethod
    def summary_text(result: CopyResult) -> str:
        """Human-readable summary of a copy batch."""
        text = f"Copied {result.copied} of {result.total} pinned files."
        if result.errors:
            text += f" {len(result.errors)} failed."
        return text
