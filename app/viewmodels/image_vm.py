"""Lightweight view model for the image under the cursor."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ImageVM:
    """Expose convenient properties for bindings/templates."""

    path: str
    is_pinned: bool
    is_skipped: bool

    @property
    def file_name(self) -> str:
        """Base name of the file path."""
        return Path(self.path).name

    @property
    def folder_path(self) -> str:
        """Folder portion of the file path."""
        return str(Path(self.path).parent)

    @property
    def status_text(self) -> str:
        """Badge text: "PINNED", "SKIPPED" or empty."""
        if self.is_pinned:
            return "PINNED"
        if self.is_skipped:
            return "SKIPPED"
        return ""
