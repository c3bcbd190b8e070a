"""Process-wide, read-only configuration constants."""

from __future__ import annotations

from datetime import datetime

# Extensions are compared lower-cased, including the leading dot
SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
    {".jpg", ".jpeg", ".png", ".webp", ".tiff", ".tif", ".bmp"}
)
EXIF_EXTENSIONS: frozenset[str] = frozenset({".jpg", ".jpeg", ".tiff", ".tif"})

META_FILE = "imgview_meta.yml"

# Entries without a capture timestamp sort after every dated entry
FAR_FUTURE = datetime(9999, 1, 1)
