"""Utilities for EXIF date extraction and content digests.

Date extraction is best-effort and never raises; callers should expect `None`
when a timestamp is not available.
"""

from __future__ import annotations

from datetime import datetime
import hashlib
import os
from pathlib import Path
from typing import Any

from loguru import logger
from PIL import Image

from core.constants import EXIF_EXTENSIONS

EXIF_DT_FMT = "%Y:%m:%d %H:%M:%S"
# EXIF tag 36867 is DateTimeOriginal, 306 is DateTime
_TAG_DATETIME_ORIGINAL = 36867
_TAG_DATETIME = 306
_EXIF_IFD = 0x8769


def parse_exif_datetime(value: Any) -> datetime | None:
    """Parse an EXIF date string such as ``"2023:05:01 14:02:11"``.

    Returns None if the value is empty or invalid.
    """
    if not value:
        return None
    text = value.decode("ascii", errors="ignore") if isinstance(value, bytes) else str(value)
    text = text.strip().rstrip("\x00")
    try:
        if len(text) >= 19 and text[4] == ":" and text[7] == ":":
            return datetime.strptime(text[:19], EXIF_DT_FMT)
        return datetime.fromisoformat(text.replace("/", "-"))
    except ValueError:
        return None


def get_exif_datetime_original(path: str) -> datetime | None:
    """Extract the capture time of a JPEG/TIFF via Pillow.

    Only files whose extension is in `EXIF_EXTENSIONS` are opened. Missing
    tags, unreadable files and malformed values all yield None.
    """
    if os.path.splitext(path)[1].lower() not in EXIF_EXTENSIONS:
        return None

    try:
        with Image.open(path) as im:
            exif = im.getexif()
            if not exif:
                return None
            # DateTimeOriginal normally lives in the Exif sub-IFD
            val = exif.get_ifd(_EXIF_IFD).get(_TAG_DATETIME_ORIGINAL)
            val = val or exif.get(_TAG_DATETIME_ORIGINAL) or exif.get(_TAG_DATETIME)
            return parse_exif_datetime(val)
    except (OSError, Image.DecompressionBombError, ValueError, TypeError, SyntaxError) as ex:
        logger.debug("EXIF read failed for {}: {}", path, ex)
        return None


def compute_digest(data: bytes) -> str:
    """Return the SHA-256 hex digest of `data`."""
    return hashlib.sha256(data).hexdigest()


def compute_file_digest(file_path: str | Path) -> str:
    """Return the SHA-256 hex digest of the file at `file_path`."""
    h = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()
