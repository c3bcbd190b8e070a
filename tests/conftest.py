"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

from loguru import logger
from PIL import Image
import pytest

from core.services.catalog import ImageCatalog
from core.services.metadata_store import MetadataStore

FIVE_IMAGES = [f"/photos/img{i}.jpg" for i in range(1, 6)]


@pytest.fixture
def store() -> MetadataStore:
    """An empty metadata store."""
    return MetadataStore()


@pytest.fixture
def catalog(store: MetadataStore) -> ImageCatalog:
    """A catalog of img1..img5 backed by `store`, cursor on img1."""
    return ImageCatalog(FIVE_IMAGES, store)


@pytest.fixture
def image_dir(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory creating a directory of placeholder files.

    Files are written with dummy bytes; they are not valid images, which is
    enough for listing, copying and for EXIF reads to fall back to "no date".
    """

    def _make(*names: str, subdir: str = "shoot") -> Path:
        directory = tmp_path / subdir
        directory.mkdir(parents=True, exist_ok=True)
        for name in names:
            (directory / name).write_bytes(f"data:{name}".encode())
        return directory

    return _make


def write_jpeg(path: Path, taken: str | None = None, original: str | None = None) -> Path:
    """Write a small real JPEG.

    `taken` goes to IFD0 DateTime (306); `original` goes to DateTimeOriginal
    (36867) inside the Exif sub-IFD (0x8769), where cameras record it.
    """
    img = Image.new("RGB", (8, 8), "white")
    exif = Image.Exif()
    if taken is not None:
        exif[306] = taken
    if original is not None:
        exif[0x8769] = {36867: original}
    if len(exif):
        img.save(path, "JPEG", exif=exif)
    else:
        img.save(path, "JPEG")
    return path


def write_oversized_jpeg(path: Path, side: int = 60000) -> Path:
    """Write a JPEG whose SOF0 header claims `side` x `side` pixels."""
    write_jpeg(path)
    data = bytearray(path.read_bytes())
    sof = data.index(b"\xff\xc0")
    # SOF0: marker(2) length(2) precision(1) height(2) width(2)
    data[sof + 5 : sof + 7] = side.to_bytes(2, "big")
    data[sof + 7 : sof + 9] = side.to_bytes(2, "big")
    path.write_bytes(bytes(data))
    return path


@pytest.fixture
def log_records() -> Iterator[list[dict]]:
    """Capture loguru records emitted during the test."""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
