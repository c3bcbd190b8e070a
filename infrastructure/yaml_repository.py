"""YAML persistence for per-directory pin/skip metadata.

The file `<directory>/imgview_meta.yml` holds two top-level lists, `pinned`
and `skipped`. Saves are guarded by a SHA-256 digest of the file contents as
last seen by the record: if the file changed on disk since then, the save is
refused with `ConcurrentModificationError` unless forced.
"""

from __future__ import annotations

import os
from pathlib import Path
import tempfile
from typing import Any

from loguru import logger
import yaml

from core.constants import META_FILE
from core.errors import ConcurrentModificationError, MetadataSaveError
from core.models import MetadataRecord
from core.services.metadata_store import MetadataStore
from infrastructure.utils import compute_digest, compute_file_digest


def metadata_path(directory: str | Path) -> str:
    """Return the metadata file path for `directory`."""
    return os.path.join(str(directory), META_FILE)


def _as_name_list(value: Any) -> list[str]:
    """Coerce a YAML value to a list of names; null becomes empty."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


def _parse(raw: bytes) -> tuple[list[str], list[str]]:
    """Parse raw file bytes into `(pinned, skipped)`.

    Raises:
        yaml.YAMLError: If the content is not valid YAML.
        ValueError: If the top level is not a mapping.
    """
    data = yaml.safe_load(raw.decode("utf-8")) if raw.strip() else None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping at top level, got {type(data).__name__}")
    return _as_name_list(data.get("pinned")), _as_name_list(data.get("skipped"))


def _serialize(record: MetadataRecord) -> bytes:
    data = {"pinned": list(record.pinned), "skipped": list(record.skipped)}
    text = yaml.safe_dump(data, allow_unicode=True, sort_keys=False, default_flow_style=False)
    return text.encode("utf-8")


class YamlMetadataRepository:
    """Load and save `MetadataRecord` in YAML format."""

    def __init__(self) -> None:
        self.last_load_error: str | None = None

    def load(self, path: str) -> MetadataRecord:
        """Read the record stored at `path`.

        A missing file yields an empty record with no digest. An unreadable or
        malformed file is logged, remembered in `last_load_error`, and also
        yields an empty record with no digest, so a session can always start.
        """
        self.last_load_error = None
        if not os.path.exists(path):
            return MetadataRecord()

        try:
            with open(path, "rb") as f:
                raw = f.read()
            pinned, skipped = _parse(raw)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError) as ex:
            self.last_load_error = str(ex)
            logger.warning("Failed to load metadata {}: {}", path, ex)
            return MetadataRecord()

        record = MetadataRecord(pinned=pinned, skipped=skipped, source_digest=compute_digest(raw))
        logger.info(
            "Metadata loaded: {} ({} pinned, {} skipped)", path, len(pinned), len(skipped)
        )
        return record

    def save(self, path: str, record: MetadataRecord, force: bool = False) -> None:
        """Write `record` to `path` and update `record.source_digest`.

        Args:
            path: Metadata file path.
            record: Record to persist.
            force: Skip the external-modification check.

        Raises:
            ConcurrentModificationError: The file on disk no longer matches
                `record.source_digest`; nothing was written.
            MetadataSaveError: The file could not be written.
        """
        if not force and record.source_digest is not None and os.path.exists(path):
            try:
                on_disk = compute_file_digest(path)
            except OSError as ex:
                raise MetadataSaveError(path, str(ex)) from ex
            if on_disk != record.source_digest:
                logger.warning("Refusing to overwrite externally modified metadata: {}", path)
                raise ConcurrentModificationError(path, record.source_digest, on_disk)

        payload = _serialize(record)
        # Write to a uniquely named sibling temp file, then replace the target in one step
        temp_path: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=os.path.dirname(os.path.abspath(path)),
                prefix=f"{os.path.basename(path)}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                temp_path = f.name
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, path)
        except OSError as ex:
            try:
                if temp_path is not None and os.path.exists(temp_path):
                    os.remove(temp_path)
            except OSError as cleanup_ex:
                logger.debug("Could not remove temp file {}: {}", temp_path, cleanup_ex)
            logger.error("Failed to save metadata {}: {}", path, ex)
            raise MetadataSaveError(path, str(ex)) from ex

        record.source_digest = compute_digest(payload)
        logger.info(
            "Metadata saved: {} ({} pinned, {} skipped{})",
            path,
            len(record.pinned),
            len(record.skipped),
            ", forced" if force else "",
        )

    def load_store(self, path: str) -> MetadataStore:
        """Load `path` straight into a `MetadataStore`."""
        return MetadataStore.from_record(self.load(path))

    def save_store(self, path: str, store: MetadataStore, force: bool = False) -> None:
        """Persist `store` and adopt the new digest on success."""
        record = store.to_record()
        self.save(path, record, force=force)
        store.source_digest = record.source_digest
