"""
Tests for copying pinned files.
"""

import shutil

import pytest

from core.services.metadata_store import MetadataStore
from infrastructure.copy_service import FileCopier


def _pinned(*names):
    store = MetadataStore()
    for name in names:
        store.toggle_pinned(name)
    return store


@pytest.fixture
def dest(tmp_path):
    path = tmp_path / "dest"
    path.mkdir()
    return path


class TestCheckExisting:
    def test_returns_only_existing_in_order(self, dest):
        (dest / "b.jpg").write_bytes(b"old")
        store = _pinned("a.jpg", "b.jpg", "c.jpg")
        assert FileCopier().check_existing(store, str(dest)) == ["b.jpg"]

    def test_nothing_pinned(self, dest):
        assert FileCopier().check_existing(MetadataStore(), str(dest)) == []


class TestCopyPinned:
    def test_copies_existing_and_counts_total(self, image_dir, dest):
        source = image_dir("a.jpg", "c.jpg", "unpinned.jpg")
        store = _pinned("a.jpg", "b.jpg", "c.jpg")
        result = FileCopier().copy_pinned(store, str(source), str(dest))
        assert result.copied == 2
        assert result.total == 3
        assert result.errors == []
        assert result.missing == 1
        assert (dest / "a.jpg").read_bytes() == b"data:a.jpg"
        assert not (dest / "unpinned.jpg").exists()

    def test_overwrites_destination(self, image_dir, dest):
        source = image_dir("a.jpg")
        (dest / "a.jpg").write_bytes(b"old")
        FileCopier().copy_pinned(_pinned("a.jpg"), str(source), str(dest))
        assert (dest / "a.jpg").read_bytes() == b"data:a.jpg"

    def test_failure_does_not_abort_batch(self, image_dir, dest, log_records):
        source = image_dir("a.jpg", "b.jpg", "c.jpg")

        def flaky_copy(src, dst):
            if src.endswith("b.jpg"):
                raise PermissionError("read-only destination")
            return shutil.copy2(src, dst)

        result = FileCopier(copy_func=flaky_copy).copy_pinned(
            _pinned("a.jpg", "b.jpg", "c.jpg"), str(source), str(dest)
        )
        assert result.copied == 2
        assert result.total == 3
        assert [e.filename for e in result.errors] == ["b.jpg"]
        assert "read-only" in result.errors[0].message
        assert (dest / "c.jpg").exists()
        assert any(r["level"].name == "WARNING" for r in log_records)

    def test_missing_destination_reports_each_file(self, image_dir, tmp_path):
        source = image_dir("a.jpg", "b.jpg")
        result = FileCopier().copy_pinned(
            _pinned("a.jpg", "b.jpg"), str(source), str(tmp_path / "absent")
        )
        assert result.copied == 0
        assert [e.filename for e in result.errors] == ["a.jpg", "b.jpg"]

    def test_empty_pinned_set(self, image_dir, dest):
        result = FileCopier().copy_pinned(MetadataStore(), str(image_dir("a.jpg")), str(dest))
        assert (result.copied, result.total, result.errors) == (0, 0, [])
