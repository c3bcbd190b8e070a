"""
Tests for cursor navigation over the image catalog.
"""

import os

from core.services.catalog import ImageCatalog
from core.services.metadata_store import MetadataStore
from conftest import FIVE_IMAGES


def _name(path):
    return os.path.basename(path) if path else None


class TestBasics:
    def test_starts_on_first_entry(self, catalog):
        assert catalog.index == 0
        assert catalog.position == 1
        assert _name(catalog.current()) == "img1.jpg"
        assert catalog.size == 5
        assert len(catalog) == 5
        assert not catalog.is_empty

    def test_empty_catalog(self, store):
        empty = ImageCatalog([], store)
        assert empty.is_empty
        assert empty.current() is None
        assert empty.position == 0
        assert empty.navigate_next() is None
        assert empty.navigate_prev() is None
        assert empty.navigate_next_pinned() is None
        assert empty.navigate_forward(3) is None
        assert empty.remove_current() is None

    def test_paths_is_a_copy(self, catalog):
        assert catalog.paths == tuple(FIVE_IMAGES)
        assert list(catalog) == FIVE_IMAGES


class TestSkipAwareNavigation:
    def test_next_skips_marked(self, catalog, store):
        store.mark_skipped("img2.jpg")
        store.mark_skipped("img3.jpg")
        assert _name(catalog.navigate_next()) == "img4.jpg"

    def test_prev_skips_marked(self, catalog, store):
        catalog.jump_to_file("img5.jpg")
        store.mark_skipped("img4.jpg")
        assert _name(catalog.navigate_prev()) == "img3.jpg"

    def test_wraps_forward_from_last(self, catalog):
        catalog.navigate_forward(4)
        assert _name(catalog.current()) == "img5.jpg"
        assert _name(catalog.navigate_next()) == "img1.jpg"

    def test_wraps_backward_from_first(self, catalog):
        assert _name(catalog.navigate_prev()) == "img5.jpg"

    def test_wrap_skips_marked_at_start(self, catalog, store):
        catalog.jump_to_file("img5.jpg")
        store.mark_skipped("img1.jpg")
        assert _name(catalog.navigate_next()) == "img2.jpg"

    def test_single_entry_wraps_to_itself(self, store):
        single = ImageCatalog(["/photos/only.jpg"], store)
        assert single.navigate_next() == "/photos/only.jpg"
        assert single.navigate_prev() == "/photos/only.jpg"
        assert single.index == 0

    def test_all_but_one_skipped_stays_put(self, catalog, store):
        catalog.jump_to_file("img3.jpg")
        for name in ["img1.jpg", "img2.jpg", "img4.jpg", "img5.jpg"]:
            store.mark_skipped(name)
        assert _name(catalog.navigate_next()) == "img3.jpg"
        assert _name(catalog.navigate_prev()) == "img3.jpg"
        assert catalog.index == 2

    def test_all_skipped_returns_none_without_moving(self, catalog, store):
        catalog.jump_to_file("img2.jpg")
        for path in FIVE_IMAGES:
            store.mark_skipped(_name(path))
        assert catalog.navigate_next() is None
        assert catalog.navigate_prev() is None
        assert catalog.index == 1

    def test_leaving_a_skipped_current_entry(self, catalog, store):
        store.mark_skipped("img1.jpg")
        assert _name(catalog.navigate_next()) == "img2.jpg"
        assert _name(catalog.navigate_prev()) == "img5.jpg"

    def test_forward_and_backward_steps(self, catalog, store):
        store.mark_skipped("img3.jpg")
        assert _name(catalog.navigate_forward(3)) == "img5.jpg"
        assert _name(catalog.navigate_backward(2)) == "img2.jpg"

    def test_forward_steps_wrap(self, catalog):
        assert _name(catalog.navigate_forward(7)) == "img3.jpg"

    def test_forward_zero_steps(self, catalog):
        assert _name(catalog.navigate_forward(0)) == "img1.jpg"


class TestPinnedNavigation:
    def test_cycles_through_pinned(self, catalog, store):
        store.toggle_pinned("img2.jpg")
        store.toggle_pinned("img4.jpg")
        assert _name(catalog.navigate_next_pinned()) == "img2.jpg"
        assert _name(catalog.navigate_next_pinned()) == "img4.jpg"
        assert _name(catalog.navigate_next_pinned()) == "img2.jpg"

    def test_prev_pinned_wraps(self, catalog, store):
        store.toggle_pinned("img2.jpg")
        store.toggle_pinned("img4.jpg")
        assert _name(catalog.navigate_prev_pinned()) == "img4.jpg"
        assert _name(catalog.navigate_prev_pinned()) == "img2.jpg"

    def test_only_current_pinned(self, catalog, store):
        store.toggle_pinned("img1.jpg")
        assert _name(catalog.navigate_next_pinned()) == "img1.jpg"

    def test_nothing_pinned_no_movement(self, catalog):
        catalog.jump_to_file("img3.jpg")
        assert catalog.navigate_next_pinned() is None
        assert catalog.navigate_prev_pinned() is None
        assert catalog.index == 2


class TestJump:
    def test_exact_path(self, catalog):
        assert catalog.jump_to_file("/photos/img4.jpg")
        assert catalog.index == 3

    def test_by_basename(self, catalog):
        assert catalog.jump_to_file("/elsewhere/img2.jpg")
        assert catalog.index == 1

    def test_unknown_leaves_cursor(self, catalog):
        catalog.jump_to_file("img3.jpg")
        assert not catalog.jump_to_file("/photos/nope.jpg")
        assert not catalog.jump_to_file(None)
        assert catalog.index == 2


class TestMarkingDoesNotMove:
    def test_toggle_and_skip_leave_cursor(self, catalog, store):
        catalog.jump_to_file("img3.jpg")
        store.toggle_pinned("img3.jpg")
        store.mark_skipped("img3.jpg")
        assert catalog.index == 2


class TestRemoval:
    def test_remove_middle_keeps_index(self, catalog):
        catalog.jump_to_file("img2.jpg")
        assert _name(catalog.remove_current()) == "img2.jpg"
        assert catalog.index == 1
        assert _name(catalog.current()) == "img3.jpg"

    def test_remove_last_clamps(self, catalog):
        catalog.jump_to_file("img5.jpg")
        catalog.remove_current()
        assert catalog.index == 3
        assert _name(catalog.current()) == "img4.jpg"

    def test_remove_only_entry(self, store):
        single = ImageCatalog(["/photos/only.jpg"], store)
        assert single.remove_current() == "/photos/only.jpg"
        assert single.is_empty
        assert single.current() is None

    def test_remove_before_cursor_keeps_image(self, catalog):
        catalog.jump_to_file("img4.jpg")
        assert catalog.remove("/photos/img1.jpg")
        assert _name(catalog.current()) == "img4.jpg"
        assert catalog.index == 2

    def test_remove_after_cursor(self, catalog):
        catalog.jump_to_file("img2.jpg")
        assert catalog.remove("/photos/img5.jpg")
        assert _name(catalog.current()) == "img2.jpg"
        assert catalog.size == 4

    def test_remove_unknown(self, catalog):
        assert not catalog.remove("/photos/nope.jpg")
        assert catalog.size == 5

    def test_marks_are_read_live(self):
        store = MetadataStore()
        catalog = ImageCatalog(FIVE_IMAGES, store)
        assert _name(catalog.navigate_next()) == "img2.jpg"
        store.mark_skipped("img3.jpg")
        assert _name(catalog.navigate_next()) == "img4.jpg"
