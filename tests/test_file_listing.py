"""Module: test_file_listing.py

Tests for FileListing, FileEntry and FileCursor.
"""

from attredit.core.attributes.file_cursor import FileCursor
from attredit.models.file_entry import FileEntry
from attredit.models.file_listing import FileListing


def test_file_entry_filename():
    assert FileEntry("/data/photos/a.jpg").filename == "a.jpg"
    assert FileEntry("/data/photos/").filename == "photos"


def test_from_paths_marking():
    assert FileListing.from_paths(["/a", "/b"]).marked_count == 0
    listing = FileListing.from_paths(["/a", "/b"], mark_all=True)
    assert listing.marked_count == 2
    assert listing.marked_paths() == ["/a", "/b"]


def test_marked_count_tracks_changes():
    listing = FileListing.from_paths(["/a", "/b", "/c"])
    listing.set_mark(1, True)
    listing.set_mark(1, True)
    assert listing.marked_count == 1
    listing.clear_mark(1)
    listing.clear_mark(1)
    assert listing.marked_count == 0


def test_next_marked():
    listing = FileListing([FileEntry("/a"), FileEntry("/b", True), FileEntry("/c", True)])
    assert listing.next_marked() == 1
    assert listing.next_marked(2) == 2
    assert listing.next_marked(3) is None


def test_current_entry():
    listing = FileListing.from_paths(["/a", "/b"])
    listing.current_index = 1
    assert listing.current.path == "/b"


class TestFileCursor:
    def test_walks_marked_entries_in_order(self, three_marked):
        cursor = FileCursor(three_marked)
        seen = []
        while (index := cursor.seek()) is not None:
            seen.append(three_marked.entry(index).path)
            cursor.finish(index)
        assert seen == ["/data/f1", "/data/f2", "/data/f3"]
        assert three_marked.marked_count == 0
        assert cursor.seek() is None

    def test_seek_stays_on_unfinished_entry(self, three_marked):
        cursor = FileCursor(three_marked)
        assert cursor.seek() == 0
        assert cursor.seek() == 0

    def test_never_moves_backwards(self):
        listing = FileListing.from_paths(["/a", "/b", "/c"], mark_all=True)
        cursor = FileCursor(listing)
        cursor.finish(cursor.seek())
        assert cursor.seek() == 1
        listing.set_mark(0, True)
        assert cursor.seek() == 1
        assert cursor.index == 1

    def test_finish_clears_mark(self, three_marked):
        cursor = FileCursor(three_marked)
        cursor.finish(1)
        assert not three_marked.is_marked(1)
        assert three_marked.marked_count == 2

    def test_cursor_only_walks_and_finishes(self):
        public = {name for name in dir(FileCursor) if not name.startswith("_")}
        assert public == {"index", "seek", "finish"}
