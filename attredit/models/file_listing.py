"""
Module: file_listing.py

Author: Michael Economou
Date: 2026-02-02

In-memory ordered file listing with marked entries.

Plays the role of a file manager panel: it owns the entries and their
marked bits, keeps a running marked count and knows which entry has focus
(`current_index`) when nothing is marked.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from attredit.models.file_entry import FileEntry
from attredit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class FileListing:
    """Ordered list of FileEntry objects."""

    def __init__(self, entries: Iterable[FileEntry] = (), current_index: int = 0):
        self._entries: list[FileEntry] = list(entries)
        self._marked_count = sum(1 for e in self._entries if e.marked)
        self.current_index = current_index

    @classmethod
    def from_paths(cls, paths: Iterable[str], mark_all: bool = False) -> FileListing:
        """Build a listing from paths, optionally marking all of them."""
        return cls(FileEntry(path=p, marked=mark_all) for p in paths)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self._entries)

    def entry(self, index: int) -> FileEntry:
        return self._entries[index]

    @property
    def current(self) -> FileEntry:
        """Entry with focus."""
        return self._entries[self.current_index]

    @property
    def marked_count(self) -> int:
        return self._marked_count

    def is_marked(self, index: int) -> bool:
        return self._entries[index].marked

    def marked_paths(self) -> list[str]:
        return [e.path for e in self._entries if e.marked]

    def next_marked(self, start: int = 0) -> int | None:
        """Index of the first marked entry at or after `start`, or None."""
        for index in range(max(start, 0), len(self._entries)):
            if self._entries[index].marked:
                return index
        return None

    def set_mark(self, index: int, marked: bool) -> None:
        """Mark or unmark one entry, keeping the marked count in sync."""
        entry = self._entries[index]
        if entry.marked == marked:
            return
        entry.marked = marked
        self._marked_count += 1 if marked else -1
        logger.debug(
            "[FileListing] %s %s (%d marked)",
            "Marked" if marked else "Unmarked",
            entry.filename,
            self._marked_count,
            extra={"dev_only": True},
        )

    def clear_mark(self, index: int) -> None:
        self.set_mark(index, False)
