"""Module: file_cursor.py

Author: Michael Economou
Date: 2026-02-02

FileCursor walks the marked entries of a file listing in listing order.

The cursor never moves backwards. Finishing an entry clears its mark in the
listing, so the marked count shrinks by one per processed file until the
batch is exhausted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from attredit.app.ports import FileListingPort


class FileCursor:
    """Forward-only cursor over the marked entries of a listing."""

    def __init__(self, listing: FileListingPort, start: int = 0):
        self._listing = listing
        self._index = start

    @property
    def index(self) -> int:
        """Position of the cursor (may point at an unmarked entry until seek())."""
        return self._index

    def seek(self) -> int | None:
        """Move to the next marked entry at or after the cursor.

        Returns:
            Index of that entry, or None when no marked entry is left.

        """
        index = self._listing.next_marked(self._index)
        if index is not None:
            self._index = index
        return index

    def finish(self, index: int) -> None:
        """Mark the entry at `index` as processed (clears its mark)."""
        self._listing.clear_mark(index)
