"""
Module: file_entry.py

Author: Michael Economou
Date: 2026-02-02

FileEntry is one row of a file listing: a path and whether the user has
marked it for a batch operation.
"""

import os
from dataclasses import dataclass


@dataclass
class FileEntry:
    """A file in the listing."""

    path: str
    marked: bool = False

    @property
    def filename(self) -> str:
        """Just the file name, for messages and dialog titles."""
        return os.path.basename(self.path.rstrip(os.sep)) or self.path

    def __str__(self) -> str:
        return f"FileEntry({self.filename}{', marked' if self.marked else ''})"
