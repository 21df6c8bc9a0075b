"""Models: file entries and the in-memory marked file listing."""

from attredit.models.file_entry import FileEntry
from attredit.models.file_listing import FileListing

__all__ = ["FileEntry", "FileListing"]
