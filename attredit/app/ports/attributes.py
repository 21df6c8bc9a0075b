"""Attribute provider, file listing and locality ports.

Author: Michael Economou
Date: 2026-02-02
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from attredit.domain.attributes import AttributeDefinition
    from attredit.models.file_entry import FileEntry


@runtime_checkable
class AttributeProviderPort(Protocol):
    """Platform access to the attribute flags of a single file."""

    def describe_attributes(self) -> list[AttributeDefinition]:
        """Return the attributes this platform supports, in display order."""
        ...

    def read_flags(self, path: str) -> int:
        """Return the raw flags of `path`.

        Raises:
            OSError: If the flags cannot be read (missing file, no support, ...).

        """
        ...

    def write_flags(self, path: str, flags: int) -> None:
        """Replace the raw flags of `path`.

        Raises:
            OSError: If the flags cannot be written (EPERM, EOPNOTSUPP, ...).

        """
        ...


class FileListingPort(Protocol):
    """Ordered file listing with a marked bit per entry."""

    current_index: int

    def __len__(self) -> int: ...

    def entry(self, index: int) -> FileEntry:
        """Return the entry at `index`."""
        ...

    def is_marked(self, index: int) -> bool: ...

    def next_marked(self, start: int = 0) -> int | None:
        """Index of the first marked entry at or after `start`, or None."""
        ...

    def clear_mark(self, index: int) -> None: ...

    @property
    def marked_count(self) -> int: ...


@runtime_checkable
class LocalityCheckerPort(Protocol):
    """Decide whether attribute operations are possible on a path."""

    def is_local(self, path: str) -> bool:
        """Return True if `path` lives on a local filesystem."""
        ...
