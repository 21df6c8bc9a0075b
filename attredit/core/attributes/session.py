"""Module: session.py

Author: Michael Economou
Date: 2026-02-02

State of one chattr command invocation.

Everything that lives for exactly one command (selection, cursor, the
"ignore all" switch, the last mask, the history of per-file results) is
kept here and created afresh by every ChattrCommand.run().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from attredit.config import PREVIEW_PLACEHOLDER
from attredit.core.attributes.data_classes import ApplyItem
from attredit.core.attributes.file_cursor import FileCursor
from attredit.domain.selection import SelectionModel

if TYPE_CHECKING:
    from attredit.app.ports import FileListingPort
    from attredit.domain.attributes import AttributeCatalog
    from attredit.domain.mask import Mask


@dataclass
class ChattrSession:
    """Invocation-scoped context shared by the command loop and the applier."""

    catalog: AttributeCatalog
    listing: FileListingPort
    selection: SelectionModel
    cursor: FileCursor
    ignore_all: bool = False
    mask: Mask | None = None
    history: list[ApplyItem] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        catalog: AttributeCatalog,
        listing: FileListingPort,
        placeholder: str = PREVIEW_PLACEHOLDER,
    ) -> ChattrSession:
        """Start a session with a fresh selection and a cursor at the top of the listing."""
        return cls(
            catalog=catalog,
            listing=listing,
            selection=SelectionModel(catalog, placeholder),
            cursor=FileCursor(listing),
        )
