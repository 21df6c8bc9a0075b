"""User interaction port for the attribute editor.

Lets the command loop and the batch applier ask the user for decisions
without importing Qt.

Author: Michael Economou
Date: 2026-02-02
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from attredit.domain.attributes import AttributeCatalog
    from attredit.domain.selection import SelectionModel


class WriteDecision(Enum):
    """User answer to a failed attribute write."""

    IGNORE = "ignore"
    IGNORE_ALL = "ignore_all"
    RETRY = "retry"
    CANCEL = "cancel"


class BulkCommand(Enum):
    """Button pressed in the attribute dialog."""

    SET_ALL = "set_all"
    MARKED_ALL = "marked_all"
    SET_MARKED = "set_marked"
    CLEAR_MARKED = "clear_marked"
    SET = "set"
    CANCEL = "cancel"


class InteractionPort(Protocol):
    """Dialogs needed by the attribute engine."""

    def run_attribute_dialog(
        self,
        path: str,
        selection: SelectionModel,
        catalog: AttributeCatalog,
        multiple: bool,
    ) -> BulkCommand:
        """Show the checkbox form for `path` and return the button pressed.

        The dialog drives `selection` through its commands while it is open.

        Args:
            path: File being displayed.
            selection: Selection state, already loaded with the file's flags.
            catalog: Attributes to show (mutable ones get a checkbox).
            multiple: True when several files are marked; bulk buttons are shown.

        """
        ...

    def ask_write_failure(self, path: str, error: OSError) -> WriteDecision:
        """Ask what to do after writing the flags of `path` failed."""
        ...

    def show_error(self, title: str, message: str) -> None:
        """Show a plain error message."""
        ...
