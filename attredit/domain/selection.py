"""Module: selection.py

Author: Michael Economou
Date: 2026-02-02

Per-attribute selection state for the file shown in the editor.

Each mutable attribute carries two independent booleans:
- checked: the attribute is (or will be) set on the displayed file
- bulk_selected: the attribute takes part in the next bulk command

Loading a file resets `checked` from its live flags and keeps
`bulk_selected`, so bulk choices survive while walking marked files.
UI gestures arrive as explicit command messages (ToggleChecked,
ToggleBulk) and state changes are published through Observable signals.
"""

from __future__ import annotations

from dataclasses import dataclass

from attredit.config import FLAGS_MASK, PREVIEW_PLACEHOLDER
from attredit.domain.attributes import AttributeCatalog, AttributeDefinition
from attredit.utils.events import Observable, Signal
from attredit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass
class SelectionState:
    """Runtime state of one mutable attribute."""

    checked: bool = False
    bulk_selected: bool = False


@dataclass(frozen=True)
class ToggleChecked:
    """Flip the checked state of one attribute on the displayed file."""

    code: str


@dataclass(frozen=True)
class ToggleBulk:
    """Flip whether one attribute takes part in bulk commands."""

    code: str


SelectionCommand = ToggleChecked | ToggleBulk


class SelectionModel(Observable):
    """Selection state of all mutable attributes plus the pending flags.

    `flags` holds the full raw flags of the displayed file, including bits
    of attributes that are not editable, with the user's toggles applied.
    """

    checked_changed = Signal(str, bool)  # code, checked
    bulk_changed = Signal(str, bool)  # code, bulk_selected
    preview_changed = Signal(str)  # preview string

    def __init__(self, catalog: AttributeCatalog, placeholder: str = PREVIEW_PLACEHOLDER):
        """Create the state table for the mutable attributes of `catalog`."""
        super().__init__()
        self.catalog = catalog
        self.placeholder = placeholder
        self._states: dict[str, SelectionState] = {
            definition.code: SelectionState() for definition in catalog.mutable()
        }
        self._flags = 0
        self.flags_changed = False

    # =====================================
    # Accessors
    # =====================================

    @property
    def flags(self) -> int:
        """Pending flags of the displayed file."""
        return self._flags

    @property
    def preview(self) -> str:
        """Preview string of the pending flags, in catalog order."""
        return self.catalog.format_flags(self._flags, self.placeholder)

    def state(self, code: str) -> SelectionState:
        """Return the state of a mutable attribute.

        Raises:
            KeyError: If `code` is unknown or not mutable.

        """
        return self._states[code]

    def states(self) -> list[tuple[AttributeDefinition, SelectionState]]:
        """Mutable definitions paired with their state, in catalog order."""
        return [(d, self._states[d.code]) for d in self.catalog.mutable()]

    def bulk_selected_codes(self) -> list[str]:
        """Codes currently selected for bulk commands, in catalog order."""
        return [d.code for d, s in self.states() if s.bulk_selected]

    # =====================================
    # State changes
    # =====================================

    def load_flags(self, flags: int) -> None:
        """Show a new file: reset `checked` from its flags, keep bulk choices."""
        self._flags = flags & FLAGS_MASK
        self.flags_changed = False
        for definition, state in self.states():
            state.checked = definition.is_set(self._flags)

        logger.debug(
            "[SelectionModel] Loaded flags %#010x (%s)",
            self._flags,
            self.preview,
            extra={"dev_only": True},
        )
        self.preview_changed.emit(self.preview)

    def toggle_checked(self, code: str) -> bool:
        """Flip one attribute on the displayed file and return the new checked value."""
        state = self.state(code)
        definition = self.catalog.get(code)

        self._flags ^= definition.bit_value
        state.checked = definition.is_set(self._flags)
        self.flags_changed = True

        self.checked_changed.emit(code, state.checked)
        self.preview_changed.emit(self.preview)
        return state.checked

    def toggle_bulk(self, code: str) -> bool:
        """Flip bulk participation of one attribute and return the new value.

        Does not touch `checked` or the pending flags.
        """
        state = self.state(code)
        state.bulk_selected = not state.bulk_selected
        self.bulk_changed.emit(code, state.bulk_selected)
        return state.bulk_selected

    def set_bulk_selected(self, code: str, selected: bool) -> None:
        """Set bulk participation explicitly."""
        if self.state(code).bulk_selected != selected:
            self.toggle_bulk(code)

    def handle(self, command: SelectionCommand) -> bool:
        """Apply a command message and return the resulting boolean state.

        Raises:
            TypeError: For an unknown command type.

        """
        if isinstance(command, ToggleChecked):
            return self.toggle_checked(command.code)
        if isinstance(command, ToggleBulk):
            return self.toggle_bulk(command.code)
        raise TypeError(f"Unsupported selection command: {command!r}")
