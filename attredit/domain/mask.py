"""Module: mask.py

Author: Michael Economou
Date: 2026-02-02

Mask compilation for bulk attribute changes.

A Mask is an (and_mask, or_mask) pair applied to a file's raw flags as
``new = (old & and_mask) | or_mask``. compile_mask() derives it from the
selection state and the bulk mode chosen in the dialog:

- SET_ALL: every mutable attribute takes the displayed checked state.
- SET_MARKED: only bulk-selected attributes take the displayed checked state.
- ADD_MARKED: bulk-selected attributes are set, whatever their checked state.
- CLEAR_MARKED: bulk-selected attributes are cleared, whatever their checked state.

Attributes that do not participate keep their current value on every file.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from attredit.config import FLAGS_MASK

if TYPE_CHECKING:
    from attredit.domain.selection import SelectionModel


class BulkMode(Enum):
    """How the selection is combined into a mask across marked files."""

    SET_ALL = "set_all"
    SET_MARKED = "set_marked"
    ADD_MARKED = "add_marked"
    CLEAR_MARKED = "clear_marked"


@dataclass(frozen=True)
class Mask:
    """Additive/subtractive bitmask applied to every file of a batch."""

    and_mask: int = FLAGS_MASK
    or_mask: int = 0

    def apply(self, flags: int) -> int:
        """Return the new flags for a file currently holding `flags`."""
        return ((flags & self.and_mask) | self.or_mask) & FLAGS_MASK

    def __str__(self) -> str:
        return f"Mask(and={self.and_mask:#010x}, or={self.or_mask:#010x})"


def compile_mask(selection: SelectionModel, mode: BulkMode) -> Mask:
    """Turn the selection state into a mask for `mode`.

    Pure and deterministic: the same selection and mode always give the
    same mask.

    Args:
        selection: Selection state of the mutable attributes.
        mode: Bulk mode chosen by the user.

    Returns:
        The compiled Mask.

    """
    and_mask = FLAGS_MASK
    or_mask = 0

    for definition, state in selection.states():
        if mode is not BulkMode.SET_ALL and not state.bulk_selected:
            continue

        if mode is BulkMode.CLEAR_MARKED:
            and_mask &= ~definition.bit_value
        elif mode is BulkMode.ADD_MARKED or state.checked:
            or_mask |= definition.bit_value
        else:
            and_mask &= ~definition.bit_value

    return Mask(and_mask=and_mask & FLAGS_MASK, or_mask=or_mask)
