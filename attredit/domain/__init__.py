"""Domain layer: attribute catalog, selection state and mask compilation.

Pure Python, no Qt and no filesystem access.
"""

from attredit.domain.attributes import AttributeCatalog, AttributeDefinition
from attredit.domain.mask import BulkMode, Mask, compile_mask
from attredit.domain.selection import (
    SelectionModel,
    SelectionState,
    ToggleBulk,
    ToggleChecked,
)

__all__ = [
    "AttributeCatalog",
    "AttributeDefinition",
    "BulkMode",
    "Mask",
    "SelectionModel",
    "SelectionState",
    "ToggleBulk",
    "ToggleChecked",
    "compile_mask",
]
