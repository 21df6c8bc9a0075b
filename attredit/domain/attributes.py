"""Module: attributes.py

Author: Michael Economou
Date: 2026-02-02

Attribute definitions and the ordered catalog the editor works from.

The catalog is not a fixed table: platform providers describe the flags
they support (see attredit.infra.filesystem) and the catalog is built from
that list once at startup. Catalog order is the display order and the order
of characters in the preview string.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from attredit.config import FLAGS_MASK, PREVIEW_PLACEHOLDER


@dataclass(frozen=True)
class AttributeDefinition:
    """A single filesystem attribute flag.

    Attributes:
        bit_value: The flag bit (unsigned 32-bit).
        code: Single-letter code used in the preview string (lsattr style).
        label: Human-readable name shown next to the checkbox.
        mutable: Whether the platform lets a user change this bit.

    """

    bit_value: int
    code: str
    label: str
    mutable: bool = True

    def __post_init__(self) -> None:
        if len(self.code) != 1:
            raise ValueError(f"Attribute code must be a single character: {self.code!r}")
        if not 0 < self.bit_value <= FLAGS_MASK:
            raise ValueError(f"Attribute bit out of 32-bit range: {self.bit_value:#x}")

    def is_set(self, flags: int) -> bool:
        """Return True if this attribute is set in `flags`."""
        return (flags & self.bit_value) != 0


class AttributeCatalog:
    """Ordered, read-only collection of attribute definitions."""

    def __init__(self, definitions: Iterable[AttributeDefinition]):
        """Build the catalog, keeping the given order.

        Raises:
            ValueError: If two definitions share a code.

        """
        self._definitions: tuple[AttributeDefinition, ...] = tuple(definitions)
        self._by_code: dict[str, AttributeDefinition] = {}
        for definition in self._definitions:
            if definition.code in self._by_code:
                raise ValueError(f"Duplicate attribute code: {definition.code!r}")
            self._by_code[definition.code] = definition

    def __iter__(self) -> Iterator[AttributeDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __repr__(self) -> str:
        return f"AttributeCatalog({''.join(d.code for d in self._definitions)!r})"

    def get(self, code: str) -> AttributeDefinition:
        """Look up a definition by its code.

        Raises:
            KeyError: If the code is not in the catalog.

        """
        return self._by_code[code]

    @property
    def definitions(self) -> tuple[AttributeDefinition, ...]:
        return self._definitions

    def mutable(self) -> list[AttributeDefinition]:
        """Definitions the user may change, in catalog order."""
        return [d for d in self._definitions if d.mutable]

    def without(self, codes: Iterable[str]) -> AttributeCatalog:
        """Return a catalog without the given codes (unknown codes are ignored)."""
        hidden = set(codes)
        return AttributeCatalog(d for d in self._definitions if d.code not in hidden)

    def format_flags(self, flags: int, placeholder: str = PREVIEW_PLACEHOLDER) -> str:
        """Render `flags` as a preview string.

        Each catalog entry contributes its code when set and `placeholder`
        otherwise, e.g. "----ia------".
        """
        return "".join(d.code if d.is_set(flags) else placeholder for d in self._definitions)
