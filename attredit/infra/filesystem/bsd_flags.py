"""Module: bsd_flags.py

Author: Michael Economou
Date: 2026-02-02

BSD/macOS attribute provider based on st_flags and os.chflags().

The catalog contains the flags whose constants the interpreter's stat
module provides. System (SF_*) flags can only be changed by the
super-user, so they are mutable only when running as root.
"""

import os
import stat

from attredit.domain.attributes import AttributeDefinition
from attredit.infra.filesystem.attribute_tables import BSD_ATTRIBUTE_TABLE, BSD_READ_ONLY_FLAGS


class BsdFlagsProvider:
    """Read and write BSD file flags."""

    def __init__(self, is_superuser: bool | None = None):
        if is_superuser is None:
            is_superuser = hasattr(os, "geteuid") and os.geteuid() == 0
        self.is_superuser = is_superuser

    def describe_attributes(self) -> list[AttributeDefinition]:
        definitions = []
        for constant, code, label, superuser_only in BSD_ATTRIBUTE_TABLE:
            bit = getattr(stat, constant, None)
            if not bit:
                continue
            mutable = constant not in BSD_READ_ONLY_FLAGS and (
                self.is_superuser or not superuser_only
            )
            definitions.append(AttributeDefinition(bit, code, label, mutable))
        return definitions

    def read_flags(self, path: str) -> int:
        return os.lstat(path).st_flags

    def write_flags(self, path: str, flags: int) -> None:
        os.chflags(path, flags, follow_symlinks=False)
