"""Module: locality.py

Author: Michael Economou
Date: 2026-02-02

Decide whether a path lives on a local filesystem, using the mount table
reported by psutil. Network and remote filesystems (NFS, SMB, sshfs, ...)
are rejected before any attribute is touched.
"""

import os

import psutil

from attredit.config import NON_LOCAL_FILESYSTEM_TYPES
from attredit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class PsutilLocalityChecker:
    """Classify paths by the filesystem type of their mount point."""

    def __init__(self, non_local_types: frozenset[str] = NON_LOCAL_FILESYSTEM_TYPES):
        self.non_local_types = non_local_types
        self._mounts: list[tuple[str, str]] | None = None

    def _load_mounts(self) -> list[tuple[str, str]]:
        """(mountpoint, fstype) pairs, longest mount point first."""
        if self._mounts is None:
            mounts = [
                (os.path.normpath(part.mountpoint), part.fstype.lower())
                for part in psutil.disk_partitions(all=True)
            ]
            self._mounts = sorted(mounts, key=lambda m: len(m[0]), reverse=True)
            logger.debug(
                "[PsutilLocalityChecker] %d mount points loaded",
                len(self._mounts),
                extra={"dev_only": True},
            )
        return self._mounts

    def filesystem_type(self, path: str) -> str | None:
        """Filesystem type of the mount holding `path`, or None if unknown."""
        real_path = os.path.realpath(path)
        for mountpoint, fstype in self._load_mounts():
            if real_path == mountpoint or real_path.startswith(mountpoint.rstrip(os.sep) + os.sep):
                return fstype
        return None

    def is_local(self, path: str) -> bool:
        fstype = self.filesystem_type(path)
        if fstype is None:
            logger.debug(
                "[PsutilLocalityChecker] No mount found for %s, assuming local",
                path,
                extra={"dev_only": True},
            )
            return True
        return fstype not in self.non_local_types
