"""Module: linux_flags.py

Author: Michael Economou
Date: 2026-02-02

Linux attribute provider based on the FS_IOC_GETFLAGS / FS_IOC_SETFLAGS
ioctls (the interface behind lsattr/chattr).

Only regular files and directories are supported; anything else fails
with EOPNOTSUPP, like chattr does.
"""

import errno
import fcntl
import os
import stat
import struct

from attredit.config import FLAGS_MASK, LINUX_USER_MODIFIABLE_FLAGS
from attredit.domain.attributes import AttributeDefinition
from attredit.infra.filesystem.attribute_tables import LINUX_ATTRIBUTE_TABLE
from attredit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_IOC_READ = 2
_IOC_WRITE = 1
# The ioctl numbers encode sizeof(long); the kernel transfers an int
_LONG_SIZE = struct.calcsize("l")
_FLAGS_FORMAT = "I"


def _ioc(direction: int, number: int) -> int:
    return (direction << 30) | (_LONG_SIZE << 16) | (ord("f") << 8) | number


FS_IOC_GETFLAGS = _ioc(_IOC_READ, 1)
FS_IOC_SETFLAGS = _ioc(_IOC_WRITE, 2)


class LinuxFlagsProvider:
    """Read and write Linux inode flags through ioctl."""

    def __init__(self, modifiable_mask: int = LINUX_USER_MODIFIABLE_FLAGS):
        self.modifiable_mask = modifiable_mask

    def describe_attributes(self) -> list[AttributeDefinition]:
        """Linux attribute table, mutable where the modifiable mask allows."""
        return [
            AttributeDefinition(
                bit_value=bit,
                code=code,
                label=label,
                mutable=(bit & self.modifiable_mask) != 0,
            )
            for bit, code, label in LINUX_ATTRIBUTE_TABLE
        ]

    def read_flags(self, path: str) -> int:
        fd = self._open(path)
        try:
            buffer = fcntl.ioctl(fd, FS_IOC_GETFLAGS, struct.pack(_FLAGS_FORMAT, 0))
        finally:
            os.close(fd)
        return struct.unpack(_FLAGS_FORMAT, buffer[: struct.calcsize(_FLAGS_FORMAT)])[0]

    def write_flags(self, path: str, flags: int) -> None:
        fd = self._open(path)
        try:
            fcntl.ioctl(fd, FS_IOC_SETFLAGS, struct.pack(_FLAGS_FORMAT, flags & FLAGS_MASK))
        finally:
            os.close(fd)
        logger.debug("[LinuxFlagsProvider] %s <- %#010x", path, flags, extra={"dev_only": True})

    @staticmethod
    def _open(path: str) -> int:
        mode = os.stat(path).st_mode
        if not (stat.S_ISREG(mode) or stat.S_ISDIR(mode)):
            raise OSError(errno.EOPNOTSUPP, os.strerror(errno.EOPNOTSUPP), path)
        return os.open(path, os.O_RDONLY | os.O_NONBLOCK)
