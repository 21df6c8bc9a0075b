"""Platform attribute providers and filesystem checks.

Author: Michael Economou
Date: 2026-02-02
"""

import sys

from attredit.core.attributes.errors import FatalPreconditionError
from attredit.infra.filesystem.locality import PsutilLocalityChecker


def get_attribute_provider(platform: str = sys.platform):
    """Return the attribute provider for `platform`.

    Raises:
        FatalPreconditionError: If the platform has no attribute flags support.

    """
    if platform.startswith("linux"):
        from attredit.infra.filesystem.linux_flags import LinuxFlagsProvider

        return LinuxFlagsProvider()

    if platform == "darwin" or "bsd" in platform:
        from attredit.infra.filesystem.bsd_flags import BsdFlagsProvider

        return BsdFlagsProvider()

    raise FatalPreconditionError(f"File attributes are not supported on {platform}")


__all__ = ["PsutilLocalityChecker", "get_attribute_provider"]
