"""Module: attredit.config

Author: Michael Economou
Date: 2026-02-02

Configuration package for attredit.

This package organizes configuration into logical modules:
- app: Application info, debug flags, logging
- attributes: Attribute masks, filesystem types, preview formatting
- ui: Dialog texts and sizes

All settings are re-exported from this module:
    from attredit.config import APP_NAME, PREVIEW_PLACEHOLDER
"""

from attredit.config.app import *  # noqa: F401, F403
from attredit.config.attributes import *  # noqa: F401, F403
from attredit.config.ui import *  # noqa: F401, F403
