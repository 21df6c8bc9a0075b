"""Module: attredit.config.app

Author: Michael Economou
Date: 2026-02-02

Application-level configuration: app info, debug flags, logging settings.
"""

from attredit import __version__

# =====================================
# DEBUG SETTINGS
# =====================================

# Config reset - if True, deletes config.json on startup
DEBUG_RESET_CONFIG = False

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "attredit"
APP_VERSION = __version__
APP_AUTHOR = "Michael Economou"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_LEVEL = "INFO"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 2_000_000  # 2MB per file
LOG_FILE_BACKUP_COUNT = 3

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 5_000_000
LOG_DEBUG_FILE_BACKUP_COUNT = 2

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False

# =====================================
# CONFIG SAVE
# =====================================

CONFIG_SAVE_ON_DIALOG_CLOSE = True
