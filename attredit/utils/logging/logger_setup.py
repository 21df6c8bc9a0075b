"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-02-02

ConfigureLogger sets up application-wide logging on the root logger.
INFO and higher go to the console, the configured file level goes to
<log_name>.log and, when enabled, DEBUG and higher go to <log_name>_debug.log.
"""

import contextlib
import logging
import os
import sys

from attredit.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from attredit.utils.logging.logger_file_helper import add_file_handler
from attredit.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """Configure application-wide logging on the root logger."""

    def __init__(
        self,
        log_name: str = "app",
        log_dir: str = "logs",
        console_enabled: bool = LOG_TO_CONSOLE,
        file_enabled: bool = LOG_TO_FILE,
    ):
        """Initialize and configure the root logger.

        Handlers are only installed once; a second ConfigureLogger in the same
        process leaves the existing configuration untouched.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            console_enabled (bool): Whether to log to stdout.
            file_enabled (bool): Whether to log to rotating files.

        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self.log_dir = log_dir

        if self.logger.hasHandlers():
            return

        if console_enabled:
            self._setup_console_handler(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))

        if file_enabled:
            add_file_handler(
                self.logger,
                os.path.join(log_dir, f"{log_name}.log"),
                level=getattr(logging, LOG_FILE_LEVEL, logging.INFO),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )

            if LOG_DEBUG_FILE_ENABLED:
                add_file_handler(
                    self.logger,
                    os.path.join(log_dir, f"{log_name}_debug.log"),
                    level=logging.DEBUG,
                    max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                    backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
                )

    def _setup_console_handler(self, level: int):
        """Set up console handler with UTF-8-safe output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)
