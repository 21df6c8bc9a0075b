"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-02-02

Logger factory with caching.
Keeps a single logger instance per module name behind a lock.
"""

import logging
import threading

from attredit.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger factory with caching."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance

        """
        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)

            return cls._loggers[name]

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Return the names of all cached loggers."""
        return list(cls._loggers.keys())


def get_cached_logger(name: str) -> logging.Logger:
    """Convenience function for getting a cached logger.

    Args:
        name (str): Logger name

    Returns:
        logging.Logger: Cached logger instance

    """
    return LoggerFactory.get_logger(name)
