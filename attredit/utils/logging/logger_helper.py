"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-02-02

Helpers for named loggers that log safely regardless of console encoding.

Functions:
    get_logger(name): Returns a patched logger propagating to the root logger.
    safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
    safe_log(logger_func, message): Logs a message, falling back to ASCII if needed.

DevOnlyFilter:
    Hides dev-only debug messages from the console while file logs keep them.
"""

import logging
import re
from functools import partial

from attredit.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "\u2192": "->",  # right arrow
    "\u2014": "--",  # em dash
    "\u2013": "-",  # en dash
    "\u2026": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text (str): The original text containing Unicode symbols.

    Returns:
        str: A version of the text with replacements for problematic characters.

    """
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def safe_log(logger_func, message: str, *args, **kwargs):
    """Log through `logger_func`, retrying with ASCII text on UnicodeEncodeError.

    Args:
        logger_func (Callable): A logger method like logger.info or logger.error.
        message (str): The message to log.

    """
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(str(message)), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger):
    """Replace the logger's logging methods with safe_log-wrapped versions."""
    for method_name in ["debug", "info", "warning", "error", "critical"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger delegating its output to the root logger.

    Args:
        name (str): Optional name for the logger

    Returns:
        logging.Logger: Configured and patched logger instance

    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)

    # Root logger owns the handlers (console + files)
    logger.propagate = True
    if logger.hasHandlers():
        logger.handlers.clear()

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    """Drop records flagged with extra={"dev_only": True} unless enabled in config."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
