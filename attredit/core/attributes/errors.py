"""Module: errors.py

Author: Michael Economou
Date: 2026-02-02

Errors that abort a whole chattr command.

Per-file problems (a file vanished, a write was refused) never surface as
exceptions past the batch applier; they become BatchOutcome values.
"""

import os


class ChattrError(Exception):
    """Base class for errors that end a chattr command."""


class FatalPreconditionError(ChattrError):
    """Attribute changes are impossible for the targets (non-local filesystem, platform)."""


class AttributeReadError(ChattrError):
    """The flags of the file opening the command could not be read."""

    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f'Cannot get flags of "{path}"\n{describe_os_error(error)}')


def describe_os_error(error: OSError) -> str:
    """Human-readable text for an OSError, preferring the system message."""
    if error.strerror:
        return error.strerror
    if error.errno:
        return os.strerror(error.errno)
    return str(error) or error.__class__.__name__
