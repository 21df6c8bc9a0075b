"""Batch attribute-mutation engine.

Author: Michael Economou
Date: 2026-02-02
"""

from attredit.core.attributes.batch_applier import BatchApplier, BatchOutcome, BatchState
from attredit.core.attributes.data_classes import ApplyItem, BatchResult
from attredit.core.attributes.errors import (
    AttributeReadError,
    ChattrError,
    FatalPreconditionError,
)
from attredit.core.attributes.file_cursor import FileCursor
from attredit.core.attributes.session import ChattrSession

__all__ = [
    "ApplyItem",
    "AttributeReadError",
    "BatchApplier",
    "BatchOutcome",
    "BatchResult",
    "BatchState",
    "ChattrError",
    "ChattrSession",
    "FatalPreconditionError",
    "FileCursor",
]
