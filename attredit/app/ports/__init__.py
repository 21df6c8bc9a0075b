"""Ports - Protocol interfaces for the collaborators of the attribute engine.

- AttributeProviderPort: read/write raw attribute flags, describe catalog
- FileListingPort: ordered listing with marked entries
- LocalityCheckerPort: is a path on a filesystem supporting attributes
- InteractionPort: dialogs (attribute form, error decision, messages)

Author: Michael Economou
Date: 2026-02-02
"""

from attredit.app.ports.attributes import (
    AttributeProviderPort,
    FileListingPort,
    LocalityCheckerPort,
)
from attredit.app.ports.user_interaction import BulkCommand, InteractionPort, WriteDecision

__all__ = [
    "AttributeProviderPort",
    "BulkCommand",
    "FileListingPort",
    "InteractionPort",
    "LocalityCheckerPort",
    "WriteDecision",
]
