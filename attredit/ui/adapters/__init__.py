"""Qt adapters implementing the application ports."""

from attredit.ui.adapters.qt_user_interaction import QtInteractionAdapter

__all__ = ["QtInteractionAdapter"]
