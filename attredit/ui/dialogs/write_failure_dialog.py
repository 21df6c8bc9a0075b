"""Module: write_failure_dialog.py

Author: Michael Economou
Date: 2026-02-02

Prompt shown when the attributes of a file cannot be written.

Options:
- Ignore: skip this file
- Ignore all: skip this file and every later failure of the command
- Retry: try the same write again
- Cancel: stop, leaving this and the remaining files marked
"""

from attredit.app.ports import WriteDecision
from attredit.config import WRITE_FAILURE_BUTTONS, WRITE_FAILURE_DIALOG_TITLE
from attredit.core.pyqt_imports import QDialog, QWidget
from attredit.ui.dialogs.custom_message_dialog import CustomMessageDialog
from attredit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

DECISIONS = dict(
    zip(
        WRITE_FAILURE_BUTTONS,
        [
            WriteDecision.IGNORE,
            WriteDecision.IGNORE_ALL,
            WriteDecision.RETRY,
            WriteDecision.CANCEL,
        ],
        strict=True,
    )
)


class WriteFailureDialog(CustomMessageDialog):
    """Ask how to continue after a failed attribute write."""

    def __init__(self, filename: str, error_message: str, parent: QWidget | None = None):
        """Initialize the prompt.

        Args:
            filename: Name of the file that could not be changed
            error_message: Description of the system error
            parent: Parent widget

        """
        message = f'Cannot chattr "{filename}"\n{error_message}'
        super().__init__(
            title=WRITE_FAILURE_DIALOG_TITLE,
            message=message,
            buttons=WRITE_FAILURE_BUTTONS,
            parent=parent,
        )

        default = self._buttons[WRITE_FAILURE_BUTTONS[0]]
        default.setDefault(True)
        default.setFocus()

    def get_decision(self) -> WriteDecision:
        """Execute the dialog and return the user's choice.

        Closing the dialog without pressing a button counts as Cancel.
        """
        result = self.exec_()

        if result == QDialog.Rejected or self.selected is None:
            decision = WriteDecision.CANCEL
        else:
            decision = DECISIONS[self.selected]

        logger.info("[WriteFailureDialog] User chose: %s", decision.value)
        return decision

    @staticmethod
    def ask(filename: str, error_message: str, parent: QWidget | None = None) -> WriteDecision:
        """Show the prompt (convenience method)."""
        dialog = WriteFailureDialog(filename, error_message, parent)
        return dialog.get_decision()
