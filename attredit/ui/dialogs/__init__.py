"""Dialogs used by the chattr command."""

from attredit.ui.dialogs.chattr_dialog import ChattrDialog
from attredit.ui.dialogs.custom_message_dialog import CustomMessageDialog
from attredit.ui.dialogs.write_failure_dialog import WriteFailureDialog

__all__ = ["ChattrDialog", "CustomMessageDialog", "WriteFailureDialog"]
