"""Module: custom_message_dialog.py

Author: Michael Economou
Date: 2026-02-02

CustomMessageDialog, a small styled alternative to QMessageBox.

Shows a message with a row of text buttons; the text of the pressed button
is stored in `selected`. Used for plain error messages and as the base of
the write failure prompt.
"""

from attredit.core.pyqt_imports import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    Qt,
    QVBoxLayout,
    QWidget,
)
from attredit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class CustomMessageDialog(QDialog):
    """
    A custom-styled modal message dialog.
    """

    def __init__(
        self,
        title: str,
        message: str,
        buttons: list[str] | None = None,
        parent: QWidget | None = None,
    ):
        """
        Initialize a CustomMessageDialog.

        Parameters
        ----------
        title : str
            Dialog title
        message : str
            Dialog message
        buttons : list[str]
            List of button texts
        parent : QWidget, optional
            Parent widget

        Notes
        -----
        The dialog is modal and removes the window help button.
        Button text is used as the key to access the corresponding button
        in the instance's _buttons dictionary.
        """
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setWindowFlags(self.windowFlags() & ~Qt.WindowContextHelpButtonHint)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        self.label = QLabel(message)
        self.label.setWordWrap(True)
        layout.addWidget(self.label)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        self._buttons: dict[str, QPushButton] = {}
        for btn_text in buttons or []:
            btn = QPushButton(btn_text)
            btn.setFixedWidth(100)
            btn.clicked.connect(lambda _, b=btn_text: self._on_button(b))
            btn_layout.addWidget(btn)
            self._buttons[btn_text] = btn

        layout.addLayout(btn_layout)
        self.selected: str | None = None

    def _on_button(self, btn_text: str) -> None:
        """Remember the pressed button and close the dialog with acceptance."""
        self.selected = btn_text
        self.accept()

    @staticmethod
    def information(parent: QWidget | None, title: str, message: str, ok_text: str = "OK") -> None:
        """Show a modal message with a single OK button."""
        logger.debug("[CustomMessageDialog] %s: %s", title, message, extra={"dev_only": True})
        dlg = CustomMessageDialog(title, message, [ok_text], parent)
        dlg.exec_()
