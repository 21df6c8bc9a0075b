"""Module: chattr_dialog.py

Author: Michael Economou
Date: 2026-02-02

The attribute form shown for each file of the chattr command.

Layout:
- header: "<file name>: <preview>" (preview follows every toggle)
- one checkbox per mutable attribute, with the bulk marker column on the left
- bulk buttons (only when several files are marked), then Set and Cancel

Keys on a checkbox:
- Space: toggle the attribute on the displayed file
- T / t: toggle the bulk marker
- Insert: toggle the bulk marker and move to the next checkbox

The dialog does not hold any state of its own: every gesture is sent to the
SelectionModel as a command and the widgets are refreshed from its signals.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from attredit.app.ports import BulkCommand
from attredit.config import (
    BULK_BUTTONS,
    BULK_MARKER,
    CHATTR_DIALOG_MIN_WIDTH,
    CHATTR_DIALOG_TITLE,
    CONFIG_SAVE_ON_DIALOG_CLOSE,
    SINGLE_BUTTONS,
)
from attredit.core.pyqt_imports import (
    QCheckBox,
    QDialog,
    QEvent,
    QFont,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QObject,
    QPushButton,
    QRect,
    Qt,
    QVBoxLayout,
    QWidget,
)
from attredit.domain.selection import ToggleBulk, ToggleChecked
from attredit.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from attredit.domain.attributes import AttributeCatalog
    from attredit.domain.selection import SelectionModel
    from attredit.utils.shared.json_config_manager import JSONConfigManager

logger = get_cached_logger(__name__)

BULK_TOGGLE_KEYS = (Qt.Key_T, Qt.Key_Insert)


class ChattrDialog(QDialog):
    """Checkbox form for the attributes of one file."""

    def __init__(
        self,
        path: str,
        selection: SelectionModel,
        catalog: AttributeCatalog,
        multiple: bool = False,
        parent: QWidget | None = None,
        config_manager: JSONConfigManager | None = None,
    ):
        super().__init__(parent)
        self.path = path
        self.selection = selection
        self.catalog = catalog
        self.multiple = multiple
        self.config_manager = config_manager
        self.command = BulkCommand.CANCEL

        self.checkboxes: dict[str, QCheckBox] = {}
        self.markers: dict[str, QLabel] = {}
        self.buttons: dict[BulkCommand, QPushButton] = {}

        self.setWindowTitle(CHATTR_DIALOG_TITLE)
        self.setModal(True)
        self.setWindowFlags(self.windowFlags() & ~Qt.WindowContextHelpButtonHint)
        self.setMinimumWidth(CHATTR_DIALOG_MIN_WIDTH)

        self._setup_ui()
        self._connect_selection()
        self._restore_geometry()

    # =====================================
    # UI setup
    # =====================================

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        self.header = QLabel()
        header_font = QFont()
        header_font.setBold(True)
        self.header.setFont(header_font)
        self._update_header(self.selection.preview)
        layout.addWidget(self.header)

        grid = QGridLayout()
        grid.setHorizontalSpacing(6)
        grid.setVerticalSpacing(2)
        for row, (definition, state) in enumerate(self.selection.states()):
            marker = QLabel(BULK_MARKER if state.bulk_selected else "")
            marker.setFixedWidth(12)
            marker.setAlignment(Qt.AlignCenter)

            checkbox = QCheckBox(definition.label)
            checkbox.setChecked(state.checked)
            checkbox.setToolTip(definition.code)
            checkbox.clicked.connect(lambda _, c=definition.code: self._on_checkbox_clicked(c))
            checkbox.installEventFilter(self)

            grid.addWidget(marker, row, 0)
            grid.addWidget(checkbox, row, 1)
            self.markers[definition.code] = marker
            self.checkboxes[definition.code] = checkbox
        layout.addLayout(grid)

        if self.multiple:
            bulk_layout = QHBoxLayout()
            for text, value in BULK_BUTTONS:
                bulk_layout.addWidget(self._make_button(text, BulkCommand(value)))
            layout.addLayout(bulk_layout)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        for text, value in SINGLE_BUTTONS:
            btn_layout.addWidget(self._make_button(text, BulkCommand(value)))
        layout.addLayout(btn_layout)

        self.buttons[BulkCommand.SET].setDefault(True)
        if self.checkboxes:
            next(iter(self.checkboxes.values())).setFocus()

    def _make_button(self, text: str, command: BulkCommand) -> QPushButton:
        button = QPushButton(text)
        button.clicked.connect(lambda _, c=command: self._on_button(c))
        self.buttons[command] = button
        return button

    def _connect_selection(self) -> None:
        self.selection.checked_changed.connect(self._on_checked_changed)
        self.selection.bulk_changed.connect(self._on_bulk_changed)
        self.selection.preview_changed.connect(self._update_header)

    def _disconnect_selection(self) -> None:
        self.selection.checked_changed.disconnect(self._on_checked_changed)
        self.selection.bulk_changed.disconnect(self._on_bulk_changed)
        self.selection.preview_changed.disconnect(self._update_header)

    # =====================================
    # Selection updates
    # =====================================

    def _update_header(self, preview: str) -> None:
        self.header.setText(f"{os.path.basename(self.path)}: {preview}")

    def _on_checked_changed(self, code: str, checked: bool) -> None:
        checkbox = self.checkboxes.get(code)
        if checkbox is not None and checkbox.isChecked() != checked:
            checkbox.setChecked(checked)

    def _on_bulk_changed(self, code: str, selected: bool) -> None:
        marker = self.markers.get(code)
        if marker is not None:
            marker.setText(BULK_MARKER if selected else "")

    # =====================================
    # User input
    # =====================================

    def _on_checkbox_clicked(self, code: str) -> None:
        self.selection.handle(ToggleChecked(code))

    def toggle_bulk(self, code: str, advance: bool = False) -> None:
        """Toggle the bulk marker of `code`, optionally focusing the next checkbox."""
        self.selection.handle(ToggleBulk(code))
        if advance:
            codes = list(self.checkboxes)
            position = codes.index(code)
            if position + 1 < len(codes):
                self.checkboxes[codes[position + 1]].setFocus()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        """Handle the bulk marker keys on the checkboxes."""
        if event.type() == QEvent.KeyPress and event.key() in BULK_TOGGLE_KEYS:
            for code, checkbox in self.checkboxes.items():
                if checkbox is obj:
                    self.toggle_bulk(code, advance=event.key() == Qt.Key_Insert)
                    return True
        return super().eventFilter(obj, event)

    def _on_button(self, command: BulkCommand) -> None:
        self.command = command
        logger.debug("[ChattrDialog] Button: %s", command.value, extra={"dev_only": True})
        self.accept()

    # =====================================
    # Lifecycle
    # =====================================

    def done(self, result: int) -> None:
        """Close the dialog; Escape and the window close button mean Cancel."""
        if result == QDialog.Rejected:
            self.command = BulkCommand.CANCEL
        self._disconnect_selection()
        self._save_geometry()
        super().done(result)

    def get_command(self) -> BulkCommand:
        """Execute the dialog and return the button pressed."""
        self.exec_()
        return self.command

    def _dialogs_config(self):
        if self.config_manager is None:
            return None
        return self.config_manager.get_category("dialogs", create_if_not_exists=True)

    def _restore_geometry(self) -> None:
        config = self._dialogs_config()
        geometry = config.get("chattr_geometry") if config else None
        if isinstance(geometry, list) and len(geometry) == 4:
            self.setGeometry(QRect(*geometry))
            logger.debug(
                "[ChattrDialog] Restored geometry %s", geometry, extra={"dev_only": True}
            )

    def _save_geometry(self) -> None:
        config = self._dialogs_config()
        if config is None:
            return
        rect = self.geometry()
        config.set("chattr_geometry", [rect.x(), rect.y(), rect.width(), rect.height()])
        if CONFIG_SAVE_ON_DIALOG_CLOSE:
            self.config_manager.save()
