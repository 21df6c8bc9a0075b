"""Qt adapter for InteractionPort - shows the chattr dialogs.

Author: Michael Economou
Date: 2026-02-02
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from attredit.core.attributes.errors import describe_os_error

if TYPE_CHECKING:
    from attredit.app.ports import BulkCommand, WriteDecision
    from attredit.domain.attributes import AttributeCatalog
    from attredit.domain.selection import SelectionModel
    from attredit.utils.shared.json_config_manager import JSONConfigManager


class QtInteractionAdapter:
    """Qt implementation of InteractionPort."""

    def __init__(self, parent: Any = None, config_manager: JSONConfigManager | None = None):
        self.parent = parent
        self.config_manager = config_manager

    def run_attribute_dialog(
        self,
        path: str,
        selection: SelectionModel,
        catalog: AttributeCatalog,
        multiple: bool,
    ) -> BulkCommand:
        from attredit.ui.dialogs.chattr_dialog import ChattrDialog

        dialog = ChattrDialog(
            path,
            selection,
            catalog,
            multiple=multiple,
            parent=self.parent,
            config_manager=self.config_manager,
        )
        return dialog.get_command()

    def ask_write_failure(self, path: str, error: OSError) -> WriteDecision:
        from attredit.ui.dialogs.write_failure_dialog import WriteFailureDialog

        return WriteFailureDialog.ask(
            os.path.basename(path), describe_os_error(error), parent=self.parent
        )

    def show_error(self, title: str, message: str) -> None:
        from attredit.ui.dialogs.custom_message_dialog import CustomMessageDialog

        CustomMessageDialog.information(self.parent, title, message)
