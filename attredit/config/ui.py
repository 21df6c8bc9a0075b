"""Module: attredit.config.ui

Author: Michael Economou
Date: 2026-02-02

Dialog texts and sizes for the attribute editor UI.
"""

CHATTR_DIALOG_TITLE = "Chattr command"
CHATTR_DIALOG_MIN_WIDTH = 320

# Marker drawn next to attributes selected for bulk operations
BULK_MARKER = "*"

# Bulk command buttons, in display order (label, command value)
BULK_BUTTONS = [
    ("Set &all", "set_all"),
    ("&Marked all", "marked_all"),
    ("S&et marked", "set_marked"),
    ("C&lear marked", "clear_marked"),
]

# Always-present buttons (label, command value)
SINGLE_BUTTONS = [
    ("&Set", "set"),
    ("&Cancel", "cancel"),
]

WRITE_FAILURE_DIALOG_TITLE = "Error"
WRITE_FAILURE_BUTTONS = ["Ignore", "Ignore all", "Retry", "Cancel"]

ERROR_DIALOG_TITLE = "Error"
