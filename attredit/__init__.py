"""attredit - batch file attribute editor.

Inspect and change filesystem attribute flags (immutable, append only,
no dump, ...) on one file or a batch of marked files.
"""

__version__ = "1.0.0"
