"""Module: __init__.py.

Author: Michael Economou
Date: 2026-02-02

Pure Python event/signal implementation used by the Qt-free domain layer.
"""

from attredit.utils.events.observable import Observable, Signal

__all__ = ["Observable", "Signal"]
