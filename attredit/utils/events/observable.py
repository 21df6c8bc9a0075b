"""Module: observable.py.

Author: Michael Economou
Date: 2026-02-02

Observable - Pure Python Observer pattern implementation.

Provides Qt signal-like functionality without Qt dependency:
- Signal descriptor for defining events
- Observable base class for state objects
- Connect/disconnect/emit interface

Lets the domain layer notify the dialogs without importing PyQt5.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from attredit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


class Signal:
    """Descriptor for defining observable signals.

    Usage:
        class Selection(Observable):
            preview_changed = Signal(str)

        sel = Selection()
        sel.preview_changed.connect(callback)
        sel.preview_changed.emit("--i-----")
    """

    def __init__(self, *arg_types: type):
        """Initialize signal with expected argument types (documentation only)."""
        self.arg_types = arg_types
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when signal is assigned to class attribute."""
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        """Get signal instance for object."""
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        if not hasattr(obj, attr_name):
            setattr(obj, attr_name, SignalInstance(self.name, self.arg_types))

        return getattr(obj, attr_name)


class SignalInstance:
    """Instance of a signal for a specific object."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect callback to signal (connecting twice is a no-op)."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)
            logger.debug(
                "Signal connected: %s -> %s",
                self.name,
                getattr(callback, "__name__", repr(callback)),
                extra={"dev_only": True},
            )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect callback from signal.

        Args:
            callback: Callback to remove. If None, removes all callbacks.

        """
        if callback is None:
            self._callbacks.clear()
        elif callback in self._callbacks:
            self._callbacks.remove(callback)

    def emit(self, *args: Any) -> None:
        """Emit signal with arguments.

        A failing callback is logged and does not prevent the remaining
        callbacks from running.
        """
        for callback in self._callbacks.copy():
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                )

    def receiver_count(self) -> int:
        """Return the number of connected callbacks."""
        return len(self._callbacks)


class Observable:
    """Base class for objects with observable signals.

    Use the Signal descriptor to define events:

        class Counter(Observable):
            value_changed = Signal(int)

            def increment(self):
                self._value += 1
                self.value_changed.emit(self._value)
    """
