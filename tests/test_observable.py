"""Module: test_observable.py

Tests for the Qt-free Signal/Observable implementation.
"""

from unittest.mock import Mock

from attredit.utils.events import Observable, Signal


class Counter(Observable):
    value_changed = Signal(int)


def test_signal_per_instance():
    first, second = Counter(), Counter()
    callback = Mock()
    first.value_changed.connect(callback)

    second.value_changed.emit(1)
    callback.assert_not_called()

    first.value_changed.emit(2)
    callback.assert_called_once_with(2)


def test_connect_twice_is_noop():
    counter = Counter()
    callback = Mock()
    counter.value_changed.connect(callback)
    counter.value_changed.connect(callback)
    assert counter.value_changed.receiver_count() == 1


def test_disconnect():
    counter = Counter()
    first, second = Mock(), Mock()
    counter.value_changed.connect(first)
    counter.value_changed.connect(second)

    counter.value_changed.disconnect(first)
    counter.value_changed.emit(3)
    first.assert_not_called()
    second.assert_called_once_with(3)

    counter.value_changed.disconnect()
    assert counter.value_changed.receiver_count() == 0


def test_failing_callback_does_not_block_others():
    counter = Counter()
    failing = Mock(side_effect=RuntimeError("boom"))
    working = Mock()
    counter.value_changed.connect(failing)
    counter.value_changed.connect(working)

    counter.value_changed.emit(4)
    working.assert_called_once_with(4)
