"""Module: test_selection_model.py

Tests for SelectionModel: the checked and bulk axes, commands and signals.
"""

from unittest.mock import Mock

import pytest

from attredit.domain.selection import SelectionModel, ToggleBulk, ToggleChecked


@pytest.fixture
def selection(mixed_catalog):
    return SelectionModel(mixed_catalog)


def test_only_mutable_attributes_have_state(selection):
    assert [d.code for d, _ in selection.states()] == ["s", "i", "a"]
    with pytest.raises(KeyError):
        selection.state("e")


def test_load_flags_sets_checked_from_flags(selection):
    selection.load_flags(0x80010)
    assert selection.state("i").checked
    assert not selection.state("a").checked
    assert selection.flags == 0x80010
    assert selection.preview == "-ei-"
    assert selection.flags_changed is False


def test_toggle_checked_flips_bit_and_keeps_others(selection):
    selection.load_flags(0x80010)
    assert selection.toggle_checked("a") is True
    assert selection.flags == 0x80030
    assert selection.flags_changed is True

    assert selection.toggle_checked("i") is False
    assert selection.flags == 0x80020


def test_toggle_bulk_does_not_touch_checked(selection):
    selection.load_flags(0x10)
    assert selection.toggle_bulk("a") is True
    assert selection.state("a").bulk_selected
    assert not selection.state("a").checked
    assert selection.flags == 0x10
    assert selection.flags_changed is False


def test_load_flags_keeps_bulk_selection(selection):
    selection.toggle_bulk("i")
    selection.load_flags(0x20)
    assert selection.bulk_selected_codes() == ["i"]
    assert selection.state("a").checked


def test_set_bulk_selected_is_idempotent(selection):
    listener = Mock()
    selection.bulk_changed.connect(listener)
    selection.set_bulk_selected("s", True)
    selection.set_bulk_selected("s", True)
    listener.assert_called_once_with("s", True)


def test_handle_dispatches_commands(selection):
    assert selection.handle(ToggleChecked("i")) is True
    assert selection.handle(ToggleBulk("i")) is True
    assert selection.state("i").checked and selection.state("i").bulk_selected


def test_handle_rejects_unknown_command(selection):
    with pytest.raises(TypeError):
        selection.handle("toggle")


def test_signals(selection):
    checked = Mock()
    preview = Mock()
    selection.checked_changed.connect(checked)
    selection.preview_changed.connect(preview)

    selection.load_flags(0)
    preview.assert_called_with("----")

    selection.toggle_checked("a")
    checked.assert_called_once_with("a", True)
    preview.assert_called_with("---a")


def test_custom_placeholder(mixed_catalog):
    selection = SelectionModel(mixed_catalog, placeholder=".")
    selection.load_flags(0x1)
    assert selection.preview == "s..."
