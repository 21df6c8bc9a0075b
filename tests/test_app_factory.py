"""Module: test_app_factory.py

Tests for the command line entry point and the boot helpers.
"""

from unittest.mock import patch

import pytest

from attredit.boot import app_factory
from attredit.core.chattr_command import ChattrResult
from attredit.core.attributes.errors import FatalPreconditionError
from attredit.domain.attributes import AttributeDefinition
from tests.mocks import FakeAttributeProvider

DEFINITIONS = [
    AttributeDefinition(0x01, "s", "Secure deletion"),
    AttributeDefinition(0x10, "i", "Immutable"),
    AttributeDefinition(0x20, "a", "Append only"),
]


@pytest.fixture
def fake_provider():
    provider = FakeAttributeProvider({"/data/f1": 0x10, "/data/f2": 0x21}, DEFINITIONS)
    with patch.object(app_factory, "get_attribute_provider", return_value=provider):
        yield provider


def test_build_catalog_hides_codes():
    provider = FakeAttributeProvider(definitions=DEFINITIONS)
    catalog = app_factory.build_catalog(provider, {"s"})
    assert [d.code for d in catalog] == ["i", "a"]


def test_print_mode(fake_provider, capsys):
    assert app_factory.main(["--print", "/data/f1", "/data/f2"]) == 0
    assert capsys.readouterr().out.splitlines() == ["-i- /data/f1", "s-a /data/f2"]


def test_print_mode_unreadable_file(fake_provider, capsys):
    assert app_factory.main(["--print", "/data/f1", "/data/gone"]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["-i- /data/f1"]
    assert 'Cannot get flags of "/data/gone"' in captured.err


def test_print_mode_respects_hidden_codes(fake_provider, capsys):
    config = app_factory.get_app_config_manager().get_category("attributes")
    config.set("hidden_codes", ["a"])
    assert app_factory.main(["--print", "/data/f2"]) == 0
    assert capsys.readouterr().out.strip() == "s- /data/f2"


def test_unsupported_platform(capsys):
    with patch.object(
        app_factory, "get_attribute_provider", side_effect=FatalPreconditionError("nope")
    ):
        assert app_factory.main(["/data/f1"]) == 1
    assert "nope" in capsys.readouterr().err


@pytest.mark.parametrize("error, code", [(None, 0), ("Cannot get flags", 1)])
def test_gui_mode_exit_code(fake_provider, error, code):
    with patch.object(app_factory, "run_chattr", return_value=ChattrResult(error=error)) as run:
        assert app_factory.main(["/data/f1", "/data/f2"]) == code
    assert run.call_args[0][2] == ["/data/f1", "/data/f2"]


def test_paths_required():
    with pytest.raises(SystemExit):
        app_factory.main([])
