"""
Module: conftest.py

Author: Michael Economou
Date: 2026-02-02

Global pytest configuration and fixtures for the attredit test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
import sys

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to sys.path so 'attredit' can be imported from a checkout
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from attredit.domain.attributes import AttributeCatalog, AttributeDefinition
from attredit.models.file_listing import FileListing
from attredit.utils.paths import AppPaths
from attredit.utils.shared.json_config_manager import reset_app_config_manager
from tests.mocks import AlwaysLocal, FakeAttributeProvider, ScriptedInteraction


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Modify test collection to handle CI environment."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ

    if is_ci:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")

        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture(scope="session")
def ci_environment():
    """Fixture to detect CI environment."""
    return "CI" in os.environ or "GITHUB_ACTIONS" in os.environ


@pytest.fixture(autouse=True)
def isolated_user_data(tmp_path):
    """Keep config and log files of every test inside its tmp_path."""
    AppPaths.set_user_data_dir(tmp_path / "userdata")
    reset_app_config_manager()
    yield
    reset_app_config_manager()
    AppPaths.set_user_data_dir(None)


@pytest.fixture
def small_catalog():
    """Two mutable attributes: i (immutable, 0x10) and a (append, 0x20)."""
    return AttributeCatalog(
        [
            AttributeDefinition(0x10, "i", "Immutable"),
            AttributeDefinition(0x20, "a", "Append only"),
        ]
    )


@pytest.fixture
def mixed_catalog():
    """Catalog with a read-only attribute between mutable ones."""
    return AttributeCatalog(
        [
            AttributeDefinition(0x01, "s", "Secure deletion"),
            AttributeDefinition(0x80000, "e", "Inode uses extents", mutable=False),
            AttributeDefinition(0x10, "i", "Immutable"),
            AttributeDefinition(0x20, "a", "Append only"),
        ]
    )


@pytest.fixture
def three_marked():
    """Listing of three files, all marked."""
    return FileListing.from_paths(["/data/f1", "/data/f2", "/data/f3"], mark_all=True)


@pytest.fixture
def provider():
    return FakeAttributeProvider()


@pytest.fixture
def interaction():
    return ScriptedInteraction()


@pytest.fixture
def always_local():
    return AlwaysLocal()
