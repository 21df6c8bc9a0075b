"""Module: test_locality.py

Tests for PsutilLocalityChecker with a patched mount table.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from attredit.infra.filesystem.locality import PsutilLocalityChecker


@pytest.fixture
def mounts(tmp_path):
    root = tmp_path.resolve()
    (root / "net").mkdir()
    (root / "network").mkdir()
    partitions = [
        SimpleNamespace(mountpoint="/", fstype="ext4"),
        SimpleNamespace(mountpoint=str(root / "net"), fstype="nfs4"),
        SimpleNamespace(mountpoint=str(root / "network"), fstype="btrfs"),
    ]
    with patch(
        "attredit.infra.filesystem.locality.psutil.disk_partitions", return_value=partitions
    ) as disk_partitions:
        yield root, disk_partitions


def test_longest_mount_prefix_wins(mounts):
    root, _ = mounts
    checker = PsutilLocalityChecker()
    assert checker.filesystem_type(str(root / "net" / "file")) == "nfs4"
    assert checker.filesystem_type(str(root / "network" / "file")) == "btrfs"
    assert checker.filesystem_type(str(root / "other")) == "ext4"


def test_is_local(mounts):
    root, _ = mounts
    checker = PsutilLocalityChecker()
    assert not checker.is_local(str(root / "net" / "share" / "a.txt"))
    assert not checker.is_local(str(root / "net"))
    assert checker.is_local(str(root / "network" / "a.txt"))


def test_mount_table_read_once(mounts):
    root, disk_partitions = mounts
    checker = PsutilLocalityChecker()
    checker.is_local(str(root / "a"))
    checker.is_local(str(root / "b"))
    disk_partitions.assert_called_once_with(all=True)


def test_unknown_mount_assumed_local():
    with patch("attredit.infra.filesystem.locality.psutil.disk_partitions", return_value=[]):
        checker = PsutilLocalityChecker()
        assert checker.filesystem_type("/anything") is None
        assert checker.is_local("/anything")


def test_custom_non_local_types(mounts):
    root, _ = mounts
    checker = PsutilLocalityChecker(non_local_types=frozenset({"btrfs"}))
    assert not checker.is_local(str(root / "network" / "a.txt"))
    assert checker.is_local(str(root / "net" / "a.txt"))
