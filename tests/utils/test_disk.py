"""Tests for virtual hard disk helpers."""
from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from pylibvirt_builder.error import Error
from pylibvirt_builder.utils.disk import (
    create_virtual_harddrive, is_virtual_harddrive, path_extension, virtual_harddrive_format,
)


@pytest.mark.parametrize("path,expected", [
    ("/images/base.vhdx", ".vhdx"),
    ("/images/base.tar.gz", ".gz"),
    ("/images/base", ""),
    ("/images.d/base", ""),
    ("C:\\images\\base.VHD", ".VHD"),
    ("/images/.vhd", ".vhd"),
    ("/images/base.", "."),
    ("", ""),
])
def test_path_extension(path, expected):
    assert path_extension(path) == expected


@pytest.mark.parametrize("path,expected", [
    ("/images/base.vhd", True),
    ("/images/base.VHDX", True),
    ("/images/base.Vhd", True),
    ("/tmp/os.iso", False),
    ("/images/base.vhdx.bak", False),
    ("/images/base.qcow2", False),
])
def test_is_virtual_harddrive(path, expected):
    assert is_virtual_harddrive(path) is expected


@pytest.mark.parametrize("path,expected", [
    ("/images/base.vhd", "vpc"),
    ("/images/base.VHDX", "vhdx"),
])
def test_virtual_harddrive_format(path, expected):
    assert virtual_harddrive_format(path) == expected


def test_virtual_harddrive_format_unknown():
    with pytest.raises(Error, match="is not a virtual hard disk"):
        virtual_harddrive_format("/tmp/os.iso")


def test_create_virtual_harddrive():
    with patch("pylibvirt_builder.utils.disk.subprocess.run") as run:
        create_virtual_harddrive("/tmp/vhd/build-01.vhdx", 42949672960)

    run.assert_called_once_with(
        ["qemu-img", "create", "-q", "-f", "vhdx", "/tmp/vhd/build-01.vhdx", "42949672960"],
        capture_output=True, check=True, text=True,
    )


def test_create_virtual_harddrive_failure():
    error = subprocess.CalledProcessError(
        1, ["qemu-img", "create"], stderr="qemu-img: /tmp/vhd/build-01.vhdx: Permission denied\n",
    )
    with patch("pylibvirt_builder.utils.disk.subprocess.run", side_effect=error):
        with pytest.raises(Error, match="Permission denied") as exc_info:
            create_virtual_harddrive("/tmp/vhd/build-01.vhdx", 1048576)

    assert "returned code 1" in str(exc_info.value)
