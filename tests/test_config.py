"""Tests for virtual machine configuration."""
from __future__ import annotations

import pytest

from pylibvirt_builder.config import VmConfiguration
from pylibvirt_builder.error import ValidationError
from pylibvirt_builder.steps.create_vm import StepCreateVM


def test_defaults():
    config = VmConfiguration(vm_name="build-01")

    assert config.ram_size == 1024
    assert config.disk_size == 40960
    assert config.generation == 1
    assert config.cpu == 1
    assert config.switch_name == ""
    assert config.validate() == []
    assert config.warnings() == []


@pytest.mark.parametrize("kwargs,expected_field,expected_error", [
    ({"vm_name": " "}, "vm_name", "Virtual machine name is required"),
    ({"generation": 3}, "generation", "Generation must be 1 or 2"),
    ({"ram_size": 16}, "ram_size", "RAM size must be between 32 and 32768 MB"),
    ({"ram_size": 32769}, "ram_size", "RAM size must be between 32 and 32768 MB"),
    ({"disk_size": 255}, "disk_size", "Disk size must be between 256 and 67108864 MB"),
    ({"disk_size": 64 * 1024 * 1024 + 1}, "disk_size", "Disk size must be between 256 and 67108864 MB"),
    ({"cpu": 0}, "cpu", "At least one virtual CPU is required"),
])
def test_validation(kwargs, expected_field, expected_error):
    config = VmConfiguration(**{"vm_name": "build-01", **kwargs})

    assert config.validate() == [(expected_field, expected_error)]


@pytest.mark.parametrize("kwargs", [
    {"ram_size": 32},
    {"ram_size": 32768},
    {"disk_size": 256},
    {"disk_size": 64 * 1024 * 1024},
    {"generation": 2},
])
def test_validation_bounds(kwargs):
    assert VmConfiguration(**{"vm_name": "build-01", **kwargs}).validate() == []


def test_secure_boot_on_generation_1_warns():
    config = VmConfiguration(vm_name="build-01", generation=1, enable_secure_boot=True)

    assert config.validate() == []
    assert config.warnings() == [
        "Secure boot is only supported by generation 2 virtual machines and will be ignored."
    ]


def test_nested_virtualization_warnings():
    config = VmConfiguration(
        vm_name="build-01", enable_virtualization_extensions=True, enable_dynamic_memory=True, ram_size=2048,
    )

    warnings = config.warnings()

    assert len(warnings) == 3
    assert "dynamic memory should not be allowed" in warnings[0]
    assert "mac spoofing should be allowed" in warnings[1]
    assert "4GB or more memory" in warnings[2]


def test_nested_virtualization_without_warnings():
    config = VmConfiguration(
        vm_name="build-01", enable_virtualization_extensions=True, enable_mac_spoofing=True, ram_size=4096,
    )

    assert config.warnings() == []


def test_create_vm_step():
    config = VmConfiguration(
        vm_name="build-01",
        switch_name="external",
        ram_size=2048,
        disk_size=8192,
        generation=2,
        cpu=4,
        enable_mac_spoofing=True,
        enable_dynamic_memory=True,
        enable_secure_boot=True,
        enable_virtualization_extensions=True,
    )

    assert config.create_vm_step() == StepCreateVM(
        vm_name="build-01",
        switch_name="external",
        ram_size=2048,
        disk_size=8192,
        generation=2,
        cpu=4,
        enable_mac_spoofing=True,
        enable_dynamic_memory=True,
        enable_secure_boot=True,
        enable_virtualization_extensions=True,
    )


def test_create_vm_step_invalid():
    config = VmConfiguration(vm_name="", cpu=0)

    with pytest.raises(ValidationError) as exc_info:
        config.create_vm_step()

    assert exc_info.value.errors == [
        ("vm_name", "Virtual machine name is required"),
        ("cpu", "At least one virtual CPU is required"),
    ]
    assert "cpu: At least one virtual CPU is required" in str(exc_info.value)
