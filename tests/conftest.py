"""Shared fixtures for pylibvirt_builder tests."""
from __future__ import annotations

import pytest
from unittest.mock import Mock


@pytest.fixture
def mock_driver():
    """Mock driver recording every primitive operation in `method_calls`."""
    from pylibvirt_builder.driver.base import Driver
    return Mock(spec=Driver)


@pytest.fixture
def mock_ui():
    """Mock user interface."""
    from pylibvirt_builder.ui import Ui
    return Mock(spec=Ui)


@pytest.fixture
def state(mock_driver, mock_ui):
    """State bag of a build using the mock driver and user interface."""
    from pylibvirt_builder.multistep.state import StateBag
    return StateBag(
        driver=mock_driver,
        ui=mock_ui,
        temp_dir="/tmp/packer",
        vhd_temp_dir="/tmp/packer/vhd",
    )


@pytest.fixture
def create_vm_step():
    """Factory for a generation 2 create step, keyword arguments override the defaults."""
    from pylibvirt_builder.steps.create_vm import StepCreateVM

    def factory(**kwargs):
        return StepCreateVM(**{
            "vm_name": "build-01",
            "ram_size": 2048,
            "disk_size": 40960,
            "generation": 2,
            "cpu": 2,
            "enable_secure_boot": True,
            **kwargs,
        })

    return factory


@pytest.fixture
def mock_connection():
    """Mock libvirt Connection object."""
    conn = Mock()
    conn.get_domain = Mock(return_value=None)
    conn.define_domain = Mock()
    return conn
