from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Callable, Iterator, TYPE_CHECKING

from ..error import StepError
from ..multistep.state import ERROR, ISO_PATH, VM_NAME
from ..multistep.step import Step, StepAction
from ..utils.disk import is_virtual_harddrive

if TYPE_CHECKING:
    from ..driver.base import Driver
    from ..multistep.state import StateBag


logger = logging.getLogger(__name__)

MEGABYTE = 1024 * 1024


@dataclass(kw_only=True)
class StepCreateVM(Step):
    """
    Creates the virtual machine and applies its hardware configuration.

    Consumes `iso_path` which, when it points to a `.vhd` or `.vhdx` file, is attached as the boot disk
    instead of creating an empty one.

    Produces:
        vmName - the name of the virtual machine, once it is fully configured
    """
    vm_name: str
    switch_name: str = ""
    # Boot disk attached by the last run, empty if a fresh disk was created
    harddrive_path: str = ""
    # Megabytes
    ram_size: int
    # Megabytes, only used when a fresh disk is created
    disk_size: int
    generation: int
    cpu: int
    enable_mac_spoofing: bool = False
    enable_dynamic_memory: bool = False
    # Ignored for generation 1 virtual machines
    enable_secure_boot: bool = False
    enable_virtualization_extensions: bool = False

    def run(self, state: StateBag) -> StepAction:
        ui = state.ui
        ui.say("Creating virtual machine...")

        self.harddrive_path = self._existing_harddrive_path(state)

        for description, operation in self._operations(state):
            try:
                operation()
            except Exception as e:
                error = StepError(f"{description}: {e}")
                error.__cause__ = e
                state.put(ERROR, error)
                ui.error(str(error))
                return StepAction.HALT

        # Later steps address the virtual machine by this name
        state.put(VM_NAME, self.vm_name)

        return StepAction.CONTINUE

    def cleanup(self, state: StateBag):
        if self.vm_name == "":
            return

        ui = state.ui
        ui.say("Unregistering and deleting virtual machine...")

        try:
            state.driver.delete_virtual_machine(self.vm_name)
        except Exception as e:
            ui.error(f"Error deleting virtual machine: {e}")

    def _existing_harddrive_path(self, state: StateBag) -> str:
        if ISO_PATH in state:
            path = state.get(ISO_PATH)
            if is_virtual_harddrive(path):
                return path

        logger.info("No existing virtual harddrive, not attaching.")
        return ""

    def _operations(self, state: StateBag) -> Iterator[tuple[str, Callable[[], None]]]:
        driver: Driver = state.driver

        # Everything else addresses the virtual machine by name so it has to exist first
        yield "Error creating virtual machine", functools.partial(
            driver.create_virtual_machine,
            self.vm_name,
            state.temp_dir,
            self.harddrive_path,
            state.vhd_temp_dir,
            self.ram_size * MEGABYTE,
            self.disk_size * MEGABYTE,
            self.switch_name,
            self.generation,
        )
        yield "Error setting virtual machine cpu count", functools.partial(
            driver.set_virtual_machine_cpu_count, self.vm_name, self.cpu,
        )
        yield "Error setting virtual machine dynamic memory", functools.partial(
            driver.set_virtual_machine_dynamic_memory, self.vm_name, self.enable_dynamic_memory,
        )

        if self.enable_mac_spoofing:
            yield "Error setting virtual machine mac spoofing", functools.partial(
                driver.set_virtual_machine_mac_spoofing, self.vm_name, True,
            )

        # Generation 1 firmware has no notion of secure boot
        if self.generation == 2:
            yield "Error setting secure boot", functools.partial(
                driver.set_virtual_machine_secure_boot, self.vm_name, self.enable_secure_boot,
            )

        if self.enable_virtualization_extensions:
            yield "Error setting virtual machine virtualization extensions", functools.partial(
                driver.set_virtual_machine_virtualization_extensions, self.vm_name, True,
            )
