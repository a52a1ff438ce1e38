import logging
import os
import sys
import tempfile

from .config import VmConfiguration
from .driver.libvirt_driver import LibvirtDriver
from .libvirtd.connection_manager import ConnectionManager
from .libvirtd.service_delegate import ServiceDelegate
from .multistep.runner import BasicRunner
from .multistep.state import ERROR, ISO_PATH, StateBag
from .multistep.step import StepAction
from .ui import LoggingUi


class DummyServiceDelegate(ServiceDelegate):
    def ensure_started(self):
        pass


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cm = ConnectionManager(DummyServiceDelegate())
    driver = LibvirtDriver(cm.create("qemu:///system"))

    configuration = VmConfiguration(
        vm_name="pylibvirt-builder-test",
        ram_size=2048,
        disk_size=8192,
        generation=2,
        cpu=2,
        enable_secure_boot=True,
    )
    for warning in configuration.warnings():
        logging.warning(warning)

    with tempfile.TemporaryDirectory() as temp_dir:
        vhd_temp_dir = os.path.join(temp_dir, "vhd")
        os.makedirs(vhd_temp_dir)

        state = StateBag(driver=driver, ui=LoggingUi("demo"), temp_dir=temp_dir, vhd_temp_dir=vhd_temp_dir)
        if len(sys.argv) > 1:
            state.put(ISO_PATH, sys.argv[1])

        action = BasicRunner([configuration.create_vm_step()]).run(state)

    cm.close()

    if action == StepAction.HALT:
        print(f"Build failed: {state.get(ERROR)}")
        sys.exit(1)
