import functools
import logging
import os
import time
from xml.etree import ElementTree

import libvirt

from ..domain import editor
from ..domain.configuration import DomainConfiguration, Generation
from ..domain.xml import DomainXmlGenerator
from ..error import DomainAlreadyExistsError, DomainDoesNotExistError, Error
from ..libvirtd.connection import Connection, DomainState
from ..utils import kvm_supported
from ..utils.cpu import nested_virtualization_supported
from ..utils.disk import create_virtual_harddrive, virtual_harddrive_format
from ..utils.ovmf import OVMF_DIR
from .base import Driver

logger = logging.getLogger(__name__)


class LibvirtDriver(Driver):
    def __init__(self, connection: Connection, *, domain_type: str | None = None, ovmf_dir: str = OVMF_DIR):
        self.connection = connection
        self.domain_type = domain_type or ("kvm" if kvm_supported() else "qemu")
        self.ovmf_dir = ovmf_dir

    def create_virtual_machine(
        self, name, work_dir, harddrive_path, vhd_dir, ram, disk_size, switch_name, generation,
    ):
        generation = Generation.from_value(generation)
        if self.connection.get_domain(name) is not None:
            raise DomainAlreadyExistsError(f"Domain {name!r} already exists")

        if harddrive_path:
            disk_path = harddrive_path
        else:
            disk_path = os.path.join(vhd_dir, f"{name}.vhdx")
            create_virtual_harddrive(disk_path, disk_size)

        configuration = DomainConfiguration(
            name=name,
            generation=generation,
            domain_type=self.domain_type,
            memory=ram,
            disk_path=disk_path,
            disk_format=virtual_harddrive_format(disk_path),
            switch_name=switch_name or None,
            nvram_path=os.path.join(work_dir, f"{name}_VARS.fd") if generation == Generation.TWO else None,
        )

        logger.debug("Defining generation %d domain %r with disk %r", generation, name, disk_path)
        self.connection.define_domain(DomainXmlGenerator(configuration, self.ovmf_dir).tostring())

    def set_virtual_machine_cpu_count(self, name, count):
        self._update(name, editor.set_vcpu_count, count)

    def set_virtual_machine_dynamic_memory(self, name, enabled):
        self._update(name, editor.set_dynamic_memory, enabled)

    def set_virtual_machine_mac_spoofing(self, name, enabled):
        self._update(name, editor.set_mac_spoofing, enabled)

    def set_virtual_machine_secure_boot(self, name, enabled):
        self._update(name, functools.partial(editor.set_secure_boot, ovmf_dir=self.ovmf_dir), enabled)

    def set_virtual_machine_virtualization_extensions(self, name, enabled):
        if enabled and self.domain_type == "kvm" and not nested_virtualization_supported():
            raise Error("Nested virtualization is not enabled in the host kvm module")

        self._update(name, editor.set_virtualization_extensions, enabled)

    def delete_virtual_machine(self, name):
        libvirt_domain = self._libvirt_domain(name)
        if self.connection.domain_state(libvirt_domain) in [DomainState.RUNNING, DomainState.SUSPENDED]:
            self._destroy(libvirt_domain)
            # Give the hypervisor a moment to release the domain's devices before it is undefined
            time.sleep(1)

        libvirt_domain.undefineFlags(libvirt.VIR_DOMAIN_UNDEFINE_NVRAM)

    def _destroy(self, libvirt_domain):
        try:
            libvirt_domain.destroy()
        except libvirt.libvirtError:
            if self.connection.domain_state(libvirt_domain) == DomainState.SHUTOFF:
                # The domain went down on its own in the meantime
                return

            raise

    def _update(self, name: str, edit, *args):
        libvirt_domain = self._libvirt_domain(name)
        root = ElementTree.fromstring(self.connection.domain_xml(libvirt_domain))
        edit(root, *args)
        self.connection.define_domain(ElementTree.tostring(root).decode())

    def _libvirt_domain(self, name: str):
        libvirt_domain = self.connection.get_domain(name)
        if libvirt_domain is None:
            raise DomainDoesNotExistError(f"Domain {name!r} does not exist")

        return libvirt_domain
