class Driver:
    """
    Primitive hypervisor operations a build is made of.

    Every operation either succeeds or raises an exception describing the failure. Operations are not
    transactional, a failure leaves the effects of the preceding operations in place.
    """

    def create_virtual_machine(
        self,
        name: str,
        work_dir: str,
        harddrive_path: str,
        vhd_dir: str,
        ram: int,
        disk_size: int,
        switch_name: str,
        generation: int,
    ):
        """
        Register a new virtual machine with `ram` bytes of memory.

        The existing disk at `harddrive_path` is attached, or a fresh `disk_size` bytes disk is created in
        `vhd_dir` when `harddrive_path` is empty. The network adapter is bound to `switch_name` if given.
        """
        raise NotImplementedError()

    def set_virtual_machine_cpu_count(self, name: str, count: int):
        raise NotImplementedError()

    def set_virtual_machine_dynamic_memory(self, name: str, enabled: bool):
        raise NotImplementedError()

    def set_virtual_machine_mac_spoofing(self, name: str, enabled: bool):
        raise NotImplementedError()

    def set_virtual_machine_secure_boot(self, name: str, enabled: bool):
        """
        Only generation 2 virtual machines support secure boot.
        """
        raise NotImplementedError()

    def set_virtual_machine_virtualization_extensions(self, name: str, enabled: bool):
        raise NotImplementedError()

    def delete_virtual_machine(self, name: str):
        """
        Unregister the virtual machine. Whether its disks are removed as well is up to the implementation.
        """
        raise NotImplementedError()
