from dataclasses import dataclass

from .error import ValidationError
from .steps.create_vm import StepCreateVM

DEFAULT_RAM_SIZE = 1024
MIN_RAM_SIZE = 32
MAX_RAM_SIZE = 32 * 1024

DEFAULT_DISK_SIZE = 40 * 1024
MIN_DISK_SIZE = 256
MAX_DISK_SIZE = 64 * 1024 * 1024

# Nested hypervisors need room for their own guests
MIN_NESTED_VIRTUALIZATION_RAM_SIZE = 4 * 1024


@dataclass(kw_only=True)
class VmConfiguration:
    """
    Virtual machine a build runs in. Sizes are in megabytes.
    """
    vm_name: str
    switch_name: str = ""
    ram_size: int = DEFAULT_RAM_SIZE
    disk_size: int = DEFAULT_DISK_SIZE
    generation: int = 1
    cpu: int = 1
    enable_mac_spoofing: bool = False
    enable_dynamic_memory: bool = False
    enable_secure_boot: bool = False
    enable_virtualization_extensions: bool = False

    def validate(self) -> list[tuple[str, str]]:
        verrors = []
        if not self.vm_name.strip():
            verrors.append(('vm_name', 'Virtual machine name is required'))

        if self.generation not in (1, 2):
            verrors.append(('generation', 'Generation must be 1 or 2'))

        if not MIN_RAM_SIZE <= self.ram_size <= MAX_RAM_SIZE:
            verrors.append((
                'ram_size', f'RAM size must be between {MIN_RAM_SIZE} and {MAX_RAM_SIZE} MB'
            ))

        if not MIN_DISK_SIZE <= self.disk_size <= MAX_DISK_SIZE:
            verrors.append((
                'disk_size', f'Disk size must be between {MIN_DISK_SIZE} and {MAX_DISK_SIZE} MB'
            ))

        if self.cpu < 1:
            verrors.append(('cpu', 'At least one virtual CPU is required'))

        return verrors

    def warnings(self) -> list[str]:
        warnings = []
        if self.enable_secure_boot and self.generation == 1:
            warnings.append('Secure boot is only supported by generation 2 virtual machines and will be ignored.')

        if self.enable_virtualization_extensions:
            if self.enable_dynamic_memory:
                warnings.append(
                    'For nested virtualization, when virtualization extension is enabled, '
                    'dynamic memory should not be allowed.'
                )
            if not self.enable_mac_spoofing:
                warnings.append(
                    'For nested virtualization, when virtualization extension is enabled, '
                    'mac spoofing should be allowed.'
                )
            if self.ram_size < MIN_NESTED_VIRTUALIZATION_RAM_SIZE:
                warnings.append(
                    'For nested virtualization, when virtualization extension is enabled, there should be 4GB or '
                    'more memory set for the vm, otherwise the hypervisor may fail to start any nested VMs.'
                )

        return warnings

    def create_vm_step(self) -> StepCreateVM:
        if verrors := self.validate():
            raise ValidationError(verrors)

        return StepCreateVM(
            vm_name=self.vm_name,
            switch_name=self.switch_name,
            ram_size=self.ram_size,
            disk_size=self.disk_size,
            generation=self.generation,
            cpu=self.cpu,
            enable_mac_spoofing=self.enable_mac_spoofing,
            enable_dynamic_memory=self.enable_dynamic_memory,
            enable_secure_boot=self.enable_secure_boot,
            enable_virtualization_extensions=self.enable_virtualization_extensions,
        )
