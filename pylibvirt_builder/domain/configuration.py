from dataclasses import dataclass
import enum

from ..error import Error


class Generation(enum.IntEnum):
    # BIOS firmware
    ONE = 1
    # UEFI firmware, optionally with secure boot
    TWO = 2

    @classmethod
    def from_value(cls, value: int) -> "Generation":
        try:
            return cls(value)
        except ValueError:
            raise Error(f"Unsupported virtual machine generation {value!r}, expected 1 or 2") from None


@dataclass(kw_only=True)
class DomainConfiguration:
    name: str
    generation: Generation
    domain_type: str
    # Bytes
    memory: int
    vcpus: int = 1
    disk_path: str
    disk_format: str
    switch_name: str | None
    nvram_path: str | None

    @property
    def machine_type(self) -> str:
        return "q35" if self.generation == Generation.TWO else "pc"

    @property
    def uefi(self) -> bool:
        return self.generation == Generation.TWO
