from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from ..driver.base import Driver
    from ..ui import Ui


# Keys of values steps hand over to each other
ISO_PATH = "iso_path"
VM_NAME = "vmName"
ERROR = "error"
HALTED = "halted"


@dataclass(kw_only=True)
class StateBag:
    """
    State shared by the steps of a single build.

    Collaborators every step relies on are typed attributes, values produced by one step for the
    following ones are stored by key.
    """
    driver: Driver
    ui: Ui
    # Working directory of the virtual machine
    temp_dir: str
    # Directory virtual hard disks are created in
    vhd_temp_dir: str
    values: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def put(self, key: str, value: Any):
        self.values[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.values
