from __future__ import annotations

import os
from xml.etree import ElementTree

from ..utils.ovmf import OVMF_CODE, OVMF_DIR, get_ovmf_vars_file
from ..xml import xml_element
from .configuration import DomainConfiguration, Generation

MAC_SPOOFING_FILTER = "no-mac-spoofing"


class DomainXmlGenerator:
    def __init__(self, configuration: DomainConfiguration, ovmf_dir: str = OVMF_DIR):
        self.configuration = configuration
        self.ovmf_dir = ovmf_dir

    def generate(self) -> ElementTree.Element:
        return xml_element(
            "domain",
            attributes={"type": self.configuration.domain_type},
            children=self._children(),
        )

    def tostring(self) -> str:
        return ElementTree.tostring(self.generate()).decode()

    def _children(self):
        return [
            xml_element("name", text=self.configuration.name),
            *self._memory_xml(),
            xml_element("vcpu", text=str(self.configuration.vcpus)),
            self._os_xml(),
            xml_element("features", children=[xml_element("acpi"), xml_element("apic")]),
            xml_element("cpu", attributes={"mode": "host-model"}),
            xml_element("clock", attributes={"offset": "utc"}),
            self._devices_xml(),
        ]

    def _memory_xml(self):
        # Dynamic memory is configured separately, the whole allocation is granted until then
        return [
            xml_element("memory", attributes={"unit": "b"}, text=str(self.configuration.memory)),
            xml_element("currentMemory", attributes={"unit": "b"}, text=str(self.configuration.memory)),
        ]

    def _os_xml(self):
        children = [
            xml_element("type", attributes={"machine": self.configuration.machine_type}, text="hvm"),
        ]

        if self.configuration.uefi:
            loader = os.path.join(self.ovmf_dir, OVMF_CODE)
            nvram_attributes = {}
            if vars_template := get_ovmf_vars_file(loader, self.ovmf_dir):
                nvram_attributes["template"] = vars_template

            children.extend([
                xml_element(
                    "loader",
                    attributes={"readonly": "yes", "secure": "no", "type": "pflash"},
                    text=loader,
                ),
                xml_element("nvram", attributes=nvram_attributes, text=self.configuration.nvram_path),
            ])

        # An installation medium is attached by a later step, the fresh disk has nothing to boot yet
        children.extend([
            xml_element("boot", attributes={"dev": "hd"}),
            xml_element("boot", attributes={"dev": "cdrom"}),
        ])

        return xml_element("os", children=children)

    def _devices_xml(self):
        return xml_element("devices", children=self._devices_xml_children())

    def _devices_xml_children(self):
        if self.configuration.generation == Generation.ONE:
            target = {"dev": "hda", "bus": "ide"}
            nic_model = "e1000"
        else:
            target = {"dev": "sda", "bus": "sata"}
            nic_model = "virtio"

        devices = [
            xml_element(
                "disk",
                attributes={"type": "file", "device": "disk"},
                children=[
                    xml_element("driver", attributes={"name": "qemu", "type": self.configuration.disk_format}),
                    xml_element("source", attributes={"file": self.configuration.disk_path}),
                    xml_element("target", attributes=target),
                ],
            ),
        ]

        if self.configuration.switch_name:
            devices.append(xml_element(
                "interface",
                attributes={"type": "network"},
                children=[
                    xml_element("source", attributes={"network": self.configuration.switch_name}),
                    xml_element("model", attributes={"type": nic_model}),
                    xml_element("filterref", attributes={"filter": MAC_SPOOFING_FILTER}),
                ],
            ))

        devices.extend([
            xml_element("serial", attributes={"type": "pty"}),
            xml_element("memballoon", attributes={"model": "none"}),
        ])

        return devices
