"""
In-place edits of a domain definition, one per hardware configuration primitive.

Every function takes the root `<domain>` element of an inactive domain definition and is safe to
apply repeatedly.
"""
import os
from xml.etree import ElementTree

from ..error import Error
from ..utils.ovmf import OVMF_CODE, OVMF_DIR, OVMF_SECURE_CODE, get_ovmf_vars_file
from ..xml import xml_child, xml_element, xml_remove_children
from .xml import MAC_SPOOFING_FILTER

NESTED_VIRTUALIZATION_FEATURES = ("vmx", "svm")


def set_vcpu_count(root: ElementTree.Element, count: int):
    if count < 1:
        raise Error(f"Virtual CPU count must be at least 1, got {count}")

    xml_child(root, "vcpu").text = str(count)


def set_dynamic_memory(root: ElementTree.Element, enabled: bool):
    devices = xml_child(root, "devices")
    xml_remove_children(devices, "memballoon")
    if enabled:
        devices.append(xml_element("memballoon", attributes={"model": "virtio", "autodeflate": "on"}))
    else:
        devices.append(xml_element("memballoon", attributes={"model": "none"}))


def set_mac_spoofing(root: ElementTree.Element, enabled: bool):
    interface = xml_child(root, "devices").find("interface")
    if interface is None:
        raise Error("Virtual machine has no network adapter")

    for filterref in interface.findall("filterref"):
        if filterref.get("filter") == MAC_SPOOFING_FILTER:
            interface.remove(filterref)

    if not enabled:
        interface.append(xml_element("filterref", attributes={"filter": MAC_SPOOFING_FILTER}))


def set_secure_boot(root: ElementTree.Element, enabled: bool, ovmf_dir: str = OVMF_DIR):
    os_element = xml_child(root, "os")
    loader = os_element.find("loader")
    if loader is None:
        raise Error("Secure boot is only supported by generation 2 virtual machines")

    loader.set("secure", "yes" if enabled else "no")
    loader.text = os.path.join(ovmf_dir, OVMF_SECURE_CODE if enabled else OVMF_CODE)

    nvram = os_element.find("nvram")
    if nvram is not None and (vars_template := get_ovmf_vars_file(loader.text, ovmf_dir)):
        nvram.set("template", vars_template)

    # Secure boot firmware refuses to run without system management mode
    features = xml_child(root, "features")
    xml_remove_children(features, "smm")
    if enabled:
        features.append(xml_element("smm", attributes={"state": "on"}))


def set_virtualization_extensions(root: ElementTree.Element, enabled: bool):
    cpu = xml_child(root, "cpu")
    for feature in cpu.findall("feature"):
        if feature.get("name") in NESTED_VIRTUALIZATION_FEATURES:
            cpu.remove(feature)

    if enabled:
        cpu.set("mode", "host-passthrough")
    else:
        cpu.set("mode", "host-model")
        for name in NESTED_VIRTUALIZATION_FEATURES:
            cpu.append(xml_element("feature", attributes={"policy": "disable", "name": name}))
