from xml.etree import ElementTree


def xml_element(
        tag,
        *,
        attributes: dict[str, str] | None = None,
        children: list | None = None,
        text: str | None = None,
):
    element = ElementTree.Element(tag, **(attributes or {}))

    for child in children or []:
        element.append(child)

    if text is not None:
        element.text = text

    return element


def xml_child(parent: ElementTree.Element, tag: str) -> ElementTree.Element:
    """
    Return the first direct child of `parent` named `tag`, appending an empty one if there is none.
    """
    child = parent.find(tag)
    if child is None:
        child = ElementTree.SubElement(parent, tag)

    return child


def xml_remove_children(parent: ElementTree.Element, tag: str):
    for child in parent.findall(tag):
        parent.remove(child)
