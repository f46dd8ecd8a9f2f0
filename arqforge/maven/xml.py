"""
XML helpers shared by the POM and arquillian.xml documents.

Documents are read with comments preserved and their default namespace
stripped, so the rest of the code works with plain tag names. The namespace
is put back when the document is written.
"""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from pathlib import Path
from xml.sax.saxutils import escape

from arqforge.exceptions import ProjectError, TemplateError

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


def local_name(tag: str) -> str:
    """Return a tag without its ``{namespace}`` prefix."""
    if tag.startswith("{") and "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def namespace_of(elem: ET.Element) -> str:
    """Return the namespace URI of an element, or an empty string."""
    tag = elem.tag
    if isinstance(tag, str) and tag.startswith("{") and "}" in tag:
        return tag[1:].split("}", 1)[0]
    return ""


def strip_namespace(elem: ET.Element, ns: str) -> ET.Element:
    """Remove ``ns`` from every element tag below and including ``elem``."""
    prefix = "{" + ns + "}"
    for el in elem.iter():
        if isinstance(el.tag, str) and el.tag.startswith(prefix):
            el.tag = el.tag[len(prefix) :]
    return elem


def qualify(elem: ET.Element, ns: str) -> ET.Element:
    """Return a deep copy of ``elem`` with ``ns`` applied to every plain tag."""
    result = copy.deepcopy(elem)
    if not ns:
        return result
    for el in result.iter():
        if isinstance(el.tag, str) and not el.tag.startswith("{"):
            el.tag = "{" + ns + "}" + el.tag
    return result


def read_document(path: Path) -> tuple[ET.Element, str]:
    """
    Parse an XML file, keeping comments and stripping the default namespace.

    Args:
        path: File to parse

    Returns:
        Tuple of (root element with plain tags, namespace URI or "")

    Raises:
        ProjectError: If the file cannot be parsed
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        root = ET.parse(path, parser=parser).getroot()
    except ET.ParseError as e:
        raise ProjectError(f"Malformed XML: {e}", path=str(path)) from e

    ns = namespace_of(root)
    return strip_namespace(root, ns), ns


def write_document(root: ET.Element, ns: str, path: Path) -> None:
    """
    Write a document, restoring its namespace and re-indenting it.

    Args:
        root: Root element with plain tags
        ns: Namespace URI to apply, or "" for none
        path: Destination file
    """
    if ns:
        ET.register_namespace("", ns)
    ET.register_namespace("xsi", XSI_NAMESPACE)

    tree = ET.ElementTree(qualify(root, ns))
    ET.indent(tree, space="  ")
    path.parent.mkdir(parents=True, exist_ok=True)
    tree.write(path, encoding="UTF-8", xml_declaration=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write("\n")


def find_child(parent: ET.Element, tag: str) -> ET.Element | None:
    """Return the first direct child with the given tag."""
    for child in parent:
        if child.tag == tag:
            return child
    return None


def child_text(parent: ET.Element, tag: str) -> str | None:
    """Return the stripped text of a direct child, or None if absent."""
    child = find_child(parent, tag)
    if child is None or child.text is None:
        return None
    return child.text.strip()


def sub_element(parent: ET.Element, tag: str, text: str | None = None) -> ET.Element:
    """Append a child element, optionally with text."""
    child = ET.SubElement(parent, tag)
    if text is not None:
        child.text = text
    return child


def parse_template(template: str, **values: str) -> ET.Element:
    """
    Build an element from a statically authored XML template.

    Substituted values are XML-escaped.

    Raises:
        TemplateError: If the rendered fragment is not well-formed
    """
    rendered = template.format(**{k: escape(str(v)) for k, v in values.items()})
    try:
        return ET.fromstring(rendered)
    except ET.ParseError as e:
        raise TemplateError(f"Invalid XML fragment: {e}") from e
