"""
In-memory view of an arquillian.xml descriptor.

The descriptor holds one ``<container qualifier="...">`` block per launchable
profile, each with a ``<configuration>`` of ``<property name="...">`` entries,
and ``<extension qualifier="...">`` blocks with properties of their own:

    <arquillian xmlns="http://jboss.org/schema/arquillian">
      <container qualifier="arquillian-wildfly-managed">
        <configuration>
          <property name="jbossHome">target/wildfly-10.1.0.Final</property>
        </configuration>
      </container>
      <extension qualifier="docker">
        <property name="dockerContainersFile">docker-compose.yml</property>
      </extension>
    </arquillian>
"""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET

from arqforge.maven.xml import XSI_NAMESPACE, sub_element

ARQUILLIAN_NAMESPACE = "http://jboss.org/schema/arquillian"
ARQUILLIAN_SCHEMA = "http://jboss.org/schema/arquillian/arquillian_1_0.xsd"


def _find_qualified(parent: ET.Element, tag: str, qualifier: str) -> ET.Element | None:
    for child in parent:
        if child.tag == tag and child.get("qualifier") == qualifier:
            return child
    return None


def _find_property(parent: ET.Element, name: str) -> ET.Element | None:
    for child in parent:
        if child.tag == "property" and child.get("name") == name:
            return child
    return None


def _set_property(parent: ET.Element, name: str, value: str) -> None:
    prop = _find_property(parent, name)
    if prop is None:
        prop = sub_element(parent, "property")
        prop.set("name", name)
    prop.text = value


class ArquillianConfig:
    """
    Container and extension properties of an arquillian.xml document.

    Unknown elements and attributes are left untouched, so writing the config
    back only changes what was edited.
    """

    def __init__(
        self, root: ET.Element | None = None, namespace: str = ARQUILLIAN_NAMESPACE
    ) -> None:
        self._root = root if root is not None else self._default_root()
        self.namespace = namespace

    @staticmethod
    def _default_root() -> ET.Element:
        root = ET.Element("arquillian")
        root.set(
            f"{{{XSI_NAMESPACE}}}schemaLocation",
            f"{ARQUILLIAN_NAMESPACE} {ARQUILLIAN_SCHEMA}",
        )
        return root

    def container_qualifiers(self) -> list[str]:
        """Qualifiers of all declared containers, in document order."""
        return [
            c.get("qualifier", "") for c in self._root if c.tag == "container"
        ]

    def has_container(self, qualifier: str) -> bool:
        return _find_qualified(self._root, "container", qualifier) is not None

    def add_container(self, qualifier: str) -> ET.Element:
        """Return the container block for ``qualifier``, creating it if needed."""
        container = _find_qualified(self._root, "container", qualifier)
        if container is None:
            container = ET.Element("container", {"qualifier": qualifier})
            self._insert_container(container)
        return container

    def _insert_container(self, container: ET.Element) -> None:
        # Containers go before the first extension block
        children = list(self._root)
        for index, child in enumerate(children):
            if child.tag == "extension":
                self._root.insert(index, container)
                return
        self._root.append(container)

    def get_container_property(self, qualifier: str, name: str) -> str | None:
        container = _find_qualified(self._root, "container", qualifier)
        if container is None:
            return None
        configuration = next(
            (c for c in container if c.tag == "configuration"), None
        )
        if configuration is None:
            return None
        prop = _find_property(configuration, name)
        return prop.text if prop is not None else None

    def container_properties(self, qualifier: str) -> dict[str, str]:
        """All configuration properties of one container."""
        container = _find_qualified(self._root, "container", qualifier)
        result: dict[str, str] = {}
        if container is None:
            return result
        for configuration in container:
            if configuration.tag != "configuration":
                continue
            for prop in configuration:
                if prop.tag == "property" and prop.get("name"):
                    result[prop.get("name", "")] = prop.text or ""
        return result

    def add_container_property(self, qualifier: str, name: str, value: str) -> None:
        """
        Set a container property, replacing any existing value.

        Args:
            qualifier: Container qualifier (usually the profile id)
            name: Property name
            value: Property value
        """
        container = self.add_container(qualifier)
        configuration = next(
            (c for c in container if c.tag == "configuration"), None
        )
        if configuration is None:
            configuration = sub_element(container, "configuration")
        _set_property(configuration, name, value)

    def get_extension_property(self, qualifier: str, name: str) -> str | None:
        extension = _find_qualified(self._root, "extension", qualifier)
        if extension is None:
            return None
        prop = _find_property(extension, name)
        return prop.text if prop is not None else None

    def add_extension_property(self, qualifier: str, name: str, value: str) -> None:
        """Set an extension property, creating the extension block if needed."""
        extension = _find_qualified(self._root, "extension", qualifier)
        if extension is None:
            extension = sub_element(self._root, "extension")
            extension.set("qualifier", qualifier)
        _set_property(extension, name, value)

    def to_element(self) -> ET.Element:
        return copy.deepcopy(self._root)
