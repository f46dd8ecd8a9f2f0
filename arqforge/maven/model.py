"""
Maven POM object model.

A small typed view over the parts of a POM that container setup edits:
project dependencies and profiles, with each profile's activation, build
plugins and dependencies. Everything the model does not understand is kept
as raw elements in ``extra`` and written back unchanged, so a
read-modify-write cycle does not lose user content.
"""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .xml import POM_NAMESPACE, child_text, find_child, sub_element


def _copy_extra(extra: list[ET.Element]) -> list[ET.Element]:
    return [copy.deepcopy(e) for e in extra]


@dataclass
class Dependency:
    """A ``<dependency>`` element."""

    group_id: str
    artifact_id: str
    version: str | None = None
    type: str | None = None
    classifier: str | None = None
    scope: str | None = None
    extra: list[ET.Element] = field(default_factory=list, compare=False, repr=False)

    @classmethod
    def from_coordinate(cls, coordinate: str) -> Dependency:
        """
        Parse ``groupId:artifactId[:version[:scope]]``.

        Raises:
            ValueError: If groupId or artifactId is missing
        """
        parts = coordinate.split(":")
        if len(parts) < 2 or not parts[0] or not parts[1] or len(parts) > 4:
            raise ValueError(f"Invalid dependency coordinate: {coordinate!r}")
        version = parts[2] if len(parts) > 2 and parts[2] else None
        scope = parts[3] if len(parts) > 3 and parts[3] else None
        return cls(parts[0], parts[1], version=version, scope=scope)

    @property
    def coordinate(self) -> str:
        """``groupId:artifactId[:version]``."""
        base = f"{self.group_id}:{self.artifact_id}"
        return f"{base}:{self.version}" if self.version else base

    def same_artifact(self, other: Dependency) -> bool:
        """True if both refer to the same groupId and artifactId."""
        return (self.group_id, self.artifact_id) == (other.group_id, other.artifact_id)

    def with_version(self, version: str | None) -> Dependency:
        """Return a copy with ``version`` filled in when this one has none."""
        return Dependency(
            self.group_id,
            self.artifact_id,
            version=self.version or version,
            type=self.type,
            classifier=self.classifier,
            scope=self.scope,
            extra=_copy_extra(self.extra),
        )

    @classmethod
    def from_element(cls, elem: ET.Element) -> Dependency:
        known = {"groupId", "artifactId", "version", "type", "classifier", "scope"}
        return cls(
            group_id=child_text(elem, "groupId") or "",
            artifact_id=child_text(elem, "artifactId") or "",
            version=child_text(elem, "version"),
            type=child_text(elem, "type"),
            classifier=child_text(elem, "classifier"),
            scope=child_text(elem, "scope"),
            extra=[c for c in elem if c.tag not in known],
        )

    def to_element(self) -> ET.Element:
        elem = ET.Element("dependency")
        sub_element(elem, "groupId", self.group_id)
        sub_element(elem, "artifactId", self.artifact_id)
        for tag, value in (
            ("version", self.version),
            ("type", self.type),
            ("classifier", self.classifier),
            ("scope", self.scope),
        ):
            if value is not None:
                sub_element(elem, tag, value)
        elem.extend(_copy_extra(self.extra))
        return elem


@dataclass
class Activation:
    """A profile ``<activation>`` block."""

    active_by_default: bool = False
    extra: list[ET.Element] = field(default_factory=list, compare=False, repr=False)

    @classmethod
    def from_element(cls, elem: ET.Element) -> Activation:
        return cls(
            active_by_default=(child_text(elem, "activeByDefault") or "") == "true",
            extra=[c for c in elem if c.tag != "activeByDefault"],
        )

    def to_element(self) -> ET.Element:
        elem = ET.Element("activation")
        if self.active_by_default:
            sub_element(elem, "activeByDefault", "true")
        elem.extend(_copy_extra(self.extra))
        return elem


@dataclass
class PluginExecution:
    """A plugin ``<execution>``."""

    id: str | None = None
    phase: str | None = None
    goals: list[str] = field(default_factory=list)
    configuration: ET.Element | None = field(default=None, compare=False)
    extra: list[ET.Element] = field(default_factory=list, compare=False, repr=False)

    @classmethod
    def from_element(cls, elem: ET.Element) -> PluginExecution:
        goals_elem = find_child(elem, "goals")
        goals = []
        if goals_elem is not None:
            goals = [(g.text or "").strip() for g in goals_elem if g.tag == "goal"]
        return cls(
            id=child_text(elem, "id"),
            phase=child_text(elem, "phase"),
            goals=goals,
            configuration=find_child(elem, "configuration"),
            extra=[
                c for c in elem if c.tag not in ("id", "phase", "goals", "configuration")
            ],
        )

    def to_element(self) -> ET.Element:
        elem = ET.Element("execution")
        if self.id is not None:
            sub_element(elem, "id", self.id)
        if self.phase is not None:
            sub_element(elem, "phase", self.phase)
        if self.goals:
            goals = sub_element(elem, "goals")
            for goal in self.goals:
                sub_element(goals, "goal", goal)
        if self.configuration is not None:
            elem.append(copy.deepcopy(self.configuration))
        elem.extend(_copy_extra(self.extra))
        return elem


@dataclass
class Plugin:
    """A build ``<plugin>``."""

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    executions: list[PluginExecution] = field(default_factory=list)
    configuration: ET.Element | None = field(default=None, compare=False)
    extra: list[ET.Element] = field(default_factory=list, compare=False, repr=False)

    @property
    def coordinate(self) -> str:
        return f"{self.group_id or 'org.apache.maven.plugins'}:{self.artifact_id}"

    def add_execution(self, execution: PluginExecution) -> Plugin:
        self.executions.append(execution)
        return self

    @classmethod
    def from_element(cls, elem: ET.Element) -> Plugin:
        known = {"groupId", "artifactId", "version", "executions", "configuration"}
        executions_elem = find_child(elem, "executions")
        executions = []
        if executions_elem is not None:
            executions = [
                PluginExecution.from_element(e)
                for e in executions_elem
                if e.tag == "execution"
            ]
        return cls(
            group_id=child_text(elem, "groupId"),
            artifact_id=child_text(elem, "artifactId"),
            version=child_text(elem, "version"),
            executions=executions,
            configuration=find_child(elem, "configuration"),
            extra=[c for c in elem if c.tag not in known],
        )

    def to_element(self) -> ET.Element:
        elem = ET.Element("plugin")
        for tag, value in (
            ("groupId", self.group_id),
            ("artifactId", self.artifact_id),
            ("version", self.version),
        ):
            if value is not None:
                sub_element(elem, tag, value)
        if self.executions:
            executions = sub_element(elem, "executions")
            executions.extend(e.to_element() for e in self.executions)
        if self.configuration is not None:
            elem.append(copy.deepcopy(self.configuration))
        elem.extend(_copy_extra(self.extra))
        return elem


@dataclass
class BuildBase:
    """A profile ``<build>`` section."""

    plugins: list[Plugin] = field(default_factory=list)
    extra: list[ET.Element] = field(default_factory=list, compare=False, repr=False)

    def add_plugin(self, plugin: Plugin) -> BuildBase:
        self.plugins.append(plugin)
        return self

    @classmethod
    def from_element(cls, elem: ET.Element) -> BuildBase:
        plugins_elem = find_child(elem, "plugins")
        plugins = []
        if plugins_elem is not None:
            plugins = [Plugin.from_element(p) for p in plugins_elem if p.tag == "plugin"]
        return cls(plugins=plugins, extra=[c for c in elem if c.tag != "plugins"])

    def to_element(self) -> ET.Element:
        elem = ET.Element("build")
        if self.plugins:
            plugins = sub_element(elem, "plugins")
            plugins.extend(p.to_element() for p in self.plugins)
        elem.extend(_copy_extra(self.extra))
        return elem


@dataclass
class Profile:
    """A POM ``<profile>``."""

    id: str
    activation: Activation | None = None
    build: BuildBase | None = None
    dependencies: list[Dependency] = field(default_factory=list)
    extra: list[ET.Element] = field(default_factory=list, compare=False, repr=False)

    def add_dependency(self, dependency: Dependency) -> Profile:
        self.dependencies.append(dependency)
        return self

    @classmethod
    def from_element(cls, elem: ET.Element) -> Profile:
        known = {"id", "activation", "build", "dependencies"}
        activation_elem = find_child(elem, "activation")
        build_elem = find_child(elem, "build")
        deps_elem = find_child(elem, "dependencies")
        dependencies = []
        if deps_elem is not None:
            dependencies = [
                Dependency.from_element(d) for d in deps_elem if d.tag == "dependency"
            ]
        return cls(
            id=child_text(elem, "id") or "default",
            activation=(
                Activation.from_element(activation_elem)
                if activation_elem is not None
                else None
            ),
            build=BuildBase.from_element(build_elem) if build_elem is not None else None,
            dependencies=dependencies,
            extra=[c for c in elem if c.tag not in known],
        )

    def to_element(self) -> ET.Element:
        elem = ET.Element("profile")
        sub_element(elem, "id", self.id)
        if self.activation is not None:
            elem.append(self.activation.to_element())
        if self.build is not None:
            elem.append(self.build.to_element())
        if self.dependencies:
            deps = sub_element(elem, "dependencies")
            deps.extend(d.to_element() for d in self.dependencies)
        elem.extend(_copy_extra(self.extra))
        return elem


class Model:
    """
    A parsed POM.

    Profiles and project-level dependencies are exposed as typed lists; the
    rest of the document is kept as-is. Each of the ``<profiles>`` and
    ``<dependencies>`` sections is held as one ordered list of typed items
    and raw nodes (comments, unknown elements), so ``to_element()`` writes
    raw nodes back between the same siblings they were read with.
    """

    def __init__(self, root: ET.Element, namespace: str = "") -> None:
        """
        Args:
            root: ``<project>`` element with namespace-free tags
            namespace: Namespace to restore when the model is written
        """
        self._root = root
        self.namespace = namespace
        self._profile_nodes: list[Profile | ET.Element] = _read_section(
            find_child(root, "profiles"), "profile", Profile.from_element
        )
        self._dependency_nodes: list[Dependency | ET.Element] = _read_section(
            find_child(root, "dependencies"), "dependency", Dependency.from_element
        )

    @classmethod
    def empty(cls, group_id: str, artifact_id: str, version: str) -> Model:
        """Create a minimal POM model."""
        root = ET.Element("project")
        sub_element(root, "modelVersion", "4.0.0")
        sub_element(root, "groupId", group_id)
        sub_element(root, "artifactId", artifact_id)
        sub_element(root, "version", version)
        return cls(root, POM_NAMESPACE)

    @property
    def artifact_id(self) -> str | None:
        return child_text(self._root, "artifactId")

    @property
    def profiles(self) -> list[Profile]:
        """The model's profiles, in document order."""
        return [n for n in self._profile_nodes if isinstance(n, Profile)]

    @property
    def dependencies(self) -> list[Dependency]:
        """Project-level dependencies, in document order."""
        return [n for n in self._dependency_nodes if isinstance(n, Dependency)]

    def add_profile(self, profile: Profile) -> None:
        self._profile_nodes.append(profile)

    def remove_profile(self, profile: Profile) -> None:
        """Remove ``profile`` (by identity); unknown profiles are ignored."""
        self._profile_nodes = [n for n in self._profile_nodes if n is not profile]

    def add_dependency(self, dependency: Dependency) -> None:
        self._dependency_nodes.append(dependency)

    def to_element(self) -> ET.Element:
        """Rebuild the document with the current profiles and dependencies."""
        root = copy.deepcopy(self._root)

        anchor = find_child(root, "build")
        if anchor is None:
            anchor = find_child(root, "profiles")
        _replace_section(
            root,
            "dependencies",
            _write_section("dependencies", self._dependency_nodes),
            before=anchor,
        )
        _replace_section(root, "profiles", _write_section("profiles", self._profile_nodes))
        return root


def _read_section(section: ET.Element | None, tag: str, parse) -> list:
    """Children of ``section`` in order, ``tag`` children parsed with ``parse``."""
    if section is None:
        return []
    return [parse(child) if child.tag == tag else child for child in section]


def _write_section(tag: str, nodes: list) -> ET.Element | None:
    if not nodes:
        return None
    section = ET.Element(tag)
    for node in nodes:
        if isinstance(node, ET.Element):
            section.append(copy.deepcopy(node))
        else:
            section.append(node.to_element())
    return section


def _replace_section(
    root: ET.Element,
    tag: str,
    section: ET.Element | None,
    before: ET.Element | None = None,
) -> None:
    """Swap ``root``'s ``tag`` child for ``section`` in place, or insert it."""
    existing = find_child(root, tag)
    if existing is not None:
        index = list(root).index(existing)
        root.remove(existing)
        if section is not None:
            root.insert(index, section)
    elif section is not None:
        if before is not None:
            root.insert(list(root).index(before), section)
        else:
            root.append(section)
