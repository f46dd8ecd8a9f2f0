"""
Arquillian Cube configuration kinds.

Each kind names the Cube extension artifact it needs, the qualifier of its
``<extension>`` block in arquillian.xml, the type shown to users, and the
property that points at the kind's definitions file.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from arqforge.maven.model import Dependency

CUBE_GROUP_ID = "org.arquillian.cube"


class Target(Enum):
    """Cube extension artifacts."""

    DOCKER = "arquillian-cube-docker"
    KUBERNETES = "arquillian-cube-kubernetes"
    OPENSHIFT = "arquillian-cube-openshift"

    def dependency(self, version: str | None = None) -> Dependency:
        return Dependency(CUBE_GROUP_ID, self.value, version=version, scope="test")


class CubeDescriptor(NamedTuple):
    dependency: Dependency
    qualifier: str
    type: str
    location_key: str


class CubeConfiguration(Enum):
    """Supported Cube setups."""

    DOCKER = (Target.DOCKER, "docker", "Docker", "dockerContainersFile")
    DOCKER_COMPOSE = (Target.DOCKER, "docker", "Docker Compose", "dockerContainersFile")
    KUBERNETES = (Target.KUBERNETES, "kubernetes", "Kubernetes", "env.config.url")
    OPENSHIFT = (Target.OPENSHIFT, "openshift", "Openshift", "definitionsFile")

    def __init__(self, target: Target, qualifier: str, type: str, location_key: str):
        self.target = target
        self.qualifier = qualifier
        self.type = type
        self.location_key = location_key

    @property
    def dependency(self) -> Dependency:
        return self.target.dependency()

    @classmethod
    def from_type(cls, display: str) -> CubeConfiguration:
        """
        Look a kind up by its display type, ignoring case.

        Raises:
            ValueError: If no kind has that display type
        """
        for kind in cls:
            if kind.type.lower() == display.strip().lower():
                return kind
        raise ValueError(f"Unknown cube configuration type: {display!r}")


def resolve(kind: CubeConfiguration) -> CubeDescriptor:
    """Static metadata for a Cube configuration kind."""
    return CubeDescriptor(kind.dependency, kind.qualifier, kind.type, kind.location_key)
