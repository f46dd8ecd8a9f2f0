"""
Container catalog entries.

Containers are loaded once from the catalog and never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from arqforge.exceptions import ContainerError
from arqforge.maven.model import Dependency

PROFILE_PREFIX = "arquillian-"
CONTAINER_TYPES = ("embedded", "managed", "remote")


@dataclass(frozen=True)
class Download:
    """Where a container distribution comes from: a URL or a Maven artifact."""

    url: str | None = None
    group_id: str | None = None
    artifact_id: str | None = None

    @property
    def is_artifact(self) -> bool:
        return self.group_id is not None and self.artifact_id is not None


@dataclass(frozen=True)
class ChameleonTarget:
    """Maps a requested runtime version onto a Chameleon target string."""

    name: str
    container_type: str

    def target(self, version: str) -> str:
        return f"{self.name}:{version}:{self.container_type}"


@dataclass(frozen=True, eq=False)
class Configuration:
    """A configuration option a container accepts. Equal by name."""

    name: str
    default: str | None = None
    type: str = "String"
    description: str | None = None
    container_id: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Container:
    """An installable Arquillian container adapter."""

    id: str
    name: str
    group_id: str
    artifact_id: str
    container_type: str = "managed"
    profile_id: str = ""
    download: Download | None = None
    chameleon: ChameleonTarget | None = None
    dependencies: tuple[Dependency, ...] = field(default=(), compare=False)
    configurations: tuple[Configuration, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if not self.profile_id:
            object.__setattr__(self, "profile_id", PROFILE_PREFIX + self.id)

    def __str__(self) -> str:
        return self.id

    @property
    def supports_chameleon(self) -> bool:
        return self.chameleon is not None

    def chameleon_target(self, version: str) -> str:
        """
        Chameleon target string for ``version``.

        Raises:
            ContainerError: If the container has no Chameleon mapping
        """
        if self.chameleon is None:
            raise ContainerError(
                "Container does not support Chameleon", container=self.id
            )
        return self.chameleon.target(version)

    def adapter_dependency(self, version: str | None = None) -> Dependency:
        """The container adapter artifact as a test-scoped dependency."""
        return Dependency(self.group_id, self.artifact_id, version=version, scope="test")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Container:
        """
        Build a container from one catalog entry.

        Raises:
            ContainerError: If a required key is missing or a value is invalid
        """
        if not isinstance(data, dict):
            raise ContainerError("Catalog entry must be a mapping", entry=repr(data))
        missing = [k for k in ("id", "group_id", "artifact_id") if not data.get(k)]
        if missing:
            raise ContainerError(
                "Catalog entry is missing required keys",
                container=data.get("id"),
                missing=",".join(missing),
            )

        container_id = str(data["id"])
        container_type = str(data.get("type", "managed"))
        if container_type not in CONTAINER_TYPES:
            raise ContainerError(
                "Unknown container type", container=container_id, type=container_type
            )

        return cls(
            id=container_id,
            name=str(data.get("name", container_id)),
            group_id=str(data["group_id"]),
            artifact_id=str(data["artifact_id"]),
            container_type=container_type,
            profile_id=str(data.get("profile_id") or ""),
            download=_parse_download(data.get("download")),
            chameleon=_parse_chameleon(data.get("chameleon"), container_type),
            dependencies=tuple(
                _parse_dependency(container_id, d) for d in data.get("dependencies") or []
            ),
            configurations=tuple(
                _parse_configuration(container_id, c)
                for c in data.get("configurations") or []
            ),
        )


def _parse_download(data: Any) -> Download | None:
    if not data:
        return None
    if isinstance(data, str):
        return Download(url=data)
    return Download(
        url=data.get("url"),
        group_id=data.get("group_id"),
        artifact_id=data.get("artifact_id"),
    )


def _parse_chameleon(data: Any, container_type: str) -> ChameleonTarget | None:
    if not data:
        return None
    if isinstance(data, str):
        return ChameleonTarget(data, container_type)
    return ChameleonTarget(str(data["name"]), str(data.get("type", container_type)))


def _parse_dependency(container_id: str, data: Any) -> Dependency:
    try:
        if isinstance(data, str):
            return Dependency.from_coordinate(data)
        return Dependency(
            group_id=str(data["group_id"]),
            artifact_id=str(data["artifact_id"]),
            version=data.get("version"),
            scope=data.get("scope"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ContainerError(
            f"Invalid dependency: {e}", container=container_id
        ) from e


def _parse_configuration(container_id: str, data: Any) -> Configuration:
    if not isinstance(data, dict) or not data.get("name"):
        raise ContainerError("Configuration needs a name", container=container_id)
    default = data.get("default")
    return Configuration(
        name=str(data["name"]),
        default=None if default is None else str(default),
        type=str(data.get("type", "String")),
        description=data.get("description"),
        container_id=container_id,
    )
