"""
Container catalog loading.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from arqforge.exceptions import ContainerError

from .model import Container

BUNDLED_CATALOG = "containers.yaml"


class ContainerResolver:
    """
    Supplies the catalog of installable containers.

    The bundled catalog ships in ``arqforge/container/data``; a different
    YAML file can be passed in (config key ``containers.catalog``). The file
    is parsed on first use and cached.
    """

    def __init__(
        self,
        catalog_path: str | Path | None = None,
        lg: logging.Logger | None = None,
    ) -> None:
        self._catalog_path = Path(catalog_path) if catalog_path else None
        self._lg = lg or logging.getLogger(__name__)
        self._containers: list[Container] | None = None

    @property
    def source(self) -> str:
        if self._catalog_path is not None:
            return str(self._catalog_path)
        return f"arqforge.container.data/{BUNDLED_CATALOG}"

    def get_containers(self) -> list[Container]:
        """
        All cataloged containers, in catalog order.

        Raises:
            ContainerError: If the catalog cannot be read or is invalid
        """
        if self._containers is None:
            self._containers = self._load()
            self._lg.debug(
                "container catalog loaded",
                extra={"source": self.source, "containers": len(self._containers)},
            )
        return list(self._containers)

    def find(self, container_id: str) -> Container | None:
        """The container with the given id, or None."""
        for container in self.get_containers():
            if container.id == container_id:
                return container
        return None

    def _read_text(self) -> str:
        if self._catalog_path is None:
            return (
                resources.files("arqforge.container.data")
                .joinpath(BUNDLED_CATALOG)
                .read_text(encoding="utf-8")
            )
        try:
            return self._catalog_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ContainerError(
                f"Cannot read container catalog: {e}", path=str(self._catalog_path)
            ) from e

    def _load(self) -> list[Container]:
        try:
            data: Any = yaml.safe_load(self._read_text())
        except yaml.YAMLError as e:
            raise ContainerError(
                f"Invalid container catalog: {e}", path=self.source
            ) from e

        entries = data.get("containers") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ContainerError(
                "Container catalog must have a 'containers' list", path=self.source
            )

        containers = [Container.from_dict(entry) for entry in entries]
        seen: set[str] = set()
        for container in containers:
            if container.id in seen:
                raise ContainerError(
                    "Duplicate container id in catalog", container=container.id
                )
            seen.add(container.id)
        return containers
