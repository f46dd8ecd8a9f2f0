"""
Project handle and facet lookup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

from arqforge.exceptions import ProjectError

F = TypeVar("F")


class Project:
    """
    A project directory.

    Facets are created on first use and cached per type. A facet type is any
    class constructed as ``cls(root, lg)`` that exposes ``is_installed()``.

    Example:
        project = Project("/path/to/app")
        model = project.get_facet(MavenFacet).get_model()
    """

    def __init__(self, root: str | Path, lg: logging.Logger | None = None) -> None:
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            raise ProjectError("Project directory does not exist", path=str(self.root))
        self._lg = lg or logging.getLogger(__name__)
        self._facets: dict[type, Any] = {}

    def get_facet(self, facet_type: type[F]) -> F:
        facet = self._facets.get(facet_type)
        if facet is None:
            facet = facet_type(self.root, self._lg)  # type: ignore[call-arg]
            self._facets[facet_type] = facet
        return facet  # type: ignore[no-any-return]

    def has_facet(self, facet_type: type) -> bool:
        """True if the facet's backing file exists in this project."""
        return bool(self.get_facet(facet_type).is_installed())

    def __repr__(self) -> str:
        return f"Project({str(self.root)!r})"
