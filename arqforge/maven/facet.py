"""
Maven facet: access to a project's pom.xml as a Model.
"""

from __future__ import annotations

import logging
from pathlib import Path

from arqforge.exceptions import FacetNotInstalledError

from .model import Model
from .xml import read_document, write_document

POM_FILENAME = "pom.xml"


class MavenFacet:
    """
    Reads and writes the project's POM.

    Every ``get_model()`` call parses the file again, so callers always see
    what is on disk; ``set_model()`` rewrites the whole file.
    """

    name = "maven"

    def __init__(self, root: Path, lg: logging.Logger | None = None) -> None:
        self._root = Path(root)
        self._lg = lg or logging.getLogger(__name__)

    @property
    def pom_path(self) -> Path:
        return self._root / POM_FILENAME

    def is_installed(self) -> bool:
        return self.pom_path.is_file()

    def get_model(self) -> Model:
        """
        Parse pom.xml.

        Raises:
            FacetNotInstalledError: If the project has no pom.xml
            ProjectError: If pom.xml is malformed
        """
        if not self.is_installed():
            raise FacetNotInstalledError(self.name, path=str(self.pom_path))
        root, ns = read_document(self.pom_path)
        return Model(root, ns)

    def set_model(self, model: Model) -> None:
        write_document(model.to_element(), model.namespace, self.pom_path)
        self._lg.debug("pom written", extra={"path": str(self.pom_path)})
