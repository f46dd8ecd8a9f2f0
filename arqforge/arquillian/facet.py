"""
Arquillian facet: access to src/test/resources/arquillian.xml.
"""

from __future__ import annotations

import logging
from pathlib import Path

from arqforge.exceptions import FacetNotInstalledError
from arqforge.maven.xml import read_document, write_document

from .config import ArquillianConfig

ARQUILLIAN_XML = Path("src", "test", "resources", "arquillian.xml")


class ArquillianFacet:
    """Reads and writes a project's Arquillian descriptor."""

    name = "arquillian"

    def __init__(self, root: Path, lg: logging.Logger | None = None) -> None:
        self._root = Path(root)
        self._lg = lg or logging.getLogger(__name__)

    @property
    def config_path(self) -> Path:
        return self._root / ARQUILLIAN_XML

    def is_installed(self) -> bool:
        return self.config_path.is_file()

    def install(self) -> ArquillianConfig:
        """Create an empty descriptor unless one exists, then return it."""
        if not self.is_installed():
            self.set_config(ArquillianConfig())
            self._lg.info(
                "created arquillian descriptor", extra={"path": str(self.config_path)}
            )
        return self.get_config()

    def get_config(self) -> ArquillianConfig:
        """
        Parse the descriptor.

        Raises:
            FacetNotInstalledError: If the descriptor does not exist
            ProjectError: If the descriptor is malformed
        """
        if not self.is_installed():
            raise FacetNotInstalledError(self.name, path=str(self.config_path))
        root, ns = read_document(self.config_path)
        return ArquillianConfig(root, ns)

    def set_config(self, config: ArquillianConfig) -> None:
        write_document(config.to_element(), config.namespace, self.config_path)
        self._lg.debug(
            "arquillian descriptor written", extra={"path": str(self.config_path)}
        )
