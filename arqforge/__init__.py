"""
arqforge: configure Arquillian test containers in Maven projects.

Example:
    from arqforge import ContainerResolver, ProfileManager, Project

    project = Project("/path/to/app")
    manager = ProfileManager(ContainerResolver())
    container = manager.get_container("arquillian-wildfly-managed")
    manager.add_profile(project, container, activated_by_default=True)
"""

from importlib.metadata import PackageNotFoundError, version

from .container import ContainerResolver, ProfileManager
from .exceptions import (
    ArqForgeError,
    ConfigError,
    ContainerError,
    ContainerNotFoundError,
    FacetNotInstalledError,
    InputValidationError,
    ProfileNotFoundError,
    ProjectError,
    TemplateError,
)
from .project import Project

try:
    __version__ = version("arqforge")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ArqForgeError",
    "ConfigError",
    "ContainerError",
    "ContainerNotFoundError",
    "ContainerResolver",
    "FacetNotInstalledError",
    "InputValidationError",
    "ProfileManager",
    "ProfileNotFoundError",
    "Project",
    "ProjectError",
    "TemplateError",
    "__version__",
]
