"""
Maven POM support.

Example:
    from arqforge.maven import MavenFacet

    facet = MavenFacet(project_root)
    model = facet.get_model()
    print([p.id for p in model.profiles])
"""

from .facet import POM_FILENAME, MavenFacet
from .model import (
    Activation,
    BuildBase,
    Dependency,
    Model,
    Plugin,
    PluginExecution,
    Profile,
)
from .xml import POM_NAMESPACE

__all__ = [
    "POM_FILENAME",
    "POM_NAMESPACE",
    "Activation",
    "BuildBase",
    "Dependency",
    "MavenFacet",
    "Model",
    "Plugin",
    "PluginExecution",
    "Profile",
]
