"""
Fixtures for command tests.
"""

import pytest

from arqforge.arquillian import ArquillianFacet
from arqforge.commands import UIContext


@pytest.fixture
def context(project, resolver):
    """A command context over the sample project and test catalog."""
    return UIContext(project, container_resolver=resolver)


@pytest.fixture
def arquillian(project):
    """The project's arquillian facet."""
    return project.get_facet(ArquillianFacet)
