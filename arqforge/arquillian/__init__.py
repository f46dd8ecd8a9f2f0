"""
Arquillian descriptor support.
"""

from .config import ARQUILLIAN_NAMESPACE, ArquillianConfig
from .facet import ARQUILLIAN_XML, ArquillianFacet

__all__ = [
    "ARQUILLIAN_NAMESPACE",
    "ARQUILLIAN_XML",
    "ArquillianConfig",
    "ArquillianFacet",
]
