"""
Container catalog and POM profile management.
"""

from .catalog import CubeConfiguration, CubeDescriptor, Target, resolve
from .model import ChameleonTarget, Configuration, Container, Download
from .profile_manager import ProfileManager, normalize_profile_id
from .resolver import ContainerResolver

__all__ = [
    "ChameleonTarget",
    "Configuration",
    "Container",
    "ContainerResolver",
    "CubeConfiguration",
    "CubeDescriptor",
    "Download",
    "ProfileManager",
    "Target",
    "normalize_profile_id",
    "resolve",
]
