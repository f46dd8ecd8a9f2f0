"""
Project commands and the controller that runs them.
"""

from .base import (
    Command,
    CommandMetadata,
    Result,
    Results,
    UIBuilder,
    UIContext,
)
from .container_configuration import ContainerConfigurationCommand
from .container_setup import ContainerSetupCommand
from .controller import CommandController
from .cube_setup import CubeSetupCommand

__all__ = [
    "Command",
    "CommandController",
    "CommandMetadata",
    "ContainerConfigurationCommand",
    "ContainerSetupCommand",
    "CubeSetupCommand",
    "Result",
    "Results",
    "UIBuilder",
    "UIContext",
]
