"""
Logging package for arqforge.

Example:
    from arqforge.log import LogConfig, LoggerFactory

    lg = LoggerFactory.create_root(LogConfig.from_params("debug"))
    child = LoggerFactory.derive(lg, "container")
    child.info("profile added", extra={"profile": "arquillian-wildfly"})
"""

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

__all__ = [
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
]
