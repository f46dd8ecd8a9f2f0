"""
Configuration classes for the logging system.

LogConfig is immutable so a logger's display settings cannot drift after the
logger has been created.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration for root loggers.

    Attributes:
        level: Numeric level, or False to disable logging entirely
        location: Show source location (0 = off, 1 = file:line)
        colors: Whether to emit ANSI colors
    """

    level: int | bool = logging.INFO
    location: int = 0
    colors: bool = True

    @staticmethod
    def _resolve_level(level: str | int | bool) -> int | bool:
        """Resolve level parameter to int or False."""
        if isinstance(level, bool):
            return False if not level else logging.INFO
        elif isinstance(level, str):
            if level.isnumeric():
                return int(level)
            elif level.lower() in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[level.lower()]
            else:
                raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        location: bool | int = 0,
        colors: bool = True,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            location: Location display level (bool or int)
            colors: Whether to enable colored output

        Returns:
            LogConfig instance
        """
        resolved_location = (
            1 if location is True else (0 if location is False else int(location))
        )
        return cls(
            level=cls._resolve_level(level),
            location=resolved_location,
            colors=colors,
        )

    @classmethod
    def from_config(cls, config: Any, section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a loaded configuration.

        Args:
            config: Config instance or plain dict
            section: Dotted path of the logging section

        Returns:
            LogConfig instance (defaults for missing keys)
        """
        data = config.to_dict() if hasattr(config, "to_dict") else dict(config)
        for part in section.split("."):
            data = data.get(part, {}) if isinstance(data, dict) else {}

        return cls.from_params(
            level=data.get("level", "info"),
            location=data.get("location", 0),
            colors=data.get("colors", True),
        )
