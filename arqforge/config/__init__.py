"""
Configuration management package.

This module provides:
- Config class for loading YAML configuration files
- Schema validation using Pydantic
"""

from .config import Config
from .constants import (
    DEFAULT_CONFIG,
    ENV_PREFIX,
    MAX_CONFIG_SIZE_BYTES,
    PROJECT_CONFIG_FILENAME,
)
from .schemas import (
    ArqForgeConfig,
    ContainersConfig,
    CubeConfig,
    LoggingConfig,
    MavenConfig,
    validate_config,
)

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "MAX_CONFIG_SIZE_BYTES",
    "PROJECT_CONFIG_FILENAME",
    "ArqForgeConfig",
    "ContainersConfig",
    "CubeConfig",
    "LoggingConfig",
    "MavenConfig",
    "validate_config",
]
