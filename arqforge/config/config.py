"""
Configuration management for loading and resolving YAML configuration files.

This module provides a Config class that extends DotDict to handle YAML
configuration files with variable substitution and environment variable
overrides, layered on top of built-in defaults.
"""

import copy
import os
import re
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from arqforge.dot_dict import DotDict, DotDictPathNotFoundError
from arqforge.exceptions import ConfigError

from .constants import (
    DEFAULT_CONFIG,
    ENV_NESTING_SEPARATOR,
    ENV_PREFIX,
    MAX_CONFIG_SIZE_BYTES,
    PROJECT_CONFIG_FILENAME,
)


def _check_file_size(fname_path: Path) -> None:
    """Check file size limit."""
    file_size = os.path.getsize(fname_path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"Configuration file '{fname_path}' is {file_size} bytes, "
            f"exceeding maximum size of {MAX_CONFIG_SIZE_BYTES} bytes",
            path=str(fname_path),
        )


def _load_yaml(fname_path: Path) -> dict[str, Any]:
    """Load a YAML mapping from disk."""
    with open(fname_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", path=str(fname_path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            "Configuration root must be a mapping", path=str(fname_path)
        )
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base, recursing into nested mappings."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class Config(DotDict):
    """
    Configuration loaded from YAML, layered over defaults.

    Supports variable substitution using ${section.key} syntax in values, and
    environment variable overrides using the ARQFORGE_ prefix.

    Environment Variable Override Format:
        ARQFORGE_<SECTION>__<KEY>=value

    Examples:
        ARQFORGE_LOGGING__LEVEL=debug
        ARQFORGE_MAVEN__SUREFIRE_VERSION=3.2.5

    Example:
        config = Config(".arqforge.yaml")
        version = config.get("maven.surefire_version")
    """

    def __init__(
        self,
        fname: str | Path | None = None,
        enable_env_overrides: bool = True,
        env_prefix: str = ENV_PREFIX,
    ):
        """
        Initialize configuration.

        Args:
            fname: Path to a YAML file; None uses defaults only
            enable_env_overrides: Whether to apply environment variable overrides
            env_prefix: Prefix for environment variables
        """
        super().__init__()
        self._enable_env_overrides = enable_env_overrides
        self._env_prefix = env_prefix
        self._config_path: Path | None = None
        self._load(fname)

    @classmethod
    def defaults(cls, enable_env_overrides: bool = True) -> "Config":
        """Build a config from built-in defaults (plus env overrides)."""
        return cls(None, enable_env_overrides=enable_env_overrides)

    @classmethod
    def for_project(cls, project_root: str | Path) -> "Config":
        """
        Load the project's config file if present, otherwise defaults.

        Args:
            project_root: Project directory searched for .arqforge.yaml
        """
        candidate = Path(project_root) / PROJECT_CONFIG_FILENAME
        return cls(candidate if candidate.is_file() else None)

    @property
    def path(self) -> Path | None:
        """Path of the loaded file, or None when built from defaults."""
        return self._config_path

    def _load(self, fname: str | Path | None) -> None:
        """
        Load configuration and resolve variable substitutions.

        Raises:
            ConfigError: If the file is missing, too large or malformed
        """
        data: dict[str, Any] = {}
        if fname is not None:
            fname_path = Path(fname).resolve()
            if not fname_path.is_file():
                raise ConfigError("Configuration file not found", path=str(fname_path))
            _check_file_size(fname_path)
            self._config_path = fname_path
            data = _load_yaml(fname_path)

        config_data = _deep_merge(DEFAULT_CONFIG, data)
        if self._enable_env_overrides:
            config_data = self._apply_env_overrides(config_data)

        self.set(**config_data)
        try:
            self.set(**self._resolve(self.to_dict()))
        except DotDictPathNotFoundError as e:
            raise ConfigError(
                f"Undefined variable reference: ${{{e.path}}}", path=str(fname)
            ) from e

    def _resolve(self, content: Any) -> Any:
        """
        Recursively resolve ${variable_name} references against this config.
        """
        if isinstance(content, dict):
            for k in list(content.keys()):
                content[k] = self._resolve(content[k])
        elif isinstance(content, list):
            return [self._resolve(v) for v in content]
        elif isinstance(content, str):
            return re.sub(r"\$\{([a-zA-Z0-9_.]+)\}", self._substitute_var, content)
        return content

    def _substitute_var(self, match: re.Match) -> str:
        var_name = match.group(1)
        if not self.has(var_name):
            raise DotDictPathNotFoundError(self, var_name)
        return str(self.get(var_name))

    def _apply_env_overrides(self, config_data: dict[str, Any]) -> dict[str, Any]:
        """
        Apply environment variable overrides to configuration data.

        Only variables with at least one nesting separator are considered,
        so flags such as ARQFORGE_NON_INTERACTIVE never become config keys.
        """
        for env_key, env_value in self._collect_env_vars().items():
            path = self._env_key_to_path(env_key)
            if len(path) < 2:
                continue
            self._set_nested_value(config_data, path, env_value)
        return config_data

    def _collect_env_vars(self) -> dict[str, str]:
        return {k: v for k, v in os.environ.items() if k.startswith(self._env_prefix)}

    def _env_key_to_path(self, env_key: str) -> list[str]:
        """Convert ARQFORGE_MAVEN__SUREFIRE_VERSION to ['maven', 'surefire_version']."""
        return env_key[len(self._env_prefix) :].lower().split(ENV_NESTING_SEPARATOR)

    def _set_nested_value(self, data: dict, path: list[str], value: str) -> None:
        current = data
        for part in path[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[path[-1]] = self._convert_env_value(value)

    def _convert_env_value(self, value: str) -> bool | int | float | str | None:
        """
        Convert environment variable string to appropriate type.
        """
        if value.lower() in ("null", "none", ""):
            return None

        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        # Versions like 2.14.1 must stay strings
        if re.fullmatch(r"-?\d+", value):
            return int(value)
        if re.fullmatch(r"-?\d+\.\d+", value):
            return float(value)

        return value

    def get_env_overrides(self) -> dict[str, Any]:
        """
        Get all environment variable overrides that would be applied.

        Returns:
            Mapping of dotted config path to converted value
        """
        if not self._enable_env_overrides:
            return {}

        overrides = {}
        for env_key, env_value in self._collect_env_vars().items():
            path = self._env_key_to_path(env_key)
            if len(path) < 2:
                continue
            overrides[".".join(path)] = self._convert_env_value(env_value)
        return overrides

    def validate(self) -> Any:
        """
        Validate configuration against the pydantic schema.

        Returns:
            Validated ArqForgeConfig instance

        Raises:
            ConfigError: If configuration is invalid
        """
        from .schemas import validate_config

        return validate_config(self.to_dict())
