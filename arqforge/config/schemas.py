"""
Configuration schemas using Pydantic for validation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from arqforge.exceptions import ConfigError


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str | bool = Field(default="info", description="Global log level")
    location: bool | int = Field(
        default=0, description="Show file locations in logs"
    )
    colors: bool = Field(default=True, description="Colored console output")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        """Validate log level is a recognized level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "FALSE"]
        if isinstance(v, str) and v.upper() not in valid_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(valid_levels)}"
            )
        return v

    model_config = ConfigDict(extra="forbid")


class MavenConfig(BaseModel):
    """Settings applied to generated POM fragments."""

    surefire_version: str = Field(
        default="2.14.1", description="maven-surefire-plugin version in profiles"
    )

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)


class ContainersConfig(BaseModel):
    """Container catalog location."""

    catalog: str | None = Field(
        default=None,
        description="Path to a YAML container catalog; bundled catalog when unset",
    )

    model_config = ConfigDict(extra="forbid")


class CubeConfig(BaseModel):
    """Arquillian Cube defaults."""

    version: str = Field(default="1.18.2", description="Default Cube version")

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)


class ArqForgeConfig(BaseModel):
    """
    Complete arqforge configuration schema.

    This validates the structure of .arqforge.yaml files.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    maven: MavenConfig = Field(default_factory=MavenConfig)
    containers: ContainersConfig = Field(default_factory=ContainersConfig)
    cube: CubeConfig = Field(default_factory=CubeConfig)

    model_config = ConfigDict(extra="forbid")


def validate_config(config_dict: dict[str, Any]) -> ArqForgeConfig:
    """
    Validate a configuration dictionary against the schema.

    Args:
        config_dict: Dictionary containing configuration data

    Returns:
        Validated ArqForgeConfig instance

    Raises:
        ConfigError: If configuration is invalid
    """
    try:
        return ArqForgeConfig(**config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
