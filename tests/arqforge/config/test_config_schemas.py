"""
Tests for configuration schema validation.
"""

import pytest

from arqforge.config import ArqForgeConfig, LoggingConfig, validate_config
from arqforge.exceptions import ConfigError


@pytest.mark.unit
class TestSchemas:
    """Test pydantic validation of configuration dictionaries."""

    def test_empty_config_uses_defaults(self):
        """Test that every section has defaults."""
        config = validate_config({})
        assert isinstance(config, ArqForgeConfig)
        assert config.maven.surefire_version == "2.14.1"
        assert config.cube.version == "1.18.2"
        assert config.containers.catalog is None

    def test_numbers_coerced_to_version_strings(self):
        """Test that YAML floats in version fields become strings."""
        config = validate_config({"cube": {"version": 2.0}})
        assert config.cube.version == "2.0"

    @pytest.mark.parametrize("level", ["debug", "INFO", "warning", "error", False])
    def test_valid_log_levels(self, level):
        """Test accepted log levels."""
        assert LoggingConfig(level=level).level == level

    def test_invalid_log_level(self):
        """Test that unknown levels are rejected."""
        with pytest.raises(ConfigError, match="Invalid log level"):
            validate_config({"logging": {"level": "verbose"}})

    def test_unknown_section_rejected(self):
        """Test that typos in section names are caught."""
        with pytest.raises(ConfigError, match="Invalid configuration"):
            validate_config({"mavn": {"surefire_version": "3.0.0"}})

    def test_unknown_key_rejected(self):
        """Test that unknown keys inside a section are caught."""
        with pytest.raises(ConfigError):
            validate_config({"maven": {"surefire": "3.0.0"}})
