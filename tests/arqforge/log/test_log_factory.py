"""
Tests for LogConfig, Logger and LoggerFactory.
"""

import io
import logging

import pytest

from arqforge.log import (
    InvalidLogLevelError,
    LogConfig,
    LogConstants,
    Logger,
    LoggerFactory,
)

# =============================================================================
# LogConfig
# =============================================================================


@pytest.mark.unit
class TestLogConfig:
    """Test LogConfig construction."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warning", logging.WARNING),
            ("10", 10),
            ("false", False),
            (False, False),
            (logging.ERROR, logging.ERROR),
        ],
    )
    def test_level_resolution(self, level, expected):
        """Test names, numbers and False."""
        assert LogConfig.from_params(level).level == expected

    def test_invalid_level(self):
        """Test that unknown names raise InvalidLogLevelError."""
        with pytest.raises(InvalidLogLevelError, match="verbose"):
            LogConfig.from_params("verbose")

    def test_location_from_bool(self):
        """Test boolean location flags."""
        assert LogConfig.from_params("info", location=True).location == 1
        assert LogConfig.from_params("info", location=False).location == 0

    def test_from_config_dict(self):
        """Test reading the logging section of a config mapping."""
        config = LogConfig.from_config(
            {"logging": {"level": "debug", "colors": False}}
        )
        assert config.level == logging.DEBUG
        assert config.colors is False
        assert config.location == 0

    def test_from_config_missing_section(self):
        """Test defaults when the section is absent."""
        assert LogConfig.from_config({}).level == logging.INFO

    def test_immutable(self):
        """Test that LogConfig cannot be changed after creation."""
        config = LogConfig.from_params("info")
        with pytest.raises(AttributeError):
            config.level = logging.DEBUG


# =============================================================================
# LoggerFactory
# =============================================================================


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def root_logger(stream):
    lg = LoggerFactory.create("/test-root", LogConfig.from_params("debug", colors=False))
    lg.handlers[0].setStream(stream)
    return lg


@pytest.mark.unit
class TestLoggerFactory:
    """Test logger creation and derivation."""

    def test_create_root(self):
        """Test the root logger name and type."""
        lg = LoggerFactory.create_root(LogConfig.from_params("info", colors=False))
        assert isinstance(lg, Logger)
        assert lg.name == "/"
        assert lg.propagate is False
        assert len(lg.handlers) == 1

    def test_recreate_does_not_stack_handlers(self):
        """Test that repeated creation reconfigures the same logger."""
        first = LoggerFactory.create("/again", LogConfig.from_params("info"))
        second = LoggerFactory.create("/again", LogConfig.from_params("debug"))
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG

    def test_disabled_logger(self):
        """Test that level False silences the logger."""
        lg = LoggerFactory.create("/quiet", LogConfig.from_params(False))
        assert lg.disabled is True
        assert not lg.isEnabledFor(logging.CRITICAL)

    def test_derive_writes_through_parent(self, root_logger, stream):
        """Test that derived loggers share the parent's output."""
        child = LoggerFactory.derive(root_logger, "container")
        child.info("profile added", extra={"profile": "arquillian-docker"})

        assert child.name == "/test-root/container"
        assert not child.handlers
        output = stream.getvalue()
        assert "profile added" in output
        assert "[profile:arquillian-docker]" in output
        assert "[/test-root/container]" in output

    def test_derive_is_cached(self, root_logger):
        """Test that deriving twice returns the same logger."""
        assert LoggerFactory.derive(root_logger, "x") is LoggerFactory.derive(
            root_logger, "x"
        )

    def test_level_filters(self):
        """Test that records below the root level are dropped."""
        quiet = LoggerFactory.create("/test-warn", LogConfig.from_params("warning"))
        stream = io.StringIO()
        quiet.handlers[0].setStream(stream)
        quiet.info("hidden")
        quiet.warning("shown")
        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_logger_extra_defaults(self):
        """Test that constructor extra fields are merged into records."""
        lg = Logger("/with-extra", LogConfig.from_params("info"), extra={"tool": "x"})
        record = lg.makeRecord(
            "/with-extra", logging.INFO, "f.py", 1, "m", (), None, extra={"k": "v"}
        )
        assert getattr(record, LogConstants.EXTRA_ATTR) == {"tool": "x", "k": "v"}
