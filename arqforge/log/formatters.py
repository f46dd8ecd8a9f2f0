"""
Log formatters for the logging system.

Renders records as::

    [12:34:56,789] [I] profile added        [profile:arquillian-wildfly] [/container]

Extra fields passed through ``extra={...}`` are shown as ``[key:value]``
after the message, followed by the logger name and, optionally, the source
location.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants

# ANSI color codes by level (without the trailing "m")
LEVEL_COLORS: dict[int, str] = {
    logging.DEBUG: "\x1b[38;5;32",
    logging.INFO: "\x1b[36",
    logging.WARNING: "\x1b[33",
    logging.ERROR: "\x1b[31",
    logging.CRITICAL: "\x1b[35",
}

GRAY = "\x1b[38;5;244"


def _format_value(value: Any) -> str:
    """Format an extra field value."""
    if isinstance(value, Exception):
        return value.__class__.__name__ + ": " + str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def _format_extra(record: logging.LogRecord) -> list[str]:
    """Return formatted ``key:value`` pairs for a record's extra fields."""
    extra = getattr(record, LogConstants.EXTRA_ATTR, None)
    if not extra:
        return []
    return [f"{key}:{_format_value(extra[key])}" for key in extra]


class LogFormatter(logging.Formatter):
    """Formatter producing bracketed, optionally colored log lines."""

    def __init__(self, config: LogConfig) -> None:
        """
        Initialize the formatter.

        Args:
            config: Logger configuration (colors and location settings)
        """
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    @property
    def config(self) -> LogConfig:
        return self._config

    def format(self, record: logging.LogRecord) -> str:
        """Format a record with extra fields, logger name and location."""
        head = super().format(record)
        fields = _format_extra(record)
        fields.append(record.name)
        if self._config.location:
            fields.append(f"{record.filename}:{record.lineno}")

        pad = " " * max(1, LogConstants.DEFAULT_RULE_WIDTH - len(head))
        if not self._config.colors:
            return head + pad + " ".join(f"[{f}]" for f in fields)

        col = LEVEL_COLORS.get(record.levelno, "\x1b[38") + "m"
        tail = " ".join(f"{GRAY}m[{f}]" for f in fields)
        return col + head + pad + tail + LogConstants.RESET
