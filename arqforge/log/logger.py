"""
Logger class for the logging system.

Extends the standard logger so that ``extra`` dictionaries are carried on the
record as a single attribute the formatter can render, instead of being
spread over the record's namespace.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants


class Logger(logging.Logger):
    """Enhanced logger with extra-field handling and disable support."""

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            config: Logger configuration, defaults to info level
            extra: Pre-populated extra fields included in every record
        """
        if config is None:
            config = LogConfig.from_params("info")

        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False

        self._config = config
        self._extra = extra or {}

    @property
    def config(self) -> LogConfig:
        return self._config

    @property
    def disabled(self) -> bool:
        """Check if logging is disabled."""
        return self._logging_disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._logging_disabled = value

    def makeRecord(
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create a record with merged extra fields attached."""
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, None, sinfo
        )
        merged = dict(self._extra)
        if extra:
            merged.update(extra)
        setattr(record, LogConstants.EXTRA_ATTR, merged)
        return record
