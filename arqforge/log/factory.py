"""
Factory for creating and configuring loggers.

Root loggers own a console handler; derived loggers have no handlers and
propagate to their parent, so a whole tool tree shares one output stream.
"""

import logging
import sys
from typing import Any, cast

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig) -> Logger:
        """
        Create a root logger with the specified configuration.

        Example:
            >>> config = LogConfig.from_params(level="info", colors=False)
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("profile added", extra={"profile": "arquillian-wildfly"})
        """
        return LoggerFactory.create("/", config)

    @staticmethod
    def create(
        name: str, config: LogConfig, extra: dict[str, Any] | None = None
    ) -> Logger:
        """
        Create a logger with its own console handler.

        An existing logger of the same name is reconfigured in place so
        repeated CLI invocations in one process do not stack handlers.

        Args:
            name: Logger name
            config: Logger configuration
            extra: Pre-populated extra fields to include in all records

        Returns:
            Configured logger instance
        """
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            for handler in list(existing.handlers):
                existing.removeHandler(handler)
            lg = existing
            lg._config = config
            lg.disabled = config.level is False
        else:
            lg = Logger(name, config, extra)
            logging.root.manager.loggerDict[name] = lg

        lg.setLevel(logging.CRITICAL + 1 if config.level is False else config.level)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root
        return lg

    @staticmethod
    def derive(parent: Logger, name: str) -> Logger:
        """
        Derive a child logger that writes through its parent's handlers.

        Args:
            parent: Parent logger
            name: Child name appended to the parent's path

        Returns:
            Child logger named ``<parent>/<name>``
        """
        full_name = parent.name.rstrip("/") + "/" + name
        existing = logging.root.manager.loggerDict.get(full_name)
        if isinstance(existing, Logger):
            return existing

        config = LogConfig(
            level=logging.NOTSET,
            location=parent.config.location,
            colors=parent.config.colors,
        )
        lg = Logger(full_name, config)
        lg.setLevel(logging.NOTSET)
        lg.parent = parent
        lg.propagate = True
        lg.disabled = parent.disabled
        logging.root.manager.loggerDict[full_name] = lg
        return cast(Logger, lg)
