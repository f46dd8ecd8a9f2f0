"""
Constants and configuration values for the logging system.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    # Default format string
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Message column width before extra fields start
    DEFAULT_RULE_WIDTH: int = 60

    # Log level names for resolution
    LEVEL_NAMES: dict[str, int | bool] = {
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "false": False,  # Special value to disable all logging
    }

    # Record attribute carrying merged extra fields
    EXTRA_ATTR: str = "__arqforge__extra"

    # ANSI escape sequences
    RESET: str = "\x1b[0m"
