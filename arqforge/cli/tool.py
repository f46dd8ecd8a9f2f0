"""
Base tool class for arqforge subcommands.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from arqforge.commands.base import UIContext
from arqforge.exceptions import ArqForgeError
from arqforge.log import Logger, LoggerFactory


@dataclass
class ToolConfig:
    """Configuration for a tool."""

    name: str
    aliases: list[str] = field(default_factory=list)
    help_text: str = ""
    description: str = ""


class Tool(ABC):
    """
    A CLI subcommand.

    Subclasses add their arguments in ``add_args()`` and do their work in
    ``run()``, returning an exit code. ``setup()`` derives the tool's logger
    from the root logger.
    """

    def __init__(self, config: ToolConfig | None = None):
        self.config = config or self._create_config()
        self._logger: Logger | None = None

    def _create_config(self) -> ToolConfig:
        """Create default configuration. Override in subclasses."""
        raise ArqForgeError("Tool has no name", cls=type(self).__name__)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def cmd(self) -> tuple[list[str], dict[str, Any]]:
        """
        Get command configuration for argument parsing.

        Returns:
            tuple: (command_args, command_kwargs) for add_parser
        """
        return [self.name], {
            "aliases": self.config.aliases,
            "help": self.config.help_text,
            "description": self.config.description or self.config.help_text,
        }

    @property
    def lg(self) -> Logger:
        """
        Raises:
            ArqForgeError: If accessed before setup() is called
        """
        if self._logger is None:
            raise ArqForgeError(f"Logger not initialized for tool '{self.name}'")
        return self._logger

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        """Add tool-specific arguments. Override in subclasses."""
        pass

    def setup(self, root_lg: Logger) -> None:
        self._logger = LoggerFactory.derive(root_lg, self.name)

    @abstractmethod
    def run(self, args: argparse.Namespace, context: UIContext) -> int:
        pass
