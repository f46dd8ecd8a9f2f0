"""
Command-line interface.
"""

from .cli import build_parser, main
from .tool import Tool, ToolConfig
from .tools import CommandTool, ListContainersTool, ListProfilesTool, default_tools

__all__ = [
    "CommandTool",
    "ListContainersTool",
    "ListProfilesTool",
    "Tool",
    "ToolConfig",
    "build_parser",
    "default_tools",
    "main",
]
