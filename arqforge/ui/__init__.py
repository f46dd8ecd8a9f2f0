"""
Command inputs, interactive prompts and console output.

Example:
    from arqforge.ui import UISelectOne, prompts

    container = UISelectOne("container", short_name="c")
    container.set_value_choices(["arquillian-wildfly-managed"])
    chosen = prompts.select("Container:", container.get_value_choices())
"""

from . import prompts
from .console import Console, get_console, reset_console
from .inputs import InputType, UIInput, UISelectOne, parse_bool
from .prompts import NonInteractiveError

__all__ = [
    "Console",
    "InputType",
    "NonInteractiveError",
    "UIInput",
    "UISelectOne",
    "get_console",
    "parse_bool",
    "prompts",
    "reset_console",
]
