"""
Interactive prompts for command inputs.

Respects the --non-interactive flag (via ARQFORGE_NON_INTERACTIVE) and
auto-detects non-TTY environments; in both cases the default is returned
where one exists.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from typing import Any

import questionary
from questionary import Style

PROMPT_STYLE = Style(
    [
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
    ]
)

NON_INTERACTIVE_ENV = "ARQFORGE_NON_INTERACTIVE"
AUTO_CONFIRM_ENV = "ARQFORGE_YES"


def _is_interactive() -> bool:
    """Check if we're in an interactive terminal."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def _get_auto_confirm() -> bool:
    """Check if auto-confirm is enabled via environment."""
    return os.environ.get(AUTO_CONFIRM_ENV, "").lower() in ("1", "true", "yes")


def _get_non_interactive() -> bool:
    """Check if non-interactive mode is forced via environment."""
    return os.environ.get(NON_INTERACTIVE_ENV, "").lower() in ("1", "true", "yes")


def can_prompt() -> bool:
    return _is_interactive() and not _get_non_interactive()


class NonInteractiveError(Exception):
    """Raised when interactive input is required but not available."""

    pass


def confirm(
    message: str, *, default: bool = False, auto_confirm: bool | None = None
) -> bool:
    """
    Ask for confirmation.

    Args:
        message: The confirmation question
        default: Default value if user just presses Enter
        auto_confirm: Override auto-confirm behavior (None = auto-detect)

    Returns:
        True if confirmed, False otherwise
    """
    if auto_confirm is True or (auto_confirm is None and _get_auto_confirm()):
        return True
    if not can_prompt():
        return default
    result = questionary.confirm(message, default=default, style=PROMPT_STYLE).ask()
    return result if result is not None else default


def text(
    message: str,
    *,
    default: str = "",
    validate: Callable[[str], bool | str] | None = None,
) -> str:
    """
    Prompt for text input.

    Raises:
        NonInteractiveError: If in non-interactive mode and there is no default
    """
    if not can_prompt():
        if default:
            return default
        raise NonInteractiveError(
            f"Cannot prompt for text input in non-interactive mode: {message}"
        )
    kwargs: dict[str, Any] = {"default": default, "style": PROMPT_STYLE}
    if validate is not None:
        kwargs["validate"] = validate
    result = questionary.text(message, **kwargs).ask()
    return result if result is not None else default


def _normalize_choices(choices: Sequence[Any]) -> list[dict[str, Any]]:
    """Normalize choices to dicts with 'name' and 'value'."""
    choice_list = []
    for c in choices:
        if isinstance(c, dict):
            choice_list.append(c)
        else:
            choice_list.append({"name": str(c), "value": c})
    return choice_list


def select(message: str, choices: Sequence[Any], *, default: Any = None) -> Any:
    """
    Prompt for a single selection.

    Args:
        message: The prompt message
        choices: Choices as plain values or dicts with 'name' and 'value'
        default: Value preselected (and returned when prompting is impossible)

    Returns:
        The selected choice's value

    Raises:
        NonInteractiveError: If in non-interactive mode and there is no default

    Example:
        option = select(
            "Option:",
            [{"name": c.name, "value": c} for c in container.configurations],
        )
    """
    if not can_prompt():
        if default is not None:
            return default
        raise NonInteractiveError(
            f"Cannot prompt for selection in non-interactive mode: {message}"
        )

    choice_list = _normalize_choices(choices)
    if not choice_list:
        raise NonInteractiveError(f"No choices available: {message}")

    default_name = None
    for c in choice_list:
        if default is not None and c["value"] == default:
            default_name = c["name"]

    result = questionary.select(
        message,
        choices=[c["name"] for c in choice_list],
        default=default_name,
        style=PROMPT_STYLE,
    ).ask()

    if result is None:
        return default if default is not None else choice_list[0]["value"]
    for c in choice_list:
        if c["name"] == result:
            return c["value"]
    return result
