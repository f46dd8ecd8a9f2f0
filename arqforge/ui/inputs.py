"""
Command inputs with computed state.

An input's enablement, default, required flag and (for selections) choices
may each be given as a plain value or as a zero-argument callable. Callables
are evaluated on every read, so an input whose default depends on another
input's value always reflects the current state of that other input.

Example:
    container = UISelectOne("container", short_name="c")
    container.set_value_choices(lambda: manager.get_arquillian_profiles(project))

    option = UISelectOne("container-option", short_name="o", required=True)
    option.set_enabled(container.has_value)
    option.set_value_choices(
        lambda: list(manager.get_container(container.get_value()).configurations)
        if container.has_value()
        else []
    )
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, Generic, TypeVar

from arqforge.exceptions import InputValidationError

T = TypeVar("T")

_TRUE_WORDS = ("1", "true", "yes", "y", "on")
_FALSE_WORDS = ("0", "false", "no", "n", "off")


class InputType(Enum):
    DROPDOWN = "dropdown"
    TEXTBOX = "textbox"
    CHECKBOX = "checkbox"


def _evaluate(value: Any) -> Any:
    return value() if callable(value) else value


def parse_bool(text: str) -> bool:
    """
    Parse a yes/no style string.

    Raises:
        InputValidationError: If the text is not a recognized boolean
    """
    lowered = text.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise InputValidationError("Not a boolean value", value=text)


class UIInput(Generic[T]):
    """A single named command input."""

    def __init__(
        self,
        name: str,
        label: str | None = None,
        short_name: str | None = None,
        required: bool | Callable[[], bool] = False,
        input_type: InputType = InputType.TEXTBOX,
        description: str | None = None,
    ) -> None:
        self.name = name
        self.label = label or name.replace("-", " ").capitalize()
        self.short_name = short_name
        self.input_type = input_type
        self.description = description
        self._required: bool | Callable[[], bool] = required
        self._enabled: bool | Callable[[], bool] = True
        self._default: T | Callable[[], T | None] | None = None
        self._value: T | None = None
        self._value_set = False

    def set_enabled(self, enabled: bool | Callable[[], bool]) -> UIInput[T]:
        self._enabled = enabled
        return self

    def is_enabled(self) -> bool:
        return bool(_evaluate(self._enabled))

    def set_required(self, required: bool | Callable[[], bool]) -> UIInput[T]:
        self._required = required
        return self

    def is_required(self) -> bool:
        return bool(_evaluate(self._required))

    def set_default_value(self, default: T | Callable[[], T | None] | None) -> UIInput[T]:
        self._default = default
        return self

    def get_default_value(self) -> T | None:
        return _evaluate(self._default)  # type: ignore[no-any-return]

    def set_value(self, value: T | None) -> UIInput[T]:
        self._value = value
        self._value_set = value is not None
        return self

    def get_value(self) -> T | None:
        """The explicit value if one was set, otherwise the current default."""
        if self._value_set:
            return self._value
        return self.get_default_value()

    def has_value(self) -> bool:
        value = self.get_value()
        return value is not None and value != ""

    def is_value_set(self) -> bool:
        """True if a value was given explicitly rather than defaulted."""
        return self._value_set

    def set_value_from_text(self, text: str) -> UIInput[T]:
        """
        Set the value from user-supplied text.

        Raises:
            InputValidationError: If the text cannot be converted
        """
        if self.input_type is InputType.CHECKBOX:
            return self.set_value(parse_bool(text))  # type: ignore[arg-type]
        return self.set_value(text)  # type: ignore[arg-type]

    def reset(self) -> None:
        self._value = None
        self._value_set = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class UISelectOne(UIInput[T]):
    """An input whose value must be one of a computed list of choices."""

    def __init__(
        self,
        name: str,
        label: str | None = None,
        short_name: str | None = None,
        required: bool | Callable[[], bool] = False,
        description: str | None = None,
    ) -> None:
        super().__init__(
            name,
            label=label,
            short_name=short_name,
            required=required,
            input_type=InputType.DROPDOWN,
            description=description,
        )
        self._choices: Sequence[T] | Callable[[], Sequence[T]] = ()
        self._label_converter: Callable[[T], str] = str

    def set_value_choices(
        self, choices: Sequence[T] | Callable[[], Sequence[T]]
    ) -> UISelectOne[T]:
        self._choices = choices
        return self

    def get_value_choices(self) -> list[T]:
        return list(_evaluate(self._choices) or ())

    def set_item_label_converter(self, converter: Callable[[T], str]) -> UISelectOne[T]:
        self._label_converter = converter
        return self

    def label_of(self, item: T) -> str:
        return self._label_converter(item)

    def set_value_from_text(self, text: str) -> UISelectOne[T]:
        """
        Select the choice whose label (or string form) equals ``text``.

        Raises:
            InputValidationError: If no choice matches
        """
        choices = self.get_value_choices()
        for choice in choices:
            if self.label_of(choice) == text or str(choice) == text:
                self.set_value(choice)
                return self
        raise InputValidationError(
            f"'{text}' is not a valid choice for {self.name}",
            choices=",".join(self.label_of(c) for c in choices) or "none",
        )
