"""
Drives a command: collects its inputs, resolves their values and executes it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from arqforge.exceptions import FacetNotInstalledError, InputValidationError
from arqforge.ui import prompts
from arqforge.ui.inputs import InputType, UIInput, UISelectOne

from .base import Command, Result, UIBuilder, UIContext


class CommandController:
    """
    Runs one command against a context.

    Inputs are resolved in declaration order. For each enabled input a value
    given by the caller wins; otherwise the user is prompted with the
    computed default preselected, or the default is kept when prompting is
    not possible. Disabled inputs are skipped, with a warning when the caller
    gave them a value. Because enablement, defaults and choices are
    callables, each input sees the values resolved before it.

    Example:
        controller = CommandController(command, context)
        controller.initialize()
        controller.resolve({"container": "arquillian-wildfly-managed"})
        result = controller.execute()
    """

    def __init__(self, command: Command, context: UIContext) -> None:
        self.command = command
        self.context = context
        self._inputs: list[UIInput[Any]] = []
        self._initialized = False

    @property
    def inputs(self) -> list[UIInput[Any]]:
        return list(self._inputs)

    def get_input(self, name: str) -> UIInput[Any]:
        for ui_input in self._inputs:
            if ui_input.name == name:
                return ui_input
        raise KeyError(name)

    def initialize(self) -> CommandController:
        if not self._initialized:
            builder = UIBuilder(self.context)
            self.command.initialize_ui(builder)
            self._inputs = builder.inputs
            self._initialized = True
        return self

    def resolve(
        self, values: Mapping[str, Any] | None = None, interactive: bool | None = None
    ) -> CommandController:
        """
        Assign values to the command's inputs.

        Args:
            values: Input name to raw value (text, or bool for checkboxes);
                None entries are ignored
            interactive: Prompt for missing values; None auto-detects

        Raises:
            InputValidationError: If a given value is not acceptable
        """
        self.initialize()
        values = values or {}
        if interactive is None:
            interactive = prompts.can_prompt()

        for ui_input in self._inputs:
            raw = values.get(ui_input.name)
            if not ui_input.is_enabled():
                if raw is not None:
                    self.context.lg.warning(
                        "value ignored, input is disabled",
                        extra={"input": ui_input.name, "value": raw},
                    )
                continue
            if raw is not None:
                if isinstance(raw, bool):
                    ui_input.set_value(raw)
                else:
                    ui_input.set_value_from_text(str(raw))
            elif interactive:
                self._prompt(ui_input)
            self.context.lg.debug(
                "input resolved",
                extra={"input": ui_input.name, "value": ui_input.get_value()},
            )
        return self

    def _prompt(self, ui_input: UIInput[Any]) -> None:
        current = ui_input.get_value()
        if isinstance(ui_input, UISelectOne):
            choices = ui_input.get_value_choices()
            if not choices:
                return
            selected = prompts.select(
                f"{ui_input.label}:",
                [{"name": ui_input.label_of(c), "value": c} for c in choices],
                default=current,
            )
            ui_input.set_value(selected)
        elif ui_input.input_type is InputType.CHECKBOX:
            ui_input.set_value(prompts.confirm(f"{ui_input.label}?", default=bool(current)))
        else:
            answer = prompts.text(
                f"{ui_input.label}:", default="" if current is None else str(current)
            )
            if answer:
                ui_input.set_value(answer)

    def validate(self) -> list[str]:
        """Names of enabled, required inputs that have no value."""
        self.initialize()
        return [
            i.name
            for i in self._inputs
            if i.is_enabled() and i.is_required() and not i.has_value()
        ]

    def execute(self) -> Result:
        """
        Execute the command.

        Raises:
            FacetNotInstalledError: If the project lacks a required facet
            InputValidationError: If required inputs have no value
        """
        self.initialize()
        project = self.context.selected_project
        for facet_type in self.command.required_facets:
            if not project.has_facet(facet_type):
                raise FacetNotInstalledError(
                    getattr(facet_type, "name", facet_type.__name__),
                    command=self.command.metadata().name,
                )

        missing = self.validate()
        if missing:
            raise InputValidationError(
                "Missing values for required inputs", inputs=",".join(missing)
            )

        result = self.command.execute(self.context)
        self.context.lg.info(
            "command executed",
            extra={"command": self.command.metadata().name, "ok": result.ok},
        )
        return result
