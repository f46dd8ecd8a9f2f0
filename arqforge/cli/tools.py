"""
arqforge subcommands.

Each project command becomes a subcommand whose options mirror the
command's inputs: ``--<name>``/``-<short>`` for text and selections, and
``--<name>``/``--no-<name>`` for checkboxes.
"""

from __future__ import annotations

import argparse
from typing import Any

from arqforge.commands import (
    Command,
    CommandController,
    ContainerConfigurationCommand,
    ContainerSetupCommand,
    CubeSetupCommand,
)
from arqforge.commands.base import UIContext
from arqforge.exceptions import ContainerNotFoundError
from arqforge.ui.console import get_console
from arqforge.ui.inputs import InputType, UIInput, UISelectOne

from .tool import Tool, ToolConfig


def _dest(ui_input: UIInput[Any]) -> str:
    return "input_" + ui_input.name.replace("-", "_")


class CommandTool(Tool):
    """Runs a project command through a CommandController."""

    def __init__(self, command_type: type[Command]):
        self._command_type = command_type
        metadata = command_type().metadata()
        super().__init__(ToolConfig(name=metadata.name, help_text=metadata.description))

    def _declared_inputs(self) -> list[UIInput[Any]]:
        command = self._command_type()
        return [v for v in vars(command).values() if isinstance(v, UIInput)]

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        for ui_input in self._declared_inputs():
            flags = [f"--{ui_input.name}"]
            if ui_input.short_name:
                flags.append(f"-{ui_input.short_name}")
            kwargs: dict[str, Any] = {"dest": _dest(ui_input), "help": ui_input.label}
            if ui_input.input_type is InputType.CHECKBOX:
                kwargs["action"] = argparse.BooleanOptionalAction
                kwargs["default"] = None
            elif isinstance(ui_input, UISelectOne):
                kwargs["metavar"] = "CHOICE"
            parser.add_argument(*flags, **kwargs)

    def run(self, args: argparse.Namespace, context: UIContext) -> int:
        controller = CommandController(self._command_type(), context).initialize()
        values = {i.name: getattr(args, _dest(i), None) for i in controller.inputs}
        interactive = False if args.non_interactive else None
        controller.resolve(values, interactive=interactive)

        result = controller.execute()
        console = get_console()
        if result.ok:
            console.print_success(result.message)
            return 0
        self.lg.error(result.message)
        console.print_error(result.message)
        return 1


class ListProfilesTool(Tool):
    """Lists the POM's profiles and the container each one launches."""

    def _create_config(self) -> ToolConfig:
        return ToolConfig(name="list-profiles", help_text="List POM profiles")

    def run(self, args: argparse.Namespace, context: UIContext) -> int:
        project = context.selected_project
        manager = context.profile_manager
        rows = []
        for profile_id in manager.get_arquillian_profiles(project):
            try:
                container = manager.get_container(profile_id).name
            except ContainerNotFoundError:
                container = "-"
            rows.append([profile_id, container])
        get_console().print_table("Profiles", ["Profile", "Container"], rows)
        return 0


class ListContainersTool(Tool):
    """Lists the container catalog."""

    def _create_config(self) -> ToolConfig:
        return ToolConfig(name="list-containers", help_text="List known containers")

    def run(self, args: argparse.Namespace, context: UIContext) -> int:
        rows = [
            [
                c.id,
                c.name,
                c.container_type,
                c.profile_id,
                "yes" if c.supports_chameleon else "no",
                "yes" if c.download is not None else "no",
            ]
            for c in context.container_resolver.get_containers()
        ]
        get_console().print_table(
            "Containers",
            ["Id", "Name", "Type", "Profile", "Chameleon", "Download"],
            rows,
        )
        return 0


def default_tools() -> list[Tool]:
    return [
        CommandTool(ContainerConfigurationCommand),
        CommandTool(ContainerSetupCommand),
        CommandTool(CubeSetupCommand),
        ListProfilesTool(),
        ListContainersTool(),
    ]
