"""
Set a container configuration property in arquillian.xml.
"""

from __future__ import annotations

from arqforge.arquillian import ArquillianFacet
from arqforge.container.model import Configuration
from arqforge.container.profile_manager import ProfileManager
from arqforge.ui.inputs import UIInput, UISelectOne

from .base import Command, CommandMetadata, Result, Results, UIBuilder, UIContext


class ContainerConfigurationCommand(Command):
    """
    Pick a container profile, one of its configuration options and a value.

    The option input is enabled once a container is chosen and offers that
    container's options. The value input is enabled once an option is chosen,
    defaults to the option's default and is required unless that default
    exists.
    """

    required_facets = (ArquillianFacet,)

    def __init__(self) -> None:
        self._profile_manager: ProfileManager | None = None
        self.container: UISelectOne[str] = UISelectOne(
            "container", label="Container", short_name="c"
        )
        self.container_option: UISelectOne[Configuration] = UISelectOne(
            "container-option",
            label="Container Configuration Option",
            short_name="o",
            required=True,
        )
        self.container_value: UIInput[str] = UIInput(
            "container-value", label="Container Configuration Value", short_name="v"
        )

    def metadata(self) -> CommandMetadata:
        return CommandMetadata(
            "container-configuration",
            "Set a configuration option of an Arquillian container",
        )

    def initialize_ui(self, builder: UIBuilder) -> None:
        project = builder.context.selected_project
        manager = self._profile_manager = builder.context.profile_manager

        def profiles() -> list[str]:
            return manager.get_arquillian_profiles(project)

        def first_profile() -> str | None:
            choices = profiles()
            return choices[0] if choices else None

        self.container.set_value_choices(profiles)
        self.container.set_default_value(first_profile)

        self.container_option.set_enabled(self.container.has_value)
        self.container_option.set_value_choices(self._container_options)
        self.container_option.set_item_label_converter(lambda option: option.name)

        self.container_value.set_enabled(self.container_option.has_value)
        self.container_value.set_default_value(self._option_default)
        self.container_value.set_required(
            lambda: not self.container_value.is_enabled()
            or self._option_default() is None
        )

        builder.add(self.container).add(self.container_option).add(self.container_value)

    def _container_options(self) -> list[Configuration]:
        profile_id = self.container.get_value()
        if not profile_id or self._profile_manager is None:
            return []
        return list(self._profile_manager.get_container(profile_id).configurations)

    def _option_default(self) -> str | None:
        option = self.container_option.get_value()
        return option.default if option is not None else None

    def execute(self, context: UIContext) -> Result:
        container = self.container.get_value()
        option = self.container_option.get_value()
        value = self.container_value.get_value()
        if not container or option is None or value is None:
            return Results.fail("A container, an option and a value are required")

        facet = context.selected_project.get_facet(ArquillianFacet)
        config = facet.get_config()
        config.add_container_property(container, option.name, value)
        facet.set_config(config)
        return Results.success(f"Set {option.name}={value} for container {container}")
