"""
Add a container profile to the POM and register it in arquillian.xml.
"""

from __future__ import annotations

from arqforge.arquillian import ArquillianFacet
from arqforge.container.model import Container
from arqforge.maven import Dependency, MavenFacet
from arqforge.ui.inputs import InputType, UIInput, UISelectOne

from .base import Command, CommandMetadata, Result, Results, UIBuilder, UIContext


class ContainerSetupCommand(Command):
    """
    Set up an Arquillian container.

    With Chameleon, the profile launches the container through its Chameleon
    target. Otherwise the profile carries the adapter artifact and the
    container's declared dependencies at the chosen version. Optionally a
    download execution for the container distribution is added.
    """

    required_facets = (MavenFacet,)

    def __init__(self) -> None:
        self.container: UISelectOne[Container] = UISelectOne(
            "container", label="Container", short_name="c", required=True
        )
        self.version: UIInput[str] = UIInput(
            "version", label="Container version", short_name="V", required=True
        )
        self.activate_by_default: UIInput[bool] = UIInput(
            "activate-by-default",
            label="Activate profile by default",
            input_type=InputType.CHECKBOX,
        )
        self.chameleon: UIInput[bool] = UIInput(
            "chameleon", label="Use Chameleon", input_type=InputType.CHECKBOX
        )
        self.download: UIInput[bool] = UIInput(
            "download",
            label="Download container distribution",
            input_type=InputType.CHECKBOX,
        )

    def metadata(self) -> CommandMetadata:
        return CommandMetadata("container-setup", "Add an Arquillian container profile")

    def initialize_ui(self, builder: UIBuilder) -> None:
        self.container.set_value_choices(builder.context.container_resolver.get_containers)
        self.container.set_item_label_converter(lambda c: c.name)

        self.activate_by_default.set_default_value(False)

        self.chameleon.set_enabled(
            lambda: self._selected() is not None and self._selected().supports_chameleon
        )
        self.chameleon.set_default_value(self.chameleon.is_enabled)

        self.download.set_enabled(
            lambda: self._selected() is not None and self._selected().download is not None
        )
        self.download.set_default_value(False)

        builder.add(self.container).add(self.version).add(self.activate_by_default)
        builder.add(self.chameleon).add(self.download)

    def _selected(self) -> Container | None:
        return self.container.get_value()

    def _dependencies(self, container: Container, version: str) -> list[Dependency]:
        deps = [container.adapter_dependency(version)]
        for dependency in container.dependencies:
            dep = dependency.with_version(version)
            dep.scope = dep.scope or "test"
            deps.append(dep)
        return deps

    def execute(self, context: UIContext) -> Result:
        project = context.selected_project
        container = self._selected()
        version = self.version.get_value()
        if container is None or not version:
            return Results.fail("A container and a version are required")

        manager = context.profile_manager
        activate = bool(self.activate_by_default.get_value())
        if self.chameleon.is_enabled() and self.chameleon.get_value():
            manager.add_chameleon_profile(project, container, version, activate)
        else:
            manager.add_profile(
                project, container, activate, self._dependencies(container, version)
            )

        if self.download.is_enabled() and self.download.get_value():
            manager.add_container_configuration(container, project, version)

        arquillian = project.get_facet(ArquillianFacet)
        config = arquillian.install()
        if not config.has_container(container.profile_id):
            config.add_container(container.profile_id)
            arquillian.set_config(config)

        return Results.success(
            f"Container {container.name} set up in profile {container.profile_id}"
        )
