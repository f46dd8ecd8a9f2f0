"""
Add an Arquillian Cube extension to the project.
"""

from __future__ import annotations

from arqforge.arquillian import ArquillianFacet
from arqforge.container.catalog import CubeConfiguration, resolve
from arqforge.maven import MavenFacet
from arqforge.ui.inputs import UIInput, UISelectOne

from .base import Command, CommandMetadata, Result, Results, UIBuilder, UIContext


class CubeSetupCommand(Command):
    """Add the Cube dependency for a kind and point it at a definitions file."""

    required_facets = (MavenFacet,)

    def __init__(self) -> None:
        self.type: UISelectOne[CubeConfiguration] = UISelectOne(
            "type", label="Cube configuration type", short_name="t", required=True
        )
        self.file_location: UIInput[str] = UIInput(
            "file-location", label="Definitions file location", short_name="f"
        )
        self.version: UIInput[str] = UIInput(
            "version", label="Arquillian Cube version", short_name="V", required=True
        )

    def metadata(self) -> CommandMetadata:
        return CommandMetadata("cube-setup", "Add Arquillian Cube to the project")

    def initialize_ui(self, builder: UIBuilder) -> None:
        config = builder.context.config
        self.type.set_value_choices(list(CubeConfiguration))
        self.type.set_item_label_converter(lambda kind: kind.type)
        self.version.set_default_value(lambda: config.get("cube.version"))
        builder.add(self.type).add(self.file_location).add(self.version)

    def execute(self, context: UIContext) -> Result:
        kind = self.type.get_value()
        version = self.version.get_value()
        if kind is None or not version:
            return Results.fail("A Cube type and version are required")

        descriptor = resolve(kind)
        project = context.selected_project
        maven = project.get_facet(MavenFacet)
        model = maven.get_model()
        dependency = descriptor.dependency.with_version(str(version))
        if any(d.same_artifact(dependency) for d in model.dependencies):
            context.lg.info(
                "cube dependency already present",
                extra={"dependency": dependency.coordinate},
            )
        else:
            model.add_dependency(dependency)
            maven.set_model(model)

        location = self.file_location.get_value()
        if location:
            arquillian = project.get_facet(ArquillianFacet)
            config = arquillian.install()
            config.add_extension_property(
                descriptor.qualifier, descriptor.location_key, location
            )
            arquillian.set_config(config)

        return Results.success(f"Arquillian Cube {descriptor.type} configured")
