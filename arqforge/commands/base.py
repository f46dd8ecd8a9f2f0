"""
Command building blocks.

A command declares its inputs in ``initialize_ui()``, wiring their
enablement, defaults and choices as callables over other inputs, and does
its work in ``execute()``. The ``CommandController`` drives both steps.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from arqforge.config import Config
from arqforge.container.profile_manager import ProfileManager
from arqforge.container.resolver import ContainerResolver
from arqforge.exceptions import ProjectError
from arqforge.project import Project
from arqforge.ui.inputs import UIInput


@dataclass(frozen=True)
class CommandMetadata:
    """Name and help text of a command."""

    name: str
    description: str = ""
    category: str = "Arquillian"


@dataclass(frozen=True)
class Result:
    """Outcome of a command execution."""

    ok: bool
    message: str
    error: BaseException | None = None


class Results:
    """Factory for Result values."""

    @staticmethod
    def success(message: str = "") -> Result:
        return Result(True, message)

    @staticmethod
    def fail(message: str, error: BaseException | None = None) -> Result:
        return Result(False, message, error)


class UIContext:
    """
    What a command runs against.

    Holds the selected project, the loaded config and a logger, and builds
    the container resolver and profile manager from the config on first use.
    """

    def __init__(
        self,
        project: Project | None,
        config: Config | None = None,
        lg: logging.Logger | None = None,
        container_resolver: ContainerResolver | None = None,
        profile_manager: ProfileManager | None = None,
    ) -> None:
        self.project = project
        self.config = config if config is not None else Config.defaults()
        self.lg = lg or logging.getLogger("arqforge")
        self._container_resolver = container_resolver
        self._profile_manager = profile_manager
        self.attributes: dict[str, Any] = {}

    @property
    def container_resolver(self) -> ContainerResolver:
        if self._container_resolver is None:
            catalog = self.config.get("containers.catalog")
            # Relative catalog paths are relative to the project
            if catalog and self.project is not None:
                catalog = self.project.root / Path(catalog)
            self._container_resolver = ContainerResolver(catalog, lg=self.lg)
        return self._container_resolver

    @property
    def profile_manager(self) -> ProfileManager:
        if self._profile_manager is None:
            self._profile_manager = ProfileManager(
                self.container_resolver,
                surefire_version=str(self.config.get("maven.surefire_version")),
                lg=self.lg,
            )
        return self._profile_manager

    @property
    def selected_project(self) -> Project:
        """
        Raises:
            ProjectError: If no project was selected
        """
        if self.project is None:
            raise ProjectError("No project selected")
        return self.project


class UIBuilder:
    """Collects a command's inputs in declaration order."""

    def __init__(self, context: UIContext) -> None:
        self.context = context
        self._inputs: list[UIInput[Any]] = []

    def add(self, ui_input: UIInput[Any]) -> UIBuilder:
        self._inputs.append(ui_input)
        return self

    @property
    def inputs(self) -> list[UIInput[Any]]:
        return list(self._inputs)


class Command(ABC):
    """
    Base class for project commands.

    Subclasses list the facet types they need in ``required_facets``; the
    controller refuses to execute them on projects that lack one.
    """

    required_facets: tuple[type, ...] = ()

    @abstractmethod
    def metadata(self) -> CommandMetadata:
        pass

    @abstractmethod
    def initialize_ui(self, builder: UIBuilder) -> None:
        pass

    @abstractmethod
    def execute(self, context: UIContext) -> Result:
        pass

    def is_enabled(self, context: UIContext) -> bool:
        """True if a project is selected and has every required facet."""
        if context.project is None:
            return False
        return all(context.project.has_facet(f) for f in self.required_facets)
