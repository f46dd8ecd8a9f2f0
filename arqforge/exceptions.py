"""
Unified exception hierarchy for arqforge.

Every error raised by the container, profile and facet layers inherits from
ArqForgeError so callers can handle them with a single except clause.
"""

from typing import Any


class ArqForgeError(Exception):
    """
    Base exception for all arqforge errors.

    Example:
        try:
            manager.add_container_configuration(container, project, "10.1.0.Final")
        except ArqForgeError as e:
            lg.error("container configuration failed", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ContainerError(ArqForgeError):
    """
    Container catalog errors.

    Examples:
        - Catalog file cannot be read or has an invalid entry
        - Chameleon target requested for a container without one
    """

    pass


class ContainerNotFoundError(ContainerError):
    """Raised when a profile id does not match any cataloged container."""

    def __init__(self, profile_id: str) -> None:
        self.profile_id = profile_id
        super().__init__(f"Container not found for profile {profile_id}")


class ProfileNotFoundError(ArqForgeError):
    """Raised when neither the container's profile id nor its id is in the POM."""

    def __init__(self, container_id: str, profile_id: str) -> None:
        self.container_id = container_id
        self.profile_id = profile_id
        super().__init__(
            f"Container profile with id {container_id} or {profile_id} not found"
        )


class TemplateError(ArqForgeError):
    """
    Raised when a statically authored XML fragment fails to parse.

    This is an internal invariant violation, never a user error.
    """

    pass


class ProjectError(ArqForgeError):
    """
    Project-related errors.

    Examples:
        - pom.xml missing or malformed
        - arquillian.xml malformed
    """

    pass


class FacetNotInstalledError(ProjectError):
    """Raised when a command needs a facet the project does not have."""

    def __init__(self, facet: str, **context: Any) -> None:
        self.facet = facet
        super().__init__(f"Project does not have the {facet} facet installed", **context)


class ConfigError(ArqForgeError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or too large
        - Invalid YAML syntax
        - Schema validation failed
    """

    pass


class InputValidationError(ArqForgeError):
    """
    Raised when a command input receives an unusable value.

    Examples:
        - Value is not one of the offered choices
        - Required input left without a value
    """

    pass
