"""
Tests for ContainerConfigurationCommand.

Tests the dependent inputs:
- container choices come from the POM profiles
- option choices come from the selected container
- value default and required flag follow the selected option
"""

import pytest

from arqforge.commands import CommandController, ContainerConfigurationCommand
from arqforge.exceptions import (
    ContainerNotFoundError,
    FacetNotInstalledError,
    InputValidationError,
)

POM_WITH_DOCKER_PROFILE = """<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <artifactId>demo</artifactId>
  <profiles>
    <profile><id>arquillian-docker</id></profile>
    <profile><id>arquillian-wildfly-managed</id></profile>
  </profiles>
</project>
"""


@pytest.fixture
def controller(context):
    return CommandController(ContainerConfigurationCommand(), context).initialize()


@pytest.fixture
def with_profiles(project, write_pom):
    """Replace the sample POM with one holding two Arquillian profiles."""
    write_pom(POM_WITH_DOCKER_PROFILE)


# =============================================================================
# Input State
# =============================================================================


@pytest.mark.integration
class TestInputsWithoutProfiles:
    """Test the inputs on a POM without profiles."""

    def test_container_has_no_default(self, controller):
        """Test that no container is preselected."""
        container = controller.get_input("container")
        assert container.get_value_choices() == []
        assert container.get_value() is None

    def test_option_disabled(self, controller):
        """Test that the option input waits for a container."""
        assert not controller.get_input("container-option").is_enabled()

    def test_value_disabled_and_required(self, controller):
        """Test the value input when no option can be chosen."""
        value = controller.get_input("container-value")
        assert not value.is_enabled()
        assert value.is_required() is True


@pytest.mark.integration
class TestInputsWithProfiles:
    """Test the inputs on a POM with Arquillian profiles."""

    @pytest.fixture(autouse=True)
    def _profiles(self, with_profiles):
        pass

    def test_first_profile_preselected(self, controller):
        """Test that the first sorted profile is the default."""
        container = controller.get_input("container")
        assert container.get_value_choices() == [
            "arquillian-docker",
            "arquillian-wildfly-managed",
        ]
        assert container.get_value() == "arquillian-docker"

    def test_option_choices_follow_container(self, controller):
        """Test that option choices are the selected container's options."""
        option = controller.get_input("container-option")
        assert option.is_enabled()
        assert [o.name for o in option.get_value_choices()] == [
            "serverUri",
            "dockerContainersFile",
        ]

        controller.get_input("container").set_value("arquillian-wildfly-managed")
        assert [o.name for o in option.get_value_choices()] == [
            "jbossHome",
            "javaVmArguments",
        ]

    def test_value_defaults_to_option_default(self, controller):
        """Test that an option with a default makes the value optional."""
        controller.resolve({"container-option": "serverUri"}, interactive=False)

        value = controller.get_input("container-value")
        assert value.is_enabled()
        assert value.get_value() == "unix:///var/run/docker.sock"
        assert value.is_required() is False

    def test_value_required_without_option_default(self, controller):
        """Test that an option without a default requires a value."""
        controller.resolve({"container-option": "dockerContainersFile"}, interactive=False)

        value = controller.get_input("container-value")
        assert value.get_value() is None
        assert value.is_required() is True

    def test_unknown_option_rejected(self, controller):
        """Test that an option outside the container's list is rejected."""
        with pytest.raises(InputValidationError, match="not a valid choice"):
            controller.resolve({"container-option": "jbossHome"}, interactive=False)

    def test_unknown_container_profile(self, controller, write_pom):
        """Test that a profile without a container cannot list options."""
        write_pom(
            "<project><profiles><profile><id>dev</id></profile></profiles></project>"
        )
        with pytest.raises(ContainerNotFoundError):
            controller.get_input("container-option").get_value_choices()


# =============================================================================
# Execution
# =============================================================================


@pytest.mark.integration
class TestExecute:
    """Test writing the chosen property to arquillian.xml."""

    @pytest.fixture(autouse=True)
    def _profiles(self, with_profiles):
        pass

    def test_sets_container_property(self, controller, arquillian):
        """Test the property lands in the selected container's configuration."""
        arquillian.install()
        controller.resolve(
            {
                "container": "arquillian-docker",
                "container-option": "serverUri",
                "container-value": "tcp://localhost:2375",
            },
            interactive=False,
        )
        result = controller.execute()

        assert result.ok
        assert result.message == (
            "Set serverUri=tcp://localhost:2375 for container arquillian-docker"
        )
        config = arquillian.get_config()
        assert config.get_container_property("arquillian-docker", "serverUri") == (
            "tcp://localhost:2375"
        )

    def test_uses_option_default(self, controller, arquillian):
        """Test that the option default is written when no value is given."""
        arquillian.install()
        controller.resolve({"container-option": "serverUri"}, interactive=False)
        assert controller.execute().ok
        assert arquillian.get_config().get_container_property(
            "arquillian-docker", "serverUri"
        ) == "unix:///var/run/docker.sock"

    def test_requires_arquillian_descriptor(self, controller):
        """Test that the command needs the arquillian facet."""
        controller.resolve({"container-option": "serverUri"}, interactive=False)
        with pytest.raises(FacetNotInstalledError, match="arquillian"):
            controller.execute()

    def test_missing_value(self, controller, arquillian):
        """Test that a required value without input fails validation."""
        arquillian.install()
        controller.resolve({"container-option": "dockerContainersFile"}, interactive=False)

        assert controller.validate() == ["container-value"]
        with pytest.raises(InputValidationError) as exc_info:
            controller.execute()
        assert exc_info.value.context["inputs"] == "container-value"
