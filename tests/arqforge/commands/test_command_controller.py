"""
Tests for CommandController.

Tests input resolution, prompting, validation and execution gating.
"""

from unittest.mock import patch

import pytest

from arqforge.commands import (
    Command,
    CommandController,
    CommandMetadata,
    Results,
    UIContext,
)
from arqforge.exceptions import (
    FacetNotInstalledError,
    InputValidationError,
    ProjectError,
)
from arqforge.maven import MavenFacet
from arqforge.project import Project
from arqforge.ui.inputs import InputType, UIInput, UISelectOne


class EchoCommand(Command):
    """Command with one of each input type."""

    required_facets = (MavenFacet,)

    def __init__(self):
        self.initialized = 0
        self.kind = UISelectOne("kind", required=True).set_value_choices(["a", "b"])
        self.name = UIInput("name", required=True)
        self.flag = UIInput("flag", input_type=InputType.CHECKBOX)
        self.detail = UIInput("detail", required=True)

    def metadata(self):
        return CommandMetadata("echo", "Echo inputs")

    def initialize_ui(self, builder):
        self.initialized += 1
        self.flag.set_default_value(False)
        self.detail.set_enabled(lambda: self.kind.get_value() == "b")
        builder.add(self.kind).add(self.name).add(self.flag).add(self.detail)

    def execute(self, context):
        return Results.success(f"{self.kind.get_value()}:{self.name.get_value()}")


@pytest.fixture
def command():
    return EchoCommand()


@pytest.fixture
def controller(command, project):
    return CommandController(command, UIContext(project))


# =============================================================================
# Initialization
# =============================================================================


@pytest.mark.unit
class TestInitialize:
    """Test input collection."""

    def test_inputs_in_declaration_order(self, controller):
        """Test that inputs keep the order the command added them."""
        controller.initialize()
        assert [i.name for i in controller.inputs] == ["kind", "name", "flag", "detail"]

    def test_initialize_once(self, controller, command):
        """Test that initialize_ui runs a single time."""
        controller.initialize().initialize()
        controller.resolve({}, interactive=False)
        assert command.initialized == 1

    def test_unknown_input(self, controller):
        """Test get_input with an unknown name."""
        controller.initialize()
        with pytest.raises(KeyError):
            controller.get_input("missing")


# =============================================================================
# Resolution
# =============================================================================


@pytest.mark.unit
class TestResolve:
    """Test assigning values to inputs."""

    def test_values_applied(self, controller):
        """Test text and bool values."""
        controller.resolve({"kind": "a", "name": "x", "flag": True}, interactive=False)
        assert controller.get_input("kind").get_value() == "a"
        assert controller.get_input("flag").get_value() is True

    def test_checkbox_text(self, controller):
        """Test that checkbox text is parsed."""
        controller.resolve({"flag": "no"}, interactive=False)
        assert controller.get_input("flag").get_value() is False

    def test_disabled_input_ignored(self, controller, caplog):
        """Test that values for disabled inputs are skipped with a warning."""
        with caplog.at_level("WARNING", logger="arqforge"):
            controller.resolve({"kind": "a", "detail": "ignored"}, interactive=False)
        assert controller.get_input("detail").get_value() is None
        assert "input is disabled" in caplog.text
        assert caplog.records[-1].input == "detail"

    def test_no_warning_without_value(self, controller, caplog):
        """Test that a disabled input with no given value is skipped quietly."""
        with caplog.at_level("WARNING", logger="arqforge"):
            controller.resolve({"kind": "a", "name": "x"}, interactive=False)
        assert "input is disabled" not in caplog.text

    def test_enablement_sees_earlier_values(self, controller):
        """Test that later inputs see values resolved before them."""
        controller.resolve({"kind": "b", "detail": "used"}, interactive=False)
        assert controller.get_input("detail").get_value() == "used"

    def test_invalid_choice(self, controller):
        """Test that invalid choices raise."""
        with pytest.raises(InputValidationError):
            controller.resolve({"kind": "z"}, interactive=False)

    def test_prompts_for_missing_values(self, controller):
        """Test interactive resolution through the prompt helpers."""
        with patch("arqforge.ui.prompts.select", return_value="b") as select, patch(
            "arqforge.ui.prompts.text", side_effect=["typed", "more"]
        ) as text, patch("arqforge.ui.prompts.confirm", return_value=True) as confirm:
            controller.resolve({}, interactive=True)

        assert select.call_args.args[1] == [
            {"name": "a", "value": "a"},
            {"name": "b", "value": "b"},
        ]
        assert text.call_count == 2
        confirm.assert_called_once()
        assert controller.get_input("kind").get_value() == "b"
        assert controller.get_input("name").get_value() == "typed"
        assert controller.get_input("flag").get_value() is True
        assert controller.get_input("detail").get_value() == "more"


# =============================================================================
# Execution
# =============================================================================


@pytest.mark.integration
class TestExecute:
    """Test validation and execution gating."""

    def test_validate_lists_missing(self, controller):
        """Test that missing required inputs are reported."""
        controller.resolve({"kind": "b"}, interactive=False)
        assert controller.validate() == ["name", "detail"]

    def test_execute(self, controller, caplog):
        """Test a successful run."""
        controller.resolve({"kind": "a", "name": "x"}, interactive=False)
        with caplog.at_level("INFO", logger="arqforge"):
            result = controller.execute()

        assert result.ok
        assert result.message == "a:x"
        assert "command executed" in caplog.text

    def test_missing_inputs(self, controller):
        """Test that execute refuses to run with missing inputs."""
        controller.resolve({"kind": "a"}, interactive=False)
        with pytest.raises(InputValidationError, match="Missing values") as exc_info:
            controller.execute()
        assert exc_info.value.context["inputs"] == "name"

    def test_missing_facet(self, command, temp_dir):
        """Test that a project without pom.xml is rejected."""
        (temp_dir / "pom.xml").unlink(missing_ok=True)
        controller = CommandController(command, UIContext(Project(temp_dir)))
        controller.resolve({"kind": "a", "name": "x"}, interactive=False)
        with pytest.raises(FacetNotInstalledError) as exc_info:
            controller.execute()
        assert exc_info.value.context["command"] == "echo"

    def test_no_project(self, command):
        """Test that execute requires a selected project."""
        controller = CommandController(command, UIContext(None))
        with pytest.raises(ProjectError, match="No project selected"):
            controller.execute()
