"""
Tests for CLI argument parsing and tools.
"""

import pytest

from arqforge.cli.cli import build_parser
from arqforge.cli.tools import CommandTool, ListContainersTool, default_tools
from arqforge.commands import ContainerSetupCommand
from arqforge.exceptions import ArqForgeError


@pytest.fixture
def parser():
    return build_parser(default_tools())


@pytest.mark.unit
class TestParser:
    """Test the generated argument parser."""

    def test_subcommands(self):
        """Test that every tool is registered by name."""
        assert [t.name for t in default_tools()] == [
            "container-configuration",
            "container-setup",
            "cube-setup",
            "list-profiles",
            "list-containers",
        ]

    def test_root_options(self, parser):
        """Test global options and their defaults."""
        args = parser.parse_args(["list-containers"])
        assert args.project == "."
        assert args.config is None
        assert args.log_level is None
        assert args.non_interactive is False

    def test_command_inputs_become_options(self, parser):
        """Test long and short flags for command inputs."""
        args = parser.parse_args(
            ["container-setup", "-c", "docker", "--version", "1.0", "--no-chameleon"]
        )
        assert args.tool == "container-setup"
        assert args.input_container == "docker"
        assert args.input_version == "1.0"
        assert args.input_chameleon is False
        assert args.input_download is None

    def test_dashed_names(self, parser):
        """Test dest names for dashed inputs."""
        args = parser.parse_args(
            ["container-configuration", "-o", "jbossHome", "--container-value=-x"]
        )
        assert args.input_container_option == "jbossHome"
        assert args.input_container_value == "-x"

    def test_subcommand_required(self, parser):
        """Test that a subcommand must be given."""
        with pytest.raises(SystemExit):
            parser.parse_args([])

    def test_invalid_log_level(self, parser):
        """Test that --log-level only accepts known names."""
        with pytest.raises(SystemExit):
            parser.parse_args(["--log-level", "verbose", "list-containers"])


@pytest.mark.unit
class TestTools:
    """Test tool plumbing."""

    def test_command_tool_metadata(self):
        """Test that command metadata names the tool."""
        tool = CommandTool(ContainerSetupCommand)
        names, kwargs = tool.cmd
        assert names == ["container-setup"]
        assert kwargs["help"] == "Add an Arquillian container profile"

    def test_logger_requires_setup(self):
        """Test that lg is unavailable before setup."""
        with pytest.raises(ArqForgeError, match="Logger not initialized"):
            ListContainersTool().lg
