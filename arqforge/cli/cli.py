"""
arqforge - configure Arquillian containers in a Maven project.

Usage:
    arqforge list-containers
    arqforge --project app container-setup -c wildfly-managed -V 10.1.0.Final --download
    arqforge container-configuration -c arquillian-wildfly-managed -o javaVmArguments --container-value=-Xmx1g
    arqforge cube-setup --type Docker --file-location docker-compose.yml
"""

from __future__ import annotations

import argparse
import sys

from arqforge import __version__
from arqforge.commands.base import UIContext
from arqforge.config import Config
from arqforge.exceptions import ArqForgeError, InputValidationError
from arqforge.log import LogConfig, LogConstants, LoggerFactory
from arqforge.project import Project
from arqforge.ui.console import get_console
from arqforge.ui.prompts import NonInteractiveError

from .tool import Tool
from .tools import default_tools

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def build_parser(tools: list[Tool]) -> argparse.ArgumentParser:
    """Create the root parser with one subcommand per tool."""
    parser = argparse.ArgumentParser(
        prog="arqforge",
        description="Configure Arquillian test containers in a Maven project",
    )
    parser.add_argument(
        "--project", "-p", default=".", help="project directory (default: current)"
    )
    parser.add_argument(
        "--config", help="config file (default: <project>/.arqforge.yaml)"
    )
    parser.add_argument(
        "--log-level",
        choices=sorted(LogConstants.LEVEL_NAMES),
        help="log level (overrides logging.level)",
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="never prompt; use defaults for inputs not given",
    )
    parser.add_argument(
        "--version", action="version", version=f"arqforge {__version__}"
    )

    subs = parser.add_subparsers(dest="tool", metavar="<command>", required=True)
    for tool in tools:
        names, kwargs = tool.cmd
        tool.add_args(subs.add_parser(*names, **kwargs))
    return parser


def _load_config(args: argparse.Namespace, project: Project) -> Config:
    config = Config(args.config) if args.config else Config.for_project(project.root)
    config.validate()
    return config


def main(argv: list[str] | None = None) -> int:
    """
    Run the arqforge CLI.

    Returns:
        0 on success, 1 if the command failed, 2 if an input was rejected
    """
    tools = default_tools()
    args = build_parser(tools).parse_args(argv)
    console = get_console()

    try:
        project = Project(args.project)
        config = _load_config(args, project)
        log_config = LogConfig.from_config(config)
        if args.log_level:
            log_config = LogConfig.from_params(
                args.log_level, log_config.location, log_config.colors
            )
    except ArqForgeError as e:
        console.print_error(str(e))
        return EXIT_FAILURE

    lg = LoggerFactory.create_root(log_config)
    context = UIContext(project, config, lg)
    tool = next(t for t in tools if t.name == args.tool)
    tool.setup(lg)

    try:
        return tool.run(args, context)
    except (InputValidationError, NonInteractiveError) as e:
        lg.error("invalid input", extra={"exception": e})
        console.print_error(str(e))
        return EXIT_INVALID_INPUT
    except ArqForgeError as e:
        lg.error("command failed", extra={"exception": e})
        console.print_error(str(e))
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
