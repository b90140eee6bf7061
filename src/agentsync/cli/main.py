"""AgentSync CLI -- AI assistant resources for Laravel projects.

Entry point for the ``agentsync`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    configure -- Write rules, skills and agents for installed agents.
    status    -- Show which agents the lockfile activates.
    drivers   -- List all registered agent drivers.

Usage::

    agentsync configure                      # Current directory
    agentsync configure -p ../my-app         # Another project
    agentsync configure -t claude            # Only .claude
    agentsync status
    agentsync drivers
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from agentsync import __version__
from agentsync.cli.configure_cmd import configure_command
from agentsync.cli.drivers_cmd import drivers_command
from agentsync.cli.status_cmd import status_command


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """AgentSync: AI assistant rules and skills for Laravel projects.

    Detects agent packages in composer.lock and writes matching rules,
    skills and agents into .cursor, .gemini and .claude.
    """
    _configure_logging(verbose)


# Register all subcommands
cli.add_command(configure_command)
cli.add_command(status_command)
cli.add_command(drivers_command)
