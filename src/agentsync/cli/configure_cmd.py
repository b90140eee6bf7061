"""``agentsync configure`` -- Write assistant resources for installed agents.

Reads ``composer.lock``, selects the drivers whose package is installed and
writes their rules, skills and agents into every AI assistant directory,
then refreshes the managed regions of the instruction files and
``AGENTS.md``.

Meant to run after every ``composer install``/``composer update``, e.g.
from ``composer.json``::

    "scripts": {
        "post-autoload-dump": ["agentsync configure"]
    }

Exit Codes:
    0 -- Resources written, or no agents found.
    1 -- The lockfile could not be read, or a filesystem error occurred.
    2 -- No agents found and ``--strict`` was given.
"""

from __future__ import annotations

import sys

import click

from agentsync.cli.options import project_options
from agentsync.cli.output import (
    console,
    print_active_drivers,
    print_configure_report,
    print_error,
    print_no_agents,
    print_rule,
)
from agentsync.config import AgentSyncConfig
from agentsync.core.configurator import Configurator
from agentsync.drivers.registry import default_registry
from agentsync.exceptions import AgentSyncError


@click.command("configure")
@project_options
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with code 2 when no agents are found.",
)
def configure_command(config: AgentSyncConfig, strict: bool) -> None:
    """Write rules, skills and agents for the installed agent packages.

    Only the rules/, skills/ and agents/ subdirectories of each assistant
    directory are regenerated; other files are left untouched.
    """
    print_rule()
    console.print("Collecting packages...")

    configurator = Configurator(default_registry(), config)
    try:
        report = configurator.configure()
    except AgentSyncError as exc:
        print_error(str(exc))
        sys.exit(1)
    except OSError as exc:
        print_error(f"Filesystem error: {exc}")
        sys.exit(1)

    if not report.has_active_drivers:
        print_no_agents()
        print_rule()
        sys.exit(2 if strict else 0)

    print_active_drivers(report.active_drivers, report.versions)
    console.print("Setting rules for the selected drivers...")
    print_configure_report(report, config.summary_path)
    print_rule()
    sys.exit(0)
