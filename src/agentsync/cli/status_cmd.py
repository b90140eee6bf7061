"""``agentsync status`` -- Show which agents are active, without writing.

Reads the lockfile and reports, for every registered driver, whether its
package is installed. Nothing on disk is modified.

Exit Codes:
    0 -- At least one agent is active.
    1 -- The lockfile could not be read.
    2 -- No agents found.
"""

from __future__ import annotations

import sys

import click
from rich.table import Table
from rich.text import Text

from agentsync.cli.options import project_options
from agentsync.cli.output import console, print_error, print_no_agents
from agentsync.config import AgentSyncConfig
from agentsync.discovery.packages import read_installed_versions
from agentsync.drivers.registry import default_registry
from agentsync.exceptions import AgentSyncError


@click.command("status")
@project_options
def status_command(config: AgentSyncConfig) -> None:
    """Show the agent drivers activated by the project's lockfile."""
    try:
        versions = read_installed_versions(config.lockfile_path)
    except AgentSyncError as exc:
        print_error(str(exc))
        sys.exit(1)
    except OSError as exc:
        print_error(f"Filesystem error: {exc}")
        sys.exit(1)

    registry = default_registry()
    table = Table(title="Agent Status", show_header=True, header_style="bold")
    table.add_column("Driver", style="bold")
    table.add_column("Package", style="dim")
    table.add_column("Status", justify="center")
    table.add_column("Version", justify="right")

    active = 0
    for driver in registry.drivers():
        if driver.slug in versions:
            active += 1
            status = Text("ACTIVE", style="bold green")
            version = versions[driver.slug] or "-"
        else:
            status = Text("not installed", style="dim")
            version = "-"
        table.add_row(driver.title, driver.slug, status, version)

    console.print(table)
    console.print("Targets: " + ", ".join(t.directory for t in config.targets))
    if not active:
        print_no_agents()
        sys.exit(2)
    sys.exit(0)
