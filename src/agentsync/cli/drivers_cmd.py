"""``agentsync drivers`` -- List registered agent drivers.

Prints a table of every built-in driver: its key, the Composer package
that activates it, its title, and which resources it ships. Useful for
checking which packages AgentSync reacts to.

Exit Codes:
    0 -- Always (informational command).
"""

from __future__ import annotations

import click
from rich.table import Table

from agentsync import __version__
from agentsync.cli.output import console
from agentsync.drivers.registry import DriverRegistry, default_registry


def build_drivers_table(registry: DriverRegistry) -> Table:
    """Build the drivers table for ``registry``, in registration order."""
    table = Table(
        title=f"AgentSync v{__version__} -- {len(registry)} Agent Drivers",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Key", style="bold")
    table.add_column("Package")
    table.add_column("Title")
    table.add_column("Rules", justify="center")
    table.add_column("Skills", justify="right")

    for idx, key in enumerate(registry.list_driver_keys(), start=1):
        driver = registry.resolve(key)
        has_rules = "yes" if driver.rules_source.is_file() else "-"
        table.add_row(
            str(idx), key, driver.slug, driver.title,
            has_rules, str(len(driver.get_skills())),
        )
    return table


@click.command("drivers")
def drivers_command() -> None:
    """List all registered agent drivers and the packages they detect."""
    console.print(build_drivers_table(default_registry()))
