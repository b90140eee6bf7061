"""Rich output formatting helpers for the AgentSync CLI.

Everything printed here is informational. The durable result of a run is
the set of files written by the configurator, not this output.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from agentsync.core.configurator import ConfigureReport
from agentsync.discovery.models import SyncResult
from agentsync.drivers.base import AgentDriver

NO_AGENTS_MESSAGE = "No agents found. Please install an agent package."

console = Console()


def print_rule() -> None:
    """Print a full-width separator line."""
    console.rule(style="dim")


def print_no_agents() -> None:
    console.print(f"[bold red]{NO_AGENTS_MESSAGE}[/bold red]")


def print_active_drivers(drivers: list[AgentDriver], versions: dict[str, str]) -> None:
    """Print a table of the drivers that will be configured.

    Args:
        drivers: Active drivers, in registry order.
        versions: Installed package versions, keyed by package name.
    """
    table = Table(title="Active Agents", show_header=True, header_style="bold")
    table.add_column("Driver", style="bold")
    table.add_column("Package", style="dim")
    table.add_column("Version", justify="right")
    for driver in drivers:
        table.add_row(driver.title, driver.slug, versions.get(driver.slug) or "-")
    console.print(table)


def print_target_result(result: SyncResult) -> None:
    """Print a one-line summary for a synchronized target."""
    target = result.target
    if not result.has_resources:
        console.print(f"  [dim]{target.directory}: nothing to write[/dim]")
        return
    console.print(
        f"  [green]{target.directory}[/green]: "
        f"{result.file_count} files, index in [bold]{target.instruction_file}[/bold]"
    )


def print_configure_report(report: ConfigureReport, summary_path: Path) -> None:
    """Print the per-target results and the summary file status."""
    for result in report.results:
        print_target_result(result)
    if report.summary_written:
        console.print(f"  Summary updated: [bold]{summary_path.name}[/bold]")
    elif report.has_resources:
        console.print(f"  [dim]Summary up to date: {summary_path.name}[/dim]")


def print_error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
