"""Configurator: synchronizes driver resources into AI assistant targets.

The configurator is the single entry point that replaces the host
framework's "packages discovered" hook. One ``configure()`` call:

1. Reads the installed packages from the lockfile and selects the active
   drivers (registry order). With no active drivers nothing is written.
2. Collects the shared agent templates once.
3. For every target directory:
   a. ensures the directory exists;
   b. clears the reserved ``rules``, ``skills`` and ``agents``
      subdirectories, leaving all other content alone;
   c. copies each active driver's skills to ``skills/<path>/`` and its
      rules to ``rules/<path>.md``;
   d. copies the agent templates into ``agents/``;
   e. rewrites the tagged region of the target's instruction file.
4. Rewrites the tagged region of the project-root summary file.

Failure Semantics:
    Filesystem errors propagate and abort the run. Targets processed
    before the failure keep their new content; nothing is rolled back.
    Runs are not safe to execute concurrently against the same project.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from agentsync.config import AgentSyncConfig
from agentsync.core.regions import DIRECTORY_TAG, SUMMARY_TAG, write_region
from agentsync.core.renderer import render_summary_body, render_target_body
from agentsync.discovery.models import DriverResources, SyncResult
from agentsync.discovery.packages import (
    detect_installed_packages,
    read_installed_versions,
)
from agentsync.discovery.targets import (
    AGENTS_DIR,
    RESERVED_SUBDIRS,
    RULES_DIR,
    SKILLS_DIR,
    TargetProfile,
)
from agentsync.drivers.base import RESOURCES_PATH, AgentDriver
from agentsync.drivers.registry import DriverRegistry

logger = logging.getLogger(__name__)


@dataclass
class ConfigureReport:
    """Outcome of a configuration run.

    Attributes:
        active_drivers: Drivers whose package is installed, in registry order.
        versions: Installed package versions, keyed by package name.
        results: One entry per processed target. Empty when no driver
            was active.
        summary_written: Whether the summary file changed.
    """

    active_drivers: list[AgentDriver] = field(default_factory=list)
    versions: dict[str, str] = field(default_factory=dict)
    results: list[SyncResult] = field(default_factory=list)
    summary_written: bool = False

    @property
    def has_active_drivers(self) -> bool:
        return bool(self.active_drivers)

    @property
    def has_resources(self) -> bool:
        return any(r.has_resources for r in self.results)


def collect_agent_templates(resources_path: Path = RESOURCES_PATH) -> dict[str, Path]:
    """Map agent template file names to their source paths (sorted)."""
    source = resources_path / AGENTS_DIR
    if not source.is_dir():
        return {}
    return {p.name: p for p in sorted(source.iterdir()) if p.is_file()}


class Configurator:
    """Writes rules, skills and agents for every active driver.

    Args:
        registry: Drivers to consider, in processing order.
        config: Project location and targets.
        agents_path: Resource root holding the shared ``agents/``
            templates. Defaults to the packaged resources.
    """

    def __init__(
        self,
        registry: DriverRegistry,
        config: AgentSyncConfig,
        agents_path: Path | None = None,
    ) -> None:
        self.registry = registry
        self.config = config
        self.agents_path = agents_path if agents_path is not None else RESOURCES_PATH

    def find_active_drivers(self, installed: frozenset[str] | None = None) -> list[AgentDriver]:
        """Return the registered drivers whose package is installed.

        Args:
            installed: Installed package names. Read from the lockfile
                when omitted.
        """
        if installed is None:
            installed = detect_installed_packages(self.config.lockfile_path)
        return self.registry.active_drivers(installed)

    def configure(self) -> ConfigureReport:
        """Run the full synchronization for every configured target."""
        versions = read_installed_versions(self.config.lockfile_path)
        drivers = self.find_active_drivers(frozenset(versions))
        if not drivers:
            logger.info("No agents found in %s", self.config.lockfile_path)
            return ConfigureReport()

        report = ConfigureReport(active_drivers=drivers, versions=versions)
        agents = collect_agent_templates(self.agents_path)

        for target in self.config.targets:
            report.results.append(self.sync_target(target, drivers, agents))

        if report.has_resources:
            body = render_summary_body(report.results, self.config.project_root)
            report.summary_written = write_region(self.config.summary_path, SUMMARY_TAG, body)
        return report

    def sync_target(
        self,
        target: TargetProfile,
        drivers: list[AgentDriver],
        agents: dict[str, Path],
    ) -> SyncResult:
        """Regenerate the owned subdirectories of one target.

        Args:
            target: Target to write into.
            drivers: Active drivers, in registry order.
            agents: Shared agent templates, file name to source path.

        Returns:
            What was written into the target.
        """
        root = self.config.project_root
        target_dir = root / target.directory
        target_dir.mkdir(parents=True, exist_ok=True)
        self._clear_reserved(target_dir)

        result = SyncResult(target=target)
        for driver in drivers:
            resources = self._sync_driver(target_dir, driver)
            if resources.has_resources:
                result.drivers.append(resources)

        for name, source in agents.items():
            destination = target_dir / AGENTS_DIR / name
            self._copy(source, destination)
            result.agents.append(self._relative(destination))

        if result.has_resources:
            write_region(
                root / target.instruction_file,
                DIRECTORY_TAG,
                render_target_body(result, root),
            )
        logger.info("Synchronized %d files into %s", result.file_count, target.directory)
        return result

    def _sync_driver(self, target_dir: Path, driver: AgentDriver) -> DriverResources:
        resources = DriverResources(title=driver.title, path=driver.path)

        for name, source in driver.get_skills().items():
            destination = target_dir / SKILLS_DIR / driver.path / name
            self._copy(source, destination)
            resources.skills.append(self._relative(destination))

        rules = driver.get_rules()
        if rules is not None:
            destination = target_dir / RULES_DIR / f"{driver.path}.md"
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(rules, encoding="utf-8")
            logger.debug("Wrote rules %s", destination)
            resources.rules = self._relative(destination)
        return resources

    @staticmethod
    def _clear_reserved(target_dir: Path) -> None:
        for name in RESERVED_SUBDIRS:
            owned = target_dir / name
            if owned.is_symlink() or owned.is_file():
                owned.unlink()
            elif owned.is_dir():
                shutil.rmtree(owned)
            else:
                continue
            logger.debug("Cleared %s", owned)

    @staticmethod
    def _copy(source: Path, destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
        logger.debug("Copied %s -> %s", source, destination)

    def _relative(self, path: Path) -> str:
        return path.relative_to(self.config.project_root).as_posix()
