"""Data models for synchronization results.

``SyncResult`` records what the configurator actually wrote into one
target directory. Paths are POSIX strings relative to the project root so
that rendered Markdown links are portable and output is identical across
machines.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from agentsync.discovery.targets import TargetProfile


@dataclass
class DriverResources:
    """Resources written for a single driver into one target.

    Attributes:
        title: Driver display name.
        path: Driver path segment.
        rules: Relative path of the rules file, or None if the driver
            ships no rules.
        skills: Relative paths of the copied skill files.
    """

    title: str
    path: str
    rules: str | None = None
    skills: list[str] = field(default_factory=list)

    @property
    def has_resources(self) -> bool:
        return self.rules is not None or bool(self.skills)


@dataclass
class SyncResult:
    """Everything written into one target directory during a run.

    Attributes:
        target: The target profile that was synchronized.
        drivers: Per-driver resources, in registry order. Drivers that
            contributed nothing are omitted.
        agents: Relative paths of the copied agent templates.
    """

    target: TargetProfile
    drivers: list[DriverResources] = field(default_factory=list)
    agents: list[str] = field(default_factory=list)

    @property
    def has_resources(self) -> bool:
        """True if any rule, skill or agent was written."""
        return bool(self.agents) or any(d.has_resources for d in self.drivers)

    @property
    def file_count(self) -> int:
        rules = sum(1 for d in self.drivers if d.rules is not None)
        skills = sum(len(d.skills) for d in self.drivers)
        return rules + skills + len(self.agents)
