"""Run configuration for AgentSync.

``AgentSyncConfig`` bundles everything a run needs to know about the host
project: where it lives, which lockfile to read, which assistant targets
to write and where the summary file goes. The CLI builds one from its
options; library callers construct it directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable

from agentsync.discovery.targets import (
    SUMMARY_FILE,
    TARGET_PROFILES,
    TargetProfile,
    find_target,
)

DEFAULT_LOCKFILE = "composer.lock"


@dataclass(frozen=True)
class AgentSyncConfig:
    """Settings for one configuration run.

    Attributes:
        project_root: Root directory of the host project.
        lockfile_name: Lockfile path, relative to the project root.
        targets: Assistant targets to write, in processing order.
        summary_file: Summary file, relative to the project root.
    """

    project_root: Path
    lockfile_name: str = DEFAULT_LOCKFILE
    targets: tuple[TargetProfile, ...] = field(default=TARGET_PROFILES)
    summary_file: str = SUMMARY_FILE

    @property
    def lockfile_path(self) -> Path:
        return self.project_root / self.lockfile_name

    @property
    def summary_path(self) -> Path:
        return self.project_root / self.summary_file

    def with_targets(self, short_names: Iterable[str]) -> AgentSyncConfig:
        """Return a copy restricted to the named targets.

        The configured target order is kept regardless of the order of
        ``short_names``. Names are resolved against the known target
        profiles; unknown names are ignored. An empty selection keeps
        every target.
        """
        names = list(short_names)
        if not names:
            return self
        wanted = {find_target(name) for name in names}
        targets = tuple(t for t in self.targets if t in wanted)
        return replace(self, targets=targets)
