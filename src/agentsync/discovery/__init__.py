"""Project discovery: installed packages and AI assistant targets.

Public API::

    from agentsync.discovery import TARGET_PROFILES, detect_installed_packages

    installed = detect_installed_packages(Path("composer.lock"))
    for target in TARGET_PROFILES:
        print(target.directory, target.instruction_file)
"""

from __future__ import annotations

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
    SUMMARY_FILE,
    TARGET_PROFILES,
    TargetProfile,
    find_target,
)

__all__ = [
    "AGENTS_DIR",
    "DriverResources",
    "RESERVED_SUBDIRS",
    "RULES_DIR",
    "SKILLS_DIR",
    "SUMMARY_FILE",
    "SyncResult",
    "TARGET_PROFILES",
    "TargetProfile",
    "detect_installed_packages",
    "find_target",
    "read_installed_versions",
]
