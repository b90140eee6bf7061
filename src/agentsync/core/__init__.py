"""Core synchronization: tagged regions, rendering and orchestration."""

from __future__ import annotations

from agentsync.core.configurator import (
    Configurator,
    ConfigureReport,
    collect_agent_templates,
)
from agentsync.core.regions import (
    DIRECTORY_TAG,
    SUMMARY_TAG,
    render_region,
    replace_region,
    write_region,
)

__all__ = [
    "Configurator",
    "ConfigureReport",
    "DIRECTORY_TAG",
    "SUMMARY_TAG",
    "collect_agent_templates",
    "render_region",
    "replace_region",
    "write_region",
]
