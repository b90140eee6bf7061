"""Agent drivers: integration descriptors keyed by Composer package.

Public API::

    from agentsync.drivers import default_registry

    registry = default_registry()
    for driver in registry.active_drivers({"pestphp/pest"}):
        print(driver.title, driver.get_rules())
"""

from __future__ import annotations

from agentsync.drivers.base import RESOURCES_PATH, AgentDriver
from agentsync.drivers.filament import FilamentDriver
from agentsync.drivers.pest import PestDriver
from agentsync.drivers.registry import DriverRegistry, default_registry

__all__ = [
    "AgentDriver",
    "DriverRegistry",
    "FilamentDriver",
    "PestDriver",
    "RESOURCES_PATH",
    "default_registry",
]
