"""Driver registry for looking up agent drivers by key.

The ``DriverRegistry`` maps short driver keys (``"pest"``, ``"filament"``)
to factories that build ``AgentDriver`` instances. It follows the same
Registry pattern as a plugin table: a functional ``default_registry()``
factory pre-registers all built-in drivers, and ``register()`` allows
embedding code and tests to add more.

Drivers are constructed fresh on every ``resolve()`` call. They are cheap,
stateless descriptors, so there is no caching.

Ordering
--------
Keys are kept in registration order. The configurator processes active
drivers in this order, which makes generated output deterministic.
"""

from __future__ import annotations

from typing import Callable

from agentsync.drivers.base import AgentDriver
from agentsync.drivers.filament import FilamentDriver
from agentsync.drivers.pest import PestDriver
from agentsync.exceptions import DriverError, UnknownDriverError

DriverFactory = Callable[[], AgentDriver]


class DriverRegistry:
    """Ordered table of driver keys and their factories."""

    def __init__(self) -> None:
        self._factories: dict[str, DriverFactory] = {}

    def register(self, key: str, factory: DriverFactory) -> None:
        """Add a driver factory under ``key``.

        Args:
            key: Short driver identifier.
            factory: Zero-argument callable returning an ``AgentDriver``.
                A driver class works as its own factory.

        Raises:
            DriverError: If ``key`` is already registered.
        """
        if key in self._factories:
            raise DriverError(f"Driver already registered: {key!r}")
        self._factories[key] = factory

    def list_driver_keys(self) -> list[str]:
        """Return all registered driver keys in registration order."""
        return list(self._factories)

    def resolve(self, key: str) -> AgentDriver:
        """Build the driver registered under ``key``.

        Raises:
            UnknownDriverError: If ``key`` is not registered.
            DriverError: If the factory does not return an ``AgentDriver``.
        """
        try:
            factory = self._factories[key]
        except KeyError:
            raise UnknownDriverError(key) from None
        driver = factory()
        if not isinstance(driver, AgentDriver):
            raise DriverError(
                f"Factory for {key!r} returned {type(driver).__name__}, expected AgentDriver"
            )
        return driver

    def drivers(self) -> list[AgentDriver]:
        """Resolve every registered driver, in registration order."""
        return [self.resolve(key) for key in self._factories]

    def active_drivers(self, installed: frozenset[str] | set[str]) -> list[AgentDriver]:
        """Return the drivers whose package slug is installed."""
        return [driver for driver in self.drivers() if driver.is_active(installed)]

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def default_registry() -> DriverRegistry:
    """Create a DriverRegistry pre-loaded with all built-in drivers.

    The default registry includes, in order:
    1. ``pest`` -- Pest testing framework (``pestphp/pest``)
    2. ``filament`` -- Filament admin panels (``filament/filament``)
    """
    registry = DriverRegistry()
    registry.register("pest", PestDriver)
    registry.register("filament", FilamentDriver)
    return registry
