"""Driver for the Pest testing framework (``pestphp/pest``)."""

from __future__ import annotations

from agentsync.drivers.base import AgentDriver


class PestDriver(AgentDriver):
    """Rules and skills for writing Pest tests."""

    @property
    def slug(self) -> str:
        return "pestphp/pest"

    @property
    def path(self) -> str:
        return "pest"

    @property
    def title(self) -> str:
        return "Pest testing framework"
