"""Driver for the Filament admin panel framework (``filament/filament``)."""

from __future__ import annotations

from agentsync.drivers.base import AgentDriver


class FilamentDriver(AgentDriver):
    """Rules and skills for building Filament panels and resources."""

    @property
    def slug(self) -> str:
        return "filament/filament"

    @property
    def path(self) -> str:
        return "filament"

    @property
    def title(self) -> str:
        return "Filament"
