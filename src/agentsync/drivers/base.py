"""Base interface for agent drivers.

An agent driver describes one framework integration that AgentSync knows
how to configure AI assistants for. Each driver provides:

- ``slug`` -- The exact Composer package name used for detection
  (``vendor/name``). A driver is *active* when its slug appears in the
  host project's ``composer.lock``.
- ``path`` -- A filesystem-safe segment used for output file names.
- ``title`` -- A human-readable display name.

Rules and skills are static documents shipped in the package's
``resources/`` tree::

    resources/
        rules/<path>/rules.md
        skills/<path>/**/<file>
        agents/<file>

Resources are resolved lazily: a driver whose rules document or skills
directory is missing simply contributes nothing for that resource. Nothing
is read at construction time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from agentsync.exceptions import ResourceError

# Packaged resource tree, shared by all built-in drivers.
RESOURCES_PATH: Path = Path(__file__).resolve().parent.parent / "resources"


class AgentDriver(ABC):
    """Abstract base class for agent drivers.

    Concrete drivers only declare their identity. Resource lookup is
    handled here so that every driver follows the same on-disk layout.

    Args:
        resources_path: Root of the resource tree. Defaults to the
            resources shipped with AgentSync.
    """

    def __init__(self, resources_path: Path | None = None) -> None:
        self._resources_path = resources_path if resources_path is not None else RESOURCES_PATH

    @property
    @abstractmethod
    def slug(self) -> str:
        """Composer package name that activates this driver."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Filesystem-safe identifier used for output paths."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Human-readable driver name."""

    @property
    def resources_path(self) -> Path:
        return self._resources_path

    @property
    def rules_source(self) -> Path:
        """Location of the rules document for this driver."""
        return self._resources_path / "rules" / self.path / "rules.md"

    @property
    def skills_source(self) -> Path:
        """Directory holding the skill files for this driver."""
        return self._resources_path / "skills" / self.path

    def get_rules(self) -> str | None:
        """Load the rules document.

        Returns:
            The rules text, or None when the driver ships no rules.

        Raises:
            ResourceError: If the rules path exists but is not a file.
        """
        source = self.rules_source
        if not source.exists():
            return None
        if not source.is_file():
            raise ResourceError(f"Rules resource is not a file: {source}")
        return source.read_text(encoding="utf-8")

    def get_skills(self) -> dict[str, Path]:
        """Map skill file names to their source paths.

        Files are collected recursively and keyed by file name, in sorted
        order. A driver without a skills directory has no skills.

        Returns:
            Ordered mapping of file name to absolute source path.
        """
        source = self.skills_source
        if not source.is_dir():
            return {}
        skills: dict[str, Path] = {}
        for skill in sorted(source.rglob("*")):
            if skill.is_file():
                skills[skill.name] = skill
        return skills

    def is_active(self, installed: frozenset[str] | set[str]) -> bool:
        """Return True if this driver's package is installed."""
        return self.slug in installed

    def __repr__(self) -> str:
        return f"{type(self).__name__}(slug={self.slug!r}, path={self.path!r})"
