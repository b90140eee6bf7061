"""Shared fixtures for agentsync tests.

Provides temporary Laravel-like projects with a ``composer.lock`` listing
a chosen set of packages, plus a throwaway resource tree for drivers that
should not use the packaged rules and skills.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Iterable

import pytest

from agentsync.config import AgentSyncConfig
from agentsync.drivers.base import AgentDriver


def write_lockfile(
    project: Path,
    packages: Iterable[str] = (),
    dev_packages: Iterable[str] = (),
) -> Path:
    """Write a minimal composer.lock into ``project``."""
    lock = {
        "_readme": ["This file locks the dependencies of your project"],
        "packages": [{"name": name, "version": "v1.0.0"} for name in packages],
        "packages-dev": [{"name": name, "version": "v2.0.0"} for name in dev_packages],
    }
    lockfile = project / "composer.lock"
    lockfile.write_text(json.dumps(lock, indent=4))
    return lockfile


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file below ``root`` to its content."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


class StubDriver(AgentDriver):
    """Driver with configurable identity, for custom resource trees."""

    def __init__(self, slug: str, path: str, title: str, resources_path: Path) -> None:
        super().__init__(resources_path)
        self._slug = slug
        self._path = path
        self._title = title

    @property
    def slug(self) -> str:
        return self._slug

    @property
    def path(self) -> str:
        return self._path

    @property
    def title(self) -> str:
        return self._title


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create an empty project directory."""
    root = tmp_path / "app"
    root.mkdir()
    return root


@pytest.fixture
def make_project(project: Path) -> Callable[..., Path]:
    """Return a helper that writes a lockfile into the project."""

    def _make(packages: Iterable[str] = (), dev_packages: Iterable[str] = ()) -> Path:
        write_lockfile(project, packages, dev_packages)
        return project

    return _make


@pytest.fixture
def pest_project(make_project: Callable[..., Path]) -> Path:
    """A project with Pest installed as a dev dependency."""
    return make_project(["laravel/framework"], ["pestphp/pest"])


@pytest.fixture
def full_project(make_project: Callable[..., Path]) -> Path:
    """A project with both Pest and Filament installed."""
    return make_project(["laravel/framework", "filament/filament"], ["pestphp/pest"])


@pytest.fixture
def plain_project(make_project: Callable[..., Path]) -> Path:
    """A project without any tracked agent package."""
    return make_project(["laravel/framework", "guzzlehttp/guzzle"], ["phpunit/phpunit"])


@pytest.fixture
def config(project: Path) -> AgentSyncConfig:
    return AgentSyncConfig(project_root=project)


@pytest.fixture
def resources(tmp_path: Path) -> Path:
    """Create a custom resource tree with one driver ``demo``."""
    root = tmp_path / "resources"
    (root / "rules" / "demo").mkdir(parents=True)
    (root / "rules" / "demo" / "rules.md").write_text("# Demo rules\n")
    skills = root / "skills" / "demo"
    (skills / "nested").mkdir(parents=True)
    (skills / "b-skill.md").write_text("---\ndescription: Second skill\n---\nBody\n")
    (skills / "nested" / "a-skill.md").write_text("Nested skill\n")
    (root / "agents").mkdir()
    (root / "agents" / "helper.md").write_text("---\ndescription: Helps out\n---\n")
    return root


@pytest.fixture
def make_driver() -> Callable[..., AgentDriver]:
    """Return a factory for drivers with a custom identity and resources."""

    def _make(slug: str, path: str, title: str, resources_path: Path) -> AgentDriver:
        return StubDriver(slug, path, title, resources_path)

    return _make


@pytest.fixture
def take_snapshot() -> Callable[[Path], dict[str, bytes]]:
    return snapshot
