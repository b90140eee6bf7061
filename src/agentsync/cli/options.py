"""Shared Click options describing the host project.

``project_options`` adds ``--project-root``, ``--lockfile`` and
``--target`` to a command and hands the command a ready-made
``AgentSyncConfig`` as its ``config`` argument.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any, Callable

import click

from agentsync.config import DEFAULT_LOCKFILE, AgentSyncConfig
from agentsync.discovery.targets import TARGET_PROFILES

_TARGET_CHOICES = [t.short_name for t in TARGET_PROFILES]


def project_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate a command with project location options."""

    @click.option(
        "--project-root", "-p",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=".",
        envvar="AGENTSYNC_PROJECT_ROOT",
        show_default=True,
        help="Root directory of the Laravel project.",
    )
    @click.option(
        "--lockfile",
        default=DEFAULT_LOCKFILE,
        show_default=True,
        help="Lockfile path, relative to the project root.",
    )
    @click.option(
        "--target", "-t",
        "targets",
        multiple=True,
        type=click.Choice(_TARGET_CHOICES),
        help="Only write this assistant directory (repeatable).",
    )
    @functools.wraps(func)
    def wrapper(project_root: Path, lockfile: str, targets: tuple[str, ...], **kwargs: Any) -> Any:
        config = AgentSyncConfig(project_root=project_root, lockfile_name=lockfile)
        return func(config=config.with_targets(targets), **kwargs)

    return wrapper
