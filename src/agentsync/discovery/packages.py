"""Installed-package detection from a Composer lockfile.

``composer.lock`` is a JSON object with two arrays of package entries:
``packages`` (runtime) and ``packages-dev`` (development). Each entry
carries at least a ``name``; every other field is ignored except
``version``, which is kept for display.

A missing lockfile is not an error. The project simply has no installed
packages and therefore no active drivers, so a fresh checkout never
fails the host build.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from agentsync.exceptions import LockfileError

logger = logging.getLogger(__name__)

# Lockfile sections holding package entries, in the order they are read.
PACKAGE_SECTIONS: tuple[str, ...] = ("packages", "packages-dev")


def _load_lockfile(lockfile_path: Path) -> dict[str, Any] | None:
    """Read and decode the lockfile, or return None if it does not exist."""
    if not lockfile_path.is_file():
        logger.debug("No lockfile at %s", lockfile_path)
        return None
    try:
        data = json.loads(lockfile_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise LockfileError(f"Lockfile is not valid UTF-8: {lockfile_path}") from exc
    except json.JSONDecodeError as exc:
        raise LockfileError(f"Invalid JSON in {lockfile_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise LockfileError(f"Expected a JSON object in {lockfile_path}")
    return data


def _iter_entries(data: dict[str, Any]) -> Iterator[tuple[str, str]]:
    """Yield ``(name, version)`` for every well-formed package entry."""
    for section in PACKAGE_SECTIONS:
        entries = data.get(section) or []
        if not isinstance(entries, list):
            logger.warning("Ignoring lockfile section %r: not a list", section)
            continue
        for entry in entries:
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                logger.warning("Skipping lockfile entry without a name in %r", section)
                continue
            version = entry.get("version")
            yield entry["name"], version if isinstance(version, str) else ""


def detect_installed_packages(lockfile_path: Path) -> frozenset[str]:
    """Return the names of all packages listed in the lockfile.

    Args:
        lockfile_path: Path to ``composer.lock``.

    Returns:
        Union of runtime and development package names. Empty when the
        lockfile does not exist.

    Raises:
        LockfileError: If the lockfile exists but cannot be decoded.
    """
    data = _load_lockfile(lockfile_path)
    if data is None:
        return frozenset()
    return frozenset(name for name, _ in _iter_entries(data))


def read_installed_versions(lockfile_path: Path) -> dict[str, str]:
    """Map installed package names to their locked versions.

    Runtime entries win over development entries with the same name.
    """
    data = _load_lockfile(lockfile_path)
    if data is None:
        return {}
    versions: dict[str, str] = {}
    for name, version in _iter_entries(data):
        versions.setdefault(name, version)
    return versions
