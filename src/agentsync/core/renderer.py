"""Markdown rendering of synchronized resources.

Builds the bodies of the managed regions: a per-target index written into
each assistant's instruction file, and a summary aggregating every target
for the project-root ``AGENTS.md``.

Skill and agent files may start with YAML frontmatter delimited by
``---`` lines. When it declares a ``description``, the description is
shown next to the link. Frontmatter that is not valid YAML is ignored and
the link is rendered without a description.

Output depends only on the written files and their order, so rendering
the same results twice yields identical text.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath

import yaml

from agentsync.discovery.models import SyncResult

logger = logging.getLogger(__name__)

# Match YAML frontmatter: ---\n...\n---
_FRONTMATTER_PATTERN = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)", re.DOTALL)

SUMMARY_TITLE = "Agents"
SUMMARY_INTRO = (
    "Rules, skills and agents generated from the packages installed in this project."
)


def read_description(path: Path) -> str:
    """Return the frontmatter ``description`` of a file, or an empty string."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.debug("Cannot decode frontmatter in %s", path)
        return ""
    match = _FRONTMATTER_PATTERN.match(text)
    if not match:
        return ""
    try:
        meta = yaml.safe_load(match.group(1))
    except yaml.YAMLError:
        logger.debug("Malformed frontmatter in %s", path)
        return ""
    if not isinstance(meta, dict):
        return ""
    description = meta.get("description")
    return " ".join(str(description).split()) if description else ""


def _heading(level: int, text: str) -> str:
    return f"{'#' * level} {text}"


def _link(rel_path: str, project_root: Path, describe: bool = False) -> str:
    label = PurePosixPath(rel_path).name
    line = f"- [{label}]({rel_path})"
    if describe:
        description = read_description(project_root / rel_path)
        if description:
            line += f": {description}"
    return line


def _section(level: int, title: str, lines: list[str]) -> list[str]:
    return [_heading(level, title), "", *lines, ""]


def render_target_body(result: SyncResult, project_root: Path, level: int = 2) -> str:
    """Render the resource index for one target.

    Args:
        result: Resources written into the target.
        project_root: Project root the relative paths are based on.
        level: Heading level used for driver titles.

    Returns:
        Markdown text without surrounding tags.
    """
    lines: list[str] = []
    for driver in result.drivers:
        if not driver.has_resources:
            continue
        lines.extend([_heading(level, driver.title), ""])
        if driver.rules is not None:
            lines.extend(_section(level + 1, "Rules", [_link(driver.rules, project_root)]))
        if driver.skills:
            lines.extend(
                _section(
                    level + 1,
                    "Skills",
                    [_link(s, project_root, describe=True) for s in driver.skills],
                )
            )
    if result.agents:
        lines.extend(
            _section(
                level,
                "Agents",
                [_link(a, project_root, describe=True) for a in result.agents],
            )
        )
    return "\n".join(lines).strip("\n")


def render_summary_body(results: list[SyncResult], project_root: Path) -> str:
    """Render the aggregated index for every target with resources."""
    lines: list[str] = [_heading(1, SUMMARY_TITLE), "", SUMMARY_INTRO, ""]
    for result in results:
        if not result.has_resources:
            continue
        target = result.target
        lines.extend([_heading(2, f"{target.name} (`{target.directory}`)"), ""])
        lines.extend([render_target_body(result, project_root, level=3), ""])
    return "\n".join(lines).strip("\n")
