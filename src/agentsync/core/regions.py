"""Tagged-region rewriting for partially owned Markdown files.

Instruction files such as ``CLAUDE.md`` usually contain text written by
people. AgentSync owns exactly one region of such a file, delimited by a
literal opening and closing tag::

    <agent-resources>
    ...generated content...
    </agent-resources>

Rewrite rules
-------------
- If the file contains the region, the first shortest span from an
  opening tag to the next closing tag, with no other opening tag inside,
  is replaced in place.
- If the file exists without the region, the region is appended after a
  single blank line.
- If the file does not exist, it is created with only the region.

Repeated runs therefore converge on one up-to-date region and never touch
the surrounding text. Files are only written when their content changes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

# Tag owning the generated index inside each assistant's instruction file.
DIRECTORY_TAG = "agent-resources"

# Tag owning the aggregated index inside the project-root summary file.
SUMMARY_TAG = "agents-summary"


def _region_pattern(tag: str) -> re.Pattern[str]:
    # Opening tag closest to the closing tag; a stray opening tag in user
    # text never starts the span.
    opening = f"<{re.escape(tag)}>"
    closing = f"</{re.escape(tag)}>"
    return re.compile(rf"{opening}(?:(?!{opening}).)*?{closing}", re.DOTALL)


def render_region(tag: str, body: str) -> str:
    """Wrap ``body`` in the opening and closing tag.

    The result has no trailing newline; callers decide how it is placed.
    """
    content = body.strip("\n")
    return f"<{tag}>\n{content}\n</{tag}>"


def has_region(text: str, tag: str) -> bool:
    """Return True if ``text`` contains a complete region for ``tag``."""
    return _region_pattern(tag).search(text) is not None


def replace_region(text: str, tag: str, region: str) -> str:
    """Return ``text`` with the managed region set to ``region``.

    Args:
        text: Current file content (may be empty).
        tag: Tag name delimiting the region.
        region: Fully rendered region, as produced by ``render_region``.

    Returns:
        The updated content, always ending with a newline when the region
        was appended.
    """
    if has_region(text, tag):
        # Callable replacement keeps backslashes in the region literal.
        return _region_pattern(tag).sub(lambda _match: region, text, count=1)
    existing = text.rstrip("\n")
    if not existing:
        return region + "\n"
    return f"{existing}\n\n{region}\n"


def write_region(path: Path, tag: str, body: str) -> bool:
    """Create or update the tagged region of the file at ``path``.

    Parent directories are created as needed.

    Args:
        path: Target file.
        tag: Tag name delimiting the region.
        body: Region content, without tags.

    Returns:
        True if the file was written, False if it was already up to date.
    """
    region = render_region(tag, body)
    if path.exists():
        current = path.read_text(encoding="utf-8")
        updated = replace_region(current, tag, region)
    else:
        current = None
        updated = region + "\n"

    if updated == current:
        logger.debug("Region <%s> in %s is up to date", tag, path)
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(updated, encoding="utf-8")
    logger.debug("Wrote region <%s> to %s", tag, path)
    return True
