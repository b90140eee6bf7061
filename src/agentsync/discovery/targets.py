"""Static registry of AI assistant target directories.

Each ``TargetProfile`` describes one AI coding assistant convention: the
project-level dot-directory it reads rules, skills and agents from, and
the instruction file it loads on startup. AgentSync writes generated
resources into every target, in the order listed here.

Inside a target directory only the reserved subdirectories
(``RESERVED_SUBDIRS``) are owned by AgentSync. They are cleared and
regenerated on every run; any other file in the target directory belongs
to the user and is never touched.
"""

from __future__ import annotations

from dataclasses import dataclass

# Subdirectories of each target that AgentSync fully owns.
RULES_DIR = "rules"
SKILLS_DIR = "skills"
AGENTS_DIR = "agents"
RESERVED_SUBDIRS: tuple[str, ...] = (RULES_DIR, SKILLS_DIR, AGENTS_DIR)

# Project-root file aggregating every target's resources.
SUMMARY_FILE = "AGENTS.md"


@dataclass(frozen=True)
class TargetProfile:
    """Describes where an AI assistant reads project resources.

    Attributes:
        name: Human-readable display name (e.g., "Claude Code").
        short_name: Machine identifier for CLI options (e.g., "claude").
        directory: Dot-directory relative to the project root.
        instruction_file: Instruction file relative to the project root.
    """

    name: str
    short_name: str
    directory: str
    instruction_file: str


def _build_profiles() -> list[TargetProfile]:
    return [
        TargetProfile(
            name="Cursor",
            short_name="cursor",
            directory=".cursor",
            instruction_file=".cursorrules",
        ),
        TargetProfile(
            name="Gemini CLI",
            short_name="gemini",
            directory=".gemini",
            instruction_file="GEMINI.md",
        ),
        TargetProfile(
            name="Claude Code",
            short_name="claude",
            directory=".claude",
            instruction_file="CLAUDE.md",
        ),
    ]


# Module-level constant: the canonical, ordered list of targets.
TARGET_PROFILES: tuple[TargetProfile, ...] = tuple(_build_profiles())


def find_target(short_name: str) -> TargetProfile | None:
    """Look up a target profile by its short name."""
    for profile in TARGET_PROFILES:
        if profile.short_name == short_name:
            return profile
    return None
