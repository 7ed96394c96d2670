from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from .frontmatter import SKILL_FILENAME, parse_skill_metadata
from .models import SkillEntry

logger = logging.getLogger(__name__)


def _is_dir(path: Path) -> bool:
    # Older interpreters let EACCES escape from Path.is_dir().
    try:
        return path.is_dir()
    except OSError as e:
        logger.debug(f"Cannot stat {path}: {e}")
        return False


def _candidate_dirs(skills_directory: Path) -> Iterator[Path]:
    """Yield non-hidden subdirectories in sorted order, the way a shell glob lists them."""
    for path in sorted(skills_directory.iterdir()):
        if path.name.startswith("."):
            continue
        if _is_dir(path):
            yield path


def read_skill_entry(skill_dir: Path, full_descriptions: bool = False) -> SkillEntry | None:
    """Build the catalog entry for one skill directory, or None if it does not qualify."""
    skill_file = skill_dir / SKILL_FILENAME

    try:
        if not skill_file.is_file():
            logger.debug(f"No {SKILL_FILENAME} in {skill_dir}, skipping")
            return None
        with open(skill_file, encoding="utf-8") as f:
            content = f.read()
        location = skill_file.resolve()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read {skill_file}: {e}")
        return None

    metadata = parse_skill_metadata(content, full_descriptions=full_descriptions)
    if metadata is None:
        logger.debug(f"Missing name or description in {skill_file}, skipping")
        return None

    return SkillEntry(location=location, **metadata)


def discover_skills(skills_directory: Path, full_descriptions: bool = False) -> Iterator[SkillEntry]:
    """Scan a skills directory and yield one entry per qualifying skill.

    Entries are produced lazily, so a consumer can emit each one before the
    next directory is read. A missing or unreadable directory yields nothing.
    """
    skills_directory = Path(skills_directory)
    if not _is_dir(skills_directory):
        logger.debug(f"Skills directory not found: {skills_directory}")
        return

    try:
        skill_dirs = list(_candidate_dirs(skills_directory))
    except OSError as e:
        logger.debug(f"Failed to list {skills_directory}: {e}")
        return

    for skill_dir in skill_dirs:
        entry = read_skill_entry(skill_dir, full_descriptions=full_descriptions)
        if entry is not None:
            yield entry
