from ._config import CatalogConfig
from ._logging import configure_logging
from .discovery import discover_skills, read_skill_entry
from .frontmatter import MAX_HEADER_LINES, SKILL_FILENAME, parse_skill_metadata
from .models import SkillEntry
from .prompts import escape_xml, generate_skills_xml, iter_skills_xml

__all__ = [
    "CatalogConfig",
    "configure_logging",
    "discover_skills",
    "read_skill_entry",
    "MAX_HEADER_LINES",
    "SKILL_FILENAME",
    "parse_skill_metadata",
    "SkillEntry",
    "escape_xml",
    "generate_skills_xml",
    "iter_skills_xml",
]
