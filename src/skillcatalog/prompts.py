from __future__ import annotations

from typing import Iterable, Iterator

from .models import SkillEntry

ROOT_TAG = "available_skills"
INDENT = "  "

# Ampersand must come first so the entities added afterwards are not re-escaped.
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def escape_xml(text: str) -> str:
    """Escape &, < and > for use as element text."""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def iter_skill_xml(skill: SkillEntry) -> Iterator[str]:
    """Yields the lines of a single <skill> element."""
    yield f"{INDENT}<skill>"
    yield f"{INDENT * 2}<name>{skill.name}</name>"
    yield f"{INDENT * 2}<description>{escape_xml(skill.description)}</description>"
    yield f"{INDENT * 2}<location>{skill.location}</location>"
    yield f"{INDENT}</skill>"


def iter_skills_xml(skills: Iterable[SkillEntry]) -> Iterator[str]:
    """Yields the catalog line by line, pulling each skill only when it is needed."""
    yield f"<{ROOT_TAG}>"
    for skill in skills:
        yield from iter_skill_xml(skill)
    yield f"</{ROOT_TAG}>"


def generate_skills_xml(skills: Iterable[SkillEntry]) -> str:
    """Formats skills into an <available_skills> block, newline-terminated."""
    return "".join(f"{line}\n" for line in iter_skills_xml(skills))
