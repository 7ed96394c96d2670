from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class SkillEntry(BaseModel):
    """Represents one skill listed in the catalog.

    Built during a directory scan from the frontmatter of a skill's SKILL.md
    and discarded once it has been rendered.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    """The identifier of the skill, emitted verbatim."""

    description: str
    """What the skill does. Stored unescaped; escaping happens at render time."""

    location: Path
    """Absolute, resolved path to the skill's SKILL.md file."""
