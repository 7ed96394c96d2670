"""Header block parsing for SKILL.md files.

A SKILL.md starts with a header block fenced by two ``---`` lines holding
``key: value`` pairs. Only two fields matter for the catalog: ``name`` and
``description``.

By default each field is read from the first line that starts with its key,
and nothing else on following lines is considered, so a folded
``description: >`` yields ``>``. The optional full-descriptions mode parses the
same block as YAML instead and joins multi-line values into one line.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

SKILL_FILENAME = "SKILL.md"
FRONTMATTER_DELIMITER = "---"
MAX_HEADER_LINES = 20

NAME_KEY = "name"
DESCRIPTION_KEY = "description"

_WHITESPACE_RUN = re.compile(r"\s+")


def extract_header_lines(content: str) -> list[str]:
    """Return the lines between the first two delimiter lines, capped at MAX_HEADER_LINES.

    An unterminated block counts as no block at all.
    """
    # Only \n and \r\n end a line; other Unicode line breaks stay in the value.
    lines = [line.removesuffix("\r") for line in content.split("\n")]
    try:
        start = lines.index(FRONTMATTER_DELIMITER)
        end = lines.index(FRONTMATTER_DELIMITER, start + 1)
    except ValueError:
        return []
    return lines[start + 1 : end][:MAX_HEADER_LINES]


def extract_field(header_lines: list[str], key: str) -> str:
    """Return the value of the first line starting with ``key:``, or an empty string."""
    prefix = f"{key}:"
    for line in header_lines:
        if line.startswith(prefix):
            # Only spaces are stripped, and only on the left.
            return line[len(prefix) :].lstrip(" ")
    return ""


def _join_value(value: object) -> str:
    if value is None:
        return ""
    return _WHITESPACE_RUN.sub(" ", str(value)).strip()


def parse_full_header(header_lines: list[str]) -> dict[str, str]:
    """Parse the header block as YAML, collapsing multi-line values to one line.

    Folded and literal scalars are resolved by YAML first; every whitespace run
    in the result then becomes a single space.
    """
    try:
        metadata = yaml.safe_load("\n".join(header_lines))
    except yaml.YAMLError as e:
        logger.debug(f"Header block is not valid YAML: {e}")
        return {}

    if not isinstance(metadata, dict):
        return {}

    return {
        NAME_KEY: _join_value(metadata.get(NAME_KEY)),
        DESCRIPTION_KEY: _join_value(metadata.get(DESCRIPTION_KEY)),
    }


def parse_skill_metadata(content: str, full_descriptions: bool = False) -> Optional[dict[str, str]]:
    """Extract name and description from SKILL.md content.

    Returns None when either field is missing or empty.
    """
    header_lines = extract_header_lines(content)

    if full_descriptions:
        fields = parse_full_header(header_lines)
        name = fields.get(NAME_KEY, "")
        description = fields.get(DESCRIPTION_KEY, "")
    else:
        name = extract_field(header_lines, NAME_KEY)
        description = extract_field(header_lines, DESCRIPTION_KEY)

    if not name or not description:
        return None
    return {NAME_KEY: name, DESCRIPTION_KEY: description}
