import textwrap
from pathlib import Path

import pytest


def write_skill(root: Path, dirname: str, content: str) -> Path:
    skill_dir = root / dirname
    skill_dir.mkdir(parents=True, exist_ok=True)
    skill_file = skill_dir / "SKILL.md"
    skill_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return skill_file


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    """An empty skills directory inside a temporary tree."""
    root = tmp_path / "skills"
    root.mkdir()
    return root
