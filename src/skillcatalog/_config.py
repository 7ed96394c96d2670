import os
import sys
from pathlib import Path
from typing import Optional, Union

SKILLS_FOLDER_ENV = "SKILLS_FOLDER"


def default_skills_dir() -> Path:
    """The ``skills`` directory next to the directory holding the invoked script."""
    script_dir = Path(sys.argv[0]).parent
    return script_dir / ".." / "skills"


class CatalogConfig:
    _skills_dir: Path
    _full_descriptions: bool

    def __init__(self, skills_dir: Optional[Union[str, Path]] = None, full_descriptions: bool = False):
        # An empty argument counts as no argument.
        if not skills_dir:
            env_dir = os.getenv(SKILLS_FOLDER_ENV)
            skills_dir = Path(env_dir) if env_dir else default_skills_dir()
        self._skills_dir = Path(skills_dir)
        self._full_descriptions = full_descriptions

    @property
    def skills_dir(self) -> Path:
        return self._skills_dir

    @property
    def full_descriptions(self) -> bool:
        return self._full_descriptions
