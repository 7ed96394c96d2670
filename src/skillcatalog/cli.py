import logging
from typing import Annotated, Optional

import typer

from ._config import CatalogConfig
from ._logging import configure_logging
from .discovery import discover_skills
from .prompts import iter_skills_xml

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


@app.command()
def generate(
    skills_dir: Annotated[
        Optional[str],
        typer.Argument(help="Directory holding one subdirectory per skill", show_default=False),
    ] = None,
    full_descriptions: Annotated[
        bool,
        typer.Option("--full-descriptions", help="Parse the header as YAML and join multi-line descriptions"),
    ] = False,
):
    """Print an <available_skills> catalog for agent prompts."""
    config = CatalogConfig(skills_dir=skills_dir, full_descriptions=full_descriptions)
    logger.info(f"Scanning skills in {config.skills_dir}")

    skills = discover_skills(config.skills_dir, full_descriptions=config.full_descriptions)
    for line in iter_skills_xml(skills):
        typer.echo(line)


def run_cli():
    configure_logging()
    app()


if __name__ == "__main__":
    run_cli()
