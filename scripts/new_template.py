#!/usr/bin/env python3
"""
Template Scaffolding CLI

Writes a fresh TEMPLATE.md. Without --answers every value is a placeholder
comment; with --answers the YAML values (shaped like the published records)
are filled in.

Usage:
    python scripts/new_template.py
    python scripts/new_template.py profiles/jane.md --answers answers.yaml
    python scripts/new_template.py --force
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vita.contexts.collection.logger import setup_collection_logger
from vita.contexts.collection.template_generator import ProfileTemplateGenerator, load_answers
from vita.utils.config_resolver import LOGS_PATH, TEMPLATE_PATH
from vita.utils.timestamp import session_stamp

app = typer.Typer(
    help="Generate a profile template to fill in",
    add_completion=False,
)


@app.command()
def main(
    output: Annotated[
        Optional[Path],
        typer.Argument(help="Where to write the template (default: TEMPLATE.md)", dir_okay=False),
    ] = None,
    answers: Annotated[
        Optional[Path],
        typer.Option(
            "--answers",
            "-a",
            help="YAML file with values to pre-fill",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing template"),
    ] = False,
):
    """Render and write a profile template."""
    output = output or TEMPLATE_PATH
    setup_collection_logger(LOGS_PATH / f"new_template_{session_stamp()}", answers_path=answers)

    values = load_answers(answers) if answers else None

    try:
        ProfileTemplateGenerator().write(output, values, overwrite=force)
    except FileExistsError as e:
        typer.echo(f"ERROR: {e}", err=True)
        typer.echo("Use --force to overwrite it.", err=True)
        raise typer.Exit(1)

    typer.secho(f"✓ Template written to {output}", fg=typer.colors.GREEN)
    typer.echo("Fill in the placeholder comments, then run: python scripts/build_profile.py")


if __name__ == "__main__":
    app()
