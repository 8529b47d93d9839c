#!/usr/bin/env python3
"""
Validate a profile template before building.

Usage:
    python scripts/validate_template.py
    python scripts/validate_template.py profiles/jane.md
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vita.contexts.parsing.exceptions import InputNotFoundError
from vita.contexts.parsing.logger import setup_parsing_logger
from vita.contexts.parsing.profile_data_structure import ResumeProfile, is_empty_data
from vita.contexts.parsing.profile_schema import PROFILE_SCHEMA
from vita.utils.config_resolver import LOGS_PATH, resolve_template_path
from vita.utils.text_processing import truncate_display
from vita.utils.timestamp import session_stamp

app = typer.Typer(help="Validate profile template parsing.", add_completion=False)


def describe_value(value) -> str:
    """One-line summary of an extracted value."""
    if isinstance(value, str):
        return truncate_display(value, 60) if value else "(empty)"
    if isinstance(value, dict):
        filled = [key for key, item in value.items() if not is_empty_data(item)]
        return f"{len(filled)}/{len(value)} filled" if filled else "(empty)"
    return f"{len(value)} items" if value else "(empty)"


@app.command()
def main(
    template: Annotated[
        Optional[Path],
        typer.Argument(help="Template file (defaults to config / TEMPLATE.md)", dir_okay=False),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Project config YAML"),
    ] = None,
):
    """Parse the template and display what each section yields."""
    template_path = resolve_template_path(template, config)
    setup_parsing_logger(LOGS_PATH / f"validate_{session_stamp()}", template_path=template_path)

    try:
        profile = ResumeProfile.from_file(template_path)
    except InputNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Loading {template_path}")

    records = profile.to_dict()
    for schema in PROFILE_SCHEMA:
        typer.echo(f"\n=== {schema.heading} (/{schema.endpoint}) ===")
        for key, value in records[schema.endpoint].items():
            typer.echo(f"  {key}: {describe_value(value)}")

    if profile.warnings:
        typer.echo("\n=== Warnings ===")
        for warning in profile.warnings:
            typer.echo(f"  ! {warning}")

    endpoints = profile.endpoints()
    typer.echo(f"\n=== Endpoints to publish ({len(endpoints)}) ===")
    typer.echo(f"  {', '.join(endpoints)}" if endpoints else "  None (only root.json)")

    typer.secho("\n✓ Parsing successful", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
