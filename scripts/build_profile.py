#!/usr/bin/env python3
"""
Profile Build CLI

Parses TEMPLATE.md and writes one JSON file per non-empty profile section
plus root.json into the output directory.

Template path priority: argument, then template_path in profile_config.yaml,
then PROFILE_TEMPLATE_PATH (default ./TEMPLATE.md).

Usage:
    python scripts/build_profile.py
    python scripts/build_profile.py profiles/jane.md --output-dir data
    python scripts/build_profile.py --config profile_config.yaml --api-version 1.1.0
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vita.contexts.parsing.exceptions import InputNotFoundError
from vita.contexts.publishing.endpoint_writer import build_profile
from vita.contexts.publishing.logger import setup_publishing_logger
from vita.utils.config_resolver import LOGS_PATH, resolve_output_dir, resolve_template_path
from vita.utils.timestamp import session_stamp

app = typer.Typer(
    help="Build static endpoint files from a profile template",
    add_completion=False,
)


@app.command()
def main(
    template: Annotated[
        Optional[Path],
        typer.Argument(help="Template file (defaults to config / TEMPLATE.md)", dir_okay=False),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Directory for endpoint JSON files", file_okay=False),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Project config YAML (template_path, output_dir, api_version)"),
    ] = None,
    api_version: Annotated[
        Optional[str],
        typer.Option("--api-version", help="api_version stamped into every envelope"),
    ] = None,
):
    """Parse the template and write endpoint files."""
    template_path = resolve_template_path(template, config)
    resolved_output = resolve_output_dir(output_dir, config)

    setup_publishing_logger(
        LOGS_PATH / f"build_{session_stamp()}",
        template_path=template_path,
        output_dir=resolved_output,
    )

    try:
        result = build_profile(template_path, resolved_output, api_version, config)
    except InputNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"\nParsed {template_path}")
    for warning in result.warnings:
        typer.echo(f"  ! {warning}")

    typer.echo(f"\nEndpoints ({len(result.written)}):")
    for endpoint in result.written:
        typer.echo(f"  /{endpoint}")
    if result.skipped:
        typer.echo(f"Skipped (no data): {', '.join(result.skipped)}")
    if result.removed:
        typer.echo(f"Removed stale files: {', '.join(result.removed)}")

    typer.secho(
        f"\n✓ Generated {result.file_count} files in {result.output_dir}", fg=typer.colors.GREEN
    )


if __name__ == "__main__":
    app()
