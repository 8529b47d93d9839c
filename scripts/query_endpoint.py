#!/usr/bin/env python3
"""
Query published endpoint files the way the served API would answer.

Usage:
    python scripts/query_endpoint.py                 # root directory
    python scripts/query_endpoint.py /about
    python scripts/query_endpoint.py track-record/ --data-dir data
    python scripts/query_endpoint.py --verify
"""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vita.contexts.publishing.endpoint_registry import EndpointRegistry
from vita.utils.config_resolver import resolve_output_dir

app = typer.Typer(help="Resolve endpoint paths against published files.", add_completion=False)


@app.command()
def main(
    path: Annotated[str, typer.Argument(help="Request path (e.g., /about)")] = "/",
    data_dir: Annotated[
        Optional[Path],
        typer.Option("--data-dir", "-d", help="Published output directory", file_okay=False),
    ] = None,
    verify: Annotated[
        bool,
        typer.Option("--verify", help="Check every listed endpoint resolves"),
    ] = False,
):
    """Print the JSON a GET request for PATH would receive."""
    registry = EndpointRegistry(resolve_output_dir(data_dir))

    if verify:
        results = registry.verify()
        if not results:
            typer.echo(f"ERROR: No endpoints listed in {registry.data_dir}", err=True)
            raise typer.Exit(1)

        for endpoint, ok in results.items():
            typer.echo(f"  {'✓' if ok else '✗'} {endpoint}")

        failed = [endpoint for endpoint, ok in results.items() if not ok]
        if failed:
            typer.secho(f"\n{len(failed)} of {len(results)} endpoints failed", fg=typer.colors.RED)
            raise typer.Exit(1)

        typer.secho(f"\n✓ All {len(results)} endpoints resolve", fg=typer.colors.GREEN)
        return

    status, body = registry.resolve(path)
    typer.echo(json.dumps(body, indent=2, ensure_ascii=False))
    if status != 200:
        typer.echo(f"HTTP {status}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
