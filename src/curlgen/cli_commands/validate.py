"""``curlgen validate`` — check that input files hold JSON arrays."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from curlgen.cli_commands._output import console


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def validate(files: tuple[str, ...]) -> None:
    """Validate that each of FILES contains a JSON array."""
    from curlgen.sdk.errors import InputValidationError
    from curlgen.sdk.loader import InputLoader

    failed = False
    for name in files:
        loader = InputLoader(name)
        try:
            items = loader.load(Path(name))
        except InputValidationError as exc:
            console.print(f"[red]✗[/red] {escape(str(exc))}", soft_wrap=True)
            failed = True
            continue
        console.print(f"[green]✓[/green] {name}: {loader.describe(items)}", soft_wrap=True)

    if failed:
        sys.exit(1)
