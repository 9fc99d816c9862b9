"""``curlgen format`` — pretty-print a JSON input file."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.markup import escape

from curlgen.cli_commands._output import console


@click.command("format")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--in-place", "-i", is_flag=True, help="Rewrite FILE instead of printing.")
def format_cmd(file: str, in_place: bool) -> None:
    """Pretty-print the JSON document in FILE with two-space indentation."""
    path = Path(file)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Cannot format:[/red] {escape(str(exc))}")
        sys.exit(1)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        console.print(f"[red]Cannot format:[/red] Invalid JSON ({escape(str(exc))})")
        sys.exit(1)

    formatted = json.dumps(data, indent=2, ensure_ascii=False)

    if in_place:
        path.write_text(formatted + "\n", encoding="utf-8")
        console.print(f"[green]JSON formatted:[/green] {file}", soft_wrap=True)
    else:
        click.echo(formatted)
