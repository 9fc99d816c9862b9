"""``curlgen inspect`` — show how a tools file will be converted."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.markup import escape

from curlgen.cli_commands._output import console, print_name_map, print_tools_table


@click.command("inspect")
@click.argument("tools_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def inspect_cmd(tools_file: str, as_json: bool) -> None:
    """Show converted tool declarations and the name map for TOOLS_FILE."""
    from curlgen.core.conversion.errors import ConversionError
    from curlgen.core.conversion.tools import build_tool_name_map, convert_tools
    from curlgen.sdk.errors import InputValidationError
    from curlgen.sdk.loader import InputLoader

    try:
        raw_tools = InputLoader("Tools").load(Path(tools_file))
        tools = convert_tools(raw_tools)
        name_map = build_tool_name_map(raw_tools)
    except (InputValidationError, ConversionError) as exc:
        console.print(f"[red]Error loading tools:[/red] {escape(str(exc))}")
        sys.exit(1)

    if as_json:
        console.print_json(json.dumps({"tools": tools, "name_map": name_map}, default=str))
        return

    if not tools:
        console.print("[yellow]No tools defined.[/yellow]")
        return

    print_tools_table(tools)
    print_name_map(name_map)
