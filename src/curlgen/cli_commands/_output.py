"""Shared CLI output formatters."""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def configure_logging(*, verbose: bool) -> None:
    """Route ``curlgen`` log records to stderr through rich."""
    logger = logging.getLogger("curlgen")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


def print_tools_table(tools: list[dict[str, Any]]) -> None:
    """Pretty-print converted tool declarations as a table."""
    table = Table(title="Converted Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Parameters")
    table.add_column("Description")

    for tool in tools:
        func = tool.get("function")
        if not isinstance(func, dict):
            func = {}
        params = func.get("parameters") or {}
        props = params.get("properties") if isinstance(params, dict) else None
        table.add_row(
            str(func.get("name", "?")),
            ", ".join(str(p) for p in props) if isinstance(props, dict) and props else "-",
            _truncate(str(func.get("description") or "")),
        )

    console.print(table)


def print_name_map(name_map: dict[str, str]) -> None:
    """Pretty-print the internal-name → canonical-name mapping."""
    table = Table(title="Name Map")
    table.add_column("Source name", style="cyan")
    table.add_column("Canonical name", style="green")

    for source, canonical in name_map.items():
        table.add_row(source, canonical)

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
