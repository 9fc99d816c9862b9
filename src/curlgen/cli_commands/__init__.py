"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from curlgen.cli_commands.convert import convert
    from curlgen.cli_commands.format import format_cmd
    from curlgen.cli_commands.inspect import inspect_cmd
    from curlgen.cli_commands.validate import validate

    cli.add_command(convert)
    cli.add_command(validate)
    cli.add_command(inspect_cmd)
    cli.add_command(format_cmd)
