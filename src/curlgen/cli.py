"""curlgen CLI entrypoint."""

from __future__ import annotations

import click

from curlgen import __version__


@click.group()
@click.version_option(version=__version__, prog_name="curlgen")
def main() -> None:
    """curlgen — turn KeyStudio exports into chat-completion curl commands."""


# Register subcommands
from curlgen.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
