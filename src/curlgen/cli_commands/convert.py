"""``curlgen convert`` — build request commands from KeyStudio exports."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from curlgen.cli_commands._output import configure_logging, console, err_console


@click.command()
@click.argument("tools_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("messages_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Settings YAML with endpoint and generation sections.",
)
@click.option("--temperature", type=float, default=None, help="Sampling temperature.")
@click.option("--top-p", "top_p", type=float, default=None, help="Nucleus sampling value.")
@click.option("--tool-choice", default=None, help="Tool choice policy (e.g. auto, none).")
@click.option("--endpoint", "api_endpoint", default=None, help="Chat-completion endpoint URL.")
@click.option("--api-version", default=None, help="API version query parameter.")
@click.option("--api-key", envvar="CURLGEN_API_KEY", default=None, help="API key query parameter.")
@click.option("--host", "host_header", default=None, help="Host header value.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["body", "curl", "powershell", "all"]),
    default="curl",
    help="What to print.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the result to a file instead of stdout.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--telemetry", is_flag=True, help="Print OpenTelemetry spans to stderr.")
def convert(
    tools_file: str,
    messages_file: str,
    config_file: str | None,
    temperature: float | None,
    top_p: float | None,
    tool_choice: str | None,
    api_endpoint: str | None,
    api_version: str | None,
    api_key: str | None,
    host_header: str | None,
    fmt: str,
    output: str | None,
    verbose: bool,
    telemetry: bool,
) -> None:
    """Convert TOOLS_FILE and MESSAGES_FILE into a chat-completion request.

    Both files must contain JSON arrays in KeyStudio (or chat-completion) format.
    """
    from curlgen.core.conversion.errors import ConversionError
    from curlgen.sdk.errors import InputValidationError, SettingsError
    from curlgen.sdk.generator import CurlGenerator
    from curlgen.sdk.loader import InputLoader, SettingsLoader
    from curlgen.sdk.models import GeneratorSettings

    configure_logging(verbose=verbose)

    if telemetry:
        from curlgen.utils.telemetry import configure_telemetry

        try:
            configure_telemetry()
        except ImportError as exc:
            err_console.print(f"[yellow]Telemetry disabled:[/yellow] {escape(str(exc))}")

    try:
        settings = SettingsLoader(Path(config_file)).load() if config_file else GeneratorSettings()
    except SettingsError as exc:
        console.print(f"[red]Settings error:[/red] {escape(str(exc))}")
        sys.exit(1)

    generation_overrides = {
        key: value
        for key, value in (
            ("temperature", temperature),
            ("top_p", top_p),
            ("tool_choice", tool_choice),
        )
        if value is not None
    }
    endpoint_overrides = {
        key: value
        for key, value in (
            ("api_endpoint", api_endpoint),
            ("api_version", api_version),
            ("api_key", api_key),
            ("host_header", host_header),
        )
        if value is not None
    }
    settings = settings.model_copy(
        update={
            "generation": settings.generation.model_copy(update=generation_overrides),
            "endpoint": settings.endpoint.model_copy(update=endpoint_overrides),
        }
    )

    try:
        raw_tools = InputLoader("Tools").load(Path(tools_file))
        raw_messages = InputLoader("Messages").load(Path(messages_file))
    except InputValidationError as exc:
        console.print(f"[red]Input error:[/red] {escape(str(exc))}")
        sys.exit(1)

    try:
        generated = CurlGenerator(settings).generate(raw_tools, raw_messages)
    except ConversionError as exc:
        console.print(f"[red]Conversion error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if generated.result.is_empty:
        console.print(f"[yellow]{generated.summary}[/yellow]")
        sys.exit(1)

    sections = {
        "body": generated.body or "",
        "curl": generated.curl or "",
        "powershell": generated.powershell or "",
    }
    if fmt == "all":
        text = "\n\n".join(f"# --- {name} ---\n{value}" for name, value in sections.items())
    else:
        text = sections[fmt]

    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        err_console.print(f"Wrote {fmt} output to {output}")
    else:
        click.echo(text)

    err_console.print(f"[green]✓ {generated.summary}[/green]")
