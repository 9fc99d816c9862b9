"""Command renderers — turn a request payload into copy-paste-ready text.

Each renderer is a pure function of the payload and the endpoint config.
Quoting is renderer-specific: ``curl`` bodies are single-quoted for POSIX
shells, PowerShell bodies use a literal here-string that needs no escaping.
"""

from __future__ import annotations

import json
from typing import Literal

from curlgen.core.conversion.payload import RequestPayload
from curlgen.core.rendering.config import EndpointConfig

OutputFormat = Literal["body", "curl", "powershell"]


def _dump(payload: RequestPayload, indent: int) -> str:
    return json.dumps(payload.to_payload(), indent=indent, ensure_ascii=False)


def render_body(payload: RequestPayload) -> str:
    """The request body as pretty-printed JSON."""
    return _dump(payload, indent=2)


def render_curl(payload: RequestPayload, endpoint: EndpointConfig) -> str:
    """A ``curl`` invocation for POSIX shells."""
    escaped = _dump(payload, indent=4).replace("'", "'\\''")
    return (
        f"curl --location '{endpoint.url}' \\\n"
        f"--header 'Host: {endpoint.host_header}' \\\n"
        "--header 'Content-Type: application/json' \\\n"
        f"--data '{escaped}'"
    )


def render_powershell(payload: RequestPayload, endpoint: EndpointConfig) -> str:
    """An ``Invoke-RestMethod`` script for PowerShell."""
    body = _dump(payload, indent=2)
    return (
        "$headers = @{\n"
        f'    "Host" = "{endpoint.host_header}"\n'
        '    "Content-Type" = "application/json"\n'
        "}\n"
        "\n"
        "$body = @'\n"
        f"{body}\n"
        "'@\n"
        "\n"
        f'Invoke-RestMethod -Uri "{endpoint.url}" -Method Post -Headers $headers -Body $body'
    )


def render(payload: RequestPayload, endpoint: EndpointConfig, fmt: OutputFormat) -> str:
    """Dispatch to the renderer for *fmt*."""
    if fmt == "curl":
        return render_curl(payload, endpoint)
    if fmt == "powershell":
        return render_powershell(payload, endpoint)
    return render_body(payload)
