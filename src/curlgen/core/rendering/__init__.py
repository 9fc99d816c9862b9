"""Rendering — request payloads as command-line invocations."""

from curlgen.core.rendering.config import EndpointConfig
from curlgen.core.rendering.renderers import (
    OutputFormat,
    render,
    render_body,
    render_curl,
    render_powershell,
)

__all__ = [
    "EndpointConfig",
    "OutputFormat",
    "render",
    "render_body",
    "render_curl",
    "render_powershell",
]
