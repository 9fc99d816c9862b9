"""OpenTelemetry tracing helpers for curlgen.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
codebase can call ``get_tracer()`` without caring whether the SDK is
installed.  When the SDK is *not* configured the API returns no-op
implementations.

Usage::

    from curlgen.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("curlgen.generate") as span:
        span.set_attribute(ATTR_TOOL_COUNT, 3)

To activate real tracing, call :func:`configure_telemetry` once at startup
(requires the ``otel`` extra: ``pip install curlgen[otel]``).
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys used throughout curlgen instrumentation
# ---------------------------------------------------------------------------

ATTR_TOOL_COUNT = "curlgen.tools.count"
ATTR_MESSAGE_COUNT = "curlgen.messages.count"
ATTR_TRANSCRIPT_LENGTH = "curlgen.transcript.length"
ATTR_STATUS = "curlgen.status"

_INSTRUMENTATION_NAME = "curlgen"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "curlgen",
    export_to_console: bool = True,
) -> None:
    """Configure OpenTelemetry tracing (requires ``curlgen[otel]``).

    Parameters
    ----------
    service_name:
        The ``service.name`` resource attribute.
    export_to_console:
        If ``True``, export spans as JSON to stderr.

    Raises
    ------
    ImportError
        If the ``opentelemetry-sdk`` package is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import SimpleSpanProcessor  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install curlgen[otel]"
        )
        raise ImportError(msg) from exc

    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    if export_to_console:
        _add_console_exporter(provider, SimpleSpanProcessor)

    trace.set_tracer_provider(provider)


def _add_console_exporter(provider: Any, processor_cls: Any) -> None:
    """Attach the console exporter; stdout is reserved for rendered commands."""
    import sys

    from opentelemetry.sdk.trace.export import ConsoleSpanExporter  # pyright: ignore[reportMissingImports]

    provider.add_span_processor(processor_cls(ConsoleSpanExporter(out=sys.stderr)))
