"""End-to-end generation: inputs in, rendered commands out."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from curlgen.core.conversion.messages import CallIdFactory, new_call_id
from curlgen.core.conversion.payload import convert
from curlgen.core.rendering.renderers import render_body, render_curl, render_powershell
from curlgen.sdk.models import GenerationOutput, GeneratorSettings
from curlgen.utils.telemetry import (
    ATTR_MESSAGE_COUNT,
    ATTR_STATUS,
    ATTR_TOOL_COUNT,
    ATTR_TRANSCRIPT_LENGTH,
    get_tracer,
)

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)


class CurlGenerator:
    """Convert a tools/transcript pair and render every output format.

    Each :meth:`generate` call is independent: the name map and the pending
    tool-call queue are built fresh per call.
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        *,
        call_id_factory: CallIdFactory = new_call_id,
    ) -> None:
        self.settings = settings or GeneratorSettings()
        self._call_id_factory = call_id_factory

    def generate(self, raw_tools: Sequence[Any], raw_messages: Sequence[Any]) -> GenerationOutput:
        """Run the conversion and render body, curl and PowerShell text.

        An empty conversion yields an output with no rendered text; its
        ``result.status`` is ``"empty"``.

        Raises:
            ConversionError: If an input element cannot be converted.
        """
        with _tracer.start_as_current_span("curlgen.generate") as span:
            span.set_attribute(ATTR_TRANSCRIPT_LENGTH, len(raw_messages))

            result = convert(
                raw_tools,
                raw_messages,
                self.settings.generation,
                call_id_factory=self._call_id_factory,
            )

            span.set_attribute(ATTR_STATUS, result.status)
            span.set_attribute(ATTR_TOOL_COUNT, result.tool_count)
            span.set_attribute(ATTR_MESSAGE_COUNT, result.message_count)

            if result.payload is None:
                logger.info("Conversion produced no messages from %d entries", len(raw_messages))
                return GenerationOutput(result=result)

            endpoint = self.settings.endpoint
            logger.debug(
                "Converted %d entries into %d messages and %d tools",
                len(raw_messages),
                result.message_count,
                result.tool_count,
            )
            return GenerationOutput(
                result=result,
                body=render_body(result.payload),
                curl=render_curl(result.payload, endpoint),
                powershell=render_powershell(result.payload, endpoint),
            )
