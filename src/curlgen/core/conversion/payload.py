"""Request assembly — the conversion entry point.

Typical usage::

    result = convert(raw_tools, raw_messages, GenerationParams(temperature=0.2))
    if result.status == "empty":
        ...  # nothing survived conversion
    body = result.payload.to_payload()
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal

from pydantic import BaseModel

from curlgen.core.conversion.messages import CallIdFactory, new_call_id, reconstruct_messages
from curlgen.core.conversion.models import ConvertedMessage
from curlgen.core.conversion.tools import build_tool_name_map, convert_tools


class GenerationParams(BaseModel):
    """Sampling settings copied verbatim into the request."""

    temperature: float | int = 0.1
    top_p: float | int = 0.1
    tool_choice: str | dict[str, Any] = "auto"


class RequestPayload(BaseModel):
    """A chat-completion request body."""

    temperature: float | int
    top_p: float | int
    tool_choice: str | dict[str, Any]
    messages: list[ConvertedMessage]
    tools: list[dict[str, Any]]

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class ConversionResult(BaseModel):
    """Outcome of one conversion, with counts for status reporting."""

    status: Literal["ok", "empty"]
    payload: RequestPayload | None = None
    message_count: int = 0
    tool_count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.status == "empty"


def assemble_payload(
    params: GenerationParams,
    messages: list[ConvertedMessage],
    tools: list[dict[str, Any]],
) -> RequestPayload:
    """Combine generation settings with converted messages and tools."""
    return RequestPayload(
        temperature=params.temperature,
        top_p=params.top_p,
        tool_choice=params.tool_choice,
        messages=messages,
        tools=tools,
    )


def convert(
    raw_tools: Sequence[Any],
    raw_messages: Sequence[Any],
    params: GenerationParams | None = None,
    *,
    call_id_factory: CallIdFactory = new_call_id,
) -> ConversionResult:
    """Run the full conversion for one tool list and one transcript.

    An empty message list after reconstruction is reported through
    ``status == "empty"`` rather than raised.

    Raises:
        StructuralError: If an input element cannot be converted.
    """
    tools = convert_tools(raw_tools)
    name_map = build_tool_name_map(raw_tools)
    messages = reconstruct_messages(raw_messages, name_map, call_id_factory=call_id_factory)

    if not messages:
        return ConversionResult(status="empty", tool_count=len(tools))

    payload = assemble_payload(params or GenerationParams(), messages, tools)
    return ConversionResult(
        status="ok",
        payload=payload,
        message_count=len(messages),
        tool_count=len(tools),
    )
