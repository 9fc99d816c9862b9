"""Transcript reconstruction — builder transcripts to chat-completion messages.

The transcript is folded left to right into a :class:`ReconstructionState`.
The state carries the emitted messages and a FIFO of tool-call ids that are
still waiting for their response. Each call to :func:`fold_message` consumes
exactly one transcript entry, so the fold can be driven one step at a time.

Role resolution for entries without tool calls:

1. a standard chat role is kept;
2. a builder node-type hint of ``tool``/``script`` answers the oldest
   pending call (or becomes ``assistant`` when nothing is pending); any other
   hint becomes ``assistant``;
3. an unknown role with no hint answers the oldest pending call if there is
   one, else becomes ``assistant``.

Entries that end up as plain messages with blank content are dropped.
"""

from __future__ import annotations

import logging
import re
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from curlgen.core.conversion.content import normalize_content, serialize_arguments
from curlgen.core.conversion.models import (
    AssistantToolCallMessage,
    ChatMessage,
    ConvertedMessage,
    FunctionCall,
    NameMap,
    ToolCallPayload,
    ToolCallRecord,
    ToolResponseMessage,
    TranscriptMessage,
    parse_transcript_message,
)

logger = logging.getLogger(__name__)

TOOL_NODE_TYPES = frozenset({"tool", "script"})

# Execution logs name the tool that actually ran: "Executed **web_search** in 2s".
_EXECUTED_PATTERN = re.compile(r"Executed \*\*([^*]+)\*\*", re.IGNORECASE)

CallIdFactory = Callable[[int, int], str]


def new_call_id(message_index: int, call_index: int) -> str:
    """Generate an id for a tool call that was logged without one."""
    return f"call_{uuid4().hex[:24]}"


@dataclass
class ReconstructionState:
    """Accumulator threaded through the transcript fold."""

    pending: deque[str] = field(default_factory=deque)
    messages: list[ConvertedMessage] = field(default_factory=list)

    def respond(self, content: str) -> bool:
        """Pair *content* with the oldest pending call; ``False`` if none is pending."""
        if not self.pending:
            return False
        tool_call_id = self.pending.popleft()
        self.messages.append(ToolResponseMessage(tool_call_id=tool_call_id, content=content))
        logger.debug("Paired tool response with call %s", tool_call_id)
        return True


def parse_transcript(raw_messages: Sequence[Any]) -> list[TranscriptMessage]:
    """Resolve every raw transcript element, preserving order."""
    return [parse_transcript_message(raw, index) for index, raw in enumerate(raw_messages)]


def reconstruct_messages(
    raw_messages: Sequence[Any],
    name_map: NameMap,
    *,
    call_id_factory: CallIdFactory = new_call_id,
) -> list[ConvertedMessage]:
    """Convert a builder transcript into an ordered chat-completion message list.

    Raises:
        StructuralError: If a transcript entry or tool call is not an object.
    """
    transcript = parse_transcript(raw_messages)
    state = ReconstructionState()

    for index in range(len(transcript)):
        state = fold_message(state, transcript, index, name_map, call_id_factory=call_id_factory)

    if state.pending:
        logger.debug("Dropping %d tool call id(s) without a response", len(state.pending))

    return state.messages


def fold_message(
    state: ReconstructionState,
    transcript: Sequence[TranscriptMessage],
    index: int,
    name_map: NameMap,
    *,
    call_id_factory: CallIdFactory = new_call_id,
) -> ReconstructionState:
    """Consume ``transcript[index]`` and return the updated state."""
    message = transcript[index]
    content = normalize_content(message.content)

    if message.kind == "tool_calls":
        next_message = transcript[index + 1] if index + 1 < len(transcript) else None
        tool_calls = [
            _convert_call(call, index, position, next_message, name_map, call_id_factory)
            for position, call in enumerate(message.parsed_tool_calls(index))
        ]
        state.pending.extend(call.id for call in tool_calls)
        state.messages.append(AssistantToolCallMessage(content=content, tool_calls=tool_calls))
        return state

    role = _resolve_role(message, state)
    if role is None:
        state.respond(content)
        return state

    if not content.strip():
        logger.debug("Dropping empty %s message at index %d", role, index)
        return state

    state.messages.append(ChatMessage(role=role, content=content))
    return state


def _resolve_role(message: TranscriptMessage, state: ReconstructionState) -> str | None:
    """Final role for *message*, or ``None`` when it answers a pending call."""
    if message.has_allowed_role:
        return message.role

    if message.kind == "hinted":
        if message.node_type in TOOL_NODE_TYPES and state.pending:
            return None
        return "assistant"

    if state.pending:
        return None

    return "assistant"


def _convert_call(
    call: ToolCallRecord,
    message_index: int,
    call_index: int,
    next_message: TranscriptMessage | None,
    name_map: NameMap,
    call_id_factory: CallIdFactory,
) -> ToolCallPayload:
    call_id = str(call.id) if call.id else call_id_factory(message_index, call_index)
    raw_name, raw_args = call.raw_name_and_arguments()

    if raw_name not in name_map and next_message is not None:
        raw_name = _recover_name(raw_name, next_message)

    return ToolCallPayload(
        id=call_id,
        function=FunctionCall(
            name=name_map.get(raw_name) or raw_name,
            arguments=serialize_arguments(raw_args),
        ),
    )


def _recover_name(raw_name: str, next_message: TranscriptMessage) -> str:
    """Tool name from an ``Executed **name**`` line in the following entry.

    Only the single next entry is inspected, so several unresolved calls in one
    turn all receive the same recovered name.
    """
    match = _EXECUTED_PATTERN.search(normalize_content(next_message.content))
    if match is None:
        return raw_name
    recovered = match.group(1).strip()
    logger.debug("Recovered tool name %r for unmapped call %r", recovered, raw_name)
    return recovered
