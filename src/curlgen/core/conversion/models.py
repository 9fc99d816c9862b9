"""Input and output models for the KeyStudio → chat-completion conversion.

Inputs are loosely structured JSON exported by the KeyStudio builder. Each
element is resolved once, at ingestion, into a tagged variant so the
converters never have to re-check which convention an element follows:

- tools are either :class:`LegacyToolRecord` (builder shape) or
  :class:`FunctionToolRecord` (already in chat-completion shape);
- transcript entries are :class:`TranscriptMessage` whose ``kind`` tells
  whether they carry tool calls, a builder node-type hint, or neither.

Outputs are strict models whose ``to_payload()`` returns the wire dict.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from curlgen.core.conversion.errors import StructuralError

UNKNOWN_FUNCTION = "unknown_function"

ALLOWED_ROLES = frozenset({"system", "user", "assistant", "tool", "function", "developer"})

ChatRole = Literal["system", "user", "assistant", "tool", "function", "developer"]

NameMap = dict[str, str]


def _get(value: Any, key: str) -> Any:
    """``value[key]`` when *value* is a mapping, else ``None``."""
    if isinstance(value, Mapping):
        return value.get(key)
    return None


def is_present(value: Any) -> bool:
    """Builder truthiness: only ``None``, ``False``, zero and ``""`` count as absent.

    Empty containers are present, unlike Python truthiness.
    """
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and value == value
    return True


# ---------------------------------------------------------------------------
# Tool records — input
# ---------------------------------------------------------------------------


class _ToolRecordBase(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = None
    alias: str | None = None
    description: str | None = None

    @property
    def canonical_name(self) -> str:
        """``alias`` when set, else ``name``, else the sentinel name."""
        return str(self.alias or self.name or UNKNOWN_FUNCTION)


class LegacyToolRecord(_ToolRecordBase):
    """A tool as exported by the builder (``type: "tool"``, ``config.schema``)."""

    config: Any = None
    function: Any = None

    @property
    def schema_source(self) -> Any:
        """Declared parameter schema: ``config.schema``, then ``function.parameters``."""
        schema = _get(self.config, "schema")
        if is_present(schema):
            return schema
        parameters = _get(self.function, "parameters")
        return parameters if is_present(parameters) else None


class FunctionToolRecord(_ToolRecordBase):
    """A tool already in chat-completion shape; emitted verbatim."""

    # top-level fields are not part of the emitted declaration
    name: Any = None
    alias: Any = None
    description: Any = None
    function: Any

    _source: Any = PrivateAttr(default=None)

    @property
    def function_name(self) -> str | None:
        name = _get(self.function, "name")
        return str(name) if name else None

    @property
    def source(self) -> dict[str, Any]:
        """The original record, untouched."""
        return self._source


ToolRecord = LegacyToolRecord | FunctionToolRecord


def parse_tool_record(raw: Any, index: int = 0) -> ToolRecord:
    """Resolve one raw tool element into its variant.

    Raises:
        StructuralError: If *raw* is not an object or has mistyped fields.
    """
    if not isinstance(raw, Mapping):
        raise StructuralError(f"tools[{index}]", f"expected an object, got {type(raw).__name__}")

    try:
        if raw.get("type") == "function" and is_present(raw.get("function")):
            record = FunctionToolRecord.model_validate(dict(raw))
            record._source = raw
            return record
        return LegacyToolRecord.model_validate(dict(raw))
    except ValidationError as exc:
        raise StructuralError(f"tools[{index}]", str(exc)) from exc


# ---------------------------------------------------------------------------
# Tool declarations — output
# ---------------------------------------------------------------------------


class FunctionDefinition(BaseModel):
    """The ``function`` block of a chat-completion tool declaration."""

    name: str = Field(min_length=1)
    description: str = ""
    parameters: dict[str, Any]


class NormalizedTool(BaseModel):
    """A strict ``{"type": "function", "function": {...}}`` declaration."""

    type: Literal["function"] = "function"
    function: FunctionDefinition

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


# ---------------------------------------------------------------------------
# Transcript — input
# ---------------------------------------------------------------------------


class ToolCallRecord(BaseModel):
    """A tool call in either ``{name, args}`` or ``{function: {name, arguments}}`` form."""

    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: Any = None
    args: Any = None
    function: Any = None

    def raw_name_and_arguments(self) -> tuple[str, Any]:
        """Return the name and arguments as written in the transcript.

        The ``function`` form wins when both are present. String arguments
        are returned as-is; anything else is left for serialization.
        """
        raw_name: Any = ""
        raw_args: Any = {}

        if self.name:
            raw_name = self.name
            raw_args = self.args if is_present(self.args) else {}

        function_name = _get(self.function, "name")
        if function_name:
            raw_name = function_name
            arguments = _get(self.function, "arguments")
            raw_args = arguments if isinstance(arguments, str) or is_present(arguments) else {}

        return str(raw_name), raw_args


MessageKind = Literal["tool_calls", "hinted", "plain"]


class TranscriptMessage(BaseModel):
    """One transcript entry, with every field optional."""

    model_config = ConfigDict(extra="allow")

    role: Any = None
    content: Any = None
    tool_calls: Any = None
    additional_kwargs: Any = None

    @property
    def node_type(self) -> Any:
        """The builder's ``additional_kwargs.node_metadata.nodeType`` hint, if any."""
        return _get(_get(self.additional_kwargs, "node_metadata"), "nodeType")

    @property
    def kind(self) -> MessageKind:
        if self.role == "assistant" and isinstance(self.tool_calls, list) and self.tool_calls:
            return "tool_calls"
        if self.node_type:
            return "hinted"
        return "plain"

    @property
    def has_allowed_role(self) -> bool:
        return isinstance(self.role, str) and self.role in ALLOWED_ROLES

    def parsed_tool_calls(self, index: int = 0) -> list[ToolCallRecord]:
        """Validate the ``tool_calls`` entries.

        Raises:
            StructuralError: If an entry is not an object.
        """
        calls: list[ToolCallRecord] = []
        for position, call in enumerate(self.tool_calls or []):
            if not isinstance(call, Mapping):
                raise StructuralError(
                    f"messages[{index}].tool_calls[{position}]",
                    f"expected an object, got {type(call).__name__}",
                )
            calls.append(ToolCallRecord.model_validate(dict(call)))
        return calls


def parse_transcript_message(raw: Any, index: int = 0) -> TranscriptMessage:
    """Resolve one raw transcript element.

    Raises:
        StructuralError: If *raw* is not an object.
    """
    if not isinstance(raw, Mapping):
        raise StructuralError(f"messages[{index}]", f"expected an object, got {type(raw).__name__}")
    return TranscriptMessage.model_validate(dict(raw))


# ---------------------------------------------------------------------------
# Converted messages — output
# ---------------------------------------------------------------------------


class FunctionCall(BaseModel):
    name: str
    arguments: str


class ToolCallPayload(BaseModel):
    """A normalized tool call on an assistant message."""

    id: str
    type: Literal["function"] = "function"
    function: FunctionCall


class AssistantToolCallMessage(BaseModel):
    """Assistant turn that requests one or more tool calls."""

    role: Literal["assistant"] = "assistant"
    content: str = ""
    tool_calls: list[ToolCallPayload]

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class ToolResponseMessage(BaseModel):
    """Tool output paired with an earlier tool call."""

    role: Literal["tool"] = "tool"
    tool_call_id: str
    content: str = ""

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class ChatMessage(BaseModel):
    """Any other message: plain role and text."""

    role: ChatRole
    content: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


ConvertedMessage = AssistantToolCallMessage | ToolResponseMessage | ChatMessage
