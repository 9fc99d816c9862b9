"""Conversion engine — KeyStudio tools and transcripts to chat-completion payloads."""

from curlgen.core.conversion.content import normalize_content, serialize_arguments
from curlgen.core.conversion.errors import ConversionError, StructuralError
from curlgen.core.conversion.messages import (
    ReconstructionState,
    fold_message,
    parse_transcript,
    reconstruct_messages,
)
from curlgen.core.conversion.models import (
    UNKNOWN_FUNCTION,
    AssistantToolCallMessage,
    ChatMessage,
    ConvertedMessage,
    FunctionToolRecord,
    LegacyToolRecord,
    NameMap,
    NormalizedTool,
    ToolResponseMessage,
    TranscriptMessage,
)
from curlgen.core.conversion.payload import (
    ConversionResult,
    GenerationParams,
    RequestPayload,
    assemble_payload,
    convert,
)
from curlgen.core.conversion.schema import normalize_schema
from curlgen.core.conversion.tools import build_tool_name_map, convert_tools

__all__ = [
    "UNKNOWN_FUNCTION",
    "AssistantToolCallMessage",
    "ChatMessage",
    "ConversionError",
    "ConversionResult",
    "ConvertedMessage",
    "FunctionToolRecord",
    "GenerationParams",
    "LegacyToolRecord",
    "NameMap",
    "NormalizedTool",
    "ReconstructionState",
    "RequestPayload",
    "StructuralError",
    "ToolResponseMessage",
    "TranscriptMessage",
    "assemble_payload",
    "build_tool_name_map",
    "convert",
    "convert_tools",
    "fold_message",
    "normalize_content",
    "normalize_schema",
    "parse_transcript",
    "reconstruct_messages",
    "serialize_arguments",
]
