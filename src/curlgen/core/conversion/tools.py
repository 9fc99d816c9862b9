"""Tool conversion — builder tool records to chat-completion declarations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from curlgen.core.conversion.errors import StructuralError
from curlgen.core.conversion.models import (
    FunctionDefinition,
    FunctionToolRecord,
    LegacyToolRecord,
    NameMap,
    NormalizedTool,
    ToolRecord,
    parse_tool_record,
)
from curlgen.core.conversion.schema import empty_object_schema, normalize_schema


def parse_tools(raw_tools: Sequence[Any]) -> list[ToolRecord]:
    """Resolve every raw tool element into its variant, preserving order."""
    return [parse_tool_record(raw, index) for index, raw in enumerate(raw_tools)]


def convert_tools(raw_tools: Sequence[Any]) -> list[dict[str, Any]]:
    """Convert a tool list to chat-completion ``tools`` entries.

    Records already in ``{"type": "function", "function": {...}}`` shape are
    returned as the same object, without touching their schema. Builder
    records are renamed to their canonical name and get a sanitized schema.

    Raises:
        StructuralError: If an element is not an object, or a builder record
            declares a parameter schema that is not an object.
    """
    converted: list[dict[str, Any]] = []
    for index, record in enumerate(parse_tools(raw_tools)):
        if isinstance(record, FunctionToolRecord):
            converted.append(record.source)
        else:
            converted.append(normalize_tool(record, index).to_payload())
    return converted


def normalize_tool(record: LegacyToolRecord, index: int = 0) -> NormalizedTool:
    """Build the strict declaration for one builder record."""
    source = record.schema_source
    if source is None:
        parameters: Any = empty_object_schema()
    else:
        parameters = normalize_schema(source)

    if not isinstance(parameters, dict):
        raise StructuralError(
            f"tools[{index}].parameters",
            f"expected a schema object, got {type(parameters).__name__}",
        )

    return NormalizedTool(
        function=FunctionDefinition(
            name=record.canonical_name,
            description=record.description or "",
            parameters=parameters,
        )
    )


def build_tool_name_map(raw_tools: Sequence[Any]) -> NameMap:
    """Map every internal name and alias in *raw_tools* to its canonical name.

    Function-shaped tools map their function name to itself. A builder record
    with both ``name`` and ``alias`` yields two entries with the same target.
    """
    name_map: NameMap = {}

    for record in parse_tools(raw_tools):
        if isinstance(record, FunctionToolRecord) and record.function_name:
            name_map[record.function_name] = record.function_name
            continue

        canonical = record.canonical_name
        if record.name:
            name_map[str(record.name)] = canonical
        if record.alias:
            name_map[str(record.alias)] = canonical

    return name_map
