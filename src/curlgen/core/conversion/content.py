"""Message content flattening.

Chat-completion messages carry plain strings; builder transcripts carry
strings, content-block lists, raw tool output objects, or nothing.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def _integral_floats_as_ints(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_integral_floats_as_ints(item) for item in value]
    return value


def to_json_text(value: Any) -> str:
    """Compact JSON with no whitespace between tokens and non-ASCII kept.

    Whole-valued floats are written without a fraction (``10.0`` as ``10``),
    matching the builder's own serializer.
    """
    return json.dumps(_integral_floats_as_ints(value), separators=(",", ":"), ensure_ascii=False)


def normalize_content(content: Any) -> str:
    """Flatten *content* into a single string.

    - strings are returned unchanged;
    - lists keep the non-empty ``text`` of every ``{"type": "text"}`` block,
      joined with newlines;
    - other mappings become their JSON text;
    - ``None`` and other falsy scalars become ``""``.
    """
    if isinstance(content, str):
        return content

    if isinstance(content, list):
        return "\n".join(
            str(block["text"])
            for block in content
            if isinstance(block, Mapping) and block.get("type") == "text" and block.get("text")
        )

    if isinstance(content, Mapping):
        return to_json_text(content)

    if isinstance(content, bool):
        return "true" if content else ""

    if not content:
        return ""

    return str(content)


def serialize_arguments(arguments: Any) -> str:
    """Tool-call arguments as a JSON string; strings pass through untouched."""
    if isinstance(arguments, str):
        return arguments
    if arguments is None or arguments is False or arguments == 0:
        return "{}"
    return to_json_text(arguments)
