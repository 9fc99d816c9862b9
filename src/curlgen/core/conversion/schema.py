"""Parameter-schema sanitizing for converted tool declarations.

KeyStudio exports JSON schemas that are accepted by the builder but rejected
by chat-completion endpoints. :func:`normalize_schema` walks a schema tree and
repairs it without touching the caller's objects: every visited node is
copied before it is changed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def normalize_schema(node: Any) -> Any:
    """Return a sanitized copy of *node*.

    Rules, applied at every level:

    - non-mapping nodes (including ``None``) are returned unchanged;
    - ``object`` nodes always get a ``properties`` mapping, and each property
      is normalized in turn;
    - an ``object`` node with no properties and ``additionalProperties: false``
      admits no payload at all, so the restriction is relaxed to ``true``;
    - ``array`` nodes normalize their ``items`` sub-schema.
    """
    if not isinstance(node, Mapping):
        return node

    normalized = dict(node)

    if normalized.get("type") == "object":
        props = normalized.get("properties")
        if not isinstance(props, Mapping):
            props = {}

        if not props and normalized.get("additionalProperties") is False:
            normalized["additionalProperties"] = True

        normalized["properties"] = {key: normalize_schema(value) for key, value in props.items()}

    if normalized.get("type") == "array" and normalized.get("items"):
        normalized["items"] = normalize_schema(normalized["items"])

    return normalized


def empty_object_schema() -> dict[str, Any]:
    """Schema used when a tool declares no parameters at all."""
    return {"type": "object", "properties": {}, "required": []}
