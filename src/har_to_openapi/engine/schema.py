"""Minimal JSON Schema inference from example payloads.

Only ``type``, ``items`` and ``properties`` are produced. Two lossy rules
apply on purpose:

* ``null`` becomes ``{"type": "string"}``, because OpenAPI 3.0 tooling
  rejects bare null schemas.
* Arrays are described by their first element only, so heterogeneous
  arrays take the shape of their first member.
"""

from typing import Any


def infer_schema(value: Any) -> dict:
    """Derive a JSON Schema for any parsed JSON value."""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return {"type": "boolean"}
    if isinstance(value, int):
        return {"type": "integer"}
    if isinstance(value, float):
        return {"type": "integer"} if value.is_integer() else {"type": "number"}
    if isinstance(value, str):
        return {"type": "string"}
    if value is None:
        return {"type": "string"}
    if isinstance(value, list):
        return _array_schema(value)
    if isinstance(value, dict):
        return _object_schema(value)
    return {"type": "string"}


def _array_schema(items: list) -> dict:
    if not items:
        return {"type": "array", "items": {"type": "string"}}
    return {"type": "array", "items": infer_schema(items[0])}


def _object_schema(obj: dict) -> dict:
    return {
        "type": "object",
        "properties": {key: infer_schema(val) for key, val in obj.items()},
    }
