"""
Helper functions for the tool registry.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ValidationError

_TYPE_REASONS = {
    "float_type": "must be a number",
    "int_type": "must be an integer",
    "string_type": "must be a string",
}


def _normalize_name(name: str) -> str:
    """Normalize tool name to valid identifier."""
    name = (name or "").strip()
    return re.sub(r"[^a-zA-Z0-9_]+", "_", name)


def _describe_error(error: dict[str, Any]) -> str:
    """Turn one pydantic error dict into a short human-readable reason."""
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return "required"
    if kind in _TYPE_REASONS:
        return _TYPE_REASONS[kind]
    if kind == "less_than_equal":
        return f"must be ≤ {ctx['le']}"
    if kind == "greater_than_equal":
        return f"must be ≥ {ctx['ge']}"
    if kind == "finite_number":
        return "must be a finite number"
    if kind == "string_too_short":
        return "must not be empty"
    return error.get("msg", "invalid value")


def validation_errors(exc: ValidationError, root: str = "arguments") -> list[tuple[str, str]]:
    """Flatten a pydantic ValidationError into ``(path, reason)`` pairs."""
    pairs = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error.get("loc", ())) or root
        pairs.append((path, _describe_error(error)))
    return pairs


def _input_schema(model: type[BaseModel]) -> dict[str, Any]:
    """Build an MCP input schema from a Pydantic argument model."""
    schema = model.model_json_schema()

    # Clean up Pydantic's schema output
    schema.pop("title", None)
    schema.pop("$defs", None)
    schema.setdefault("type", "object")
    schema.setdefault("properties", {})
    schema.setdefault("required", [])
    for prop in schema["properties"].values():
        prop.pop("title", None)

    return schema
