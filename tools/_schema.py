# Shared JSON Schema fragments for tool input schemas.
from __future__ import annotations


def page_props(what: str) -> dict:
    return {
        "limit": {
            "type": "integer",
            "description": f"Limit the number of {what} returned (default 200)",
        },
        "offset": {"type": "integer", "description": "Offset for pagination (default 0)"},
    }


def object_schema(properties: dict | None = None, required: list | None = None, **extra) -> dict:
    schema = {"type": "object", "properties": properties or {}}
    if required:
        schema["required"] = required
    schema.update(extra)
    return schema
