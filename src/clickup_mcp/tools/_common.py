from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional, Sequence

from mcp import types

STRING = {"type": "string"}
BOOLEAN = {"type": "boolean"}
NUMBER = {"type": "number"}
OBJECT = {"type": "object"}
ARRAY = {"type": "array"}


def to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def envelope(text: str, structured: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Tool result as MCP expects it: one text block, optional structuredContent."""
    result: Dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if structured is not None:
        result["structuredContent"] = structured
    return result


def json_result(value: Any, structured: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return envelope(to_json(value), structured)


def field(value: Any, key: str, default: Any) -> Any:
    """`value[key]`, or `default` when missing/falsy or `value` is not a mapping."""
    if isinstance(value, dict):
        return value.get(key) or default
    return default


def prop(schema: Dict[str, Any], description: str, **extra: Any) -> Dict[str, Any]:
    return {**schema, "description": description, **extra}


def enum(values: Sequence[str], description: str) -> Dict[str, Any]:
    return {"type": "string", "enum": list(values), "description": description}


def tool(
    name: str,
    description: str,
    properties: Dict[str, Dict[str, Any]],
    required: Iterable[str] = (),
    *,
    output: Optional[Dict[str, Dict[str, Any]]] = None,
) -> types.Tool:
    input_schema: Dict[str, Any] = {"type": "object", "properties": properties}
    required_list: List[str] = list(required)
    if required_list:
        input_schema["required"] = required_list

    output_schema = None
    if output is not None:
        output_schema = {"type": "object", "properties": output}

    return types.Tool(
        name=name,
        description=description,
        inputSchema=input_schema,
        outputSchema=output_schema,
    )


__all__ = [
    "to_json",
    "envelope",
    "json_result",
    "field",
    "prop",
    "enum",
    "tool",
    "STRING",
    "BOOLEAN",
    "NUMBER",
    "OBJECT",
    "ARRAY",
]
