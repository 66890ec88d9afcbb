"""Utility helpers."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping


def json_dumps(data: Dict[str, Any] | list[Any]) -> str:
    return json.dumps(data, ensure_ascii=True, indent=2)


def json_loads_object(text: str) -> Dict[str, Any]:
    """Parses ``text`` and insists on a JSON object."""
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


def get_field(source: Any, name: str, default: Any = None) -> Any:
    """Reads ``name`` from a mapping or, failing that, an attribute."""
    if source is None:
        return default
    if isinstance(source, Mapping):
        return source.get(name, default)
    return getattr(source, name, default)


def is_http_url(value: Any) -> bool:
    return isinstance(value, str) and value.lower().startswith(("http://", "https://"))
