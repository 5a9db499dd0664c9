from __future__ import annotations

import json


def as_int(value: object, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    return default


def as_str(value: object, default: str) -> str:
    return value if isinstance(value, str) and value else default


def stringify(value: object) -> str:
    """Render a decoded JSON value as signature text."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def trim_to_none(value: str | None) -> str | None:
    if isinstance(value, str):
        trimmed = value.strip()
        return trimmed if trimmed else None
    return None
