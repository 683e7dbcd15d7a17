"""Conversions between points, strings and JSON values."""

from __future__ import annotations

import re
from typing import Any, Iterable

from crosseditor.geom import Point

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _to_double(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def pos_to_string(p: Point) -> str:
    """Write a point as ``x:y``."""
    return f"{p.x:g}:{p.y:g}"


def pos_from_string(text: str) -> Point:
    """Read a point written as ``x:y``; the origin when malformed."""
    parts = text.split(":")
    if len(parts) != 2:
        return Point()
    return Point(_to_double(parts[0]), _to_double(parts[1]))


def _json_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def ints_from_json(values: Iterable[Any]) -> list[int]:
    """Whole numbers of a JSON array; anything else becomes 0."""
    return [_json_int(v) for v in values]


def strings_from_json(values: Iterable[Any]) -> list[str]:
    """Strings of a JSON array; anything else becomes an empty string."""
    return [v if isinstance(v, str) else "" for v in values]


def ints_from_strings(values: Iterable[str]) -> list[int]:
    """Parse decimal integers; unparsable entries become 0."""
    return [_to_int(v) for v in values]