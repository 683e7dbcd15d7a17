"""A loosely typed database value with forgiving conversions."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

_INT_RE = re.compile(r"[+-]?\d+")


def _float_text(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def _parse_int(text: str) -> int:
    text = text.strip()
    return int(text) if _INT_RE.fullmatch(text) else 0


@dataclass(frozen=True)
class DbValue:
    """One field of a database record."""

    data: Any = None

    def as_int(self) -> int:
        """The value as an integer; 0 when it is not one."""
        d = self.data
        if isinstance(d, bool):
            return int(d)
        if isinstance(d, int):
            return d
        if isinstance(d, float):
            if not math.isfinite(d):
                return 0
            return int(math.copysign(math.floor(abs(d) + 0.5), d))
        if isinstance(d, (bytes, bytearray, memoryview)):
            return _parse_int(bytes(d).decode("utf-8", "replace"))
        if isinstance(d, str):
            return _parse_int(d)
        return 0

    def as_bytes(self) -> bytes:
        """The value as raw bytes; text is encoded as UTF-8."""
        d = self.data
        if d is None:
            return b""
        if isinstance(d, (bytes, bytearray, memoryview)):
            return bytes(d)
        return self.as_str().encode("utf-8")

    def as_json(self) -> bytes:
        """The value as the bytes of a JSON document."""
        return self.as_bytes()

    def as_str(self) -> str:
        """The value as text; bytes are decoded as UTF-8."""
        d = self.data
        if d is None:
            return ""
        if isinstance(d, str):
            return d
        if isinstance(d, bool):
            return "true" if d else "false"
        if isinstance(d, int):
            return str(d)
        if isinstance(d, float):
            return _float_text(d)
        if isinstance(d, (bytes, bytearray, memoryview)):
            return bytes(d).decode("utf-8", "replace")
        return ""