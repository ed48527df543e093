"""Number parsing and formatting shared by the value types."""

import math
import re

_FLOAT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_INT_RE = re.compile(r"^[+-]?\d+$")


def parse_float(text: str) -> float | None:
    """Parse a plain decimal number (no inf/nan/underscores)."""
    text = text.strip()
    if not _FLOAT_RE.match(text):
        return None
    return float(text)


def parse_int(text: str) -> int | None:
    """Parse a plain decimal integer."""
    text = text.strip()
    if not _INT_RE.match(text):
        return None
    return int(text)


def format_float(value: float) -> str:
    """Shortest text form of a number: ``1`` for 1.0, ``0.5`` for .5."""
    if math.isfinite(value) and value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))
