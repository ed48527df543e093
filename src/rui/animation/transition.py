"""
Transition descriptors.

A view's ``transition`` property maps property tags to ``Animation``
descriptors; ``transition_css`` renders them as the CSS ``transition``
value.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable

from ..core.errors import IncompatibleTypeError, InvalidFormatError
from ..data import DataObject, parse_data
from ..values import format_float, parse_float

EASE_TIMING = "ease"
EASE_IN_TIMING = "ease-in"
EASE_OUT_TIMING = "ease-out"
EASE_IN_OUT_TIMING = "ease-in-out"
LINEAR_TIMING = "linear"

_KEYWORD_TIMINGS = frozenset(
    {"", EASE_TIMING, EASE_IN_TIMING, EASE_OUT_TIMING, EASE_IN_OUT_TIMING, LINEAR_TIMING}
)
_FUNCTION_RE = re.compile(r"^(steps|cubic-bezier)\((.*)\)$")


def steps_timing(step_count: int) -> str:
    return f"steps({step_count})"


def cubic_bezier_timing(x1: float, y1: float, x2: float, y2: float) -> str:
    """``cubic-bezier(...)`` with the x coordinates clamped to 0..1."""
    x1 = min(max(x1, 0.0), 1.0)
    x2 = min(max(x2, 0.0), 1.0)
    return f"cubic-bezier({format_float(x1)}, {format_float(y1)}, {format_float(x2)}, {format_float(y2)})"


def validate_timing_function(text: str) -> bool:
    """True for the CSS keywords, ``steps(<int>)`` and ``cubic-bezier(<4 floats>)``."""
    text = text.strip()
    if text in _KEYWORD_TIMINGS:
        return True
    match = _FUNCTION_RE.match(text)
    if match is None:
        return False
    name, args = match.groups()
    if name == "steps":
        return args.strip().lstrip("+-").isdigit()
    params = args.split(",")
    return len(params) == 4 and all(parse_float(param) is not None for param in params)


@dataclass
class Animation:
    """Transition of one property: duration and delay in seconds."""

    duration: float = 0.0
    timing_function: str = ""
    delay: float = 0.0
    finish_listener: Callable[..., Any] | None = field(default=None, compare=False)

    def css(self, tag: str) -> str:
        text = f"{tag} {format_float(self.duration)}s"
        if self.timing_function:
            text += " " + self.timing_function
        if self.delay > 0:
            if not self.timing_function:
                text += " " + EASE_TIMING
            text += f" {format_float(self.delay)}s"
        return text


def parse_animation(obj: DataObject) -> Animation:
    """
    Descriptor from ``_{duration = 1, timing-function = ease, delay = 0}``.

    Raises:
        InvalidFormatError: If duration or delay is not a number
    """
    animation = Animation()
    for tag, attr in (("duration", "duration"), ("delay", "delay")):
        text = obj.property_value(tag)
        if text is not None:
            number = parse_float(text)
            if number is None:
                raise InvalidFormatError(f'invalid animation {tag}: "{text}"', tag=tag, value=text)
            setattr(animation, attr, number)
    animation.timing_function = (obj.property_value("timing-function") or "").strip()
    return animation


def transition_entries(tag: str, value: Any) -> dict[str, Animation | None]:
    """
    Normalize a ``transition`` value to ``{property: Animation | None}``.

    Accepts a mapping (None values delete entries), a DataObject whose
    nodes are descriptor objects, or its .rui text.

    Raises:
        IncompatibleTypeError: If an entry is not an Animation or a descriptor object
    """
    if isinstance(value, str):
        value = parse_data(value)
    if isinstance(value, DataObject):
        value = {node.tag: node.object for node in value.nodes}
    if not isinstance(value, dict):
        raise IncompatibleTypeError(
            f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
        )

    result: dict[str, Animation | None] = {}
    for key, item in value.items():
        key = key.strip().lower()
        if not key or key == "_":
            raise IncompatibleTypeError("invalid transition property name", tag=tag, value=key)
        if item is None or isinstance(item, Animation):
            result[key] = item
        elif isinstance(item, DataObject):
            result[key] = parse_animation(item)
        else:
            raise IncompatibleTypeError(
                f'invalid transition of "{key}": {type(item).__name__}', tag=tag, value=repr(item)
            )
    return result


def transition_css(transitions: dict[str, Animation]) -> str:
    return ", ".join(animation.css(tag) for tag, animation in transitions.items())
