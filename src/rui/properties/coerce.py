"""
Table-driven coercion of raw ``set`` inputs to stored property values.

A coercer returns the value to store, ``None`` when the input means
"remove", or raises ``IncompatibleTypeError`` / ``InvalidFormatError``.
Constant references (``@name``) are stored verbatim and resolved when the
value is read back for serialization.
"""

from typing import Any, Callable

from ..core.errors import IncompatibleTypeError, InvalidFormatError
from ..values import AngleUnit, Color, Range, SizeUnit, parse_angle, parse_color, parse_range, parse_size
from ..values.numbers import parse_float, parse_int
from ..values.size import SizeType
from .schema import ENUM_PROPERTIES, FLOAT_PROPERTIES, PropertyKind
from . import tags

_CONSTANT_STOP_SYMBOLS = frozenset(",;|\"'`+(){}[]<>/\\*&%! \t\n\r")

_TRUE_VALUES = ("true", "yes", "on", "1")
_FALSE_VALUES = ("false", "no", "off", "0")

_ORIENTATION_ALIASES = {"vertical": "up-down", "horizontal": "start-to-end"}


def is_constant_name(text: str) -> bool:
    """True for ``@name`` references to theme constants."""
    if len(text) < 2 or text[0] != "@":
        return False
    name = text[1:]
    if len(name) >= 2 and name[0] == name[-1] and name[0] in "\"'`":
        return True
    return not any(ch in _CONSTANT_STOP_SYMBOLS for ch in name)


def _incompatible(tag: str, value: Any) -> IncompatibleTypeError:
    return IncompatibleTypeError(
        f'invalid value type of "{tag}" property: {type(value).__name__}',
        tag=tag,
        value=repr(value),
    )


def _text(tag: str, value: str) -> str | None:
    text = value.strip()
    return text or None


def coerce_size(tag: str, value: Any) -> SizeUnit | str | None:
    if isinstance(value, SizeUnit):
        return None if value.is_auto() else value
    if isinstance(value, bool):
        raise _incompatible(tag, value)
    if isinstance(value, (int, float)):
        return SizeUnit(SizeType.PIXEL, float(value))
    if isinstance(value, str):
        text = _text(tag, value)
        if text is None or is_constant_name(text):
            return text
        size = parse_size(text)
        return None if size.is_auto() else size
    raise _incompatible(tag, value)


def coerce_angle(tag: str, value: Any) -> AngleUnit | str | None:
    if isinstance(value, AngleUnit):
        return value
    if isinstance(value, bool):
        raise _incompatible(tag, value)
    if isinstance(value, (int, float)):
        return AngleUnit(value=float(value))
    if isinstance(value, str):
        text = _text(tag, value)
        if text is None or is_constant_name(text):
            return text
        return parse_angle(text)
    raise _incompatible(tag, value)


def coerce_color(tag: str, value: Any) -> Color | str | None:
    if isinstance(value, Color):
        return value
    if isinstance(value, bool):
        raise _incompatible(tag, value)
    if isinstance(value, int):
        return Color(value)
    if isinstance(value, str):
        text = _text(tag, value)
        if text is None or is_constant_name(text):
            return text
        return parse_color(text)
    raise _incompatible(tag, value)


def enum_index(tag: str, text: str) -> int:
    """
    Index of ``text`` in the value table of ``tag``.

    Raises:
        InvalidFormatError: If the text names no value of the enum
    """
    definition = ENUM_PROPERTIES[tag]
    text = text.strip().lower()
    if tag == tags.ORIENTATION:
        text = _ORIENTATION_ALIASES.get(text, text)
    for index, item in enumerate(definition.values):
        if item == text:
            return index
    number = parse_int(text)
    if number is not None and 0 <= number < len(definition.values):
        return number
    raise InvalidFormatError(f'invalid value "{text}" of "{tag}" property', tag=tag, value=text)


def coerce_enum(tag: str, value: Any) -> int | str | None:
    if isinstance(value, bool):
        raise _incompatible(tag, value)
    if isinstance(value, int):
        if 0 <= value < len(ENUM_PROPERTIES[tag].values):
            return int(value)
        raise InvalidFormatError(f'"{tag}" value {value} is out of range', tag=tag, value=value)
    if isinstance(value, str):
        text = _text(tag, value)
        if text is None or is_constant_name(text):
            return text
        return enum_index(tag, text)
    raise _incompatible(tag, value)


def parse_bool(text: str) -> bool | None:
    text = text.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def coerce_bool(tag: str, value: Any) -> bool | str | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return value == 1
    if isinstance(value, str):
        text = _text(tag, value)
        if text is None or is_constant_name(text):
            return text
        result = parse_bool(text)
        if result is None:
            raise InvalidFormatError(f'invalid "{tag}" value: "{text}"', tag=tag, value=text)
        return result
    raise _incompatible(tag, value)


def coerce_int(tag: str, value: Any) -> int | str | None:
    if isinstance(value, bool):
        raise _incompatible(tag, value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = _text(tag, value)
        if text is None or is_constant_name(text):
            return text
        number = parse_int(text)
        if number is None:
            raise InvalidFormatError(f'invalid "{tag}" value: "{text}"', tag=tag, value=text)
        return number
    raise _incompatible(tag, value)


def coerce_float(tag: str, value: Any) -> float | str | None:
    if isinstance(value, bool):
        raise _incompatible(tag, value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = _text(tag, value)
        if text is None or is_constant_name(text):
            return text
        if text.endswith("%"):
            number = parse_float(text[:-1])
            number = None if number is None else number / 100
        else:
            number = parse_float(text)
        if number is None:
            raise InvalidFormatError(f'invalid "{tag}" value: "{text}"', tag=tag, value=text)
    else:
        raise _incompatible(tag, value)

    low, high = FLOAT_PROPERTIES.get(tag, (float("-inf"), float("inf")))
    if not low <= number <= high:
        raise InvalidFormatError(
            f'"{tag}" value {number} is out of range [{low}, {high}]', tag=tag, value=number
        )
    return number


def coerce_range(tag: str, value: Any) -> Range | str | None:
    if isinstance(value, Range):
        return value
    if isinstance(value, bool):
        raise _incompatible(tag, value)
    if isinstance(value, int):
        return Range(value, value)
    if isinstance(value, str):
        text = _text(tag, value)
        if text is None or is_constant_name(text):
            return text
        return parse_range(text)
    raise _incompatible(tag, value)


def coerce_string(tag: str, value: Any) -> str | None:
    if isinstance(value, str):
        return value or None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Color, SizeUnit, AngleUnit, Range)):
        return str(value)
    raise _incompatible(tag, value)


COERCERS: dict[PropertyKind, Callable[[str, Any], Any]] = {
    PropertyKind.SIZE: coerce_size,
    PropertyKind.ENUM: coerce_enum,
    PropertyKind.FLOAT: coerce_float,
    PropertyKind.COLOR: coerce_color,
    PropertyKind.ANGLE: coerce_angle,
    PropertyKind.BOOL: coerce_bool,
    PropertyKind.INT: coerce_int,
    PropertyKind.RANGE: coerce_range,
    PropertyKind.STRING: coerce_string,
}


def coerce_value(tag: str, value: Any, kind: PropertyKind) -> Any:
    """
    Coerce a ``set`` input to the stored form for a property of ``kind``.

    Returns:
        Value to store, or None if the input removes the property

    Raises:
        IncompatibleTypeError: If no coercion applies to the input type
        InvalidFormatError: If a string input does not parse
    """
    return COERCERS[kind](tag, value)
