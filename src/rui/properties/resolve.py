"""
Read-side helpers: turn stored property values into typed values.

Stored values may still be ``@constant`` references; these are looked up
through the session's theme here. Unresolvable references and
out-of-range enums are logged and yield None (or the enum default) so CSS
serialization always produces valid text.
"""

from typing import Any, Protocol

from ..core.errors import RUIError, report_error
from ..core.logging_config import get_logger
from ..values import AngleUnit, Color, Range, SizeUnit
from .coerce import (
    coerce_angle,
    coerce_bool,
    coerce_color,
    coerce_float,
    coerce_int,
    coerce_range,
    coerce_size,
    enum_index,
    is_constant_name,
)
from .schema import ENUM_PROPERTIES

logger = get_logger(__name__)


class ConstantSource(Protocol):
    """Anything that can resolve theme constants (normally the Session)."""

    def get_constant(self, name: str) -> str | None: ...

    def get_color_constant(self, name: str) -> Color | None: ...


class PropertyGetter(Protocol):
    def get(self, tag: str) -> Any: ...


def resolve_constant(text: str, session: ConstantSource | None, tag: str = "") -> str | None:
    """Text of the constant a ``@name`` reference points to."""
    name = text[1:]
    value = session.get_constant(name) if session is not None else None
    if value is None:
        logger.warning("unresolved_constant", constant=text, tag=tag)
    return value


def _resolved(value: Any, session: ConstantSource | None, tag: str, coercer) -> Any:
    if isinstance(value, str) and is_constant_name(value):
        text = resolve_constant(value, session, tag)
        if text is None:
            return None
        value = text
    try:
        return coercer(tag, value)
    except RUIError as e:
        report_error(e, tag=tag)
        return None


def value_to_size(value: Any, session: ConstantSource | None, tag: str = "") -> SizeUnit | None:
    if value is None or isinstance(value, SizeUnit):
        return value
    result = _resolved(value, session, tag, coerce_size)
    return result if isinstance(result, SizeUnit) else None


def value_to_angle(value: Any, session: ConstantSource | None, tag: str = "") -> AngleUnit | None:
    if value is None or isinstance(value, AngleUnit):
        return value
    result = _resolved(value, session, tag, coerce_angle)
    return result if isinstance(result, AngleUnit) else None


def value_to_color(value: Any, session: ConstantSource | None, tag: str = "") -> Color | None:
    if value is None or isinstance(value, Color):
        return value
    if isinstance(value, str) and is_constant_name(value) and session is not None:
        color = session.get_color_constant(value[1:])
        if color is not None:
            return color
    result = _resolved(value, session, tag, coerce_color)
    return result if isinstance(result, Color) else None


def value_to_bool(value: Any, session: ConstantSource | None, tag: str = "") -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    result = _resolved(value, session, tag, coerce_bool)
    return result if isinstance(result, bool) else None


def value_to_int(value: Any, session: ConstantSource | None, tag: str = "") -> int | None:
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    result = _resolved(value, session, tag, coerce_int)
    return result if isinstance(result, int) else None


def value_to_float(value: Any, session: ConstantSource | None, tag: str = "") -> float | None:
    if value is None or isinstance(value, float):
        return value
    result = _resolved(value, session, tag, coerce_float)
    return result if isinstance(result, float) else None


def value_to_range(value: Any, session: ConstantSource | None, tag: str = "") -> Range | None:
    if value is None or isinstance(value, Range):
        return value
    result = _resolved(value, session, tag, coerce_range)
    return result if isinstance(result, Range) else None


def value_to_string(value: Any, session: ConstantSource | None, tag: str = "") -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        if is_constant_name(value):
            return resolve_constant(value, session, tag)
        return value
    return str(value)


def value_to_enum(
    value: Any, tag: str, session: ConstantSource | None, default: int = 0
) -> int:
    """
    Index of an enum value; out-of-range or unparsable values clamp to
    ``default`` and are logged.
    """
    if value is None:
        return default
    count = len(ENUM_PROPERTIES[tag].values)
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value < count:
            return int(value)
        logger.error("enum_out_of_range", tag=tag, value=value, default=default)
        return default
    if isinstance(value, str):
        text = value
        if is_constant_name(value):
            resolved = resolve_constant(value, session, tag)
            if resolved is None:
                return default
            text = resolved
        try:
            return enum_index(tag, text)
        except RUIError as e:
            report_error(e, tag=tag, default=default)
            return default
    logger.error("enum_invalid_type", tag=tag, type=type(value).__name__)
    return default


# ============================================================================
# Bag-level shortcuts
# ============================================================================


def _schema_tag(bag: PropertyGetter, tag: str) -> str:
    schema_tag = getattr(bag, "schema_tag", None)
    return schema_tag(tag) if schema_tag is not None else tag


def size_property(bag: PropertyGetter, tag: str, session: ConstantSource | None) -> SizeUnit | None:
    return value_to_size(bag.get(tag), session, _schema_tag(bag, tag))


def angle_property(bag: PropertyGetter, tag: str, session: ConstantSource | None) -> AngleUnit | None:
    return value_to_angle(bag.get(tag), session, _schema_tag(bag, tag))


def color_property(bag: PropertyGetter, tag: str, session: ConstantSource | None) -> Color | None:
    return value_to_color(bag.get(tag), session, _schema_tag(bag, tag))


def bool_property(bag: PropertyGetter, tag: str, session: ConstantSource | None) -> bool | None:
    return value_to_bool(bag.get(tag), session, _schema_tag(bag, tag))


def int_property(bag: PropertyGetter, tag: str, session: ConstantSource | None) -> int | None:
    return value_to_int(bag.get(tag), session, _schema_tag(bag, tag))


def float_property(bag: PropertyGetter, tag: str, session: ConstantSource | None) -> float | None:
    return value_to_float(bag.get(tag), session, _schema_tag(bag, tag))


def range_property(bag: PropertyGetter, tag: str, session: ConstantSource | None) -> Range | None:
    return value_to_range(bag.get(tag), session, _schema_tag(bag, tag))


def string_property(bag: PropertyGetter, tag: str, session: ConstantSource | None) -> str | None:
    return value_to_string(bag.get(tag), session, _schema_tag(bag, tag))


def enum_property(
    bag: PropertyGetter, tag: str, session: ConstantSource | None, default: int = 0
) -> int:
    return value_to_enum(bag.get(tag), _schema_tag(bag, tag), session, default)


def enum_css_value(
    bag: PropertyGetter, tag: str, session: ConstantSource | None, default: int = 0
) -> str:
    """CSS projection of an enum property, or "" when it is unset."""
    value = bag.get(tag)
    if value is None:
        return ""
    tag = _schema_tag(bag, tag)
    return ENUM_PROPERTIES[tag].css_value(value_to_enum(value, tag, session, default))
