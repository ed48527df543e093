"""Margin and padding: one aggregate tag exploded into four side tags."""

from dataclasses import dataclass, field
from typing import Any

from ..core.errors import IncompatibleTypeError
from ..data import DataObject
from ..properties import size_property, tags
from ..values import SizeUnit
from .composite import split_values
from .css import CSSValueBuilder, CSSWriter

BOUNDS_SIDES = (tags.TOP, tags.RIGHT, tags.BOTTOM, tags.LEFT)


@dataclass(frozen=True)
class Bounds:
    top: SizeUnit = field(default_factory=SizeUnit)
    right: SizeUnit = field(default_factory=SizeUnit)
    bottom: SizeUnit = field(default_factory=SizeUnit)
    left: SizeUnit = field(default_factory=SizeUnit)

    @classmethod
    def uniform(cls, size: SizeUnit) -> "Bounds":
        return cls(size, size, size, size)

    def sides(self) -> tuple[SizeUnit, SizeUnit, SizeUnit, SizeUnit]:
        return self.top, self.right, self.bottom, self.left

    def all_fields_equal(self) -> bool:
        return self.top == self.right == self.bottom == self.left

    def is_auto(self) -> bool:
        return all(side.is_auto() for side in self.sides())

    def __str__(self) -> str:
        if self.all_fields_equal():
            return str(self.top)
        return ",".join(str(side) for side in self.sides())

    def css_value(self, tag: str, builder: CSSWriter) -> None:
        if self.all_fields_equal():
            builder.add(tag, self.top.css_string("0"))
        else:
            builder.add_values(tag, " ", *(side.css_string("0") for side in self.sides()))

    def css_string(self) -> str:
        builder = CSSValueBuilder()
        self.css_value("", builder)
        return builder.finish()


def side_tags(aggregate: str) -> tuple[str, str, str, str]:
    """``margin`` -> (``margin-top``, ``margin-right``, ``margin-bottom``, ``margin-left``)."""
    return tuple(f"{aggregate}-{side}" for side in BOUNDS_SIDES)  # type: ignore[return-value]


def explode_bounds(tag: str, value: Any) -> dict[str, Any]:
    """
    Split a margin/padding value into its side values.

    Accepts one value for all sides, ``vertical,horizontal``,
    ``top,right,bottom,left``, a Bounds, or a mapping/DataObject with
    ``top``/``right``/``bottom``/``left`` keys.

    Raises:
        IncompatibleTypeError: If the value has no bounds form
    """
    if isinstance(value, Bounds):
        return dict(zip(BOUNDS_SIDES, value.sides()))
    if isinstance(value, DataObject):
        value = value.to_params()
    if isinstance(value, dict):
        return {side: value[side] for side in BOUNDS_SIDES if side in value}
    if isinstance(value, (list, tuple)):
        values = list(value)
    elif isinstance(value, str) and "," in value:
        values = split_values(value)
    elif isinstance(value, (str, SizeUnit, int, float)) and not isinstance(value, bool):
        values = [value]
    else:
        raise IncompatibleTypeError(
            f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
        )

    if len(values) == 1:
        values = values * 4
    elif len(values) == 2:
        values = [values[0], values[1], values[0], values[1]]
    elif len(values) != 4:
        raise IncompatibleTypeError(f'invalid "{tag}" value: {value!r}', tag=tag, value=repr(value))
    return dict(zip(BOUNDS_SIDES, values))


def bounds_property(bag, aggregate: str, session) -> Bounds:
    """Resolved margin/padding of a bag; missing sides are auto."""
    return Bounds(
        *(size_property(bag, side_tag, session) or SizeUnit() for side_tag in side_tags(aggregate))
    )
