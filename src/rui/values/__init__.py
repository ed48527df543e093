"""Value types: colors, sizes, angles, ranges and frames."""

from .color import Color, NAMED_COLORS, parse_color, string_to_color
from .size import (
    SizeType,
    SizeUnit,
    auto_size,
    px,
    em,
    rem,
    percent,
    fr,
    pt,
    parse_size,
    string_to_size_unit,
)
from .angle import AngleType, AngleUnit, deg, rad, turn, parse_angle, string_to_angle_unit
from .geometry import Range, Frame, parse_range
from .numbers import format_float, parse_float, parse_int

__all__ = [
    # Color
    "Color",
    "NAMED_COLORS",
    "parse_color",
    "string_to_color",
    # Size
    "SizeType",
    "SizeUnit",
    "auto_size",
    "px",
    "em",
    "rem",
    "percent",
    "fr",
    "pt",
    "parse_size",
    "string_to_size_unit",
    # Angle
    "AngleType",
    "AngleUnit",
    "deg",
    "rad",
    "turn",
    "parse_angle",
    "string_to_angle_unit",
    # Geometry
    "Range",
    "Frame",
    "parse_range",
    # Numbers
    "format_float",
    "parse_float",
    "parse_int",
]
