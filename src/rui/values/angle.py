"""AngleUnit: an angle with a CSS unit."""

import math
from dataclasses import dataclass
from enum import Enum

from ..core.errors import InvalidFormatError, report_error
from .numbers import format_float, parse_float


class AngleType(str, Enum):
    """Unit of an AngleUnit. The value is the text suffix."""

    RADIAN = "rad"
    PI_RADIAN = "pi"
    DEGREE = "deg"
    GRADIAN = "grad"
    TURN = "turn"


# Checked in this order: "grad" must win over "rad"
_SUFFIXES = (
    (AngleType.GRADIAN, "grad"),
    (AngleType.RADIAN, "rad"),
    (AngleType.DEGREE, "deg"),
    (AngleType.TURN, "turn"),
    (AngleType.PI_RADIAN, "pi"),
    (AngleType.PI_RADIAN, "π"),
    (AngleType.DEGREE, "°"),
)

# Factor converting one unit of each type into radians
_TO_RADIAN = {
    AngleType.RADIAN: 1.0,
    AngleType.PI_RADIAN: math.pi,
    AngleType.DEGREE: math.pi / 180,
    AngleType.GRADIAN: math.pi / 200,
    AngleType.TURN: 2 * math.pi,
}


@dataclass(frozen=True)
class AngleUnit:
    """An angle value."""

    type: AngleType = AngleType.RADIAN
    value: float = 0.0

    def __str__(self) -> str:
        return format_float(self.value) + self.type.value

    def css_string(self) -> str:
        if self.type == AngleType.PI_RADIAN:
            return format_float(self.value * math.pi) + "rad"
        return str(self)

    def to(self, angle_type: AngleType) -> "AngleUnit":
        """Convert to another unit."""
        if angle_type == self.type:
            return self
        radians = self.value * _TO_RADIAN[self.type]
        return AngleUnit(angle_type, radians / _TO_RADIAN[angle_type])

    def to_radian(self) -> "AngleUnit":
        return self.to(AngleType.RADIAN)

    def to_degree(self) -> "AngleUnit":
        return self.to(AngleType.DEGREE)


def deg(value: float) -> AngleUnit:
    return AngleUnit(AngleType.DEGREE, float(value))


def rad(value: float) -> AngleUnit:
    return AngleUnit(AngleType.RADIAN, float(value))


def turn(value: float) -> AngleUnit:
    return AngleUnit(AngleType.TURN, float(value))


def parse_angle(text: str) -> AngleUnit:
    """
    Parse ``<number><unit>``; a bare number is radians and ``π`` is one pi-radian.

    Raises:
        InvalidFormatError: If the text is not an angle
    """
    text = text.strip().lower()
    if text == "π":
        return AngleUnit(AngleType.PI_RADIAN, 1.0)

    angle_type = AngleType.RADIAN
    number_text = text
    for candidate, suffix in _SUFFIXES:
        if text.endswith(suffix):
            angle_type = candidate
            number_text = text[: -len(suffix)]
            break

    number = parse_float(number_text)
    if number is None:
        raise InvalidFormatError(f'invalid AngleUnit value: "{text}"', value=text)
    return AngleUnit(angle_type, number)


def string_to_angle_unit(text: str) -> AngleUnit | None:
    """Parse an angle, logging and returning None on failure."""
    try:
        return parse_angle(text)
    except InvalidFormatError as e:
        report_error(e)
        return None
