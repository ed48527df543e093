"""SizeUnit: a length with a CSS unit."""

import math
from dataclasses import dataclass
from enum import Enum

from ..core.errors import InvalidFormatError, report_error
from .numbers import format_float, parse_float


class SizeType(str, Enum):
    """Unit of a SizeUnit. The value is the CSS suffix."""

    AUTO = "auto"
    PIXEL = "px"
    EM = "em"
    REM = "rem"
    EX = "ex"
    PERCENT = "%"
    PT = "pt"
    PC = "pc"
    INCH = "in"
    MM = "mm"
    CM = "cm"
    FRACTION = "fr"
    VW = "vw"
    VH = "vh"
    CH = "ch"
    FUNCTION = "function"


# Longest suffixes first so "rem" is not read as "em"
_SUFFIXES = sorted(
    (t for t in SizeType if t not in (SizeType.AUTO, SizeType.FUNCTION)),
    key=lambda t: len(t.value),
    reverse=True,
)

SIZE_FUNCTIONS = ("calc", "min", "max", "clamp")


@dataclass(frozen=True)
class SizeUnit:
    """A size value: number plus unit, ``auto``, or a CSS size function."""

    type: SizeType = SizeType.AUTO
    value: float = 0.0
    function: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SizeUnit) or self.type != other.type:
            return False
        if self.type == SizeType.AUTO:
            return True
        if self.type == SizeType.FUNCTION:
            return self.function == other.function
        return self.value == other.value

    def __hash__(self) -> int:
        if self.type == SizeType.AUTO:
            return hash(self.type)
        return hash((self.type, self.value, self.function))

    def is_auto(self) -> bool:
        return self.type == SizeType.AUTO

    def __str__(self) -> str:
        if self.type == SizeType.AUTO:
            return "auto"
        if self.type == SizeType.FUNCTION:
            return self.function or "auto"
        return format_float(self.value) + self.type.value

    def css_string(self, text_for_auto: str = "auto") -> str:
        """
        CSS text of the size.

        Args:
            text_for_auto: Text emitted for ``auto`` (may be empty)

        Returns:
            CSS length
        """
        if self.type == SizeType.AUTO:
            return text_for_auto
        if self.type == SizeType.FUNCTION:
            return self.function or text_for_auto
        if self.value == 0:
            return "0"
        return str(self)


def auto_size() -> SizeUnit:
    return SizeUnit()


def px(value: float) -> SizeUnit:
    return SizeUnit(SizeType.PIXEL, float(value))


def em(value: float) -> SizeUnit:
    return SizeUnit(SizeType.EM, float(value))


def rem(value: float) -> SizeUnit:
    return SizeUnit(SizeType.REM, float(value))


def percent(value: float) -> SizeUnit:
    return SizeUnit(SizeType.PERCENT, float(value))


def fr(value: float) -> SizeUnit:
    return SizeUnit(SizeType.FRACTION, float(value))


def pt(value: float) -> SizeUnit:
    return SizeUnit(SizeType.PT, float(value))


def parse_size(text: str) -> SizeUnit:
    """
    Parse ``<number><unit>``, ``auto``/``none``/empty, or a size function.

    Raises:
        InvalidFormatError: If the text is not a size
    """
    text = text.strip()
    if text in ("auto", "none", ""):
        return SizeUnit()
    if text == "0":
        return SizeUnit(SizeType.PIXEL, 0.0)

    lower = text.lower()
    if lower.endswith(")") and lower.split("(", 1)[0].strip() in SIZE_FUNCTIONS:
        return SizeUnit(SizeType.FUNCTION, 0.0, text)

    for size_type in _SUFFIXES:
        if lower.endswith(size_type.value):
            number = parse_float(lower[: -len(size_type.value)])
            if number is None:
                raise InvalidFormatError(f'invalid SizeUnit value: "{text}"', value=text)
            return SizeUnit(size_type, number)

    number = parse_float(lower)
    if number is None or math.isinf(number):
        raise InvalidFormatError(f'invalid SizeUnit value: "{text}"', value=text)
    return SizeUnit(SizeType.PIXEL, number)


def string_to_size_unit(text: str) -> SizeUnit | None:
    """Parse a size, logging and returning None on failure."""
    try:
        return parse_size(text)
    except InvalidFormatError as e:
        report_error(e)
        return None
