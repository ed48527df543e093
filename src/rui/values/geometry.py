"""Range and Frame values."""

from dataclasses import dataclass

from ..core.errors import InvalidFormatError
from .numbers import format_float, parse_int


@dataclass(frozen=True)
class Range:
    """Inclusive integer range, written ``first:last`` or ``n``."""

    first: int = 0
    last: int = 0

    def __str__(self) -> str:
        if self.first == self.last:
            return str(self.first)
        return f"{self.first}:{self.last}"


def parse_range(text: str) -> Range:
    """
    Parse ``first:last`` or a single integer.

    Raises:
        InvalidFormatError: If the text is not a range
    """
    parts = text.split(":")
    if len(parts) > 2:
        raise InvalidFormatError(f"invalid range value: {text}", value=text)
    numbers = [parse_int(part) for part in parts]
    if any(number is None for number in numbers):
        raise InvalidFormatError(f"invalid range value: {text}", value=text)
    return Range(numbers[0], numbers[-1])


@dataclass
class Frame:
    """Rectangle reported by the browser for a view, in pixels."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def __str__(self) -> str:
        return (
            f"({format_float(self.left)}, {format_float(self.top)}, "
            f"{format_float(self.width)}, {format_float(self.height)})"
        )
