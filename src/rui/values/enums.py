"""Integer constants of enumerated properties."""

from enum import IntEnum


class Visibility(IntEnum):
    VISIBLE = 0
    INVISIBLE = 1
    GONE = 2


class LineStyle(IntEnum):
    NONE = 0
    SOLID = 1
    DASHED = 2
    DOTTED = 3
    DOUBLE = 4
    WAVY = 5


class HorizontalAlign(IntEnum):
    LEFT = 0
    RIGHT = 1
    CENTER = 2
    STRETCH = 3


class VerticalAlign(IntEnum):
    TOP = 0
    BOTTOM = 1
    CENTER = 2
    STRETCH = 3


class Orientation(IntEnum):
    TOP_DOWN = 0
    START_TO_END = 1
    BOTTOM_UP = 2
    END_TO_START = 3


class ListWrap(IntEnum):
    OFF = 0
    ON = 1
    REVERSE = 2


class TabsPosition(IntEnum):
    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3
    LEFT_LIST = 4
    RIGHT_LIST = 5
    HIDDEN = 6


class ArrowPosition(IntEnum):
    NONE = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 3
    LEFT = 4


class ArrowAlign(IntEnum):
    """Arrow placement along the popup side. START/END alias LEFT/RIGHT."""

    LEFT = 0
    RIGHT = 1
    CENTER = 2
    START = 0
    END = 1


class StackAnimation(IntEnum):
    DEFAULT = 0
    START_TO_END = 1
    END_TO_START = 2
    TOP_DOWN = 3
    BOTTOM_UP = 4


class LinearGradientDirection(IntEnum):
    TO_TOP = 0
    TO_RIGHT_TOP = 1
    TO_RIGHT = 2
    TO_RIGHT_BOTTOM = 3
    TO_BOTTOM = 4
    TO_LEFT_BOTTOM = 5
    TO_LEFT = 6
    TO_LEFT_TOP = 7


class RadialGradientShape(IntEnum):
    ELLIPSE = 0
    CIRCLE = 1


class RadialGradientRadius(IntEnum):
    CLOSEST_SIDE = 0
    CLOSEST_CORNER = 1
    FARTHEST_SIDE = 2
    FARTHEST_CORNER = 3
