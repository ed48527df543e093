"""
Per-tag schema tables.

Every plain (non-composite) property belongs to exactly one kind. The
kind decides how ``set`` coerces a value and how the CSS serializer reads
it back. Enum properties also carry their text values and CSS projection.
"""

from dataclasses import dataclass
from enum import Enum

from . import tags


class PropertyKind(str, Enum):
    SIZE = "size"
    ENUM = "enum"
    FLOAT = "float"
    COLOR = "color"
    ANGLE = "angle"
    BOOL = "bool"
    INT = "int"
    RANGE = "range"
    STRING = "string"


@dataclass(frozen=True)
class EnumSpec:
    """Text values of an enum property, its CSS name and CSS values."""

    values: tuple[str, ...]
    css_tag: str = ""
    css_values: tuple[str, ...] = ()

    def css_value(self, index: int) -> str:
        values = self.css_values or self.values
        return values[index] if 0 <= index < len(values) else ""


def _enum(values: str, css_tag: str = "", css_values: str | None = None) -> EnumSpec:
    text_values = tuple(values.split())
    css = tuple(css_values.split("|")) if css_values is not None else text_values
    return EnumSpec(text_values, css_tag, css)


_LINE_STYLES = "none solid dashed dotted double"
_BLEND_MODES = (
    "normal multiply screen overlay darken lighten color-dodge color-burn hard-light "
    "soft-light difference exclusion hue saturation color luminosity"
)
_CURSORS = (
    "auto default none context-menu help pointer progress wait cell crosshair text "
    "vertical-text alias copy move no-drop not-allowed e-resize n-resize ne-resize "
    "nw-resize s-resize se-resize sw-resize w-resize ew-resize ns-resize nesw-resize "
    "nwse-resize col-resize row-resize all-scroll zoom-in zoom-out grab grabbing"
)

ENUM_PROPERTIES: dict[str, EnumSpec] = {
    tags.SEMANTICS: _enum(
        "default article section aside header main footer navigation figure figure-caption "
        "button p h1 h2 h3 h4 h5 h6 blockquote code",
        "",
        "div|article|section|aside|header|main|footer|nav|figure|figcaption|button|p|"
        "h1|h2|h3|h4|h5|h6|blockquote|code",
    ),
    tags.VISIBILITY: _enum("visible invisible gone"),
    tags.OVERFLOW: _enum("hidden visible scroll auto", tags.OVERFLOW),
    tags.TEXT_ALIGN: _enum("left right center justify", tags.TEXT_ALIGN),
    tags.TEXT_TRANSFORM: _enum("none capitalize lowercase uppercase", tags.TEXT_TRANSFORM),
    tags.TEXT_WEIGHT: _enum(
        "inherit thin extra-light light normal medium semi-bold bold extra-bold black",
        "font-weight",
        "inherit|100|200|300|normal|500|600|bold|800|900",
    ),
    tags.WHITE_SPACE: _enum("normal nowrap pre pre-wrap pre-line break-spaces", tags.WHITE_SPACE),
    tags.WORD_BREAK: _enum("normal break-all keep-all break-word", tags.WORD_BREAK),
    tags.TEXT_OVERFLOW: _enum("clip ellipsis", tags.TEXT_OVERFLOW),
    tags.TEXT_WRAP: _enum("wrap nowrap balance", tags.TEXT_WRAP),
    tags.WRITING_MODE: _enum(
        "horizontal-top-to-bottom horizontal-bottom-to-top vertical-right-to-left "
        "vertical-left-to-right",
        tags.WRITING_MODE,
        "horizontal-tb|horizontal-bt|vertical-rl|vertical-lr",
    ),
    tags.TEXT_DIRECTION: _enum("system left-to-right right-to-left", "direction", "|ltr|rtl"),
    tags.VERTICAL_TEXT_ORIENTATION: _enum("mixed upright", "text-orientation"),
    tags.TEXT_LINE_STYLE: _enum(
        "inherit solid dashed dotted double wavy", "text-decoration-style"
    ),
    tags.BORDER_STYLE: _enum(_LINE_STYLES, tags.BORDER_STYLE),
    tags.TOP_STYLE: _enum(_LINE_STYLES),
    tags.RIGHT_STYLE: _enum(_LINE_STYLES),
    tags.BOTTOM_STYLE: _enum(_LINE_STYLES),
    tags.LEFT_STYLE: _enum(_LINE_STYLES),
    tags.BORDER_LEFT_STYLE: _enum(_LINE_STYLES),
    tags.BORDER_RIGHT_STYLE: _enum(_LINE_STYLES),
    tags.BORDER_TOP_STYLE: _enum(_LINE_STYLES),
    tags.BORDER_BOTTOM_STYLE: _enum(_LINE_STYLES),
    tags.OUTLINE_STYLE: _enum(_LINE_STYLES, tags.OUTLINE_STYLE),
    tags.COLUMN_SEPARATOR_STYLE: _enum(_LINE_STYLES),
    tags.TABS: _enum("top bottom left right left-list right-list hidden"),
    tags.ORIENTATION: _enum(
        "up-down start-to-end bottom-up end-to-start", "", "column|row|column-reverse|row-reverse"
    ),
    tags.LIST_WRAP: _enum("off on reverse", "", "nowrap|wrap|wrap-reverse"),
    tags.VERTICAL_ALIGN: _enum("top bottom center stretch"),
    tags.HORIZONTAL_ALIGN: _enum("left right center stretch"),
    tags.BUTTONS_ALIGN: _enum("left right center stretch"),
    tags.ARROW: _enum("none top right bottom left"),
    tags.ARROW_ALIGN: _enum("left right center"),
    tags.CELL_VERTICAL_ALIGN: _enum(
        "top bottom center stretch", "align-items", "start|end|center|stretch"
    ),
    tags.CELL_HORIZONTAL_ALIGN: _enum(
        "left right center stretch", "justify-items", "start|end|center|stretch"
    ),
    tags.CELL_VERTICAL_SELF_ALIGN: _enum(
        "top bottom center stretch", "align-self", "start|end|center|stretch"
    ),
    tags.CELL_HORIZONTAL_SELF_ALIGN: _enum(
        "left right center stretch", "justify-self", "start|end|center|stretch"
    ),
    tags.GRID_AUTO_FLOW: _enum(
        "row column row-dense column-dense", tags.GRID_AUTO_FLOW, "row|column|row dense|column dense"
    ),
    tags.IMAGE_VERTICAL_ALIGN: _enum("top bottom center"),
    tags.IMAGE_HORIZONTAL_ALIGN: _enum("left right center"),
    tags.CHECKBOX_VERTICAL_ALIGN: _enum("top bottom center", "", "start|end|center"),
    tags.CHECKBOX_HORIZONTAL_ALIGN: _enum("left right center", "", "start|end|center"),
    tags.CURSOR: _enum(_CURSORS, tags.CURSOR),
    tags.FIT: _enum("none contain cover fill scale-down", "object-fit"),
    tags.BACKGROUND_FIT: _enum("none contain cover"),
    tags.REPEAT: _enum("no-repeat repeat repeat-x repeat-y round space"),
    tags.ATTACHMENT: _enum("scroll fixed local"),
    tags.BACKGROUND_CLIP: _enum("border-box padding-box content-box", "background-clip"),
    tags.DIRECTION: _enum(
        "to-top to-right-top to-right to-right-bottom to-bottom to-left-bottom to-left to-left-top",
        "",
        "to top|to right top|to right|to right bottom|to bottom|to left bottom|to left|to left top",
    ),
    tags.ANIMATION_DIRECTION: _enum("normal reverse alternate alternate-reverse"),
    tags.RADIAL_GRADIENT_SHAPE: _enum("ellipse circle"),
    tags.RADIAL_GRADIENT_RADIUS: _enum(
        "closest-side closest-corner farthest-side farthest-corner"
    ),
    tags.FLOAT: _enum("none left right", "float"),
    tags.PRELOAD: _enum("none metadata auto"),
    tags.RESIZE: _enum("none both horizontal vertical", "resize"),
    tags.MIX_BLEND_MODE: _enum(_BLEND_MODES, tags.MIX_BLEND_MODE),
    tags.BACKGROUND_BLEND_MODE: _enum(_BLEND_MODES, tags.BACKGROUND_BLEND_MODE),
    tags.COLUMN_FILL: _enum("balance auto", tags.COLUMN_FILL),
    tags.NUMBER_PICKER_TYPE: _enum("editor slider", "", "number|range"),
    tags.EDIT_VIEW_TYPE: _enum("text password email emails url phone multiline"),
    tags.CHECKBOX: _enum("none single multiple"),
    tags.SELECTION_MODE: _enum("none cell row"),
    tags.TABLE_VERTICAL_ALIGN: _enum(
        "top bottom center baseline", "vertical-align", "top|bottom|middle|baseline"
    ),
}

# Size tags mapped to the CSS property they project to
SIZE_PROPERTIES: dict[str, str] = {
    tag: tag
    for tag in (
        tags.WIDTH, tags.HEIGHT, tags.MIN_WIDTH, tags.MIN_HEIGHT, tags.MAX_WIDTH,
        tags.MAX_HEIGHT, tags.LEFT, tags.RIGHT, tags.TOP, tags.BOTTOM, tags.TEXT_INDENT,
        tags.LETTER_SPACING, tags.WORD_SPACING, tags.LINE_HEIGHT, tags.GRID_ROW_GAP,
        tags.GRID_COLUMN_GAP, tags.COLUMN_WIDTH, tags.COLUMN_GAP, tags.GAP,
        tags.MARGIN_LEFT, tags.MARGIN_RIGHT, tags.MARGIN_TOP, tags.MARGIN_BOTTOM,
        tags.PADDING_LEFT, tags.PADDING_RIGHT, tags.PADDING_TOP, tags.PADDING_BOTTOM,
        tags.OUTLINE_WIDTH, tags.OUTLINE_OFFSET, tags.X_OFFSET, tags.Y_OFFSET,
        tags.BLUR_RADIUS, tags.SPREAD_RADIUS, tags.PERSPECTIVE, tags.PERSPECTIVE_ORIGIN_X,
        tags.PERSPECTIVE_ORIGIN_Y, tags.TRANSFORM_ORIGIN_X, tags.TRANSFORM_ORIGIN_Y,
        tags.TRANSLATE_X, tags.TRANSLATE_Y, tags.TRANSLATE_Z,
        tags.TRANSFORM_ORIGIN_Z, tags.CENTER_X, tags.CENTER_Y, tags.ARROW_SIZE,
        tags.ARROW_WIDTH, tags.ARROW_OFFSET,
        tags.BORDER_WIDTH, tags.BORDER_LEFT_WIDTH, tags.BORDER_RIGHT_WIDTH, tags.BORDER_TOP_WIDTH,
        tags.BORDER_BOTTOM_WIDTH, tags.COLUMN_SEPARATOR_WIDTH, tags.RADIUS, tags.RADIUS_X,
        tags.RADIUS_Y, tags.RADIUS_TOP_LEFT, tags.RADIUS_TOP_LEFT_X, tags.RADIUS_TOP_LEFT_Y,
        tags.RADIUS_TOP_RIGHT, tags.RADIUS_TOP_RIGHT_X, tags.RADIUS_TOP_RIGHT_Y,
        tags.RADIUS_BOTTOM_LEFT, tags.RADIUS_BOTTOM_LEFT_X, tags.RADIUS_BOTTOM_LEFT_Y,
        tags.RADIUS_BOTTOM_RIGHT, tags.RADIUS_BOTTOM_RIGHT_X, tags.RADIUS_BOTTOM_RIGHT_Y,
    )
}
SIZE_PROPERTIES.update(
    {
        tags.TEXT_SIZE: "font-size",
        tags.TEXT_LINE_THICKNESS: "text-decoration-thickness",
        tags.LIST_ROW_GAP: "row-gap",
        tags.LIST_COLUMN_GAP: "column-gap",
        tags.CELL_PADDING_TOP: "padding-top",
        tags.CELL_PADDING_RIGHT: "padding-right",
        tags.CELL_PADDING_BOTTOM: "padding-bottom",
        tags.CELL_PADDING_LEFT: "padding-left",
    }
)

# Inclusive value limits of float properties
FLOAT_PROPERTIES: dict[str, tuple[float, float]] = {
    tags.OPACITY: (0.0, 1.0),
    tags.VIDEO_WIDTH: (0.0, 10000.0),
    tags.VIDEO_HEIGHT: (0.0, 10000.0),
    tags.DURATION: (0.0, float("inf")),
    tags.DELAY: (float("-inf"), float("inf")),
    tags.SHOW_DURATION: (0.0, float("inf")),
    tags.PUSH_DURATION: (0.0, float("inf")),
    tags.SCALE_X: (float("-inf"), float("inf")),
    tags.SCALE_Y: (float("-inf"), float("inf")),
    tags.SCALE_Z: (float("-inf"), float("inf")),
    tags.ROTATE_X: (float("-inf"), float("inf")),
    tags.ROTATE_Y: (float("-inf"), float("inf")),
    tags.ROTATE_Z: (float("-inf"), float("inf")),
    tags.BRIGHTNESS: (0.0, float("inf")),
    tags.CONTRAST: (0.0, float("inf")),
    tags.SATURATE: (0.0, float("inf")),
    tags.GRAYSCALE: (0.0, 100.0),
    tags.INVERT: (0.0, 100.0),
    tags.SEPIA: (0.0, 100.0),
    tags.NUMBER_PICKER_MIN: (float("-inf"), float("inf")),
    tags.NUMBER_PICKER_MAX: (float("-inf"), float("inf")),
    tags.NUMBER_PICKER_STEP: (0.0, float("inf")),
    tags.NUMBER_PICKER_VALUE: (float("-inf"), float("inf")),
    tags.PROGRESS_BAR_MAX: (0.0, float("inf")),
    tags.PROGRESS_BAR_VALUE: (0.0, float("inf")),
}

COLOR_PROPERTIES = frozenset(
    {
        tags.COLOR, tags.BACKGROUND_COLOR, tags.TEXT_COLOR, tags.CARET_COLOR,
        tags.OUTLINE_COLOR, tags.TEXT_LINE_COLOR, tags.ACCENT_COLOR,
        tags.COLUMN_SEPARATOR_COLOR,
        tags.BORDER_COLOR, tags.BORDER_LEFT_COLOR, tags.BORDER_RIGHT_COLOR, tags.BORDER_TOP_COLOR,
        tags.BORDER_BOTTOM_COLOR,
        tags.COLOR_PICKER_VALUE,
    }
)

ANGLE_PROPERTIES = frozenset(
    {tags.FROM, tags.ROTATE, tags.SKEW_X, tags.SKEW_Y, tags.HUE_ROTATE, tags.ANGLE}
)

BOOL_PROPERTIES = frozenset(
    {
        tags.DISABLED, tags.FOCUSABLE, tags.INSET, tags.BACKFACE_VISIBLE, tags.CLOSE_BUTTON,
        tags.OUTSIDE_CLOSE, tags.ITALIC, tags.SMALL_CAPS, tags.STRIKETHROUGH, tags.OVERLINE,
        tags.UNDERLINE, tags.AVOID_BREAK, tags.NOT_TRANSLATE, tags.CONTROLS, tags.LOOP,
        tags.MUTED, tags.ANIMATION_PAUSED, tags.TAB_CLOSE_BUTTON, tags.REPEATING,
        tags.USER_SELECT, tags.COLUMN_SPAN_ALL, tags.CHECKED, tags.READ_ONLY, tags.SPELLCHECK,
        tags.EDIT_WRAP,
    }
)

INT_PROPERTIES = frozenset(
    {
        tags.Z_INDEX, tags.TAB_SIZE, tags.COLUMN_COUNT, tags.ORDER, tags.TAB_INDEX, tags.CURRENT,
        tags.NUMBER_PICKER_PRECISION, tags.DATE_PICKER_STEP, tags.TIME_PICKER_STEP, tags.MAX_LENGTH,
        tags.HEAD_HEIGHT, tags.FOOT_HEIGHT,
    }
)

RANGE_PROPERTIES = frozenset({tags.ROW, tags.COLUMN})


def property_kind(tag: str) -> PropertyKind:
    """Kind of a plain property; unlisted tags hold strings."""
    if tag in SIZE_PROPERTIES:
        return PropertyKind.SIZE
    if tag in ENUM_PROPERTIES:
        return PropertyKind.ENUM
    if tag in FLOAT_PROPERTIES:
        return PropertyKind.FLOAT
    if tag in COLOR_PROPERTIES:
        return PropertyKind.COLOR
    if tag in ANGLE_PROPERTIES:
        return PropertyKind.ANGLE
    if tag in BOOL_PROPERTIES:
        return PropertyKind.BOOL
    if tag in INT_PROPERTIES:
        return PropertyKind.INT
    if tag in RANGE_PROPERTIES:
        return PropertyKind.RANGE
    return PropertyKind.STRING
