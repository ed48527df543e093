"""
View Style
Property bag shared by views and theme styles, and its CSS projection.

Composite families (border, radius, outline, column separator, transform)
are stored as their own bags under the aggregate tag; their leaf tags
(``border-left-style``, ``radius-x``, ``translate-x`` ...) are routed to
the composite. Margin and padding are exploded into four side tags.
"""

from typing import Any

from ..animation import (
    Animation,
    KeyframeAnimation,
    animation_list,
    transition_css,
    transition_entries,
)
from ..core.errors import IncompatibleTypeError
from ..properties import (
    ENUM_PROPERTIES,
    PropertyBag,
    bool_property,
    coerce_value,
    color_property,
    enum_css_value,
    enum_property,
    float_property,
    int_property,
    range_property,
    size_property,
    string_property,
    tags,
    value_to_size,
)
from ..properties.schema import SIZE_PROPERTIES
from ..values import SizeUnit, format_float, parse_size
from ..values.enums import HorizontalAlign, ListWrap, Orientation, VerticalAlign, Visibility
from .background import BackgroundElement, background_css, background_list
from .border import BorderProperty
from .bounds import Bounds, bounds_property, explode_bounds, side_tags
from .column_separator import ColumnSeparatorProperty
from .composite import CompositeProperty, split_values
from .css import CSSWriter
from .filter import FilterProperty
from .outline import OutlineProperty
from .radius import RadiusProperty
from .shadow import ShadowProperty, shadow_list, shadows_css
from .transform import TRANSFORM_TAGS, TransformProperty, transform_origin_css

COMPOSITE_CLASSES: dict[str, type[CompositeProperty]] = {
    tags.BORDER: BorderProperty,
    tags.CELL_BORDER: BorderProperty,
    tags.RADIUS: RadiusProperty,
    tags.OUTLINE: OutlineProperty,
    tags.COLUMN_SEPARATOR: ColumnSeparatorProperty,
    tags.TRANSFORM: TransformProperty,
}

BOUNDS_TAGS = frozenset({tags.MARGIN, tags.PADDING, tags.CELL_PADDING})

SHADOW_TAGS = frozenset({tags.SHADOW, tags.TEXT_SHADOW})
FILTER_TAGS = frozenset({tags.FILTER, tags.BACKDROP_FILTER})
SIZES_TAGS = frozenset({tags.CELL_WIDTH, tags.CELL_HEIGHT})

_LEAF_PREFIXES = (
    ("cell-border-", tags.CELL_BORDER),
    ("border-", tags.BORDER),
    ("radius-", tags.RADIUS),
    ("column-separator-", tags.COLUMN_SEPARATOR),
)
_OUTLINE_LEAVES = frozenset({tags.OUTLINE_STYLE, tags.OUTLINE_WIDTH, tags.OUTLINE_COLOR})


def composite_tag(tag: str) -> str | None:
    """Aggregate a leaf tag belongs to, or None for plain tags."""
    if tag in TRANSFORM_TAGS:
        return tags.TRANSFORM
    if tag in _OUTLINE_LEAVES:
        return tags.OUTLINE
    for prefix, aggregate in _LEAF_PREFIXES:
        if tag.startswith(prefix):
            return aggregate
    return None


def bounds_tag(tag: str) -> str | None:
    """Aggregate of a side tag such as ``margin-left``."""
    for aggregate in BOUNDS_TAGS:
        if tag in side_tags(aggregate):
            return aggregate
    return None


def _sizes_list(tag: str, value: Any) -> list[SizeUnit | str]:
    if isinstance(value, SizeUnit):
        return [value]
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return [value_to_size(value, None, tag) or SizeUnit()]
    if isinstance(value, str):
        items: list[Any] = split_values(value)
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise IncompatibleTypeError(
            f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
        )
    result: list[SizeUnit | str] = []
    for item in items:
        if isinstance(item, str) and item.startswith("@"):
            result.append(item)
        elif isinstance(item, SizeUnit):
            result.append(item)
        elif isinstance(item, str):
            result.append(parse_size(item))
        else:
            result += _sizes_list(tag, item)
    return result


class ViewStyle(PropertyBag):
    """Style properties of a view or of a theme style."""

    aliases = {
        "style-left": tags.BORDER_LEFT_STYLE,
        "style-right": tags.BORDER_RIGHT_STYLE,
        "style-top": tags.BORDER_TOP_STYLE,
        "style-bottom": tags.BORDER_BOTTOM_STYLE,
        "font": tags.FONT_NAME,
        "font-size": tags.TEXT_SIZE,
        "font-weight": tags.TEXT_WEIGHT,
        "list-orientation": tags.ORIENTATION,
        "list-vertical-align": tags.VERTICAL_ALIGN,
        "list-horizontal-align": tags.HORIZONTAL_ALIGN,
    }

    # ========================================================================
    # Set / remove dispatch
    # ========================================================================

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag in COMPOSITE_CLASSES:
            return self._set_composite(tag, value)
        aggregate = composite_tag(tag)
        if aggregate is not None:
            return self._set_leaf(aggregate, tag, value)
        if tag in BOUNDS_TAGS:
            return self._set_bounds(tag, value)
        aggregate = bounds_tag(tag)
        if aggregate is not None:
            return self._with_aggregate(self._set_plain(tag, value), aggregate)
        if tag == tags.GAP:
            return self._set_plain(tags.GRID_ROW_GAP, value) + self._set_plain(tags.GRID_COLUMN_GAP, value)
        if tag in SHADOW_TAGS:
            return self._set_list(tag, value, shadow_list)
        if tag == tags.BACKGROUND:
            return self._set_list(tag, value, background_list)
        if tag == tags.ANIMATION:
            return self._set_list(tag, value, animation_list)
        if tag in FILTER_TAGS:
            return self._set_filter(tag, value)
        if tag in SIZES_TAGS:
            return self._set_list(tag, value, _sizes_list)
        if tag == tags.TRANSITION:
            return self._set_transition(value)
        return self._set_plain(tag, value)

    def _remove(self, tag: str) -> list[str]:
        if tag in COMPOSITE_CLASSES:
            return super()._remove(tag)
        aggregate = composite_tag(tag)
        if aggregate is not None:
            return self._remove_leaf(aggregate, tag)
        if tag in BOUNDS_TAGS:
            changed: list[str] = []
            for side_tag in side_tags(tag):
                changed += super()._remove(side_tag)
            return changed + [tag] if changed else []
        aggregate = bounds_tag(tag)
        if aggregate is not None:
            return self._with_aggregate(super()._remove(tag), aggregate)
        if tag == tags.GAP:
            return super()._remove(tags.GRID_ROW_GAP) + super()._remove(tags.GRID_COLUMN_GAP)
        return super()._remove(tag)

    def _get(self, tag: str) -> Any:
        aggregate = composite_tag(tag)
        if aggregate is not None:
            composite = self._properties.get(aggregate)
            return composite.get(tag) if composite is not None else None
        if tag in BOUNDS_TAGS:
            return self._get_bounds(tag)
        if tag == tags.GAP:
            row = self._properties.get(tags.GRID_ROW_GAP)
            return row if row == self._properties.get(tags.GRID_COLUMN_GAP) else None
        if tag == tags.TRANSITION:
            transitions = self._properties.get(tag)
            return dict(transitions) if transitions else None
        value = self._properties.get(tag)
        if isinstance(value, list):
            return list(value)
        return value

    @staticmethod
    def _with_aggregate(changed: list[str], aggregate: str) -> list[str]:
        if not changed or aggregate in changed:
            return changed
        return changed + [aggregate]

    def _set_composite(self, tag: str, value: Any) -> list[str]:
        if isinstance(value, str) and not value.strip():
            return self._remove(tag)
        composite = COMPOSITE_CLASSES[tag].from_value(tag, value)
        if composite.is_empty():
            return self._remove(tag)
        return self._store(tag, composite)

    def _set_leaf(self, aggregate: str, tag: str, value: Any) -> list[str]:
        current = self._properties.get(aggregate)
        composite = current.clone() if current is not None else COMPOSITE_CLASSES[aggregate]()
        if not composite._set(composite.normalize(tag), value):
            return []
        if composite.is_empty():
            return self._with_aggregate(super()._remove(aggregate), tag)
        self._properties[aggregate] = composite
        return [tag, aggregate]

    def _remove_leaf(self, aggregate: str, tag: str) -> list[str]:
        current = self._properties.get(aggregate)
        if current is None:
            return []
        composite = current.clone()
        if not composite._remove(composite.normalize(tag)):
            return []
        if composite.is_empty():
            del self._properties[aggregate]
        else:
            self._properties[aggregate] = composite
        return [tag, aggregate]

    def _set_bounds(self, tag: str, value: Any) -> list[str]:
        if isinstance(value, str) and not value.strip():
            return self._remove(tag)
        # all sides are coerced before any of them is stored
        coerced = {}
        for side, side_value in explode_bounds(tag, value).items():
            side_tag = f"{tag}-{side}"
            coerced[side_tag] = coerce_value(self.schema_tag(side_tag), side_value, self.property_kind(side_tag))
        changed: list[str] = []
        for side_tag, stored in coerced.items():
            changed += self._remove(side_tag) if stored is None else self._store(side_tag, stored)
        return self._with_aggregate(changed, tag)

    def _get_bounds(self, tag: str) -> Bounds | dict[str, Any] | None:
        values = {side_tag: self._properties.get(side_tag) for side_tag in side_tags(tag)}
        if all(value is None for value in values.values()):
            return None
        if all(value is None or isinstance(value, SizeUnit) for value in values.values()):
            return Bounds(*(value or SizeUnit() for value in values.values()))
        prefix = len(tag) + 1
        return {side_tag[prefix:]: value for side_tag, value in values.items() if value is not None}

    def _set_list(self, tag: str, value: Any, converter) -> list[str]:
        if isinstance(value, str) and not value.strip():
            return self._remove(tag)
        items = converter(tag, value)
        if not items:
            return self._remove(tag)
        return self._store(tag, items)

    def _set_filter(self, tag: str, value: Any) -> list[str]:
        if isinstance(value, str) and not value.strip():
            return self._remove(tag)
        filter_value = FilterProperty.from_value(tag, value)
        if filter_value.is_empty():
            return self._remove(tag)
        return self._store(tag, filter_value)

    def _set_transition(self, value: Any) -> list[str]:
        if isinstance(value, str) and not value.strip():
            return self._remove(tags.TRANSITION)
        entries = transition_entries(tags.TRANSITION, value)
        transitions = dict(self._properties.get(tags.TRANSITION) or {})
        for key, animation in entries.items():
            if animation is None:
                transitions.pop(key, None)
            else:
                transitions[key] = animation
        if not transitions:
            return self._remove(tags.TRANSITION)
        return self._store(tags.TRANSITION, transitions)

    # ========================================================================
    # Typed accessors
    # ========================================================================

    def composite(self, tag: str) -> CompositeProperty | None:
        return self._properties.get(tag)

    def transitions(self) -> dict[str, Animation]:
        return dict(self._properties.get(tags.TRANSITION) or {})

    def set_transition(self, tag: str, animation: Animation | None) -> None:
        """Add, replace or (with None) delete one transition entry."""
        self.set(tags.TRANSITION, {tag: animation})

    def animations(self) -> list[KeyframeAnimation]:
        return list(self._properties.get(tags.ANIMATION) or [])

    def shadows(self, tag: str = tags.SHADOW) -> list[ShadowProperty]:
        return list(self._properties.get(tag) or [])

    def background_layers(self) -> list[BackgroundElement]:
        return list(self._properties.get(tags.BACKGROUND) or [])

    def cell_sizes(self, tag: str, session) -> list[SizeUnit]:
        result = []
        for item in self._properties.get(tag) or []:
            size = value_to_size(item, session, tag)
            if size is not None:
                result.append(size)
        return result

    # ========================================================================
    # CSS
    # ========================================================================

    def css_view_style(self, builder: CSSWriter, session) -> None:
        """Write the CSS declarations of every set property in a stable order."""
        visibility = enum_property(self, tags.VISIBILITY, session)
        if visibility == Visibility.INVISIBLE:
            builder.add("visibility", "hidden")
        elif visibility == Visibility.GONE:
            builder.add("display", "none")

        for aggregate in (tags.MARGIN, tags.PADDING):
            if self._get_bounds(aggregate) is not None:
                bounds_property(self, aggregate, session).css_value(aggregate, builder)

        border = self.composite(tags.BORDER)
        if border is not None:
            border.css_style(builder, session)
        radius = self.composite(tags.RADIUS)
        if radius is not None:
            radius.css_style(builder, session)
        outline = self.composite(tags.OUTLINE)
        if outline is not None:
            outline.css_style(builder, session)

        for tag in (tags.Z_INDEX, tags.ORDER):
            value = int_property(self, tag, session)
            if value is not None:
                builder.add(tag, str(value))

        opacity = float_property(self, tags.OPACITY, session)
        if opacity is not None and 0 <= opacity <= 1:
            builder.add(tags.OPACITY, opacity_css(opacity))

        for tag in (tags.COLUMN_COUNT, tags.TAB_SIZE):
            value = int_property(self, tag, session)
            if value is not None and value > 0:
                builder.add(tag, str(value))

        self._css_sizes(builder, session)
        self._css_colors(builder, session)

        clip = enum_css_value(self, tags.BACKGROUND_CLIP, session)
        if clip:
            builder.add(tags.BACKGROUND_CLIP, clip)
        background_color = color_property(self, tags.BACKGROUND_COLOR, session)
        background = background_css(self.background_layers(), background_color, session)
        if background:
            builder.add(tags.BACKGROUND, background)
        elif background_color is not None and background_color != 0:
            builder.add(tags.BACKGROUND_COLOR, background_color.css_string())

        font = string_property(self, tags.FONT_NAME, session)
        if font:
            builder.add("font-family", font)

        self._css_enums(builder, session)
        self._css_text_decoration(builder, session)

        user_select = bool_property(self, tags.USER_SELECT, session)
        if user_select is not None:
            value = "auto" if user_select else "none"
            builder.add("-webkit-user-select", value)
            builder.add("user-select", value)

        shadow = shadows_css(self.shadows(tags.SHADOW), session)
        if shadow:
            builder.add("box-shadow", shadow)
        text_shadow = shadows_css(self.shadows(tags.TEXT_SHADOW), session, text_form=True)
        if text_shadow:
            builder.add("text-shadow", text_shadow)

        separator = self.composite(tags.COLUMN_SEPARATOR)
        if separator is not None:
            separator.css_style(builder, session)

        avoid_break = bool_property(self, tags.AVOID_BREAK, session)
        if avoid_break is not None:
            builder.add("break-inside", "avoid" if avoid_break else "auto")

        self._css_flex(builder, session)
        self._css_grid(builder, session)
        self._css_transform(builder, session)

        for tag in (tags.FILTER, tags.BACKDROP_FILTER):
            filter_value = self._properties.get(tag)
            if filter_value is None:
                continue
            text = filter_value.css_value(session)
            if not text:
                continue
            if tag == tags.BACKDROP_FILTER:
                builder.add("-webkit-backdrop-filter", text)
            builder.add(tag, text)

        transitions = self.transitions()
        if transitions:
            builder.add(tags.TRANSITION, transition_css(transitions))

        animations = self.animations()
        if animations:
            builder.add(tags.ANIMATION, ", ".join(item.css_value() for item in animations))
            paused = bool_property(self, tags.ANIMATION_PAUSED, session)
            if paused is not None:
                builder.add("animation-play-state", "paused" if paused else "running")

        span_all = bool_property(self, tags.COLUMN_SPAN_ALL, session)
        if span_all is not None:
            builder.add("column-span", "all" if span_all else "none")

    def _css_sizes(self, builder: CSSWriter, session) -> None:
        for tag in (
            tags.WIDTH, tags.HEIGHT, tags.MIN_WIDTH, tags.MIN_HEIGHT, tags.MAX_WIDTH,
            tags.MAX_HEIGHT, tags.LEFT, tags.RIGHT, tags.TOP, tags.BOTTOM, tags.TEXT_SIZE,
            tags.TEXT_INDENT, tags.LETTER_SPACING, tags.WORD_SPACING, tags.LINE_HEIGHT,
            tags.TEXT_LINE_THICKNESS, tags.LIST_ROW_GAP, tags.LIST_COLUMN_GAP,
            tags.GRID_ROW_GAP, tags.GRID_COLUMN_GAP, tags.COLUMN_GAP, tags.COLUMN_WIDTH,
            tags.OUTLINE_OFFSET,
        ):
            size = size_property(self, tag, session)
            if size is not None and not size.is_auto():
                builder.add(SIZE_PROPERTIES[tag], size.css_string(""))

    def _css_colors(self, builder: CSSWriter, session) -> None:
        for tag, css_tag in (
            (tags.TEXT_COLOR, "color"),
            (tags.TEXT_LINE_COLOR, "text-decoration-color"),
            (tags.CARET_COLOR, tags.CARET_COLOR),
            (tags.ACCENT_COLOR, tags.ACCENT_COLOR),
        ):
            color = color_property(self, tag, session)
            if color is not None and color != 0:
                builder.add(css_tag, color.css_string())

    def _css_enums(self, builder: CSSWriter, session) -> None:
        writing_mode = enum_property(self, tags.WRITING_MODE, session)
        vertical_writing = writing_mode in (2, 3)
        for tag in (
            tags.OVERFLOW, tags.TEXT_ALIGN, tags.TEXT_TRANSFORM, tags.TEXT_WEIGHT,
            tags.TEXT_LINE_STYLE, tags.WRITING_MODE, tags.TEXT_DIRECTION,
            tags.VERTICAL_TEXT_ORIENTATION, tags.CELL_VERTICAL_ALIGN, tags.CELL_HORIZONTAL_ALIGN,
            tags.CELL_VERTICAL_SELF_ALIGN, tags.CELL_HORIZONTAL_SELF_ALIGN, tags.GRID_AUTO_FLOW,
            tags.CURSOR, tags.WHITE_SPACE, tags.WORD_BREAK, tags.TEXT_OVERFLOW, tags.TEXT_WRAP,
            tags.FLOAT, tags.RESIZE, tags.MIX_BLEND_MODE, tags.BACKGROUND_BLEND_MODE,
            tags.COLUMN_FILL,
        ):
            if tag == tags.VERTICAL_TEXT_ORIENTATION and not vertical_writing:
                continue
            value = enum_css_value(self, tag, session)
            if value:
                builder.add(ENUM_PROPERTIES[tag].css_tag, value)

        italic = bool_property(self, tags.ITALIC, session)
        if italic is not None:
            builder.add("font-style", "italic" if italic else "normal")
        small_caps = bool_property(self, tags.SMALL_CAPS, session)
        if small_caps is not None:
            builder.add("font-variant", "small-caps" if small_caps else "normal")

    def _css_text_decoration(self, builder: CSSWriter, session) -> None:
        flags = [
            (bool_property(self, tag, session), css)
            for tag, css in (
                (tags.STRIKETHROUGH, "line-through"),
                (tags.OVERLINE, "overline"),
                (tags.UNDERLINE, "underline"),
            )
        ]
        if all(flag is None for flag, _ in flags):
            return
        lines = [css for flag, css in flags if flag]
        builder.add("text-decoration", " ".join(lines) if lines else "none")

    def _css_flex(self, builder: CSSWriter, session) -> None:
        orientation_set = self._properties.get(tags.ORIENTATION) is not None
        orientation = enum_property(self, tags.ORIENTATION, session)
        wrap = enum_property(self, tags.LIST_WRAP, session)
        if orientation_set or wrap > 0:
            text = ENUM_PROPERTIES[tags.ORIENTATION].css_value(orientation)
            if wrap == ListWrap.ON:
                text += " wrap"
            elif wrap == ListWrap.REVERSE:
                text += " wrap-reverse"
            builder.add("flex-flow", text)

        rows = orientation in (Orientation.START_TO_END, Orientation.END_TO_START)
        horizontal_tag, vertical_tag = (
            ("justify-content", "align-items") if rows else ("align-items", "justify-content")
        )

        if self._properties.get(tags.HORIZONTAL_ALIGN) is not None:
            align = enum_property(self, tags.HORIZONTAL_ALIGN, session)
            reversed_start = (not rows and wrap == ListWrap.REVERSE) or orientation == Orientation.END_TO_START
            if align == HorizontalAlign.LEFT:
                builder.add(horizontal_tag, "flex-end" if reversed_start else "flex-start")
            elif align == HorizontalAlign.RIGHT:
                builder.add(horizontal_tag, "flex-start" if reversed_start else "flex-end")
            elif align == HorizontalAlign.CENTER:
                builder.add(horizontal_tag, "center")
            else:
                builder.add(horizontal_tag, "space-between" if rows else "stretch")

        if self._properties.get(tags.VERTICAL_ALIGN) is not None:
            align = enum_property(self, tags.VERTICAL_ALIGN, session)
            reversed_top = (rows and wrap == ListWrap.REVERSE) or orientation == Orientation.BOTTOM_UP
            if align == VerticalAlign.TOP:
                builder.add(vertical_tag, "flex-end" if reversed_top else "flex-start")
            elif align == VerticalAlign.BOTTOM:
                builder.add(vertical_tag, "flex-start" if reversed_top else "flex-end")
            elif align == VerticalAlign.CENTER:
                builder.add(vertical_tag, "center")
            else:
                builder.add(vertical_tag, "stretch" if rows else "space-between")

    def _css_grid(self, builder: CSSWriter, session) -> None:
        for tag, css_tag in ((tags.ROW, "grid-row"), (tags.COLUMN, "grid-column")):
            value = range_property(self, tag, session)
            if value is not None:
                builder.add(css_tag, f"{value.first + 1} / {value.last + 2}")

        for tag, css_tag in (
            (tags.CELL_WIDTH, "grid-template-columns"),
            (tags.CELL_HEIGHT, "grid-template-rows"),
        ):
            sizes = self.cell_sizes(tag, session)
            if not sizes:
                continue
            if len(sizes) == 1:
                builder.add(css_tag, f"repeat(auto-fill, {sizes[0].css_string('auto')})")
            elif all(size == sizes[0] for size in sizes):
                builder.add(css_tag, f"repeat({len(sizes)}, {sizes[0].css_string('auto')})")
            else:
                builder.add(css_tag, "".join(" " + size.css_string("auto") for size in sizes))

    def _css_transform(self, builder: CSSWriter, session) -> None:
        def origin(x_tag: str, y_tag: str, z_tag: str | None) -> str:
            x = size_property(self, x_tag, session)
            y = size_property(self, y_tag, session)
            z = size_property(self, z_tag, session) if z_tag else None
            if x is None and y is None and z is None:
                return ""
            return transform_origin_css(x or SizeUnit(), y or SizeUnit(), z or SizeUnit())

        perspective_origin = origin(tags.PERSPECTIVE_ORIGIN_X, tags.PERSPECTIVE_ORIGIN_Y, None)
        if perspective_origin:
            builder.add("perspective-origin", perspective_origin)

        backface = bool_property(self, tags.BACKFACE_VISIBLE, session)
        if backface is not None:
            builder.add("backface-visibility", "visible" if backface else "hidden")

        transform_origin = origin(tags.TRANSFORM_ORIGIN_X, tags.TRANSFORM_ORIGIN_Y, tags.TRANSFORM_ORIGIN_Z)
        if transform_origin:
            builder.add("transform-origin", transform_origin)

        transform = self.composite(tags.TRANSFORM)
        if transform is not None:
            text = transform.css_value(session)
            if text:
                builder.add(tags.TRANSFORM, text)


def opacity_css(value: float) -> str:
    """Opacity with at most three decimals."""
    return format_float(round(value, 3))
