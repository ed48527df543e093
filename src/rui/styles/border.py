"""
Border property.

Leaf tags are per-side style/width/color plus the shared ``style``,
``width`` and ``color``. A side leaf overrides the shared value; setting a
shared value clears the side overrides of that kind.
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.errors import IncompatibleTypeError
from ..data import DataObject
from ..properties import ENUM_PROPERTIES, color_property, enum_property, size_property, tags
from ..values import Color, SizeUnit
from .composite import CompositeProperty, split_values
from .css import CSSValueBuilder, CSSWriter

SIDES = (tags.TOP, tags.RIGHT, tags.BOTTOM, tags.LEFT)
KINDS = ("style", "width", "color")

_LINE_CSS = ENUM_PROPERTIES[tags.BORDER_STYLE].css_values


@dataclass(frozen=True)
class ViewBorder:
    """Resolved border of one side."""

    style: int = 0
    width: SizeUnit = field(default_factory=SizeUnit)
    color: Color = Color(0)


@dataclass(frozen=True)
class ViewBorders:
    top: ViewBorder = field(default_factory=ViewBorder)
    right: ViewBorder = field(default_factory=ViewBorder)
    bottom: ViewBorder = field(default_factory=ViewBorder)
    left: ViewBorder = field(default_factory=ViewBorder)

    def sides(self) -> tuple[ViewBorder, ViewBorder, ViewBorder, ViewBorder]:
        return self.top, self.right, self.bottom, self.left

    def all_the_same(self) -> bool:
        return self.top == self.right == self.bottom == self.left


def _build_aliases() -> dict[str, str]:
    aliases = {
        tags.BORDER_STYLE: "style",
        tags.BORDER_WIDTH: "width",
        tags.BORDER_COLOR: "color",
    }
    for side in SIDES:
        aliases["border-" + side] = side
        aliases["cell-border-" + side] = side
        for kind in KINDS:
            aliases[f"border-{side}-{kind}"] = f"{side}-{kind}"
            aliases[f"cell-border-{side}-{kind}"] = f"{side}-{kind}"
            aliases[f"{kind}-{side}"] = f"{side}-{kind}"
    for kind in KINDS:
        aliases[f"cell-border-{kind}"] = kind
    return aliases


class BorderProperty(CompositeProperty):
    """Border of a view: up to twelve per-side leaves over three shared values."""

    aliases = _build_aliases()
    supported_tags = frozenset(
        list(KINDS) + list(SIDES) + [f"{side}-{kind}" for side in SIDES for kind in KINDS]
    )
    schema_tags = {
        "style": tags.BORDER_STYLE,
        "width": tags.BORDER_WIDTH,
        "color": tags.BORDER_COLOR,
        **{f"{side}-style": tags.BORDER_STYLE for side in SIDES},
        **{f"{side}-width": tags.BORDER_WIDTH for side in SIDES},
        **{f"{side}-color": tags.BORDER_COLOR for side in SIDES},
    }

    @classmethod
    def from_value(cls, tag: str, value: Any) -> "BorderProperty":
        if isinstance(value, ViewBorder):
            result = cls()
            result._properties.update(style=value.style, width=value.width, color=value.color)
            return result
        if isinstance(value, ViewBorders):
            return cls._from_view_borders(value)
        if isinstance(value, DataObject):
            result = cls()
            result._set_object(value)
            return result
        return super().from_value(tag, value)

    @classmethod
    def _from_view_borders(cls, borders: ViewBorders) -> "BorderProperty":
        result = cls()
        for kind in KINDS:
            values = [getattr(side, kind) for side in borders.sides()]
            if all(value == values[0] for value in values):
                result._properties[kind] = values[0]
            else:
                for side, value in zip(SIDES, values):
                    result._properties[f"{side}-{kind}"] = value
        return result

    def _set_object(self, obj: DataObject) -> None:
        for side in SIDES:
            node = obj.property_by_tag(side)
            if node is not None:
                self._set(side, node.value)

        for kind in KINDS:
            text = obj.property_value(kind)
            if text is None:
                continue
            values = split_values(text)
            if len(values) == 1:
                self._set(kind, values[0])
            elif len(values) == 4:
                for side, value in zip(SIDES, values):
                    self._set(f"{side}-{kind}", value)
            else:
                raise IncompatibleTypeError(
                    f'invalid "{kind}" value of border: "{text}"', tag=kind, value=text
                )

    def _set(self, tag: str, value: Any) -> list[str]:
        self._check_tag(tag)
        if tag in SIDES:
            return self._set_side(tag, value)

        changed = self._set_plain(tag, value)
        if tag in KINDS:
            for side in SIDES:
                changed += super()._remove(f"{side}-{tag}")
        return changed

    def _set_side(self, side: str, value: Any) -> list[str]:
        if isinstance(value, ViewBorder):
            value = {"style": value.style, "width": value.width, "color": value.color}
        elif isinstance(value, DataObject):
            value = value.to_params()
        if not isinstance(value, dict):
            raise IncompatibleTypeError(
                f'invalid value type of "{side}" border: {type(value).__name__}',
                tag=side,
                value=repr(value),
            )
        changed: list[str] = []
        for kind, item in value.items():
            if kind in KINDS:
                changed += self._set_plain(f"{side}-{kind}", item)
        return changed

    def _remove(self, tag: str) -> list[str]:
        if tag in SIDES:
            changed: list[str] = []
            for kind in KINDS:
                changed += super()._remove(f"{tag}-{kind}")
            return changed
        changed = super()._remove(tag)
        if tag in KINDS:
            for side in SIDES:
                changed += super()._remove(f"{side}-{tag}")
        return changed

    def _get(self, tag: str) -> Any:
        value = self._properties.get(tag)
        if value is not None:
            return value
        if tag in SIDES:
            return self.view_border(tag, None)
        if "-" in tag:
            side, kind = tag.split("-", 1)
            if side in SIDES:
                return self._properties.get(kind)
        return None

    def view_border(self, side: str, session) -> ViewBorder:
        return ViewBorder(
            style=enum_property(self, f"{side}-style", session),
            width=size_property(self, f"{side}-width", session) or SizeUnit(),
            color=color_property(self, f"{side}-color", session) or Color(0),
        )

    def view_borders(self, session) -> ViewBorders:
        return ViewBorders(*(self.view_border(side, session) for side in SIDES))

    # ========================================================================
    # CSS
    # ========================================================================

    def css_style(self, builder: CSSWriter, session) -> None:
        borders = self.view_borders(session)
        top = borders.top
        if borders.all_the_same():
            if top.style > 0:
                builder.add_values(
                    tags.BORDER, " ", top.width.css_string("0"), _LINE_CSS[top.style], top.color.css_string()
                )
            return

        self.css_line_style(builder, borders)
        self.css_width(builder, borders)
        self.css_color(builder, borders)

    @staticmethod
    def css_line_style(builder: CSSWriter, borders: ViewBorders) -> None:
        styles = [_LINE_CSS[side.style] for side in borders.sides()]
        if len(set(styles)) == 1:
            builder.add(tags.BORDER_STYLE, styles[0])
        else:
            builder.add_values(tags.BORDER_STYLE, " ", *styles)

    @staticmethod
    def css_width(builder: CSSWriter, borders: ViewBorders) -> None:
        widths = [side.width for side in borders.sides()]
        if all(width == widths[0] for width in widths):
            if not widths[0].is_auto():
                builder.add(tags.BORDER_WIDTH, widths[0].css_string("0"))
        else:
            builder.add_values(tags.BORDER_WIDTH, " ", *(width.css_string("0") for width in widths))

    @staticmethod
    def css_color(builder: CSSWriter, borders: ViewBorders) -> None:
        colors = [side.color for side in borders.sides()]
        if len(set(colors)) == 1:
            if colors[0] != 0:
                builder.add(tags.BORDER_COLOR, colors[0].css_string())
        else:
            builder.add_values(tags.BORDER_COLOR, " ", *(color.css_string() for color in colors))

    def css_style_value(self, session) -> str:
        builder = CSSValueBuilder()
        self.css_line_style(builder, self.view_borders(session))
        return builder.finish()

    def css_width_value(self, session) -> str:
        builder = CSSValueBuilder()
        self.css_width(builder, self.view_borders(session))
        return builder.finish()

    def css_color_value(self, session) -> str:
        builder = CSSValueBuilder()
        self.css_color(builder, self.view_borders(session))
        return builder.finish()
