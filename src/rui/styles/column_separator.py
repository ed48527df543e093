"""Line drawn between the columns of a multi-column view."""

from typing import Any

from ..properties import ENUM_PROPERTIES, color_property, enum_property, size_property, tags
from ..values import Color, SizeUnit
from ..values.size import SizeType
from .border import ViewBorder
from .composite import CompositeProperty
from .css import CSSWriter


class ColumnSeparatorProperty(CompositeProperty):
    prefix = "column-separator-"
    supported_tags = frozenset({"style", "width", "color"})
    schema_tags = {"style": tags.BORDER_STYLE, "width": tags.BORDER_WIDTH, "color": tags.BORDER_COLOR}

    @classmethod
    def from_value(cls, tag: str, value: Any) -> "ColumnSeparatorProperty":
        if isinstance(value, ViewBorder):
            result = cls()
            result._properties.update(style=value.style, width=value.width, color=value.color)
            return result
        return super().from_value(tag, value)

    def view_border(self, session) -> ViewBorder:
        return ViewBorder(
            style=enum_property(self, "style", session),
            width=size_property(self, "width", session) or SizeUnit(),
            color=color_property(self, "color", session) or Color(0),
        )

    def css_value(self, session) -> str:
        border = self.view_border(session)
        parts = []
        width = border.width
        if width.type not in (SizeType.AUTO, SizeType.FRACTION) and (
            width.value > 0 or width.type == SizeType.FUNCTION
        ):
            parts.append(width.css_string(""))
        styles = ENUM_PROPERTIES[tags.BORDER_STYLE].css_values
        if 0 < border.style < len(styles):
            parts.append(styles[border.style])
        if border.color != 0:
            parts.append(border.color.css_string())
        return " ".join(parts)

    def css_style(self, builder: CSSWriter, session) -> None:
        builder.add("column-rule", self.css_value(session))
