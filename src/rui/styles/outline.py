"""Outline property: style, width and color of the line drawn outside the border."""

from dataclasses import dataclass, field
from typing import Any

from ..core.errors import IncompatibleTypeError
from ..properties import ENUM_PROPERTIES, color_property, enum_property, size_property, tags
from ..values import Color, SizeUnit
from ..values.size import SizeType
from .border import ViewBorder
from .composite import CompositeProperty
from .css import CSSValueBuilder, CSSWriter


@dataclass(frozen=True)
class ViewOutline:
    style: int = 0
    width: SizeUnit = field(default_factory=SizeUnit)
    color: Color = Color(0)

    def css_value(self, builder: CSSWriter) -> None:
        values = ENUM_PROPERTIES[tags.BORDER_STYLE].css_values
        width = self.width
        if (
            0 < self.style < len(values)
            and self.color.alpha > 0
            and width.type not in (SizeType.AUTO, SizeType.FRACTION, SizeType.PERCENT)
            and width.value > 0
        ):
            builder.add_values(
                tags.OUTLINE, " ", width.css_string("0"), values[self.style], self.color.css_string()
            )

    def css_string(self) -> str:
        builder = CSSValueBuilder()
        self.css_value(builder)
        return builder.finish()


class OutlineProperty(CompositeProperty):
    prefix = "outline-"
    supported_tags = frozenset({"style", "width", "color"})
    schema_tags = {"style": tags.BORDER_STYLE, "width": tags.OUTLINE_WIDTH, "color": tags.OUTLINE_COLOR}

    @classmethod
    def from_value(cls, tag: str, value: Any) -> "OutlineProperty":
        if isinstance(value, (ViewOutline, ViewBorder)):
            result = cls()
            result._properties.update(style=value.style, width=value.width, color=value.color)
            return result
        return super().from_value(tag, value)

    def _set(self, tag: str, value: Any) -> list[str]:
        self._check_tag(tag)
        if tag == "width" and isinstance(value, SizeUnit) and value.type in (
            SizeType.FRACTION,
            SizeType.PERCENT,
        ):
            raise IncompatibleTypeError(f'invalid outline width: "{value}"', tag=tag, value=str(value))
        return self._set_plain(tag, value)

    def view_outline(self, session) -> ViewOutline:
        return ViewOutline(
            style=enum_property(self, "style", session),
            width=size_property(self, "width", session) or SizeUnit(),
            color=color_property(self, "color", session) or Color(0),
        )

    def css_style(self, builder: CSSWriter, session) -> None:
        self.view_outline(session).css_value(builder)
