"""Box, text and drop shadows."""

from typing import Any

from ..core.errors import IncompatibleTypeError
from ..data import DataObject, parse_data
from ..properties import bool_property, color_property, size_property, tags
from ..values import Color, SizeUnit
from .composite import CompositeProperty


def _is_zero(size: SizeUnit) -> bool:
    return size.is_auto() or size.value == 0


class ShadowProperty(CompositeProperty):
    """One shadow: offsets, blur, spread, color and the inset flag."""

    object_tag = "_"
    supported_tags = frozenset(
        {tags.COLOR, tags.INSET, tags.X_OFFSET, tags.Y_OFFSET, tags.BLUR_RADIUS, tags.SPREAD_RADIUS}
    )

    def _sizes(self, session) -> tuple[SizeUnit, SizeUnit, SizeUnit, SizeUnit]:
        return tuple(  # type: ignore[return-value]
            size_property(self, tag, session) or SizeUnit()
            for tag in (tags.X_OFFSET, tags.Y_OFFSET, tags.BLUR_RADIUS, tags.SPREAD_RADIUS)
        )

    def visible(self, session) -> bool:
        color = color_property(self, tags.COLOR, session) or Color(0)
        return color.alpha > 0 and not all(_is_zero(size) for size in self._sizes(session))

    def css_value(self, session) -> str:
        """``[inset ]x y blur spread color``, or "" for an invisible shadow."""
        if not self.visible(session):
            return ""
        x, y, blur, spread = self._sizes(session)
        color = color_property(self, tags.COLOR, session) or Color(0)
        text = " ".join(
            (x.css_string("0"), y.css_string("0"), blur.css_string("0"), spread.css_string("0"), color.css_string())
        )
        if bool_property(self, tags.INSET, session):
            text = "inset " + text
        return text

    def css_text_value(self, session) -> str:
        """``x y blur color``: the text-shadow and drop-shadow form, spread ignored."""
        color = color_property(self, tags.COLOR, session) or Color(0)
        x, y, blur, _ = self._sizes(session)
        if color.alpha == 0 or (_is_zero(x) and _is_zero(y) and _is_zero(blur)):
            return ""
        return " ".join((x.css_string("0"), y.css_string("0"), blur.css_string("0"), color.css_string()))


def new_shadow(
    x_offset: Any = None,
    y_offset: Any = None,
    blur: Any = None,
    spread: Any = None,
    color: Any = None,
    inset: bool = False,
) -> ShadowProperty:
    """Build a shadow from its parts; None parts stay unset."""
    shadow = ShadowProperty()
    shadow.set_params(
        {
            tags.X_OFFSET: x_offset,
            tags.Y_OFFSET: y_offset,
            tags.BLUR_RADIUS: blur,
            tags.SPREAD_RADIUS: spread,
            tags.COLOR: color,
            tags.INSET: inset or None,
        }
    )
    return shadow


def shadow_list(tag: str, value: Any) -> list[ShadowProperty]:
    """
    Coerce a shadow property value to a list of shadows.

    Accepts a ShadowProperty, a DataObject, a list of either, or .rui text
    holding one object or an array of objects.

    Raises:
        IncompatibleTypeError: If an item cannot describe a shadow
    """
    if isinstance(value, ShadowProperty):
        return [value.clone()]  # type: ignore[list-item]
    if isinstance(value, DataObject):
        return [ShadowProperty(value)]
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            wrapper = parse_data(f"_{{items={text}}}")
            node = wrapper.property_by_tag("items")
            return shadow_list(tag, node.array if node is not None else [])
        return [ShadowProperty(parse_data(text))]
    if isinstance(value, (list, tuple)):
        result: list[ShadowProperty] = []
        for item in value:
            result.extend(shadow_list(tag, item))
        return result
    raise IncompatibleTypeError(
        f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
    )


def shadows_css(shadows: list[ShadowProperty], session, text_form: bool = False) -> str:
    """Comma separated CSS of the visible shadows."""
    parts = [
        shadow.css_text_value(session) if text_form else shadow.css_value(session) for shadow in shadows
    ]
    return ", ".join(part for part in parts if part)
