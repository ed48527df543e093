"""Graphic filter applied to a view (``filter``) or to what is behind it (``backdrop-filter``)."""

from typing import Any

from ..properties import angle_property, float_property, tags
from ..values import format_float
from .composite import CompositeProperty
from .shadow import ShadowProperty, shadow_list

# Filter functions taking a percentage, in output order
_PERCENT_FUNCTIONS = (
    tags.BRIGHTNESS,
    tags.CONTRAST,
    tags.SATURATE,
    tags.GRAYSCALE,
    tags.INVERT,
    tags.OPACITY,
    tags.SEPIA,
)


class FilterProperty(CompositeProperty):
    supported_tags = frozenset(
        {
            tags.BLUR,
            tags.BRIGHTNESS,
            tags.CONTRAST,
            tags.SATURATE,
            tags.GRAYSCALE,
            tags.INVERT,
            tags.OPACITY,
            tags.SEPIA,
            tags.HUE_ROTATE,
            tags.DROP_SHADOW,
        }
    )
    # blur is a plain pixel count here and opacity a 0..100 percentage
    schema_tags = {tags.BLUR: tags.BRIGHTNESS, tags.OPACITY: tags.GRAYSCALE}
    object_tag = "filter"

    def _set(self, tag: str, value: Any) -> list[str]:
        self._check_tag(tag)
        if tag == tags.DROP_SHADOW:
            shadows = shadow_list(tag, value)
            if not shadows:
                return self._remove(tag)
            return self._store(tag, shadows)
        return self._set_plain(tag, value)

    def drop_shadows(self) -> list[ShadowProperty]:
        return list(self._properties.get(tags.DROP_SHADOW, []))

    def value_text(self, tag: str) -> str:
        if tag == tags.DROP_SHADOW:
            return ", ".join(str(shadow) for shadow in self.drop_shadows())
        return super().value_text(tag)

    def css_value(self, session) -> str:
        """Space separated filter function list."""
        parts = []
        blur = float_property(self, tags.BLUR, session)
        if blur:
            parts.append(f"blur({format_float(blur)}px)")

        for tag in _PERCENT_FUNCTIONS:
            value = float_property(self, tag, session)
            if value:
                parts.append(f"{tag}({format_float(value)}%)")

        hue = angle_property(self, tags.HUE_ROTATE, session)
        if hue is not None:
            parts.append(f"hue-rotate({hue.css_string()})")

        for shadow in self.drop_shadows():
            text = shadow.css_text_value(session)
            if text:
                parts.append(f"drop-shadow({text})")

        return " ".join(parts)
