"""2D/3D transform of a view and the origin helpers used with it."""

from ..properties import angle_property, float_property, size_property, tags
from ..values import SizeUnit, format_float
from ..values.size import SizeType
from .composite import CompositeProperty

TRANSFORM_TAGS = frozenset(
    {
        tags.PERSPECTIVE,
        tags.TRANSLATE_X,
        tags.TRANSLATE_Y,
        tags.TRANSLATE_Z,
        tags.SCALE_X,
        tags.SCALE_Y,
        tags.SCALE_Z,
        tags.ROTATE,
        tags.ROTATE_X,
        tags.ROTATE_Y,
        tags.ROTATE_Z,
        tags.SKEW_X,
        tags.SKEW_Y,
    }
)


def _non_zero(size: SizeUnit | None) -> bool:
    return size is not None and not size.is_auto() and (size.type == SizeType.FUNCTION or size.value != 0)


class TransformProperty(CompositeProperty):
    """Perspective, skew, translate, scale and rotate of a view."""

    prefix = "push-"
    supported_tags = TRANSFORM_TAGS
    object_tag = "_"

    def _float_text(self, tag: str, session, default: float) -> tuple[str, bool]:
        value = float_property(self, tag, session)
        if value is None:
            return format_float(default), False
        return format_float(value), True

    def css_value(self, session) -> str:
        """Transform function chain: perspective, skew, translate, scale, rotate."""
        parts = []

        perspective = size_property(self, tags.PERSPECTIVE, session)
        if _non_zero(perspective):
            parts.append(f"perspective({perspective.css_string('0')})")

        skew_x = angle_property(self, tags.SKEW_X, session)
        skew_y = angle_property(self, tags.SKEW_Y, session)
        if skew_x is not None or skew_y is not None:
            x_text = skew_x.css_string() if skew_x is not None else "0rad"
            y_text = skew_y.css_string() if skew_y is not None else "0rad"
            parts.append(f"skew({x_text},{y_text})")

        x = size_property(self, tags.TRANSLATE_X, session) or SizeUnit()
        y = size_property(self, tags.TRANSLATE_Y, session) or SizeUnit()
        z = size_property(self, tags.TRANSLATE_Z, session) or SizeUnit()
        if _non_zero(z):
            parts.append(
                f"translate3d({x.css_string('0px')},{y.css_string('0px')},{z.css_string('0px')})"
            )
        elif _non_zero(x) or _non_zero(y):
            parts.append(f"translate({x.css_string('0px')},{y.css_string('0px')})")

        scale_x, has_x = self._float_text(tags.SCALE_X, session, 1)
        scale_y, has_y = self._float_text(tags.SCALE_Y, session, 1)
        scale_z, has_z = self._float_text(tags.SCALE_Z, session, 1)
        if has_z:
            parts.append(f"scale3d({scale_x},{scale_y},{scale_z})")
        elif has_x or has_y:
            parts.append(f"scale({scale_x},{scale_y})")

        angle = angle_property(self, tags.ROTATE, session)
        if angle is not None:
            rotate_x, has_x = self._float_text(tags.ROTATE_X, session, 1)
            rotate_y, has_y = self._float_text(tags.ROTATE_Y, session, 1)
            rotate_z, has_z = self._float_text(tags.ROTATE_Z, session, 1)
            if has_x or has_y or has_z:
                parts.append(f"rotate3d({rotate_x},{rotate_y},{rotate_z},{angle.css_string()})")
            else:
                parts.append(f"rotate({angle.css_string()})")

        return " ".join(parts)


def _origin_part(size: SizeUnit, keywords: tuple[str, str, str]) -> str:
    if size.type == SizeType.PERCENT:
        for percent, keyword in zip((0, 50, 100), keywords):
            if size.value == percent:
                return keyword
    return size.css_string("center")


def transform_origin_css(x: SizeUnit, y: SizeUnit, z: SizeUnit) -> str:
    """
    ``transform-origin``/``perspective-origin`` value.

    Percentages 0, 50 and 100 become keywords. Returns "" when every
    coordinate is auto.
    """
    if x.is_auto() and y.is_auto() and z.is_auto():
        return ""
    text = _origin_part(x, ("left", "center", "right")) + " " + _origin_part(y, ("top", "center", "bottom"))
    if _non_zero(z):
        text += " " + z.css_string("0")
    return text
