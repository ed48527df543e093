"""Corner radius property: shared x/y plus per-corner and per-axis overrides."""

from dataclasses import dataclass, field
from typing import Any

from ..core.errors import IncompatibleTypeError
from ..data import DataObject
from ..properties import is_constant_name, size_property, tags
from ..values import SizeUnit
from ..values.size import SizeType
from .composite import CompositeProperty
from .css import CSSValueBuilder, CSSWriter

CORNERS = (tags.TOP_LEFT, tags.TOP_RIGHT, tags.BOTTOM_LEFT, tags.BOTTOM_RIGHT)
AXES = (tags.X, tags.Y)


@dataclass(frozen=True)
class BoxRadius:
    """Resolved radii of the four corners."""

    top_left_x: SizeUnit = field(default_factory=SizeUnit)
    top_left_y: SizeUnit = field(default_factory=SizeUnit)
    top_right_x: SizeUnit = field(default_factory=SizeUnit)
    top_right_y: SizeUnit = field(default_factory=SizeUnit)
    bottom_left_x: SizeUnit = field(default_factory=SizeUnit)
    bottom_left_y: SizeUnit = field(default_factory=SizeUnit)
    bottom_right_x: SizeUnit = field(default_factory=SizeUnit)
    bottom_right_y: SizeUnit = field(default_factory=SizeUnit)

    def all_angles_equal(self) -> bool:
        return (
            self.top_left_x == self.top_right_x == self.bottom_left_x == self.bottom_right_x
            and self.top_left_y == self.top_right_y == self.bottom_left_y == self.bottom_right_y
        )

    def is_zero(self) -> bool:
        return all(
            size.is_auto() or (size.type != SizeType.FUNCTION and size.value == 0)
            for size in vars(self).values()
        )

    def css_value(self, builder: CSSWriter) -> None:
        if self.is_zero():
            return

        def css(size: SizeUnit) -> str:
            return size.css_string("0")

        if self.all_angles_equal():
            text = css(self.top_left_x)
            if self.top_left_x != self.top_left_y:
                text += " / " + css(self.top_left_y)
        else:
            xs = (self.top_left_x, self.top_right_x, self.bottom_right_x, self.bottom_left_x)
            ys = (self.top_left_y, self.top_right_y, self.bottom_right_y, self.bottom_left_y)
            text = " ".join(css(size) for size in xs)
            if xs != ys:
                text += " / " + " ".join(css(size) for size in ys)

        builder.add("border-radius", text)

    def css_string(self) -> str:
        builder = CSSValueBuilder()
        self.css_value(builder)
        return builder.finish()


class RadiusProperty(CompositeProperty):
    """
    Radius leaves: ``x``, ``y``, ``<corner>`` and ``<corner>-x``/``-y``.

    A corner-axis value beats the corner value, which beats the shared
    axis value.
    """

    prefix = "radius-"
    supported_tags = frozenset(
        list(AXES) + list(CORNERS) + [f"{corner}-{axis}" for corner in CORNERS for axis in AXES]
    )
    schema_tags = {tag: tags.RADIUS for tag in supported_tags}

    @classmethod
    def from_value(cls, tag: str, value: Any) -> "RadiusProperty":
        if isinstance(value, BoxRadius):
            return cls._from_box(value)
        if isinstance(value, SizeUnit) or (
            isinstance(value, (int, float)) and not isinstance(value, bool)
        ):
            return cls({tags.X: value, tags.Y: value})
        if isinstance(value, str):
            text = value.strip()
            if "/" in text:
                parts = text.split("/")
                if len(parts) != 2:
                    raise IncompatibleTypeError(f'invalid radius value: "{text}"', tag=tag, value=text)
                result = cls()
                result._set(tags.X, parts[0])
                result._set(tags.Y, parts[1])
                return result
            if is_constant_name(text) or not text.startswith("_"):
                result = cls()
                result._set(tags.X, text)
                result._set(tags.Y, text)
                return result
        if isinstance(value, DataObject):
            result = cls()
            for node in value.nodes:
                result._set(result.normalize(node.tag), node.text)
            return result
        return super().from_value(tag, value)

    @classmethod
    def _from_box(cls, box: BoxRadius) -> "RadiusProperty":
        result = cls()
        if box.all_angles_equal():
            result._properties[tags.X] = box.top_left_x
            result._properties[tags.Y] = box.top_left_y
            return result
        for corner in CORNERS:
            name = corner.replace("-", "_")
            x, y = getattr(box, name + "_x"), getattr(box, name + "_y")
            if x == y:
                result._properties[corner] = x
            else:
                result._properties[corner + "-x"] = x
                result._properties[corner + "-y"] = y
        return result

    def _set(self, tag: str, value: Any) -> list[str]:
        self._check_tag(tag)
        if tag in CORNERS and isinstance(value, str) and "/" in value:
            parts = value.split("/")
            if len(parts) != 2:
                raise IncompatibleTypeError(f'invalid radius value: "{value}"', tag=tag, value=value)
            return self._set(tag + "-x", parts[0]) + self._set(tag + "-y", parts[1])

        changed = self._set_plain(tag, value)
        if tag in AXES:
            for corner in CORNERS:
                changed += super()._remove(f"{corner}-{tag}")
                shared = self._properties.get(corner)
                if shared is not None:
                    # keep the corner's other axis explicit
                    other = f"{corner}-{tags.Y if tag == tags.X else tags.X}"
                    self._properties.setdefault(other, shared)
                    changed += super()._remove(corner)
        elif tag in CORNERS:
            changed += super()._remove(tag + "-x") + super()._remove(tag + "-y")
        return changed

    def _remove(self, tag: str) -> list[str]:
        if tag in CORNERS:
            return (
                super()._remove(tag) + super()._remove(tag + "-x") + super()._remove(tag + "-y")
            )
        if tag in AXES and tag not in self._properties:
            changed: list[str] = []
            for corner in CORNERS:
                changed += super()._remove(f"{corner}-{tag}")
            return changed
        return super()._remove(tag)

    def _get(self, tag: str) -> Any:
        value = self._properties.get(tag)
        if value is not None:
            return value
        if tag.endswith(("-x", "-y")) and tag[:-2] in CORNERS:
            corner, axis = tag[:-2], tag[-1]
            value = self._properties.get(corner)
            if value is None:
                value = self._properties.get(axis)
        return value

    def box_radius(self, session) -> BoxRadius:
        def corner(name: str) -> tuple[SizeUnit, SizeUnit]:
            x = size_property(self, name + "-x", session) or SizeUnit()
            y = size_property(self, name + "-y", session) or SizeUnit()
            return x, y

        tlx, tly = corner(tags.TOP_LEFT)
        trx, try_ = corner(tags.TOP_RIGHT)
        blx, bly = corner(tags.BOTTOM_LEFT)
        brx, bry = corner(tags.BOTTOM_RIGHT)
        return BoxRadius(tlx, tly, trx, try_, blx, bly, brx, bry)

    def css_style(self, builder: CSSWriter, session) -> None:
        self.box_radius(session).css_value(builder)
