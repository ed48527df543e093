"""
Background layers: image, linear, radial and conic gradients.

A view's ``background`` is an ordered list of layers, the first one drawn
on top. Each layer is a small property bag whose ``css_value`` returns the
layer text followed by a space so layers and the background color can be
concatenated.
"""

from dataclasses import dataclass
from typing import Any

from ..core.errors import IncompatibleTypeError, InvalidFormatError, report_error
from ..core.logging_config import get_logger
from ..data import DataObject, parse_data
from ..properties import (
    ENUM_PROPERTIES,
    angle_property,
    bool_property,
    enum_property,
    is_constant_name,
    size_property,
    string_property,
    tags,
    value_to_angle,
    value_to_color,
    value_to_size,
)
from ..properties.coerce import enum_index
from ..values import AngleUnit, Color, SizeUnit, parse_angle, parse_color, parse_size
from ..values.size import SizeType
from .composite import CompositeProperty

logger = get_logger(__name__)


def _stop_color_css(color: Color) -> str:
    if color.alpha == 255:
        return color.rgb_string()
    return color.css_string()


def _split_stop(text: str) -> tuple[str, str]:
    text = text.strip()
    index = text.find(" ")
    if index > 0:
        return text[:index], text[index + 1:].strip()
    return text, ""


# ============================================================================
# Gradient stops
# ============================================================================


@dataclass
class GradientPoint:
    """Color stop of a linear or radial gradient. ``pos`` is optional."""

    color: Color | str | None = None
    pos: SizeUnit | str | None = None

    def set_value(self, text: str) -> bool:
        """
        Parse ``<color> [<position>]``; constant references are kept as text.

        Returns:
            True if both parts are valid
        """
        color_text, pos_text = _split_stop(text)
        if not color_text:
            return False
        try:
            self.color = color_text if is_constant_name(color_text) else parse_color(color_text)
            if not pos_text:
                self.pos = None
            elif is_constant_name(pos_text):
                self.pos = pos_text
            else:
                self.pos = parse_size(pos_text)
        except InvalidFormatError as e:
            report_error(e, stop=text)
            return False
        return True

    def color_value(self, session) -> Color | None:
        return value_to_color(self.color, session, tags.COLOR)

    def css_value(self, session) -> str | None:
        color = self.color_value(session)
        if color is None:
            return None
        text = _stop_color_css(color)
        pos = value_to_size(self.pos, session, tags.POSITION)
        if pos is not None and not pos.is_auto():
            text += " " + (pos.css_string("") if pos.type == SizeType.FUNCTION else str(pos))
        return text

    def __str__(self) -> str:
        result = "black" if self.color is None else str(self.color)
        if self.pos is not None and not (isinstance(self.pos, SizeUnit) and self.pos.is_auto()):
            result += " " + str(self.pos)
        return result


@dataclass
class GradientAngle:
    """Color stop of a conic gradient. ``angle`` is optional."""

    color: Color | str | None = None
    angle: AngleUnit | str | None = None

    def set_value(self, text: str) -> bool:
        color_text, angle_text = _split_stop(text)
        if not color_text:
            return False
        try:
            self.color = color_text if is_constant_name(color_text) else parse_color(color_text)
            if not angle_text:
                self.angle = None
            elif is_constant_name(angle_text):
                self.angle = angle_text
            else:
                self.angle = parse_angle(angle_text)
        except InvalidFormatError as e:
            report_error(e, stop=text)
            return False
        return True

    def css_value(self, session) -> str | None:
        color = value_to_color(self.color, session, tags.COLOR)
        if color is None:
            return None
        text = _stop_color_css(color)
        angle = value_to_angle(self.angle, session, tags.ANGLE)
        if angle is not None:
            text += " " + angle.css_string()
        return text

    def __str__(self) -> str:
        result = "black" if self.color is None else str(self.color)
        if self.angle is not None:
            result += " " + str(self.angle)
        return result


def _to_stop(tag: str, item: Any, stop_type: type) -> GradientPoint | GradientAngle:
    if isinstance(item, stop_type):
        return item
    if isinstance(item, Color):
        return stop_type(item)
    if isinstance(item, DataObject):
        item = item.to_params()
    if isinstance(item, dict):
        stop = stop_type()
        color = item.get(tags.COLOR)
        if color is None:
            raise IncompatibleTypeError(f'gradient stop without color: {item!r}', tag=tag)
        stop.color = color if isinstance(color, Color) or is_constant_name(str(color)) else parse_color(str(color))
        if stop_type is GradientPoint:
            pos = item.get(tags.POSITION)
            if isinstance(pos, str):
                pos = pos if is_constant_name(pos) else parse_size(pos)
            stop.pos = pos
        else:
            angle = item.get(tags.ANGLE)
            if isinstance(angle, str):
                angle = angle if is_constant_name(angle) else parse_angle(angle)
            stop.angle = angle
        return stop
    if isinstance(item, str):
        stop = stop_type()
        if stop.set_value(item):
            return stop
        raise InvalidFormatError(f'invalid gradient stop: "{item}"', tag=tag, value=item)
    raise IncompatibleTypeError(
        f"invalid gradient stop type: {type(item).__name__}", tag=tag, value=repr(item)
    )


def parse_gradient_stops(tag: str, value: Any, stop_type: type = GradientPoint) -> list | str:
    """
    Coerce a gradient value to a list of at least two stops.

    Text is a comma separated list of ``<color> [<position>]``; a single
    ``@name`` reference is kept for resolution at serialization time.

    Raises:
        InvalidFormatError: If fewer than two stops are given or a stop is invalid
        IncompatibleTypeError: If the value has no gradient form
    """
    if isinstance(value, str):
        text = value.strip()
        if is_constant_name(text):
            return text
        items: list[Any] = [part for part in text.split(",")]
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise IncompatibleTypeError(
            f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
        )
    if len(items) < 2:
        raise InvalidFormatError("the gradient must contain at least 2 points", tag=tag, value=repr(value))
    return [_to_stop(tag, item, stop_type) for item in items]


# ============================================================================
# Layers
# ============================================================================


class BackgroundElement(CompositeProperty):
    """Base class of background layers; ``object_tag`` names the layer kind."""

    def css_value(self, session) -> str:
        raise NotImplementedError

    def _center_css(self, session) -> str:
        x = size_property(self, tags.CENTER_X, session) or SizeUnit()
        y = size_property(self, tags.CENTER_Y, session) or SizeUnit()
        if x.is_auto() and y.is_auto():
            return ""
        return f"at {x.css_string('50%')} {y.css_string('50%')}"


class BackgroundImage(BackgroundElement):
    object_tag = "image"
    aliases = {
        "source": tags.SOURCE,
        tags.FIT: tags.BACKGROUND_FIT,
        tags.HORIZONTAL_ALIGN: tags.IMAGE_HORIZONTAL_ALIGN,
        tags.VERTICAL_ALIGN: tags.IMAGE_VERTICAL_ALIGN,
    }
    supported_tags = frozenset(
        {
            tags.ATTACHMENT,
            tags.WIDTH,
            tags.HEIGHT,
            tags.REPEAT,
            tags.IMAGE_HORIZONTAL_ALIGN,
            tags.IMAGE_VERTICAL_ALIGN,
            tags.BACKGROUND_FIT,
            tags.SOURCE,
        }
    )

    def css_value(self, session) -> str:
        src = string_property(self, tags.SOURCE, session)
        if src and session is not None and is_constant_name(src):
            src = session.image_constant(src[1:])
        if not src:
            return ""

        parts = [f"url({src})"]
        attachment = enum_property(self, tags.ATTACHMENT, session)
        if attachment > 0:
            parts.append(ENUM_PROPERTIES[tags.ATTACHMENT].values[attachment])
        parts.append(ENUM_PROPERTIES[tags.IMAGE_HORIZONTAL_ALIGN].values[
            enum_property(self, tags.IMAGE_HORIZONTAL_ALIGN, session)
        ])
        parts.append(ENUM_PROPERTIES[tags.IMAGE_VERTICAL_ALIGN].values[
            enum_property(self, tags.IMAGE_VERTICAL_ALIGN, session)
        ])

        fit = enum_property(self, tags.BACKGROUND_FIT, session)
        if fit > 0:
            parts.append("/ " + ENUM_PROPERTIES[tags.BACKGROUND_FIT].values[fit])
        else:
            width = size_property(self, tags.WIDTH, session) or SizeUnit()
            height = size_property(self, tags.HEIGHT, session) or SizeUnit()
            if not (width.is_auto() and height.is_auto()):
                parts.append(f"/ {width.css_string()} {height.css_string()}")

        parts.append(ENUM_PROPERTIES[tags.REPEAT].values[enum_property(self, tags.REPEAT, session)])
        return " ".join(parts)


class BackgroundGradient(BackgroundElement):
    """Shared handling of the ``gradient`` stop list and the ``repeating`` flag."""

    stop_type: type = GradientPoint
    function = ""

    def _set(self, tag: str, value: Any) -> list[str]:
        self._check_tag(tag)
        if tag == tags.GRADIENT:
            if isinstance(value, str) and not value.strip():
                return self._remove(tag)
            return self._store(tag, parse_gradient_stops(tag, value, self.stop_type))
        return self._set_plain(tag, value)

    def value_text(self, tag: str) -> str:
        value = self._properties.get(tag)
        if tag == tags.GRADIENT and isinstance(value, list):
            return ", ".join(str(stop) for stop in value)
        return super().value_text(tag)

    def stops(self, session) -> list:
        value = self._properties.get(tags.GRADIENT)
        if isinstance(value, str):
            text = string_property(self, tags.GRADIENT, session)
            if not text:
                return []
            try:
                value = parse_gradient_stops(tags.GRADIENT, text, self.stop_type)
            except (InvalidFormatError, IncompatibleTypeError) as e:
                report_error(e)
                return []
        return list(value or [])

    def _stops_css(self, session) -> str | None:
        stops = self.stops(session)
        if len(stops) < 2:
            logger.error("gradient_too_short", layer=self.object_tag, count=len(stops))
            return None
        parts = []
        for stop in stops:
            text = stop.css_value(session)
            if text is None:
                logger.error("gradient_stop_invalid", layer=self.object_tag, stop=str(stop))
                return None
            parts.append(text)
        return ", ".join(parts)

    def _prefix(self, session) -> str:
        if bool_property(self, tags.REPEATING, session):
            return f"repeating-{self.function}("
        return f"{self.function}("


class BackgroundLinearGradient(BackgroundGradient):
    object_tag = "linear-gradient"
    function = "linear-gradient"
    supported_tags = frozenset({tags.DIRECTION, tags.REPEATING, tags.GRADIENT})

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == tags.DIRECTION:
            return self._set_direction(value)
        return super()._set(tag, value)

    def _set_direction(self, value: Any) -> list[str]:
        if isinstance(value, AngleUnit):
            return self._store(tags.DIRECTION, value)
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return self._remove(tags.DIRECTION)
            if is_constant_name(text):
                return self._store(tags.DIRECTION, text)
            try:
                return self._store(tags.DIRECTION, enum_index(tags.DIRECTION, text.replace(" ", "-")))
            except InvalidFormatError:
                return self._store(tags.DIRECTION, parse_angle(text))
        return self._set_plain(tags.DIRECTION, value)

    def _direction_css(self, session) -> str:
        value = self._properties.get(tags.DIRECTION)
        if value is None:
            return ""
        if isinstance(value, str):
            text = string_property(self, tags.DIRECTION, session)
            if not text:
                return ""
            try:
                value = enum_index(tags.DIRECTION, text.replace(" ", "-"))
            except InvalidFormatError:
                angle = value_to_angle(text, session, tags.DIRECTION)
                if angle is None:
                    return ""
                value = angle
        if isinstance(value, AngleUnit):
            return value.css_string()
        return ENUM_PROPERTIES[tags.DIRECTION].css_value(value)

    def css_value(self, session) -> str:
        stops = self._stops_css(session)
        if stops is None:
            return ""
        direction = self._direction_css(session)
        head = direction + ", " if direction else ""
        return f"{self._prefix(session)}{head}{stops}) "


class BackgroundRadialGradient(BackgroundGradient):
    object_tag = "radial-gradient"
    function = "radial-gradient"
    aliases = {
        tags.RADIUS: tags.RADIAL_GRADIENT_RADIUS,
        tags.SHAPE: tags.RADIAL_GRADIENT_SHAPE,
        "x-center": tags.CENTER_X,
        "y-center": tags.CENTER_Y,
    }
    supported_tags = frozenset(
        {
            tags.RADIAL_GRADIENT_RADIUS,
            tags.RADIAL_GRADIENT_SHAPE,
            tags.CENTER_X,
            tags.CENTER_Y,
            tags.REPEATING,
            tags.GRADIENT,
        }
    )

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == tags.RADIAL_GRADIENT_RADIUS:
            return self._set_radius(value)
        return super()._set(tag, value)

    def _set_radius(self, value: Any) -> list[str]:
        tag = tags.RADIAL_GRADIENT_RADIUS
        if isinstance(value, (list, tuple)):
            sizes = [v if isinstance(v, SizeUnit) else parse_size(str(v)) for v in value]
            if not sizes:
                return self._remove(tag)
            if len(sizes) == 1:
                return self._set_radius(sizes[0])
            return self._store(tag, tuple(sizes[:2]))
        if isinstance(value, SizeUnit):
            return self._remove(tag) if value.is_auto() else self._store(tag, value)
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return self._remove(tag)
            if is_constant_name(text):
                return self._store(tag, text)
            if "," in text:
                return self._set_radius(text.split(","))
            try:
                return self._store(tag, enum_index(tag, text))
            except InvalidFormatError:
                return self._set_radius(parse_size(text))
        return self._set_plain(tag, value)

    def _radius_css(self, session) -> tuple[str, bool]:
        """Radius text and whether it already names the shape."""
        value = self._properties.get(tags.RADIAL_GRADIENT_RADIUS)
        if isinstance(value, str):
            text = string_property(self, tags.RADIAL_GRADIENT_RADIUS, session)
            if not text:
                return "", False
            try:
                value = enum_index(tags.RADIAL_GRADIENT_RADIUS, text)
            except InvalidFormatError:
                value = value_to_size(text, session, tags.RADIAL_GRADIENT_RADIUS)
        if isinstance(value, int):
            return ENUM_PROPERTIES[tags.RADIAL_GRADIENT_RADIUS].css_value(value), False
        if isinstance(value, SizeUnit) and not value.is_auto():
            return f"ellipse {value.css_string('')} {value.css_string('')}", True
        if isinstance(value, tuple):
            return "ellipse " + " ".join(size.css_string("50%") for size in value), True
        return "", False

    def css_value(self, session) -> str:
        stops = self._stops_css(session)
        if stops is None:
            return ""
        shape = "circle" if enum_property(self, tags.RADIAL_GRADIENT_SHAPE, session) == 1 else "ellipse"
        radius, has_shape = self._radius_css(session)
        parts = []
        if radius:
            parts.append(radius if has_shape else f"{shape} {radius}")
        center = self._center_css(session)
        if center:
            if not radius:
                parts.append(shape)
            parts.append(center)
        if not parts:
            parts.append(shape)
        return f"{self._prefix(session)}{' '.join(parts)}, {stops}) "


class BackgroundConicGradient(BackgroundGradient):
    object_tag = "conic-gradient"
    function = "conic-gradient"
    stop_type = GradientAngle
    aliases = {"x-center": tags.CENTER_X, "y-center": tags.CENTER_Y}
    supported_tags = frozenset({tags.CENTER_X, tags.CENTER_Y, tags.REPEATING, tags.FROM, tags.GRADIENT})

    def css_value(self, session) -> str:
        stops = self._stops_css(session)
        if stops is None:
            return ""
        head = []
        angle = angle_property(self, tags.FROM, session)
        if angle is not None:
            head.append("from " + angle.css_string())
        center = self._center_css(session)
        if center:
            head.append(center)
        prefix = " ".join(head) + ", " if head else ""
        return f"{self._prefix(session)}{prefix}{stops}) "


BACKGROUND_TYPES: dict[str, type[BackgroundElement]] = {
    cls.object_tag: cls
    for cls in (BackgroundImage, BackgroundLinearGradient, BackgroundRadialGradient, BackgroundConicGradient)
}


def create_background(obj: DataObject) -> BackgroundElement:
    """
    Build a layer from ``image{...}``, ``linear-gradient{...}``, ... objects.

    Raises:
        UnknownTagError: If a property is not supported by the layer
        IncompatibleTypeError: If the object tag names no layer kind
    """
    cls = BACKGROUND_TYPES.get(obj.tag.strip().lower())
    if cls is None:
        raise IncompatibleTypeError(f'unknown background type: "{obj.tag}"', tag=tags.BACKGROUND, value=obj.tag)
    return cls(obj)


def new_background_image(params: dict[str, Any]) -> BackgroundImage:
    return BackgroundImage(params)


def new_linear_gradient(params: dict[str, Any]) -> BackgroundLinearGradient:
    return BackgroundLinearGradient(params)


def new_radial_gradient(params: dict[str, Any]) -> BackgroundRadialGradient:
    return BackgroundRadialGradient(params)


def new_conic_gradient(params: dict[str, Any]) -> BackgroundConicGradient:
    return BackgroundConicGradient(params)


def background_list(tag: str, value: Any) -> list[BackgroundElement]:
    """
    Coerce a ``background`` value to its list of layers.

    Raises:
        IncompatibleTypeError: If an item is not a layer, a layer object or layer text
    """
    if isinstance(value, BackgroundElement):
        return [value.clone()]  # type: ignore[list-item]
    if isinstance(value, DataObject):
        return [create_background(value)]
    if isinstance(value, str):
        return [create_background(parse_data(value))]
    if isinstance(value, (list, tuple)):
        result: list[BackgroundElement] = []
        for item in value:
            result.extend(background_list(tag, item))
        return result
    raise IncompatibleTypeError(
        f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
    )


def background_css(layers: list[BackgroundElement], color: Color | None, session) -> str:
    """``background`` shorthand: the layers, comma separated, then the color."""
    parts = [text.rstrip() for text in (layer.css_value(session) for layer in layers) if text]
    if not parts:
        return ""
    text = ", ".join(parts)
    if color:
        text += " " + color.css_string()
    return text
