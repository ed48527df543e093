"""
Keyframe Animations
Descriptors for the ``animation`` property and their @keyframes rules.

Each ``KeyframeAnimation`` gets a process-unique name. The session renders
its @keyframes rule into the page the first time a view uses it and
removes the rule when the last view releases it.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable

from ..core.errors import IncompatibleTypeError, InvalidFormatError
from ..core.logging_config import get_logger
from ..data import DataObject, NodeType, parse_data
from ..properties import (
    ENUM_PROPERTIES,
    PropertyKind,
    is_constant_name,
    property_kind,
    tags,
    value_to_angle,
    value_to_color,
    value_to_enum,
    value_to_float,
    value_to_int,
    value_to_size,
    value_to_string,
)
from ..properties.schema import SIZE_PROPERTIES
from ..styles.css import CSSStyleBuilder
from ..values import format_float, parse_float, parse_int

logger = get_logger(__name__)

KEY_FRAMES = "key-frames"

_name_counter = itertools.count(1)


def value_to_css(tag: str, value: Any, session) -> str:
    """CSS text of one animated value, "" when it cannot be resolved."""
    if value is None:
        return ""
    kind = property_kind(tag)
    if kind == PropertyKind.SIZE:
        size = value_to_size(value, session, tag)
        return size.css_string("auto") if size is not None else ""
    if kind == PropertyKind.COLOR:
        color = value_to_color(value, session, tag)
        return color.css_string() if color is not None else ""
    if kind == PropertyKind.ANGLE:
        angle = value_to_angle(value, session, tag)
        return angle.css_string() if angle is not None else ""
    if kind == PropertyKind.ENUM:
        return ENUM_PROPERTIES[tag].css_value(value_to_enum(value, tag, session))
    if kind == PropertyKind.FLOAT:
        number = value_to_float(value, session, tag)
        return format_float(number) if number is not None else ""
    if kind == PropertyKind.INT:
        number = value_to_int(value, session, tag)
        return str(number) if number is not None else ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_float(value) + ("px" if tag in SIZE_PROPERTIES else "")
    return value_to_string(value, session, tag) or ""


@dataclass
class AnimatedProperty:
    """One animated property: start and end values plus optional intermediate frames."""

    tag: str
    from_value: Any
    to_value: Any
    key_frames: dict[int, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.tag = self.tag.strip().lower()
        for frame in self.key_frames:
            if not 0 < frame < 100:
                raise IncompatibleTypeError(
                    f"key frame {frame} is out of range 1..99", tag=self.tag, value=str(frame)
                )


def parse_animated_property(obj: DataObject) -> AnimatedProperty:
    """
    ``_{property = opacity, from = 0, to = 1, key-frames = _{50 = 0.8}}``.

    Raises:
        InvalidFormatError: If the object misses ``property``, ``from`` or ``to``
    """
    tag = obj.property_value(tags.PROPERTY_TAG)
    from_value = obj.property_value("from")
    to_value = obj.property_value("to")
    if not tag or from_value is None or to_value is None:
        raise InvalidFormatError(
            "animated property needs property, from and to", tag=tags.PROPERTY_TAG, value=obj.to_text()
        )
    key_frames: dict[int, Any] = {}
    frames = obj.property_object(KEY_FRAMES)
    if frames is not None:
        for node in frames.nodes:
            frame = parse_int(node.tag.rstrip("%"))
            if frame is None:
                raise InvalidFormatError(f'invalid key frame "{node.tag}"', tag=KEY_FRAMES, value=node.tag)
            key_frames[frame] = node.text
    return AnimatedProperty(tag, from_value, to_value, key_frames)


class KeyframeAnimation:
    """
    Value of the ``animation`` property.

    ``iteration_count`` below zero means infinite. ``direction`` indexes
    the ``animation-direction`` enum.
    """

    def __init__(
        self,
        properties: list[AnimatedProperty],
        duration: float = 1.0,
        timing_function: str = "",
        delay: float = 0.0,
        iteration_count: int = 1,
        direction: int | str = 0,
    ):
        self.name = f"kf{next(_name_counter):06d}"
        self.properties = list(properties)
        self.duration = duration
        self.timing_function = timing_function
        self.delay = delay
        self.iteration_count = iteration_count
        self.direction = value_to_enum(direction, tags.ANIMATION_DIRECTION, None)

        self._view = None
        self._listener: Callable[..., Any] | None = None
        self._previous_animation: Any = None
        self._previous_listeners: dict[str, list] = {}

    def __repr__(self) -> str:
        return f"KeyframeAnimation({self.name!r}, {[prop.tag for prop in self.properties]!r})"

    # ========================================================================
    # CSS
    # ========================================================================

    def css_value(self) -> str:
        """Shorthand ``animation`` value: name duration timing delay count direction."""
        duration = self.duration if self.duration > 0 else 1.0
        timing = self.timing_function or "ease"
        delay = format_float(self.delay) + "s" if self.delay > 0 else "0s"
        if self.iteration_count < 0:
            count = "infinite"
        else:
            count = str(self.iteration_count or 1)
        direction = ENUM_PROPERTIES[tags.ANIMATION_DIRECTION].css_value(self.direction)
        return f"{self.name} {format_float(duration)}s {timing} {delay} {count} {direction}"

    def keyframes_css(self, session) -> str:
        """The @keyframes rule of this animation."""
        builder = CSSStyleBuilder()
        builder.start_animation(self.name)

        builder.start_animation_frame("from")
        for prop in self.properties:
            builder.add(prop.tag, value_to_css(prop.tag, prop.from_value, session))
        builder.end_animation_frame()

        frames = sorted({frame for prop in self.properties for frame in prop.key_frames})
        for frame in frames:
            builder.start_animation_frame(f"{frame}%")
            for prop in self.properties:
                if frame in prop.key_frames:
                    builder.add(prop.tag, value_to_css(prop.tag, prop.key_frames[frame], session))
            builder.end_animation_frame()

        builder.start_animation_frame("to")
        for prop in self.properties:
            builder.add(prop.tag, value_to_css(prop.tag, prop.to_value, session))
        builder.end_animation_frame()

        builder.end_animation()
        return builder.finish()

    # ========================================================================
    # Run control
    # ========================================================================

    def start(self, view, listener: Callable[..., Any] | None = None) -> bool:
        """
        Run the animation on a view.

        The view's current ``animation`` value and animation-event listeners
        are saved and restored once the animation ends or is cancelled.
        ``listener(view, animation, event)`` is called for each animation event.

        Returns:
            True if the animation was started
        """
        if view is None:
            logger.error("animation_start_without_view", animation=self.name)
            return False
        if not self.properties:
            return False

        self._view = view
        self._listener = listener
        self._previous_animation = view.get(tags.ANIMATION)
        self._previous_listeners = {}

        handlers = {
            "animation-start-event": self._on_start,
            "animation-end-event": self._on_end,
            "animation-cancel-event": self._on_cancel,
            "animation-iteration-event": self._on_iteration,
        }
        for event, handler in handlers.items():
            listeners = view.get(event) or []
            if listeners:
                self._previous_listeners[event] = list(listeners)
            view.set(event, list(listeners) + [handler])

        view.set(tags.ANIMATION, [self])
        return True

    def stop(self) -> None:
        self._on_cancel(self._view)

    def pause(self) -> None:
        if self._view is not None:
            self._view.set(tags.ANIMATION_PAUSED, True)

    def resume(self) -> None:
        if self._view is not None:
            self._view.remove(tags.ANIMATION_PAUSED)

    def _finish(self) -> None:
        view = self._view
        for event in (
            "animation-start-event",
            "animation-end-event",
            "animation-cancel-event",
            "animation-iteration-event",
        ):
            if event in self._previous_listeners:
                view.set(event, self._previous_listeners[event])
            else:
                view.remove(event)
        view.set(tags.ANIMATION, self._previous_animation)
        self._previous_animation = None
        self._previous_listeners = {}
        self._view = None
        self._listener = None

    def _notify(self, event: str) -> None:
        if self._view is not None and self._listener is not None:
            self._listener(self._view, self, event)

    def _on_start(self, *_: Any) -> None:
        self._notify("animation-start-event")

    def _on_iteration(self, *_: Any) -> None:
        self._notify("animation-iteration-event")

    def _complete(self, event: str) -> None:
        view, listener = self._view, self._listener
        if view is None:
            return
        for prop in self.properties:
            view.set(prop.tag, prop.to_value)
        self._finish()
        if listener is not None:
            listener(view, self, event)

    def _on_end(self, *_: Any) -> None:
        self._complete("animation-end-event")

    def _on_cancel(self, *_: Any) -> None:
        self._complete("animation-cancel-event")


def parse_keyframe_animation(obj: DataObject) -> KeyframeAnimation:
    """
    Build an animation from its .rui object.

    Raises:
        InvalidFormatError: If a numeric field or an animated property is malformed
    """
    node = obj.property_by_tag(tags.PROPERTY_TAG)
    if node is None:
        raise InvalidFormatError("animation has no property", tag=tags.ANIMATION, value=obj.to_text())
    if node.type == NodeType.OBJECT:
        properties = [parse_animated_property(node.object)]
    elif node.type == NodeType.ARRAY:
        properties = [
            parse_animated_property(item) for item in node.array if isinstance(item, DataObject)
        ]
    else:
        raise InvalidFormatError("invalid animated property", tag=tags.PROPERTY_TAG, value=node.text)

    def number(tag: str, default: float) -> float:
        text = obj.property_value(tag)
        if text is None:
            return default
        value = parse_float(text)
        if value is None:
            raise InvalidFormatError(f'invalid animation {tag}: "{text}"', tag=tag, value=text)
        return value

    count_text = obj.property_value(tags.ITERATION_COUNT)
    if count_text is None:
        iteration_count = 1
    elif count_text.strip() == "infinite":
        iteration_count = -1
    else:
        iteration_count = parse_int(count_text)
        if iteration_count is None:
            raise InvalidFormatError(
                f'invalid iteration count: "{count_text}"', tag=tags.ITERATION_COUNT, value=count_text
            )

    return KeyframeAnimation(
        properties,
        duration=number(tags.DURATION, 1.0),
        timing_function=(obj.property_value(tags.TIMING_FUNCTION) or "").strip(),
        delay=number(tags.DELAY, 0.0),
        iteration_count=iteration_count,
        direction=obj.property_value(tags.ANIMATION_DIRECTION) or 0,
    )


def animation_list(tag: str, value: Any) -> list[KeyframeAnimation]:
    """
    Normalize an ``animation`` value to a list.

    Raises:
        IncompatibleTypeError: If the value describes no animation
    """
    if isinstance(value, KeyframeAnimation):
        return [value]
    if isinstance(value, str):
        if is_constant_name(value):
            raise IncompatibleTypeError("animation constants are not supported", tag=tag, value=value)
        value = parse_data(value)
    if isinstance(value, DataObject):
        return [parse_keyframe_animation(value)]
    if isinstance(value, (list, tuple)):
        result: list[KeyframeAnimation] = []
        for item in value:
            result += animation_list(tag, item)
        return result
    raise IncompatibleTypeError(
        f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
    )
