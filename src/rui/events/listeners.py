"""
Event Listener Adapters
Lift the accepted listener shapes to the canonical ``fn(view, *payload)``.

A listener may take the view and the full payload, the payload only, the
view only, or nothing. The shape is read from the callable's signature
once, when the listener is set; anything else is rejected.
"""

import inspect
from enum import Enum
from typing import Any, Callable

from ..core.errors import IncompatibleTypeError
from .names import payload_count


class ListenerShape(str, Enum):
    FULL = "full"
    PAYLOAD = "payload"
    VIEW = "view"
    NONE = "none"


def _annotated_as_view(parameter: inspect.Parameter) -> bool:
    annotation = parameter.annotation
    if annotation is inspect.Parameter.empty:
        return False
    name = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "")
    return "View" in name


def listener_shape(fn: Callable[..., Any], payload: int) -> ListenerShape:
    """
    Pick the shape a callable is invoked with.

    Raises:
        IncompatibleTypeError: If no supported shape fits the signature
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return ListenerShape.FULL

    positional = [
        p for p in signature.parameters.values()
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    required = sum(1 for p in positional if p.default is inspect.Parameter.empty)
    variadic = any(p.kind == inspect.Parameter.VAR_POSITIONAL for p in signature.parameters.values())
    maximum = float("inf") if variadic else len(positional)

    def fits(count: int) -> bool:
        return required <= count <= maximum

    if fits(payload + 1):
        return ListenerShape.FULL
    if payload > 0 and fits(payload):
        if payload == 1 and positional and _annotated_as_view(positional[0]):
            return ListenerShape.VIEW
        return ListenerShape.PAYLOAD
    if fits(1):
        return ListenerShape.VIEW
    if fits(0):
        return ListenerShape.NONE
    raise IncompatibleTypeError(
        f"listener {getattr(fn, '__name__', fn)!r} takes {required} arguments; "
        f"expected (view, {payload} payload values), the payload, the view or nothing",
        value=repr(fn),
    )


class Listener:
    """A callable lifted to the canonical ``(view, *payload)`` form."""

    __slots__ = ("fn", "shape")

    def __init__(self, fn: Callable[..., Any], shape: ListenerShape):
        self.fn = fn
        self.shape = shape

    def __call__(self, view: Any, *payload: Any) -> Any:
        if self.shape == ListenerShape.FULL:
            return self.fn(view, *payload)
        if self.shape == ListenerShape.PAYLOAD:
            return self.fn(*payload)
        if self.shape == ListenerShape.VIEW:
            return self.fn(view)
        return self.fn()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Listener):
            return self.fn == other.fn
        return self.fn == other

    def __hash__(self) -> int:
        return hash(self.fn)

    def __repr__(self) -> str:
        return f"Listener({getattr(self.fn, '__name__', self.fn)!r}, {self.shape.value})"


def adapt_listener(fn: Callable[..., Any], payload: int) -> Listener:
    if isinstance(fn, Listener):
        return fn
    if not callable(fn):
        raise IncompatibleTypeError(f"listener is not callable: {fn!r}", value=repr(fn))
    return Listener(fn, listener_shape(fn, payload))


def listeners_from_value(tag: str, value: Any) -> list[Listener]:
    """
    Canonical listener list of an event property value.

    A single callable, a list or tuple of callables, or an empty list
    (meaning remove) are accepted.

    Raises:
        IncompatibleTypeError: If an item is not an acceptable callable
    """
    payload = payload_count(tag)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        try:
            return [adapt_listener(fn, payload) for fn in value]
        except IncompatibleTypeError as e:
            e.context.setdefault("tag", tag)
            raise
    try:
        return [adapt_listener(value, payload)]
    except IncompatibleTypeError as e:
        e.context.setdefault("tag", tag)
        raise


def fire(listeners: list[Listener] | None, view: Any, *payload: Any) -> None:
    """Invoke listeners in registration order."""
    for listener in list(listeners or []):
        listener(view, *payload)
