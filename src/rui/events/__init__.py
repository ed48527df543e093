"""Event taxonomy: tags, payload types, listener adapters and DOM wiring."""

from . import names
from .names import ALL_EVENTS, payload_count
from .types import KeyEvent, MouseEvent, PointerEvent, Touch, TouchEvent
from .listeners import Listener, ListenerShape, adapt_listener, fire, listener_shape, listeners_from_value
from .js import EVENT_JS, decode_event, event_attribute

__all__ = [
    "names",
    "ALL_EVENTS",
    "payload_count",
    # Payloads
    "KeyEvent",
    "MouseEvent",
    "PointerEvent",
    "Touch",
    "TouchEvent",
    # Listeners
    "Listener",
    "ListenerShape",
    "adapt_listener",
    "fire",
    "listener_shape",
    "listeners_from_value",
    # DOM wiring
    "EVENT_JS",
    "decode_event",
    "event_attribute",
]
