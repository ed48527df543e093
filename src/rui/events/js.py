"""DOM wiring of event listeners and decoding of inbound event payloads."""

from typing import Any

from ..data import DataObject
from . import names
from .types import KeyEvent, MouseEvent, PointerEvent, TouchEvent

# Event tag -> (DOM attribute, client function)
EVENT_JS: dict[str, tuple[str, str]] = {
    names.FOCUS_EVENT: ("onfocus", "focusEvent"),
    names.LOST_FOCUS_EVENT: ("onblur", "blurEvent"),
    names.KEY_DOWN_EVENT: ("onkeydown", "keyDownEvent"),
    names.KEY_UP_EVENT: ("onkeyup", "keyUpEvent"),
    names.CLICK_EVENT: ("onclick", "clickEvent"),
    names.DOUBLE_CLICK_EVENT: ("ondblclick", "doubleClickEvent"),
    names.MOUSE_DOWN: ("onmousedown", "mouseDownEvent"),
    names.MOUSE_UP: ("onmouseup", "mouseUpEvent"),
    names.MOUSE_MOVE: ("onmousemove", "mouseMoveEvent"),
    names.MOUSE_OUT: ("onmouseout", "mouseOutEvent"),
    names.MOUSE_OVER: ("onmouseover", "mouseOverEvent"),
    names.CONTEXT_MENU_EVENT: ("oncontextmenu", "contextMenuEvent"),
    names.POINTER_DOWN: ("onpointerdown", "pointerDownEvent"),
    names.POINTER_UP: ("onpointerup", "pointerUpEvent"),
    names.POINTER_MOVE: ("onpointermove", "pointerMoveEvent"),
    names.POINTER_CANCEL: ("onpointercancel", "pointerCancelEvent"),
    names.POINTER_OUT: ("onpointerout", "pointerOutEvent"),
    names.POINTER_OVER: ("onpointerover", "pointerOverEvent"),
    names.TOUCH_START: ("ontouchstart", "touchStartEvent"),
    names.TOUCH_END: ("ontouchend", "touchEndEvent"),
    names.TOUCH_MOVE: ("ontouchmove", "touchMoveEvent"),
    names.TOUCH_CANCEL: ("ontouchcancel", "touchCancelEvent"),
    names.TRANSITION_RUN_EVENT: ("ontransitionrun", "transitionRunEvent"),
    names.TRANSITION_START_EVENT: ("ontransitionstart", "transitionStartEvent"),
    names.TRANSITION_END_EVENT: ("ontransitionend", "transitionEndEvent"),
    names.TRANSITION_CANCEL_EVENT: ("ontransitioncancel", "transitionCancelEvent"),
    names.ANIMATION_START_EVENT: ("onanimationstart", "animationStartEvent"),
    names.ANIMATION_END_EVENT: ("onanimationend", "animationEndEvent"),
    names.ANIMATION_ITERATION_EVENT: ("onanimationiteration", "animationIterationEvent"),
    names.ANIMATION_CANCEL_EVENT: ("onanimationcancel", "animationCancelEvent"),
}


def event_attribute(tag: str) -> tuple[str, str] | None:
    """``(attribute, value)`` wiring an event to the client, e.g. ``onclick="clickEvent(this, event)"``."""
    wiring = EVENT_JS.get(tag)
    if wiring is None:
        return None
    attribute, function = wiring
    return attribute, f"{function}(this, event)"


def decode_event(tag: str, obj: DataObject) -> tuple[Any, ...]:
    """Payload values a listener of ``tag`` receives after the view."""
    if tag in names.MOUSE_EVENTS:
        return (MouseEvent.from_data(obj),)
    if tag in names.POINTER_EVENTS:
        return (PointerEvent.from_data(obj),)
    if tag in names.TOUCH_EVENTS:
        return (TouchEvent.from_data(obj),)
    if tag in names.KEY_EVENTS:
        return (KeyEvent.from_data(obj),)
    if tag in names.TRANSITION_EVENTS:
        return (obj.property_value("property") or "",)
    if tag in names.ANIMATION_EVENTS:
        return (obj.property_value("name") or "",)
    return ()
