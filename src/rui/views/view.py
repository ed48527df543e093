"""
View
Base node of the UI tree.

A view is a ``ViewStyle`` bound to a session. It owns an html id
(allocated lazily and registered in the session's id index), knows its
parent only by html id, renders itself to HTML and, once rendered, turns
every committed property change into the smallest set of DOM updates:
attribute changes for the handful of non-CSS tags and a declaration diff
for everything that projects to inline CSS.
"""

from dataclasses import replace
from html import escape
from typing import Any, Callable

from ..animation import Animation, KeyframeAnimation, validate_timing_function
from ..core.logging_config import get_logger
from ..data import DataObject
from ..events import (
    ALL_EVENTS,
    Listener,
    adapt_listener,
    decode_event,
    event_attribute,
    fire,
    listeners_from_value,
    names,
)
from ..properties import (
    ENUM_PROPERTIES,
    bool_property,
    enum_property,
    int_property,
    string_property,
    tags,
)
from ..properties.resolve import resolve_constant
from ..properties.schema import SIZE_PROPERTIES
from ..styles import TRANSFORM_TAGS, CSSDeclarations, ViewStyle
from ..values import Frame, parse_float, string_to_size_unit
from .factory import register_view_creator

logger = get_logger(__name__)

# Tags that change attributes rather than inline CSS
_CLASS_TAGS = frozenset({tags.STYLE, tags.STYLE_DISABLED})
_TAB_INDEX_TAGS = frozenset({tags.TAB_INDEX, tags.FOCUSABLE})

_TRANSITION_NAMES = {tags.TEXT_COLOR: "color", tags.TRANSFORM: "transform"}


def transition_property(tag: str) -> str:
    """CSS property a transition of ``tag`` animates."""
    if tag in TRANSFORM_TAGS:
        return "transform"
    if tag in _TRANSITION_NAMES:
        return _TRANSITION_NAMES[tag]
    return SIZE_PROPERTIES.get(tag, tag)


class View(ViewStyle):
    """
    A plain ``div`` view and the base class of every widget.

    Subclasses customize rendering through ``html_tag``, ``css_style``,
    ``html_properties`` and ``html_subviews``, and react to their own
    tags in ``property_changed``.
    """

    # Name of the view in .rui templates
    view_tag = "View"

    # Class always put first in the class attribute
    system_class = ""

    # Theme styles used when "style" / "style-disabled" are not set
    default_style = ""
    default_disabled_style = ""

    # The element takes the html "disabled" attribute
    html_disabled = False

    focusable_by_default = False

    def __init__(self, session, params: dict[str, Any] | DataObject | None = None):
        self.session = session
        self._html_id = ""
        self._parent_id = ""
        self.created = False
        self.has_focus = False
        self.frame = Frame()
        self.scroll = Frame()
        self._css: dict[str, str] = {}
        # CSS property -> (persistent transition, single-shot transition, animated tag)
        self._single_transitions: dict[str, tuple[Animation | None, Animation, str]] = {}
        self._used_animations: list[KeyframeAnimation] = []
        super().__init__(params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._html_id or '-'}, id={self.id!r})"

    # ========================================================================
    # Identity and tree links
    # ========================================================================

    @property
    def id(self) -> str:
        """Application-level id of the view (the ``id`` property)."""
        return self.get(tags.ID) or ""

    def html_id(self) -> str:
        if not self._html_id:
            self._html_id = self.session.next_view_id()
            self.session.register_view(self)
        return self._html_id

    def parent_html_id(self) -> str:
        return self._parent_id

    def set_parent_html_id(self, parent_id: str) -> None:
        self._parent_id = parent_id

    def parent(self) -> "View | None":
        """Parent view, looked up through the session's id index."""
        if not self._parent_id:
            return None
        return self.session.view_by_html_id(self._parent_id)

    def subviews(self) -> list["View"]:
        return []

    def detach(self) -> None:
        """Drop the view and its subtree from the session's id index."""
        for view in self.subviews():
            view.detach()
        for animation in self._used_animations:
            self.session.release_animation(animation)
        self._used_animations = []
        self.created = False
        self._css = {}
        self._parent_id = ""
        if self._html_id:
            self.session.unregister_view(self._html_id)
            self._html_id = ""

    # ========================================================================
    # Property storage
    # ========================================================================

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag in ALL_EVENTS:
            listeners = listeners_from_value(tag, value)
            if not listeners:
                return self._remove(tag)
            self._properties[tag] = listeners
            return [tag]
        return super()._set(tag, value)

    def _apply_changes(self, changed: list[str]) -> None:
        if tags.ANIMATION in changed:
            self._use_animations()
        if changed and self.created and not self.session.ignore_updates():
            html_id = self.html_id()
            with self.session.update_script(html_id):
                for tag in changed:
                    self.property_changed(tag)
                self.sync_css()
        super()._apply_changes(changed)

    def _use_animations(self) -> None:
        current = self.animations()
        for animation in self._used_animations:
            if animation not in current:
                self.session.release_animation(animation)
        for animation in current:
            if animation not in self._used_animations:
                self.session.use_animation(animation)
        self._used_animations = current

    def listeners(self, tag: str) -> list[Listener]:
        return self._properties.get(tag) or []

    def add_listener(self, tag: str, fn: Callable[..., Any]) -> bool:
        """Append one listener to an event property."""
        return self.set(tag, self.listeners(tag) + [fn])

    # ========================================================================
    # Style lookup
    # ========================================================================

    def is_disabled(self) -> bool:
        return bool(bool_property(self, tags.DISABLED, self.session))

    def focusable(self) -> bool:
        value = bool_property(self, tags.FOCUSABLE, self.session)
        return self.focusable_by_default if value is None else value

    def tab_index(self) -> int:
        value = int_property(self, tags.TAB_INDEX, self.session)
        if value is not None:
            return value
        return 0 if self.focusable() else -1

    def style_names(self, disabled: bool | None = None) -> list[str]:
        """Theme styles of the view, most specific first."""
        if disabled is None:
            disabled = self.is_disabled()
        result = []
        if disabled:
            name = string_property(self, tags.STYLE_DISABLED, self.session) or self.default_disabled_style
            if name:
                result.append(name)
        name = string_property(self, tags.STYLE, self.session) or self.default_style
        if name and name not in result:
            result.append(name)
        return result

    def styled(self, tag: str) -> Any:
        """Value of a tag from the view itself, else from its theme styles."""
        value = self.get(tag)
        if value is not None:
            return value
        for name in self.style_names():
            style = self.session.style(name)
            if style is not None:
                value = style.get(tag)
                if value is not None:
                    return value
        return None

    # ========================================================================
    # HTML
    # ========================================================================

    def html_tag(self) -> str:
        semantics = enum_property(self, tags.SEMANTICS, self.session)
        if semantics > 0:
            return ENUM_PROPERTIES[tags.SEMANTICS].css_value(semantics)
        return "div"

    def html_class(self, disabled: bool) -> str:
        names_ = [self.system_class] if self.system_class else []
        names_.append("ruiView")
        styles = self.style_names(disabled)
        if styles:
            names_.append(styles[0])
        return " ".join(names_)

    def css_style(self, builder: CSSDeclarations) -> None:
        self.css_view_style(builder, self.session)
        parent = self.parent()
        if parent is not None:
            parent.child_css(self, builder)

    def child_css(self, child: "View", builder: CSSDeclarations) -> None:
        """Declarations a container adds to the inline style of a child."""

    def css_declarations(self) -> CSSDeclarations:
        builder = CSSDeclarations()
        self.css_style(builder)
        return builder

    def html_properties(self, buffer: list[str], disabled: bool) -> None:
        if disabled:
            buffer.append(' data-disabled="1"')
            if self.html_disabled:
                buffer.append(" disabled")
        else:
            buffer.append(' data-disabled="0"')
            tab_index = self.tab_index()
            if tab_index >= 0:
                buffer.append(f' tabindex="{tab_index}"')

        tooltip = string_property(self, tags.TOOLTIP, self.session)
        if tooltip:
            buffer.append(f' data-tooltip="{escape(self.session.get_string(tooltip))}"')

    def wired_events(self) -> list[str]:
        """Event tags whose DOM handlers are rendered."""
        result = [tag for tag in ALL_EVENTS if self.listeners(tag)]
        if self.focusable():
            result += [tag for tag in names.FOCUS_EVENTS if tag not in result]
        if self._single_transitions:
            for tag in (names.TRANSITION_END_EVENT, names.TRANSITION_CANCEL_EVENT):
                if tag not in result:
                    result.append(tag)
        return sorted(result)

    def html_events(self, buffer: list[str]) -> None:
        for tag in self.wired_events():
            wiring = event_attribute(tag)
            if wiring is not None:
                buffer.append(f' {wiring[0]}="{wiring[1]}"')
        if self.listeners(names.SCROLL_EVENT):
            buffer.append(' onscroll="scrollEvent(this, event)"')

    def html_subviews(self, buffer: list[str]) -> None:
        pass

    def render(self, buffer: list[str]) -> None:
        """Append the element of the view and its subtree to ``buffer``."""
        tag = self.html_tag()
        disabled = self.is_disabled()
        declarations = self.css_declarations()
        self._css = dict(declarations)

        buffer.append(f'<{tag} id="{self.html_id()}"')
        html_class = self.html_class(disabled)
        if html_class:
            buffer.append(f' class="{html_class}"')
        style = declarations.css_text()
        if style:
            buffer.append(f' style="{escape(style)}"')
        self.html_properties(buffer, disabled)
        self.html_events(buffer)
        buffer.append(">")
        self.created = True
        self.html_subviews(buffer)
        buffer.append(f"</{tag}>")

    def html(self) -> str:
        buffer: list[str] = []
        self.render(buffer)
        return "".join(buffer)

    def update_inner_html(self) -> None:
        """Re-render the children of a live view."""
        if not self.created:
            return
        buffer: list[str] = []
        self.html_subviews(buffer)
        self.session.update_inner_html(self.html_id(), "".join(buffer))

    # ========================================================================
    # Change emission
    # ========================================================================

    def sync_css(self) -> None:
        """Send the inline declarations that changed since the last render or sync."""
        if not self.created:
            return
        declarations = self.css_declarations()
        html_id = self.html_id()
        for key, value in declarations.diff(self._css):
            self.session.update_css_property(html_id, key, value)
        self._css = dict(declarations)

    def property_changed(self, tag: str) -> None:
        """Send the attribute updates of a committed change of ``tag``."""
        session = self.session
        html_id = self.html_id()

        if tag in _CLASS_TAGS:
            session.update_property(html_id, "class", self.html_class(self.is_disabled()))

        elif tag == tags.DISABLED:
            disabled = self.is_disabled()
            session.update_property(html_id, "data-disabled", "1" if disabled else "0")
            if self.html_disabled:
                if disabled:
                    session.update_property(html_id, "disabled", True)
                else:
                    session.remove_property(html_id, "disabled")
            tab_index = self.tab_index()
            if tab_index >= 0:
                session.update_property(html_id, "tabindex", -1 if disabled else tab_index)
            session.update_property(html_id, "class", self.html_class(disabled))

        elif tag in _TAB_INDEX_TAGS:
            session.update_property(html_id, "tabindex", self.tab_index())

        elif tag == tags.TOOLTIP:
            tooltip = string_property(self, tags.TOOLTIP, session)
            if tooltip:
                session.update_property(html_id, "data-tooltip", session.get_string(tooltip))
            else:
                session.remove_property(html_id, "data-tooltip")

        elif tag == names.SCROLL_EVENT:
            if self.listeners(tag):
                session.update_property(html_id, "onscroll", "scrollEvent(this, event)")
            else:
                session.remove_property(html_id, "onscroll")

        elif tag in ALL_EVENTS:
            wiring = event_attribute(tag)
            if wiring is None:
                return
            if tag in self.wired_events():
                session.update_property(html_id, wiring[0], wiring[1])
            else:
                session.remove_property(html_id, wiring[0])

    # ========================================================================
    # Animated changes
    # ========================================================================

    def set_animated(self, tag: str, value: Any, animation: Animation) -> bool:
        """
        Set a property through a single-shot CSS transition.

        The transition replaces any persistent transition of the same CSS
        property until the browser reports its end or cancellation; then
        the persistent one is restored and ``animation.finish_listener``
        runs with ``(view, tag)``. A view that is not live, a zero duration
        or an invalid timing function set the value at once and call the
        finish listener immediately.
        """
        tag = self.normalize(tag)
        timing = animation.timing_function
        if timing.startswith("@"):
            timing = resolve_constant(timing, self.session, tags.TIMING_FUNCTION) or ""

        live = self.created and not self.session.ignore_updates()
        if not live or animation.duration <= 0 or not validate_timing_function(timing):
            if not self.set(tag, value):
                return False
            self._animation_finished(animation, tag)
            return True

        key = transition_property(tag)
        if key in self._single_transitions:
            previous = self._single_transitions[key][0]
        else:
            previous = self.transitions().get(key)
        single = replace(animation, timing_function=timing)
        self._single_transitions[key] = (previous, single, tag)

        html_id = self.html_id()
        with self.session.update_script(html_id):
            for event in (names.TRANSITION_END_EVENT, names.TRANSITION_CANCEL_EVENT):
                attribute, script = event_attribute(event)
                self.session.update_property(html_id, attribute, script)
            self.set_transition(key, single)
            result = self.set(tag, value)
            if not result:
                del self._single_transitions[key]
                self.set_transition(key, previous)
        return result

    def _animation_finished(self, animation: Animation, tag: str) -> None:
        if animation.finish_listener is not None:
            adapt_listener(animation.finish_listener, 1)(self, tag)

    def _transition_event(self, command: str, data: DataObject) -> None:
        prop = data.property_value(tags.PROPERTY_TAG) or ""
        if command in (names.TRANSITION_END_EVENT, names.TRANSITION_CANCEL_EVENT):
            entry = self._single_transitions.pop(prop, None)
            if entry is not None:
                previous, animation, tag = entry
                self.set_transition(prop, previous)
                self._animation_finished(animation, tag)
        fire(self.listeners(command), self, prop)

    # ========================================================================
    # Inbound events
    # ========================================================================

    def handle_command(self, command: str, data: DataObject) -> bool:
        """
        Dispatch one browser message addressed to this view.

        Returns:
            False if the command is not a view command
        """
        if command in names.KEY_EVENTS:
            if not self.is_disabled():
                fire(self.listeners(command), self, *decode_event(command, data))
        elif command in names.MOUSE_EVENTS or command in names.POINTER_EVENTS or command in names.TOUCH_EVENTS:
            fire(self.listeners(command), self, *decode_event(command, data))
        elif command == names.FOCUS_EVENT:
            self.has_focus = True
            self.session.focused_html_id = self.html_id()
            fire(self.listeners(command), self)
        elif command == names.LOST_FOCUS_EVENT:
            self.has_focus = False
            if self.session.focused_html_id == self.html_id():
                self.session.focused_html_id = ""
            fire(self.listeners(command), self)
        elif command in names.TRANSITION_EVENTS:
            self._transition_event(command, data)
        elif command in names.ANIMATION_EVENTS:
            fire(self.listeners(command), self, *decode_event(command, data))
        elif command == "scroll":
            self.on_scroll(*(_number(data, key) for key in ("x", "y", "width", "height")))
        elif command in ("widthChanged", "heightChanged"):
            tag = tags.WIDTH if command == "widthChanged" else tags.HEIGHT
            size = string_to_size_unit(data.property_value(tag) or "")
            if size is not None:
                self._properties[tag] = size
                self._css = dict(self.css_declarations())
        else:
            return False
        return True

    def on_resize(self, x: float, y: float, width: float, height: float) -> None:
        self.frame = Frame(x, y, width, height)
        fire(self.listeners(names.RESIZE_EVENT), self, self.frame)

    def on_item_resize(self, index: str, x: float, y: float, width: float, height: float) -> None:
        logger.debug("item_resize_ignored", view=type(self).__name__, index=index)

    def set_scroll(self, x: float, y: float, width: float, height: float) -> None:
        self.scroll = Frame(x, y, width, height)

    def on_scroll(self, x: float, y: float, width: float, height: float) -> None:
        self.set_scroll(x, y, width, height)
        fire(self.listeners(names.SCROLL_EVENT), self, self.scroll)

    # ========================================================================
    # Focus
    # ========================================================================

    def focus(self) -> None:
        self.session.focus_view(self)

    def blur(self) -> None:
        self.session.blur_view(self)


def _number(data: DataObject, key: str) -> float:
    return parse_float(data.property_value(key) or "") or 0.0


register_view_creator(View)
