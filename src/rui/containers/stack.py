"""
Stack Layout
A page stack: every child fills the layout, only the current one is visible.

``push`` and ``pop`` slide a page in or out with a CSS transform
transition. The sliding page lives in a temporary ``{id}push`` /
``{id}pop`` element whose ``transitionend`` reports back as a
``transition-end-event`` with property ``ruiPush`` or ``ruiPop``; the stack
then re-renders its pages and calls the finish callback.
"""

from html import escape
from typing import Any, Callable

from ..animation import validate_timing_function
from ..core.errors import IncompatibleTypeError, NotFoundError
from ..core.logging_config import get_logger
from ..data import DataObject
from ..events import names
from ..properties import float_property, string_property, tags, value_to_int
from ..values import format_float
from ..values.enums import StackAnimation
from ..views import View, ViewsContainer, register_view_creator

logger = get_logger(__name__)

PUSH_TAG = "ruiPush"
POP_TAG = "ruiPop"

DEFAULT_PUSH_DURATION = 1.0
DEFAULT_PUSH_TIMING = "ease"


class StackLayout(ViewsContainer):
    """
    Stack of pages with animated push and pop.

    ``current`` is the index of the visible page. Appending or inserting a
    view makes it current; removing the current view shows the one below.
    """

    view_tag = "StackLayout"
    system_class = "ruiStackLayout"

    def __init__(self, session, params: dict[str, Any] | DataObject | None = None):
        self._peek = 0
        self._push_view: View | None = None
        self._pop_view: View | None = None
        self._on_push_finished: Callable[[], Any] | None = None
        self._on_pop_finished: Callable[[View], Any] | None = None
        super().__init__(session, params)

    # ========================================================================
    # Current page
    # ========================================================================

    def _get(self, tag: str) -> Any:
        if tag == tags.CURRENT:
            return self._peek
        return super()._get(tag)

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == tags.CURRENT:
            index = value_to_int(value, self.session, tag)
            if index is None:
                raise IncompatibleTypeError(f"invalid page index: {value!r}", tag=tag, value=repr(value))
            if index < 0 or index >= len(self._views):
                raise NotFoundError(f"page index {index} is out of range", tag=tag, count=len(self._views))
            return self._show_page(index)
        return super()._set(tag, value)

    def _remove(self, tag: str) -> list[str]:
        if tag == tags.CURRENT:
            return self._show_page(0) if self._views else []
        return super()._remove(tag)

    def page_html_id(self, index: int) -> str:
        return f"{self.html_id()}page{index}"

    def _show_page(self, index: int) -> list[str]:
        if index == self._peek:
            return []
        if self._live():
            with self.session.update_script(self.html_id()):
                if self._peek < len(self._views):
                    self.session.update_css_property(self.page_html_id(self._peek), "visibility", "hidden")
                self.session.update_css_property(self.page_html_id(index), "visibility", "visible")
        self._peek = index
        return [tags.CURRENT]

    def peek(self) -> View | None:
        """The visible page, or None when the stack is empty."""
        if self._peek < len(self._views):
            return self._views[self._peek]
        return None

    def move_to_front(self, view: View) -> bool:
        """Make a child the visible page."""
        index = self.view_index(view)
        if index < 0:
            logger.error("move_to_front_view_not_found", view=repr(view))
            return False
        return self.set(tags.CURRENT, index)

    def move_to_front_by_id(self, view_id: str) -> bool:
        for index, view in enumerate(self._views):
            if view.id == view_id:
                return self.set(tags.CURRENT, index)
        logger.error("move_to_front_view_not_found", view_id=view_id)
        return False

    # ========================================================================
    # Children
    # ========================================================================

    def append(self, view: View | None) -> None:
        if view is not None:
            self._peek = len(self._views)
        super().append(view)
        if view is not None:
            self._notify_changed(tags.CURRENT)

    def insert(self, view: View | None, index: int) -> None:
        if view is None or index >= len(self._views):
            super().insert(view, index)
            return
        self._peek = max(0, index)
        super().insert(view, index)
        self._notify_changed(tags.CURRENT)

    def remove_view(self, index: int) -> View | None:
        if 0 <= index < len(self._views) and (index < self._peek or (index == self._peek and self._peek > 0)):
            self._peek -= 1
        view = super().remove_view(index)
        if view is not None:
            self._notify_changed(tags.CURRENT)
        return view

    def remove_peek(self) -> View | None:
        """Remove the last page without animation."""
        return self.remove_view(len(self._views) - 1)

    def _send_append(self, view: View) -> None:
        self.update_inner_html()

    def _send_removal(self, view: View) -> None:
        self.update_inner_html()

    # ========================================================================
    # Animated push / pop
    # ========================================================================

    def _transition(self) -> str:
        duration = float_property(self, tags.PUSH_DURATION, self.session)
        if duration is None:
            duration = DEFAULT_PUSH_DURATION
        timing = string_property(self, tags.PUSH_TIMING, self.session) or DEFAULT_PUSH_TIMING
        if not validate_timing_function(timing):
            logger.warning("invalid_push_timing", timing=timing)
            timing = DEFAULT_PUSH_TIMING
        return f"transform {format_float(duration)}s {timing}"

    def _offset_transform(self, animation: int) -> str:
        if animation == StackAnimation.DEFAULT:
            transform = string_property(self, tags.PUSH_TRANSFORM, self.session)
            if transform:
                return transform
        width = format_float(self.frame.width)
        height = format_float(self.frame.height)
        if animation == StackAnimation.START_TO_END:
            return f"translate(-{width}px, 0px)"
        if animation == StackAnimation.TOP_DOWN:
            return f"translate(0px, -{height}px)"
        if animation == StackAnimation.BOTTOM_UP:
            return f"translate(0px, {height}px)"
        return f"translate({width}px, 0px)"

    def _sliding_page(self, view: View, suffix: str, tag: str, style: str) -> str:
        html_id = self.html_id()
        handler = f"stackTransitionEndEvent('{html_id}', '{tag}', event)"
        buffer = [
            f'<div id="{html_id}{suffix}" class="ruiStackPageLayout" ontransitionend="{handler}"'
            f' ontransitioncancel="{handler}" style="{escape(style)}">'
        ]
        view.render(buffer)
        buffer.append("</div>")
        return "".join(buffer)

    def push(
        self,
        view: View | None,
        animation: int = StackAnimation.DEFAULT,
        on_finished: Callable[[], Any] | None = None,
    ) -> None:
        """
        Add a view on top of the stack, sliding it in.

        Args:
            view: The new page
            animation: A ``StackAnimation`` direction
            on_finished: Called once the page is in place
        """
        if view is None:
            logger.error("push_none_view", container=self.view_tag)
            return
        if not self._live():
            self.append(view)
            if on_finished is not None:
                on_finished()
            return

        self._push_view = view
        self._on_push_finished = on_finished
        self._attach(view)
        html_id = self.html_id()
        style = f"transform: {self._offset_transform(animation)}; transition: {self._transition()};"
        with self.session.update_script(html_id):
            self.session.append_to_inner_html(html_id, self._sliding_page(view, "push", PUSH_TAG, style))
            self.session.update_css_property(html_id + "push", "transform", "translate(0px, 0px)")
        self._views.append(view)
        self._notify_changed(tags.CONTENT)

    def pop(
        self,
        animation: int = StackAnimation.DEFAULT,
        on_finished: Callable[[View], Any] | None = None,
    ) -> bool:
        """
        Remove the visible page, sliding it out.

        Args:
            animation: A ``StackAnimation`` direction
            on_finished: Called with the removed view once it is gone

        Returns:
            False if the stack is empty
        """
        if not self._views or self._peek >= len(self._views):
            logger.error("pop_empty_stack", container=self.view_tag)
            return False
        if not self._live():
            view = self.remove_view(self._peek)
            if on_finished is not None and view is not None:
                on_finished(view)
            return True

        view = self._views.pop(self._peek)
        if self._peek > 0:
            self._peek -= 1
        self._pop_view = view
        self._on_pop_finished = on_finished

        html_id = self.html_id()
        buffer: list[str] = []
        self.html_subviews(buffer)
        buffer.append(self._sliding_page(view, "pop", POP_TAG, f"transition: {self._transition()};"))
        with self.session.update_script(html_id):
            self.session.update_inner_html(html_id, "".join(buffer))
            self.session.update_css_property(html_id + "pop", "transform", self._offset_transform(animation))
        self._notify_changed(tags.CONTENT, tags.CURRENT)
        return True

    def _push_finished(self) -> None:
        if self._push_view is not None:
            self._push_view = None
            self._peek = max(0, len(self._views) - 1)
            self.update_inner_html()
            self._notify_changed(tags.CURRENT)
        callback, self._on_push_finished = self._on_push_finished, None
        if callback is not None:
            callback()

    def _pop_finished(self) -> None:
        view, self._pop_view = self._pop_view, None
        self.update_inner_html()
        if view is not None:
            view.detach()
        callback, self._on_pop_finished = self._on_pop_finished, None
        if callback is not None and view is not None:
            callback(view)

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command in (names.TRANSITION_END_EVENT, names.TRANSITION_CANCEL_EVENT):
            prop = data.property_value(tags.PROPERTY_TAG)
            if prop == PUSH_TAG:
                self._push_finished()
                return True
            if prop == POP_TAG:
                self._pop_finished()
                return True
        return super().handle_command(command, data)

    # ========================================================================
    # HTML
    # ========================================================================

    def html_subviews(self, buffer: list[str]) -> None:
        if not self._views:
            return
        peek = min(self._peek, len(self._views) - 1)
        for index, view in enumerate(self._views):
            buffer.append(f'<div id="{self.page_html_id(index)}" class="ruiStackPageLayout"')
            if index == peek:
                buffer.append(' style="z-index: auto;"')
            else:
                buffer.append(' style="visibility: hidden;"')
            buffer.append(">")
            view.render(buffer)
            buffer.append("</div>")


register_view_creator(StackLayout)
