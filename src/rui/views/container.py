"""
Views Container
Base of every view that owns an ordered list of child views.

Children are attached explicitly: ``append``, ``insert``, ``remove_view``
and ``remove_view_by_id``. A live append is sent as an innerHTML append;
other insertions re-render the container's children, and removals delete
the child's DOM subtree.
"""

from typing import Any

from ..core.errors import IncompatibleTypeError, NotFoundError, report_error
from ..core.logging_config import get_logger
from ..data import DataObject
from ..properties import tags
from .factory import register_view_creator
from .view import View

logger = get_logger(__name__)


class ViewsContainer(View):
    """A view whose ``content`` is a list of child views."""

    view_tag = "ViewsContainer"

    def __init__(self, session, params: dict[str, Any] | DataObject | None = None):
        self._views: list[View] = []
        super().__init__(session, params)

    # ========================================================================
    # Property storage
    # ========================================================================

    def _get(self, tag: str) -> Any:
        if tag == tags.CONTENT:
            return list(self._views) if self._views else None
        return super()._get(tag)

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == tags.CONTENT:
            return self._set_content(self._content_views(value))
        return super()._set(tag, value)

    def _remove(self, tag: str) -> list[str]:
        if tag == tags.CONTENT:
            return self._set_content([])
        return super()._remove(tag)

    def _content_views(self, value: Any) -> list[View]:
        """
        Child views of a ``content`` value.

        Raises:
            IncompatibleTypeError: If an item is not a view, a string or a view template
        """
        if isinstance(value, (list, tuple)):
            result: list[View] = []
            for item in value:
                result += self._content_views(item)
            return result
        if isinstance(value, View):
            return [value]
        if isinstance(value, str):
            from .text import TextView

            return [TextView(self.session, {tags.TEXT: value})]
        if isinstance(value, DataObject):
            from .factory import create_view_from_object

            view = create_view_from_object(self.session, value)
            return [view] if view is not None else []
        raise IncompatibleTypeError(
            f"invalid content of {type(self).__name__}: {type(value).__name__}",
            tag=tags.CONTENT,
            value=repr(value),
        )

    def _set_content(self, views: list[View]) -> list[str]:
        if not views and not self._views:
            return []
        for view in self._views:
            if view not in views:
                view.detach()
        self._views = []
        for view in views:
            self._attach(view)
            self._views.append(view)
        return [tags.CONTENT]

    def _attach(self, view: View) -> None:
        view.set_parent_html_id(self.html_id())
        view.html_id()

    def _notify_changed(self, *changed: str) -> None:
        # Listeners only; the DOM update is already sent
        super(View, self)._apply_changes(list(changed))

    def property_changed(self, tag: str) -> None:
        if tag == tags.CONTENT:
            self.update_inner_html()
        else:
            super().property_changed(tag)

    # ========================================================================
    # Children
    # ========================================================================

    def views(self) -> list[View]:
        return list(self._views)

    def subviews(self) -> list[View]:
        return list(self._views)

    def views_count(self) -> int:
        return len(self._views)

    def view_index(self, view: View) -> int:
        """Position of a child, or -1."""
        for index, item in enumerate(self._views):
            if item is view:
                return index
        return -1

    def _live(self) -> bool:
        return self.created and not self.session.ignore_updates()

    def append(self, view: View | None) -> None:
        """Add a view after the last child."""
        if view is None:
            logger.error("append_none_view", container=self.view_tag)
            return
        self._attach(view)
        self._views.append(view)
        if self._live():
            self._send_append(view)
        self._notify_changed(tags.CONTENT)

    def insert(self, view: View | None, index: int) -> None:
        """Insert a view before the child at ``index``; an index past the end appends."""
        if view is None:
            logger.error("insert_none_view", container=self.view_tag)
            return
        if index < 0:
            index = 0
        if index >= len(self._views):
            self.append(view)
            return
        self._attach(view)
        self._views.insert(index, view)
        if self._live():
            self.update_inner_html()
        self._notify_changed(tags.CONTENT)

    def remove_view(self, index: int) -> View | None:
        """Detach and return the child at ``index``, or None if out of range."""
        if index < 0 or index >= len(self._views):
            logger.error("remove_view_out_of_range", container=self.view_tag, index=index)
            return None
        view = self._views.pop(index)
        if self._live():
            self._send_removal(view)
        view.detach()
        self._notify_changed(tags.CONTENT)
        return view

    def remove_view_by_id(self, view_id: str) -> View | None:
        for index, view in enumerate(self._views):
            if view.id == view_id:
                return self.remove_view(index)
        report_error(NotFoundError(f'view "{view_id}" not found', view_id=view_id))
        return None

    def remove_all(self) -> None:
        self.set(tags.CONTENT, None)

    # ========================================================================
    # HTML
    # ========================================================================

    def html_subviews(self, buffer: list[str]) -> None:
        for view in self._views:
            view.render(buffer)

    def _send_append(self, view: View) -> None:
        buffer: list[str] = []
        view.render(buffer)
        self.session.append_to_inner_html(self.html_id(), "".join(buffer))

    def _send_removal(self, view: View) -> None:
        self.session.call_function("removeView", view.html_id())


register_view_creator(ViewsContainer)
