"""Custom view: an application widget built from other views."""

from typing import Any

from ..data import DataObject
from .view import View


class CustomView(View):
    """
    Widget whose content is another view.

    Subclasses implement ``create_super_view``; every property, event and
    DOM node belongs to that view, so the custom view only adds
    behaviour on top of it.
    """

    view_tag = "CustomView"

    def __init__(self, session, params: dict[str, Any] | DataObject | None = None):
        self.super_view = self.create_super_view(session)
        super().__init__(session, params)

    def create_super_view(self, session) -> View:
        raise NotImplementedError("CustomView subclasses build their super view")

    # ========================================================================
    # Delegation
    # ========================================================================

    def get(self, tag: str) -> Any:
        return self.super_view.get(tag)

    def set(self, tag: str, value: Any) -> bool:
        return self.super_view.set(tag, value)

    def remove(self, tag: str) -> None:
        self.super_view.remove(tag)

    def all_tags(self) -> list[str]:
        return self.super_view.all_tags()

    def set_change_listener(self, tag: str, listener) -> None:
        self.super_view.set_change_listener(tag, listener)

    def html_id(self) -> str:
        return self.super_view.html_id()

    def set_parent_html_id(self, parent_id: str) -> None:
        self.super_view.set_parent_html_id(parent_id)

    def parent_html_id(self) -> str:
        return self.super_view.parent_html_id()

    def subviews(self) -> list[View]:
        return [self.super_view]

    def detach(self) -> None:
        self.super_view.detach()

    def render(self, buffer: list[str]) -> None:
        self.super_view.render(buffer)
        self.created = True

    def set_animated(self, tag: str, value: Any, animation) -> bool:
        return self.super_view.set_animated(tag, value, animation)

    def handle_command(self, command: str, data: DataObject) -> bool:
        return self.super_view.handle_command(command, data)
