"""Text view: an element holding a localized, escaped text."""

from html import escape
from typing import Any

from ..data import DataObject
from ..properties import bool_property, string_property, tags
from .factory import register_view_creator
from .view import View


class TextView(View):
    view_tag = "TextView"

    def __init__(self, session, params: dict[str, Any] | DataObject | str | None = None):
        if isinstance(params, str):
            params = {tags.TEXT: params}
        super().__init__(session, params)

    def text(self) -> str:
        """Displayed text: the ``text`` property through the string tables."""
        text = string_property(self, tags.TEXT, self.session) or ""
        if text and not bool_property(self, tags.NOT_TRANSLATE, self.session):
            text = self.session.get_string(text)
        return text

    def html_subviews(self, buffer: list[str]) -> None:
        buffer.append(escape(self.text(), quote=False))

    def property_changed(self, tag: str) -> None:
        if tag in (tags.TEXT, tags.NOT_TRANSLATE):
            self.update_inner_html()
        else:
            super().property_changed(tag)


register_view_creator(TextView)
