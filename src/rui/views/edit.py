"""
Edit View
Single-line and multi-line text input.

The browser reports every keystroke as ``textChanged``. The new text is
stored without being echoed back to the client, and ``edit-text-changed``
listeners get ``(new text, old text)``.
"""

from html import escape
from typing import Any

from ..data import DataObject
from ..events import fire, names
from ..properties import bool_property, enum_property, int_property, string_property, tags
from .factory import register_view_creator
from .view import View

EMAILS = 3
MULTILINE = 6

# edit-view-type -> (type attribute, inputmode attribute)
_INPUT_TYPES = (
    ("text", "text"),
    ("password", ""),
    ("email", "email"),
    ("email", "email"),
    ("url", "url"),
    ("tel", "tel"),
)

_ATTRIBUTE_TAGS = {
    tags.HINT: "placeholder",
    tags.MAX_LENGTH: "maxlength",
    tags.EDIT_VIEW_PATTERN: "pattern",
}


class EditView(View):
    """A text ``<input>``, or a ``<textarea>`` for the ``multiline`` type."""

    view_tag = "EditView"
    default_style = "ruiEditView"
    html_disabled = True
    focusable_by_default = True

    aliases = {
        **View.aliases,
        "type": tags.EDIT_VIEW_TYPE,
        "pattern": tags.EDIT_VIEW_PATTERN,
        "placeholder": tags.HINT,
        "readonly": tags.READ_ONLY,
        "wrap": tags.EDIT_WRAP,
    }

    def __init__(self, session, params: dict[str, Any] | DataObject | None = None):
        # None until construction ends; no change events fire before that
        self._last_text: str | None = None
        super().__init__(session, params)
        self._last_text = self.text()

    def text(self) -> str:
        return string_property(self, tags.TEXT, self.session) or ""

    def set_text(self, text: str) -> bool:
        return self.set(tags.TEXT, text)

    def append_text(self, text: str) -> bool:
        return self.set(tags.TEXT, self.text() + text)

    def edit_type(self) -> int:
        return enum_property(self, tags.EDIT_VIEW_TYPE, self.session)

    def is_multiline(self) -> bool:
        return self.edit_type() == MULTILINE

    def _apply_changes(self, changed: list[str]) -> None:
        super()._apply_changes(changed)
        if tags.TEXT in changed:
            self._text_changed()

    def _text_changed(self) -> None:
        text = self.text()
        old, self._last_text = self._last_text, text
        if old is not None and old != text:
            fire(self.listeners(names.EDIT_TEXT_CHANGED_EVENT), self, text, old)

    # ========================================================================
    # HTML
    # ========================================================================

    def html_tag(self) -> str:
        return "textarea" if self.is_multiline() else "input"

    def _attribute_value(self, tag: str) -> str:
        if tag == tags.MAX_LENGTH:
            length = int_property(self, tag, self.session)
            return str(length) if length is not None and length > 0 else ""
        value = string_property(self, tag, self.session) or ""
        if value and tag == tags.HINT:
            value = self.session.get_string(value)
        return value

    def html_properties(self, buffer: list[str], disabled: bool) -> None:
        super().html_properties(buffer, disabled)
        edit_type = self.edit_type()
        if edit_type == MULTILINE:
            wrap = bool_property(self, tags.EDIT_WRAP, self.session)
            buffer.append(' wrap="soft"' if wrap else ' wrap="off"')
        else:
            if not 0 <= edit_type < len(_INPUT_TYPES):
                edit_type = 0
            input_type, input_mode = _INPUT_TYPES[edit_type]
            buffer.append(f' type="{input_type}"')
            if input_mode:
                buffer.append(f' inputmode="{input_mode}"')
            if edit_type == EMAILS:
                buffer.append(" multiple")
            text = self.text()
            if text:
                buffer.append(f' value="{escape(text)}"')

        if bool_property(self, tags.READ_ONLY, self.session):
            buffer.append(" readonly")
        for tag, attribute in _ATTRIBUTE_TAGS.items():
            value = self._attribute_value(tag)
            if value:
                buffer.append(f' {attribute}="{escape(value)}"')
        spellcheck = bool_property(self, tags.SPELLCHECK, self.session)
        if spellcheck is not None:
            buffer.append(f' spellcheck="{"true" if spellcheck else "false"}"')

    def html_events(self, buffer: list[str]) -> None:
        super().html_events(buffer)
        buffer.append(' oninput="editViewInputEvent(this)"')

    def html_subviews(self, buffer: list[str]) -> None:
        if self.is_multiline():
            buffer.append(escape(self.text()))

    def property_changed(self, tag: str) -> None:
        session = self.session
        html_id = self.html_id()
        if tag == tags.TEXT:
            session.call_function("setInputValue", html_id, self.text())
        elif tag in _ATTRIBUTE_TAGS:
            value = self._attribute_value(tag)
            if value:
                session.update_property(html_id, _ATTRIBUTE_TAGS[tag], value)
            else:
                session.remove_property(html_id, _ATTRIBUTE_TAGS[tag])
        elif tag == tags.READ_ONLY:
            if bool_property(self, tag, session):
                session.update_property(html_id, "readonly", True)
            else:
                session.remove_property(html_id, "readonly")
        elif tag == tags.SPELLCHECK:
            spellcheck = bool_property(self, tag, session)
            if spellcheck is None:
                session.remove_property(html_id, "spellcheck")
            else:
                session.update_property(html_id, "spellcheck", "true" if spellcheck else "false")
        elif tag == tags.EDIT_WRAP:
            if self.is_multiline():
                wrap = bool_property(self, tag, session)
                session.update_property(html_id, "wrap", "soft" if wrap else "off")
        elif tag == tags.EDIT_VIEW_TYPE:
            # input and textarea are different elements
            parent = self.parent()
            if parent is not None:
                parent.update_inner_html()
            else:
                session.reload()
        else:
            super().property_changed(tag)

    # ========================================================================
    # Events
    # ========================================================================

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command == "textChanged":
            text = data.property_value("text") or ""
            if text != self.text():
                if text:
                    self._properties[tags.TEXT] = text
                else:
                    self._properties.pop(tags.TEXT, None)
                # The client already shows the text
                super(View, self)._apply_changes([tags.TEXT])
                self._text_changed()
            return True
        return super().handle_command(command, data)


register_view_creator(EditView)
