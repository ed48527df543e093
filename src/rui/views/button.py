"""
Buttons
Push button and checkbox.

A ``Button`` is a focusable container rendered as a ``<button>`` element;
its content may be any views. A ``Checkbox`` shows a check mark next to
its content and toggles ``checked`` on click and on Enter or Space.
"""

from ..data import DataObject
from ..events import KeyEvent, decode_event, fire, names
from ..properties import bool_property, enum_property, tags
from ..styles import CSSDeclarations
from ..values.enums import HorizontalAlign, VerticalAlign
from .factory import register_view_creator
from .container import ViewsContainer

_TOGGLE_CODES = ("Enter", "NumpadEnter", "Space")

_ALIGN_CSS = ("start", "end", "center")


class Button(ViewsContainer):
    view_tag = "Button"
    default_style = "ruiButton"
    default_disabled_style = "ruiDisabledButton"
    html_disabled = True
    focusable_by_default = True

    def html_tag(self) -> str:
        return "button"


class Checkbox(ViewsContainer):
    """A check mark followed by the content; ``checked`` flips on activation."""

    view_tag = "Checkbox"
    default_style = "ruiCheckbox"
    focusable_by_default = True

    def is_checked(self) -> bool:
        return bool(bool_property(self, tags.CHECKED, self.session))

    def set_checked(self, checked: bool) -> None:
        if checked != self.is_checked():
            self.set(tags.CHECKED, checked)

    def toggle(self) -> None:
        if not self.is_disabled():
            self.set_checked(not self.is_checked())

    def _apply_changes(self, changed: list[str]) -> None:
        super()._apply_changes(changed)
        if tags.CHECKED in changed:
            fire(self.listeners(names.CHECKBOX_CHANGED_EVENT), self, self.is_checked())

    # ========================================================================
    # HTML
    # ========================================================================

    def css_style(self, builder: CSSDeclarations) -> None:
        builder.add("display", "grid")
        builder.add("grid-template-columns", "min-content 1fr")
        builder.add("align-items", self._align(tags.CHECKBOX_VERTICAL_ALIGN, VerticalAlign.TOP))
        builder.add("justify-items", self._align(tags.CHECKBOX_HORIZONTAL_ALIGN, HorizontalAlign.LEFT))
        super().css_style(builder)

    def _align(self, tag: str, default: int) -> str:
        value = enum_property(self, tag, self.session, default)
        return _ALIGN_CSS[value] if 0 <= value < len(_ALIGN_CSS) else _ALIGN_CSS[default]

    def mark_html_id(self) -> str:
        return self.html_id() + "checkbox"

    def mark(self) -> str:
        return "☑" if self.is_checked() else "☐"

    def html_subviews(self, buffer: list[str]) -> None:
        buffer.append(f'<div id="{self.mark_html_id()}">{self.mark()}</div>')
        buffer.append(f'<div id="{self.html_id()}content">')
        super().html_subviews(buffer)
        buffer.append("</div>")

    def update_inner_html(self) -> None:
        if not self.created:
            return
        buffer: list[str] = []
        ViewsContainer.html_subviews(self, buffer)
        self.session.update_inner_html(self.html_id() + "content", "".join(buffer))

    def _send_append(self, view) -> None:
        # Children live in the content cell
        self.update_inner_html()

    def property_changed(self, tag: str) -> None:
        if tag == tags.CHECKED:
            self.session.update_inner_html(self.mark_html_id(), self.mark())
        else:
            super().property_changed(tag)

    def wired_events(self) -> list[str]:
        result = super().wired_events()
        for tag in (names.CLICK_EVENT, names.KEY_DOWN_EVENT):
            if tag not in result:
                result.append(tag)
        return sorted(result)

    # ========================================================================
    # Events
    # ========================================================================

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command == names.CLICK_EVENT:
            if not self.is_disabled():
                fire(self.listeners(command), self, *decode_event(command, data))
                self.toggle()
            return True
        if command == names.KEY_DOWN_EVENT:
            event = KeyEvent.from_data(data)
            if not self.is_disabled():
                fire(self.listeners(command), self, event)
                if event.code in _TOGGLE_CODES and not event.control_keys():
                    self.toggle()
            return True
        return super().handle_command(command, data)


register_view_creator(Button)
register_view_creator(Checkbox)
