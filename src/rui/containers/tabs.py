"""
Tabs Layout
A tab bar plus one visible page per child.

Each child supplies its tab through its own ``title``, ``icon`` and
``tab-close-button`` properties. The browser switches pages itself on a tab
click (``activateTab``) and reports it as ``tabClick``; a click on a tab's
close button arrives as ``tabCloseClick`` and only fires ``tab-close-event``,
closing is up to the application.
"""

from html import escape
from typing import Any

from ..core.errors import IncompatibleTypeError, NotFoundError
from ..core.logging_config import get_logger
from ..data import DataObject
from ..events import fire, names
from ..properties import bool_property, enum_property, string_property, tags, value_to_int
from ..styles import CSSDeclarations
from ..values import parse_int
from ..values.enums import TabsPosition
from ..views import View, ViewsContainer, register_view_creator

logger = get_logger(__name__)

# Child properties shown in its tab
_PAGE_TAGS = (tags.TITLE, tags.ICON, tags.TAB_CLOSE_BUTTON)

_TAB_BAR_TAGS = frozenset(
    {tags.TABS, tags.TAB_BAR_STYLE, tags.TAB_STYLE, tags.CURRENT_TAB_STYLE, tags.TAB_CLOSE_BUTTON}
)

_VERTICAL = (TabsPosition.LEFT, TabsPosition.RIGHT, TabsPosition.LEFT_LIST, TabsPosition.RIGHT_LIST)

_BAR_PLACEMENT = {
    TabsPosition.TOP: "grid-row: 1 / 2; grid-column: 1 / 2;",
    TabsPosition.LEFT: "grid-row: 1 / 2; grid-column: 1 / 2;",
    TabsPosition.LEFT_LIST: "grid-row: 1 / 2; grid-column: 1 / 2;",
    TabsPosition.RIGHT: "grid-row: 1 / 2; grid-column: 2 / 3;",
    TabsPosition.RIGHT_LIST: "grid-row: 1 / 2; grid-column: 2 / 3;",
    TabsPosition.BOTTOM: "grid-row: 2 / 3; grid-column: 1 / 2;",
}

_PAGE_PLACEMENT = {
    TabsPosition.TOP: "grid-row: 2 / 3; grid-column: 1 / 2;",
    TabsPosition.LEFT: "grid-row: 1 / 2; grid-column: 2 / 3;",
    TabsPosition.LEFT_LIST: "grid-row: 1 / 2; grid-column: 2 / 3;",
}


class TabsLayout(ViewsContainer):
    """
    Container showing one child at a time, selected through a tab bar.

    ``current`` is the selected index (-1 while empty); every change of it
    fires ``current-tab-changed`` with ``(new, old)``.
    """

    view_tag = "TabsLayout"
    system_class = "ruiTabsLayout"

    def __init__(self, session, params: dict[str, Any] | DataObject | None = None):
        self._tab_changes: list[tuple[int, int]] = []
        super().__init__(session, params)

    # ========================================================================
    # Current tab
    # ========================================================================

    def current(self) -> int:
        value = self._properties.get(tags.CURRENT)
        if value is not None:
            return value
        return 0 if self._views else -1

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == tags.CURRENT:
            index = value_to_int(value, self.session, tag)
            if index is None:
                raise IncompatibleTypeError(f"invalid tab index: {value!r}", tag=tag, value=repr(value))
            if index < 0 or index >= len(self._views):
                raise NotFoundError(f"tab index {index} is out of range", tag=tag, count=len(self._views))
            return self._select(index)
        return super()._set(tag, value)

    def _remove(self, tag: str) -> list[str]:
        if tag == tags.CURRENT:
            return self._select(0) if self._views else super()._remove(tag)
        return super()._remove(tag)

    def _select(self, index: int) -> list[str]:
        old = self.current()
        if index == old:
            return []
        self._properties[tags.CURRENT] = index
        self._tab_changes.append((index, old))
        return [tags.CURRENT]

    def _apply_changes(self, changed: list[str]) -> None:
        super()._apply_changes(changed)
        changes, self._tab_changes = self._tab_changes, []
        for new, old in changes:
            fire(self.listeners(names.CURRENT_TAB_CHANGED_EVENT), self, new, old)

    # ========================================================================
    # Children
    # ========================================================================

    def _attach(self, view: View) -> None:
        super()._attach(view)
        for tag in _PAGE_TAGS:
            view.set_change_listener(tag, self._page_changed)

    def _page_changed(self, view: Any, tag: str) -> None:
        if self._live():
            self.update_inner_html()

    def append(self, view: View | None) -> None:
        first = view is not None and not self._views
        super().append(view)
        if first:
            self._apply_changes(self._select(0))

    def insert(self, view: View | None, index: int) -> None:
        if view is not None and 0 <= index < len(self._views):
            current = self.current()
            if current >= index:
                # Same page stays selected
                self._properties[tags.CURRENT] = current + 1
        super().insert(view, index)

    def remove_view(self, index: int) -> View | None:
        if index < 0 or index >= len(self._views):
            return super().remove_view(index)
        old = self.current()
        current = old
        if index < old or (index == old and old > 0):
            current -= 1
        if len(self._views) == 1:
            current = -1
            self._properties.pop(tags.CURRENT, None)
        else:
            self._properties[tags.CURRENT] = current
        view = super().remove_view(index)
        if view is not None:
            for tag in _PAGE_TAGS:
                view.set_change_listener(tag, None)
        self._notify_changed(tags.CURRENT)
        if index == old:
            fire(self.listeners(names.CURRENT_TAB_CHANGED_EVENT), self, current, old)
        return view

    def _send_removal(self, view: View) -> None:
        self.update_inner_html()

    def _send_append(self, view: View) -> None:
        self.update_inner_html()

    # ========================================================================
    # Styles
    # ========================================================================

    def tabs_location(self) -> int:
        return enum_property(self, tags.TABS, self.session)

    def tab_bar_style(self) -> str:
        return string_property(self, tags.TAB_BAR_STYLE, self.session) or "ruiTabsBar"

    def inactive_tab_style(self) -> str:
        style = string_property(self, tags.TAB_STYLE, self.session)
        if style:
            return style
        return "ruiVerticalTab" if self.tabs_location() in (TabsPosition.LEFT, TabsPosition.RIGHT) else "ruiTab"

    def active_tab_style(self) -> str:
        style = string_property(self, tags.CURRENT_TAB_STYLE, self.session)
        if style:
            return style
        if self.tabs_location() in (TabsPosition.LEFT, TabsPosition.RIGHT):
            return "ruiCurrentVerticalTab"
        return "ruiCurrentTab"

    def css_style(self, builder: CSSDeclarations) -> None:
        super().css_style(builder)
        location = self.tabs_location()
        if location == TabsPosition.TOP:
            builder.add("grid-template-rows", "auto 1fr")
        elif location == TabsPosition.BOTTOM:
            builder.add("grid-template-rows", "1fr auto")
        elif location in (TabsPosition.LEFT, TabsPosition.LEFT_LIST):
            builder.add("grid-template-columns", "auto 1fr")
        elif location in (TabsPosition.RIGHT, TabsPosition.RIGHT_LIST):
            builder.add("grid-template-columns", "1fr auto")

    # ========================================================================
    # HTML
    # ========================================================================

    def current_tab_html_id(self) -> str:
        return f"{self.html_id()}-{self.current()}"

    def html_properties(self, buffer: list[str], disabled: bool) -> None:
        super().html_properties(buffer, disabled)
        buffer.append(f' data-inactiveTabStyle="{escape(self.inactive_tab_style())}"')
        buffer.append(f' data-activeTabStyle="{escape(self.active_tab_style())}"')
        buffer.append(f' data-current="{self.current_tab_html_id()}"')

    def _tab_close_button(self, view: View) -> bool:
        value = bool_property(view, tags.TAB_CLOSE_BUTTON, self.session)
        if value is None:
            value = bool_property(self, tags.TAB_CLOSE_BUTTON, self.session)
        return bool(value)

    def _tab_html(self, buffer: list[str], index: int, view: View, active: bool) -> None:
        html_id = self.html_id()
        style = self.active_tab_style() if active else self.inactive_tab_style()
        buffer.append(
            f'<div id="{html_id}-{index}" class="{escape(style)}" tabindex="0"'
            f" onclick=\"tabClickEvent(this, '{html_id}', {index}, event)\""
            f" onkeydown=\"tabKeyClickEvent('{html_id}', {index}, event)\""
            f' data-container="{html_id}" data-view="{html_id}-page{index}">'
        )
        icon = string_property(view, tags.ICON, self.session)
        if icon and icon.startswith("@"):
            icon = self.session.image_constant(icon[1:])
        if icon:
            buffer.append(f'<img src="{escape(icon)}">')

        title = string_property(view, tags.TITLE, self.session) or "No title"
        if not bool_property(self, tags.NOT_TRANSLATE, self.session):
            title = self.session.get_string(title)
        buffer.append(f"<div>{escape(title, quote=False)}</div>")

        if self._tab_close_button(view):
            buffer.append(
                '<div class="ruiTabCloseButton" tabindex="0"'
                f" onclick=\"tabCloseClickEvent(this, '{html_id}', {index}, event)\""
                f" onkeydown=\"tabCloseKeyClickEvent('{html_id}', {index}, event)\">✕</div>"
            )
        buffer.append("</div>")

    def html_subviews(self, buffer: list[str]) -> None:
        if not self._views:
            return
        html_id = self.html_id()
        current = self.current()
        location = self.tabs_location()

        if location != TabsPosition.HIDDEN:
            flow = "column" if location in _VERTICAL else "row"
            buffer.append(
                f'<div class="{escape(self.tab_bar_style())}" style="display: flex; {_BAR_PLACEMENT[location]}'
                f' flex-flow: {flow} nowrap; justify-content: flex-start; align-items: stretch;">'
            )
            for index, view in enumerate(self._views):
                self._tab_html(buffer, index, view, index == current)
            buffer.append("</div>")

        placement = _PAGE_PLACEMENT.get(location, "grid-row: 1 / 2; grid-column: 1 / 2;")
        for index, view in enumerate(self._views):
            hidden = "" if index == current else " display: none;"
            buffer.append(f'<div id="{html_id}-page{index}" style="position: relative; {placement}{hidden}">')
            view.render(buffer)
            buffer.append("</div>")

    def property_changed(self, tag: str) -> None:
        html_id = self.html_id()
        if tag == tags.CURRENT:
            self.session.call_function("activateTab", html_id, self.current())
        elif tag in _TAB_BAR_TAGS:
            self.session.update_property(html_id, "data-inactiveTabStyle", self.inactive_tab_style())
            self.session.update_property(html_id, "data-activeTabStyle", self.active_tab_style())
            self.update_inner_html()
        else:
            super().property_changed(tag)

    # ========================================================================
    # Events
    # ========================================================================

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command == "tabClick":
            number = parse_int(data.property_value("number") or "")
            if number is not None and 0 <= number < len(self._views):
                self._apply_changes(self._select(number))
            return True
        if command == "tabCloseClick":
            number = parse_int(data.property_value("number") or "")
            if number is not None:
                fire(self.listeners(names.TAB_CLOSE_EVENT), self, number)
            return True
        return super().handle_command(command, data)


register_view_creator(TabsLayout)
