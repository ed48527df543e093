"""
List View
A list of items supplied by an adapter.

Items are views; plain strings become text views. The current item is
highlighted with ``current-style`` while the list has focus and with
``current-inactive-style`` otherwise. ``checkbox`` puts a check mark in
front of every item, and clicks toggle the indexes kept in ``checked``.
"""

from html import escape
from typing import Any

from ..core.errors import IncompatibleTypeError, InvalidFormatError
from ..core.logging_config import get_logger
from ..data import DataObject
from ..events import fire, names
from ..properties import enum_property, int_property, string_property, tags
from ..values import parse_int
from .factory import create_view_from_object, register_view_creator
from .text import TextView
from .view import View

logger = get_logger(__name__)

# checkbox values
NO_CHECKBOX = 0
SINGLE_CHECKBOX = 1
MULTIPLE_CHECKBOX = 2

_ITEM_TAGS = frozenset(
    {
        tags.ITEMS, tags.CURRENT, tags.CHECKED, tags.CHECKBOX, tags.LIST_ITEM_STYLE,
        tags.CURRENT_STYLE, tags.CURRENT_INACTIVE_STYLE,
    }
)


def _incompatible(tag: str, value: Any) -> IncompatibleTypeError:
    return IncompatibleTypeError(
        f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
    )


def text_list(tag: str, value: Any) -> list[str]:
    """
    Text items of a value: one string, or a list of strings and numbers.

    Raises:
        IncompatibleTypeError: If an item is not text
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        result = []
        for item in value:
            if isinstance(item, str):
                result.append(item)
            elif isinstance(item, (int, float)) and not isinstance(item, bool):
                result.append(str(item))
            else:
                raise _incompatible(tag, item)
        return result
    raise _incompatible(tag, value)


def index_list(tag: str, value: Any) -> list[int]:
    """
    Sorted distinct indexes of a value: an int, ``"1, 3"`` or a list.

    Raises:
        IncompatibleTypeError: If an item is not an index
        InvalidFormatError: If a string item is not an integer
    """
    if value is None:
        return []
    if isinstance(value, bool):
        raise _incompatible(tag, value)
    if isinstance(value, int):
        return [value]
    if isinstance(value, str):
        items: list[Any] = [item for item in value.split(",") if item.strip()]
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        raise _incompatible(tag, value)

    result = set()
    for item in items:
        if isinstance(item, str):
            number = parse_int(item)
            if number is None:
                raise InvalidFormatError(f'invalid "{tag}" value: "{item}"', tag=tag, value=item)
            result.add(number)
        elif isinstance(item, int) and not isinstance(item, bool):
            result.add(item)
        else:
            raise _incompatible(tag, item)
    return sorted(result)


class ListAdapter:
    """Source of the items of a ``ListView``."""

    def list_size(self) -> int:
        raise NotImplementedError

    def list_item(self, index: int, session) -> View | None:
        raise NotImplementedError

    def is_list_item_enabled(self, index: int) -> bool:
        return True


class TextListAdapter(ListAdapter):
    """Strings shown as text views, built on first use."""

    def __init__(self, items: list[str]):
        self.items = list(items)
        self._views: dict[int, View] = {}

    def list_size(self) -> int:
        return len(self.items)

    def list_item(self, index: int, session) -> View | None:
        if not 0 <= index < len(self.items):
            return None
        view = self._views.get(index)
        if view is None:
            view = TextView(session, {tags.TEXT: self.items[index]})
            self._views[index] = view
        return view


class ViewListAdapter(ListAdapter):
    def __init__(self, views: list[View]):
        self.views = list(views)

    def list_size(self) -> int:
        return len(self.views)

    def list_item(self, index: int, session) -> View | None:
        return self.views[index] if 0 <= index < len(self.views) else None


class ListView(View):
    """
    Selectable list of adapter items.

    ``list-item-clicked`` fires with the index of a clicked item,
    ``list-item-selected`` with the new ``current`` index and
    ``list-item-checked`` with the new ``checked`` list.
    """

    view_tag = "ListView"
    system_class = "ruiListView"
    focusable_by_default = True

    aliases = {**View.aliases, "wrap": tags.LIST_WRAP}

    # ========================================================================
    # Property storage
    # ========================================================================

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == tags.ITEMS:
            return self._set_adapter(self._adapter_of(value))
        if tag == tags.CHECKED:
            checked = index_list(tag, value)
            return self._store(tag, checked) if checked else self._remove(tag)
        return super()._set(tag, value)

    def _remove(self, tag: str) -> list[str]:
        if tag == tags.ITEMS:
            return self._set_adapter(None)
        return super()._remove(tag)

    def _adapter_of(self, value: Any) -> ListAdapter | None:
        if isinstance(value, ListAdapter):
            return value
        if isinstance(value, (str, View, DataObject)):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise _incompatible(tags.ITEMS, value)
        if not value:
            return None
        if all(isinstance(item, str) for item in value):
            return TextListAdapter(value)

        views: list[View] = []
        for item in value:
            if isinstance(item, View):
                views.append(item)
            elif isinstance(item, str):
                views.append(TextView(self.session, {tags.TEXT: item}))
            elif isinstance(item, DataObject):
                view = create_view_from_object(self.session, item)
                if view is not None:
                    views.append(view)
            else:
                raise _incompatible(tags.ITEMS, item)
        return ViewListAdapter(views)

    def _set_adapter(self, adapter: ListAdapter | None) -> list[str]:
        if adapter is None and tags.ITEMS not in self._properties:
            return []
        old_views = self.subviews()
        if adapter is None:
            del self._properties[tags.ITEMS]
        else:
            self._properties[tags.ITEMS] = adapter
        new_views = self.subviews()
        for view in old_views:
            if view not in new_views:
                view.detach()
        return [tags.ITEMS]

    def adapter(self) -> ListAdapter | None:
        return self._properties.get(tags.ITEMS)

    def subviews(self) -> list[View]:
        adapter = self.adapter()
        if adapter is None:
            return []
        result = []
        for index in range(adapter.list_size()):
            view = adapter.list_item(index, self.session)
            if view is not None:
                result.append(view)
        return result

    def current(self) -> int:
        """Index of the current item, or -1."""
        current = int_property(self, tags.CURRENT, self.session)
        return -1 if current is None or current < 0 else current

    def checked(self) -> list[int]:
        return list(self._properties.get(tags.CHECKED) or [])

    def _apply_changes(self, changed: list[str]) -> None:
        super()._apply_changes(changed)
        if tags.CURRENT in changed:
            fire(self.listeners(names.LIST_ITEM_SELECTED_EVENT), self, self.current())
        if tags.CHECKED in changed:
            fire(self.listeners(names.LIST_ITEM_CHECKED_EVENT), self, self.checked())

    # ========================================================================
    # HTML
    # ========================================================================

    def _current_style(self) -> str:
        if self.has_focus:
            return string_property(self, tags.CURRENT_STYLE, self.session) or "ruiListItemFocused"
        return string_property(self, tags.CURRENT_INACTIVE_STYLE, self.session) or "ruiListItemSelected"

    def html_subviews(self, buffer: list[str]) -> None:
        adapter = self.adapter()
        if adapter is None:
            return
        html_id = self.html_id()
        current = self.current()
        checkbox = enum_property(self, tags.CHECKBOX, self.session)
        checked = set(self.checked())
        item_style = string_property(self, tags.LIST_ITEM_STYLE, self.session) or "ruiListItem"
        current_style = self._current_style()

        for index in range(adapter.list_size()):
            item_class = f"ruiView {item_style}"
            if index == current:
                item_class += f" {current_style}"
            enabled = adapter.is_list_item_enabled(index)
            buffer.append(
                f'<div id="{html_id}-{index}" class="{escape(item_class)}" data-index="{index}"'
                f' data-disabled="{"0" if enabled else "1"}" onclick="listItemClickEvent(this, event)">'
            )
            if checkbox != NO_CHECKBOX:
                mark = "☑" if index in checked else "☐"
                buffer.append(f'<div class="ruiListItemCheckbox">{mark}</div>')
            view = adapter.list_item(index, self.session)
            if view is not None:
                view.set_parent_html_id(html_id)
                view.render(buffer)
            buffer.append("</div>")

    def property_changed(self, tag: str) -> None:
        if tag in _ITEM_TAGS:
            self.update_inner_html()
        else:
            super().property_changed(tag)

    # ========================================================================
    # Events
    # ========================================================================

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command == "itemClick":
            index = self._item_index(data)
            if index is not None and not self.is_disabled():
                self.on_item_click(index)
        elif command == "itemSelected":
            index = self._item_index(data)
            if index is not None:
                self.set(tags.CURRENT, index)
        elif command == "itemUnselected":
            if self.current() >= 0:
                self.set(tags.CURRENT, -1)
        elif command in (names.FOCUS_EVENT, names.LOST_FOCUS_EVENT):
            super().handle_command(command, data)
            if self.current() >= 0:
                self.update_inner_html()
        else:
            return super().handle_command(command, data)
        return True

    def _item_index(self, data: DataObject) -> int | None:
        text = data.property_value("number") or ""
        index = parse_int(text)
        adapter = self.adapter()
        if index is None or adapter is None or not 0 <= index < adapter.list_size():
            logger.error("list_item_out_of_range", number=text)
            return None
        return index

    def on_item_click(self, index: int) -> None:
        """Make a clicked item current, update the check marks and notify listeners."""
        adapter = self.adapter()
        if adapter is not None and not adapter.is_list_item_enabled(index):
            return
        self.set(tags.CURRENT, index)

        checkbox = enum_property(self, tags.CHECKBOX, self.session)
        if checkbox == SINGLE_CHECKBOX:
            if self.checked() != [index]:
                self.set(tags.CHECKED, [index])
        elif checkbox == MULTIPLE_CHECKBOX:
            checked = self.checked()
            if index in checked:
                checked.remove(index)
            else:
                checked.append(index)
            self.set(tags.CHECKED, checked)

        fire(self.listeners(names.LIST_ITEM_CLICKED_EVENT), self, index)


register_view_creator(ListView)
