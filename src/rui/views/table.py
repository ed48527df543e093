"""
Table View
A ``<table>`` whose cells come from a table adapter.

``content`` is a list of rows (a row may be a list or a comma-separated
string) or a ``TableAdapter``. The first ``head-height`` rows go to
``<thead>`` and the last ``foot-height`` rows to ``<tfoot>``. With a
``selection-mode`` of ``cell`` or ``row`` the table is focusable and
clicks move ``current``.
"""

from html import escape
from typing import Any

from ..core.errors import IncompatibleTypeError, InvalidFormatError
from ..core.logging_config import get_logger
from ..data import DataObject
from ..events import fire, names
from ..properties import bool_property, enum_css_value, enum_property, int_property, size_property, tags
from ..styles import CSSBuilder, CSSDeclarations, bounds_property, split_values
from ..values import Color, format_float, parse_int
from .factory import register_view_creator
from .view import View

logger = get_logger(__name__)

# selection-mode values
NO_SELECTION = 0
CELL_SELECTION = 1
ROW_SELECTION = 2

NO_CURRENT = (-1, -1)

_TABLE_TAGS = frozenset(
    {
        tags.CONTENT, tags.HEAD_HEIGHT, tags.FOOT_HEIGHT, tags.SELECTION_MODE, tags.CURRENT,
        tags.CELL_BORDER, tags.CELL_PADDING, tags.TABLE_VERTICAL_ALIGN,
        names.TABLE_CELL_CLICKED_EVENT, names.TABLE_ROW_CLICKED_EVENT,
    }
)


class TableAdapter:
    """Source of the cells of a ``TableView``."""

    def row_count(self) -> int:
        raise NotImplementedError

    def column_count(self) -> int:
        raise NotImplementedError

    def cell(self, row: int, column: int) -> Any:
        raise NotImplementedError


class SimpleTableAdapter(TableAdapter):
    """Cells held in a list of rows; short rows are padded with empty cells."""

    def __init__(self, cells: list[list[Any]]):
        self.cells = [list(row) for row in cells]

    def row_count(self) -> int:
        return len(self.cells)

    def column_count(self) -> int:
        return max((len(row) for row in self.cells), default=0)

    def cell(self, row: int, column: int) -> Any:
        if 0 <= row < len(self.cells) and 0 <= column < len(self.cells[row]):
            return self.cells[row][column]
        return None


def _incompatible(tag: str, value: Any) -> IncompatibleTypeError:
    return IncompatibleTypeError(
        f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
    )


def table_adapter(value: Any) -> TableAdapter | None:
    """
    Adapter of a ``content`` value; None for an empty table.

    Raises:
        IncompatibleTypeError: If the value is not a table
    """
    if isinstance(value, TableAdapter):
        return value
    if not isinstance(value, (list, tuple)):
        raise _incompatible(tags.CONTENT, value)
    rows = []
    for row in value:
        if isinstance(row, str):
            rows.append(split_values(row))
        elif isinstance(row, (list, tuple)):
            rows.append(list(row))
        else:
            raise _incompatible(tags.CONTENT, row)
    return SimpleTableAdapter(rows) if rows else None


def cell_index(value: Any) -> tuple[int, int]:
    """
    ``(row, column)`` of a ``current`` value: a pair, a row number or ``"row:column"``.

    Raises:
        IncompatibleTypeError: If the value has no cell form
        InvalidFormatError: If a string is not a row or a ``row:column`` pair
    """
    if isinstance(value, bool):
        raise _incompatible(tags.CURRENT, value)
    if isinstance(value, int):
        return value, -1
    if isinstance(value, (list, tuple)) and len(value) == 2:
        row, column = value
        if isinstance(row, int) and isinstance(column, int) and not isinstance(row, bool):
            return row, column
        raise _incompatible(tags.CURRENT, value)
    if isinstance(value, str):
        numbers = [parse_int(part) for part in value.split(":")]
        if len(numbers) in (1, 2) and None not in numbers:
            return (numbers[0], numbers[1] if len(numbers) == 2 else -1)
        raise InvalidFormatError(f'invalid "current" value: "{value}"', tag=tags.CURRENT, value=value)
    raise _incompatible(tags.CURRENT, value)


class TableView(View):
    """
    Table of text, numbers, check marks, color swatches and views.

    ``table-cell-clicked`` and ``table-cell-selected`` listeners get
    ``(row, column)``; ``table-row-clicked`` and ``table-row-selected``
    listeners get the row.
    """

    view_tag = "TableView"
    system_class = "ruiTableView"

    # ========================================================================
    # Property storage
    # ========================================================================

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == tags.CONTENT:
            adapter = table_adapter(value)
            if adapter is None:
                return self._remove(tag)
            return self._set_adapter(adapter)
        if tag == tags.CURRENT:
            current = cell_index(value)
            return self._store(tag, current)
        return super()._set(tag, value)

    def _remove(self, tag: str) -> list[str]:
        if tag == tags.CONTENT:
            return self._set_adapter(None)
        return super()._remove(tag)

    def _set_adapter(self, adapter: TableAdapter | None) -> list[str]:
        if adapter is None and tags.CONTENT not in self._properties:
            return []
        old_views = self.subviews()
        if adapter is None:
            del self._properties[tags.CONTENT]
        else:
            self._properties[tags.CONTENT] = adapter
        new_views = self.subviews()
        for view in old_views:
            if view not in new_views:
                view.detach()
        return [tags.CONTENT]

    def adapter(self) -> TableAdapter | None:
        return self._properties.get(tags.CONTENT)

    def subviews(self) -> list[View]:
        adapter = self.adapter()
        if adapter is None:
            return []
        result = []
        for row in range(adapter.row_count()):
            for column in range(adapter.column_count()):
                value = adapter.cell(row, column)
                if isinstance(value, View):
                    result.append(value)
        return result

    def selection_mode(self) -> int:
        return enum_property(self, tags.SELECTION_MODE, self.session)

    def current(self) -> tuple[int, int]:
        """``(row, column)`` of the current cell; -1 where unset."""
        return self._properties.get(tags.CURRENT) or NO_CURRENT

    def focusable(self) -> bool:
        value = bool_property(self, tags.FOCUSABLE, self.session)
        if value is not None:
            return value
        return self.selection_mode() != NO_SELECTION

    def _apply_changes(self, changed: list[str]) -> None:
        super()._apply_changes(changed)
        if tags.CURRENT in changed:
            row, column = self.current()
            mode = self.selection_mode()
            if mode == CELL_SELECTION:
                fire(self.listeners(names.TABLE_CELL_SELECTED_EVENT), self, row, column)
            elif mode == ROW_SELECTION:
                fire(self.listeners(names.TABLE_ROW_SELECTED_EVENT), self, row)

    # ========================================================================
    # HTML
    # ========================================================================

    def html_tag(self) -> str:
        return "table"

    def css_style(self, builder: CSSDeclarations) -> None:
        gap = size_property(self, tags.GAP, self.session)
        if gap is not None and not gap.is_auto():
            builder.add("border-collapse", "separate")
            builder.add("border-spacing", gap.css_string("0"))
        else:
            builder.add("border-collapse", "collapse")
        super().css_style(builder)

    def cell_style(self) -> str:
        """Inline style shared by every cell."""
        builder = CSSBuilder()
        if self._get_bounds(tags.CELL_PADDING) is not None:
            bounds_property(self, tags.CELL_PADDING, self.session).css_value("padding", builder)
        border = self.composite(tags.CELL_BORDER)
        if border is not None:
            border.css_style(builder, self.session)
        align = enum_css_value(self, tags.TABLE_VERTICAL_ALIGN, self.session)
        if align:
            builder.add("vertical-align", align)
        return builder.finish()

    def html_properties(self, buffer: list[str], disabled: bool) -> None:
        super().html_properties(buffer, disabled)
        adapter = self.adapter()
        if adapter is not None:
            buffer.append(f' data-rows="{adapter.row_count()}" data-columns="{adapter.column_count()}"')

    def _section_rows(self, rows: int) -> tuple[tuple[str, int, int], ...]:
        head = min(max(int_property(self, tags.HEAD_HEIGHT, self.session) or 0, 0), rows)
        foot = min(max(int_property(self, tags.FOOT_HEIGHT, self.session) or 0, 0), rows - head)
        return (("thead", 0, head), ("tbody", head, rows - foot), ("tfoot", rows - foot, rows))

    def html_subviews(self, buffer: list[str]) -> None:
        adapter = self.adapter()
        if adapter is None:
            return
        html_id = self.html_id()
        mode = self.selection_mode()
        current_row, current_column = self.current()
        row_click = mode == ROW_SELECTION or bool(self.listeners(names.TABLE_ROW_CLICKED_EVENT))
        cell_click = mode == CELL_SELECTION or bool(self.listeners(names.TABLE_CELL_CLICKED_EVENT))
        style = self.cell_style()
        columns = adapter.column_count()

        for section, start, end in self._section_rows(adapter.row_count()):
            if start >= end:
                continue
            cell_tag = "th" if section == "thead" else "td"
            buffer.append(f"<{section}>")
            for row in range(start, end):
                buffer.append(f'<tr id="{html_id}-{row}" data-row="{row}"')
                if mode == ROW_SELECTION and row == current_row:
                    buffer.append(' class="ruiTableRowSelected"')
                if row_click:
                    buffer.append(' onclick="tableRowClickEvent(this, event)"')
                buffer.append(">")
                for column in range(columns):
                    buffer.append(f'<{cell_tag} id="{html_id}-{row}-{column}"')
                    buffer.append(f' data-row="{row}" data-column="{column}"')
                    if mode == CELL_SELECTION and (row, column) == (current_row, current_column):
                        buffer.append(' class="ruiTableCellSelected"')
                    if style:
                        buffer.append(f' style="{escape(style)}"')
                    if cell_click:
                        buffer.append(' onclick="tableCellClickEvent(this, event)"')
                    buffer.append(">")
                    self._cell_html(adapter.cell(row, column), buffer)
                    buffer.append(f"</{cell_tag}>")
                buffer.append("</tr>")
            buffer.append(f"</{section}>")

    def _cell_html(self, value: Any, buffer: list[str]) -> None:
        if value is None:
            return
        if isinstance(value, View):
            value.set_parent_html_id(self.html_id())
            value.render(buffer)
        elif isinstance(value, bool):
            buffer.append("☑" if value else "☐")
        elif isinstance(value, Color):
            buffer.append(
                '<div style="display: inline-block; width: 1em; height: 1em; '
                f'background-color: {value.css_string()};"></div>'
            )
        elif isinstance(value, int):
            buffer.append(str(value))
        elif isinstance(value, float):
            buffer.append(format_float(value))
        elif isinstance(value, str):
            buffer.append(escape(self.session.get_string(value)))
        else:
            buffer.append(escape(str(value)))

    def property_changed(self, tag: str) -> None:
        if tag in _TABLE_TAGS:
            self.update_inner_html()
            if tag == tags.SELECTION_MODE:
                self.session.update_property(self.html_id(), "tabindex", self.tab_index())
            elif tag == tags.CONTENT:
                adapter = self.adapter()
                rows, columns = (adapter.row_count(), adapter.column_count()) if adapter else (0, 0)
                self.session.update_property(self.html_id(), "data-rows", rows)
                self.session.update_property(self.html_id(), "data-columns", columns)
        else:
            super().property_changed(tag)

    # ========================================================================
    # Events
    # ========================================================================

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command in ("rowClick", "currentRow"):
            row = self._number(data, "row")
            if row is None:
                return True
            if self.selection_mode() == ROW_SELECTION:
                self.set(tags.CURRENT, (row, -1))
            if command == "rowClick":
                fire(self.listeners(names.TABLE_ROW_CLICKED_EVENT), self, row)
        elif command in ("cellClick", "currentCell"):
            row = self._number(data, "row")
            column = self._number(data, "column")
            if row is None or column is None:
                return True
            if self.selection_mode() == CELL_SELECTION:
                self.set(tags.CURRENT, (row, column))
            if command == "cellClick":
                fire(self.listeners(names.TABLE_CELL_CLICKED_EVENT), self, row, column)
        else:
            return super().handle_command(command, data)
        return True

    def _number(self, data: DataObject, key: str) -> int | None:
        text = data.property_value(key) or ""
        number = parse_int(text)
        if number is None or number < 0:
            logger.error("invalid_table_index", key=key, value=text)
            return None
        return number


register_view_creator(TableView)
