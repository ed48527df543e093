"""Tests for the list view and the table view."""

import pytest

from rui.data import parse_data
from rui.values import Color
from rui.views import ListView, TableView, TextListAdapter, TextView, ViewListAdapter
from rui.views.table import cell_index


def event(text: str):
    return parse_data(text)


class EveryOtherAdapter(TextListAdapter):
    """Text items whose odd indexes are disabled."""

    def is_list_item_enabled(self, index: int) -> bool:
        return index % 2 == 0


def recorder(seen):
    return {
        "list-item-clicked": lambda index: seen.append(("clicked", index)),
        "list-item-selected": lambda index: seen.append(("selected", index)),
        "list-item-checked": lambda checked: seen.append(("checked", checked)),
    }


# ============================================================================
# List View
# ============================================================================

@pytest.mark.unit
def test_list_view_render(offline_session):
    """Test every item is wrapped and the current one marked."""
    list_view = ListView(offline_session, {"items": ["a", "b", "c"], "current": 1})
    html = list_view.html()
    assert html.startswith('<div id="id000001" class="ruiListView ruiView"')
    assert (
        '<div id="id000001-0" class="ruiView ruiListItem" data-index="0" data-disabled="0"'
        ' onclick="listItemClickEvent(this, event)">'
    ) in html
    assert '<div id="id000001-1" class="ruiView ruiListItem ruiListItemSelected" data-index="1"' in html
    assert [view.text() for view in list_view.subviews()] == ["a", "b", "c"]


@pytest.mark.unit
def test_list_view_item_styles(offline_session):
    """Test custom item and current styles replace the defaults."""
    list_view = ListView(offline_session, {
        "items": ["a", "b"],
        "current": 0,
        "list-item-style": "row",
        "current-inactive-style": "picked",
    })
    html = list_view.html()
    assert 'class="ruiView row picked" data-index="0"' in html
    assert 'class="ruiView row" data-index="1"' in html


@pytest.mark.unit
def test_list_view_check_marks(offline_session):
    """Test checkbox modes render a mark in front of every item."""
    list_view = ListView(offline_session, {"items": ["a", "b", "c"], "checkbox": "multiple", "checked": "0, 2"})
    html = list_view.html()
    assert html.count('<div class="ruiListItemCheckbox">☑</div>') == 2
    assert html.count('<div class="ruiListItemCheckbox">☐</div>') == 1
    assert list_view.checked() == [0, 2]

    plain = ListView(offline_session, {"items": ["a"]}).html()
    assert "ruiListItemCheckbox" not in plain


@pytest.mark.unit
def test_list_view_rejects_invalid_values(offline_session):
    """Test items and checked values of other types are refused."""
    list_view = ListView(offline_session)
    assert list_view.set("items", 5) is False
    assert list_view.set("checked", "1, two") is False
    assert list_view.subviews() == []
    assert list_view.current() == -1


@pytest.mark.unit
def test_view_items_keep_their_views(offline_session):
    """Test view items are used as they are and strings become text views."""
    label = TextView(offline_session, "x")
    list_view = ListView(offline_session, {"items": [label, "y"]})
    assert isinstance(list_view.adapter(), ViewListAdapter)
    views = list_view.subviews()
    assert views[0] is label
    assert views[1].text() == "y"


@pytest.mark.unit
def test_replaced_items_are_detached(session, live_root):
    """Test views dropped from the items leave the session."""
    first = TextView(session, "first")
    list_view = live_root(ListView(session, {"items": [first]}))
    first_id = first.html_id()
    assert session.view_by_html_id(first_id) is first

    list_view.set("items", [TextView(session, "second")])
    assert session.view_by_html_id(first_id) is None
    assert [view.text() for view in list_view.subviews()] == ["second"]


@pytest.mark.unit
def test_click_with_single_checkbox(session, bridge, live_root):
    """Test a click selects the item, checks it alone and reports the click last."""
    seen = []
    list_view = live_root(ListView(session, {"items": ["a", "b", "c"], "checkbox": "single", **recorder(seen)}))
    session.handle_message(event("itemClick{id=id000001, number=1}"))
    assert seen == [("selected", 1), ("checked", [1]), ("clicked", 1)]
    assert list_view.current() == 1
    assert bridge.text().startswith('updateInnerHTML("id000001", ')

    seen.clear()
    session.handle_message(event("itemClick{id=id000001, number=2}"))
    assert seen == [("selected", 2), ("checked", [2]), ("clicked", 2)]

    seen.clear()
    session.handle_message(event("itemClick{id=id000001, number=2}"))
    assert seen == [("clicked", 2)]


@pytest.mark.unit
def test_click_with_multiple_checkbox(session, live_root):
    """Test clicks toggle their item in the checked list."""
    list_view = live_root(ListView(session, {"items": ["a", "b", "c"], "checkbox": "multiple"}))
    for number in (0, 2, 0):
        session.handle_message(event(f"itemClick{{id=id000001, number={number}}}"))
    assert list_view.checked() == [2]


@pytest.mark.unit
def test_disabled_items_ignore_clicks(session, live_root):
    """Test disabled items render as such and clicks on them do nothing."""
    seen = []
    list_view = live_root(ListView(session, {"items": EveryOtherAdapter(["a", "b", "c"]), **recorder(seen)}))
    assert 'data-index="1" data-disabled="1"' in list_view.html()

    session.handle_message(event("itemClick{id=id000001, number=1}"))
    session.handle_message(event("itemClick{id=id000001, number=9}"))
    assert seen == []
    assert list_view.current() == -1


@pytest.mark.unit
def test_keyboard_selection(session, live_root):
    """Test itemSelected moves the current item and itemUnselected clears it."""
    seen = []
    list_view = live_root(ListView(session, {"items": ["a", "b", "c"], **recorder(seen)}))
    session.handle_message(event("itemSelected{id=id000001, number=2}"))
    assert list_view.current() == 2
    session.handle_message(event("itemUnselected{id=id000001}"))
    assert list_view.current() == -1
    assert seen == [("selected", 2), ("selected", -1)]


# ============================================================================
# Table View
# ============================================================================

TABLE = [["Name", "Age"], ["Ann", 30], ["Bob", 2.5]]


@pytest.mark.unit
def test_table_sections(offline_session):
    """Test head rows use th cells and body rows td cells."""
    table = TableView(offline_session, {"content": TABLE, "head-height": 1})
    html = table.html()
    assert html.startswith('<table id="id000001" class="ruiTableView ruiView"')
    assert "border-collapse: collapse;" in html
    assert ' data-rows="3" data-columns="2"' in html
    assert (
        '<thead><tr id="id000001-0" data-row="0">'
        '<th id="id000001-0-0" data-row="0" data-column="0">Name</th>'
    ) in html
    assert (
        '<tbody><tr id="id000001-1" data-row="1">'
        '<td id="id000001-1-0" data-row="1" data-column="0">Ann</td>'
        '<td id="id000001-1-1" data-row="1" data-column="1">30</td></tr>'
    ) in html
    assert '<td id="id000001-2-1" data-row="2" data-column="1">2.5</td></tr></tbody></table>' in html
    assert "<tfoot>" not in html


@pytest.mark.unit
def test_table_foot_rows(offline_session):
    """Test foot rows go to tfoot after the body."""
    table = TableView(offline_session, {"content": TABLE, "foot-height": 1})
    html = table.html()
    assert "<thead>" not in html
    assert '</tbody><tfoot><tr id="id000001-2" data-row="2">' in html


@pytest.mark.unit
def test_text_rows_are_split(offline_session):
    """Test comma-separated rows become cells and short rows are padded."""
    table = TableView(offline_session, {"content": ["a, b", "c"]})
    html = table.html()
    assert '<td id="id000001-0-1" data-row="0" data-column="1">b</td>' in html
    assert '<td id="id000001-1-1" data-row="1" data-column="1"></td>' in html


@pytest.mark.unit
def test_table_cell_values(offline_session):
    """Test check marks, color swatches and views inside cells."""
    label = TextView(offline_session, "inner")
    table = TableView(offline_session, {"content": [[True, False, Color(0xFFFF0000), label]]})
    html = table.html()
    assert ">☑</td>" in html
    assert ">☐</td>" in html
    assert "background-color: rgb(255,0,0);" in html
    assert f'id="{label.html_id()}"' in html
    assert table.subviews() == [label]


@pytest.mark.unit
def test_table_cell_style(offline_session):
    """Test cell padding and vertical alignment reach every cell."""
    table = TableView(offline_session, {
        "content": [["a"]],
        "cell-padding": "4px",
        "table-vertical-align": "center",
    })
    assert table.cell_style() == "padding: 4px; vertical-align: middle;"
    assert 'data-column="0" style="padding: 4px; vertical-align: middle;">a</td>' in table.html()


@pytest.mark.unit
def test_table_gap_separates_cells(offline_session):
    """Test a gap switches to separate borders with spacing."""
    html = TableView(offline_session, {"content": [["a"]], "gap": "2px"}).html()
    assert "border-collapse: separate;" in html
    assert "border-spacing: 2px;" in html


@pytest.mark.unit
def test_table_invalid_values(offline_session):
    """Test content and current values of other types are refused."""
    table = TableView(offline_session)
    assert table.set("content", 5) is False
    assert table.set("current", "x:y") is False
    assert table.current() == (-1, -1)
    assert cell_index("2:3") == (2, 3)
    assert cell_index("4") == (4, -1)
    assert cell_index([1, 0]) == (1, 0)


@pytest.mark.unit
def test_selection_mode_makes_table_focusable(session, bridge, live_root):
    """Test a selection mode makes the table focusable and updates tabindex."""
    table = live_root(TableView(session, {"content": TABLE}))
    assert table.focusable() is False
    table.set("selection-mode", "row")
    assert table.focusable() is True
    assert 'updateProperty("id000001", "tabindex", ' in bridge.text()


@pytest.mark.unit
def test_cell_selection(session, bridge, live_root):
    """Test cell clicks move the current cell before the click is reported."""
    seen = []
    table = live_root(TableView(session, {
        "content": [["a", "b"], ["c", "d"]],
        "selection-mode": "cell",
        "table-cell-selected": lambda row, column: seen.append(("selected", row, column)),
        "table-cell-clicked": lambda row, column: seen.append(("clicked", row, column)),
    }))
    assert 'onclick="tableCellClickEvent(this, event)"' in table.html()

    session.handle_message(event("cellClick{id=id000001, row=1, column=0}"))
    assert table.current() == (1, 0)
    assert seen == [("selected", 1, 0), ("clicked", 1, 0)]
    assert 'class=\\"ruiTableCellSelected\\"' in bridge.text()

    # row commands do not move the cell
    session.handle_message(event("rowClick{id=id000001, row=0}"))
    assert table.current() == (1, 0)


@pytest.mark.unit
def test_row_selection(session, live_root):
    """Test row mode marks the current row and row clicks select rows."""
    seen = []
    table = live_root(TableView(session, {
        "content": TABLE,
        "selection-mode": "row",
        "current": 1,
        "table-row-selected": lambda row: seen.append(("selected", row)),
        "table-row-clicked": lambda row: seen.append(("clicked", row)),
    }))
    assert (
        '<tr id="id000001-1" data-row="1" class="ruiTableRowSelected"'
        ' onclick="tableRowClickEvent(this, event)">'
    ) in table.html()

    session.handle_message(event("rowClick{id=id000001, row=2}"))
    session.handle_message(event("currentRow{id=id000001, row=0}"))
    session.handle_message(event("rowClick{id=id000001, row=-1}"))
    assert seen == [("selected", 2), ("clicked", 2), ("selected", 0)]
    assert table.current() == (0, -1)
