"""Tests for the edit view, the pickers, the drop-down list and the progress bar."""

from datetime import date, time

import pytest

from rui.data import parse_data
from rui.properties import tags
from rui.values import Color
from rui.views import (
    ColorPicker,
    DatePicker,
    DropDownList,
    EditView,
    ListView,
    NumberPicker,
    ProgressBar,
    TableView,
    TimePicker,
)
from rui.views.factory import create_view_from_text, view_creator


def event(text: str):
    return parse_data(text)


# ============================================================================
# Edit View
# ============================================================================

@pytest.mark.unit
def test_edit_view_renders_input(offline_session):
    """Test a single-line edit view is an input with its attributes."""
    edit = EditView(offline_session, {"text": "Ann", "hint": "Name", "max-length": 20, "type": "email"})
    html = edit.html()
    assert html.startswith('<input id="id000001" class="ruiView ruiEditView"')
    assert ' type="email" inputmode="email" value="Ann"' in html
    assert ' placeholder="Name" maxlength="20"' in html
    assert ' oninput="editViewInputEvent(this)"' in html


@pytest.mark.unit
def test_password_and_emails_types(offline_session):
    """Test the password type has no input mode and emails allows several addresses."""
    password = EditView(offline_session, {"type": "password"}).html()
    assert ' type="password"' in password
    assert "inputmode" not in password
    emails = EditView(offline_session, {"type": "emails"}).html()
    assert ' type="email" inputmode="email" multiple' in emails


@pytest.mark.unit
def test_multiline_edit_view_is_textarea(offline_session):
    """Test the multiline type renders a textarea holding the escaped text."""
    edit = EditView(offline_session, {"type": "multiline", "text": "a<b", "edit-wrap": True, "readonly": True})
    html = edit.html()
    assert html.startswith("<textarea ")
    assert ' wrap="soft"' in html
    assert " readonly" in html
    assert "value=" not in html
    assert html.endswith(">a&lt;b</textarea>")


@pytest.mark.unit
def test_edit_view_live_text(session, bridge, live_root):
    """Test text set on the server is sent to the input."""
    edit = live_root(EditView(session, {"text": "a"}))
    edit.set_text("b")
    assert bridge.messages == ['setInputValue("id000001", "b");']
    bridge.reset()
    edit.append_text("c")
    assert bridge.messages == ['setInputValue("id000001", "bc");']


@pytest.mark.unit
def test_typed_text_fires_listener_without_echo(session, bridge, live_root):
    """Test typed text is stored, reported as (new, old) and not sent back."""
    seen = []
    edit = live_root(EditView(session, {
        "text": "a",
        "edit-text-changed": lambda text, old: seen.append((text, old)),
    }))
    session.handle_message(event('textChanged{id=id000001, text="ab"}'))
    assert edit.text() == "ab"
    assert seen == [("ab", "a")]
    assert "setInputValue" not in bridge.text()

    # same text again is not a change
    session.handle_message(event('textChanged{id=id000001, text="ab"}'))
    assert seen == [("ab", "a")]


@pytest.mark.unit
def test_construction_fires_no_text_event(offline_session):
    """Test the initial text does not reach the listeners."""
    seen = []
    edit = EditView(offline_session, {"text": "x", "edit-text-changed": lambda text, old: seen.append(text)})
    assert seen == []
    edit.set_text("y")
    assert seen == ["y"]


@pytest.mark.unit
def test_edit_view_attribute_updates(session, bridge, live_root):
    """Test attribute properties update or remove the matching attributes."""
    edit = live_root(EditView(session))
    edit.set("hint", "Email")
    assert bridge.messages == ['updateProperty("id000001", "placeholder", "Email");']

    bridge.reset()
    edit.set("hint", None)
    assert bridge.messages == ['removeProperty("id000001", "placeholder");']

    bridge.reset()
    edit.set("read-only", True)
    assert bridge.messages == ['updateProperty("id000001", "readonly", true);']


# ============================================================================
# Number Picker
# ============================================================================

@pytest.mark.unit
def test_number_picker_editor_render(offline_session):
    """Test a number editor renders its limits and value."""
    picker = NumberPicker(offline_session, {"min": 0, "max": 10, "value": 2.5})
    html = picker.html()
    assert html.startswith('<input id="id000001"')
    assert ' type="number" min="0" max="10" step="any" value="2.5"' in html


@pytest.mark.unit
def test_slider_defaults_and_precision(offline_session):
    """Test a slider without limits runs from 0 to 1 and honors precision."""
    picker = NumberPicker(offline_session, {"type": "slider", "precision": 2, "value": 0.5})
    assert picker.min_max() == (0.0, 1.0)
    assert ' type="range" min="0" max="1" step="any" value="0.50"' in picker.html()


@pytest.mark.unit
def test_number_picker_value_default(offline_session):
    """Test an unset number picker reports zero and omits infinite limits."""
    picker = NumberPicker(offline_session, {"step": 0.5})
    assert picker.value() == 0.0
    assert picker.limit_attributes() == {"step": "0.5"}


@pytest.mark.unit
def test_number_picker_input(session, bridge, live_root):
    """Test typed numbers fire (new, old) and unparsable input is ignored."""
    seen = []
    picker = live_root(NumberPicker(session, {
        "value": 1,
        "number-changed": lambda new, old: seen.append((new, old)),
    }))
    session.handle_message(event('textChanged{id=id000001, text="3.5"}'))
    assert picker.value() == 3.5
    assert seen == [(3.5, 1.0)]
    assert bridge.messages == []

    session.handle_message(event('textChanged{id=id000001, text="abc"}'))
    assert picker.value() == 3.5

    picker.set_value(7)
    assert bridge.messages == ['setInputValue("id000001", "7");']
    assert seen == [(3.5, 1.0), (7.0, 3.5)]


@pytest.mark.unit
def test_number_picker_live_type(session, bridge, live_root):
    """Test switching to a slider updates the type and the limits."""
    picker = live_root(NumberPicker(session))
    picker.set("type", "slider")
    assert bridge.messages == [
        'updateProperty("id000001", "type", "range");\n'
        'updateProperty("id000001", "min", "0");\n'
        'updateProperty("id000001", "max", "1");'
    ]


# ============================================================================
# Date and Time Pickers
# ============================================================================

@pytest.mark.unit
@pytest.mark.parametrize("text", [
    "2024-03-05",
    "03/05/2024",
    "Mar-05-2024",
    "05 March 2024",
    "March 05, 2024",
    "20240305",
])
def test_date_picker_formats(offline_session, text):
    """Test the accepted date forms."""
    picker = DatePicker(offline_session, {"value": text})
    assert picker.value() == date(2024, 3, 5)


@pytest.mark.unit
def test_date_picker_rejects_invalid_date(offline_session):
    """Test text that is no date is refused and the old value kept."""
    picker = DatePicker(offline_session, {"value": date(2024, 1, 2)})
    assert picker.set("value", "yesterday") is False
    assert picker.set("value", 12) is False
    assert picker.value() == date(2024, 1, 2)


@pytest.mark.unit
def test_date_picker_render(offline_session):
    """Test limits and value render in the HTML date form."""
    picker = DatePicker(offline_session, {"min": "2024-01-01", "max": "2024-12-31", "step": 7, "value": "2024-03-05"})
    assert ' type="date" min="2024-01-01" max="2024-12-31" step="7" value="2024-03-05"' in picker.html()


@pytest.mark.unit
def test_unset_date_picker_has_no_value(offline_session):
    """Test an unset date leaves the value attribute out."""
    picker = DatePicker(offline_session)
    assert picker.value() is None
    assert "value=" not in picker.html()


@pytest.mark.unit
def test_date_picker_input(session, bridge, live_root):
    """Test a chosen date fires (new, old)."""
    seen = []
    picker = live_root(DatePicker(session, {
        "value": "2024-03-05",
        "date-changed": lambda new, old: seen.append((new, old)),
    }))
    session.handle_message(event('textChanged{id=id000001, text="2024-04-01"}'))
    assert picker.value() == date(2024, 4, 1)
    assert seen == [(date(2024, 4, 1), date(2024, 3, 5))]
    assert bridge.messages == []


@pytest.mark.unit
def test_time_picker(session, bridge, live_root):
    """Test 12-hour input is accepted and chosen times fire (new, old)."""
    seen = []
    picker = live_root(TimePicker(session, {
        "value": "2:30 PM",
        "time-changed": lambda new, old: seen.append((new, old)),
    }))
    assert picker.value() == time(14, 30)
    session.handle_message(event('textChanged{id=id000001, text="09:15"}'))
    assert seen == [(time(9, 15), time(14, 30))]

    picker.set_value(time(10, 0, 30))
    assert bridge.messages == ['setInputValue("id000001", "10:00:30");']


@pytest.mark.unit
def test_time_picker_render(offline_session):
    """Test the time input renders hours and minutes."""
    picker = TimePicker(offline_session, {"value": time(8, 5), "step": 60})
    assert ' type="time" step="60" value="08:05"' in picker.html()


# ============================================================================
# Color Picker
# ============================================================================

@pytest.mark.unit
def test_color_picker_render(offline_session):
    """Test the color input uses lower case #rrggbb and defaults to black."""
    picker = ColorPicker(offline_session, {"value": "#FF8000"})
    assert ' type="color" value="#ff8000"' in picker.html()
    assert ColorPicker(offline_session).value() == Color(0xFF000000)


@pytest.mark.unit
def test_color_picker_input(session, live_root):
    """Test a chosen color fires (new, old)."""
    seen = []
    live_root(ColorPicker(session, {
        "value": "#FF8000",
        "color-changed": lambda new, old: seen.append((new, old)),
    }))
    session.handle_message(event('textChanged{id=id000001, text="#00ff00"}'))
    session.handle_message(event('textChanged{id=id000001, text="green-ish"}'))
    assert seen == [(Color(0xFF00FF00), Color(0xFFFF8000))]


# ============================================================================
# Drop Down List
# ============================================================================

@pytest.mark.unit
def test_drop_down_list_render(offline_session):
    """Test items become options with the current one selected."""
    drop_down = DropDownList(offline_session, {
        "items": ["Red", "Green", "Blue"],
        "current": 1,
        "disabled-items": "2",
    })
    html = drop_down.html()
    assert html.startswith('<select id="id000001" class="ruiView ruiDropDownList"')
    assert ' size="1"' in html
    assert ' onchange="dropDownListEvent(this, event)"' in html
    assert html.endswith(
        "><option>Red</option><option selected>Green</option><option disabled>Blue</option></select>"
    )


@pytest.mark.unit
def test_drop_down_list_rejects_invalid_items(offline_session):
    """Test non-text items and bad indexes are refused."""
    drop_down = DropDownList(offline_session)
    assert drop_down.set("items", [True]) is False
    assert drop_down.set("disabled-items", "1, x") is False
    assert drop_down.items() == []
    assert drop_down.current() == 0


@pytest.mark.unit
def test_drop_down_list_selection(session, bridge, live_root):
    """Test browser selections fire without echo and server changes are sent."""
    seen = []
    drop_down = live_root(DropDownList(session, {
        "items": ["a", "b", "c"],
        "current": 1,
        "drop-down-event": lambda new, old: seen.append((new, old)),
    }))
    session.handle_message(event("itemSelected{id=id000001, number=2}"))
    assert drop_down.current() == 2
    assert seen == [(2, 1)]
    assert bridge.messages == []

    session.handle_message(event("itemSelected{id=id000001, number=7}"))
    assert drop_down.current() == 2

    drop_down.set("current", 0)
    assert bridge.messages == ['selectDropDownListItem("id000001", 0);']
    assert seen == [(2, 1), (0, 2)]


@pytest.mark.unit
def test_drop_down_list_live_items(session, bridge, live_root):
    """Test new items re-render the options."""
    drop_down = live_root(DropDownList(session, {"items": ["a"]}))
    drop_down.set("items", ["x", "y"])
    assert bridge.messages == [
        'updateInnerHTML("id000001", "<option selected>x</option><option>y</option>");'
    ]


# ============================================================================
# Progress Bar
# ============================================================================

@pytest.mark.unit
def test_progress_bar_render(offline_session):
    """Test the progress element carries max and value."""
    assert ' max="200" value="50"' in ProgressBar(offline_session, {"max": 200, "value": 50}).html()
    html = ProgressBar(offline_session).html()
    assert html.startswith('<progress id="id000002" class="ruiView ruiProgressBar"')
    assert ' max="1" value="0"' in html


@pytest.mark.unit
def test_progress_bar_live_value(session, bridge, live_root):
    """Test progress changes update the element and negative values are refused."""
    bar = live_root(ProgressBar(session))
    bar.set("progress-value", 0.75)
    assert bridge.messages == ['updateProperty("id000001", "value", 0.75);']
    assert bar.set("progress-value", -1) is False
    assert bar.value() == 0.75


# ============================================================================
# Factory
# ============================================================================

@pytest.mark.unit
@pytest.mark.parametrize("view_class", [
    EditView, NumberPicker, DatePicker, TimePicker, ColorPicker,
    DropDownList, ProgressBar, ListView, TableView,
])
def test_input_views_registered(view_class):
    """Test each view is known to the factory by its tag."""
    assert view_creator(view_class.view_tag) is view_class


@pytest.mark.unit
def test_drop_down_list_from_text(offline_session):
    """Test a drop-down list described in text."""
    drop_down = create_view_from_text(offline_session, 'DropDownList { items = ["a", "b"], current = 1 }')
    assert isinstance(drop_down, DropDownList)
    assert drop_down.items() == ["a", "b"]
    assert drop_down.current() == 1
    assert drop_down.get(tags.CURRENT) == 1
