"""Tests for popups and the popup manager."""

import pytest

from rui.data import parse_data
from rui.popup import Popup, PopupButton, show_cancellable_question, show_message, show_question
from rui.values.enums import ArrowPosition
from rui.views import Button, TextView


def event(text: str):
    return parse_data(text)


def click(session, view):
    session.handle_message(event(f"click-event{{id={view.html_id()}}}"))


def buttons_of(popup):
    """Buttons of the popup's button row, left to right."""
    row = popup.popup_view.views()[-1]
    panel = row.views()[0]
    return [view for view in panel.views() if isinstance(view, Button)]


# ============================================================================
# Show and Dismiss
# ============================================================================

@pytest.mark.unit
def test_show_popup(session, bridge):
    """Test showing fills the layer and blocks the root view."""
    popup = Popup(TextView(session, "Hi"), {"title": "Title", "close-button": True})
    popup.show()

    text = bridge.text()
    assert 'updateInnerHTML("ruiPopupLayer", ' in text
    assert 'updateCSSProperty("ruiPopupLayer", "visibility", "visible");' in text
    assert 'updateCSSProperty("ruiRootView", "pointer-events", "none");' in text
    assert session.popups.top() is popup
    assert popup.close_button
    assert not popup.outside_close


@pytest.mark.unit
def test_dismiss_fires_once(session, bridge):
    """Test dismiss listeners run once and the layer is hidden."""
    dismissed = []
    popup = Popup(TextView(session, "Hi"), {"dismiss-event": lambda: dismissed.append(True)})
    popup.show()
    bridge.reset()

    popup.dismiss()
    popup.dismiss()
    assert dismissed == [True]
    assert len(session.popups) == 0
    text = bridge.text()
    assert 'updateCSSProperty("ruiPopupLayer", "visibility", "hidden");' in text
    assert 'updateInnerHTML("ruiPopupLayer", "");' in text
    assert 'updateCSSProperty("ruiRootView", "pointer-events", "auto");' in text


@pytest.mark.unit
def test_stacked_popups(session, bridge):
    """Test dismissing the top popup keeps the layer for the one below."""
    first = Popup(TextView(session, "first"))
    second = Popup(TextView(session, "second"))
    first.show()
    second.show()
    assert len(session.popups) == 2

    bridge.reset()
    second.dismiss()
    assert session.popups.top() is first
    assert "visibility" not in bridge.text()
    assert "first" in bridge.text()


@pytest.mark.unit
def test_add_dismiss_listener(session):
    """Test listeners added later receive the popup."""
    seen = []
    popup = Popup(TextView(session, "Hi"))
    popup.add_dismiss_listener(lambda p: seen.append(p))
    popup.show()
    popup.dismiss()
    assert seen == [popup]


@pytest.mark.unit
def test_reload_renders_layer(session, bridge):
    """Test a page reload re-renders visible popups."""
    Popup(TextView(session, "Hi")).show()
    bridge.reset()
    session.reload()
    assert 'updateInnerHTML("ruiPopupLayer", ' in bridge.text()


# ============================================================================
# Closing Gestures
# ============================================================================

@pytest.mark.unit
def test_close_button_click(session):
    """Test the title bar's close button dismisses the popup."""
    popup = Popup(TextView(session, "Hi"), {"title": "Title", "close-button": True})
    popup.show()
    title_bar = popup.popup_view.views()[0]
    click(session, title_bar.views()[1])
    assert len(session.popups) == 0


@pytest.mark.unit
def test_outside_click(session):
    """Test clicks on the layer close an outside-close popup."""
    popup = Popup(TextView(session, "Hi"), {"outside-close": True})
    popup.show()
    session.handle_message(event("click-event{id=ruiPopupLayer}"))
    assert len(session.popups) == 0

    popup = Popup(TextView(session, "Hi"), {"outside-close": True})
    popup.show()
    click(session, popup.layer_view)
    assert len(session.popups) == 0


@pytest.mark.unit
def test_outside_click_fires_listeners_in_order(session, bridge):
    """Test every dismiss listener runs once in the order it was registered."""
    seen = []
    popup = Popup(TextView(session, "Hi"), {
        "outside-close": True,
        "dismiss-event": [lambda: seen.append("first"), lambda: seen.append("second")],
    })
    popup.add_dismiss_listener(lambda: seen.append("third"))
    popup.show()
    bridge.reset()

    session.handle_message(event("click-event{id=ruiPopupLayer}"))
    session.handle_message(event("click-event{id=ruiPopupLayer}"))
    assert seen == ["first", "second", "third"]
    assert len(session.popups) == 0
    assert 'updateCSSProperty("ruiRootView", "pointer-events", "auto");' in bridge.text()


@pytest.mark.unit
def test_outside_click_ignored_without_flag(session):
    """Test a popup without outside-close stays open."""
    Popup(TextView(session, "Hi")).show()
    session.handle_message(event("click-event{id=ruiPopupLayer}"))
    assert len(session.popups) == 1


@pytest.mark.unit
def test_escape_closes_closable_popup(session):
    """Test Escape dismisses the topmost closable popup."""
    Popup(TextView(session, "Hi"), {"close-button": True}).show()
    session.handle_message(event("key-down-event{id=body, code=Escape, shiftKey=1}"))
    assert len(session.popups) == 1
    session.handle_message(event("key-down-event{id=body, code=Escape}"))
    assert len(session.popups) == 0


@pytest.mark.unit
def test_escape_keeps_modal_popup(session):
    """Test Escape does not close a popup without close gestures."""
    Popup(TextView(session, "Hi")).show()
    session.handle_message(event("key-down-event{id=body, code=Escape}"))
    assert len(session.popups) == 1


# ============================================================================
# Buttons and Helpers
# ============================================================================

@pytest.mark.unit
def test_default_button_dismisses(session):
    """Test a button without a handler closes the popup."""
    popup = Popup(TextView(session, "Hi"), {"buttons": PopupButton("OK")})
    popup.show()
    (ok,) = buttons_of(popup)
    click(session, ok)
    assert len(session.popups) == 0


@pytest.mark.unit
def test_button_handler_receives_popup(session):
    """Test a button handler gets the popup and decides itself."""
    seen = []
    popup = Popup(TextView(session, "Hi"), {"buttons": [PopupButton("Apply", seen.append)]})
    popup.show()
    click(session, buttons_of(popup)[0])
    assert seen == [popup]
    assert len(session.popups) == 1


@pytest.mark.unit
def test_invalid_buttons_ignored(session):
    """Test a buttons value of the wrong type adds no row."""
    popup = Popup(TextView(session, "Hi"), {"buttons": ["OK"]})
    assert len(popup.popup_view.views()) == 1


@pytest.mark.unit
def test_show_message(session):
    """Test the message popup is closable both ways."""
    popup = show_message(session, "Note", "Saved")
    assert popup.close_button and popup.outside_close
    assert session.popups.top() is popup


@pytest.mark.unit
def test_show_question_answers(session):
    """Test Yes and No call their handlers after dismissing."""
    answers = []
    popup = show_question(session, "Quit", "Really?", lambda: answers.append("yes"), lambda: answers.append("no"))
    no, yes = buttons_of(popup)
    click(session, yes)
    assert answers == ["yes"]
    assert len(session.popups) == 0

    popup = show_question(session, "Quit", "Really?", on_no=lambda: answers.append("no"))
    click(session, buttons_of(popup)[0])
    assert answers == ["yes", "no"]


@pytest.mark.unit
def test_show_cancellable_question(session):
    """Test the cancel answer comes first."""
    answers = []
    popup = show_cancellable_question(session, "Save", "Save changes?", on_cancel=lambda: answers.append("cancel"))
    cancel, no, yes = buttons_of(popup)
    click(session, cancel)
    assert answers == ["cancel"]


# ============================================================================
# Arrow
# ============================================================================

@pytest.mark.unit
def test_arrow_frame(session):
    """Test an arrow popup sits in a 3x3 frame next to its arrow."""
    popup = Popup(TextView(session, "Hi"), {"arrow": "top"})
    assert popup.arrow() == ArrowPosition.TOP
    frame = popup.layer_view.views()[0].views()[0]
    content, arrow = frame.views()
    assert content is popup.popup_view
    assert arrow.get("border-bottom-style") is not None
