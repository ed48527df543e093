"""Tests for views, widgets and the view factory."""

import pytest

from rui.animation import Animation
from rui.data import parse_data
from rui.properties import tags
from rui.views import (
    Button,
    Checkbox,
    TextView,
    View,
    ViewsContainer,
    create_view_from_text,
    view_by_id,
)


def event(text: str):
    return parse_data(text)


# ============================================================================
# Identity and Rendering
# ============================================================================

@pytest.mark.unit
def test_html_ids_are_sequential(offline_session):
    """Test html ids are allocated on first use."""
    first = View(offline_session)
    second = View(offline_session)
    assert second.html_id() == "id000001"
    assert first.html_id() == "id000002"
    assert offline_session.view_by_html_id("id000002") is first


@pytest.mark.unit
def test_view_render(offline_session):
    """Test a plain view renders its inline style."""
    view = View(offline_session, {tags.WIDTH: "10px", tags.TOOLTIP: "Hint"})
    html = view.html()
    assert html.startswith('<div id="id000001" class="ruiView" style="width: 10px;"')
    assert 'data-tooltip="Hint"' in html
    assert html.endswith("></div>")
    assert view.created


@pytest.mark.unit
def test_button_render(offline_session):
    """Test a button wraps its content and is focusable."""
    button = Button(offline_session, {"content": "OK", "click-event": lambda: None})
    html = button.html()
    assert html.startswith('<button id="id000001" class="ruiView ruiButton"')
    assert 'tabindex="0"' in html
    assert 'onclick="clickEvent(this, event)"' in html
    assert html.endswith(">OK</div></button>")


@pytest.mark.unit
def test_text_is_escaped(offline_session):
    """Test text content is HTML-escaped."""
    assert TextView(offline_session, "a < b & c").html().endswith(">a &lt; b &amp; c</div>")


@pytest.mark.unit
def test_detach_unregisters_subtree(offline_session):
    """Test detaching drops the view and its children from the id index."""
    container = ViewsContainer(offline_session, {"content": ["a", "b"]})
    child_id = container.views()[0].html_id()
    container.detach()
    assert offline_session.view_by_html_id(child_id) is None
    assert offline_session.view_by_html_id("id000001") is None


# ============================================================================
# Live Updates
# ============================================================================

@pytest.mark.unit
def test_property_change_sends_css_diff(session, bridge, live_root):
    """Test a live change sends only the changed declaration."""
    view = live_root(View(session, {tags.WIDTH: "10px", tags.HEIGHT: "5px"}))
    view.set(tags.WIDTH, "20px")
    assert bridge.messages == ['updateCSSProperty("id000001", "width", "20px");']

    bridge.reset()
    view.remove(tags.WIDTH)
    assert bridge.messages == ['updateCSSProperty("id000001", "width", "");']


@pytest.mark.unit
def test_unchanged_value_sends_nothing(session, bridge, live_root):
    """Test setting the same value is silent."""
    view = live_root(View(session, {tags.WIDTH: "10px"}))
    view.set(tags.WIDTH, 10)
    assert bridge.messages == []


@pytest.mark.unit
def test_ignored_updates_are_not_sent(session, bridge, live_root):
    """Test changes inside updates_ignored stay on the server."""
    view = live_root(View(session))
    with session.updates_ignored():
        view.set(tags.WIDTH, "20px")
    assert bridge.messages == []
    assert view.get(tags.WIDTH) is not None


@pytest.mark.unit
def test_sync_css_after_ignored_change(session, bridge, live_root):
    """Test sync_css sends what was changed while updates were ignored."""
    view = live_root(View(session))
    with session.updates_ignored():
        view.set(tags.WIDTH, "20px")
    view.sync_css()
    assert bridge.messages == ['updateCSSProperty("id000001", "width", "20px");']


@pytest.mark.unit
def test_disable_button(session, bridge, live_root):
    """Test disabling updates attributes and class."""
    button = live_root(Button(session, {"content": "OK"}))
    button.set(tags.DISABLED, True)
    text = bridge.text()
    assert 'updateProperty("id000001", "data-disabled", "1");' in text
    assert 'updateProperty("id000001", "disabled", true);' in text
    assert 'updateProperty("id000001", "tabindex", -1);' in text
    assert len(bridge.messages) == 1


@pytest.mark.unit
def test_text_change_updates_inner_html(session, bridge, live_root):
    """Test changing text re-renders the element content."""
    text = live_root(TextView(session, "old"))
    text.set(tags.TEXT, "new & shiny")
    assert bridge.messages == ['updateInnerHTML("id000001", "new &amp; shiny");']


# ============================================================================
# Events
# ============================================================================

@pytest.mark.unit
def test_button_click_fires_listener(session, live_root):
    """Test a click message reaches the button's listener."""
    clicks = []
    button = live_root(
        Button(session, {"content": "OK", "click-event": lambda view, e: clicks.append((view, e.button))})
    )
    session.handle_message(event(f"click-event{{id={button.html_id()}, button=0}}"))
    assert clicks == [(button, 0)]


@pytest.mark.unit
def test_add_listener_appends(session, live_root):
    """Test listeners run in registration order."""
    calls = []
    view = live_root(View(session, {"click-event": lambda: calls.append("first")}))
    view.add_listener("click-event", lambda: calls.append("second"))
    session.handle_message(event("click-event{id=id000001}"))
    assert calls == ["first", "second"]


@pytest.mark.unit
def test_invalid_listener_rejected(offline_session):
    """Test a listener with an unsupported signature is refused."""
    view = View(offline_session)
    assert view.set("click-event", lambda a, b, c: None) is False
    assert view.listeners("click-event") == []


@pytest.mark.unit
def test_focus_tracking(session, live_root):
    """Test focus events update the session's focused view."""
    button = live_root(Button(session, {"content": "OK"}))
    session.handle_message(event("focus-event{id=id000001}"))
    assert button.has_focus
    assert session.focused_html_id == "id000001"
    session.handle_message(event("lost-focus-event{id=id000001}"))
    assert session.focused_html_id == ""


@pytest.mark.unit
def test_checkbox_toggle(session, bridge, live_root):
    """Test clicks and Space toggle the checkbox."""
    seen = []
    checkbox = live_root(Checkbox(session, {"content": "Agree", "checkbox-event": lambda checked: seen.append(checked)}))
    session.handle_message(event("click-event{id=id000001}"))
    assert checkbox.is_checked()
    assert 'updateInnerHTML("id000001checkbox", "☑");' in bridge.text()

    session.handle_message(event("key-down-event{id=id000001, code=Space}"))
    session.handle_message(event("key-down-event{id=id000001, code=Space, ctrlKey=1}"))
    assert seen == [True, False]


@pytest.mark.unit
def test_disabled_checkbox_ignores_click(session, live_root):
    """Test a disabled checkbox does not toggle."""
    checkbox = live_root(Checkbox(session, {"disabled": True}))
    session.handle_message(event("click-event{id=id000001}"))
    assert not checkbox.is_checked()


# ============================================================================
# Animated Changes
# ============================================================================

@pytest.mark.unit
def test_set_animated_offline_finishes_at_once(offline_session):
    """Test a view that is not live applies the value immediately."""
    finished = []
    view = View(offline_session)
    animation = Animation(duration=0.5, finish_listener=lambda v, tag: finished.append(tag))
    assert view.set_animated(tags.WIDTH, "20px", animation)
    assert finished == [tags.WIDTH]
    assert view.transitions() == {}


@pytest.mark.unit
def test_set_animated_live(session, bridge, live_root):
    """Test a single-shot transition lasts until the browser reports its end."""
    finished = []
    view = live_root(View(session, {tags.WIDTH: "10px"}))
    animation = Animation(duration=0.5, timing_function="ease", finish_listener=lambda v, tag: finished.append(tag))
    assert view.set_animated(tags.WIDTH, "20px", animation)

    text = bridge.text()
    assert 'updateProperty("id000001", "ontransitionend", "transitionEndEvent(this, event)");' in text
    assert 'updateCSSProperty("id000001", "width", "20px");' in text
    assert tags.WIDTH in view.transitions()
    assert finished == []

    session.handle_message(event("transition-end-event{id=id000001, property=width}"))
    assert finished == [tags.WIDTH]
    assert view.transitions() == {}


@pytest.mark.unit
def test_set_animated_invalid_timing(session, live_root):
    """Test an invalid timing function falls back to an immediate change."""
    finished = []
    view = live_root(View(session))
    animation = Animation(duration=1, timing_function="bouncy", finish_listener=lambda: finished.append(True))
    assert view.set_animated(tags.WIDTH, "20px", animation)
    assert finished == [True]


# ============================================================================
# Factory
# ============================================================================

TEMPLATE = """
ViewsContainer {
    id = box,
    content = [
        TextView { id = label, text = Hello },
        Button { id = ok, content = OK },
    ],
}
"""


@pytest.mark.unit
def test_create_view_from_text(offline_session):
    """Test a template builds the view tree."""
    root = create_view_from_text(offline_session, TEMPLATE)
    assert isinstance(root, ViewsContainer)
    assert [type(view) for view in root.views()] == [TextView, Button]
    assert view_by_id(root, "ok").parent() is root


@pytest.mark.unit
def test_view_by_id_path(offline_session):
    """Test id paths and missing ids."""
    root = create_view_from_text(offline_session, TEMPLATE)
    assert view_by_id(root, "box/label").text() == "Hello"
    assert view_by_id(root, "box", "label") is view_by_id(root, "label")
    assert view_by_id(root, "missing") is None


@pytest.mark.unit
def test_unknown_template_tag(offline_session):
    """Test unknown view tags give None."""
    assert create_view_from_text(offline_session, "Spaceship { }") is None
    assert create_view_from_text(offline_session, "View {") is None
