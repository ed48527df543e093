"""Tests for the session, its bridge and the image manager."""

import threading

import pytest

from rui.animation import AnimatedProperty, KeyframeAnimation
from rui.core import AppParams
from rui.data import parse_data
from rui.session import (
    ImageLoadingStatus,
    RecordingBridge,
    Session,
    SessionContent,
    js_call,
    js_value,
    hotkey_code,
)
from rui.values import Color
from rui.views import TextView, View


def event(text: str):
    return parse_data(text)


class HelloContent(SessionContent):
    """Content with a single text view and a log of lifecycle hooks."""

    def __init__(self, root=True):
        self.root = root
        self.events = []

    def create_root_view(self, session):
        self.events.append("create")
        return TextView(session, "Hello") if self.root else None

    def on_start(self, session):
        self.events.append("start")

    def on_resume(self, session):
        self.events.append("resume")

    def on_pause(self, session):
        self.events.append("pause")

    def on_finish(self, session):
        self.events.append("finish")

    def on_reconnect(self, session):
        self.events.append("reconnect")


@pytest.fixture
def hello(params, bridge):
    session = Session(5, HelloContent(), params, bridge)
    yield session
    session.worker.stop()


# ============================================================================
# Bridge
# ============================================================================

@pytest.mark.unit
def test_js_values():
    """Test JavaScript literals of call arguments."""
    assert js_value(None) == "null"
    assert js_value(True) == "true"
    assert js_value(3) == "3"
    assert js_value(1.5) == "1.5"
    assert js_value(Color(0xFFFF0000)) == '"rgb(255,0,0)"'
    assert js_value([1, "a"]) == '[1, "a"]'
    assert js_value('say "hi"') == '"say \\"hi\\""'


@pytest.mark.unit
def test_js_call():
    """Test a call is one statement."""
    assert js_call("updateCSSProperty", "id000001", "width", "") == 'updateCSSProperty("id000001", "width", "");'
    assert js_call("scanElementsSize") == "scanElementsSize();"


@pytest.mark.unit
def test_nested_update_scripts(bridge):
    """Test nested brackets collapse into one frame."""
    bridge.start_update_script()
    bridge.call_function("a")
    bridge.start_update_script()
    bridge.call_function("b")
    bridge.finish_update_script()
    assert bridge.messages == []
    bridge.finish_update_script()
    assert bridge.messages == ["a();\nb();"]


@pytest.mark.unit
def test_empty_update_script_sends_nothing(bridge):
    """Test an empty bracket and an unbalanced finish are silent."""
    bridge.start_update_script()
    bridge.finish_update_script()
    bridge.finish_update_script()
    assert bridge.messages == []


@pytest.mark.unit
def test_closed_bridge(bridge):
    """Test a closed bridge sends nothing and getters fail at once."""
    bridge.close()
    bridge.call_function("a")
    assert bridge.messages == []
    answer = bridge.remote_value("getPropertyValue", "id000001", "value")
    assert answer.property_value("errorText") == "bridge is closed"


@pytest.mark.unit
def test_getter_timeout(bridge):
    """Test an unanswered getter returns an error answer."""
    answer = bridge.remote_value("getPropertyValue", "id000001", "value")
    assert answer.property_value("errorText") == "getPropertyValue: timeout"
    assert bridge.messages == ['getPropertyValue(1, "id000001", "value");']


@pytest.mark.unit
def test_getter_answered_from_another_thread(bridge):
    """Test an answer delivered by the reader thread resolves the getter."""
    timer = threading.Timer(0.02, bridge.answer_received, args=(event("answer{answerID=1, value=42}"),))
    timer.start()
    answer = bridge.remote_value("getPropertyValue", "id000001", "value", timeout=5)
    timer.join()
    assert answer.property_value("value") == "42"
    assert answer.property_value("errorText") is None


@pytest.mark.unit
def test_unexpected_answers(bridge):
    """Test answers nobody waits for are refused."""
    assert bridge.answer_received(event("answer{answerID=9}")) is False
    assert bridge.answer_received(event("answer{value=1}")) is False


@pytest.mark.unit
def test_close_resolves_pending_getter(bridge):
    """Test closing the bridge releases a waiting getter."""
    answers = []
    waiter = threading.Thread(
        target=lambda: answers.append(bridge.remote_value("getPropertyValue", "id", "value", timeout=5))
    )
    waiter.start()
    bridge.close()
    waiter.join(5)
    assert answers[0].property_value("errorText") == "bridge is closed"


# ============================================================================
# Page
# ============================================================================

@pytest.mark.unit
def test_start_renders_root(hello, bridge):
    """Test start builds the root view and renders the page in one frame."""
    assert hello.start()
    assert hello.content.events == ["create", "start", "resume"]
    assert len(bridge.messages) == 1
    frame = bridge.messages[0]
    assert frame.startswith("setStyles(")
    assert 'updateInnerHTML("ruiRootView", ' in frame
    assert "Hello" in frame
    assert frame.endswith("scanElementsSize();")


@pytest.mark.unit
def test_start_refused(params, bridge):
    """Test start fails without content or without a root view."""
    assert Session(6, None, params, bridge).start() is False
    content = HelloContent(root=False)
    assert Session(7, content, params, bridge).start() is False
    assert content.events == ["create"]


@pytest.mark.unit
def test_ignore_updates(offline_session, session):
    """Test the update gate."""
    assert offline_session.ignore_updates()
    assert not session.ignore_updates()
    with session.updates_ignored():
        assert session.ignore_updates()
    assert not session.ignore_updates()


@pytest.mark.unit
def test_page_helpers(session, bridge):
    """Test title, title color and url calls."""
    session.set_title("Editor")
    session.set_title_color("red")
    session.set_title_color("not a color")
    session.open_url("example")
    session.open_url("/docs")
    session.open_url("https://example.com")
    assert bridge.messages == [
        'setTitle("Editor");',
        'setTitleColor("rgb(255,0,0)");',
        'openURL("/docs");',
        'openURL("https://example.com");',
    ]


@pytest.mark.unit
def test_html_property_value(params):
    """Test element properties are read through the getter-RPC."""
    bridge = RecordingBridge(responder=lambda function, args: {"value": "abc"})
    session = Session(8, None, params, bridge)
    assert session.html_property_value("id000001", "value") == "abc"
    assert bridge.calls == [("getPropertyValue", ("id000001", "value"))]
    assert Session(9, None, params).html_property_value("id000001", "value") == ""


# ============================================================================
# Theme and Strings
# ============================================================================

@pytest.mark.unit
def test_set_theme(session, bridge, theme, live_root):
    """Test switching themes reloads the page."""
    live_root(TextView(session, "Hi"))
    assert session.set_theme("no such theme") is False
    assert bridge.messages == []
    assert session.set_theme(theme)
    assert bridge.messages[0].startswith("setStyles(")
    assert session.get_constant("gap") == "8px"


@pytest.mark.unit
def test_unknown_string_is_its_tag(session):
    """Test strings without a translation fall back to the tag."""
    assert session.get_string("Untranslated text") == "Untranslated text"


# ============================================================================
# Keyframe Animations
# ============================================================================

@pytest.mark.unit
def test_animation_reference_counting(session, bridge):
    """Test the @keyframes rule is sent once and removed with the last user."""
    animation = KeyframeAnimation([AnimatedProperty("opacity", 0, 1)])
    session.use_animation(animation)
    session.use_animation(animation)
    assert len(bridge.messages) == 1
    assert bridge.messages[0].startswith("appendAnimationCSS(")
    assert session.animation_names() == [animation.name]

    session.release_animation(animation)
    assert len(bridge.messages) == 1
    session.release_animation(animation)
    assert bridge.messages[1] == f'removeAnimationCSS("{animation.name}");'
    assert session.animation_names() == []


@pytest.mark.unit
def test_keyframe_animation_on_view(session, bridge, live_root):
    """Test a started animation applies its end values when the browser ends it."""
    seen = []
    view = live_root(View(session, {"opacity": 0.5}))
    animation = KeyframeAnimation([AnimatedProperty("opacity", 0, 1)], duration=0.5)
    assert animation.start(view, lambda v, a, name: seen.append(name))
    assert f"@keyframes {animation.name}" in bridge.text()
    assert f'updateCSSProperty("id000001", "animation", "{animation.name} 0.5s ease 0s 1 ' in bridge.text()

    bridge.reset()
    session.handle_message(event(f"animation-end-event{{id=id000001, name={animation.name}}}"))
    assert seen == ["animation-end-event"]
    assert view.get("opacity") == 1
    assert view.animations() == []
    assert f'removeAnimationCSS("{animation.name}");' in bridge.text()


@pytest.mark.unit
def test_keyframes_css(session):
    """Test the @keyframes rule lists from and to frames."""
    animation = KeyframeAnimation([AnimatedProperty("opacity", 0, 1, {50: 0.8})])
    css = animation.keyframes_css(session)
    assert f"@keyframes {animation.name} {{" in css
    assert "\tfrom {\n\t\topacity: 0;\n\t}" in css
    assert "\t50% {\n\t\topacity: 0.8;\n\t}" in css
    assert "\tto {\n\t\topacity: 1;\n\t}" in css


# ============================================================================
# Client Storage, Hotkeys and Timers
# ============================================================================

@pytest.mark.unit
def test_client_storage(session, bridge):
    """Test local storage calls mirror the server copy."""
    session.set_client_item("k", "v")
    assert session.client_item("k") == "v"
    session.remove_client_item("k")
    session.remove_all_client_items()
    assert bridge.messages == ['localStorageSet("k", "v");', 'localStorageRemove("k");', "localStorageClear();"]
    assert session.client_item("k") is None


@pytest.mark.unit
def test_hotkey_code():
    """Test hotkey keys are lowercased with sorted modifier letters."""
    assert hotkey_code("KeyA", {"shift", "ctrl"}) == "keya-cs"
    assert hotkey_code("F5") == "f5"


@pytest.mark.unit
def test_hotkeys(session):
    """Test a bound hotkey runs on key-down and stops once unbound."""
    pressed = []
    session.set_hotkey("KeyS", {"ctrl"}, pressed.append)
    session.handle_message(event("key-down-event{id=body, code=KeyS, ctrlKey=1}"))
    session.handle_message(event("key-down-event{id=body, code=KeyS}"))
    assert pressed == [session]

    session.set_hotkey("KeyS", {"ctrl"}, None)
    session.handle_message(event("key-down-event{id=body, code=KeyS, ctrlKey=1}"))
    assert pressed == [session]


@pytest.mark.unit
def test_timers(session, bridge, offline_session):
    """Test timers are started in the browser and ticks reach the handler."""
    ticks = []
    assert offline_session.start_timer(100, ticks.append) == 0

    timer_id = session.start_timer(100, ticks.append)
    assert timer_id == 1
    assert bridge.messages == ["startTimer(100, 1);"]
    session.handle_message(event("timer{timerID=1}"))
    assert ticks == [session]

    session.stop_timer(timer_id)
    session.stop_timer(timer_id)
    assert bridge.messages[-1] == "stopTimer(1);"
    assert bridge.messages.count("stopTimer(1);") == 1
    session.handle_message(event("timer{timerID=1}"))
    assert ticks == [session]


@pytest.mark.unit
def test_posted_message_runs_on_worker(session):
    """Test posted messages are handled on the session thread."""
    done = threading.Event()
    threads = []

    def tick(s):
        threads.append(threading.current_thread().name)
        done.set()

    session.start_timer(10, tick)
    session.post(event("timer{timerID=1}"))
    assert done.wait(5)
    assert threads == ["rui-session-1"]


# ============================================================================
# Inbound Messages
# ============================================================================

@pytest.mark.unit
def test_session_info(session):
    """Test the client description is applied."""
    session.handle_session_info(
        event('sessionInfo{touch=1, language=fr, languages="fr, en", dark=true, pixel-ratio=2, storage=_{a=1}}')
    )
    assert session.touch_screen
    assert session.language == "fr"
    assert session.languages == ["fr", "en"]
    assert session.dark_theme
    assert session.pixel_ratio == 2.0
    assert session.client_item("a") == "1"


@pytest.mark.unit
def test_root_size(session):
    """Test the page size report."""
    session.handle_message(event("root-size{width=800, height=600}"))
    assert (session.screen_width, session.screen_height) == (800, 600)


@pytest.mark.unit
def test_ignored_messages(session, bridge):
    """Test storage errors, unknown views and malformed text are only logged."""
    session.handle_message(event("storageError{error=quota}"))
    session.handle_message(event("click-event{id=id999999}"))
    session.handle_message(event("click-event{x=1}"))
    session.handle_text("View {")
    assert bridge.messages == []


# ============================================================================
# Images
# ============================================================================

@pytest.mark.unit
def test_image_loading(session, bridge):
    """Test loading requests, shared listeners and the loaded state."""
    loaded = []
    image = session.images.load("/a.png", loaded.append)
    assert session.images.load("/a.png", loaded.append) is image
    assert bridge.messages == ['loadImage("/a.png");']

    session.handle_message(event('imageLoaded{url="/a.png", width=10, height=5}'))
    assert image.ready
    assert (image.width, image.height) == (10.0, 5.0)
    assert loaded == [image, image]

    session.images.load("/a.png", loaded.append)
    assert len(loaded) == 3
    assert len(bridge.messages) == 1


@pytest.mark.unit
def test_image_error(session):
    """Test a failed load is reported and forgotten."""
    failed = []
    image = session.images.load("/b.png", failed.append)
    session.handle_message(event('imageError{url="/b.png", message="not found"}'))
    assert image.status == ImageLoadingStatus.ERROR
    assert image.error == "not found"
    assert failed == [image]
    assert session.images.image("/b.png") is None


# ============================================================================
# Lifecycle
# ============================================================================

@pytest.mark.unit
def test_pause_and_resume(hello):
    """Test pause and resume messages reach the content."""
    hello.handle_message(event("session-pause{}"))
    assert hello.pause_time is not None
    hello.handle_message(event("session-resume{}"))
    assert hello.pause_time is None
    assert hello.content.events == ["pause", "resume"]


@pytest.mark.unit
def test_reconnect_reloads(hello, bridge):
    """Test a new bridge gets the whole page."""
    hello.start()
    new_bridge = RecordingBridge()
    hello.on_reconnect(new_bridge)
    assert hello.bridge is new_bridge
    assert 'updateInnerHTML("ruiRootView", ' in new_bridge.text()
    assert hello.content.events[-1] == "reconnect"


@pytest.mark.unit
def test_close(hello, bridge):
    """Test close pauses, finishes and closes the bridge once."""
    hello.handle_message(event("session-close{}"))
    hello.close()
    assert hello.closed
    assert bridge.closed
    assert hello.content.events == ["pause", "finish"]


@pytest.mark.unit
def test_close_after_pause(hello):
    """Test a paused session is not paused again on close."""
    hello.on_pause()
    hello.close()
    assert hello.content.events == ["pause", "finish"]


@pytest.mark.unit
def test_auto_close_after_pause(bridge):
    """Test a paused session closes itself after the configured delay."""
    session = Session(10, HelloContent(), AppParams(socket_auto_close=1), bridge)
    session.on_pause()
    session.pause_time -= 5
    session._auto_close()
    assert session.closed
