"""Tests for media players, image views, custom views and grid/column layouts."""

import pytest

from rui.containers import ColumnLayout, GridLayout
from rui.data import parse_data
from rui.session import RecordingBridge, Session
from rui.views import AudioPlayer, CustomView, ImageView, TextView, VideoPlayer


def event(text: str):
    return parse_data(text)


# ============================================================================
# Media Players
# ============================================================================

@pytest.mark.unit
def test_video_render(offline_session):
    """Test attributes and sources of a video element."""
    video = VideoPlayer(offline_session, {
        "src": "/a.webm, /a.mp4",
        "controls": True,
        "video-width": 320,
        "poster": "/poster.png",
    })
    html = video.html()
    assert html.startswith('<video id="id000001"')
    assert " controls" in html
    assert " loop" not in html
    assert 'preload="auto"' in html
    assert 'width="320"' in html
    assert 'poster="/poster.png"' in html
    assert html.endswith('><source src="/a.webm"><source src="/a.mp4"></video>')


@pytest.mark.unit
def test_media_event_wiring(offline_session):
    """Test only media events with listeners are wired."""
    audio = AudioPlayer(offline_session, {"ended-event": lambda: None, "time-update-event": lambda t: None})
    html = audio.html()
    assert html.startswith("<audio ")
    assert "onended=\"mediaEvent(this, 'ended-event')\"" in html
    assert "ontimeupdate=\"mediaValueEvent(this, 'time-update-event', event)\"" in html
    assert "onplay=" not in html


@pytest.mark.unit
def test_playback_commands(session, bridge, live_root):
    """Test playback calls go straight to the client."""
    audio = live_root(AudioPlayer(session, {"src": "/a.mp3"}))
    audio.play()
    audio.pause()
    audio.set_current_time(12)
    audio.set_volume(1.5)
    audio.set_volume(0.5)
    assert bridge.messages == [
        'mediaPlay("id000001");',
        'mediaPause("id000001");',
        'mediaSetCurrentTime("id000001", 12);',
        'mediaSetVolume("id000001", 0.5);',
    ]


@pytest.mark.unit
def test_source_change_reloads(session, bridge, live_root):
    """Test a new source replaces the source list and reloads the player."""
    audio = live_root(AudioPlayer(session, {"src": "/a.mp3"}))
    audio.set("src", "/b.mp3")
    assert bridge.messages == ['updateInnerHTML("id000001", "<source src=\\"/b.mp3\\">");\nmediaLoad("id000001");']


@pytest.mark.unit
def test_playback_state_getters(params):
    """Test state getters read the answer value."""
    state = {"currentTime": "3.5", "duration": "10", "paused": "1", "ended": "0"}
    bridge = RecordingBridge(responder=lambda function, args: {"value": state.get(args[1], "")})
    session = Session(3, None, params, bridge)
    video = VideoPlayer(session)
    assert video.current_time() == 3.5
    assert video.duration() == 10.0
    assert video.is_paused()
    assert not video.is_ended()
    assert video.volume() == 0.0
    assert bridge.calls[0] == ("mediaGet", ("id000001", "currentTime"))


@pytest.mark.unit
def test_media_events_fire(session, live_root):
    """Test media events reach their listeners with their values."""
    seen = []
    audio = live_root(AudioPlayer(session, {
        "ended-event": lambda: seen.append("ended"),
        "time-update-event": lambda value: seen.append(value),
        "player-error-event": lambda code, message: seen.append((code, message)),
    }))
    session.handle_message(event("ended-event{id=id000001}"))
    session.handle_message(event("time-update-event{id=id000001, value=4.25}"))
    session.handle_message(event('player-error-event{id=id000001, code=4, message="unsupported"}'))
    assert seen == ["ended", 4.25, (4, "unsupported")]
    assert audio.listeners("ended-event")


# ============================================================================
# Image View
# ============================================================================

@pytest.mark.unit
def test_image_view_render(offline_session):
    """Test the img element with fit and alternative text."""
    image = ImageView(offline_session, {"src": "/cat.png", "alt-text": "A cat", "fit": "cover"})
    html = image.html()
    assert 'class="ruiImageView ruiView"' in html
    assert '<img id="id000001image" src="/cat.png" alt="A cat" style="object-fit: cover;"' in html


@pytest.mark.unit
def test_image_view_without_source(offline_session):
    """Test an image view without a source is empty."""
    assert ImageView(offline_session).image_html() == ""


@pytest.mark.unit
def test_image_view_source_change(session, bridge, live_root):
    """Test a new source re-renders the image and load results fire."""
    loaded = []
    image = live_root(ImageView(session, {"src": "/a.png", "loaded-event": lambda: loaded.append(True)}))
    image.set("src", "/b.png")
    assert bridge.messages[0].startswith('updateInnerHTML("id000001", "<img id=\\"id000001image\\" src=\\"/b.png\\"')
    session.handle_message(event("imageViewLoaded{id=id000001}"))
    assert loaded == [True]


# ============================================================================
# Custom View
# ============================================================================

class Greeting(CustomView):
    def create_super_view(self, session):
        return TextView(session, "Hello")


@pytest.mark.unit
def test_custom_view_delegates(offline_session):
    """Test properties and rendering belong to the wrapped view."""
    greeting = Greeting(offline_session, {"width": "10px"})
    assert greeting.html_id() == greeting.super_view.html_id()
    assert greeting.get("width") == greeting.super_view.get("width")
    assert greeting.html() == greeting.super_view.html()
    assert greeting.created


@pytest.mark.unit
def test_custom_view_requires_super_view(offline_session):
    """Test a custom view must build its content."""
    with pytest.raises(NotImplementedError):
        CustomView(offline_session)


# ============================================================================
# Grid and Column Layouts
# ============================================================================

@pytest.mark.unit
def test_grid_tracks_and_cells(offline_session):
    """Test cell sizes become grid templates and ranges become grid lines."""
    grid = GridLayout(offline_session, {
        "cell-width": "50px, 50px",
        "cell-height": "20px",
        "gap": "4px",
        "content": [TextView(offline_session, {"text": "x", "row": "1:2", "column": "0"})],
    })
    html = grid.html()
    assert 'class="ruiGridLayout ruiView"' in html
    assert "grid-template-columns: repeat(2, 50px);" in html
    assert "grid-template-rows: repeat(auto-fill, 20px);" in html
    assert "grid-row: 2 / 4;" in html
    assert "grid-column: 1 / 2;" in html


@pytest.mark.unit
def test_column_layout(offline_session):
    """Test column count and the gap alias."""
    layout = ColumnLayout(offline_session, {"column-count": 2, "gap": "10px", "content": ["a"]})
    html = layout.html()
    assert "column-count: 2;" in html
    assert "column-gap: 10px;" in html
