"""Pytest configuration and fixtures."""

import os
import pytest
from typing import Any, Callable

from rui.core import AppParams, get_settings
from rui.session import RecordingBridge, Session, SessionContent
from rui.theme import Theme, create_theme_from_text


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    # Set test environment variables
    os.environ['RUI_LOG_LEVEL'] = 'DEBUG'
    os.environ['RUI_GETTER_TIMEOUT'] = '0.05'  # Unanswered getters fail fast
    os.environ['RUI_ENABLE_METRICS'] = 'true'
    os.environ['RUI_RESOURCES_PATH'] = ''


# ============================================================================
# Helpers
# ============================================================================

class RootContent(SessionContent):
    """Session content whose root view comes from a factory."""

    def __init__(self, factory: Callable[[Any], Any] | None = None):
        self.factory = factory
        self.events: list[str] = []

    def create_root_view(self, session):
        self.events.append("create")
        return self.factory(session) if self.factory else None

    def on_start(self, session):
        self.events.append("start")

    def on_resume(self, session):
        self.events.append("resume")

    def on_pause(self, session):
        self.events.append("pause")

    def on_finish(self, session):
        self.events.append("finish")

    def on_disconnect(self, session):
        self.events.append("disconnect")

    def on_reconnect(self, session):
        self.events.append("reconnect")


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def params():
    """Application parameters for test sessions."""
    return AppParams(title="Test", getter_timeout=0.05)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def bridge():
    """Bridge that records every outbound frame."""
    return RecordingBridge()


@pytest.fixture
def session(bridge, params):
    """Session connected to a recording bridge."""
    session = Session(1, RootContent(), params, bridge)
    yield session
    session.worker.stop()


@pytest.fixture
def offline_session(params):
    """Session without a browser connection; updates are not sent."""
    return Session(2, RootContent(), params)


@pytest.fixture
def live_root(session, bridge):
    """Install a view as the session root, render the page and clear the recorded frames."""

    def install(view):
        session.set_root_view(view)
        session.reload()
        bridge.reset()
        return view

    return install


# ============================================================================
# Theme Fixtures
# ============================================================================

THEME_TEXT = """
theme {
    name = test,
    constants = _{
        gap = 8px,
        pair = "@gap, 4px",
        loop1 = "@loop2",
        loop2 = "@loop1",
        padding = 6px,
    },
    constants:touch = _{
        padding = 12px,
    },
    colors = _{
        accent = #FF0000FF,
        alias = "@accent",
    },
    colors:dark = _{
        accent = #FFFFFF00,
    },
    styles = [
        card {
            padding = "@gap",
            background-color = "@accent",
        },
        ruiCard {
            text-color = red,
        },
    ],
    styles:landscape = [
        card {
            width = 100px,
        },
    ],
}
"""


@pytest.fixture
def theme() -> Theme:
    """Small theme with constants, dark colors and a media rule."""
    theme = create_theme_from_text(THEME_TEXT)
    assert theme is not None
    return theme
