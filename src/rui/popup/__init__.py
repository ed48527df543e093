"""Popups: modal boxes above the root view."""

from .popup import Popup, PopupButton
from .manager import PopupManager
from .helpers import show_cancellable_question, show_message, show_question

__all__ = [
    "Popup",
    "PopupButton",
    "PopupManager",
    # Helpers
    "show_message",
    "show_question",
    "show_cancellable_question",
]
