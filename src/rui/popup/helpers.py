"""Ready-made message and question popups."""

from typing import Any, Callable

from ..properties import tags
from ..views import TextView
from .popup import Popup, PopupButton


def _text_view(session: Any, text: str) -> TextView:
    return TextView(session, {tags.TEXT: session.get_string(text), tags.STYLE: "ruiMessageText"})


def _answer(fn: Callable[[], Any] | None) -> Callable[[Popup], None]:
    def click(popup: Popup) -> None:
        popup.dismiss()
        if fn is not None:
            fn()

    return click


def show_message(session: Any, title: str, text: str) -> Popup:
    """Show ``text`` in a closable popup."""
    popup = Popup(
        _text_view(session, text),
        {
            tags.TITLE: session.get_string(title),
            tags.CLOSE_BUTTON: True,
            tags.OUTSIDE_CLOSE: True,
        },
    )
    popup.show()
    return popup


def show_question(
    session: Any,
    title: str,
    text: str,
    on_yes: Callable[[], Any] | None = None,
    on_no: Callable[[], Any] | None = None,
) -> Popup:
    """
    Ask a Yes/No question.

    Args:
        session: Session to show the popup in
        title: Popup title, translated through the session strings
        text: The question, translated likewise
        on_yes: Called after "Yes" dismissed the popup
        on_no: Called after "No" dismissed the popup
    """
    popup = Popup(
        _text_view(session, text),
        {
            tags.TITLE: session.get_string(title),
            tags.BUTTONS: [
                PopupButton(session.get_string("No"), _answer(on_no)),
                PopupButton(session.get_string("Yes"), _answer(on_yes)),
            ],
        },
    )
    popup.show()
    return popup


def show_cancellable_question(
    session: Any,
    title: str,
    text: str,
    on_yes: Callable[[], Any] | None = None,
    on_no: Callable[[], Any] | None = None,
    on_cancel: Callable[[], Any] | None = None,
) -> Popup:
    """Yes/No question with a third "Cancel" answer."""
    popup = Popup(
        _text_view(session, text),
        {
            tags.TITLE: session.get_string(title),
            tags.BUTTONS: [
                PopupButton(session.get_string("Cancel"), _answer(on_cancel)),
                PopupButton(session.get_string("No"), _answer(on_no)),
                PopupButton(session.get_string("Yes"), _answer(on_yes)),
            ],
        },
    )
    popup.show()
    return popup
