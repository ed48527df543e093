"""
Popup Manager
The per-session stack of visible popups.

All popups share the page's popup layer element; the topmost one is the
last in ``popups``. While any popup is shown the root view stops taking
pointer events.
"""

from typing import TYPE_CHECKING, Any

from ..core.config import POPUP_LAYER_ID, ROOT_VIEW_ID
from ..core.logging_config import get_logger
from ..data import DataObject
from ..events import KeyEvent, names

if TYPE_CHECKING:
    from .popup import Popup

logger = get_logger(__name__)

_BLUR_SCRIPT = "if (document.activeElement != document.body) document.activeElement.blur();"

_CLOSE_KEYS = ("Escape",)


class PopupManager:
    def __init__(self, session: Any):
        self.session = session
        self.popups: list["Popup"] = []

    def __len__(self) -> int:
        return len(self.popups)

    def top(self) -> "Popup | None":
        return self.popups[-1] if self.popups else None

    def layer_html(self) -> str:
        buffer: list[str] = []
        for popup in self.popups:
            popup.render(buffer)
        return "".join(buffer)

    def update_layer(self) -> None:
        self.session.update_inner_html(POPUP_LAYER_ID, self.layer_html())

    def show(self, popup: "Popup") -> None:
        """Put a popup on top of the others."""
        if popup in self.popups:
            logger.warning("popup_already_shown", popup=repr(popup))
            return
        self.popups.append(popup)
        session = self.session
        session.run_script(_BLUR_SCRIPT)
        with session.update_script(POPUP_LAYER_ID):
            self.update_layer()
            session.update_css_property(POPUP_LAYER_ID, "visibility", "visible")
            session.update_css_property(ROOT_VIEW_ID, "pointer-events", "none")
        logger.debug("popup_shown", count=len(self.popups))

    def dismiss(self, popup: "Popup") -> bool:
        """
        Remove a popup from the stack and from the page.

        Returns:
            False if the popup was not shown
        """
        if popup not in self.popups:
            return False
        self.popups.remove(popup)
        session = self.session
        with session.update_script(POPUP_LAYER_ID):
            if self.popups:
                self.update_layer()
            else:
                session.update_css_property(POPUP_LAYER_ID, "visibility", "hidden")
                session.update_inner_html(POPUP_LAYER_ID, "")
                session.update_css_property(ROOT_VIEW_ID, "pointer-events", "auto")
        popup.detach()
        logger.debug("popup_dismissed", count=len(self.popups))
        return True

    def dismiss_all(self) -> None:
        while self.popups:
            self.popups[-1].dismiss()

    # ========================================================================
    # Events
    # ========================================================================

    def handle_layer_event(self, command: str, message: DataObject) -> None:
        """Events addressed to the layer element itself."""
        if command != names.CLICK_EVENT:
            return
        popup = self.top()
        if popup is not None and popup.outside_close:
            popup.dismiss()

    def key_event(self, event: KeyEvent) -> bool:
        """Escape closes the topmost closable popup; True when it was consumed."""
        popup = self.top()
        if popup is None or event.code not in _CLOSE_KEYS or event.control_keys():
            return False
        if popup.close_button or popup.outside_close:
            popup.dismiss()
            return True
        return False
