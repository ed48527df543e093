"""Application content of a session and its lifecycle hooks."""

from abc import ABC, abstractmethod
from typing import Any


class SessionContent(ABC):
    """
    One application instance per browser tab.

    ``create_root_view`` builds the view tree; the remaining hooks are
    called in the order start, (pause, resume)*, finish. ``on_disconnect``
    and ``on_reconnect`` follow the websocket, which may drop and come back
    while the session lives on.
    """

    @abstractmethod
    def create_root_view(self, session: Any) -> Any:
        """Build and return the root view, or None to refuse the session."""

    def on_start(self, session: Any) -> None:
        pass

    def on_finish(self, session: Any) -> None:
        pass

    def on_pause(self, session: Any) -> None:
        pass

    def on_resume(self, session: Any) -> None:
        pass

    def on_disconnect(self, session: Any) -> None:
        pass

    def on_reconnect(self, session: Any) -> None:
        pass
