"""
Application
The sessions of one served application, keyed by session id.

A browser opens the websocket and sends ``startSession{...}``; when the
message carries the ``sessionID`` of a live session the tab is re-attached
to it, otherwise a new session is created from the content factory.
"""

import random
import threading

from ..core.config import AppParams
from ..core.logging_config import get_logger
from ..data import DataObject
from ..session import Bridge, Session

logger = get_logger(__name__)

START_SESSION = "startSession"
SESSION_ID = "sessionID"


class Application:
    def __init__(self, params: AppParams):
        self.params = params
        self.sessions: dict[int, Session] = {}
        self._lock = threading.Lock()

    def _next_session_id(self) -> int:
        while True:
            session_id = random.randint(1, 0x7FFFFFFE)
            if session_id not in self.sessions:
                return session_id

    def session(self, session_id: int) -> Session | None:
        with self._lock:
            session = self.sessions.get(session_id)
        if session is not None and session.closed:
            self.remove_session(session_id)
            return None
        return session

    def remove_session(self, session_id: int) -> None:
        with self._lock:
            self.sessions.pop(session_id, None)

    def start_session(self, info: DataObject, bridge: Bridge) -> Session | None:
        """
        Attach a browser tab: re-attach to its live session or start a new one.

        Args:
            info: The ``startSession`` message
            bridge: Channel to the tab

        Returns:
            The session, or None when no content factory is configured
        """
        text = info.property_value(SESSION_ID)
        if text is not None and text.isdigit():
            session = self.session(int(text))
            if session is not None:
                logger.info("session_reconnected", session_id=session.id)
                session.post_call(lambda: self._reattach(session, info, bridge))
                return session
            logger.debug("session_not_found", session_id=text)

        if self.params.content_factory is None:
            logger.error("application_without_content")
            return None

        with self._lock:
            session_id = self._next_session_id()
            session = Session(session_id, self.params.content_factory(), self.params, bridge)
            self.sessions[session_id] = session
        session.post_call(lambda: self._start(session, info))
        return session

    def _start(self, session: Session, info: DataObject) -> None:
        session.handle_session_info(info)
        session.run_script(f"sessionID = '{session.id}';")
        if self.params.title:
            session.call_function("setTitle", session.get_string(self.params.title))
        if not session.start():
            session.close()
            self.remove_session(session.id)

    def _reattach(self, session: Session, info: DataObject, bridge: Bridge) -> None:
        session.handle_session_info(info)
        bridge.send_message(f"sessionID = '{session.id}';")
        session.on_reconnect(bridge)

    def disconnected(self, session: Session, bridge: Bridge) -> None:
        """The websocket of ``session`` dropped; the session stays for a reconnect."""
        bridge.close()

        def notify() -> None:
            if session.bridge is bridge and not session.closed:
                session.on_disconnect()

        session.post_call(notify)

    def close(self) -> None:
        with self._lock:
            sessions, self.sessions = list(self.sessions.values()), {}
        for session in sessions:
            session.post_call(session.close)
        logger.info("application_closed", sessions=len(sessions))
