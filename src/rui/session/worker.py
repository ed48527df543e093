"""Per-session task: runs inbound messages and posted calls one at a time."""

import queue
import threading
from typing import Any, Callable

from ..core.logging_config import LogContext, get_logger

logger = get_logger(__name__)

_STOP = object()


class SessionWorker:
    """
    A thread that drains one session's inbound queue in arrival order.

    Every view mutation of the session happens on this thread, so
    handlers never race each other.
    """

    def __init__(self, session_id: int, handler: Callable[[Any], None]):
        self.session_id = session_id
        self._handler = handler
        self._queue: queue.Queue = queue.Queue()
        self._thread = threading.Thread(
            target=self._run, name=f"rui-session-{session_id}", daemon=True
        )
        self._started = False

    def start(self) -> None:
        if not self._started:
            self._started = True
            self._thread.start()

    def post(self, message: Any) -> None:
        """Queue an inbound message for the handler."""
        self._queue.put(message)

    def post_call(self, fn: Callable[[], Any]) -> None:
        """Queue a callable to run on the session thread."""
        self._queue.put(_Call(fn))

    def stop(self, wait: float | None = None) -> None:
        self._queue.put(_STOP)
        if wait is not None and self._started and threading.current_thread() is not self._thread:
            self._thread.join(wait)

    def is_current(self) -> bool:
        return threading.current_thread() is self._thread

    def _run(self) -> None:
        with LogContext(session_id=self.session_id):
            while True:
                item = self._queue.get()
                if item is _STOP:
                    break
                try:
                    if isinstance(item, _Call):
                        item.fn()
                    else:
                        self._handler(item)
                except Exception as e:
                    logger.error(
                        "session_handler_failed",
                        error=str(e),
                        error_type=type(e).__name__,
                        exc_info=True,
                    )
        logger.debug("session_worker_stopped")


class _Call:
    __slots__ = ("fn",)

    def __init__(self, fn: Callable[[], Any]):
        self.fn = fn
