"""
Session Bridge
Outbound JavaScript frames and the getter-RPC over one duplex channel.

Outbound traffic is a stream of JavaScript calls into the client helpers
(``updateCSSProperty``, ``updateInnerHTML`` ...). Calls made between
``start_update_script`` and the matching ``finish_update_script`` are
collected and sent as one newline-joined frame; nested brackets collapse
into the outermost one.

A getter-RPC sends a call whose first argument is an answer id, then
blocks until ``answer_received`` delivers ``answer{answerID=N, ...}`` or the
timeout elapses. Answers must be delivered from a different thread than
the one waiting, which is why the inbound reader resolves them directly
instead of queueing them to the session worker.
"""

import json
import threading
import time
from abc import ABC, abstractmethod
from itertools import count
from typing import Any, Callable

from ..core.errors import BridgeDisconnectedError, GetterTimeoutError, report_error
from ..core.logging_config import get_logger
from ..core.metrics import metrics_collector
from ..data import DataObject
from ..values import Color, format_float

logger = get_logger(__name__)

ANSWER_TAG = "answer"
ANSWER_ID = "answerID"
ERROR_TEXT = "errorText"


def js_value(value: Any) -> str:
    """JavaScript literal of a call argument."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Color):
        return json.dumps(value.css_string())
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(js_value(item) for item in value) + "]"
    return json.dumps(str(value), ensure_ascii=False)


def js_call(function: str, *args: Any) -> str:
    return f"{function}({', '.join(js_value(arg) for arg in args)});"


def error_answer(text: str) -> DataObject:
    answer = DataObject(ANSWER_TAG)
    answer.set_property_value(ERROR_TEXT, text)
    return answer


class _PendingAnswer:
    __slots__ = ("event", "answer")

    def __init__(self) -> None:
        self.event = threading.Event()
        self.answer: DataObject | None = None


class Bridge(ABC):
    """Base bridge: frame batching and answer correlation."""

    def __init__(self, getter_timeout: float = 5.0):
        self.getter_timeout = getter_timeout
        self._lock = threading.Lock()
        self._batch: list[str] | None = None
        self._batch_depth = 0
        self._answer_ids = count(1)
        self._pending: dict[int, _PendingAnswer] = {}
        self._closed = False

    # ========================================================================
    # Transport hooks
    # ========================================================================

    @abstractmethod
    def _send(self, text: str) -> None:
        """Deliver one frame to the browser."""

    def _on_close(self) -> None:
        """Release the transport."""

    # ========================================================================
    # Outbound
    # ========================================================================

    @property
    def closed(self) -> bool:
        return self._closed

    def send_message(self, script: str) -> None:
        """Queue a script, or send it at once outside an update bracket."""
        if self._closed:
            report_error(BridgeDisconnectedError("bridge is closed", script=script[:64]))
            return
        with self._lock:
            if self._batch is not None:
                self._batch.append(script)
                return
        self._write(script)

    def _write(self, text: str) -> None:
        metrics_collector.record_outbound()
        self._send(text)

    def start_update_script(self, html_id: str = "") -> None:
        with self._lock:
            if self._batch_depth == 0:
                self._batch = []
            self._batch_depth += 1

    def finish_update_script(self, html_id: str = "") -> None:
        with self._lock:
            if self._batch_depth == 0:
                logger.warning("unbalanced_update_script", html_id=html_id)
                return
            self._batch_depth -= 1
            if self._batch_depth > 0:
                return
            scripts, self._batch = self._batch or [], None
        if scripts and not self._closed:
            self._write("\n".join(scripts))

    def call_function(self, function: str, *args: Any) -> None:
        self.send_message(js_call(function, *args))

    def update_inner_html(self, html_id: str, html: str) -> None:
        self.call_function("updateInnerHTML", html_id, html)

    def append_to_inner_html(self, html_id: str, html: str) -> None:
        self.call_function("appendToInnerHTML", html_id, html)

    def update_css_property(self, html_id: str, name: str, value: str) -> None:
        self.call_function("updateCSSProperty", html_id, name, value)

    def update_property(self, html_id: str, name: str, value: Any) -> None:
        self.call_function("updateProperty", html_id, name, value)

    def remove_property(self, html_id: str, name: str) -> None:
        self.call_function("removeProperty", html_id, name)

    # ========================================================================
    # Getter-RPC
    # ========================================================================

    def remote_value(self, function: str, *args: Any, timeout: float | None = None) -> DataObject:
        """
        Call a client function that replies with an ``answer`` message.

        Returns:
            The answer object, or an answer carrying ``errorText`` on
            timeout or when the bridge is closed
        """
        if self._closed:
            report_error(BridgeDisconnectedError("getter called on a closed bridge", function=function))
            return error_answer("bridge is closed")

        answer_id = next(self._answer_ids)
        pending = _PendingAnswer()
        with self._lock:
            self._pending[answer_id] = pending

        started = time.perf_counter()
        self._write(js_call(function, answer_id, *args))
        wait = self.getter_timeout if timeout is None else timeout
        if not pending.event.wait(wait):
            with self._lock:
                self._pending.pop(answer_id, None)
            metrics_collector.record_getter_timeout(function)
            report_error(GetterTimeoutError(
                f"no answer to {function} within {wait}s", function=function, answer_id=answer_id
            ))
            return error_answer(f"{function}: timeout")

        metrics_collector.record_getter(function, time.perf_counter() - started)
        return pending.answer or error_answer(f"{function}: empty answer")

    def answer_received(self, answer: DataObject) -> bool:
        """
        Resolve the pending getter an answer belongs to.

        Returns:
            False if the answer id is missing or nobody waits for it
        """
        text = answer.property_value(ANSWER_ID)
        try:
            answer_id = int(text or "")
        except ValueError:
            logger.error("answer_without_id", answer=answer.to_text())
            return False
        with self._lock:
            pending = self._pending.pop(answer_id, None)
        if pending is None:
            logger.warning("unexpected_answer", answer_id=answer_id)
            return False
        pending.answer = answer
        pending.event.set()
        return True

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def close(self) -> None:
        """Close the channel; every pending getter gets an error answer."""
        if self._closed:
            return
        self._closed = True
        with self._lock:
            pending, self._pending = self._pending, {}
        for item in pending.values():
            item.answer = error_answer("bridge is closed")
            item.event.set()
        self._on_close()


class RecordingBridge(Bridge):
    """
    In-memory bridge: frames are appended to ``messages``.

    A ``responder`` may answer getter calls synchronously; it receives the
    function name and arguments and returns the answer fields.
    """

    def __init__(
        self,
        responder: Callable[[str, tuple[Any, ...]], dict[str, str] | None] | None = None,
        getter_timeout: float = 0.05,
    ):
        super().__init__(getter_timeout)
        self.messages: list[str] = []
        self.responder = responder
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _send(self, text: str) -> None:
        self.messages.append(text)

    def remote_value(self, function: str, *args: Any, timeout: float | None = None) -> DataObject:
        self.calls.append((function, args))
        if self.responder is None or self._closed:
            return super().remote_value(function, *args, timeout=timeout)

        fields = self.responder(function, args)
        if fields is None:
            return super().remote_value(function, *args, timeout=timeout)
        answer = DataObject(ANSWER_TAG)
        for key, value in fields.items():
            answer.set_property_value(key, str(value))
        self.messages.append(js_call(function, 0, *args))
        return answer

    def text(self) -> str:
        return "\n".join(self.messages)

    def reset(self) -> None:
        self.messages.clear()
        self.calls.clear()
