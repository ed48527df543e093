"""
WebSocket Bridge
Bridge implementation over a FastAPI websocket.

Session code runs on the session worker thread while the websocket lives on
the event loop. Frames are handed to the loop through an ``asyncio.Queue``
drained by a single writer task, so they reach the browser in the order
they were produced.
"""

import asyncio

from fastapi import WebSocket, WebSocketDisconnect

from ..core.logging_config import get_logger
from ..session import Bridge

logger = get_logger(__name__)

_CLOSE = None


class WebSocketBridge(Bridge):
    def __init__(self, websocket: WebSocket, loop: asyncio.AbstractEventLoop, getter_timeout: float = 5.0):
        super().__init__(getter_timeout)
        self.websocket = websocket
        self._loop = loop
        self._outbox: asyncio.Queue[str | None] = asyncio.Queue()
        self._writer: asyncio.Task | None = None

    def start(self) -> None:
        """Start the writer task; call from the event loop."""
        if self._writer is None:
            self._writer = self._loop.create_task(self._drain())

    def _send(self, text: str) -> None:
        self._loop.call_soon_threadsafe(self._outbox.put_nowait, text)

    def _on_close(self) -> None:
        self._loop.call_soon_threadsafe(self._outbox.put_nowait, _CLOSE)

    async def _drain(self) -> None:
        while True:
            text = await self._outbox.get()
            if text is _CLOSE:
                break
            try:
                await self.websocket.send_text(text)
            except (WebSocketDisconnect, RuntimeError) as e:
                logger.warning("websocket_send_failed", error=str(e))
                break

    async def wait_closed(self) -> None:
        """Wait until the writer has flushed every queued frame."""
        if self._writer is not None:
            await self._writer
