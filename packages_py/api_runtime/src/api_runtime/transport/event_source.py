"""
Default streaming transport: an EventSource built on httpx + httpx-sse.
"""
import asyncio
import logging
from enum import IntEnum
from typing import Any, Callable, Dict, Optional

import httpx
from httpx_sse import SSEError, ServerSentEvent, aconnect_sse

logger = logging.getLogger(__name__)

LOG_PREFIX = "[api-runtime:sse]"


class ReadyState(IntEnum):
    CONNECTING = 0
    OPEN = 1
    CLOSED = 2


class EventSourceClosed(Exception):
    """Reported through on_error when the server ends the stream."""

    def __init__(self, url: str):
        super().__init__(f"Event stream {url} was closed by the server")
        self.url = url


class HttpxEventSource:
    """Connects on construction and pushes events into callback slots.

    Only unnamed (``message``) events reach ``on_message``. HTTP failures,
    protocol errors and the end of the stream are reported to ``on_error``.
    There is no reconnection.
    """

    def __init__(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.on_message: Optional[Callable[[ServerSentEvent], None]] = None
        self.on_error: Optional[Callable[[Any], None]] = None
        self.ready_state = ReadyState.CONNECTING
        self._headers = dict(headers or {})
        self._client = client
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def _run(self) -> None:
        client = self._client or httpx.AsyncClient(timeout=None, follow_redirects=True)
        try:
            async with aconnect_sse(client, "GET", self.url, headers=self._headers) as source:
                source.response.raise_for_status()
                self.ready_state = ReadyState.OPEN
                logger.debug(f"{LOG_PREFIX} Connected: {self.url}")
                async for event in source.aiter_sse():
                    if event.event == "message":
                        self._deliver(self.on_message, event)
            self._emit_error(EventSourceClosed(self.url))
        except (httpx.HTTPError, SSEError) as e:
            logger.debug(f"{LOG_PREFIX} Stream error on {self.url}: {e}")
            self._emit_error(e)
        finally:
            self.ready_state = ReadyState.CLOSED
            if self._client is None:
                await client.aclose()

    def _deliver(self, callback: Optional[Callable[[Any], None]], payload: Any) -> None:
        # a failing callback must not tear down the connection
        if callback is None:
            return
        try:
            callback(payload)
        except Exception:
            logger.exception(f"{LOG_PREFIX} Event handler failed on {self.url}")

    def _emit_error(self, error: Any) -> None:
        self._deliver(self.on_error, error)

    def close(self) -> None:
        self.ready_state = ReadyState.CLOSED
        if not self._task.done():
            logger.debug(f"{LOG_PREFIX} Closing: {self.url}")
            self._task.cancel()


def create_event_source(url: str, headers: Dict[str, str]) -> HttpxEventSource:
    """EventSource factory used when no override is configured."""
    return HttpxEventSource(url, headers)
