"""
SSE client: delivers events from one EventSource to a single consumer.
"""
import asyncio
import logging
from typing import Any, AsyncIterator, Generic, Optional, Type, TypeVar

from ..config import ApiContext, OptionsLike, coerce_options
from ..resolver import get_api_base, get_default_context
from ..transport.event_source import create_event_source
from ..types import EventSource, StreamError, StreamEvent, StreamListener, StreamMessage, normalize_method

logger = logging.getLogger(__name__)

LOG_PREFIX = "[api-runtime:sse]"

T = TypeVar("T")

_CLOSED = object()


class SSEStream(Generic[T]):
    """One streaming session.

    Exactly one consumer receives events: either a callback registered with
    ``listen`` or an async iterator obtained from ``events()`` /
    ``async for``. Registering a new consumer replaces the previous one.
    Events that arrive while no consumer is registered are dropped.
    """

    def __init__(self, url: str, source: EventSource):
        self.url = url
        self.source = source
        self._listener: Optional[StreamListener] = None
        self._queue: Optional["asyncio.Queue[Any]"] = None
        self._closed = False
        source.on_message = self._on_message
        source.on_error = self._on_error

    @property
    def closed(self) -> bool:
        return self._closed

    def _dispatch(self, event: StreamEvent) -> None:
        if self._closed or self._listener is None:
            return
        self._listener(event)

    def _on_message(self, event: Any) -> None:
        self._dispatch(StreamMessage(data=event.data))

    def _on_error(self, event: Any) -> None:
        self._dispatch(StreamError(event=event))

    def _end_iteration(self) -> None:
        if self._queue is not None:
            self._queue.put_nowait(_CLOSED)
            self._queue = None

    def listen(self, listener: StreamListener) -> None:
        """Route all subsequent events to ``listener``."""
        self._end_iteration()
        self._listener = listener

    async def events(self) -> AsyncIterator[StreamEvent]:
        """Iterate over events until the stream is cancelled or another consumer takes over."""
        if self._closed:
            return
        self._end_iteration()
        queue: "asyncio.Queue[Any]" = asyncio.Queue()
        self._queue = queue
        self._listener = queue.put_nowait
        try:
            while True:
                item = await queue.get()
                if item is _CLOSED:
                    return
                yield item
        finally:
            # consumer stopped iterating early; free the slot
            if self._queue is queue:
                self._queue = None
                self._listener = None

    def __aiter__(self) -> AsyncIterator[StreamEvent]:
        return self.events()

    def cancel(self) -> None:
        """Close the connection. Nothing is delivered afterwards."""
        if self._closed:
            return
        logger.debug(f"{LOG_PREFIX} Cancelling stream {self.url}")
        self._closed = True
        self.source.close()
        self._end_iteration()


def sse(
    method: str,
    url: str,
    options: OptionsLike = None,
    *,
    context: Optional[ApiContext] = None,
    message_type: Optional[Type[T]] = None,
) -> SSEStream[T]:
    """Open a stream to ``url`` right away.

    ``method`` is checked but the connection always uses GET. Message data is
    passed through as received; ``message_type`` only informs type checkers.
    """
    normalize_method(method)
    opts = coerce_options(options)
    ctx = context or get_default_context()

    full_url = f"{get_api_base(opts, ctx)}{url}"
    headers = {**ctx.headers, **opts.headers}
    factory = opts.event_source or ctx.event_source or create_event_source

    logger.debug(f"{LOG_PREFIX} Opening stream {full_url}")
    return SSEStream(full_url, factory(full_url, headers))
