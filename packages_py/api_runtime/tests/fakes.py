"""
Transport doubles shared by the api_runtime tests.
"""
import asyncio
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple

from api_runtime import AbortError


class FakeResponse:
    def __init__(self, status: int = 200, body: str = ""):
        self.status = status
        self.ok = 200 <= status <= 299
        self._body = body

    async def text(self) -> str:
        return self._body


class RecordingFetch:
    """Fetch transport that records every call and returns a canned response."""

    def __init__(self, response: Optional[FakeResponse] = None):
        self.response = response or FakeResponse()
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def __call__(self, url: str, options: Dict[str, Any]) -> FakeResponse:
        self.calls.append((url, options))
        return self.response

    @property
    def last(self) -> Tuple[str, Dict[str, Any]]:
        return self.calls[-1]


class BlockingFetch:
    """Fetch transport that waits until released or aborted."""

    def __init__(self, body: str = "done"):
        self.body = body
        self.release = asyncio.Event()
        self.abort_count = 0
        self.signal = None

    def _on_abort(self, signal: Any) -> None:
        self.abort_count += 1

    async def __call__(self, url: str, options: Dict[str, Any]) -> FakeResponse:
        signal = options["signal"]
        self.signal = signal
        signal.add_listener(self._on_abort)
        released = asyncio.ensure_future(self.release.wait())
        aborted = asyncio.ensure_future(signal.wait())
        await asyncio.wait({released, aborted}, return_when=asyncio.FIRST_COMPLETED)
        released.cancel()
        aborted.cancel()
        if signal.aborted:
            raise AbortError(signal.reason)
        return FakeResponse(200, self.body)


class FakeEventSource:
    """EventSource double; emit() ignores close() so tests can check the session guards."""

    def __init__(self, url: str, headers: Dict[str, str]):
        self.url = url
        self.headers = headers
        self.on_message = None
        self.on_error = None
        self.closed = False

    def emit(self, data: Any) -> None:
        if self.on_message:
            self.on_message(SimpleNamespace(data=data))

    def fail(self, error: Any) -> None:
        if self.on_error:
            self.on_error(error)

    def close(self) -> None:
        self.closed = True


class FakeEventSourceFactory:
    def __init__(self):
        self.sources: List[FakeEventSource] = []

    def __call__(self, url: str, headers: Dict[str, str]) -> FakeEventSource:
        source = FakeEventSource(url, headers)
        self.sources.append(source)
        return source

    @property
    def last(self) -> FakeEventSource:
        return self.sources[-1]
