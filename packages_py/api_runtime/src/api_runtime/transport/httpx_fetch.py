"""
Default fetch transport based on httpx.
"""
import asyncio
import logging
from typing import Optional

import httpx

from ..core.abort import AbortError, AbortSignal
from ..types import Fetch, FetchOptions

logger = logging.getLogger(__name__)

LOG_PREFIX = "[api-runtime:fetch]"


class HttpxFetchResponse:
    """Adapts an httpx.Response to the fetch response contract."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def ok(self) -> bool:
        return self._response.is_success

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    async def text(self) -> str:
        return self._response.text


async def _race_abort(task: "asyncio.Task[httpx.Response]", signal: AbortSignal) -> httpx.Response:
    aborted = asyncio.ensure_future(signal.wait())
    try:
        await asyncio.wait({task, aborted}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        task.cancel()
        raise
    finally:
        aborted.cancel()

    if task.done():
        return task.result()

    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass
    raise AbortError(signal.reason)


def create_httpx_fetch(client: Optional[httpx.AsyncClient] = None) -> Fetch:
    """Create a fetch function.

    When ``client`` is omitted a short-lived httpx.AsyncClient is opened per
    request, so nothing is pooled between calls.
    """

    async def fetch(url: str, options: FetchOptions) -> HttpxFetchResponse:
        method = options["method"]
        signal: Optional[AbortSignal] = options.get("signal")
        if signal is not None:
            signal.raise_if_aborted()

        async def send() -> httpx.Response:
            if client is not None:
                return await client.request(
                    method, url, content=options.get("body"), headers=options.get("headers")
                )
            async with httpx.AsyncClient(follow_redirects=True) as owned:
                return await owned.request(
                    method, url, content=options.get("body"), headers=options.get("headers")
                )

        logger.debug(f"{LOG_PREFIX} Request: {method} {url}")
        task = asyncio.ensure_future(send())
        if signal is None:
            response = await task
        else:
            response = await _race_abort(task, signal)
        logger.debug(f"{LOG_PREFIX} Response: {method} {url} -> {response.status_code}")
        return HttpxFetchResponse(response)

    return fetch


httpx_fetch: Fetch = create_httpx_fetch()
