"""
Request executor: issues one HTTP request and exposes its cancellation control.
"""
import asyncio
import logging
from typing import Any, Dict, Generator, Generic, Mapping, Optional, TypeVar

from pydantic_core import to_json

from ..config import ApiContext, OptionsLike, coerce_options
from ..errors import HttpStatusError, RequestAborted, TransportError
from ..resolver import get_api_base, get_default_context
from ..transport.httpx_fetch import httpx_fetch
from ..types import UNSET, Fetch, FetchOptions, normalize_method
from .abort import AbortController, AbortError

logger = logging.getLogger(__name__)

LOG_PREFIX = "[api-runtime]"
JSON_CONTENT_TYPE = "application/json"

T = TypeVar("T")


class PendingRequest(Generic[T]):
    """One in-flight HTTP call.

    ``data`` is an asyncio.Task producing the result. ``cancel`` only has an
    effect while the transport has not settled yet. The request itself can be
    awaited directly.
    """

    def __init__(self, method: str, url: str, controller: AbortController):
        self.method = method
        self.url = url
        self.controller = controller
        self.data: "asyncio.Future[T]"
        self._in_flight = True

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def _settle(self) -> None:
        self._in_flight = False

    def cancel(self, reason: Optional[str] = None) -> None:
        if self._in_flight:
            logger.debug(f"{LOG_PREFIX} Cancelling {self.method} {self.url}")
            self.controller.abort(reason)

    def __await__(self) -> Generator[Any, None, T]:
        return self.data.__await__()

    def __repr__(self) -> str:
        return f"<PendingRequest {self.method} {self.url} in_flight={self._in_flight}>"


def serialize_body(body: Any) -> str:
    """Serialize a request body as JSON text, including nested pydantic models."""
    return to_json(body).decode()


def merge_headers(
    base: Mapping[str, str],
    extra: Mapping[str, str],
    has_body: bool,
) -> Dict[str, str]:
    """Merge context and caller headers; the JSON content type always wins when a body is sent."""
    headers = {**base, **extra}
    if has_body:
        headers = {k: v for k, v in headers.items() if k.lower() != "content-type"}
        headers["Content-Type"] = JSON_CONTENT_TYPE
    return headers


async def _execute(
    pending: PendingRequest,
    fetch: Fetch,
    payload: Optional[str],
    headers: Dict[str, str],
) -> str:
    options: FetchOptions = {
        "method": pending.method,
        "body": payload,
        "signal": pending.controller.signal,
        "headers": headers,
    }
    try:
        response = await fetch(pending.url, options)
    except AbortError as e:
        logger.debug(f"{LOG_PREFIX} Aborted: {pending.method} {pending.url}")
        raise RequestAborted(pending.method, pending.url, e, reason=e.reason) from e
    except Exception as e:
        logger.debug(f"{LOG_PREFIX} Transport failed: {pending.method} {pending.url}: {e}")
        raise TransportError(pending.method, pending.url, e) from e
    finally:
        pending._settle()

    try:
        text = await response.text()
    except Exception as e:
        raise TransportError(pending.method, pending.url, e) from e

    if response.ok:
        return text
    raise HttpStatusError(pending.method, pending.url, getattr(response, "status", 0), text)


def request_plain(
    method: str,
    url: str,
    body: Any = UNSET,
    options: OptionsLike = None,
    *,
    context: Optional[ApiContext] = None,
) -> PendingRequest[str]:
    """Issue a request and return its PendingRequest.

    ``url`` is appended verbatim to the resolved API base. When ``body`` is
    given it is sent as JSON with a ``Content-Type: application/json`` header.
    Must be called while an event loop is running.
    """
    http_method = normalize_method(method)
    opts = coerce_options(options)
    ctx = context or get_default_context()

    full_url = f"{get_api_base(opts, ctx)}{url}"
    has_body = body is not UNSET
    payload = serialize_body(body) if has_body else None
    headers = merge_headers(ctx.headers, opts.headers, has_body)
    fetch = opts.fetch or ctx.fetch or httpx_fetch

    pending: PendingRequest[str] = PendingRequest(http_method, full_url, AbortController())
    logger.debug(f"{LOG_PREFIX} Request: {http_method} {full_url}")
    pending.data = asyncio.get_running_loop().create_task(
        _execute(pending, fetch, payload, headers)
    )
    return pending
