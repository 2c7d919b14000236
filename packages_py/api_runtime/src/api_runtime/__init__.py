"""
API Runtime - support layer for generated OpenAPI clients
"""

__version__ = "0.1.0"

from .types import (
    HttpMethod, UNSET, Fetch, FetchOptions, FetchResponse,
    EventSource, EventSourceFactory,
    StreamEvent, StreamMessage, StreamError, StreamListener,
)
from .config import ApiOptions, ApiContext
from .errors import (
    ErrorKind, ApiError, TransportError, RequestAborted, HttpStatusError, DecodeError,
)
from .resolver import get_api_base, set_global_api_base, get_default_context
from .core import (
    AbortController, AbortError, AbortSignal,
    PendingRequest, request_plain, request_json, with_query,
)
from .streaming import SSEStream, sse
from .transport import HttpxEventSource, EventSourceClosed, create_httpx_fetch, httpx_fetch
from .client import ApiClient

__all__ = [
    # Types
    "HttpMethod", "UNSET", "Fetch", "FetchOptions", "FetchResponse",
    "EventSource", "EventSourceFactory",
    "StreamEvent", "StreamMessage", "StreamError", "StreamListener",
    # Config
    "ApiOptions", "ApiContext",
    "get_api_base", "set_global_api_base", "get_default_context",
    # Errors
    "ErrorKind", "ApiError", "TransportError", "RequestAborted", "HttpStatusError", "DecodeError",
    # Requests
    "AbortController", "AbortError", "AbortSignal",
    "PendingRequest", "request_plain", "request_json", "with_query",
    # Streaming
    "SSEStream", "sse",
    # Transports
    "HttpxEventSource", "EventSourceClosed", "create_httpx_fetch", "httpx_fetch",
    # Client
    "ApiClient",
]
