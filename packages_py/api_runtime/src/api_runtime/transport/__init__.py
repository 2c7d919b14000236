"""
Default transports (httpx fetch and httpx-sse event source).
"""
from .event_source import EventSourceClosed, HttpxEventSource, ReadyState, create_event_source
from .httpx_fetch import HttpxFetchResponse, create_httpx_fetch, httpx_fetch

__all__ = [
    "HttpxFetchResponse", "create_httpx_fetch", "httpx_fetch",
    "HttpxEventSource", "EventSourceClosed", "ReadyState", "create_event_source",
]
