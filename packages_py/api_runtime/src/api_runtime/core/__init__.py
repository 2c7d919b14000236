"""
Request execution and JSON decoding.
"""
from .abort import AbortController, AbortError, AbortSignal
from .json_request import request_json
from .request import PendingRequest, merge_headers, request_plain, serialize_body
from .url import with_query

__all__ = [
    "AbortController", "AbortError", "AbortSignal",
    "PendingRequest", "request_plain", "request_json",
    "merge_headers", "serialize_body",
    "with_query",
]
