from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


class ApiError(Exception):
    """Base exception for every failure surfaced by the runtime."""
    kind: ErrorKind

    def __init__(self, message: str, detail: Any = None):
        super().__init__(message)
        self.detail = detail


class TransportError(ApiError):
    kind = ErrorKind.TRANSPORT

    def __init__(self, method: str, url: str, cause: BaseException):
        msg = f"{method} {url} failed: {cause}"
        super().__init__(msg, detail=cause)
        self.method = method
        self.url = url
        self.cause = cause


class RequestAborted(TransportError):
    """The transport gave up on the request after cancel() was called."""

    def __init__(self, method: str, url: str, cause: BaseException, reason: Optional[str] = None):
        super().__init__(method, url, cause)
        self.reason = reason


class HttpStatusError(ApiError):
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, method: str, url: str, status: int, body: str):
        msg = f"{method} {url} returned HTTP {status}"
        super().__init__(msg, detail=body)
        self.method = method
        self.url = url
        self.status = status
        self.body = body


class DecodeError(ApiError, ValueError):
    kind = ErrorKind.DECODE

    def __init__(self, body: str, cause: ValueError):
        msg = f"Response body is not valid JSON: {cause}"
        super().__init__(msg, detail=cause)
        self.body = body
        self.cause = cause
