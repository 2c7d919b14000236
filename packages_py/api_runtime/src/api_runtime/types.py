"""
Core type definitions for api-runtime.
"""
import json
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Literal,
    Optional,
    Protocol,
    TypedDict,
    Union,
    runtime_checkable,
)

# HTTP Methods
HttpMethod = Literal["DELETE", "GET", "PUT", "POST", "HEAD", "TRACE", "PATCH"]

HTTP_METHODS = ("DELETE", "GET", "PUT", "POST", "HEAD", "TRACE", "PATCH")


def normalize_method(method: str) -> str:
    """Upper-case a method name and check it is one we can send."""
    upper = method.upper()
    if upper not in HTTP_METHODS:
        raise ValueError(f"Unsupported HTTP method '{method}'. Expected one of: {', '.join(HTTP_METHODS)}")
    return upper


class _Unset:
    """Marker for an omitted request body (distinct from a JSON null)."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class FetchOptions(TypedDict):
    """Options handed to a fetch transport."""
    method: str
    body: Optional[str]
    signal: Any  # AbortSignal
    headers: Dict[str, str]


@runtime_checkable
class FetchResponse(Protocol):
    """What a fetch transport must resolve to."""
    ok: bool
    status: int

    async def text(self) -> str: ...


Fetch = Callable[[str, FetchOptions], Awaitable[FetchResponse]]


@runtime_checkable
class EventSource(Protocol):
    """Streaming transport contract: callback slots plus close()."""
    on_message: Optional[Callable[[Any], None]]
    on_error: Optional[Callable[[Any], None]]

    def close(self) -> None: ...


EventSourceFactory = Callable[[str, Dict[str, str]], EventSource]


@dataclass
class StreamMessage:
    """A message delivered by an SSE stream. ``data`` is the raw payload."""
    data: Any
    type: Literal["message"] = "message"

    def json(self) -> Any:
        return json.loads(self.data)


@dataclass
class StreamError:
    """A transport-level error reported by an SSE stream."""
    event: Any
    type: Literal["error"] = "error"


StreamEvent = Union[StreamMessage, StreamError]

StreamListener = Callable[[StreamEvent], None]
