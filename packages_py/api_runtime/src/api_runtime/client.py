"""
ApiClient: the runtime bound to one application-owned ApiContext.
"""
from typing import Any, Optional, Type, TypeVar

from .config import ApiContext, OptionsLike
from .core.json_request import request_json
from .core.request import PendingRequest, request_plain
from .resolver import get_api_base, get_default_context
from .streaming.sse import SSEStream, sse
from .types import UNSET

T = TypeVar("T")


class ApiClient:
    """
    Runtime entry point for generated clients.

    Holds an ApiContext created at the application root instead of relying
    on the process-wide default. Without a context it shares the default one.
    """

    def __init__(self, context: Optional[ApiContext] = None):
        self.context = context or get_default_context()

    @classmethod
    def create(cls, api_base: str = "", **kwargs: Any) -> "ApiClient":
        """Factory method to create a client with its own context."""
        return cls(ApiContext(api_base=api_base, **kwargs))

    @property
    def api_base(self) -> str:
        return self.context.api_base

    def set_api_base(self, api_base: str) -> None:
        self.context.api_base = api_base

    def resolve_api_base(self, options: OptionsLike = None) -> str:
        return get_api_base(options, self.context)

    def request_plain(
        self,
        method: str,
        url: str,
        body: Any = UNSET,
        options: OptionsLike = None,
    ) -> PendingRequest[str]:
        return request_plain(method, url, body, options, context=self.context)

    def request_json(
        self,
        method: str,
        url: str,
        body: Any = UNSET,
        options: OptionsLike = None,
        response_type: Optional[Type[T]] = None,
    ) -> PendingRequest[T]:
        return request_json(
            method, url, body, options, context=self.context, response_type=response_type
        )

    def sse(
        self,
        method: str,
        url: str,
        options: OptionsLike = None,
        message_type: Optional[Type[T]] = None,
    ) -> SSEStream[T]:
        return sse(method, url, options, context=self.context, message_type=message_type)
