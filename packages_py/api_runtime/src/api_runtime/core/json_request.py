"""
JSON decoding on top of the request executor.
"""
import asyncio
import json
from typing import Any, Optional, Type, TypeVar

from ..config import ApiContext, OptionsLike
from ..errors import DecodeError
from ..types import UNSET
from .request import PendingRequest, request_plain

T = TypeVar("T")


async def _decode(data: "asyncio.Future[str]") -> Any:
    text = await data
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(text, e) from e


def request_json(
    method: str,
    url: str,
    body: Any = UNSET,
    options: OptionsLike = None,
    *,
    context: Optional[ApiContext] = None,
    response_type: Optional[Type[T]] = None,
) -> PendingRequest[T]:
    """Issue a request and parse the successful body as JSON.

    ``response_type`` only informs type checkers; the payload is not validated.
    """
    pending: PendingRequest[Any] = request_plain(method, url, body, options, context=context)
    pending.data = asyncio.get_running_loop().create_task(_decode(pending.data))
    return pending
