"""
API base URL resolution.
"""
import logging
from typing import Optional

from .config import ApiContext, OptionsLike, coerce_options

logger = logging.getLogger(__name__)

# Process-wide default, set once during application startup
_default_context = ApiContext()


def get_default_context() -> ApiContext:
    """Get the process-wide default context."""
    return _default_context


def set_global_api_base(api_base: str) -> str:
    """Set the default API base URL. The most recent call wins."""
    logger.debug(f"Setting global API base to '{api_base}'")
    _default_context.api_base = api_base
    return api_base


def get_api_base(options: OptionsLike = None, context: Optional[ApiContext] = None) -> str:
    """Resolve the API base for a call.

    Precedence:
    1. options.api_base (whenever it is set, even to "")
    2. context.api_base
    3. the process-wide default context
    """
    opts = coerce_options(options)
    if opts.api_base is not None:
        return opts.api_base
    return (context or _default_context).api_base
