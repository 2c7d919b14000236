"""
Configuration models for api-runtime.
"""
import os
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, Field

from .types import EventSourceFactory, Fetch

API_BASE_ENV_VAR = "API_RUNTIME_API_BASE"


class ApiOptions(BaseModel):
    """Per-call configuration accepted as the trailing argument of every operation."""
    model_config = {"arbitrary_types_allowed": True, "extra": "forbid"}

    fetch: Optional[Fetch] = None
    api_base: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    event_source: Optional[EventSourceFactory] = None


class ApiContext(BaseModel):
    """Application-wide configuration.

    One instance is created at the application entry point and handed to
    ``ApiClient`` (or to the ``context=`` keyword of the request functions).
    Per-call ``ApiOptions`` take precedence over the values held here.
    """
    model_config = {"arbitrary_types_allowed": True, "extra": "forbid"}

    api_base: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    fetch: Optional[Fetch] = None
    event_source: Optional[EventSourceFactory] = None

    @classmethod
    def from_env(
        cls,
        api_base: Optional[str] = None,
        env_key: str = API_BASE_ENV_VAR,
        **kwargs: Any,
    ) -> "ApiContext":
        """Build a context, resolving api_base from argument, then env var, then ``""``."""
        if api_base is None:
            api_base = os.getenv(env_key, "")
        return cls(api_base=api_base, **kwargs)


OptionsLike = Union[ApiOptions, Mapping[str, Any], None]


def coerce_options(options: OptionsLike) -> ApiOptions:
    """Accept ApiOptions, a plain dict with the same keys, or None."""
    if options is None:
        return ApiOptions()
    if isinstance(options, ApiOptions):
        return options
    return ApiOptions.model_validate(dict(options))
