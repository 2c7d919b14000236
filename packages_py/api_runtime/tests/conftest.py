"""
Shared fixtures for api_runtime tests.
"""
import pytest

from api_runtime import get_default_context
from fakes import FakeEventSourceFactory, FakeResponse, RecordingFetch


def _reset(context) -> None:
    context.api_base = ""
    context.headers = {}
    context.fetch = None
    context.event_source = None


@pytest.fixture(autouse=True)
def reset_default_context():
    """Keep the process-wide default context pristine between tests."""
    context = get_default_context()
    _reset(context)
    yield context
    _reset(context)


@pytest.fixture
def recording_fetch() -> RecordingFetch:
    return RecordingFetch(FakeResponse(200, "ok"))


@pytest.fixture
def event_sources() -> FakeEventSourceFactory:
    return FakeEventSourceFactory()
