"""
Tests for ApiClient.
"""
import pytest

from api_runtime import ApiClient, ApiContext, StreamMessage, get_default_context, set_global_api_base
from fakes import FakeResponse, RecordingFetch


def test_client_factory():
    client = ApiClient.create("https://api.example.com")
    assert isinstance(client, ApiClient)
    assert client.api_base == "https://api.example.com"
    assert client.context is not get_default_context()


def test_client_defaults_to_global_context():
    client = ApiClient()
    set_global_api_base("https://x")
    assert client.api_base == "https://x"


def test_client_isolated_from_global():
    client = ApiClient(ApiContext(api_base="https://own"))
    set_global_api_base("https://x")
    assert client.resolve_api_base() == "https://own"
    assert client.resolve_api_base({"api_base": "https://call"}) == "https://call"


def test_set_api_base():
    client = ApiClient.create()
    client.set_api_base("https://later")
    assert client.api_base == "https://later"


@pytest.mark.asyncio
async def test_request_plain_uses_context():
    fetch = RecordingFetch(FakeResponse(200, "pong"))
    client = ApiClient.create("https://api.example.com", fetch=fetch, headers={"X-App": "demo"})

    assert await client.request_plain("GET", "/ping") == "pong"
    url, options = fetch.last
    assert url == "https://api.example.com/ping"
    assert options["headers"] == {"X-App": "demo"}


@pytest.mark.asyncio
async def test_request_json_uses_context():
    fetch = RecordingFetch(FakeResponse(200, '{"ok": true}'))
    client = ApiClient.create("https://api.example.com", fetch=fetch)

    assert await client.request_json("POST", "/items", {"name": "a"}) == {"ok": True}
    assert fetch.last[1]["headers"]["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_sse_uses_context(event_sources):
    client = ApiClient.create("https://api.example.com", event_source=event_sources)
    stream = client.sse("GET", "/events")
    received = []
    stream.listen(received.append)
    event_sources.last.emit("hi")

    assert event_sources.last.url == "https://api.example.com/events"
    assert received == [StreamMessage(data="hi")]
    stream.cancel()
