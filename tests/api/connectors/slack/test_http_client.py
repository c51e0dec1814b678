"""Testes do cliente da Web API do Slack."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.http_base import HttpClientConfig
from api.connectors.slack.http_client import (
    SlackApiClient,
    SlackApiError,
    create_slack_api_client,
)
from tests.fakes.fake_slack import make_settings
from utils.errors import DownstreamError


def _client(handler, token: str = "xoxb-token", max_retries: int = 0) -> SlackApiClient:
    config = HttpClientConfig(
        max_retries=max_retries,
        backoff_base_seconds=0.0,
        transport=httpx.MockTransport(handler),
    )
    return SlackApiClient(bot_token=token, api_base_url="https://slack.test/api/", config=config)


@pytest.mark.asyncio
async def test_post_message_sends_thread_reply() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"ok": True, "ts": "1.2"})

    result = await _client(handler).post_message("C1", "hello", thread_ts="1.0")

    assert result == {"ok": True, "ts": "1.2"}
    request = captured[0]
    assert str(request.url) == "https://slack.test/api/chat.postMessage"
    assert request.headers["authorization"] == "Bearer xoxb-token"
    assert json.loads(request.content) == {"channel": "C1", "text": "hello", "thread_ts": "1.0"}


@pytest.mark.asyncio
async def test_post_message_without_thread_omits_thread_ts() -> None:
    bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"ok": True})

    await _client(handler).post_message("C1", "hello")

    assert bodies == [{"channel": "C1", "text": "hello"}]


@pytest.mark.asyncio
async def test_update_message() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"ok": True})

    await _client(handler).update_message("C1", "1.0", "done")

    assert captured[0].url.path == "/api/chat.update"
    assert json.loads(captured[0].content) == {"channel": "C1", "ts": "1.0", "text": "done"}


@pytest.mark.asyncio
async def test_ok_false_raises_slack_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": False, "error": "channel_not_found"})

    with pytest.raises(SlackApiError) as exc_info:
        await _client(handler).post_message("C1", "hello")

    assert exc_info.value.error == "channel_not_found"
    assert exc_info.value.method == "chat.postMessage"
    assert isinstance(exc_info.value, DownstreamError)


@pytest.mark.asyncio
async def test_server_error_without_retries_raises() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(503)

    with pytest.raises(SlackApiError) as exc_info:
        await _client(handler).post_message("C1", "hello")

    assert calls == 1
    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_transport_retry_when_enabled() -> None:
    responses = [httpx.Response(429), httpx.Response(200, json={"ok": True})]

    def handler(request: httpx.Request) -> httpx.Response:
        return responses.pop(0)

    result = await _client(handler, max_retries=1).post_message("C1", "hello")

    assert result == {"ok": True}


@pytest.mark.asyncio
async def test_invalid_json_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>")

    with pytest.raises(SlackApiError, match="invalid_json_response"):
        await _client(handler).post_message("C1", "hello")


@pytest.mark.asyncio
async def test_missing_token_fails_before_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("request should not be sent")

    with pytest.raises(SlackApiError, match="missing_bot_token"):
        await _client(handler, token=" ").post_message("C1", "hello")


def test_factory_uses_settings() -> None:
    client = create_slack_api_client(make_settings(max_retries=2, request_timeout_seconds=3.0))

    assert client._config.max_retries == 2
    assert client._config.timeout_seconds == 3.0


@pytest.mark.asyncio
async def test_rate_limit_honours_retry_after(monkeypatch: pytest.MonkeyPatch) -> None:
    delays: list[float] = []

    async def _fake_sleep(seconds: float) -> None:
        delays.append(seconds)

    monkeypatch.setattr("api.connectors.http_base.asyncio.sleep", _fake_sleep)
    responses = [
        httpx.Response(429, headers={"Retry-After": "3"}),
        httpx.Response(200, json={"ok": True}),
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        return responses.pop(0)

    await _client(handler, max_retries=1).post_message("C1", "hello")

    assert delays == [3.0]


@pytest.mark.asyncio
async def test_aclose_releases_shared_client() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True})

    client = _client(handler)
    await client.post_message("C1", "one")
    await client.post_message("C1", "two")

    await client.aclose()

    assert client._client is None
