"""Testes da tabela de rotas e do 404 uniforme."""

from __future__ import annotations

import httpx
import pytest

from app.app import create_app
from tests.fakes.fake_slack import (
    RecordingEventProcessor,
    RecordingInteractionProcessor,
    make_settings,
)


@pytest.fixture
async def client():
    app = create_app(
        make_settings(),
        event_processor=RecordingEventProcessor(),
        interaction_processor=RecordingInteractionProcessor(),
    )
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.mark.asyncio
async def test_health_returns_plain_ok(client: httpx.AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/"),
        ("GET", "/slack"),
        ("GET", "/slack/interactive"),
        ("POST", "/health"),
        ("POST", "/slack/events/"),
        ("POST", "/slack/commands"),
        ("GET", "/docs"),
        ("GET", "/openapi.json"),
    ],
)
async def test_unrouted_requests_return_plain_404(
    client: httpx.AsyncClient,
    method: str,
    path: str,
) -> None:
    response = await client.request(method, path)

    assert response.status_code == 404
    assert response.text == "Not Found"
    assert response.headers["content-type"].startswith("text/plain")
