"""Testes dos processadores de recibo padrão."""

from __future__ import annotations

import pytest

from app.services import ReceiptEventProcessor, ReceiptInteractionProcessor
from tests.fakes.fake_slack import RecordingMessagingClient


@pytest.mark.asyncio
async def test_event_receipt_replies_in_existing_thread() -> None:
    client = RecordingMessagingClient()
    processor = ReceiptEventProcessor(client)

    await processor.process_event(
        channel_id="C1",
        event={"type": "app_mention", "ts": "2.0", "thread_ts": "1.0"},
    )

    assert client.posted == [
        {"channel": "C1", "text": "I received your message!", "thread_ts": "1.0"}
    ]


@pytest.mark.asyncio
async def test_event_receipt_starts_thread_on_original_message() -> None:
    client = RecordingMessagingClient()
    processor = ReceiptEventProcessor(client, text="ok")

    await processor.process_event(channel_id="D1", event={"type": "message", "ts": "2.0"})

    assert client.posted == [{"channel": "D1", "text": "ok", "thread_ts": "2.0"}]


@pytest.mark.asyncio
async def test_interaction_receipt_updates_message() -> None:
    client = RecordingMessagingClient()
    processor = ReceiptInteractionProcessor(client)

    await processor.process_interaction(
        channel_id="C1",
        message_ts="1.0",
        action_id="approve_action",
    )

    assert client.updated == [
        {"channel": "C1", "ts": "1.0", "text": "Action approve_action received"}
    ]
