"""Processadores downstream padrão: confirmam o recebimento no Slack.

Substituíveis por injeção (ver app.app.create_app); o gateway só depende
dos protocolos em app.protocols.slack_processors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols import MessagingClientProtocol

logger = logging.getLogger(__name__)

EVENT_RECEIPT_TEXT = "I received your message!"


class ReceiptEventProcessor:
    """Responde na thread do evento (thread_ts, ou ts da mensagem original).

    Diverge de propósito do worker Slack anterior, que publicava o recibo
    direto no canal, fora de thread.
    """

    def __init__(self, client: MessagingClientProtocol, text: str = EVENT_RECEIPT_TEXT) -> None:
        self._client = client
        self._text = text

    async def process_event(self, *, channel_id: str, event: dict[str, Any]) -> None:
        thread_ts = event.get("thread_ts") or event.get("ts")
        await self._client.post_message(channel_id, self._text, thread_ts=thread_ts)
        logger.info(
            "slack_event_processed",
            extra={"event_type": event.get("type"), "threaded": bool(thread_ts)},
        )


class ReceiptInteractionProcessor:
    """Atualiza a mensagem clicada com o action_id recebido."""

    def __init__(self, client: MessagingClientProtocol) -> None:
        self._client = client

    async def process_interaction(
        self,
        *,
        channel_id: str,
        message_ts: str,
        action_id: str,
    ) -> None:
        await self._client.update_message(channel_id, message_ts, f"Action {action_id} received")
        logger.info("slack_interaction_processed", extra={"action_id": action_id})
