"""Encaminha uma DispatchTask para o processador downstream adequado.

Regras:
- EventCallback `app_mention`, ou `message` com channel_type `im`
  → EventProcessor(channel_id, event)
- InteractionCallback com action_id `approve_action`/`cancel_action`
  → InteractionProcessor(channel_id, message_ts, action_id)
- Demais casos: no-op

Executa sempre em background. Exceções dos processadores são logadas e
encerradas aqui; o ack já foi enviado e não há retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain import EventCallback, InteractionCallback

if TYPE_CHECKING:
    from app.domain import DispatchTask
    from app.protocols import EventProcessorProtocol, InteractionProcessorProtocol

logger = logging.getLogger(__name__)

HANDLED_ACTION_IDS = frozenset({"approve_action", "cancel_action"})


class DispatchTaskProcessor:
    """Handler entregue ao BackgroundDispatcher."""

    def __init__(
        self,
        event_processor: EventProcessorProtocol,
        interaction_processor: InteractionProcessorProtocol,
    ) -> None:
        self._event_processor = event_processor
        self._interaction_processor = interaction_processor

    async def __call__(self, task: DispatchTask) -> None:
        try:
            await self._forward(task)
        except Exception as exc:
            logger.exception(
                "slack_downstream_failed",
                extra={
                    "route": task.route,
                    "payload_kind": task.payload.kind,
                    "correlation_id": task.correlation_id,
                    "error_type": type(exc).__name__,
                },
            )

    async def _forward(self, task: DispatchTask) -> None:
        payload = task.payload
        if isinstance(payload, EventCallback):
            await self._forward_event(payload, task.correlation_id)
        elif isinstance(payload, InteractionCallback):
            await self._forward_interaction(payload, task.correlation_id)

    async def _forward_event(self, payload: EventCallback, correlation_id: str) -> None:
        if not is_handled_event(payload):
            _log_ignored("event_type_not_handled", correlation_id)
            return
        if not payload.channel_id:
            _log_ignored("missing_channel", correlation_id)
            return
        await self._event_processor.process_event(
            channel_id=payload.channel_id,
            event=payload.event,
        )

    async def _forward_interaction(
        self,
        payload: InteractionCallback,
        correlation_id: str,
    ) -> None:
        if payload.action_id not in HANDLED_ACTION_IDS:
            _log_ignored("action_not_handled", correlation_id)
            return
        if not payload.channel_id or not payload.message_ts:
            _log_ignored("missing_message_reference", correlation_id)
            return
        await self._interaction_processor.process_interaction(
            channel_id=payload.channel_id,
            message_ts=payload.message_ts,
            action_id=payload.action_id,
        )


def is_handled_event(payload: EventCallback) -> bool:
    """Menções ao app e mensagens diretas (DM)."""
    if payload.event_type == "app_mention":
        return True
    return payload.event_type == "message" and payload.channel_type == "im"


def _log_ignored(reason: str, correlation_id: str) -> None:
    logger.debug(
        "slack_dispatch_ignored",
        extra={"reason": reason, "correlation_id": correlation_id},
    )
