"""Protocolos dos colaboradores downstream do gateway Slack."""

from __future__ import annotations

from typing import Any, Protocol


class EventProcessorProtocol(Protocol):
    """Interpreta eventos de chat (menções e DMs)."""

    async def process_event(self, *, channel_id: str, event: dict[str, Any]) -> None: ...


class InteractionProcessorProtocol(Protocol):
    """Trata cliques em botões (approve/cancel)."""

    async def process_interaction(
        self,
        *,
        channel_id: str,
        message_ts: str,
        action_id: str,
    ) -> None: ...
