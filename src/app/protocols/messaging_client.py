"""Protocolo do cliente de mensagens outbound."""

from __future__ import annotations

from typing import Any, Protocol


class MessagingClientProtocol(Protocol):
    """Contrato mínimo para postar/atualizar mensagens no Slack."""

    async def post_message(
        self,
        channel: str,
        text: str,
        thread_ts: str | None = None,
    ) -> dict[str, Any]: ...

    async def update_message(self, channel: str, ts: str, text: str) -> dict[str, Any]: ...
