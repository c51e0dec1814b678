"""Contexto do gateway por instância de aplicação.

Tudo que os handlers precisam (secret, relógio, dispatcher) chega por
aqui, injetado em `app.state.gateway`; nada vem de variável global.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from api.connectors.slack import SlackApiClient, create_slack_api_client
from app.dispatch import BackgroundDispatcher
from app.services import ReceiptEventProcessor, ReceiptInteractionProcessor
from app.use_cases.slack import DispatchTaskProcessor

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols import EventProcessorProtocol, InteractionProcessorProtocol
    from config.settings import SlackSettings


@dataclass(frozen=True)
class GatewayContext:
    """Dependências do gateway compartilhadas pelos handlers de uma app."""

    settings: SlackSettings
    dispatcher: BackgroundDispatcher
    clock: Callable[[], float] = field(default=time.time)
    messaging_client: SlackApiClient | None = None

    async def aclose(self, drain_timeout_seconds: float) -> None:
        """Drena o dispatcher e fecha o cliente outbound padrão."""
        await self.dispatcher.drain(timeout_seconds=drain_timeout_seconds)
        if self.messaging_client is not None:
            await self.messaging_client.aclose()


def build_gateway_context(
    settings: SlackSettings,
    *,
    event_processor: EventProcessorProtocol | None = None,
    interaction_processor: InteractionProcessorProtocol | None = None,
    clock: Callable[[], float] | None = None,
) -> GatewayContext:
    """Monta dispatcher e processadores (padrão: recibos via Web API)."""
    client: SlackApiClient | None = None
    if event_processor is None or interaction_processor is None:
        client = create_slack_api_client(settings)
        event_processor = event_processor or ReceiptEventProcessor(client)
        interaction_processor = interaction_processor or ReceiptInteractionProcessor(client)

    dispatcher = BackgroundDispatcher(
        DispatchTaskProcessor(event_processor, interaction_processor),
        max_concurrent_tasks=settings.max_concurrent_tasks,
    )
    return GatewayContext(
        settings=settings,
        dispatcher=dispatcher,
        clock=clock or time.time,
        messaging_client=client,
    )
