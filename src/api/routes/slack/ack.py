"""Respostas síncronas do gateway (ack).

O Slack espera resposta em ~3s. Tudo que pode demorar vai para o
dispatcher antes do ack; o desafio de url_verification é a única
resposta com conteúdo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Response, status

from app.domain import DispatchTask, EventCallback, InteractionCallback, UrlVerification

if TYPE_CHECKING:
    from app.dispatch import BackgroundDispatcher
    from app.domain import DispatchRoute, ParsedPayload

logger = logging.getLogger(__name__)


def challenge_response(challenge: str) -> Response:
    """Ecoa o desafio como texto puro."""
    return Response(content=challenge, media_type="text/plain", status_code=status.HTTP_200_OK)


def empty_ack() -> Response:
    return Response(content=b"", status_code=status.HTTP_200_OK)


def unauthorized() -> Response:
    return Response(
        content="Unauthorized",
        media_type="text/plain",
        status_code=status.HTTP_401_UNAUTHORIZED,
    )


def internal_error() -> Response:
    return Response(
        content="Internal Server Error",
        media_type="text/plain",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def not_found() -> Response:
    return Response(
        content="Not Found",
        media_type="text/plain",
        status_code=status.HTTP_404_NOT_FOUND,
    )


def acknowledge(
    payload: ParsedPayload,
    *,
    route: DispatchRoute,
    correlation_id: str,
    received_at: float,
    dispatcher: BackgroundDispatcher,
) -> Response:
    """Escolhe o ack para o payload classificado.

    - UrlVerification: 200 text/plain com o desafio, sem task
    - EventCallback/InteractionCallback: agenda DispatchTask, 200 vazio
    - Unrecognized: 200 vazio, sem task
    """
    if isinstance(payload, UrlVerification):
        logger.info("slack_url_verification_answered", extra={"route": route})
        return challenge_response(payload.challenge)

    if isinstance(payload, (EventCallback, InteractionCallback)):
        dispatcher.submit(
            DispatchTask(
                payload=payload,
                route=route,
                correlation_id=correlation_id,
                received_at=received_at,
            )
        )
        return empty_ack()

    logger.info(
        "slack_payload_ignored",
        extra={"route": route, "reason": payload.reason},
    )
    return empty_ack()
