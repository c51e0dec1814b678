"""Pipeline comum das rotas Slack: verificar → parsear → classificar → ack."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.slack.webhook import authenticate_request
from api.routes.slack.ack import acknowledge, internal_error, unauthorized
from app.observability import (
    get_correlation_id,
    record_latency,
    record_verification_failure,
    reset_correlation_id,
    resolve_correlation_id,
    set_correlation_id,
)
from utils.errors import AuthenticationError, MalformedPayloadError

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request, Response

    from app.bootstrap import GatewayContext
    from app.domain import DispatchRoute, ParsedPayload

logger = logging.getLogger(__name__)


def get_gateway_context(request: Request) -> GatewayContext:
    """Contexto injetado pela app em `app.state.gateway`."""
    return request.app.state.gateway


async def handle_slack_webhook(
    request: Request,
    *,
    route: DispatchRoute,
    parse_body: Callable[[bytes], dict[str, Any]],
    classify: Callable[[dict[str, Any]], ParsedPayload],
) -> Response:
    """Processa um webhook Slack até o ack síncrono.

    Ordem estrita: assinatura (body bruto) antes de qualquer parsing;
    classificação antes do ack. Erros síncronos abortam sem criar task.
    """
    gateway = get_gateway_context(request)
    token = set_correlation_id(resolve_correlation_id(request.headers))
    started_at = time.perf_counter()

    try:
        raw_body = await request.body()
        received_at = gateway.clock()

        try:
            authenticate_request(
                raw_body,
                request.headers,
                gateway.settings.signing_secret,
                now=received_at,
                replay_window_seconds=gateway.settings.replay_window_seconds,
            )
        except AuthenticationError as exc:
            logger.warning(
                "slack_signature_invalid",
                extra={"route": route, "reason": exc.reason.value},
            )
            record_verification_failure(route, exc.reason.value)
            return unauthorized()

        try:
            body = parse_body(raw_body)
        except MalformedPayloadError as exc:
            logger.warning(
                "slack_payload_malformed",
                extra={"route": route, "error": str(exc), "payload_size": len(raw_body)},
            )
            return internal_error()

        payload = classify(body)
        logger.info(
            "slack_webhook_received",
            extra={"route": route, "payload_kind": payload.kind, "payload_size": len(raw_body)},
        )
        return acknowledge(
            payload,
            route=route,
            correlation_id=get_correlation_id(),
            received_at=received_at,
            dispatcher=gateway.dispatcher,
        )

    finally:
        record_latency("slack_gateway", f"ack_{route}", (time.perf_counter() - started_at) * 1000)
        reset_correlation_id(token)
