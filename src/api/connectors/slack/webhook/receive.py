"""Verificação e parsing inicial dos webhooks Slack (sem PII)."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs

from utils.errors import AuthenticationError, MalformedPayloadError

from ..signature import (
    DEFAULT_REPLAY_WINDOW_SECONDS,
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    VerificationFailure,
    verify_slack_signature,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


def authenticate_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str,
    *,
    now: float | None = None,
    replay_window_seconds: int = DEFAULT_REPLAY_WINDOW_SECONDS,
) -> None:
    """Valida a assinatura antes de qualquer parsing do body.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (lookup case-insensitive esperado)
        secret: Signing secret do app
        now: Relógio atual em segundos
        replay_window_seconds: Janela anti-replay

    Raises:
        AuthenticationError: Se headers ausentes, timestamp fora da janela,
            assinatura divergente ou secret não configurado.
    """
    outcome = verify_slack_signature(
        headers.get(TIMESTAMP_HEADER),
        headers.get(SIGNATURE_HEADER),
        raw_body,
        secret,
        now=now,
        replay_window_seconds=replay_window_seconds,
    )
    if not outcome.valid and outcome.reason is not None:
        raise AuthenticationError(outcome.reason)

    # Secret vazio tornaria a assinatura forjável
    if not secret:
        logger.error("slack_signing_secret_missing")
        raise AuthenticationError(VerificationFailure.SIGNATURE_MISMATCH)


def parse_events_body(raw_body: bytes) -> dict[str, Any]:
    """Parseia o body JSON da rota /slack/events.

    Raises:
        MalformedPayloadError: JSON inválido ou que não é objeto.
    """
    return _load_json_object(raw_body)


def parse_interactive_body(raw_body: bytes) -> dict[str, Any]:
    """Parseia o body form-encoded da rota /slack/interactive.

    O Slack envia `payload=<json>` em application/x-www-form-urlencoded.

    Raises:
        MalformedPayloadError: Form ilegível, campo payload ausente ou JSON inválido.
    """
    try:
        form = parse_qs(raw_body.decode("utf-8"), keep_blank_values=True)
    except UnicodeDecodeError as exc:
        raise MalformedPayloadError("invalid_form_encoding") from exc

    values = form.get("payload")
    if not values:
        raise MalformedPayloadError("missing_payload_field")
    return _load_json_object(values[0])


def _load_json_object(raw: bytes | str) -> dict[str, Any]:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayloadError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise MalformedPayloadError("payload_not_object")
    return payload
