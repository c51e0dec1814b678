"""Validação de assinatura HMAC-SHA256 dos webhooks Slack (signing secret).

Esquema:
    basestring = "v0:" + timestamp + ":" + raw_body
    signature  = "v0=" + hex(HMAC_SHA256(secret, basestring))

A validação opera sempre sobre o body bruto. Reserializar um JSON já
parseado não reproduz os mesmos bytes e invalida a assinatura.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass
from enum import Enum

from config.settings.slack import DEFAULT_REPLAY_WINDOW_SECONDS

SIGNATURE_VERSION = "v0"

TIMESTAMP_HEADER = "x-slack-request-timestamp"
SIGNATURE_HEADER = "x-slack-signature"


class VerificationFailure(str, Enum):
    """Motivos de rejeição de uma requisição."""

    MISSING_HEADERS = "missing_headers"
    STALE_TIMESTAMP = "stale_timestamp"
    SIGNATURE_MISMATCH = "signature_mismatch"


@dataclass(frozen=True, slots=True)
class VerificationOutcome:
    """Resultado da verificação (produzido e consumido uma vez por request)."""

    valid: bool
    reason: VerificationFailure | None = None


def compute_slack_signature(timestamp: str, raw_body: bytes, secret: str) -> str:
    """Calcula a assinatura esperada para timestamp + body bruto."""
    basestring = f"{SIGNATURE_VERSION}:{timestamp}:".encode() + raw_body
    digest = hmac.new(secret.encode("utf-8"), basestring, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def verify_slack_signature(
    timestamp: str | None,
    signature: str | None,
    raw_body: bytes,
    secret: str,
    *,
    now: float | None = None,
    replay_window_seconds: int = DEFAULT_REPLAY_WINDOW_SECONDS,
) -> VerificationOutcome:
    """Valida autenticidade e frescor de uma requisição Slack.

    Args:
        timestamp: Header X-Slack-Request-Timestamp (segundos desde epoch)
        signature: Header X-Slack-Signature
        raw_body: Corpo bruto, exatamente como recebido
        secret: Signing secret do app Slack
        now: Relógio atual em segundos (injetável para testes)
        replay_window_seconds: Idade máxima aceita, em ambas as direções

    Returns:
        VerificationOutcome com o motivo em caso de falha.
    """
    if not timestamp or not signature:
        return VerificationOutcome(valid=False, reason=VerificationFailure.MISSING_HEADERS)

    try:
        request_ts = int(timestamp)
    except ValueError:
        return VerificationOutcome(valid=False, reason=VerificationFailure.STALE_TIMESTAMP)

    current = time.time() if now is None else now
    if abs(current - request_ts) > replay_window_seconds:
        return VerificationOutcome(valid=False, reason=VerificationFailure.STALE_TIMESTAMP)

    expected = compute_slack_signature(timestamp, raw_body, secret)
    # compare_digest percorre todos os bytes (tempo constante)
    if not hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8")):
        return VerificationOutcome(valid=False, reason=VerificationFailure.SIGNATURE_MISMATCH)

    return VerificationOutcome(valid=True)
