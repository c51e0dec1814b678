"""Taxonomia de erros do gateway de webhooks Slack."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.connectors.slack.signature import VerificationFailure


class GatewayError(Exception):
    """Base para falhas do gateway."""


class AuthenticationError(GatewayError):
    """Assinatura ausente, expirada ou divergente (HTTP 401).

    Nunca carrega o secret nem a assinatura recebida, apenas o motivo.
    """

    def __init__(self, reason: VerificationFailure) -> None:
        super().__init__(reason.value)
        self.reason = reason


class MalformedPayloadError(GatewayError):
    """Body autenticado que não corresponde ao formato da rota (HTTP 500)."""


class DownstreamError(GatewayError):
    """Falha no processamento em background; só observável via logs."""
