"""Conector Slack - adapter de borda para Events API e Web API.

Responsabilidades:
- Assinatura (signing secret v0) e parsing dos webhooks
- Modelos dos payloads classificados
- HTTP client para chat.postMessage / chat.update
"""

from .http_client import SlackApiClient, SlackApiError, create_slack_api_client
from .signature import (
    VerificationFailure,
    VerificationOutcome,
    compute_slack_signature,
    verify_slack_signature,
)

__all__ = [
    "SlackApiClient",
    "SlackApiError",
    "VerificationFailure",
    "VerificationOutcome",
    "compute_slack_signature",
    "create_slack_api_client",
    "verify_slack_signature",
]
