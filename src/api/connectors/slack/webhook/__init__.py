"""Webhook Slack: assinatura e parsing seguro."""

from ..signature import VerificationFailure, VerificationOutcome, verify_slack_signature
from .receive import authenticate_request, parse_events_body, parse_interactive_body

__all__ = [
    "VerificationFailure",
    "VerificationOutcome",
    "authenticate_request",
    "parse_events_body",
    "parse_interactive_body",
    "verify_slack_signature",
]
