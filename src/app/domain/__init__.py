"""Modelos de domínio do gateway."""

from app.domain.slack_payload import (
    DispatchRoute,
    DispatchTask,
    EventCallback,
    InteractionCallback,
    ParsedPayload,
    Unrecognized,
    UrlVerification,
)

__all__ = [
    "DispatchRoute",
    "DispatchTask",
    "EventCallback",
    "InteractionCallback",
    "ParsedPayload",
    "Unrecognized",
    "UrlVerification",
]
