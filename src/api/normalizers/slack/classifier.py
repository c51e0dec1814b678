"""Classificação dos payloads Slack já autenticados.

Rota /slack/events (JSON):
- url_verification → UrlVerification
- event_callback   → EventCallback (tipo do evento interno, channel_type, channel)

Rota /slack/interactive (form `payload`):
- block_actions    → InteractionCallback (primeira action)

Qualquer outro formato vira Unrecognized: o gateway confirma com 200
e descarta. Falha de shape aqui nunca é erro HTTP.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.domain import (
    EventCallback,
    InteractionCallback,
    ParsedPayload,
    Unrecognized,
    UrlVerification,
)

logger = logging.getLogger(__name__)


class _SlackModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class _UrlVerificationBody(_SlackModel):
    type: Literal["url_verification"]
    challenge: str


class _InnerEvent(_SlackModel):
    type: str
    # Eventos de canal (channel_created, channel_rename) trazem objeto aqui
    channel_type: Any = None
    channel: Any = None

    @property
    def channel_id(self) -> str | None:
        return self.channel if isinstance(self.channel, str) else None

    @property
    def channel_type_name(self) -> str | None:
        return self.channel_type if isinstance(self.channel_type, str) else None


class _EventCallbackBody(_SlackModel):
    type: Literal["event_callback"]
    event: _InnerEvent


class _Action(_SlackModel):
    action_id: str | None = None


class _ChannelRef(_SlackModel):
    id: str | None = None


class _MessageRef(_SlackModel):
    ts: str | None = None


class _BlockActionsBody(_SlackModel):
    type: Literal["block_actions"]
    actions: list[_Action] = Field(min_length=1)
    channel: _ChannelRef | None = None
    message: _MessageRef | None = None


def classify_event_payload(payload: dict[str, Any]) -> ParsedPayload:
    """Classifica o body JSON da Events API."""
    payload_type = payload.get("type")
    if not isinstance(payload_type, str):
        return _unrecognized("missing_type", route="events")

    if payload_type == "url_verification":
        try:
            body = _UrlVerificationBody.model_validate(payload)
        except ValidationError:
            return _unrecognized("invalid_url_verification", route="events")
        return UrlVerification(challenge=body.challenge)

    if payload_type == "event_callback":
        try:
            callback = _EventCallbackBody.model_validate(payload)
        except ValidationError:
            return _unrecognized("invalid_event_callback", route="events")
        return EventCallback(
            event_type=callback.event.type,
            channel_type=callback.event.channel_type_name,
            channel_id=callback.event.channel_id,
            raw=payload,
        )

    return _unrecognized("unsupported_type", route="events")


def classify_interaction_payload(payload: dict[str, Any]) -> ParsedPayload:
    """Classifica o JSON do campo `payload` de interactive components."""
    payload_type = payload.get("type")
    if not isinstance(payload_type, str):
        return _unrecognized("missing_type", route="interactive")

    if payload_type != "block_actions":
        return _unrecognized("unsupported_type", route="interactive")

    try:
        body = _BlockActionsBody.model_validate(payload)
    except ValidationError:
        return _unrecognized("invalid_block_actions", route="interactive")

    return InteractionCallback(
        interaction_type=body.type,
        action_id=body.actions[0].action_id,
        channel_id=body.channel.id if body.channel else None,
        message_ts=body.message.ts if body.message else None,
        raw=payload,
    )


def _unrecognized(reason: str, *, route: str) -> Unrecognized:
    logger.debug("slack_payload_unrecognized", extra={"route": route, "reason": reason})
    return Unrecognized(reason=reason)
