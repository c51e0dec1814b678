"""Payloads Slack classificados e a unidade de trabalho despachada.

ParsedPayload é uma união discriminada pelo campo `kind`:
- UrlVerification: desafio de registro do endpoint
- EventCallback: notificação da Events API
- InteractionCallback: clique em botão (block_actions)
- Unrecognized: autêntico e parseável, mas fora dos tipos conhecidos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass(frozen=True, slots=True)
class UrlVerification:
    challenge: str
    kind: Literal["url_verification"] = "url_verification"


@dataclass(frozen=True, slots=True)
class EventCallback:
    event_type: str
    channel_type: str | None
    channel_id: str | None
    raw: dict[str, Any] = field(repr=False)
    kind: Literal["event_callback"] = "event_callback"

    @property
    def event(self) -> dict[str, Any]:
        """Evento interno (`raw["event"]`)."""
        return self.raw.get("event") or {}


@dataclass(frozen=True, slots=True)
class InteractionCallback:
    interaction_type: str
    action_id: str | None
    channel_id: str | None
    message_ts: str | None
    raw: dict[str, Any] = field(repr=False)
    kind: Literal["interaction_callback"] = "interaction_callback"


@dataclass(frozen=True, slots=True)
class Unrecognized:
    reason: str
    kind: Literal["unrecognized"] = "unrecognized"


ParsedPayload = UrlVerification | EventCallback | InteractionCallback | Unrecognized

DispatchRoute = Literal["events", "interactive"]


@dataclass(frozen=True, slots=True)
class DispatchTask:
    """Trabalho imutável entregue ao dispatcher; nunca persistido nem reprocessado."""

    payload: EventCallback | InteractionCallback
    route: DispatchRoute
    correlation_id: str
    received_at: float
