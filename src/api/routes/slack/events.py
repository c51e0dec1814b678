"""Endpoint da Events API do Slack.

POST /slack/events (JSON):
- url_verification: responde o challenge em text/plain
- event_callback: agenda processamento e responde 200 vazio
- demais tipos: 200 vazio
"""

from __future__ import annotations

from fastapi import APIRouter, Request, Response

from api.connectors.slack.webhook import parse_events_body
from api.normalizers.slack import classify_event_payload
from api.routes.slack.webhook_runtime import handle_slack_webhook

router = APIRouter()


@router.post("/events")
async def receive_events(request: Request) -> Response:
    """Recebe callbacks da Events API."""
    return await handle_slack_webhook(
        request,
        route="events",
        parse_body=parse_events_body,
        classify=classify_event_payload,
    )
