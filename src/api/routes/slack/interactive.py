"""Endpoint de interactive components do Slack.

POST /slack/interactive (form com campo `payload` em JSON):
- block_actions: agenda processamento e responde 200 vazio
- demais tipos: 200 vazio
"""

from __future__ import annotations

from fastapi import APIRouter, Request, Response

from api.connectors.slack.webhook import parse_interactive_body
from api.normalizers.slack import classify_interaction_payload
from api.routes.slack.webhook_runtime import handle_slack_webhook

router = APIRouter()


@router.post("/interactive")
async def receive_interaction(request: Request) -> Response:
    """Recebe cliques em botões e demais interações."""
    return await handle_slack_webhook(
        request,
        route="interactive",
        parse_body=parse_interactive_body,
        classify=classify_interaction_payload,
    )
