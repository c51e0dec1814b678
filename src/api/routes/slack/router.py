"""Router principal do Slack: agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.slack.events import router as events_router
from api.routes.slack.interactive import router as interactive_router

router = APIRouter()

router.include_router(events_router)
router.include_router(interactive_router)
