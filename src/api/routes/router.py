"""Agregador de rotas e tratamento uniforme de rotas desconhecidas.

Tabela fixa (match exato de método + path):
- GET  /health
- POST /slack/events
- POST /slack/interactive
Qualquer outra combinação responde 404, inclusive método errado em
path conhecido (que o Starlette reportaria como 405).

Uso:
    app = FastAPI(redirect_slashes=False)
    app.include_router(create_api_router())
    register_not_found_handler(app)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.health.router import router as health_router
from api.routes.slack.ack import not_found
from api.routes.slack.router import router as slack_router

if TYPE_CHECKING:
    from fastapi import FastAPI

UNROUTED_STATUS_CODES = frozenset({404, 405})


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(slack_router, prefix="/slack", tags=["slack"])

    return api_router


async def _unrouted_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in UNROUTED_STATUS_CODES:
        return not_found()
    return await http_exception_handler(request, exc)


def register_not_found_handler(app: FastAPI) -> None:
    """Normaliza 404/405 do roteamento para um 404 text/plain uniforme."""
    app.add_exception_handler(StarletteHTTPException, _unrouted_handler)
