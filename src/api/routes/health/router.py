"""Endpoint de health check (sem verificação de assinatura)."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> PlainTextResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return PlainTextResponse("OK")
