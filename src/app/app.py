"""Entrypoint do gateway de webhooks Slack.

Expõe a aplicação ASGI (FastAPI). Cada instância tem seu próprio
contexto (settings, dispatcher, processadores) em `app.state.gateway`.

Uso (produção):
    uvicorn app.app:create_default_app --factory --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router, register_not_found_handler
from app.bootstrap import build_gateway_context, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_slack_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from app.protocols import EventProcessorProtocol, InteractionProcessorProtocol
    from config.settings import SlackSettings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida as configurações injetadas na instância.
    Shutdown: aguarda tasks em background pendentes (e cancela o excedente).
    """
    logger.info("app_starting", extra={"service": "slack-gateway"})
    validate_runtime_settings(app.state.gateway.settings)

    yield

    logger.info("app_shutting_down", extra={"service": "slack-gateway"})
    gateway = app.state.gateway
    await gateway.aclose(drain_timeout_seconds=gateway.settings.shutdown_drain_seconds)


def create_app(
    settings: SlackSettings | None = None,
    *,
    event_processor: EventProcessorProtocol | None = None,
    interaction_processor: InteractionProcessorProtocol | None = None,
    clock: Callable[[], float] | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        settings: SlackSettings; carregadas do ambiente se None.
        event_processor: Processador de eventos (padrão: recibo via Web API).
        interaction_processor: Processador de interações (padrão: idem).
        clock: Relógio em segundos desde epoch (padrão: time.time).

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Slack Gateway",
        description="Gateway de webhooks Slack: assinatura, ack rápido e despacho assíncrono",
        version="1.0.0",
        lifespan=lifespan,
        # Tabela de rotas fixa: sem docs/openapi expostos
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    fastapi_app.state.gateway = build_gateway_context(
        settings or get_slack_settings(),
        event_processor=event_processor,
        interaction_processor=interaction_processor,
        clock=clock,
    )

    fastapi_app.include_router(create_api_router())
    register_not_found_handler(fastapi_app)

    logger.info("app_configured", extra={"service": "slack-gateway"})

    return fastapi_app


def create_default_app() -> FastAPI:
    """Inicializa logging e cria a app a partir do ambiente."""
    initialize_app()
    return create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    initialize_app()
    logger.info("Starting slack-gateway in development mode")
    uvicorn.run(
        "app.app:create_default_app",
        factory=True,
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
