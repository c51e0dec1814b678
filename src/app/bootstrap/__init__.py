"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e monta o
contexto do gateway (dispatcher + processadores downstream).

Uso:
    from app.bootstrap import initialize_app, build_gateway_context

    initialize_app()
    context = build_gateway_context(get_slack_settings())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.gateway import GatewayContext, build_gateway_context
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings

if TYPE_CHECKING:
    from config.settings import BaseSettings, SlackSettings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(
    slack_settings: SlackSettings,
    base: BaseSettings | None = None,
) -> None:
    """Valida as settings da instância no startup.

    Recebe as SlackSettings injetadas na app (`app.state.gateway.settings`);
    o ambiente vem de BaseSettings.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = base or get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"slack: {error}" for error in slack_settings.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "GatewayContext",
    "build_gateway_context",
    "initialize_app",
    "validate_runtime_settings",
]
