"""Settings específicas do Slack.

Credenciais do app (signing secret, bot token), Web API e limites do
processamento em background.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SLACK_API_BASE_URL: str = "https://slack.com/api"
DEFAULT_REPLAY_WINDOW_SECONDS: int = 300


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do canal Slack.

    Attributes:
        signing_secret: Secret para validação HMAC (v0) dos webhooks
        bot_token: Token xoxb- usado pelo cliente de mensagens
        api_base_url: URL base da Web API
        request_timeout_seconds: Timeout das chamadas à Web API
        max_retries: Retries de transporte (429/5xx); 0 = sem retry
        replay_window_seconds: Idade máxima aceita do timestamp assinado
        max_concurrent_tasks: Limite de tasks em background simultâneas
        shutdown_drain_seconds: Espera por tasks pendentes no shutdown
    """

    signing_secret: str = ""
    bot_token: str = ""
    api_base_url: str = SLACK_API_BASE_URL

    request_timeout_seconds: float = 10.0
    max_retries: int = 0

    replay_window_seconds: int = DEFAULT_REPLAY_WINDOW_SECONDS
    max_concurrent_tasks: int = 100
    shutdown_drain_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.signing_secret:
            errors.append("SLACK_SIGNING_SECRET não configurado")

        if not self.bot_token:
            errors.append("SLACK_BOT_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("SLACK_MAX_RETRIES deve ser >= 0")

        if self.replay_window_seconds <= 0:
            errors.append("SLACK_REPLAY_WINDOW_SECONDS deve ser > 0")

        if self.max_concurrent_tasks <= 0:
            errors.append("SLACK_MAX_CONCURRENT_TASKS deve ser > 0")

        if self.shutdown_drain_seconds < 0:
            errors.append("SLACK_SHUTDOWN_DRAIN_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    return SlackSettings(
        signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
        bot_token=os.getenv("SLACK_BOT_TOKEN", ""),
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "10")),
        max_retries=int(os.getenv("SLACK_MAX_RETRIES", "0")),
        replay_window_seconds=int(
            os.getenv("SLACK_REPLAY_WINDOW_SECONDS", str(DEFAULT_REPLAY_WINDOW_SECONDS))
        ),
        max_concurrent_tasks=int(os.getenv("SLACK_MAX_CONCURRENT_TASKS", "100")),
        shutdown_drain_seconds=float(os.getenv("SLACK_SHUTDOWN_DRAIN_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings (usada só no bootstrap)."""
    return _load_from_env()
