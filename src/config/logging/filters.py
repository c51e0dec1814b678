"""Filters de logging: injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço

Campos mascarados: assinaturas, secrets e tokens nunca saem em claro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

SENSITIVE_FIELDS = frozenset(
    {
        "signature",
        "signing_secret",
        "bot_token",
        "authorization",
        "secret",
    }
)

MASK = "***"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já veio via `extra`, preserva o valor.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Mascara campos sensíveis passados via `extra`.

    Mantém apenas um prefixo curto quando o valor é longo, suficiente
    para correlacionar sem permitir reuso.
    """

    def __init__(self, fields: frozenset[str] = SENSITIVE_FIELDS, keep_prefix: int = 6) -> None:
        super().__init__()
        self._fields = fields
        self._keep_prefix = keep_prefix

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields:
            value = record.__dict__.get(name)
            if value is None:
                continue
            record.__dict__[name] = self._mask(str(value))
        return True

    def _mask(self, value: str) -> str:
        if len(value) <= self._keep_prefix * 2:
            return MASK
        return f"{value[: self._keep_prefix]}{MASK}"
