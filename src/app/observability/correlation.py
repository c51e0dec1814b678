"""correlation_id por requisição, propagado para logs e tasks em background.

Usa ContextVar: `asyncio.create_task` copia o contexto atual, então a task
despachada herda o correlation_id do request que a criou.

Uso:
    token = set_correlation_id(resolve_correlation_id(request.headers))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

CORRELATION_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual; gera UUID se None."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def resolve_correlation_id(headers: Mapping[str, str]) -> str:
    """Usa o header X-Correlation-Id quando presente, senão gera um novo."""
    return headers.get(CORRELATION_HEADER) or generate_correlation_id()
