"""Observabilidade: logs estruturados e métricas.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    resolve_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_verification_failure

__all__ = [
    "CORRELATION_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_verification_failure",
    "reset_correlation_id",
    "resolve_correlation_id",
    "set_correlation_id",
]
