"""Registro de métricas via structured logging.

As métricas saem como logs estruturados e são agregadas depois
(BigQuery, CloudWatch Insights, etc.).

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("slack_gateway", "ack", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "slack_gateway", "slack_dispatcher")
        operation: Nome da operação (ex: "ack", "event_callback")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_verification_failure(route: str, reason: str) -> None:
    """Registra rejeição de assinatura (sem secret nem assinatura)."""
    logger.info(
        "metric_verification_failure",
        extra={
            "metric_type": "counter",
            "component": "slack_signature",
            "route": route,
            "reason": reason,
        },
    )
