"""Formatter JSON dos logs estruturados.

Campos obrigatórios: asctime, level, logger, message, correlation_id, service.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.routes.slack.events",
         "message": "slack_ack_sent", "correlation_id": "abc-123",
         "service": "slack_gateway"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
