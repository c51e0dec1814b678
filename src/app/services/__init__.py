"""Serviços de aplicação.

Processadores downstream padrão do gateway; o IO concreto fica nos
clientes injetados (api/connectors).
"""

from app.services.slack_processors import ReceiptEventProcessor, ReceiptInteractionProcessor

__all__ = [
    "ReceiptEventProcessor",
    "ReceiptInteractionProcessor",
]
