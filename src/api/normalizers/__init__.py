"""Normalizers por canal: conversão de payloads externos para modelos internos.

Estrutura:
- slack/: classificação de Events API e interactive components
"""

from .slack import classify_event_payload, classify_interaction_payload

__all__ = [
    "classify_event_payload",
    "classify_interaction_payload",
]
