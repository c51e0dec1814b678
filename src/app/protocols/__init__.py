"""Protocolos e contratos do core da aplicação."""

from .messaging_client import MessagingClientProtocol
from .slack_processors import EventProcessorProtocol, InteractionProcessorProtocol

__all__ = [
    "EventProcessorProtocol",
    "InteractionProcessorProtocol",
    "MessagingClientProtocol",
]
