"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationError,
    DownstreamError,
    GatewayError,
    MalformedPayloadError,
)

__all__ = [
    "AuthenticationError",
    "DownstreamError",
    "GatewayError",
    "MalformedPayloadError",
]
