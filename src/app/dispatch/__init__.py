"""Despacho assíncrono de trabalho pós-ack."""

from app.dispatch.background import DEFAULT_MAX_CONCURRENT_TASKS, BackgroundDispatcher

__all__ = ["DEFAULT_MAX_CONCURRENT_TASKS", "BackgroundDispatcher"]
