"""Casos de uso Slack."""

from .process_dispatch_task import HANDLED_ACTION_IDS, DispatchTaskProcessor, is_handled_event

__all__ = ["HANDLED_ACTION_IDS", "DispatchTaskProcessor", "is_handled_event"]
