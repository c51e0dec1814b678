"""Classificador de payloads Slack (Events API e interactive components)."""

from .classifier import classify_event_payload, classify_interaction_payload

__all__ = ["classify_event_payload", "classify_interaction_payload"]
