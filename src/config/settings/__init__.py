"""Agregador de settings do gateway Slack.

Re-exporta as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.slack import (
    SLACK_API_BASE_URL,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    "SLACK_API_BASE_URL",
    "BaseSettings",
    "Environment",
    "SlackSettings",
    "get_base_settings",
    "get_slack_settings",
]
