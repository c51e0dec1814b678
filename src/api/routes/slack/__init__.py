"""Rotas Slack (Events API e interactive components)."""
