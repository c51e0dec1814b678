"""Rotas HTTP da API.

- health/: liveness
- slack/: webhooks do Slack
- router.py: agrega os routers e normaliza rotas desconhecidas para 404
"""

from __future__ import annotations

from api.routes.router import create_api_router, register_not_found_handler

__all__ = ["create_api_router", "register_not_found_handler"]
