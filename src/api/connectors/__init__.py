"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- http_base.py: cliente HTTP genérico (httpx)
- slack/: assinatura, parsing de webhooks e Web API do Slack
"""

__all__: list[str] = []
