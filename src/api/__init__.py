"""API: camada de borda do gateway Slack.

Responsabilidades:
- Receber webhooks do Slack (Events API e interactive components)
- Validar assinatura sobre o body bruto
- Classificar payloads para modelos internos
- Responder o ack dentro do timeout do Slack

Subpastas:
- connectors/: assinatura, parsing e cliente da Web API
- normalizers/: classificação de payloads → app.domain
- routes/: endpoints HTTP (health, slack)

NÃO PODE conter: processamento downstream nem orquestração de use cases.
"""
