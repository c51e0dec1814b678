"""App: composição do gateway (bootstrap, despacho assíncrono e casos de uso).

Subpastas:
- bootstrap/: composition root (logging, settings, contexto do gateway)
- dispatch/: pool de tasks em background pós-ack
- domain/: payloads classificados e DispatchTask
- use_cases/: encaminhamento para processadores downstream
- services/: processadores downstream padrão
- protocols/: contratos dos colaboradores externos
- observability/: correlation_id e métricas via log

Padrão: app executa; api adapta; config configura; utils apoia.
"""
