"""API: camada de borda com rotas HTTP e adapters da API Asaas.

Subpastas:
- connectors/: cliente HTTP e gateway da API Asaas v3
- validators/: validação local de payloads antes de chamar o Asaas
- routes/: endpoints HTTP por recurso, recebimento de webhook e health

NÃO PODE conter: regras de classificação de erro nem montagem de envelope
fora de routes/asaas/_responses.py.
"""
