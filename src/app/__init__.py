"""App — coração do sistema: orquestração e contratos.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: resultado do gateway e envelope de resposta
- services/: normalização, classificação de erros, serviços por recurso
- protocols/: contratos/interfaces
- observability/: logs estruturados, correlation_id, métricas, reporte de falhas

Padrão: app executa; api adapta; config configura.
"""
