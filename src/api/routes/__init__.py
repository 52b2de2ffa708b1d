"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (recursos Asaas, webhook, health)
- Validação inicial de request (path params, headers)
- Delegação para serviços/gateway
- Respostas HTTP no envelope uniforme

Estrutura:
- routes/asaas/: clientes, subcontas, webhooks, assinaturas, shoppers
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
