"""Connectors por integração — adapters de borda para APIs externas.

Estrutura:
- asaas/: API de pagamentos Asaas v3

Cada integração tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
