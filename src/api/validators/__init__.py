"""Validators por integração — validação de payloads para APIs externas.

Estrutura:
- asaas/: API de pagamentos Asaas v3

Cada integração tem seus próprios validators e sua própria exceção.
"""

__all__: list[str] = []
