"""Exceção de validação local de payloads Asaas."""

from __future__ import annotations


class PayloadValidationError(ValueError):
    """Payload recebido não atende os campos mínimos exigidos.

    Sempre mapeada para HTTP 400 pelas rotas.
    """

    status_code = 400

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
