"""Contrato do processador de eventos de webhook do Asaas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class WebhookProcessingResult:
    """Resultado do processamento de um evento.

    Attributes:
        success: True se o evento foi tratado (ou ignorado sem handler)
        message: Descrição legível do resultado
        payment_id: `payment.id` do evento (quando houver)
        event: Nome do evento (ex: PAYMENT_CONFIRMED)
        entity: Entidade afetada ({id, type}), quando identificável
        status: Status interno derivado do evento (ex: RECEIVED)
    """

    success: bool
    message: str
    payment_id: str | None = None
    event: str | None = None
    entity: dict[str, Any] | None = field(default=None)
    status: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "paymentId": self.payment_id,
            "event": self.event,
            "entity": self.entity,
            "status": self.status,
        }


class WebhookProcessorProtocol(Protocol):
    """Processa um evento já decodificado; pode lançar exceção."""

    async def process(self, payload: dict[str, Any]) -> WebhookProcessingResult: ...
