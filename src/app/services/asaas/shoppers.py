"""Serviço de assinatura de shopper.

O payload (incluindo `split`) é repassado ao Asaas sem alteração, exceto
pelo ciclo padrão MONTHLY.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.asaas import PayloadValidationError, validate_shopper_subscription
from app.domain.results import validation_failure
from app.services.asaas.subscriptions import with_default_cycle

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.results import GatewayResult
    from app.protocols.gateway import AsaasGatewayProtocol


class ShopperSubscriptionService:
    def __init__(self, gateway: AsaasGatewayProtocol) -> None:
        self._gateway = gateway

    async def create(self, payload: Mapping[str, Any]) -> GatewayResult:
        try:
            validate_shopper_subscription(payload)
        except PayloadValidationError as exc:
            return validation_failure(exc.message)
        return await self._gateway.create_subscription(with_default_cycle(payload))
