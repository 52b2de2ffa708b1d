"""Serviço de assinaturas Asaas (CRUD + listagem por cliente)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.asaas import (
    DEFAULT_CYCLE,
    PayloadValidationError,
    validate_subscription_create,
    validate_subscription_update,
)
from app.domain.results import validation_failure

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.results import GatewayResult
    from app.protocols.gateway import AsaasGatewayProtocol

SUBSCRIPTION_ID_REQUIRED_MESSAGE = "subscription id is required"
CUSTOMER_ID_REQUIRED_MESSAGE = "customer id is required"

LIST_FILTER_KEYS = ("customer", "billingType", "offset", "limit", "externalReference")


def with_default_cycle(payload: Mapping[str, Any]) -> dict[str, Any]:
    data = dict(payload)
    if not data.get("cycle"):
        data["cycle"] = DEFAULT_CYCLE
    return data


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


class SubscriptionService:
    def __init__(self, gateway: AsaasGatewayProtocol) -> None:
        self._gateway = gateway

    async def create(self, payload: Mapping[str, Any]) -> GatewayResult:
        try:
            validate_subscription_create(payload)
        except PayloadValidationError as exc:
            return validation_failure(exc.message)
        return await self._gateway.create_subscription(with_default_cycle(payload))

    async def update(self, subscription_id: str | None, payload: Mapping[str, Any]) -> GatewayResult:
        if _blank(subscription_id):
            return validation_failure(SUBSCRIPTION_ID_REQUIRED_MESSAGE)
        try:
            validate_subscription_update(payload)
        except PayloadValidationError as exc:
            return validation_failure(exc.message)
        return await self._gateway.update_subscription(subscription_id, payload)

    async def get(self, subscription_id: str | None) -> GatewayResult:
        if _blank(subscription_id):
            return validation_failure(SUBSCRIPTION_ID_REQUIRED_MESSAGE)
        return await self._gateway.get_subscription(subscription_id)

    async def delete(self, subscription_id: str | None) -> GatewayResult:
        if _blank(subscription_id):
            return validation_failure(SUBSCRIPTION_ID_REQUIRED_MESSAGE)
        return await self._gateway.delete_subscription(subscription_id)

    async def list_all(self, filters: Mapping[str, Any] | None = None) -> GatewayResult:
        selected = {key: (filters or {}).get(key) for key in LIST_FILTER_KEYS}
        return await self._gateway.list_subscriptions(selected)

    async def list_by_customer(self, customer_id: str | None) -> GatewayResult:
        if _blank(customer_id):
            return validation_failure(CUSTOMER_ID_REQUIRED_MESSAGE)
        return await self._gateway.list_subscriptions({"customer": customer_id})
