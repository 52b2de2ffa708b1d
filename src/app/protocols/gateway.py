"""Contrato do gateway Asaas usado pelas rotas e serviços.

Evita dependência direta da camada api; testes usam fakes que
implementam apenas os métodos exercitados.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.results import GatewayResult


class AsaasGatewayProtocol(Protocol):
    """Uma operação por recurso remoto, sempre devolvendo GatewayResult."""

    async def create_customer(self, payload: Mapping[str, Any]) -> GatewayResult: ...

    async def list_customers(self, filters: Mapping[str, Any] | None = None) -> GatewayResult: ...

    async def get_customer(self, customer_id: str) -> GatewayResult: ...

    async def update_customer(
        self, customer_id: str, payload: Mapping[str, Any]
    ) -> GatewayResult: ...

    async def delete_customer(self, customer_id: str) -> GatewayResult: ...

    async def create_subaccount(self, payload: Mapping[str, Any]) -> GatewayResult: ...

    async def list_subaccounts(self, filters: Mapping[str, Any] | None = None) -> GatewayResult: ...

    async def create_webhook(self, payload: Mapping[str, Any]) -> GatewayResult: ...

    async def list_webhooks(self, filters: Mapping[str, Any] | None = None) -> GatewayResult: ...

    async def get_webhook(self, webhook_id: str) -> GatewayResult: ...

    async def update_webhook(
        self, webhook_id: str, payload: Mapping[str, Any]
    ) -> GatewayResult: ...

    async def delete_webhook(self, webhook_id: str) -> GatewayResult: ...

    async def create_subscription(self, payload: Mapping[str, Any]) -> GatewayResult: ...

    async def list_subscriptions(
        self, filters: Mapping[str, Any] | None = None
    ) -> GatewayResult: ...

    async def get_subscription(self, subscription_id: str) -> GatewayResult: ...

    async def update_subscription(
        self, subscription_id: str, payload: Mapping[str, Any]
    ) -> GatewayResult: ...

    async def delete_subscription(self, subscription_id: str) -> GatewayResult: ...
