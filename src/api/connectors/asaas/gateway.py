"""Gateway Asaas: uma operação por recurso remoto.

Cada método mapeia 1:1 para um endpoint da API v3 e devolve o resultado
canônico (GatewayOk | GatewayErr). Filtros vazios são descartados antes de
irem para a query string; o restante é repassado sem validação local.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from api.connectors.asaas.http_client import AsaasHttpClient
    from app.domain.results import GatewayResult

CUSTOMERS = "customers"
ACCOUNTS = "accounts"
WEBHOOKS = "webhooks"
SUBSCRIPTIONS = "subscriptions"


def clean_filters(filters: Mapping[str, Any] | None) -> dict[str, Any]:
    """Remove filtros None/vazios, preservando 0 e False."""
    if not filters:
        return {}
    return {key: value for key, value in filters.items() if value is not None and value != ""}


def _resource(collection: str, resource_id: str) -> str:
    return f"{collection}/{quote(str(resource_id), safe='')}"


class AsaasGateway:
    """Operações do Asaas usadas pelas rotas e serviços."""

    def __init__(self, client: AsaasHttpClient) -> None:
        self._client = client

    @property
    def client(self) -> AsaasHttpClient:
        return self._client

    # Clientes

    async def create_customer(self, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._client.request("POST", CUSTOMERS, json_body=dict(payload))

    async def list_customers(self, filters: Mapping[str, Any] | None = None) -> GatewayResult:
        return await self._client.request("GET", CUSTOMERS, params=clean_filters(filters))

    async def get_customer(self, customer_id: str) -> GatewayResult:
        return await self._client.request("GET", _resource(CUSTOMERS, customer_id))

    async def update_customer(self, customer_id: str, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._client.request(
            "PUT", _resource(CUSTOMERS, customer_id), json_body=dict(payload)
        )

    async def delete_customer(self, customer_id: str) -> GatewayResult:
        return await self._client.request("DELETE", _resource(CUSTOMERS, customer_id))

    # Subcontas

    async def create_subaccount(self, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._client.request("POST", ACCOUNTS, json_body=dict(payload))

    async def list_subaccounts(self, filters: Mapping[str, Any] | None = None) -> GatewayResult:
        return await self._client.request("GET", ACCOUNTS, params=clean_filters(filters))

    # Webhooks

    async def create_webhook(self, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._client.request("POST", WEBHOOKS, json_body=dict(payload))

    async def list_webhooks(self, filters: Mapping[str, Any] | None = None) -> GatewayResult:
        return await self._client.request("GET", WEBHOOKS, params=clean_filters(filters))

    async def get_webhook(self, webhook_id: str) -> GatewayResult:
        return await self._client.request("GET", _resource(WEBHOOKS, webhook_id))

    async def update_webhook(self, webhook_id: str, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._client.request(
            "PUT", _resource(WEBHOOKS, webhook_id), json_body=dict(payload)
        )

    async def delete_webhook(self, webhook_id: str) -> GatewayResult:
        return await self._client.request("DELETE", _resource(WEBHOOKS, webhook_id))

    # Assinaturas

    async def create_subscription(self, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._client.request("POST", SUBSCRIPTIONS, json_body=dict(payload))

    async def list_subscriptions(self, filters: Mapping[str, Any] | None = None) -> GatewayResult:
        return await self._client.request("GET", SUBSCRIPTIONS, params=clean_filters(filters))

    async def get_subscription(self, subscription_id: str) -> GatewayResult:
        return await self._client.request("GET", _resource(SUBSCRIPTIONS, subscription_id))

    async def update_subscription(
        self, subscription_id: str, payload: Mapping[str, Any]
    ) -> GatewayResult:
        return await self._client.request(
            "PUT", _resource(SUBSCRIPTIONS, subscription_id), json_body=dict(payload)
        )

    async def delete_subscription(self, subscription_id: str) -> GatewayResult:
        return await self._client.request("DELETE", _resource(SUBSCRIPTIONS, subscription_id))
