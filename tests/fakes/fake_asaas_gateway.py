"""Fakes em memória do gateway Asaas e do reporter de erros."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.results import GatewayOk, GatewayResult


class FakeAsaasGateway:
    """Implementa AsaasGatewayProtocol sem IO.

    Respostas programáveis por operação (GatewayResult ou exceção a lançar);
    todas as chamadas ficam registradas em `calls`.
    """

    def __init__(self, responses: Mapping[str, GatewayResult | Exception] | None = None) -> None:
        self.responses: dict[str, GatewayResult | Exception] = dict(responses or {})
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def calls_to(self, operation: str) -> list[tuple[Any, ...]]:
        return [args for name, args in self.calls if name == operation]

    async def _dispatch(self, operation: str, *args: Any) -> GatewayResult:
        self.calls.append((operation, args))
        outcome = self.responses.get(operation, GatewayOk({}))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def create_customer(self, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._dispatch("create_customer", payload)

    async def list_customers(self, filters: Mapping[str, Any] | None = None) -> GatewayResult:
        return await self._dispatch("list_customers", filters)

    async def get_customer(self, customer_id: str) -> GatewayResult:
        return await self._dispatch("get_customer", customer_id)

    async def update_customer(self, customer_id: str, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._dispatch("update_customer", customer_id, payload)

    async def delete_customer(self, customer_id: str) -> GatewayResult:
        return await self._dispatch("delete_customer", customer_id)

    async def create_subaccount(self, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._dispatch("create_subaccount", payload)

    async def list_subaccounts(self, filters: Mapping[str, Any] | None = None) -> GatewayResult:
        return await self._dispatch("list_subaccounts", filters)

    async def create_webhook(self, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._dispatch("create_webhook", payload)

    async def list_webhooks(self, filters: Mapping[str, Any] | None = None) -> GatewayResult:
        return await self._dispatch("list_webhooks", filters)

    async def get_webhook(self, webhook_id: str) -> GatewayResult:
        return await self._dispatch("get_webhook", webhook_id)

    async def update_webhook(self, webhook_id: str, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._dispatch("update_webhook", webhook_id, payload)

    async def delete_webhook(self, webhook_id: str) -> GatewayResult:
        return await self._dispatch("delete_webhook", webhook_id)

    async def create_subscription(self, payload: Mapping[str, Any]) -> GatewayResult:
        return await self._dispatch("create_subscription", payload)

    async def list_subscriptions(self, filters: Mapping[str, Any] | None = None) -> GatewayResult:
        return await self._dispatch("list_subscriptions", filters)

    async def get_subscription(self, subscription_id: str) -> GatewayResult:
        return await self._dispatch("get_subscription", subscription_id)

    async def update_subscription(
        self, subscription_id: str, payload: Mapping[str, Any]
    ) -> GatewayResult:
        return await self._dispatch("update_subscription", subscription_id, payload)

    async def delete_subscription(self, subscription_id: str) -> GatewayResult:
        return await self._dispatch("delete_subscription", subscription_id)


class FakeErrorReporter:
    """Guarda cada falha reportada para asserts."""

    def __init__(self) -> None:
        self.reports: list[dict[str, Any]] = []

    def report(
        self,
        operation: str,
        *,
        status_code: int,
        message: str,
        detail: str | None = None,
        error: BaseException | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        self.reports.append(
            {
                "operation": operation,
                "status_code": status_code,
                "message": message,
                "detail": detail,
                "error": error,
                "context": dict(context or {}),
            }
        )


class UpstreamError(Exception):
    """Exceção com `response.status`, como a de um cliente HTTP que lança."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.response = type("_Response", (), {"status": status})()
