"""Serviço de cadastro de webhooks no Asaas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.asaas import PayloadValidationError, validate_webhook_registration
from app.domain.results import validation_failure

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.results import GatewayResult
    from app.protocols.gateway import AsaasGatewayProtocol

DEFAULT_WEBHOOK_NAME = "Assinaturas App Webhook"
DEFAULT_SEND_TYPE = "SEQUENTIALLY"
WEBHOOK_ID_REQUIRED_MESSAGE = "webhook id is required"


def build_webhook_registration(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Aplica defaults do cadastro (nome, enabled, interrupted, sendType)."""
    enabled = payload.get("enabled")
    interrupted = payload.get("interrupted")
    return {
        "name": payload.get("name") or DEFAULT_WEBHOOK_NAME,
        "url": payload.get("url"),
        "email": payload.get("email"),
        "enabled": True if enabled is None else enabled,
        "interrupted": False if interrupted is None else interrupted,
        "authToken": payload.get("authToken") or None,
        "sendType": payload.get("sendType") or DEFAULT_SEND_TYPE,
        "events": payload.get("events"),
    }


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


class WebhookService:
    def __init__(self, gateway: AsaasGatewayProtocol) -> None:
        self._gateway = gateway

    async def register(self, payload: Mapping[str, Any]) -> GatewayResult:
        try:
            validate_webhook_registration(payload)
        except PayloadValidationError as exc:
            return validation_failure(exc.message)
        return await self._gateway.create_webhook(build_webhook_registration(payload))

    async def list_all(self) -> GatewayResult:
        return await self._gateway.list_webhooks()

    async def get(self, webhook_id: str | None) -> GatewayResult:
        if _blank(webhook_id):
            return validation_failure(WEBHOOK_ID_REQUIRED_MESSAGE)
        return await self._gateway.get_webhook(webhook_id)

    async def update(self, webhook_id: str | None, payload: Mapping[str, Any]) -> GatewayResult:
        if _blank(webhook_id):
            return validation_failure(WEBHOOK_ID_REQUIRED_MESSAGE)
        return await self._gateway.update_webhook(webhook_id, payload)

    async def delete(self, webhook_id: str | None) -> GatewayResult:
        if _blank(webhook_id):
            return validation_failure(WEBHOOK_ID_REQUIRED_MESSAGE)
        return await self._gateway.delete_webhook(webhook_id)
