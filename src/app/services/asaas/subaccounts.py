"""Serviço de subcontas Asaas.

Criação idempotente por CPF/CNPJ: se já existe subconta para o documento,
ela é devolvida em vez de criar outra.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.validators.asaas import PayloadValidationError, validate_subaccount_payload
from app.domain.results import GatewayErr, GatewayOk, not_found, validation_failure

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.results import GatewayResult
    from app.protocols.gateway import AsaasGatewayProtocol

logger = logging.getLogger(__name__)

TAX_ID_REQUIRED_MESSAGE = "tax ID is required"
SUBACCOUNT_NOT_FOUND_MESSAGE = "sub-account not found"


def page_items(data: Any) -> list[Any]:
    """Extrai itens de uma página Asaas ({totalCount, data: [...]})."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("data"), list):
        return data["data"]
    return []


class SubAccountService:
    def __init__(self, gateway: AsaasGatewayProtocol) -> None:
        self._gateway = gateway

    async def create(self, payload: Mapping[str, Any]) -> GatewayResult:
        try:
            validate_subaccount_payload(payload)
        except PayloadValidationError as exc:
            return validation_failure(exc.message)

        cpf_cnpj = payload.get("cpfCnpj")
        if cpf_cnpj:
            existing = await self._gateway.list_subaccounts({"cpfCnpj": cpf_cnpj})
            if isinstance(existing, GatewayErr):
                return existing
            items = page_items(existing.data)
            if items:
                logger.info("subaccount_already_exists", extra={"cpfCnpj": cpf_cnpj})
                return GatewayOk(items[0])

        return await self._gateway.create_subaccount(payload)

    async def list_all(self) -> GatewayResult:
        result = await self._gateway.list_subaccounts()
        if isinstance(result, GatewayErr):
            return result
        return GatewayOk(page_items(result.data), status_code=result.status_code)

    async def find_by_cpf_cnpj(self, cpf_cnpj: str | None) -> GatewayResult:
        """Busca subconta pelo documento.

        Returns:
            GatewayOk com a subconta, 400 se documento vazio, 404 se inexistente
        """
        if not cpf_cnpj or not cpf_cnpj.strip():
            return validation_failure(TAX_ID_REQUIRED_MESSAGE)

        result = await self._gateway.list_subaccounts({"cpfCnpj": cpf_cnpj.strip()})
        if isinstance(result, GatewayErr):
            return result
        items = page_items(result.data)
        if not items:
            return not_found(SUBACCOUNT_NOT_FOUND_MESSAGE)
        return GatewayOk(items[0])
