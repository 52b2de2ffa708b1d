"""Factories de clientes externos — gateway Asaas.

O cliente HTTP é criado uma vez por processo (lifespan do app) e fechado
no shutdown.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.asaas import AsaasGateway, create_asaas_http_client

if TYPE_CHECKING:
    import httpx

    from config.settings import AsaasSettings

logger = logging.getLogger(__name__)


def create_asaas_gateway(
    settings: AsaasSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsaasGateway:
    """Cria gateway Asaas com cliente HTTP próprio.

    Args:
        settings: AsaasSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional (testes)

    Returns:
        AsaasGateway pronto para uso
    """
    client = create_asaas_http_client(settings, transport=transport)
    gateway = AsaasGateway(client)
    logger.info("asaas_gateway_created", extra={"component": "bootstrap"})
    return gateway


async def close_asaas_gateway(gateway: AsaasGateway | None) -> None:
    """Fecha o cliente HTTP do gateway (idempotente)."""
    if gateway is None or gateway.client.is_closed:
        return
    await gateway.client.aclose()
    logger.info("asaas_gateway_closed", extra={"component": "bootstrap"})
