"""Conector da API de pagamentos Asaas v3.

Uso:
    from api.connectors.asaas import AsaasGateway, create_asaas_http_client

    gateway = AsaasGateway(create_asaas_http_client())
    result = await gateway.list_customers({"cpfCnpj": "12345678900"})
"""

from api.connectors.asaas.errors import (
    AsaasApiError,
    AsaasConfigurationError,
    AsaasTransportError,
    parse_asaas_error,
)
from api.connectors.asaas.gateway import AsaasGateway, clean_filters
from api.connectors.asaas.http_client import (
    AsaasHttpClient,
    HttpClientConfig,
    create_asaas_http_client,
)

__all__ = [
    "AsaasApiError",
    "AsaasConfigurationError",
    "AsaasGateway",
    "AsaasHttpClient",
    "AsaasTransportError",
    "HttpClientConfig",
    "clean_filters",
    "create_asaas_http_client",
    "parse_asaas_error",
]
