"""Providers de dependências para as rotas (FastAPI Depends).

As rotas recebem gateway, reporter de erros e processador de webhook por
injeção; testes substituem via `app.dependency_overrides` ou passando
fakes diretamente aos handlers.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from app.observability import LoggingErrorReporter
from app.protocols import (
    AsaasGatewayProtocol,
    ErrorReporterProtocol,
    WebhookProcessorProtocol,
)
from app.services.asaas import (
    ShopperSubscriptionService,
    SubAccountService,
    SubscriptionService,
    WebhookService,
)
from app.services.webhook_events import WebhookEventProcessor


def get_gateway(request: Request) -> AsaasGatewayProtocol:
    """Gateway criado no lifespan do app.

    Raises:
        RuntimeError: Se o app não inicializou o gateway
    """
    gateway = getattr(request.app.state, "asaas_gateway", None)
    if gateway is None:
        raise RuntimeError("asaas gateway not initialized")
    return gateway


@lru_cache(maxsize=1)
def get_error_reporter() -> ErrorReporterProtocol:
    return LoggingErrorReporter()


@lru_cache(maxsize=1)
def _default_webhook_processor() -> WebhookEventProcessor:
    return WebhookEventProcessor()


def get_webhook_processor(request: Request) -> WebhookProcessorProtocol:
    """Processador registrado no app, ou o padrão do processo."""
    processor = getattr(request.app.state, "webhook_processor", None)
    return processor or _default_webhook_processor()


def get_subaccount_service(
    gateway: AsaasGatewayProtocol = Depends(get_gateway),
) -> SubAccountService:
    return SubAccountService(gateway)


def get_webhook_service(
    gateway: AsaasGatewayProtocol = Depends(get_gateway),
) -> WebhookService:
    return WebhookService(gateway)


def get_subscription_service(
    gateway: AsaasGatewayProtocol = Depends(get_gateway),
) -> SubscriptionService:
    return SubscriptionService(gateway)


def get_shopper_service(
    gateway: AsaasGatewayProtocol = Depends(get_gateway),
) -> ShopperSubscriptionService:
    return ShopperSubscriptionService(gateway)
