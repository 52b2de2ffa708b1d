"""Serviços por recurso Asaas (validação + defaults + chamadas ao gateway)."""

from app.services.asaas.shoppers import ShopperSubscriptionService
from app.services.asaas.subaccounts import (
    SUBACCOUNT_NOT_FOUND_MESSAGE,
    TAX_ID_REQUIRED_MESSAGE,
    SubAccountService,
    page_items,
)
from app.services.asaas.subscriptions import SubscriptionService
from app.services.asaas.webhooks import WebhookService, build_webhook_registration

__all__ = [
    "SUBACCOUNT_NOT_FOUND_MESSAGE",
    "TAX_ID_REQUIRED_MESSAGE",
    "ShopperSubscriptionService",
    "SubAccountService",
    "SubscriptionService",
    "WebhookService",
    "build_webhook_registration",
    "page_items",
]
