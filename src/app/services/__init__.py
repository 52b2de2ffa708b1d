"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
O IO com o Asaas fica atrás de AsaasGatewayProtocol.
"""

from app.services.error_classifier import (
    ClassifiedError,
    classify_exception,
    classify_gateway_error,
    safe_error_status,
)
from app.services.response_normalizer import normalize_failure, normalize_success
from app.services.webhook_events import WebhookEventProcessor

__all__ = [
    "ClassifiedError",
    "WebhookEventProcessor",
    "classify_exception",
    "classify_gateway_error",
    "normalize_failure",
    "normalize_success",
    "safe_error_status",
]
