"""Protocolos e contratos do core da aplicação."""

from .error_reporter import ErrorReporterProtocol
from .gateway import AsaasGatewayProtocol
from .webhook_processor import WebhookProcessingResult, WebhookProcessorProtocol

__all__ = [
    "AsaasGatewayProtocol",
    "ErrorReporterProtocol",
    "WebhookProcessingResult",
    "WebhookProcessorProtocol",
]
