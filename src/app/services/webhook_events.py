"""Processador de eventos de webhook do Asaas.

Registro de handlers por nome de evento. Eventos de pagamento são mapeados
para o status interno do pagamento; eventos de assinatura são registrados
pelo id da assinatura. Eventos sem handler são aceitos e apenas logados.

Exceções lançadas por handlers propagam: quem recebe o webhook decide
como reconhecer o evento.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from app.protocols.webhook_processor import WebhookProcessingResult

logger = logging.getLogger(__name__)

EventHandler = Callable[[dict[str, Any]], Awaitable[WebhookProcessingResult]]

PAYMENT_STATUS_BY_EVENT: dict[str, str] = {
    "PAYMENT_CREATED": "PENDING",
    "PAYMENT_RECEIVED": "RECEIVED",
    "PAYMENT_CONFIRMED": "RECEIVED",
    "PAYMENT_OVERDUE": "OVERDUE",
    "PAYMENT_REFUNDED": "REFUNDED",
    "PAYMENT_DELETED": "CANCELED",
    "PAYMENT_CANCELED": "CANCELED",
}

SUBSCRIPTION_EVENTS: tuple[str, ...] = (
    "SUBSCRIPTION_CREATED",
    "SUBSCRIPTION_UPDATED",
    "SUBSCRIPTION_RENEWED",
    "SUBSCRIPTION_INACTIVATED",
    "SUBSCRIPTION_DELETED",
)

MISSING_PAYMENT_MESSAGE = "invalid webhook payload: payment information missing"
MISSING_SUBSCRIPTION_MESSAGE = "invalid webhook payload: subscription information missing"


def extract_payment_id(payload: dict[str, Any]) -> str | None:
    """Lê `payment.id` sem assumir formato do payload."""
    payment = payload.get("payment")
    if isinstance(payment, dict) and payment.get("id"):
        return str(payment["id"])
    return None


def _customer_entity(source: dict[str, Any]) -> dict[str, Any] | None:
    customer = source.get("customer")
    if not customer:
        return None
    return {"id": customer, "type": "customer"}


def _payment_handler(status: str) -> EventHandler:
    async def handle(payload: dict[str, Any]) -> WebhookProcessingResult:
        event = payload.get("event")
        payment = payload.get("payment")
        payment_id = extract_payment_id(payload)
        if payment_id is None or not isinstance(payment, dict):
            return WebhookProcessingResult(
                success=False,
                message=MISSING_PAYMENT_MESSAGE,
                event=event,
            )

        logger.info(
            "webhook_payment_status",
            extra={
                "event": event,
                "payment_id": payment_id,
                "subscription_id": payment.get("subscription"),
                "payment_status": status,
            },
        )
        return WebhookProcessingResult(
            success=True,
            message=f"payment {payment_id} marked as {status}",
            payment_id=payment_id,
            event=event,
            entity=_customer_entity(payment),
            status=status,
        )

    return handle


async def _handle_subscription_event(payload: dict[str, Any]) -> WebhookProcessingResult:
    event = payload.get("event")
    subscription = payload.get("subscription")
    if not isinstance(subscription, dict) or not subscription.get("id"):
        return WebhookProcessingResult(
            success=False,
            message=MISSING_SUBSCRIPTION_MESSAGE,
            payment_id=extract_payment_id(payload),
            event=event,
        )

    subscription_id = str(subscription["id"])
    logger.info(
        "webhook_subscription_event",
        extra={
            "event": event,
            "subscription_id": subscription_id,
            "subscription_status": subscription.get("status"),
        },
    )
    return WebhookProcessingResult(
        success=True,
        message=f"subscription {subscription_id} {event} recorded",
        payment_id=extract_payment_id(payload),
        event=event,
        entity=_customer_entity(subscription),
        status=subscription.get("status"),
    )


class WebhookEventProcessor:
    """Direciona cada evento ao handler registrado."""

    def __init__(self, *, register_defaults: bool = True) -> None:
        self._handlers: dict[str, EventHandler] = {}
        if register_defaults:
            for event_name, status in PAYMENT_STATUS_BY_EVENT.items():
                self._handlers[event_name] = _payment_handler(status)
            for event_name in SUBSCRIPTION_EVENTS:
                self._handlers[event_name] = _handle_subscription_event

    def register_handler(self, event_name: str, handler: EventHandler) -> None:
        """Registra (ou substitui) o handler de um evento.

        Raises:
            TypeError: Se handler não for chamável
        """
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers[event_name] = handler
        logger.info("webhook_handler_registered", extra={"event": event_name})

    def has_handler(self, event_name: str) -> bool:
        return event_name in self._handlers

    def supported_events(self) -> list[str]:
        return sorted(self._handlers)

    async def process(self, payload: dict[str, Any]) -> WebhookProcessingResult:
        """Processa um evento decodificado."""
        event = payload.get("event")
        handler = self._handlers.get(event) if isinstance(event, str) else None
        if handler is None:
            logger.info("webhook_event_without_handler", extra={"event": event})
            return WebhookProcessingResult(
                success=True,
                message=f"event {event} received, no handler registered",
                payment_id=extract_payment_id(payload),
                event=event,
            )
        return await handler(payload)
