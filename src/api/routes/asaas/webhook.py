"""Endpoints de webhook Asaas: cadastro (CRUD) e recebimento de eventos.

Endpoints:
- POST /webhook/register: cadastra webhook no Asaas (201)
- GET /webhook: lista webhooks
- GET /webhook/{webhook_id}: busca webhook
- PUT /webhook/{webhook_id}: atualiza webhook
- DELETE /webhook/{webhook_id}: remove webhook
- POST /webhook/receive: recebimento de eventos enviados pelo Asaas

Recebimento:
- Resposta SEMPRE 200, inclusive quando o processamento falha. O Asaas
  trata qualquer outro status como falha de entrega e reenvia o evento;
  o resultado de negócio vai apenas no corpo (`processed`, `success`)
- Payload completo logado antes do processamento (com redação de
  cartão, tokens e CPF/CNPJ pelo filtro de logging)
- Com ASAAS_WEBHOOK_TOKEN configurado, o header `asaas-access-token`
  precisa conferir; caso contrário o evento não é processado
"""

from __future__ import annotations

import hmac
import json
import logging
from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from api.routes.asaas._responses import exception_response, result_response
from app.bootstrap.dependencies import (
    get_error_reporter,
    get_webhook_processor,
    get_webhook_service,
)
from app.observability import record_webhook_event
from app.protocols import (
    ErrorReporterProtocol,
    WebhookProcessingResult,
    WebhookProcessorProtocol,
)
from app.services.asaas import WebhookService
from app.services.webhook_events import extract_payment_id
from config.settings import AsaasSettings, get_asaas_settings

logger = logging.getLogger(__name__)

router = APIRouter()

WEBHOOK_TOKEN_HEADER = "asaas-access-token"

REGISTER_FAILED = "Failed to register webhook"
LIST_FAILED = "Failed to list webhooks"
GET_FAILED = "Failed to get webhook"
UPDATE_FAILED = "Failed to update webhook"
DELETE_FAILED = "Failed to delete webhook"

INVALID_PAYLOAD_MESSAGE = "invalid webhook payload"
INVALID_TOKEN_MESSAGE = "invalid webhook access token"


# ──────────────────────────────────────────────────────────────────────────────
# Cadastro de webhooks
# ──────────────────────────────────────────────────────────────────────────────


@router.post("/register")
async def register_webhook(
    payload: dict[str, Any] = Body(...),
    service: WebhookService = Depends(get_webhook_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    try:
        result = await service.register(payload)
    except Exception as exc:
        return exception_response(
            exc, operation="register_webhook", generic_message=REGISTER_FAILED, reporter=reporter
        )
    return result_response(
        result,
        operation="register_webhook",
        generic_message=REGISTER_FAILED,
        reporter=reporter,
        success_status=201,
    )


@router.get("")
async def list_webhooks(
    service: WebhookService = Depends(get_webhook_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    try:
        result = await service.list_all()
    except Exception as exc:
        return exception_response(
            exc, operation="list_webhooks", generic_message=LIST_FAILED, reporter=reporter
        )
    return result_response(
        result, operation="list_webhooks", generic_message=LIST_FAILED, reporter=reporter
    )


@router.get("/{webhook_id}")
async def get_webhook(
    webhook_id: str,
    service: WebhookService = Depends(get_webhook_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    context = {"webhook_id": webhook_id}
    try:
        result = await service.get(webhook_id)
    except Exception as exc:
        return exception_response(
            exc,
            operation="get_webhook",
            generic_message=GET_FAILED,
            reporter=reporter,
            context=context,
        )
    return result_response(
        result,
        operation="get_webhook",
        generic_message=GET_FAILED,
        reporter=reporter,
        context=context,
    )


@router.put("/{webhook_id}")
async def update_webhook(
    webhook_id: str,
    payload: dict[str, Any] = Body(...),
    service: WebhookService = Depends(get_webhook_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    context = {"webhook_id": webhook_id}
    try:
        result = await service.update(webhook_id, payload)
    except Exception as exc:
        return exception_response(
            exc,
            operation="update_webhook",
            generic_message=UPDATE_FAILED,
            reporter=reporter,
            context=context,
        )
    return result_response(
        result,
        operation="update_webhook",
        generic_message=UPDATE_FAILED,
        reporter=reporter,
        context=context,
    )


@router.delete("/{webhook_id}")
async def delete_webhook(
    webhook_id: str,
    service: WebhookService = Depends(get_webhook_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    context = {"webhook_id": webhook_id}
    try:
        result = await service.delete(webhook_id)
    except Exception as exc:
        return exception_response(
            exc,
            operation="delete_webhook",
            generic_message=DELETE_FAILED,
            reporter=reporter,
            context=context,
        )
    return result_response(
        result,
        operation="delete_webhook",
        generic_message=DELETE_FAILED,
        reporter=reporter,
        context=context,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Recebimento de eventos
# ──────────────────────────────────────────────────────────────────────────────


def _acknowledge(
    *,
    success: bool,
    processed: bool,
    message: str,
    payload: Mapping[str, Any],
) -> JSONResponse:
    """Reconhecimento de entrega: status 200 independente do resultado."""
    body = {
        "success": success,
        "processed": processed,
        "message": message,
        "paymentId": extract_payment_id(dict(payload)),
        "event": _event_name(payload),
    }
    return JSONResponse(content=body, status_code=200)


def _token_matches(received: str | None, expected: str) -> bool:
    if not expected:
        return True
    if not received:
        return False
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))


def _event_name(payload: Mapping[str, Any]) -> str | None:
    """Nome do evento como texto; valores não textuais são convertidos."""
    event = payload.get("event")
    if event is None or isinstance(event, str):
        return event
    return str(event)


def _outcome(result: Any) -> tuple[bool, str]:
    """Lê (success, message) de WebhookProcessingResult ou de um mapping."""
    if isinstance(result, WebhookProcessingResult):
        result = result.to_dict()
    if isinstance(result, Mapping):
        return bool(result.get("success")), str(result.get("message") or "")
    return bool(getattr(result, "success", False)), str(getattr(result, "message", "") or "")


@router.post("/receive")
async def receive_webhook(
    request: Request,
    processor: WebhookProcessorProtocol = Depends(get_webhook_processor),
    settings: AsaasSettings = Depends(get_asaas_settings),
) -> JSONResponse:
    """Recebe evento do Asaas e sempre responde 200.

    Body de resposta: {success, processed, message, paymentId, event}.
    `processed` só é True quando o processamento reportou sucesso.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("webhook_invalid_json", extra={"channel": "asaas"})
        payload = None

    if not isinstance(payload, dict):
        record_webhook_event(None, processed=False)
        return _acknowledge(
            success=False, processed=False, message=INVALID_PAYLOAD_MESSAGE, payload={}
        )

    event = _event_name(payload)
    logger.info(
        "webhook_received",
        extra={
            "channel": "asaas",
            "event": event,
            "payment_id": extract_payment_id(payload),
            "payload": payload,
        },
    )

    if not _token_matches(request.headers.get(WEBHOOK_TOKEN_HEADER), settings.webhook_auth_token):
        logger.warning("webhook_token_mismatch", extra={"channel": "asaas", "event": event})
        record_webhook_event(event, processed=False)
        return _acknowledge(
            success=False, processed=False, message=INVALID_TOKEN_MESSAGE, payload=payload
        )

    try:
        result = await processor.process(payload)
    except Exception as exc:
        logger.exception(
            "webhook_processing_failed",
            extra={
                "channel": "asaas",
                "event": event,
                "payment_id": extract_payment_id(payload),
            },
        )
        record_webhook_event(event, processed=False)
        return _acknowledge(success=False, processed=False, message=str(exc), payload=payload)

    success, message = _outcome(result)
    record_webhook_event(event, processed=success)
    logger.info(
        "webhook_processed",
        extra={"channel": "asaas", "event": event, "processed": success},
    )
    return _acknowledge(success=success, processed=success, message=message, payload=payload)
