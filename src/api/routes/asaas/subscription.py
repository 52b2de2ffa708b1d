"""Endpoints de assinaturas Asaas.

Endpoints:
- GET /subscription: lista (filtros customer, billingType, offset, limit,
  externalReference)
- GET /subscription/customer/{customer_id}: lista por cliente
- GET /subscription/{subscription_id}: busca
- POST /subscription: cria (201)
- PUT /subscription/{subscription_id}: atualiza
- DELETE /subscription/{subscription_id}: remove

O status de falha vem do resultado do serviço (default 400).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from api.routes.asaas._responses import exception_response, result_response
from app.bootstrap.dependencies import get_error_reporter, get_subscription_service
from app.protocols import ErrorReporterProtocol
from app.services.asaas import SubscriptionService
from app.services.asaas.subscriptions import LIST_FILTER_KEYS

router = APIRouter()

CREATE_FAILED = "Failed to create subscription"
LIST_FAILED = "Failed to list subscriptions"
LIST_BY_CUSTOMER_FAILED = "Failed to list customer subscriptions"
GET_FAILED = "Failed to get subscription"
UPDATE_FAILED = "Failed to update subscription"
DELETE_FAILED = "Failed to delete subscription"


@router.get("")
async def list_subscriptions(
    request: Request,
    service: SubscriptionService = Depends(get_subscription_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    filters = {key: request.query_params.get(key) for key in LIST_FILTER_KEYS}
    try:
        result = await service.list_all(filters)
    except Exception as exc:
        return exception_response(
            exc, operation="list_subscriptions", generic_message=LIST_FAILED, reporter=reporter
        )
    return result_response(
        result, operation="list_subscriptions", generic_message=LIST_FAILED, reporter=reporter
    )


# Rota sem cliente registrada para responder 400 em vez de cair em /{subscription_id}
@router.get("/customer/")
@router.get("/customer/{customer_id}")
async def list_customer_subscriptions(
    customer_id: str = "",
    service: SubscriptionService = Depends(get_subscription_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    context = {"customer_id": customer_id}
    try:
        result = await service.list_by_customer(customer_id)
    except Exception as exc:
        return exception_response(
            exc,
            operation="list_customer_subscriptions",
            generic_message=LIST_BY_CUSTOMER_FAILED,
            reporter=reporter,
            context=context,
        )
    return result_response(
        result,
        operation="list_customer_subscriptions",
        generic_message=LIST_BY_CUSTOMER_FAILED,
        reporter=reporter,
        context=context,
    )


@router.get("/{subscription_id}")
async def get_subscription(
    subscription_id: str,
    service: SubscriptionService = Depends(get_subscription_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    context = {"subscription_id": subscription_id}
    try:
        result = await service.get(subscription_id)
    except Exception as exc:
        return exception_response(
            exc,
            operation="get_subscription",
            generic_message=GET_FAILED,
            reporter=reporter,
            context=context,
        )
    return result_response(
        result,
        operation="get_subscription",
        generic_message=GET_FAILED,
        reporter=reporter,
        context=context,
    )


@router.post("")
async def create_subscription(
    payload: dict[str, Any] = Body(...),
    service: SubscriptionService = Depends(get_subscription_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    try:
        result = await service.create(payload)
    except Exception as exc:
        return exception_response(
            exc, operation="create_subscription", generic_message=CREATE_FAILED, reporter=reporter
        )
    return result_response(
        result,
        operation="create_subscription",
        generic_message=CREATE_FAILED,
        reporter=reporter,
        success_status=201,
    )


@router.put("/{subscription_id}")
async def update_subscription(
    subscription_id: str,
    payload: dict[str, Any] = Body(...),
    service: SubscriptionService = Depends(get_subscription_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    context = {"subscription_id": subscription_id}
    try:
        result = await service.update(subscription_id, payload)
    except Exception as exc:
        return exception_response(
            exc,
            operation="update_subscription",
            generic_message=UPDATE_FAILED,
            reporter=reporter,
            context=context,
        )
    return result_response(
        result,
        operation="update_subscription",
        generic_message=UPDATE_FAILED,
        reporter=reporter,
        context=context,
    )


@router.delete("/{subscription_id}")
async def delete_subscription(
    subscription_id: str,
    service: SubscriptionService = Depends(get_subscription_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    context = {"subscription_id": subscription_id}
    try:
        result = await service.delete(subscription_id)
    except Exception as exc:
        return exception_response(
            exc,
            operation="delete_subscription",
            generic_message=DELETE_FAILED,
            reporter=reporter,
            context=context,
        )
    return result_response(
        result,
        operation="delete_subscription",
        generic_message=DELETE_FAILED,
        reporter=reporter,
        context=context,
    )
