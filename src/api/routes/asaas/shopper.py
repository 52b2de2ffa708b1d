"""Endpoint de assinatura de shopper.

- POST /shoppers/subscription: exige customer, billingType e value;
  responde 201 com a assinatura criada
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from api.routes.asaas._responses import exception_response, result_response
from app.bootstrap.dependencies import get_error_reporter, get_shopper_service
from app.protocols import ErrorReporterProtocol
from app.services.asaas import ShopperSubscriptionService

router = APIRouter()

CREATE_FAILED = "Failed to create subscription"


@router.post("/subscription")
async def create_shopper_subscription(
    payload: dict[str, Any] = Body(...),
    service: ShopperSubscriptionService = Depends(get_shopper_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    try:
        result = await service.create(payload)
    except Exception as exc:
        return exception_response(
            exc,
            operation="create_shopper_subscription",
            generic_message=CREATE_FAILED,
            reporter=reporter,
        )
    return result_response(
        result,
        operation="create_shopper_subscription",
        generic_message=CREATE_FAILED,
        reporter=reporter,
        success_status=201,
    )
