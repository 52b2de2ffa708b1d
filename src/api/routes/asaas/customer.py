"""Endpoints de clientes Asaas.

Endpoints:
- POST /customer: cria cliente
- GET /customer: lista clientes (filtros via query string)
- GET /customer/{customer_id}: busca cliente
- PUT /customer/{customer_id}: atualiza cliente
- DELETE /customer/{customer_id}: remove cliente

Falhas mantêm a mensagem genérica da operação; o status espelha o
Asaas (default 500) e a mensagem do Asaas vai em `error`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from api.routes.asaas._responses import (
    exception_response,
    missing_param_response,
    result_response,
)
from app.bootstrap.dependencies import get_error_reporter, get_gateway
from app.protocols import AsaasGatewayProtocol, ErrorReporterProtocol

if TYPE_CHECKING:
    from app.domain.results import GatewayResult

router = APIRouter()

CUSTOMER_FILTER_KEYS = (
    "offset",
    "limit",
    "name",
    "email",
    "cpfCnpj",
    "groupName",
    "externalReference",
)

CUSTOMER_ID_REQUIRED = "customer id is required"
CREATE_FAILED = "Failed to create customer"
LIST_FAILED = "Failed to list customers"
GET_FAILED = "Failed to get customer"
UPDATE_FAILED = "Failed to update customer"
DELETE_FAILED = "Failed to delete customer"


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


def _customer_result(
    result: GatewayResult,
    operation: str,
    generic_message: str,
    reporter: ErrorReporterProtocol,
    **context: Any,
) -> JSONResponse:
    return result_response(
        result,
        operation=operation,
        generic_message=generic_message,
        reporter=reporter,
        default_status=500,
        keep_generic_message=True,
        context=context or None,
    )


@router.post("")
async def create_customer(
    payload: dict[str, Any] = Body(...),
    gateway: AsaasGatewayProtocol = Depends(get_gateway),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    try:
        result = await gateway.create_customer(payload)
    except Exception as exc:
        return exception_response(
            exc, operation="create_customer", generic_message=CREATE_FAILED, reporter=reporter
        )
    return _customer_result(result, "create_customer", CREATE_FAILED, reporter)


@router.get("")
async def list_customers(
    request: Request,
    gateway: AsaasGatewayProtocol = Depends(get_gateway),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    """Lista clientes. Filtros são repassados ao Asaas sem paginação local."""
    filters = {key: request.query_params.get(key) for key in CUSTOMER_FILTER_KEYS}
    try:
        result = await gateway.list_customers(filters)
    except Exception as exc:
        return exception_response(
            exc, operation="list_customers", generic_message=LIST_FAILED, reporter=reporter
        )
    return _customer_result(result, "list_customers", LIST_FAILED, reporter)


@router.get("/{customer_id}")
async def get_customer(
    customer_id: str,
    gateway: AsaasGatewayProtocol = Depends(get_gateway),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    if _blank(customer_id):
        return missing_param_response(CUSTOMER_ID_REQUIRED, operation="get_customer", reporter=reporter)
    try:
        result = await gateway.get_customer(customer_id)
    except Exception as exc:
        return exception_response(
            exc,
            operation="get_customer",
            generic_message=GET_FAILED,
            reporter=reporter,
            context={"customer_id": customer_id},
        )
    return _customer_result(result, "get_customer", GET_FAILED, reporter, customer_id=customer_id)


@router.put("/{customer_id}")
async def update_customer(
    customer_id: str,
    payload: dict[str, Any] = Body(...),
    gateway: AsaasGatewayProtocol = Depends(get_gateway),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    """Atualiza cliente. Not found não tem tratamento especial: o status espelha o Asaas."""
    if _blank(customer_id):
        return missing_param_response(
            CUSTOMER_ID_REQUIRED, operation="update_customer", reporter=reporter
        )
    try:
        result = await gateway.update_customer(customer_id, payload)
    except Exception as exc:
        return exception_response(
            exc,
            operation="update_customer",
            generic_message=UPDATE_FAILED,
            reporter=reporter,
            context={"customer_id": customer_id},
        )
    return _customer_result(
        result, "update_customer", UPDATE_FAILED, reporter, customer_id=customer_id
    )


@router.delete("/{customer_id}")
async def delete_customer(
    customer_id: str,
    gateway: AsaasGatewayProtocol = Depends(get_gateway),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    if _blank(customer_id):
        return missing_param_response(
            CUSTOMER_ID_REQUIRED, operation="delete_customer", reporter=reporter
        )
    try:
        result = await gateway.delete_customer(customer_id)
    except Exception as exc:
        return exception_response(
            exc,
            operation="delete_customer",
            generic_message=DELETE_FAILED,
            reporter=reporter,
            context={"customer_id": customer_id},
        )
    return _customer_result(
        result, "delete_customer", DELETE_FAILED, reporter, customer_id=customer_id
    )
