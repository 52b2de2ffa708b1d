"""Endpoints de subcontas Asaas.

Endpoints:
- POST /subaccount: cria subconta (ou devolve a existente para o CPF/CNPJ)
- GET /subaccount: lista subcontas
- GET /subaccount/bycpfcnpj/{cpf_cnpj}: busca subconta pelo documento
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from api.routes.asaas._responses import (
    exception_response,
    missing_param_response,
    result_response,
)
from app.bootstrap.dependencies import get_error_reporter, get_subaccount_service
from app.protocols import ErrorReporterProtocol
from app.services.asaas import TAX_ID_REQUIRED_MESSAGE, SubAccountService

router = APIRouter()

CREATE_FAILED = "Failed to create sub-account"
LIST_FAILED = "Failed to list sub-accounts"
FIND_FAILED = "Failed to find sub-account"


@router.post("")
async def create_subaccount(
    payload: dict[str, Any] = Body(...),
    service: SubAccountService = Depends(get_subaccount_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    """Cria subconta; falhas do serviço voltam com o status sugerido (ou 400)."""
    try:
        result = await service.create(payload)
    except Exception as exc:
        return exception_response(
            exc, operation="create_subaccount", generic_message=CREATE_FAILED, reporter=reporter
        )
    return result_response(
        result, operation="create_subaccount", generic_message=CREATE_FAILED, reporter=reporter
    )


@router.get("")
async def list_subaccounts(
    service: SubAccountService = Depends(get_subaccount_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    try:
        result = await service.list_all()
    except Exception as exc:
        return exception_response(
            exc, operation="list_subaccounts", generic_message=LIST_FAILED, reporter=reporter
        )
    return result_response(
        result, operation="list_subaccounts", generic_message=LIST_FAILED, reporter=reporter
    )


# Rota sem documento registrada para responder 400 em vez de 404 de rota
@router.get("/bycpfcnpj/")
@router.get("/bycpfcnpj/{cpf_cnpj}")
async def find_subaccount_by_cpf_cnpj(
    cpf_cnpj: str = "",
    service: SubAccountService = Depends(get_subaccount_service),
    reporter: ErrorReporterProtocol = Depends(get_error_reporter),
) -> JSONResponse:
    """Busca subconta pelo CPF/CNPJ.

    Returns:
        200 com a subconta, 400 se documento vazio, 404 se inexistente
    """
    if not cpf_cnpj or not cpf_cnpj.strip():
        return missing_param_response(
            TAX_ID_REQUIRED_MESSAGE, operation="find_subaccount", reporter=reporter
        )
    try:
        result = await service.find_by_cpf_cnpj(cpf_cnpj)
    except Exception as exc:
        return exception_response(
            exc,
            operation="find_subaccount",
            generic_message=FIND_FAILED,
            reporter=reporter,
            context={"cpfCnpj": cpf_cnpj},
        )
    return result_response(
        result,
        operation="find_subaccount",
        generic_message=FIND_FAILED,
        reporter=reporter,
        context={"cpfCnpj": cpf_cnpj},
    )
