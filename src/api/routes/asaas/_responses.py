"""Montagem de respostas HTTP a partir de resultados do gateway.

Toda falha passa pelo reporter injetado antes de virar resposta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi.responses import JSONResponse

from app.domain.envelope import ResponseEnvelope
from app.domain.results import GatewayErr
from app.services.error_classifier import (
    DEFAULT_RESULT_STATUS,
    classify_exception,
    classify_gateway_error,
)
from app.services.response_normalizer import normalize_failure, normalize_success

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.results import GatewayResult
    from app.protocols import ErrorReporterProtocol
    from app.services.error_classifier import ClassifiedError


def envelope_response(envelope: ResponseEnvelope, status_code: int) -> JSONResponse:
    return JSONResponse(content=envelope.to_content(), status_code=status_code)


def success_response(value: object, status_code: int = 200) -> JSONResponse:
    return envelope_response(normalize_success(value), status_code)


def _report_and_render(
    classified: ClassifiedError,
    *,
    operation: str,
    reporter: ErrorReporterProtocol,
    error: BaseException | None = None,
    context: Mapping[str, Any] | None = None,
) -> JSONResponse:
    reporter.report(
        operation,
        status_code=classified.status_code,
        message=classified.message,
        detail=classified.detail,
        error=error,
        context=context,
    )
    return envelope_response(normalize_failure(classified), classified.status_code)


def missing_param_response(
    message: str,
    *,
    operation: str,
    reporter: ErrorReporterProtocol,
    context: Mapping[str, Any] | None = None,
) -> JSONResponse:
    """400 para parâmetro obrigatório ausente (gateway não é chamado)."""
    reporter.report(operation, status_code=400, message=message, context=context)
    return envelope_response(ResponseEnvelope.fail(message), 400)


def exception_response(
    exc: Exception,
    *,
    operation: str,
    generic_message: str,
    reporter: ErrorReporterProtocol,
    context: Mapping[str, Any] | None = None,
) -> JSONResponse:
    classified = classify_exception(exc, generic_message)
    return _report_and_render(
        classified, operation=operation, reporter=reporter, error=exc, context=context
    )


def result_response(
    result: GatewayResult,
    *,
    operation: str,
    generic_message: str,
    reporter: ErrorReporterProtocol,
    success_status: int = 200,
    default_status: int = DEFAULT_RESULT_STATUS,
    keep_generic_message: bool = False,
    context: Mapping[str, Any] | None = None,
) -> JSONResponse:
    """Sucesso vira envelope; GatewayErr é classificado e reportado."""
    if not isinstance(result, GatewayErr):
        return success_response(result, success_status)

    classified = classify_gateway_error(
        result,
        generic_message,
        default_status=default_status,
        keep_generic_message=keep_generic_message,
    )
    return _report_and_render(classified, operation=operation, reporter=reporter, context=context)
