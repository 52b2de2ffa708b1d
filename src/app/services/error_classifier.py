"""Classificador de falhas do gateway Asaas.

Transforma uma exceção (transporte, autenticação, bug) ou um GatewayErr em
um triplo estável (status HTTP, mensagem, detalhe):

- status: vem do upstream quando houver (exc.response.status,
  exc.response.status_code ou exc.status_code); senão o default
- mensagem: para exceções, sempre a mensagem genérica da operação
  (ex.: "Failed to update customer"); o texto cru vai em `error`
- status fora de 400..599 nunca é repassado ao cliente
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.results import GatewayErr

DEFAULT_EXCEPTION_STATUS = 500
DEFAULT_RESULT_STATUS = 400

_MIN_ERROR_STATUS = 400
_MAX_ERROR_STATUS = 599


@dataclass(frozen=True, slots=True)
class ClassifiedError:
    """Falha pronta para virar envelope.

    `expose_status` indica que o status vai também no corpo (falhas
    reportadas pelo Asaas, repassadas como vieram).
    """

    status_code: int
    message: str
    error: str | None = None
    detail: str | None = None
    expose_status: bool = False


def safe_error_status(candidate: Any, default: int) -> int:
    """Aceita apenas inteiros entre 400 e 599; caso contrário devolve `default`."""
    if isinstance(candidate, bool):
        return default
    try:
        status = int(candidate)
    except (TypeError, ValueError):
        return default
    if _MIN_ERROR_STATUS <= status <= _MAX_ERROR_STATUS:
        return status
    return default


def extract_upstream_status(exc: BaseException) -> Any:
    """Procura status HTTP do upstream carregado pela exceção."""
    response = getattr(exc, "response", None)
    if response is not None:
        for attr in ("status", "status_code"):
            value = getattr(response, attr, None)
            if value is not None:
                return value
    return getattr(exc, "status_code", None)


def classify_exception(
    exc: BaseException,
    generic_message: str,
    *,
    default_status: int = DEFAULT_EXCEPTION_STATUS,
) -> ClassifiedError:
    """Classifica exceção mantendo a mensagem genérica da operação."""
    return ClassifiedError(
        status_code=safe_error_status(extract_upstream_status(exc), default_status),
        message=generic_message,
        error=str(exc) or type(exc).__name__,
        detail=type(exc).__name__,
    )


def classify_gateway_error(
    result: GatewayErr,
    generic_message: str,
    *,
    default_status: int = DEFAULT_RESULT_STATUS,
    keep_generic_message: bool = False,
) -> ClassifiedError:
    """Classifica GatewayErr.

    Por padrão usa a mensagem do resultado. Com `keep_generic_message`, o
    resultado é tratado como uma exceção: mensagem genérica da operação e
    mensagem do Asaas em `error`.
    """
    status = safe_error_status(result.status_code, default_status)
    if keep_generic_message:
        return ClassifiedError(
            status_code=status,
            message=generic_message,
            error=result.message or None,
            detail=result.detail,
        )
    return ClassifiedError(
        status_code=status,
        message=result.message or generic_message,
        detail=result.detail,
        expose_status=result.upstream,
    )
