"""Helpers de logging para a API Asaas (sem tokens nem payloads)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import AsaasApiError

logger = logging.getLogger(__name__)


def log_asaas_error(api_error: AsaasApiError, method: str, endpoint: str) -> None:
    """Loga erro do Asaas sem expor dados sensíveis."""
    logger.warning(
        "asaas_request_failed",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": api_error.status_code,
            "error_codes": api_error.codes,
        },
    )


def log_success(method: str, endpoint: str, status_code: int) -> None:
    logger.debug(
        "asaas_request_succeeded",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )


def log_transport_error(method: str, endpoint: str, error_type: str, attempt: int) -> None:
    logger.warning(
        "asaas_transport_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "error_type": error_type,
            "attempt": attempt,
        },
    )
