"""Reporter de falhas baseado em logging estruturado.

Implementação padrão de ErrorReporterProtocol. Cada falha vira um log
`asaas_operation_failed` com operação, status e ids relevantes, para
correlacionar com os logs do Asaas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability.correlation import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Mapping

_default_logger = logging.getLogger(__name__)


class LoggingErrorReporter:
    """Reporta falhas via logger; falha de logging nunca é fatal."""

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _default_logger

    def report(
        self,
        operation: str,
        *,
        status_code: int,
        message: str,
        detail: str | None = None,
        error: BaseException | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        extra: dict[str, object] = {
            "operation": operation,
            "status_code": status_code,
            "result_message": message,
            "detail": detail,
            "correlation_id": get_correlation_id(),
        }
        if error is not None:
            extra["error_type"] = type(error).__name__
        if context:
            extra["context"] = dict(context)

        level = logging.ERROR if status_code >= 500 else logging.WARNING
        try:
            self._logger.log(level, "asaas_operation_failed", extra=extra)
        except Exception:  # noqa: BLE001 - reporter nunca derruba o request
            return
