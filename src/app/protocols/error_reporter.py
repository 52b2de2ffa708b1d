"""Contrato de reporte de falhas por operação.

Injetado em cada handler (FastAPI Depends) para que as rotas não dependam
de logging global e possam ser testadas isoladamente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class ErrorReporterProtocol(Protocol):
    """Recebe toda falha classificada antes de a resposta ser montada."""

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
        """Registra a falha. Nunca deve propagar exceção."""
        ...
