"""Normalizador de respostas para o envelope uniforme.

Regras:
- GatewayOk(data) -> {success: true, data}
- valor que já é envelope ({success, data}) -> devolvido sem alteração
- qualquer outro valor cru -> {success: true, data: valor}
- falha classificada -> {success: false, message, error?, status?}

Funções puras, sem efeitos colaterais.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.envelope import ResponseEnvelope, as_envelope
from app.domain.results import GatewayOk

if TYPE_CHECKING:
    from app.services.error_classifier import ClassifiedError


def normalize_success(value: object) -> ResponseEnvelope:
    """Envelopa um resultado de sucesso sem duplo aninhamento."""
    if isinstance(value, GatewayOk):
        value = value.data
    existing = as_envelope(value)
    if existing is not None:
        return existing
    return ResponseEnvelope.ok(value)


def normalize_failure(failure: ClassifiedError) -> ResponseEnvelope:
    """Envelopa falha já classificada."""
    status = failure.status_code if failure.expose_status else None
    return ResponseEnvelope.fail(failure.message, error=failure.error, status=status)
