"""Validação de cadastro de webhook."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.validators.asaas._common import is_blank
from api.validators.asaas.errors import PayloadValidationError


def validate_webhook_registration(payload: Mapping[str, Any]) -> None:
    """Exige `url` e uma lista não vazia de `events`.

    Raises:
        PayloadValidationError: Se algum dos campos estiver ausente/vazio
    """
    if is_blank(payload.get("url")):
        raise PayloadValidationError("url is required", field="url")

    events = payload.get("events")
    if not isinstance(events, list) or not events:
        raise PayloadValidationError("events must be a non-empty list", field="events")
