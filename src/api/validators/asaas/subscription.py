"""Validadores de assinatura (criação e atualização)."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from api.validators.asaas._common import is_blank, is_positive_number, missing_fields
from api.validators.asaas.errors import PayloadValidationError
from api.validators.asaas.limits import (
    MAX_DESCRIPTION_LENGTH,
    SUBSCRIPTION_REQUIRED_FIELDS,
    VALID_CYCLES,
)

_DATE_FIELDS = ("nextDueDate", "endDate")


def _is_iso_date(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        date.fromisoformat(value[:10])
    except ValueError:
        return False
    return True


def _validate_optional_fields(payload: Mapping[str, Any]) -> None:
    if "value" in payload and not is_positive_number(payload["value"]):
        raise PayloadValidationError("value must be a positive number", field="value")

    cycle = payload.get("cycle")
    if cycle is not None and cycle not in VALID_CYCLES:
        allowed = ", ".join(sorted(VALID_CYCLES))
        raise PayloadValidationError(f"cycle must be one of: {allowed}", field="cycle")

    for name in _DATE_FIELDS:
        raw = payload.get(name)
        if raw is not None and not _is_iso_date(raw):
            raise PayloadValidationError(f"{name} must be a date in YYYY-MM-DD format", field=name)

    max_payments = payload.get("maxPayments")
    if max_payments is not None and not (
        isinstance(max_payments, int) and not isinstance(max_payments, bool) and max_payments > 0
    ):
        raise PayloadValidationError("maxPayments must be a positive integer", field="maxPayments")

    description = payload.get("description")
    if description is not None and len(str(description)) > MAX_DESCRIPTION_LENGTH:
        raise PayloadValidationError(
            f"description exceeds maximum length of {MAX_DESCRIPTION_LENGTH} characters",
            field="description",
        )


def validate_subscription_create(payload: Mapping[str, Any]) -> None:
    """Valida payload de criação de assinatura.

    Raises:
        PayloadValidationError: Campos obrigatórios ausentes ou valores inválidos
    """
    missing = missing_fields(payload, SUBSCRIPTION_REQUIRED_FIELDS)
    if missing:
        raise PayloadValidationError(f"Missing required fields: {', '.join(missing)}")
    _validate_optional_fields(payload)


def validate_subscription_update(payload: Mapping[str, Any]) -> None:
    """Valida payload de atualização (parcial).

    O cliente da assinatura não pode ser trocado.
    """
    if not payload:
        raise PayloadValidationError("update payload must not be empty")
    if not is_blank(payload.get("customer")):
        raise PayloadValidationError("customer cannot be changed on a subscription", field="customer")
    _validate_optional_fields(payload)
