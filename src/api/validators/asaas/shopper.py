"""Validação de assinatura de shopper."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.validators.asaas._common import is_positive_number, missing_fields
from api.validators.asaas.errors import PayloadValidationError
from api.validators.asaas.limits import SHOPPER_REQUIRED_FIELDS

MISSING_SHOPPER_FIELDS_MESSAGE = "Missing required fields: customer, billingType, or value"


def validate_shopper_subscription(payload: Mapping[str, Any]) -> None:
    """Exige customer, billingType e value.

    `value` zerado, negativo ou não numérico conta como ausente.

    Raises:
        PayloadValidationError: Com mensagem única citando os três campos
    """
    if missing_fields(payload, SHOPPER_REQUIRED_FIELDS) or not is_positive_number(
        payload.get("value")
    ):
        raise PayloadValidationError(MISSING_SHOPPER_FIELDS_MESSAGE)
