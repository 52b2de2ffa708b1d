"""Validação de criação de subconta."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from api.validators.asaas._common import is_blank
from api.validators.asaas.errors import PayloadValidationError

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_subaccount_payload(payload: Mapping[str, Any]) -> None:
    """Valida nome e email da subconta.

    Raises:
        PayloadValidationError: Nome ausente, email ausente ou malformado
    """
    if is_blank(payload.get("name")):
        raise PayloadValidationError("name is required", field="name")

    email = payload.get("email")
    if is_blank(email):
        raise PayloadValidationError("email is required", field="email")
    if not isinstance(email, str) or not _EMAIL_PATTERN.match(email.strip()):
        raise PayloadValidationError("email is invalid", field="email")
