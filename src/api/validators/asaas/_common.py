"""Helpers compartilhados pelos validadores."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def is_blank(value: Any) -> bool:
    """True para None, string vazia/só espaços, lista ou dict vazios."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def missing_fields(payload: Mapping[str, Any], required: tuple[str, ...]) -> list[str]:
    """Lista (em ordem) os campos obrigatórios ausentes ou vazios."""
    return [name for name in required if is_blank(payload.get(name))]


def is_positive_number(value: Any) -> bool:
    """True para número (ou string numérica) maior que zero; bool não conta."""
    if isinstance(value, bool):
        return False
    try:
        return float(value) > 0
    except (TypeError, ValueError):
        return False
