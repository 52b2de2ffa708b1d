"""Mascaramento de dados sensíveis de pagamento em estruturas de log.

Cobre os campos que trafegam nos payloads do Asaas:
- creditCard.number / creditCard.ccv
- creditCardToken
- cpfCnpj (em qualquer nível, inclusive creditCardHolderInfo)
- remoteIp
- access_token / authToken

Determinístico: mesma entrada = mesma saída. Nunca altera a estrutura
original (trabalha sobre cópia).
"""

from __future__ import annotations

from typing import Any, Final

_TOKEN_MASK: Final[str] = "***TOKEN***"
_IP_MASK: Final[str] = "***.***.***.***"

_SECRET_KEYS: Final[frozenset[str]] = frozenset(
    {"access_token", "accessToken", "authToken", "apiKey", "creditCardToken"}
)


def mask_middle(value: object, visible_start: int = 3, visible_end: int = 2, mask: str = "*") -> str:
    """Mascara o meio de um valor mantendo início e fim visíveis.

    Exemplo:
        >>> mask_middle("12345678901")
        '123******01'
    """
    text = str(value)
    if len(text) <= visible_start + visible_end:
        return mask * len(text)
    hidden = len(text) - (visible_start + visible_end)
    return f"{text[:visible_start]}{mask * hidden}{text[len(text) - visible_end:]}"


def mask_card_number(number: object) -> str:
    """Mantém apenas os 4 primeiros e 4 últimos dígitos do cartão."""
    text = str(number or "")
    if len(text) < 8:
        return "*" * len(text)
    return f"{text[:4]}{'*' * (len(text) - 8)}{text[-4:]}"


def redact_sensitive(value: Any) -> Any:
    """Retorna cópia de `value` com dados sensíveis mascarados.

    Aceita dicts, listas e escalares. Escalares são devolvidos sem mudança.
    """
    if isinstance(value, dict):
        return {key: _redact_item(key, item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [redact_sensitive(item) for item in value]
    return value


def _redact_item(key: str, item: Any) -> Any:
    if item is None or item == "":
        return item
    if key in _SECRET_KEYS:
        return _TOKEN_MASK
    if key == "cpfCnpj":
        return mask_middle(item, 3, 2)
    if key == "remoteIp":
        return _IP_MASK
    if key == "creditCard" and isinstance(item, dict):
        card = dict(item)
        if card.get("number"):
            card["number"] = mask_card_number(card["number"])
        if card.get("ccv"):
            card["ccv"] = "***"
        return redact_sensitive(card)
    return redact_sensitive(item)
