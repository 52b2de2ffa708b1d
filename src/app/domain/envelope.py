"""Envelope uniforme de resposta da API.

Formato: {success, data?, message?, error?, status?}

Invariantes:
- success=True  ⇒ `data` presente e `error` ausente
- success=False ⇒ `message` presente
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator


class ResponseEnvelope(BaseModel):
    """Envelope retornado por todas as rotas (exceto o recebimento de webhook)."""

    # Campos extras são preservados para que envelopes já prontos passem intactos
    model_config = ConfigDict(extra="allow")

    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None
    status: int | None = None

    @model_validator(mode="after")
    def _check_invariants(self) -> ResponseEnvelope:
        if self.success:
            if "data" not in self.model_fields_set:
                raise ValueError("successful envelope requires data")
            if self.error is not None:
                raise ValueError("successful envelope must not carry error")
        elif not self.message:
            raise ValueError("failed envelope requires message")
        return self

    @classmethod
    def ok(cls, data: Any, message: str | None = None) -> ResponseEnvelope:
        if message is None:
            return cls(success=True, data=data)
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(
        cls,
        message: str,
        *,
        error: str | None = None,
        status: int | None = None,
    ) -> ResponseEnvelope:
        fields: dict[str, Any] = {"success": False, "message": message}
        if error is not None:
            fields["error"] = error
        if status is not None:
            fields["status"] = status
        return cls(**fields)

    def to_content(self) -> dict[str, Any]:
        """Serializa apenas os campos definidos (sem chaves `None` implícitas)."""
        return self.model_dump(mode="json", exclude_unset=True)


def as_envelope(value: object) -> ResponseEnvelope | None:
    """Retorna `value` como envelope se já tiver esse formato, senão None.

    Reconhece instâncias de ResponseEnvelope e mappings com `success`
    booleano e chave `data` que respeitem os invariantes.
    """
    if isinstance(value, ResponseEnvelope):
        return value
    if not isinstance(value, Mapping):
        return None
    if not isinstance(value.get("success"), bool) or "data" not in value:
        return None
    try:
        return ResponseEnvelope.model_validate(dict(value))
    except ValidationError:
        return None
