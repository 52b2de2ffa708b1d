"""Resultado canônico das chamadas ao gateway Asaas.

Toda operação do gateway (e dos serviços sobre ele) devolve exatamente
um de dois tipos:

- GatewayOk: chamada bem-sucedida, com o payload remoto em `data`
- GatewayErr: falha reportada pelo Asaas (ou validação local), com status
  HTTP sugerido e mensagem

Falhas de transporte (rede, timeout) não viram GatewayErr: são exceções
(AsaasTransportError) e passam pelo classificador de erros.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class GatewayOk:
    """Sucesso do gateway. `data` nunca é None (corpo vazio vira {})."""

    data: Any
    status_code: int = 200

    success: ClassVar[bool] = True

    def __post_init__(self) -> None:
        if self.data is None:
            object.__setattr__(self, "data", {})


@dataclass(frozen=True, slots=True)
class GatewayErr:
    """Falha com status sugerido e mensagem legível.

    Attributes:
        status_code: Status HTTP do Asaas (ou 400 para validação local)
        message: Mensagem legível (descrições do Asaas concatenadas)
        errors: Lista bruta `errors` do Asaas ({code, description})
        detail: Informação diagnóstica adicional
        upstream: True quando a falha veio de um response do Asaas
    """

    status_code: int
    message: str
    errors: tuple[dict[str, Any], ...] = field(default_factory=tuple)
    detail: str | None = None
    upstream: bool = False

    success: ClassVar[bool] = False


GatewayResult = GatewayOk | GatewayErr


def validation_failure(message: str) -> GatewayErr:
    """Atalho para erro de validação local (400)."""
    return GatewayErr(status_code=400, message=message)


def not_found(message: str) -> GatewayErr:
    """Atalho para recurso inexistente (404)."""
    return GatewayErr(status_code=404, message=message)
