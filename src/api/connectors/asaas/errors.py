"""Erros e helpers de parsing para a API Asaas v3."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class AsaasTransportError(Exception):
    """Falha de transporte ao falar com o Asaas (rede, timeout, DNS).

    Nunca carrega token ou payload. `status_code` fica None: o
    classificador de erros aplica o default (500).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AsaasConfigurationError(AsaasTransportError):
    """Cliente sem configuração mínima (ex: access_token ausente)."""


@dataclass(frozen=True)
class AsaasApiError:
    """Erro retornado pela API Asaas (corpo `{errors: [{code, description}]}`)."""

    status_code: int
    message: str
    errors: tuple[dict[str, Any], ...] = field(default_factory=tuple)

    @property
    def codes(self) -> list[str]:
        return [str(item.get("code")) for item in self.errors if item.get("code")]


def parse_asaas_error(
    response_data: Any,
    status_code: int,
    reason_phrase: str = "",
) -> AsaasApiError:
    """Extrai mensagem legível de um response de erro do Asaas.

    As descrições de `errors[]` são concatenadas com ", ". Sem elas, usa
    `message` do corpo, depois o reason phrase HTTP.

    Args:
        response_data: JSON decodificado (ou None se corpo inválido)
        status_code: Status HTTP do response
        reason_phrase: Reason phrase HTTP (ex: "Not Found")

    Returns:
        AsaasApiError com status e mensagem
    """
    errors: tuple[dict[str, Any], ...] = ()
    message = ""

    if isinstance(response_data, dict):
        raw_errors = response_data.get("errors")
        if isinstance(raw_errors, list):
            errors = tuple(item for item in raw_errors if isinstance(item, dict))
        descriptions = [str(item["description"]) for item in errors if item.get("description")]
        if descriptions:
            message = ", ".join(descriptions)
        elif isinstance(response_data.get("message"), str):
            message = response_data["message"]

    if not message:
        message = reason_phrase or f"Asaas request failed with status {status_code}"

    return AsaasApiError(status_code=status_code, message=message, errors=errors)
