"""Settings específicas da integração Asaas.

Configurações da API v3 do Asaas (gateway remoto) e do webhook de entrada.
Nomes legados (AS_URL, AS_TOKEN) continuam aceitos como fallback.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API Asaas
ASAAS_SANDBOX_URL: str = "https://api-sandbox.asaas.com/v3"
ASAAS_PRODUCTION_URL: str = "https://api.asaas.com/v3"
DEFAULT_USER_AGENT: str = "integra-asaas/1.0"


@dataclass(frozen=True)
class AsaasSettings:
    """Configurações do gateway Asaas.

    Attributes:
        api_base_url: URL base da API (inclui a versão, ex: .../v3)
        access_token: Chave de API enviada no header `access_token`
        request_timeout_seconds: Timeout por requisição HTTP
        max_retries: Tentativas extras para leituras (GET) com erro transitório
        webhook_auth_token: Token esperado no header `asaas-access-token`
            dos webhooks recebidos (vazio = não valida)
        user_agent: User-Agent enviado ao Asaas
    """

    api_base_url: str = ASAAS_SANDBOX_URL
    access_token: str = ""

    request_timeout_seconds: float = 30.0
    max_retries: int = 2

    webhook_auth_token: str = ""
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def is_sandbox(self) -> bool:
        """True quando apontando para o sandbox do Asaas."""
        return "sandbox" in self.api_base_url

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Asaas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url:
            errors.append("ASAAS_API_URL não configurado")
        elif not self.api_base_url.startswith(("http://", "https://")):
            errors.append("ASAAS_API_URL deve começar com http:// ou https://")

        if not self.access_token:
            errors.append("ASAAS_ACCESS_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("ASAAS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("ASAAS_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> AsaasSettings:
    """Carrega AsaasSettings a partir de variáveis de ambiente."""
    return AsaasSettings(
        api_base_url=os.getenv("ASAAS_API_URL", os.getenv("AS_URL", ASAAS_SANDBOX_URL)),
        access_token=os.getenv("ASAAS_ACCESS_TOKEN", os.getenv("AS_TOKEN", "")),
        request_timeout_seconds=float(os.getenv("ASAAS_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("ASAAS_MAX_RETRIES", "2")),
        webhook_auth_token=os.getenv("ASAAS_WEBHOOK_TOKEN", ""),
        user_agent=os.getenv("ASAAS_USER_AGENT", DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_asaas_settings() -> AsaasSettings:
    """Retorna instância cacheada de AsaasSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
