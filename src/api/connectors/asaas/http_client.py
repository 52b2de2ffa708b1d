"""Cliente HTTP para a API Asaas v3.

Comportamentos:
- Autenticação pelo header `access_token` (validado antes de usar)
- Um único httpx.AsyncClient por processo (pool de conexões)
- Retry com backoff apenas para GET (429, 5xx, timeout, erro de conexão);
  POST/PUT/DELETE nunca são repetidos
- Toda resposta vira GatewayOk ou GatewayErr; falhas de transporte viram
  AsaasTransportError
- Latência de cada tentativa registrada como métrica
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.asaas.asaas_logging import (
    log_asaas_error,
    log_success,
    log_transport_error,
)
from api.connectors.asaas.errors import (
    AsaasConfigurationError,
    AsaasTransportError,
    parse_asaas_error,
)
from app.domain.results import GatewayErr, GatewayOk, GatewayResult
from app.observability.metrics import record_gateway_latency

if TYPE_CHECKING:
    from config.settings import AsaasSettings

logger = logging.getLogger(__name__)

_RETRYABLE_METHODS = frozenset({"GET"})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 2
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 8.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


def _is_retryable_status(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


class AsaasHttpClient:
    """Cliente HTTP especializado para a API Asaas."""

    def __init__(
        self,
        settings: AsaasSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente Asaas.

        Args:
            settings: AsaasSettings (URL base, token, user agent)
            config: Configuração HTTP; default derivado das settings
            transport: Transport httpx alternativo (testes usam MockTransport)
        """
        self._settings = settings
        self._config = config or HttpClientConfig(
            timeout_seconds=settings.request_timeout_seconds,
            max_retries=settings.max_retries,
        )
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": settings.user_agent,
            **self._config.default_headers,
        }
        if settings.access_token:
            headers["access_token"] = settings.access_token
        self._client = httpx.AsyncClient(
            base_url=settings.api_base_url.rstrip("/") + "/",
            headers=headers,
            timeout=self._config.timeout_seconds,
            verify=self._config.verify_ssl,
            transport=transport,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
    ) -> GatewayResult:
        """Executa uma chamada ao Asaas.

        Args:
            method: Método HTTP
            endpoint: Recurso relativo à URL base (ex: "customers/cus_1")
            params: Query string
            json_body: Corpo JSON (POST/PUT)

        Returns:
            GatewayOk com o JSON retornado, ou GatewayErr com status e mensagem

        Raises:
            AsaasConfigurationError: access_token ausente
            AsaasTransportError: Rede/timeout após esgotar tentativas
        """
        if not self._settings.access_token or not self._settings.access_token.strip():
            logger.error("asaas_access_token_missing", extra={"endpoint": endpoint})
            raise AsaasConfigurationError(
                "access_token is required. Check ASAAS_ACCESS_TOKEN configuration."
            )

        method = method.upper()
        path = endpoint.lstrip("/")
        retries = self._config.max_retries if method in _RETRYABLE_METHODS else 0

        for attempt in range(retries + 1):
            started = time.perf_counter()
            try:
                response = await self._client.request(method, path, params=params, json=json_body)
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                record_gateway_latency(method, path, None, _elapsed_ms(started))
                log_transport_error(method, path, type(exc).__name__, attempt)
                if attempt >= retries:
                    raise AsaasTransportError(f"asaas_connection_error: {type(exc).__name__}") from exc
                await _backoff_sleep(attempt, self._config)
                continue
            except httpx.HTTPError as exc:
                record_gateway_latency(method, path, None, _elapsed_ms(started))
                log_transport_error(method, path, type(exc).__name__, attempt)
                raise AsaasTransportError(f"asaas_http_error: {type(exc).__name__}") from exc

            record_gateway_latency(method, path, response.status_code, _elapsed_ms(started))
            if _is_retryable_status(response.status_code) and attempt < retries:
                await _backoff_sleep(attempt, self._config)
                continue
            return self._to_result(response, method, path)

        raise AsaasTransportError("asaas_retry_exhausted")

    def _to_result(self, response: httpx.Response, method: str, endpoint: str) -> GatewayResult:
        """Converte response HTTP no resultado canônico."""
        if response.is_success:
            if not response.content:
                log_success(method, endpoint, response.status_code)
                return GatewayOk({}, status_code=response.status_code)
            try:
                data = response.json()
            except json.JSONDecodeError:
                logger.error("asaas_invalid_json", extra={"endpoint": endpoint})
                return GatewayErr(
                    status_code=502,
                    message="invalid JSON response from Asaas",
                    detail=f"{method} {endpoint}",
                    upstream=True,
                )
            log_success(method, endpoint, response.status_code)
            return GatewayOk(data, status_code=response.status_code)

        try:
            body = response.json()
        except json.JSONDecodeError:
            body = None
        api_error = parse_asaas_error(body, response.status_code, response.reason_phrase)
        log_asaas_error(api_error, method, endpoint)
        return GatewayErr(
            status_code=api_error.status_code,
            message=api_error.message,
            errors=api_error.errors,
            detail=f"{method} {endpoint}",
            upstream=True,
        )


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


async def _backoff_sleep(attempt: int, config: HttpClientConfig) -> None:
    backoff = min((2**attempt) * config.backoff_base_seconds, config.backoff_max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)


def create_asaas_http_client(
    settings: AsaasSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsaasHttpClient:
    """Factory para criar cliente Asaas com config padrão.

    Args:
        settings: AsaasSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional (testes)
    """
    # Import local para evitar dependência circular
    from config.settings import get_asaas_settings

    return AsaasHttpClient(settings or get_asaas_settings(), transport=transport)
