"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
posteriormente pelo sistema de logs (Cloud Logging, CloudWatch Insights...).

Métricas suportadas:
- Latência: tempo de cada chamada ao gateway Asaas por operação
- Webhook: contador de eventos recebidos por tipo e resultado

Uso:
    from app.observability.metrics import record_gateway_latency, record_webhook_event

    start = time.perf_counter()
    # ... chamada ao Asaas ...
    record_gateway_latency("GET", "customers", 200, (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_gateway_latency(
    method: str,
    endpoint: str,
    status_code: int | None,
    latency_ms: float,
) -> None:
    """Registra latência de uma chamada ao gateway.

    Args:
        method: Método HTTP (GET, POST, ...)
        endpoint: Recurso chamado (ex: "customers/{id}"), sem query string
        status_code: Status HTTP retornado (None se falha de transporte)
        latency_ms: Latência em milissegundos
    """
    logger.info(
        "metric_gateway_latency",
        extra={
            "metric_type": "latency",
            "component": "asaas_gateway",
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": get_correlation_id(),
        },
    )


def record_webhook_event(event: str | None, processed: bool) -> None:
    """Registra recebimento de webhook com o resultado do processamento.

    Args:
        event: Nome do evento Asaas (ex: "PAYMENT_CONFIRMED")
        processed: True se o processamento reportou sucesso
    """
    logger.info(
        "metric_webhook_event",
        extra={
            "metric_type": "counter",
            "component": "webhook_intake",
            "event": event or "unknown",
            "processed": processed,
            "correlation_id": get_correlation_id(),
        },
    )
