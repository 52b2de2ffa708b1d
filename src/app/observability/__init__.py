"""Observabilidade: logs estruturados e correlation_id.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import LoggingErrorReporter, record_gateway_latency
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.error_reporter import LoggingErrorReporter
from app.observability.metrics import record_gateway_latency, record_webhook_event

__all__ = [
    "CORRELATION_ID_HEADER",
    "LoggingErrorReporter",
    "generate_correlation_id",
    "get_correlation_id",
    "record_gateway_latency",
    "record_webhook_event",
    "reset_correlation_id",
    "set_correlation_id",
]
