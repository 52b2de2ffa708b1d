"""Filters de logging para injeção de contexto e mascaramento.

Filters são responsáveis por adicionar campos contextuais
aos logs sem que o chamador precise informá-los manualmente, e por
mascarar dados sensíveis passados via `extra`.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: integra_asaas)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.redaction import redact_sensitive

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos padrão de LogRecord; tudo fora disso veio de `extra`
_RESERVED_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime", "correlation_id", "service"}


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveDataFilter(logging.Filter):
    """Mascara dados de pagamento (cartão, token, CPF/CNPJ) nos campos `extra`.

    Strings livres da mensagem não são alteradas; apenas os campos
    estruturados anexados ao record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in list(vars(record).items()):
            if key in _RESERVED_RECORD_ATTRS:
                continue
            setattr(record, key, redact_sensitive({key: value})[key])
        return True
