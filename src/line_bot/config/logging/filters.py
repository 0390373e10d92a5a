"""Enriquecimento dos records de log do SDK.

Toda chamada à Messaging API devolve um header x-line-request-id; ele é o
correlation_id dos logs do conector. Fora dessas chamadas (ex: tratamento de
um webhook) o id vem de uma função fornecida pela aplicação.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributo usado pelo conector (extra={"correlation_id": ...})
CORRELATION_ATTR = "correlation_id"


class CorrelationIdFilter(logging.Filter):
    """Garante `correlation_id` e `service` em todo record.

    Prioridade do correlation_id:
    1. valor passado via `extra` (x-line-request-id nas chamadas à API)
    2. `correlation_id_getter()` da aplicação
    3. string vazia
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str | None] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self._getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, CORRELATION_ATTR, self._resolve(record))
        record.service = self.service_name
        return True

    def _resolve(self, record: logging.LogRecord) -> str:
        from_extra = getattr(record, CORRELATION_ATTR, None)
        if from_extra:
            return str(from_extra)
        if self._getter is not None:
            return self._getter() or ""
        return ""
