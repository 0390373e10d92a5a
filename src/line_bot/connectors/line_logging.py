"""Helpers de logging para a LINE Messaging API (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .line_errors import LineApiError

logger = logging.getLogger(__name__)


def log_line_error(
    line_error: LineApiError,
    method: str,
    endpoint: str,
    request_id: str | None = None,
) -> None:
    """Loga erro da API sem expor tokens, ids de usuário ou conteúdo."""
    logger.warning(
        "Erro da LINE Messaging API",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": line_error.status_code,
            "is_permanent": line_error.is_permanent,
            "correlation_id": request_id,
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
    request_id: str | None = None,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Chamada LINE bem-sucedida",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
            "correlation_id": request_id,
        },
    )
