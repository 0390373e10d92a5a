"""Erros e helpers de parsing para a LINE Messaging API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LineApiError:
    """Erro retornado pela API.

    Corpo típico: {"message": "...", "details": [{"message": "...", "property": "..."}]}
    """

    status_code: int
    error_message: str
    details: tuple[str, ...] = field(default_factory=tuple)
    is_permanent: bool = True  # True se erro não é retentável


def is_permanent_error(status_code: int) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros transitórios: 429 (rate limit), 500+ (server errors)
    Demais 4xx são permanentes.
    """
    return status_code != 429 and status_code < 500


def parse_line_error(status_code: int, response_data: Any) -> LineApiError | None:
    """Extrai informações de erro do response.

    Args:
        status_code: Status HTTP da resposta
        response_data: JSON do response (dict ou qualquer outro valor)

    Returns:
        LineApiError se houver erro, None se sucesso
    """
    if status_code < 400:
        return None

    data = response_data if isinstance(response_data, dict) else {}
    details = tuple(
        _format_detail(detail)
        for detail in data.get("details") or ()
        if isinstance(detail, dict)
    )
    return LineApiError(
        status_code=status_code,
        error_message=str(data.get("message") or "Erro desconhecido"),
        details=details,
        is_permanent=is_permanent_error(status_code),
    )


def _format_detail(detail: dict[str, Any]) -> str:
    prop = detail.get("property")
    message = detail.get("message", "")
    return f"{prop}: {message}" if prop else str(message)
