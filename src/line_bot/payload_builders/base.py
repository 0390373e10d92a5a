"""Contrato e helpers comuns dos builders de payload."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from line_bot.constants import DateTimePickerMode

if TYPE_CHECKING:
    from datetime import datetime

    from line_bot.domain.messages import SendMessage

# Formato aceito pela plataforma para cada modo do datetimepicker
DATETIME_FORMATS: dict[DateTimePickerMode, str] = {
    DateTimePickerMode.DATE: "%Y-%m-%d",
    DateTimePickerMode.TIME: "%H:%M",
    DateTimePickerMode.DATE_TIME: "%Y-%m-%dT%H:%M",
}


class PayloadBuilder(Protocol):
    """Contrato de um builder de mensagem."""

    def build(self, message: SendMessage) -> dict[str, Any]: ...


def format_datetime(value: datetime | None, mode: DateTimePickerMode) -> str | None:
    if value is None:
        return None
    return value.strftime(DATETIME_FORMATS[mode])


def compact(payload: dict[str, Any]) -> dict[str, Any]:
    """Remove chaves opcionais sem valor (a API rejeita null em vários campos)."""
    return {key: value for key, value in payload.items() if value is not None}
