"""Modelos de eventos recebidos via webhook.

Os modelos ignoram campos desconhecidos (a plataforma adiciona campos novos
sem aviso) e aceitam tanto os nomes camelCase da API quanto snake_case.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from line_bot.constants import DateTimePickerMode, SourceType, WebhookEventType
from line_bot.payload_builders.base import DATETIME_FORMATS


class _EventModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class EventSource(_EventModel):
    """Origem do evento (usuário, grupo ou sala)."""

    type: SourceType
    user_id: str | None = Field(default=None, alias="userId")
    group_id: str | None = Field(default=None, alias="groupId")
    room_id: str | None = Field(default=None, alias="roomId")

    @property
    def sender_id(self) -> str | None:
        """Id usado para responder via push (grupo/sala têm prioridade)."""
        return self.group_id or self.room_id or self.user_id


class EventMessage(_EventModel):
    """Conteúdo de uma mensagem recebida; campos dependem de `type`."""

    id: str
    type: str
    text: str | None = None
    package_id: str | None = Field(default=None, alias="packageId")
    sticker_id: str | None = Field(default=None, alias="stickerId")
    title: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    duration: int | None = None
    file_name: str | None = Field(default=None, alias="fileName")
    file_size: int | None = Field(default=None, alias="fileSize")


class PostbackParams(_EventModel):
    """Valor escolhido em um datetimepicker (apenas um campo vem preenchido)."""

    date: str | None = None
    time: str | None = None
    datetime: str | None = None

    @property
    def mode(self) -> DateTimePickerMode | None:
        if self.datetime is not None:
            return DateTimePickerMode.DATE_TIME
        if self.date is not None:
            return DateTimePickerMode.DATE
        if self.time is not None:
            return DateTimePickerMode.TIME
        return None

    def to_datetime(self) -> dt.datetime | None:
        """Converte o valor escolhido, já normalizado pelo modo."""
        mode = self.mode
        if mode is None:
            return None
        raw = {
            DateTimePickerMode.DATE: self.date,
            DateTimePickerMode.TIME: self.time,
            DateTimePickerMode.DATE_TIME: self.datetime,
        }[mode]
        # a plataforma pode enviar "t" minúsculo no modo datetime
        parsed = dt.datetime.strptime(raw.replace("t", "T"), DATETIME_FORMATS[mode])
        if mode is DateTimePickerMode.TIME:
            return parsed.replace(year=1, month=1, day=1)
        return parsed


class Postback(_EventModel):
    data: str
    params: PostbackParams | None = None


class Beacon(_EventModel):
    hwid: str
    type: str
    dm: str | None = None


class WebhookEvent(_EventModel):
    """Evento base; tipos desconhecidos são parseados com este modelo."""

    type: str
    timestamp: int
    source: EventSource | None = None
    reply_token: str | None = Field(default=None, alias="replyToken")
    mode: str | None = None

    @property
    def occurred_at(self) -> dt.datetime:
        return dt.datetime.fromtimestamp(self.timestamp / 1000, tz=dt.timezone.utc)


class MessageEvent(WebhookEvent):
    message: EventMessage


class PostbackEvent(WebhookEvent):
    postback: Postback


class FollowEvent(WebhookEvent):
    pass


class UnfollowEvent(WebhookEvent):
    pass


class JoinEvent(WebhookEvent):
    pass


class LeaveEvent(WebhookEvent):
    pass


class BeaconEvent(WebhookEvent):
    beacon: Beacon


_EVENT_MODELS: dict[str, type[WebhookEvent]] = {
    WebhookEventType.MESSAGE: MessageEvent,
    WebhookEventType.POSTBACK: PostbackEvent,
    WebhookEventType.FOLLOW: FollowEvent,
    WebhookEventType.UNFOLLOW: UnfollowEvent,
    WebhookEventType.JOIN: JoinEvent,
    WebhookEventType.LEAVE: LeaveEvent,
    WebhookEventType.BEACON: BeaconEvent,
}


def parse_event(data: dict[str, Any]) -> WebhookEvent:
    """Escolhe o modelo pelo campo `type` e valida o evento."""
    model = _EVENT_MODELS.get(str(data.get("type")), WebhookEvent)
    return model.model_validate(data)


class WebhookPayload(_EventModel):
    """Corpo completo do webhook."""

    destination: str | None = None
    events: tuple[WebhookEvent, ...] = ()

    @field_validator("events", mode="before")
    @classmethod
    def _parse_events(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return value
        return tuple(
            parse_event(item) if isinstance(item, dict) else item for item in value
        )


class UserProfile(_EventModel):
    """Perfil retornado por GET /v2/bot/profile/{userId}."""

    user_id: str = Field(alias="userId")
    display_name: str = Field(alias="displayName")
    picture_url: str | None = Field(default=None, alias="pictureUrl")
    status_message: str | None = Field(default=None, alias="statusMessage")
    language: str | None = None


__all__ = [
    "Beacon",
    "BeaconEvent",
    "EventMessage",
    "EventSource",
    "FollowEvent",
    "JoinEvent",
    "LeaveEvent",
    "MessageEvent",
    "Postback",
    "PostbackEvent",
    "PostbackParams",
    "UnfollowEvent",
    "UserProfile",
    "WebhookEvent",
    "WebhookPayload",
    "parse_event",
]
