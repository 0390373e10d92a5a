"""Enums de domínio para a LINE Messaging API.

Os valores são os tokens serializados no JSON (nunca ordinais).
"""

from __future__ import annotations

from enum import StrEnum


class MessageType(StrEnum):
    """Tipos de mensagem outbound suportados."""

    TEXT = "text"
    STICKER = "sticker"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    LOCATION = "location"
    TEMPLATE = "template"


class ActionType(StrEnum):
    """Tipos de ação (botões de template, áreas de rich menu)."""

    URI = "uri"
    POSTBACK = "postback"
    MESSAGE = "message"
    DATETIME_PICKER = "datetimepicker"
    CAMERA = "camera"
    CAMERA_ROLL = "cameraRoll"
    LOCATION = "location"


class TemplateType(StrEnum):
    """Tipos de template."""

    CONFIRM = "confirm"
    BUTTONS = "buttons"
    CAROUSEL = "carousel"
    IMAGE_CAROUSEL = "image_carousel"


class DateTimePickerMode(StrEnum):
    """Modo do seletor de data/hora."""

    DATE = "date"
    TIME = "time"
    DATE_TIME = "datetime"


class WebhookEventType(StrEnum):
    """Tipos de evento recebidos via webhook."""

    MESSAGE = "message"
    POSTBACK = "postback"
    FOLLOW = "follow"
    UNFOLLOW = "unfollow"
    JOIN = "join"
    LEAVE = "leave"
    BEACON = "beacon"


class SourceType(StrEnum):
    """Origem de um evento de webhook."""

    USER = "user"
    GROUP = "group"
    ROOM = "room"
