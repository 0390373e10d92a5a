"""Builders de payload: serialização para o formato JSON da LINE Messaging API.

Cada tipo de mensagem, template e ação tem seu próprio builder; os pontos
de entrada validam a entidade antes de construir o payload.
"""

from line_bot.payload_builders.actions import build_action_payload
from line_bot.payload_builders.base import PayloadBuilder, format_datetime
from line_bot.payload_builders.factory import (
    build_message_payload,
    build_messages_payload,
    build_multicast_payload,
    build_push_payload,
    build_reply_payload,
    get_payload_builder,
)
from line_bot.payload_builders.rich_menu import build_rich_menu_payload
from line_bot.payload_builders.templates import build_template_payload

__all__ = [
    "PayloadBuilder",
    "build_action_payload",
    "build_message_payload",
    "build_messages_payload",
    "build_multicast_payload",
    "build_push_payload",
    "build_reply_payload",
    "build_rich_menu_payload",
    "build_template_payload",
    "format_datetime",
    "get_payload_builder",
]
