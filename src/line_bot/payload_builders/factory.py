"""Factory para obter o builder correto por tipo de mensagem.

Toda mensagem é validada exatamente uma vez, imediatamente antes de ser
serializada; se a validação falhar nada é produzido.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from line_bot.constants import MessageType
from line_bot.payload_builders.messages import (
    AudioPayloadBuilder,
    ImagePayloadBuilder,
    LocationPayloadBuilder,
    StickerPayloadBuilder,
    TemplatePayloadBuilder,
    TextPayloadBuilder,
    VideoPayloadBuilder,
)
from line_bot.validators.limits import MAX_MESSAGES_PER_REQUEST, MAX_MULTICAST_RECIPIENTS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from line_bot.domain.messages import SendMessage
    from line_bot.payload_builders.base import PayloadBuilder

# Mapeamento de tipo de mensagem para builder
_BUILDERS: dict[MessageType, PayloadBuilder] = {
    MessageType.TEXT: TextPayloadBuilder(),
    MessageType.STICKER: StickerPayloadBuilder(),
    MessageType.IMAGE: ImagePayloadBuilder(),
    MessageType.VIDEO: VideoPayloadBuilder(),
    MessageType.AUDIO: AudioPayloadBuilder(),
    MessageType.LOCATION: LocationPayloadBuilder(),
    MessageType.TEMPLATE: TemplatePayloadBuilder(),
}


def get_payload_builder(message_type: MessageType) -> PayloadBuilder | None:
    """Retorna o builder para o tipo de mensagem.

    Args:
        message_type: Tipo de mensagem

    Returns:
        Builder apropriado ou None se não suportado
    """
    return _BUILDERS.get(message_type)


def build_message_payload(message: SendMessage) -> dict[str, Any]:
    """Valida e constrói o objeto de uma mensagem.

    Raises:
        InvalidStateError: Se a mensagem não estiver pronta para envio
        ValueError: Se tipo de mensagem não suportado
    """
    builder = _require_builder(message)
    message.validate()
    return _build(builder, message)


def build_messages_payload(messages: Sequence[SendMessage]) -> list[dict[str, Any]]:
    """Valida a quantidade (1 a 5) e constrói cada mensagem, em ordem."""
    if not messages:
        raise ValueError("ao menos uma mensagem é obrigatória")
    if len(messages) > MAX_MESSAGES_PER_REQUEST:
        raise ValueError(
            f"no máximo {MAX_MESSAGES_PER_REQUEST} mensagens por requisição"
        )
    builders = [_require_builder(message) for message in messages]
    # Valida tudo antes de construir qualquer payload
    for message in messages:
        message.validate()
    return [_build(builder, message) for builder, message in zip(builders, messages)]


def build_reply_payload(reply_token: str, messages: Sequence[SendMessage]) -> dict[str, Any]:
    if not reply_token or not reply_token.strip():
        raise ValueError("reply_token é obrigatório")
    return {"replyToken": reply_token, "messages": build_messages_payload(messages)}


def build_push_payload(to: str, messages: Sequence[SendMessage]) -> dict[str, Any]:
    if not to or not to.strip():
        raise ValueError("destinatário (to) é obrigatório")
    return {"to": to, "messages": build_messages_payload(messages)}


def build_multicast_payload(
    to: Sequence[str],
    messages: Sequence[SendMessage],
) -> dict[str, Any]:
    """Constrói o corpo de multicast (1 a 150 destinatários)."""
    recipients = list(to)
    if not recipients:
        raise ValueError("ao menos um destinatário é obrigatório")
    if len(recipients) > MAX_MULTICAST_RECIPIENTS:
        raise ValueError(
            f"no máximo {MAX_MULTICAST_RECIPIENTS} destinatários por multicast"
        )
    if any(not recipient or not recipient.strip() for recipient in recipients):
        raise ValueError("destinatários não podem ser vazios")
    return {"to": recipients, "messages": build_messages_payload(messages)}


def _require_builder(message: SendMessage) -> PayloadBuilder:
    builder = get_payload_builder(message.type)
    if builder is None:
        raise ValueError(f"Tipo de mensagem não suportado: {message.type}")
    return builder


def _build(builder: PayloadBuilder, message: SendMessage) -> dict[str, Any]:
    payload: dict[str, Any] = {"type": message.type.value}
    payload.update(builder.build(message))
    return payload
