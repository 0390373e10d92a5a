"""Builders de payload por tipo de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from line_bot.payload_builders.templates import build_template_payload

if TYPE_CHECKING:
    from line_bot.domain.messages import (
        AudioMessage,
        ImageMessage,
        LocationMessage,
        StickerMessage,
        TemplateMessage,
        TextMessage,
        VideoMessage,
    )


class TextPayloadBuilder:
    """Builder para mensagens de texto simples."""

    def build(self, message: TextMessage) -> dict[str, Any]:
        return {"text": message.text}


class StickerPayloadBuilder:
    def build(self, message: StickerMessage) -> dict[str, Any]:
        return {"packageId": message.package_id, "stickerId": message.sticker_id}


class ImagePayloadBuilder:
    """Builder para imagem (URL original + preview)."""

    def build(self, message: ImageMessage) -> dict[str, Any]:
        return {
            "originalContentUrl": message.url,
            "previewImageUrl": message.preview_url,
        }


class VideoPayloadBuilder:
    """Builder para vídeo (URL original + imagem de preview)."""

    def build(self, message: VideoMessage) -> dict[str, Any]:
        return {
            "originalContentUrl": message.url,
            "previewImageUrl": message.preview_url,
        }


class AudioPayloadBuilder:
    def build(self, message: AudioMessage) -> dict[str, Any]:
        return {"originalContentUrl": message.url, "duration": message.duration}


class LocationPayloadBuilder:
    def build(self, message: LocationMessage) -> dict[str, Any]:
        return {
            "title": message.title,
            "address": message.address,
            "latitude": message.latitude,
            "longitude": message.longitude,
        }


class TemplatePayloadBuilder:
    """Builder para mensagens de template.

    Args:
        message: TemplateMessage já validada

    Returns:
        {"altText": ..., "template": {...}} conforme a API
    """

    def build(self, message: TemplateMessage) -> dict[str, Any]:
        return {
            "altText": message.alt_text,
            "template": build_template_payload(message.template),
        }
