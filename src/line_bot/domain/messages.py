"""Mensagens outbound (text, sticker, image, video, audio, location, template)."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from line_bot.constants import MessageType
from line_bot.domain.base import Validatable
from line_bot.domain.sources import to_carousel_template, to_image_carousel_template
from line_bot.domain.templates import Template
from line_bot.validators.fields import (
    check_required,
    require_int_at_least,
    require_not_none,
    require_number_range,
    require_text,
    require_url,
)
from line_bot.validators.limits import (
    MAX_ALT_TEXT_LENGTH,
    MAX_LOCATION_ADDRESS_LENGTH,
    MAX_LOCATION_TITLE_LENGTH,
    MAX_TEXT_LENGTH,
)
from line_bot.validators.results import ValidationIssue

if TYPE_CHECKING:
    from collections.abc import Iterator

    from line_bot.domain.sources import (
        CarouselTemplateSource,
        ImageCarouselTemplateSource,
    )


class SendMessage(Validatable):
    """Base das mensagens enviáveis; `type` é definido por cada subclasse."""

    type: ClassVar[MessageType]

    def _iter_required(self, *fields: str) -> Iterator[ValidationIssue]:
        for field in fields:
            issue = check_required(getattr(self, f"_{field}"), field)
            if issue:
                yield issue


class TextMessage(SendMessage):
    type = MessageType.TEXT

    def __init__(self, text: str | None = None) -> None:
        self._text: str | None = None
        if text is not None:
            self.text = text

    @property
    def text(self) -> str | None:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = require_text(value, "text", MAX_TEXT_LENGTH)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from self._iter_required("text")


class StickerMessage(SendMessage):
    """Sticker identificado por pacote + id (ambos não vazios)."""

    type = MessageType.STICKER

    def __init__(self, package_id: str | None = None, sticker_id: str | None = None) -> None:
        self._package_id: str | None = None
        self._sticker_id: str | None = None
        if package_id is not None:
            self.package_id = package_id
        if sticker_id is not None:
            self.sticker_id = sticker_id

    @property
    def package_id(self) -> str | None:
        return self._package_id

    @package_id.setter
    def package_id(self, value: str) -> None:
        self._package_id = require_text(value, "package_id", max_length=None)

    @property
    def sticker_id(self) -> str | None:
        return self._sticker_id

    @sticker_id.setter
    def sticker_id(self, value: str) -> None:
        self._sticker_id = require_text(value, "sticker_id", max_length=None)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from self._iter_required("package_id", "sticker_id")


class _PreviewedMediaMessage(SendMessage):
    """Mídia com URL original + URL de preview (https, até 1000 caracteres)."""

    def __init__(self, url: str | None = None, preview_url: str | None = None) -> None:
        self._url: str | None = None
        self._preview_url: str | None = None
        if url is not None:
            self.url = url
        if preview_url is not None:
            self.preview_url = preview_url

    @property
    def url(self) -> str | None:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = require_url(value, "url")

    @property
    def preview_url(self) -> str | None:
        return self._preview_url

    @preview_url.setter
    def preview_url(self, value: str) -> None:
        self._preview_url = require_url(value, "preview_url")

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from self._iter_required("url", "preview_url")


class ImageMessage(_PreviewedMediaMessage):
    type = MessageType.IMAGE


class VideoMessage(_PreviewedMediaMessage):
    type = MessageType.VIDEO


class AudioMessage(SendMessage):
    """Áudio: URL https + duração em milissegundos."""

    type = MessageType.AUDIO

    def __init__(self, url: str | None = None, duration: int | None = None) -> None:
        self._url: str | None = None
        self._duration: int | None = None
        if url is not None:
            self.url = url
        if duration is not None:
            self.duration = duration

    @property
    def url(self) -> str | None:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = require_url(value, "url")

    @property
    def duration(self) -> int | None:
        return self._duration

    @duration.setter
    def duration(self, value: int) -> None:
        self._duration = require_int_at_least(value, "duration", 1)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from self._iter_required("url", "duration")


class LocationMessage(SendMessage):
    type = MessageType.LOCATION

    def __init__(
        self,
        title: str | None = None,
        address: str | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> None:
        self._title: str | None = None
        self._address: str | None = None
        self._latitude: float | None = None
        self._longitude: float | None = None
        if title is not None:
            self.title = title
        if address is not None:
            self.address = address
        if latitude is not None:
            self.latitude = latitude
        if longitude is not None:
            self.longitude = longitude

    @property
    def title(self) -> str | None:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = require_text(value, "title", MAX_LOCATION_TITLE_LENGTH)

    @property
    def address(self) -> str | None:
        return self._address

    @address.setter
    def address(self, value: str) -> None:
        self._address = require_text(value, "address", MAX_LOCATION_ADDRESS_LENGTH)

    @property
    def latitude(self) -> float | None:
        return self._latitude

    @latitude.setter
    def latitude(self, value: float) -> None:
        self._latitude = require_number_range(value, "latitude", -90, 90)

    @property
    def longitude(self) -> float | None:
        return self._longitude

    @longitude.setter
    def longitude(self, value: float) -> None:
        self._longitude = require_number_range(value, "longitude", -180, 180)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from self._iter_required("title", "address", "latitude", "longitude")


class TemplateMessage(SendMessage):
    """Template + texto alternativo exibido em notificações."""

    type = MessageType.TEMPLATE

    def __init__(self, alt_text: str | None = None, template: Template | None = None) -> None:
        self._alt_text: str | None = None
        self._template: Template | None = None
        if alt_text is not None:
            self.alt_text = alt_text
        if template is not None:
            self.template = template

    @classmethod
    def from_carousel(cls, alt_text: str, source: CarouselTemplateSource) -> TemplateMessage:
        """Cria a mensagem a partir de qualquer objeto com `columns` de carousel."""
        return cls(alt_text, to_carousel_template(source))

    @classmethod
    def from_image_carousel(
        cls,
        alt_text: str,
        source: ImageCarouselTemplateSource,
    ) -> TemplateMessage:
        return cls(alt_text, to_image_carousel_template(source))

    @property
    def alt_text(self) -> str | None:
        return self._alt_text

    @alt_text.setter
    def alt_text(self, value: str) -> None:
        self._alt_text = require_text(value, "alt_text", MAX_ALT_TEXT_LENGTH)

    @property
    def template(self) -> Template | None:
        return self._template

    @template.setter
    def template(self, value: Template) -> None:
        template = require_not_none(value, "template")
        if not isinstance(template, Template):
            raise ValidationIssue("template", "The template is invalid.").to_field_error()
        self._template = template

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from self._iter_required("alt_text", "template")
        if self._template is not None:
            yield from self._template.iter_issues()


__all__ = [
    "AudioMessage",
    "ImageMessage",
    "LocationMessage",
    "SendMessage",
    "StickerMessage",
    "TemplateMessage",
    "TextMessage",
    "VideoMessage",
]
