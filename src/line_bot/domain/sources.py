"""Conversão de containers polimórficos para os tipos concretos.

Qualquer objeto que satisfaça os protocolos abaixo pode ser convertido;
o resultado é sempre um novo template concreto com colunas próprias, mesmo
quando a origem já é um template ou coluna do SDK. As ações são
compartilhadas com a origem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from line_bot.domain.templates import (
    CarouselColumn,
    CarouselTemplate,
    ImageCarouselColumn,
    ImageCarouselTemplate,
)
from line_bot.errors import InvalidStateError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from line_bot.domain.actions import Action


class CarouselColumnSource(Protocol):
    @property
    def text(self) -> str | None: ...

    @property
    def title(self) -> str | None: ...

    @property
    def thumbnail_image_url(self) -> str | None: ...

    @property
    def actions(self) -> Sequence[Action] | None: ...


class CarouselTemplateSource(Protocol):
    @property
    def columns(self) -> Sequence[CarouselColumnSource] | None: ...


class ImageCarouselColumnSource(Protocol):
    @property
    def image_url(self) -> str | None: ...

    @property
    def action(self) -> Action | None: ...


class ImageCarouselTemplateSource(Protocol):
    @property
    def columns(self) -> Sequence[ImageCarouselColumnSource] | None: ...


def to_carousel_column(source: CarouselColumnSource | None) -> CarouselColumn:
    """Copia uma coluna; campos passam pelos setters (InvalidFieldError)."""
    if source is None:
        raise InvalidStateError("The column cannot be null.", field="columns")
    column = CarouselColumn()
    if source.text is not None:
        column.text = source.text
    column.title = source.title
    column.thumbnail_image_url = source.thumbnail_image_url
    if source.actions is not None:
        column.actions = source.actions
    return column


def to_carousel_template(source: CarouselTemplateSource | None) -> CarouselTemplate:
    """Converte para CarouselTemplate.

    Raises:
        InvalidStateError: Se o template ou suas colunas forem None
    """
    if source is None:
        raise InvalidStateError("The template cannot be null.", field="template")
    if source.columns is None:
        raise InvalidStateError("The columns cannot be null.", field="columns")

    return CarouselTemplate([to_carousel_column(column) for column in source.columns])


def to_image_carousel_column(
    source: ImageCarouselColumnSource | None,
) -> ImageCarouselColumn:
    if source is None:
        raise InvalidStateError("The column cannot be null.", field="columns")
    column = ImageCarouselColumn()
    if source.image_url is not None:
        column.image_url = source.image_url
    if source.action is not None:
        column.action = source.action
    return column


def to_image_carousel_template(
    source: ImageCarouselTemplateSource | None,
) -> ImageCarouselTemplate:
    """Converte para ImageCarouselTemplate (mesmas regras do carousel)."""
    if source is None:
        raise InvalidStateError("The template cannot be null.", field="template")
    if source.columns is None:
        raise InvalidStateError("The columns cannot be null.", field="columns")

    return ImageCarouselTemplate(
        [to_image_carousel_column(column) for column in source.columns]
    )


__all__ = [
    "CarouselColumnSource",
    "CarouselTemplateSource",
    "ImageCarouselColumnSource",
    "ImageCarouselTemplateSource",
    "to_carousel_column",
    "to_carousel_template",
    "to_image_carousel_column",
    "to_image_carousel_template",
]
