"""Serialização de templates e colunas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from line_bot.constants import TemplateType
from line_bot.payload_builders.actions import build_action_payload
from line_bot.payload_builders.base import compact

if TYPE_CHECKING:
    from collections.abc import Callable

    from line_bot.domain.templates import CarouselColumn, ImageCarouselColumn, Template


def _build_actions(entity: Any) -> list[dict[str, Any]]:
    return [build_action_payload(action) for action in entity.actions]


def _build_confirm(template: Any) -> dict[str, Any]:
    return {"text": template.text, "actions": _build_actions(template)}


def _build_buttons(template: Any) -> dict[str, Any]:
    return {
        "thumbnailImageUrl": template.thumbnail_image_url,
        "title": template.title,
        "text": template.text,
        "actions": _build_actions(template),
    }


def _build_carousel_column(column: CarouselColumn) -> dict[str, Any]:
    return compact({
        "thumbnailImageUrl": column.thumbnail_image_url,
        "title": column.title,
        "text": column.text,
        "actions": _build_actions(column),
    })


def _build_carousel(template: Any) -> dict[str, Any]:
    return {"columns": [_build_carousel_column(column) for column in template.columns]}


def _build_image_carousel_column(column: ImageCarouselColumn) -> dict[str, Any]:
    return {
        "imageUrl": column.image_url,
        "action": build_action_payload(column.action),
    }


def _build_image_carousel(template: Any) -> dict[str, Any]:
    return {"columns": [_build_image_carousel_column(column) for column in template.columns]}


_TEMPLATE_BUILDERS: dict[TemplateType, Callable[[Any], dict[str, Any]]] = {
    TemplateType.CONFIRM: _build_confirm,
    TemplateType.BUTTONS: _build_buttons,
    TemplateType.CAROUSEL: _build_carousel,
    TemplateType.IMAGE_CAROUSEL: _build_image_carousel,
}


def build_template_payload(template: Template) -> dict[str, Any]:
    """Constrói o objeto `template` de uma TemplateMessage.

    Raises:
        ValueError: Se o tipo de template não for suportado
    """
    builder = _TEMPLATE_BUILDERS.get(template.type)
    if builder is None:
        raise ValueError(f"Tipo de template não suportado: {template.type}")

    payload: dict[str, Any] = {"type": template.type.value}
    payload.update(builder(template))
    return compact(payload)
