"""Serialização de rich menus."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from line_bot.payload_builders.actions import build_action_payload

if TYPE_CHECKING:
    from line_bot.domain.rich_menu import RichMenu, RichMenuArea


def _build_area(area: RichMenuArea) -> dict[str, Any]:
    bounds = area.bounds
    return {
        "bounds": {
            "x": bounds.x,
            "y": bounds.y,
            "width": bounds.width,
            "height": bounds.height,
        },
        "action": build_action_payload(area.action),
    }


def build_rich_menu_payload(rich_menu: RichMenu) -> dict[str, Any]:
    """Valida e constrói o corpo de criação do rich menu.

    Raises:
        InvalidStateError: Se o rich menu não estiver pronto para envio
    """
    rich_menu.validate()
    return {
        "size": {"width": rich_menu.size.width, "height": rich_menu.size.height},
        "selected": rich_menu.selected,
        "name": rich_menu.name,
        "chatBarText": rich_menu.chat_bar_text,
        "areas": [_build_area(area) for area in rich_menu.areas],
    }
