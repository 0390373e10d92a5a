"""Serialização de ações."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from line_bot.constants import ActionType
from line_bot.payload_builders.base import compact, format_datetime

if TYPE_CHECKING:
    from collections.abc import Callable

    from line_bot.domain.actions import Action


def _build_uri(action: Any) -> dict[str, Any]:
    return {"uri": action.url}


def _build_postback(action: Any) -> dict[str, Any]:
    return {"data": action.data, "displayText": action.text}


def _build_message(action: Any) -> dict[str, Any]:
    return {"text": action.text}


def _build_datetime_picker(action: Any) -> dict[str, Any]:
    mode = action.mode
    return {
        "data": action.data,
        "mode": mode.value,
        "initial": format_datetime(action.initial, mode),
        "min": format_datetime(action.min, mode),
        "max": format_datetime(action.max, mode),
    }


def _build_label_only(action: Any) -> dict[str, Any]:
    return {}


_ACTION_BUILDERS: dict[ActionType, Callable[[Any], dict[str, Any]]] = {
    ActionType.URI: _build_uri,
    ActionType.POSTBACK: _build_postback,
    ActionType.MESSAGE: _build_message,
    ActionType.DATETIME_PICKER: _build_datetime_picker,
    ActionType.CAMERA: _build_label_only,
    ActionType.CAMERA_ROLL: _build_label_only,
    ActionType.LOCATION: _build_label_only,
}


def build_action_payload(action: Action) -> dict[str, Any]:
    """Constrói o objeto de ação conforme a API.

    Raises:
        ValueError: Se o tipo de ação não for suportado
    """
    builder = _ACTION_BUILDERS.get(action.type)
    if builder is None:
        raise ValueError(f"Tipo de ação não suportado: {action.type}")

    payload: dict[str, Any] = {"type": action.type.value, "label": action.label}
    payload.update(builder(action))
    return compact(payload)
