"""Agregador de settings do SDK."""

from __future__ import annotations

from line_bot.config.settings.line import (
    LINE_API_BASE_URL,
    LineSettings,
    get_line_settings,
)

__all__ = [
    "LINE_API_BASE_URL",
    "LineSettings",
    "get_line_settings",
]
