"""Limites da LINE Messaging API aplicados pelos validadores."""

from __future__ import annotations

# Ações
MAX_ACTION_LABEL_LENGTH = 20
MAX_POSTBACK_DATA_LENGTH = 300
MAX_ACTION_TEXT_LENGTH = 300

# URLs
MAX_URL_LENGTH = 1000
MEDIA_URL_SCHEMES = frozenset({"https"})
ACTION_URL_SCHEMES = frozenset({"http", "https", "tel", "line"})

# Templates
MAX_CONFIRM_TEXT_LENGTH = 240
CONFIRM_ACTION_COUNT = 2
MAX_TEMPLATE_TITLE_LENGTH = 40
MAX_BUTTONS_TEXT_LENGTH = 160
MAX_BUTTONS_ACTIONS = 4
MAX_COLUMN_TEXT_LENGTH = 120
MAX_DECORATED_TEXT_LENGTH = 60
MAX_COLUMN_ACTIONS = 3
MAX_CAROUSEL_COLUMNS = 10

# Mensagens
MAX_TEXT_LENGTH = 2000
MAX_ALT_TEXT_LENGTH = 400
MAX_LOCATION_TITLE_LENGTH = 100
MAX_LOCATION_ADDRESS_LENGTH = 100
MAX_MESSAGES_PER_REQUEST = 5
MAX_MULTICAST_RECIPIENTS = 150

# Rich menu
MAX_RICH_MENU_NAME_LENGTH = 300
MAX_CHAT_BAR_TEXT_LENGTH = 14
MAX_RICH_MENU_AREAS = 20
MIN_RICH_MENU_WIDTH = 800
MAX_RICH_MENU_WIDTH = 2500
MIN_RICH_MENU_HEIGHT = 250
MIN_RICH_MENU_ASPECT_RATIO = 1.45
