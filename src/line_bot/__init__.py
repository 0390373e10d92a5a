"""SDK para a LINE Messaging API.

Modelos validados (mensagens, templates, ações, rich menus), serialização
para o formato JSON da plataforma, cliente HTTP assíncrono e parsing de
webhooks.
"""

from line_bot.client import LineBotClient
from line_bot.constants import (
    ActionType,
    DateTimePickerMode,
    MessageType,
    TemplateType,
)
from line_bot.domain import (
    AudioMessage,
    ButtonsTemplate,
    CameraAction,
    CameraRollAction,
    CarouselColumn,
    CarouselTemplate,
    ConfirmTemplate,
    DateTimePickerAction,
    ImageCarouselColumn,
    ImageCarouselTemplate,
    ImageMessage,
    LocationAction,
    LocationMessage,
    MessageAction,
    PostbackAction,
    RichMenu,
    RichMenuArea,
    RichMenuBounds,
    RichMenuSize,
    StickerMessage,
    TemplateMessage,
    TextMessage,
    UriAction,
    VideoMessage,
    to_carousel_template,
    to_image_carousel_template,
)
from line_bot.errors import InvalidFieldError, InvalidStateError, LineBotError
from line_bot.validators import ValidationIssue, ValidationResult, normalize_datetime

__version__ = "0.1.0"

__all__ = [
    "ActionType",
    "AudioMessage",
    "ButtonsTemplate",
    "CameraAction",
    "CameraRollAction",
    "CarouselColumn",
    "CarouselTemplate",
    "ConfirmTemplate",
    "DateTimePickerAction",
    "DateTimePickerMode",
    "ImageCarouselColumn",
    "ImageCarouselTemplate",
    "ImageMessage",
    "InvalidFieldError",
    "InvalidStateError",
    "LineBotClient",
    "LineBotError",
    "LocationAction",
    "LocationMessage",
    "MessageAction",
    "MessageType",
    "PostbackAction",
    "RichMenu",
    "RichMenuArea",
    "RichMenuBounds",
    "RichMenuSize",
    "StickerMessage",
    "TemplateMessage",
    "TemplateType",
    "TextMessage",
    "UriAction",
    "ValidationIssue",
    "ValidationResult",
    "VideoMessage",
    "normalize_datetime",
    "to_carousel_template",
    "to_image_carousel_template",
]
