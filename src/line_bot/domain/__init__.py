"""Entidades outbound da LINE Messaging API (objetos de valor mutáveis).

Setters validam na atribuição (InvalidFieldError); validate() checa a
prontidão no momento do envio (InvalidStateError).
"""

from line_bot.domain.actions import (
    Action,
    CameraAction,
    CameraRollAction,
    DateTimePickerAction,
    LocationAction,
    MessageAction,
    PostbackAction,
    UriAction,
)
from line_bot.domain.base import Validatable
from line_bot.domain.messages import (
    AudioMessage,
    ImageMessage,
    LocationMessage,
    SendMessage,
    StickerMessage,
    TemplateMessage,
    TextMessage,
    VideoMessage,
)
from line_bot.domain.rich_menu import RichMenu, RichMenuArea, RichMenuBounds, RichMenuSize
from line_bot.domain.sources import (
    CarouselColumnSource,
    CarouselTemplateSource,
    ImageCarouselColumnSource,
    ImageCarouselTemplateSource,
    to_carousel_template,
    to_image_carousel_template,
)
from line_bot.domain.templates import (
    ButtonsTemplate,
    CarouselColumn,
    CarouselTemplate,
    ConfirmTemplate,
    ImageCarouselColumn,
    ImageCarouselTemplate,
    Template,
)

__all__ = [
    "Action",
    "AudioMessage",
    "ButtonsTemplate",
    "CameraAction",
    "CameraRollAction",
    "CarouselColumn",
    "CarouselColumnSource",
    "CarouselTemplate",
    "CarouselTemplateSource",
    "ConfirmTemplate",
    "DateTimePickerAction",
    "ImageCarouselColumn",
    "ImageCarouselColumnSource",
    "ImageCarouselTemplate",
    "ImageCarouselTemplateSource",
    "ImageMessage",
    "LocationAction",
    "LocationMessage",
    "MessageAction",
    "PostbackAction",
    "RichMenu",
    "RichMenuArea",
    "RichMenuBounds",
    "RichMenuSize",
    "SendMessage",
    "StickerMessage",
    "Template",
    "TemplateMessage",
    "TextMessage",
    "UriAction",
    "Validatable",
    "VideoMessage",
]
