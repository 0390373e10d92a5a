"""Templates (confirm, buttons, carousel, image carousel) e suas colunas."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from line_bot.constants import TemplateType
from line_bot.domain.actions import Action
from line_bot.domain.base import Validatable
from line_bot.validators.composite import (
    iter_cardinality_issues,
    iter_child_issues,
    require_items,
)
from line_bot.validators.fields import (
    check_required,
    require_not_none,
    require_optional_text,
    require_optional_url,
    require_text,
    require_url,
)
from line_bot.validators.limits import (
    CONFIRM_ACTION_COUNT,
    MAX_BUTTONS_ACTIONS,
    MAX_BUTTONS_TEXT_LENGTH,
    MAX_CAROUSEL_COLUMNS,
    MAX_COLUMN_ACTIONS,
    MAX_COLUMN_TEXT_LENGTH,
    MAX_CONFIRM_TEXT_LENGTH,
    MAX_DECORATED_TEXT_LENGTH,
    MAX_TEMPLATE_TITLE_LENGTH,
)
from line_bot.validators.results import ValidationIssue

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Template(Validatable):
    """Base dos templates; `type` é definido por cada subclasse."""

    type: ClassVar[TemplateType]


class _DecoratedTextMixin:
    """Texto + título/thumbnail opcionais.

    Com título ou thumbnail o texto fica limitado a 60 caracteres; como o
    título pode ser atribuído depois do texto, esse limite é checado em
    validate().
    """

    _text_max_length: ClassVar[int]

    def _init_decorations(
        self,
        text: str | None,
        title: str | None,
        thumbnail_image_url: str | None,
    ) -> None:
        self._text: str | None = None
        self._title: str | None = None
        self._thumbnail_image_url: str | None = None
        if text is not None:
            self.text = text
        if title is not None:
            self.title = title
        if thumbnail_image_url is not None:
            self.thumbnail_image_url = thumbnail_image_url

    @property
    def text(self) -> str | None:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = require_text(value, "text", self._text_max_length)

    @property
    def title(self) -> str | None:
        return self._title

    @title.setter
    def title(self, value: str | None) -> None:
        self._title = require_optional_text(value, "title", MAX_TEMPLATE_TITLE_LENGTH)

    @property
    def thumbnail_image_url(self) -> str | None:
        return self._thumbnail_image_url

    @thumbnail_image_url.setter
    def thumbnail_image_url(self, value: str | None) -> None:
        self._thumbnail_image_url = require_optional_url(value, "thumbnail_image_url")

    def _iter_text_issues(self) -> Iterator[ValidationIssue]:
        issue = check_required(self._text, "text")
        if issue:
            yield issue
            return
        decorated = self._title is not None or self._thumbnail_image_url is not None
        if decorated and len(self._text) > MAX_DECORATED_TEXT_LENGTH:
            yield ValidationIssue(
                "text",
                f"The text cannot be longer than {MAX_DECORATED_TEXT_LENGTH} characters "
                "when the title or the thumbnail image url is set.",
            )


class ConfirmTemplate(Template):
    """Texto + exatamente duas ações."""

    type = TemplateType.CONFIRM

    def __init__(
        self,
        text: str | None = None,
        actions: Iterable[Action] | None = None,
    ) -> None:
        self._text: str | None = None
        self._actions: list[Action] | None = None
        if text is not None:
            self.text = text
        if actions is not None:
            self.actions = actions

    @property
    def text(self) -> str | None:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = require_text(value, "text", MAX_CONFIRM_TEXT_LENGTH)

    @property
    def actions(self) -> tuple[Action, ...] | None:
        return tuple(self._actions) if self._actions is not None else None

    @actions.setter
    def actions(self, value: Iterable[Action]) -> None:
        self._actions = require_items(value, "actions", CONFIRM_ACTION_COUNT, Action)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        issue = check_required(self._text, "text")
        if issue:
            yield issue
        yield from _iter_container_issues(
            self._actions, "actions", CONFIRM_ACTION_COUNT, CONFIRM_ACTION_COUNT
        )


class ButtonsTemplate(_DecoratedTextMixin, Template):
    """Texto, título/thumbnail opcionais e de 1 a 4 ações."""

    type = TemplateType.BUTTONS
    _text_max_length = MAX_BUTTONS_TEXT_LENGTH

    def __init__(
        self,
        text: str | None = None,
        actions: Iterable[Action] | None = None,
        *,
        title: str | None = None,
        thumbnail_image_url: str | None = None,
    ) -> None:
        self._init_decorations(text, title, thumbnail_image_url)
        self._actions: list[Action] | None = None
        if actions is not None:
            self.actions = actions

    @property
    def actions(self) -> tuple[Action, ...] | None:
        return tuple(self._actions) if self._actions is not None else None

    @actions.setter
    def actions(self, value: Iterable[Action]) -> None:
        self._actions = require_items(value, "actions", MAX_BUTTONS_ACTIONS, Action)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from self._iter_text_issues()
        yield from _iter_container_issues(self._actions, "actions", 1, MAX_BUTTONS_ACTIONS)


class CarouselColumn(_DecoratedTextMixin, Validatable):
    """Coluna de carousel: texto, título/thumbnail opcionais, 1 a 3 ações."""

    _text_max_length = MAX_COLUMN_TEXT_LENGTH

    def __init__(
        self,
        text: str | None = None,
        actions: Iterable[Action] | None = None,
        *,
        title: str | None = None,
        thumbnail_image_url: str | None = None,
    ) -> None:
        self._init_decorations(text, title, thumbnail_image_url)
        self._actions: list[Action] | None = None
        if actions is not None:
            self.actions = actions

    @property
    def actions(self) -> tuple[Action, ...] | None:
        return tuple(self._actions) if self._actions is not None else None

    @actions.setter
    def actions(self, value: Iterable[Action]) -> None:
        self._actions = require_items(value, "actions", MAX_COLUMN_ACTIONS, Action)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from self._iter_text_issues()
        yield from _iter_container_issues(self._actions, "actions", 1, MAX_COLUMN_ACTIONS)


class CarouselTemplate(Template):
    """De 1 a 10 colunas, todas com a mesma quantidade de ações."""

    type = TemplateType.CAROUSEL

    def __init__(self, columns: Iterable[CarouselColumn] | None = None) -> None:
        self._columns: list[CarouselColumn] | None = None
        if columns is not None:
            self.columns = columns

    @property
    def columns(self) -> tuple[CarouselColumn, ...] | None:
        return tuple(self._columns) if self._columns is not None else None

    @columns.setter
    def columns(self, value: Iterable[CarouselColumn]) -> None:
        self._columns = require_items(value, "columns", MAX_CAROUSEL_COLUMNS, CarouselColumn)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from _iter_container_issues(self._columns, "columns", 1, MAX_CAROUSEL_COLUMNS)

        if not self._columns:
            return
        action_counts = {len(column.actions or ()) for column in self._columns}
        if len(action_counts) > 1:
            yield ValidationIssue("columns", "All columns must have the same number of actions.")


class ImageCarouselColumn(Validatable):
    """Coluna de image carousel: imagem https + uma ação."""

    def __init__(self, image_url: str | None = None, action: Action | None = None) -> None:
        self._image_url: str | None = None
        self._action: Action | None = None
        if image_url is not None:
            self.image_url = image_url
        if action is not None:
            self.action = action

    @property
    def image_url(self) -> str | None:
        return self._image_url

    @image_url.setter
    def image_url(self, value: str) -> None:
        self._image_url = require_url(value, "image_url")

    @property
    def action(self) -> Action | None:
        return self._action

    @action.setter
    def action(self, value: Action) -> None:
        self._action = require_not_none(value, "action")

    def iter_issues(self) -> Iterator[ValidationIssue]:
        for field, value in (("image_url", self._image_url), ("action", self._action)):
            issue = check_required(value, field)
            if issue:
                yield issue
        if self._action is not None:
            yield from self._action.iter_issues()


class ImageCarouselTemplate(Template):
    """De 1 a 10 colunas de imagem."""

    type = TemplateType.IMAGE_CAROUSEL

    def __init__(self, columns: Iterable[ImageCarouselColumn] | None = None) -> None:
        self._columns: list[ImageCarouselColumn] | None = None
        if columns is not None:
            self.columns = columns

    @property
    def columns(self) -> tuple[ImageCarouselColumn, ...] | None:
        return tuple(self._columns) if self._columns is not None else None

    @columns.setter
    def columns(self, value: Iterable[ImageCarouselColumn]) -> None:
        self._columns = require_items(
            value, "columns", MAX_CAROUSEL_COLUMNS, ImageCarouselColumn
        )

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from _iter_container_issues(self._columns, "columns", 1, MAX_CAROUSEL_COLUMNS)


def _iter_container_issues(
    items: list[Validatable] | None,
    field: str,
    minimum: int,
    maximum: int,
) -> Iterator[ValidationIssue]:
    """Forma do container primeiro; filhos só se a forma estiver correta."""
    shape = next(iter_cardinality_issues(items, field, minimum, maximum), None)
    if shape is not None:
        yield shape
        return
    yield from iter_child_issues(items, field)


__all__ = [
    "ButtonsTemplate",
    "CarouselColumn",
    "CarouselTemplate",
    "ConfirmTemplate",
    "ImageCarouselColumn",
    "ImageCarouselTemplate",
    "Template",
]
