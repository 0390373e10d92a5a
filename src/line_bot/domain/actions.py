"""Ações (botões de template, áreas de rich menu).

Soma fechada: uma classe por tipo, com o discriminante `type` definido na
própria classe (ClassVar), nunca como estado mutável da instância.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from line_bot.constants import ActionType, DateTimePickerMode
from line_bot.domain.base import Validatable
from line_bot.validators.datetime_range import DateTimeRange
from line_bot.validators.fields import (
    check_required,
    require_enum,
    require_optional_text,
    require_text,
    require_url,
)
from line_bot.validators.limits import (
    ACTION_URL_SCHEMES,
    MAX_ACTION_LABEL_LENGTH,
    MAX_ACTION_TEXT_LENGTH,
    MAX_POSTBACK_DATA_LENGTH,
)

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime

    from line_bot.validators.datetime_range import DateTimeValue
    from line_bot.validators.results import ValidationIssue


class Action(Validatable):
    """Base comum: `label` obrigatório, até 20 caracteres."""

    type: ClassVar[ActionType]

    def __init__(self, label: str | None = None) -> None:
        self._label: str | None = None
        if label is not None:
            self.label = label

    @property
    def label(self) -> str | None:
        return self._label

    @label.setter
    def label(self, value: str) -> None:
        self._label = require_text(value, "label", MAX_ACTION_LABEL_LENGTH)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        issue = check_required(self._label, "label")
        if issue:
            yield issue

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(label={self._label!r})"


class UriAction(Action):
    """Abre uma URL (http, https, tel ou line)."""

    type = ActionType.URI

    def __init__(self, label: str | None = None, url: str | None = None) -> None:
        super().__init__(label)
        self._url: str | None = None
        if url is not None:
            self.url = url

    @property
    def url(self) -> str | None:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = require_url(value, "url", schemes=ACTION_URL_SCHEMES)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from super().iter_issues()
        issue = check_required(self._url, "url")
        if issue:
            yield issue


class PostbackAction(Action):
    """Devolve `data` via evento postback; `text` é exibido como fala do usuário."""

    type = ActionType.POSTBACK

    def __init__(
        self,
        label: str | None = None,
        data: str | None = None,
        text: str | None = None,
    ) -> None:
        super().__init__(label)
        self._data: str | None = None
        self._text: str | None = None
        if data is not None:
            self.data = data
        if text is not None:
            self.text = text

    @property
    def data(self) -> str | None:
        return self._data

    @data.setter
    def data(self, value: str) -> None:
        self._data = require_text(value, "data", MAX_POSTBACK_DATA_LENGTH)

    @property
    def text(self) -> str | None:
        return self._text

    @text.setter
    def text(self, value: str | None) -> None:
        self._text = require_optional_text(value, "text", MAX_ACTION_TEXT_LENGTH)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from super().iter_issues()
        issue = check_required(self._data, "data")
        if issue:
            yield issue


class MessageAction(Action):
    """Envia `text` como mensagem do usuário."""

    type = ActionType.MESSAGE

    def __init__(self, label: str | None = None, text: str | None = None) -> None:
        super().__init__(label)
        self._text: str | None = None
        if text is not None:
            self.text = text

    @property
    def text(self) -> str | None:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = require_text(value, "text", MAX_ACTION_TEXT_LENGTH)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from super().iter_issues()
        issue = check_required(self._text, "text")
        if issue:
            yield issue


class DateTimePickerAction(Action):
    """Seletor de data/hora.

    O modo é obrigatório, fixado na construção, e determina a normalização de initial,
    min e max. Ao passar os limites pelo construtor, a ordem de atribuição
    é min, max e por último initial.
    """

    type = ActionType.DATETIME_PICKER

    def __init__(
        self,
        mode: DateTimePickerMode,
        label: str | None = None,
        data: str | None = None,
        *,
        initial: DateTimeValue | None = None,
        min: DateTimeValue | None = None,  # noqa: A002 - nome do campo na API
        max: DateTimeValue | None = None,  # noqa: A002 - nome do campo na API
    ) -> None:
        super().__init__(label)
        self._range = DateTimeRange(require_enum(mode, DateTimePickerMode, "mode"))
        self._data: str | None = None
        if data is not None:
            self.data = data
        if min is not None:
            self.min = min
        if max is not None:
            self.max = max
        if initial is not None:
            self.initial = initial

    @property
    def mode(self) -> DateTimePickerMode:
        return self._range.mode

    @property
    def data(self) -> str | None:
        return self._data

    @data.setter
    def data(self, value: str) -> None:
        self._data = require_text(value, "data", MAX_POSTBACK_DATA_LENGTH)

    @property
    def initial(self) -> datetime | None:
        return self._range.initial

    @initial.setter
    def initial(self, value: DateTimeValue | None) -> None:
        self._range.set_initial(value)

    @property
    def min(self) -> datetime | None:
        return self._range.min

    @min.setter
    def min(self, value: DateTimeValue | None) -> None:
        self._range.set_min(value)

    @property
    def max(self) -> datetime | None:
        return self._range.max

    @max.setter
    def max(self, value: DateTimeValue | None) -> None:
        self._range.set_max(value)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        yield from super().iter_issues()
        issue = check_required(self._data, "data")
        if issue:
            yield issue


class CameraAction(Action):
    """Abre a câmera (somente em quick replies)."""

    type = ActionType.CAMERA


class CameraRollAction(Action):
    """Abre a galeria (somente em quick replies)."""

    type = ActionType.CAMERA_ROLL


class LocationAction(Action):
    """Abre a tela de localização (somente em quick replies)."""

    type = ActionType.LOCATION


__all__ = [
    "Action",
    "CameraAction",
    "CameraRollAction",
    "DateTimePickerAction",
    "LocationAction",
    "MessageAction",
    "PostbackAction",
    "UriAction",
]
