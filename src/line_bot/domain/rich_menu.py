"""Rich menu: tamanho, áreas clicáveis e suas ações."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from line_bot.domain.actions import Action
from line_bot.domain.base import Validatable
from line_bot.validators.composite import (
    iter_cardinality_issues,
    iter_child_issues,
    require_items,
)
from line_bot.validators.fields import (
    check_required,
    require_int_at_least,
    require_not_none,
    require_text,
)
from line_bot.validators.limits import (
    MAX_CHAT_BAR_TEXT_LENGTH,
    MAX_RICH_MENU_AREAS,
    MAX_RICH_MENU_NAME_LENGTH,
    MAX_RICH_MENU_WIDTH,
    MIN_RICH_MENU_ASPECT_RATIO,
    MIN_RICH_MENU_HEIGHT,
    MIN_RICH_MENU_WIDTH,
)
from line_bot.validators.results import ValidationIssue

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class RichMenuSize:
    """Tamanho do rich menu em pixels.

    Attributes:
        width: Largura entre 800 e 2500
        height: Altura mínima de 250, com largura/altura >= 1.45
    """

    width: int
    height: int

    FULL: ClassVar[RichMenuSize]
    HALF: ClassVar[RichMenuSize]

    def __post_init__(self) -> None:
        require_int_at_least(self.width, "width", MIN_RICH_MENU_WIDTH)
        require_int_at_least(self.height, "height", MIN_RICH_MENU_HEIGHT)
        if self.width > MAX_RICH_MENU_WIDTH:
            raise ValidationIssue(
                "width", f"The width cannot be greater than {MAX_RICH_MENU_WIDTH}."
            ).to_field_error()
        if self.width / self.height < MIN_RICH_MENU_ASPECT_RATIO:
            raise ValidationIssue(
                "height",
                f"The aspect ratio (width / height) must be at least {MIN_RICH_MENU_ASPECT_RATIO}.",
            ).to_field_error()


RichMenuSize.FULL = RichMenuSize(2500, 1686)
RichMenuSize.HALF = RichMenuSize(2500, 843)


@dataclass(frozen=True)
class RichMenuBounds:
    """Retângulo de uma área, relativo ao canto superior esquerdo."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        require_int_at_least(self.x, "x", 0)
        require_int_at_least(self.y, "y", 0)
        require_int_at_least(self.width, "width", 1)
        require_int_at_least(self.height, "height", 1)

    def fits(self, size: RichMenuSize) -> bool:
        return self.x + self.width <= size.width and self.y + self.height <= size.height


class RichMenuArea(Validatable):
    """Área clicável: limites + ação obrigatória."""

    def __init__(
        self,
        bounds: RichMenuBounds | None = None,
        action: Action | None = None,
    ) -> None:
        self._bounds: RichMenuBounds | None = None
        self._action: Action | None = None
        if bounds is not None:
            self.bounds = bounds
        if action is not None:
            self.action = action

    @property
    def bounds(self) -> RichMenuBounds | None:
        return self._bounds

    @bounds.setter
    def bounds(self, value: RichMenuBounds) -> None:
        self._bounds = require_not_none(value, "bounds")

    @property
    def action(self) -> Action | None:
        return self._action

    @action.setter
    def action(self, value: Action) -> None:
        self._action = require_not_none(value, "action")

    def iter_issues(self) -> Iterator[ValidationIssue]:
        for field, value in (("bounds", self._bounds), ("action", self._action)):
            issue = check_required(value, field)
            if issue:
                yield issue
        if self._action is not None:
            yield from self._action.iter_issues()


class RichMenu(Validatable):
    """Rich menu completo, pronto para criação via API."""

    def __init__(
        self,
        name: str | None = None,
        chat_bar_text: str | None = None,
        areas: Iterable[RichMenuArea] | None = None,
        *,
        size: RichMenuSize = RichMenuSize.FULL,
        selected: bool = False,
    ) -> None:
        self._name: str | None = None
        self._chat_bar_text: str | None = None
        self._areas: list[RichMenuArea] | None = None
        self._size = size
        self.selected = selected
        if name is not None:
            self.name = name
        if chat_bar_text is not None:
            self.chat_bar_text = chat_bar_text
        if areas is not None:
            self.areas = areas

    @property
    def size(self) -> RichMenuSize:
        return self._size

    @size.setter
    def size(self, value: RichMenuSize) -> None:
        self._size = require_not_none(value, "size")

    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = require_text(value, "name", MAX_RICH_MENU_NAME_LENGTH)

    @property
    def chat_bar_text(self) -> str | None:
        return self._chat_bar_text

    @chat_bar_text.setter
    def chat_bar_text(self, value: str) -> None:
        self._chat_bar_text = require_text(value, "chat_bar_text", MAX_CHAT_BAR_TEXT_LENGTH)

    @property
    def areas(self) -> tuple[RichMenuArea, ...] | None:
        return tuple(self._areas) if self._areas is not None else None

    @areas.setter
    def areas(self, value: Iterable[RichMenuArea]) -> None:
        self._areas = require_items(value, "areas", MAX_RICH_MENU_AREAS, RichMenuArea)

    def iter_issues(self) -> Iterator[ValidationIssue]:
        for field, value in (("name", self._name), ("chat_bar_text", self._chat_bar_text)):
            issue = check_required(value, field)
            if issue:
                yield issue

        shape = next(iter_cardinality_issues(self._areas, "areas", 1, MAX_RICH_MENU_AREAS), None)
        if shape is not None:
            yield shape
            return
        yield from iter_child_issues(self._areas, "areas")

        for area in self._areas:
            if area.bounds is not None and not area.bounds.fits(self._size):
                yield ValidationIssue(
                    "areas", "The bounds of an area cannot exceed the size of the rich menu."
                )


__all__ = ["RichMenu", "RichMenuArea", "RichMenuBounds", "RichMenuSize"]
