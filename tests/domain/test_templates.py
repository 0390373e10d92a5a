"""Testes dos templates e da validação composta (fail-fast)."""

from __future__ import annotations

import pytest

from line_bot.constants import TemplateType
from line_bot.domain import (
    ButtonsTemplate,
    CarouselColumn,
    CarouselTemplate,
    ConfirmTemplate,
    ImageCarouselColumn,
    ImageCarouselTemplate,
    MessageAction,
    PostbackAction,
    UriAction,
)
from line_bot.errors import InvalidFieldError, InvalidStateError


def _yes_no() -> list[MessageAction]:
    return [MessageAction("Sim", "sim"), MessageAction("Não", "não")]


def _column(text: str = "Coluna", actions: int = 1) -> CarouselColumn:
    return CarouselColumn(text, [MessageAction(f"A{i}", "a") for i in range(actions)])


class TestConfirmTemplate:
    def test_text_boundary(self) -> None:
        template = ConfirmTemplate("a" * 240, _yes_no())
        template.validate()
        with pytest.raises(InvalidFieldError) as exc:
            template.text = "a" * 241
        assert exc.value.message == "The text cannot be longer than 240 characters."
        assert template.text == "a" * 240

    def test_requires_exactly_two_actions(self) -> None:
        template = ConfirmTemplate("Confirma?", [MessageAction("Sim", "sim")])
        with pytest.raises(InvalidStateError, match="The number of actions must be 2."):
            template.validate()
        with pytest.raises(InvalidFieldError, match="The maximum number of actions is 2."):
            template.actions = [*_yes_no(), MessageAction("Talvez", "talvez")]

    def test_actions_are_copied(self) -> None:
        actions = _yes_no()
        template = ConfirmTemplate("Confirma?", actions)
        actions.append(MessageAction("Talvez", "talvez"))
        assert len(template.actions) == 2
        assert isinstance(template.actions, tuple)

    def test_invalid_action_propagates(self) -> None:
        template = ConfirmTemplate("Confirma?", [MessageAction("Sim"), MessageAction("Não")])
        with pytest.raises(InvalidStateError, match="The text cannot be null."):
            template.validate()


class TestButtonsTemplate:
    def test_valid(self) -> None:
        template = ButtonsTemplate(
            "Escolha",
            [UriAction("Site", "https://example.com")],
            title="Menu",
            thumbnail_image_url="https://example.com/thumb.jpg",
        )
        template.validate()
        assert template.type is TemplateType.BUTTONS

    def test_text_limit_is_smaller_with_title(self) -> None:
        template = ButtonsTemplate("a" * 100, [MessageAction("Ok", "ok")])
        template.validate()
        template.title = "Título"
        with pytest.raises(InvalidStateError, match="cannot be longer than 60 characters"):
            template.validate()

    def test_action_limits(self) -> None:
        with pytest.raises(InvalidStateError, match="The minimum number of actions is 1."):
            ButtonsTemplate("Escolha", []).validate()
        with pytest.raises(InvalidFieldError, match="The maximum number of actions is 4."):
            ButtonsTemplate("Escolha", [MessageAction("a", "a")] * 5)

    def test_thumbnail_requires_https(self) -> None:
        with pytest.raises(InvalidFieldError, match="thumbnail image url"):
            ButtonsTemplate(thumbnail_image_url="http://example.com/t.jpg")


class TestCarouselTemplate:
    def test_null_columns_fail_before_elements(self) -> None:
        with pytest.raises(InvalidStateError, match="The columns cannot be null."):
            CarouselTemplate().validate()

    def test_first_invalid_column_is_reported(self) -> None:
        first = CarouselColumn(actions=[MessageAction("a", "a")])
        second = CarouselColumn("ok", [MessageAction("b")])
        template = CarouselTemplate([first, second])
        with pytest.raises(InvalidStateError) as exc:
            template.validate()
        assert exc.value.message == "The text cannot be null."

    def test_columns_must_have_same_action_count(self) -> None:
        template = CarouselTemplate([_column(actions=1), _column(actions=2)])
        with pytest.raises(InvalidStateError, match="same number of actions"):
            template.validate()

    def test_column_limits(self) -> None:
        with pytest.raises(InvalidStateError, match="The minimum number of columns is 1."):
            CarouselTemplate([]).validate()
        with pytest.raises(InvalidFieldError, match="The maximum number of columns is 10."):
            CarouselTemplate([_column() for _ in range(11)])
        with pytest.raises(InvalidFieldError, match="can only contain CarouselColumn items"):
            CarouselTemplate([ImageCarouselColumn()])  # type: ignore[list-item]

    def test_column_limits_text(self) -> None:
        _column("a" * 120).validate()
        with pytest.raises(InvalidFieldError, match="cannot be longer than 120 characters"):
            _column("a" * 121)
        with pytest.raises(InvalidFieldError, match="The maximum number of actions is 3."):
            _column(actions=4)

    def test_collect_issues_after_null_columns(self) -> None:
        result = CarouselTemplate().collect_issues()
        assert result.messages == ["The columns cannot be null."]


class TestImageCarouselTemplate:
    def test_valid(self) -> None:
        column = ImageCarouselColumn(
            "https://example.com/a.jpg", PostbackAction("Ver", "view=1")
        )
        ImageCarouselTemplate([column]).validate()

    def test_column_requires_action(self) -> None:
        template = ImageCarouselTemplate([ImageCarouselColumn("https://example.com/a.jpg")])
        with pytest.raises(InvalidStateError, match="The action cannot be null."):
            template.validate()

    def test_column_action_setter_rejects_none(self) -> None:
        column = ImageCarouselColumn()
        with pytest.raises(InvalidFieldError, match="The action cannot be null."):
            column.action = None  # type: ignore[assignment]
