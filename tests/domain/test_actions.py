"""Testes das ações (setters, validate() e datetimepicker)."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from line_bot.constants import ActionType, DateTimePickerMode
from line_bot.domain import (
    CameraAction,
    CameraRollAction,
    DateTimePickerAction,
    LocationAction,
    MessageAction,
    PostbackAction,
    UriAction,
)
from line_bot.errors import InvalidFieldError, InvalidStateError


class TestActionDiscriminant:
    def test_type_comes_from_class(self) -> None:
        assert UriAction.type is ActionType.URI
        assert PostbackAction("ok", "data").type is ActionType.POSTBACK
        assert MessageAction.type == "message"
        assert DateTimePickerAction.type == "datetimepicker"
        assert CameraAction.type == "camera"
        assert CameraRollAction.type == "cameraRoll"
        assert LocationAction.type == "location"


class TestLabel:
    def test_label_boundary(self) -> None:
        assert CameraAction("a" * 20).label == "a" * 20
        with pytest.raises(
            InvalidFieldError, match="The label cannot be longer than 20 characters."
        ):
            CameraAction("a" * 21)

    def test_failed_assignment_keeps_previous_value(self) -> None:
        action = MessageAction("Sim", "sim")
        with pytest.raises(InvalidFieldError, match="The label cannot be null or whitespace."):
            action.label = "  "
        assert action.label == "Sim"

    def test_missing_label_fails_validate(self) -> None:
        with pytest.raises(InvalidStateError, match="The label cannot be null."):
            LocationAction().validate()


class TestRequiredFields:
    def test_uri_action(self) -> None:
        with pytest.raises(InvalidStateError, match="The url cannot be null."):
            UriAction("Abrir").validate()
        UriAction("Ligar", "tel:0312345678").validate()

    def test_postback_data(self) -> None:
        with pytest.raises(InvalidStateError, match="The data cannot be null."):
            PostbackAction("Comprar").validate()
        with pytest.raises(
            InvalidFieldError, match="The data cannot be longer than 300 characters."
        ):
            PostbackAction("Comprar", "d" * 301)

    def test_postback_text_is_optional(self) -> None:
        action = PostbackAction("Comprar", "buy=1")
        action.validate()
        action.text = "Quero comprar"
        action.text = None
        assert action.text is None

    def test_message_text(self) -> None:
        with pytest.raises(InvalidStateError, match="The text cannot be null."):
            MessageAction("Sim").validate()

    def test_validate_is_pure(self) -> None:
        """Duas chamadas sem mudanças produzem o mesmo resultado."""
        action = PostbackAction("Comprar")
        messages = []
        for _ in range(2):
            with pytest.raises(InvalidStateError) as exc:
                action.validate()
            messages.append(exc.value.message)
        assert messages == ["The data cannot be null."] * 2
        assert action.data is None

    def test_collect_issues_aggregates(self) -> None:
        result = PostbackAction().collect_issues()
        assert result.messages == ["The label cannot be null.", "The data cannot be null."]


class TestDateTimePickerAction:
    def test_mode_is_required(self) -> None:
        with pytest.raises(TypeError):
            DateTimePickerAction()  # type: ignore[call-arg]
        action = DateTimePickerAction(DateTimePickerMode.DATE_TIME)
        assert action.mode is DateTimePickerMode.DATE_TIME

    def test_mode_is_read_only(self) -> None:
        action = DateTimePickerAction(DateTimePickerMode.DATE)
        with pytest.raises(AttributeError):
            action.mode = DateTimePickerMode.TIME  # type: ignore[misc]

    def test_mode_accepts_token(self) -> None:
        assert DateTimePickerAction("time").mode is DateTimePickerMode.TIME
        with pytest.raises(InvalidFieldError, match="The mode is invalid."):
            DateTimePickerAction("week")

    def test_max_before_min(self) -> None:
        action = DateTimePickerAction(DateTimePickerMode.DATE, "Data", "pick")
        action.min = datetime(2018, 10, 8)
        with pytest.raises(InvalidFieldError, match="The max must be greater than the min."):
            action.max = datetime(2018, 10, 7)

    def test_min_equal_to_max(self) -> None:
        action = DateTimePickerAction(DateTimePickerMode.DATE, "Data", "pick")
        action.max = datetime(2018, 10, 8)
        with pytest.raises(InvalidFieldError, match="The min must be less than the max."):
            action.min = datetime(2018, 10, 8)

    def test_initial_between_min_and_max(self) -> None:
        action = DateTimePickerAction(DateTimePickerMode.DATE, "Data", "pick")
        action.min = datetime(2018, 10, 7)
        action.max = datetime(2018, 10, 9)
        action.initial = datetime(2018, 10, 8)

        assert action.min == datetime(2018, 10, 7)
        assert action.max == datetime(2018, 10, 9)
        assert action.initial == datetime(2018, 10, 8)

    def test_initial_before_min(self) -> None:
        action = DateTimePickerAction(DateTimePickerMode.DATE, "Data", "pick")
        action.min = datetime(2018, 10, 8)
        with pytest.raises(
            InvalidFieldError, match="The initial must be between the min and the max."
        ):
            action.initial = datetime(2018, 10, 7)

    def test_constructor_assigns_bounds_before_initial(self) -> None:
        action = DateTimePickerAction(
            DateTimePickerMode.DATE,
            "Data",
            "pick",
            initial=date(2018, 10, 8),
            min=date(2018, 10, 7),
            max=date(2018, 10, 9),
        )
        assert action.initial == datetime(2018, 10, 8)
        action.validate()

    def test_values_are_normalized_by_mode(self) -> None:
        action = DateTimePickerAction(DateTimePickerMode.TIME, "Hora", "pick")
        action.initial = datetime(2018, 10, 8, 10, 30, 15)
        assert action.initial == datetime(1, 1, 1, 10, 30, 15)

    def test_data_is_required(self) -> None:
        with pytest.raises(InvalidStateError, match="The data cannot be null."):
            DateTimePickerAction(DateTimePickerMode.DATE, label="Data").validate()
