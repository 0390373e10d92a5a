"""Testes das mensagens outbound."""

from __future__ import annotations

import pytest

from line_bot.constants import MessageType
from line_bot.domain import (
    AudioMessage,
    ConfirmTemplate,
    ImageMessage,
    LocationMessage,
    MessageAction,
    StickerMessage,
    TemplateMessage,
    TextMessage,
    VideoMessage,
)
from line_bot.errors import InvalidFieldError, InvalidStateError

VIDEO_URL = "https://example.com/video.mp4"
PREVIEW_URL = "https://example.com/preview.jpg"


class TestTextMessage:
    def test_limits(self) -> None:
        TextMessage("a" * 2000).validate()
        with pytest.raises(InvalidFieldError, match="cannot be longer than 2000 characters"):
            TextMessage("a" * 2001)

    def test_required(self) -> None:
        with pytest.raises(InvalidStateError, match="The text cannot be null."):
            TextMessage().validate()


class TestStickerMessage:
    def test_ids_required(self) -> None:
        with pytest.raises(InvalidStateError, match="The package id cannot be null."):
            StickerMessage(sticker_id="1").validate()
        with pytest.raises(InvalidStateError, match="The sticker id cannot be null."):
            StickerMessage(package_id="1").validate()
        StickerMessage("11537", "52002734").validate()

    def test_blank_package_id(self) -> None:
        with pytest.raises(InvalidFieldError, match="The package id cannot be null or whitespace."):
            StickerMessage(package_id=" ")


class TestPreviewedMedia:
    """Par obrigatório url + preview_url."""

    @pytest.mark.parametrize("message_cls", [VideoMessage, ImageMessage])
    def test_missing_url(self, message_cls) -> None:
        with pytest.raises(InvalidStateError) as exc:
            message_cls(preview_url=PREVIEW_URL).validate()
        assert exc.value.message == "The url cannot be null."
        assert exc.value.field == "url"

    @pytest.mark.parametrize("message_cls", [VideoMessage, ImageMessage])
    def test_missing_preview_url(self, message_cls) -> None:
        with pytest.raises(InvalidStateError, match="The preview url cannot be null."):
            message_cls(url=VIDEO_URL).validate()

    def test_both_present(self) -> None:
        message = VideoMessage(VIDEO_URL, PREVIEW_URL)
        assert message.validate() is None
        assert message.type is MessageType.VIDEO

    def test_http_is_rejected(self) -> None:
        with pytest.raises(InvalidFieldError, match="The url should use one of these schemes"):
            VideoMessage("http://example.com/video.mp4")


class TestAudioMessage:
    def test_duration(self) -> None:
        AudioMessage("https://example.com/a.m4a", 60000).validate()
        with pytest.raises(InvalidFieldError, match="The duration must be at least 1."):
            AudioMessage(duration=0)
        with pytest.raises(InvalidStateError, match="The duration cannot be null."):
            AudioMessage("https://example.com/a.m4a").validate()


class TestLocationMessage:
    def test_valid(self) -> None:
        LocationMessage("Escritório", "Rua A, 1", 35.65910807942215, 139.70372892916203).validate()

    def test_coordinates_range(self) -> None:
        with pytest.raises(InvalidFieldError, match="The longitude must be between -180 and 180."):
            LocationMessage(longitude=181)

    def test_required_order(self) -> None:
        result = LocationMessage(title="Escritório").collect_issues()
        assert result.messages == [
            "The address cannot be null.",
            "The latitude cannot be null.",
            "The longitude cannot be null.",
        ]


class TestTemplateMessage:
    def test_alt_text_and_template_required(self) -> None:
        with pytest.raises(InvalidStateError, match="The alt text cannot be null."):
            TemplateMessage().validate()
        with pytest.raises(InvalidStateError, match="The template cannot be null."):
            TemplateMessage("alt").validate()

    def test_template_errors_propagate(self) -> None:
        message = TemplateMessage("alt", ConfirmTemplate("Confirma?"))
        with pytest.raises(InvalidStateError, match="The actions cannot be null."):
            message.validate()

    def test_template_setter_rejects_other_types(self) -> None:
        with pytest.raises(InvalidFieldError, match="The template is invalid."):
            TemplateMessage("alt", MessageAction("a", "a"))  # type: ignore[arg-type]

    def test_alt_text_limit(self) -> None:
        with pytest.raises(InvalidFieldError, match="The alt text cannot be longer than 400"):
            TemplateMessage("a" * 401)
