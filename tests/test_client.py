"""Testes do LineBotClient com httpx.MockTransport (sem rede)."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from line_bot import (
    InvalidStateError,
    LineBotClient,
    MessageAction,
    RichMenu,
    RichMenuArea,
    RichMenuBounds,
    TextMessage,
    VideoMessage,
)
from line_bot.config.settings import LineSettings
from line_bot.connectors import HttpError, LineApiRequestError

SETTINGS = LineSettings(channel_access_token="token", channel_secret="secret", max_retries=0)


class Recorder:
    """Handler que grava as requisições e devolve respostas configuradas."""

    def __init__(self, status_code: int = 200, body: dict | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._body = body if body is not None else {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status_code, json=self._body)

    def client(self) -> LineBotClient:
        return LineBotClient.from_settings(SETTINGS, transport=httpx.MockTransport(self))


def _menu() -> RichMenu:
    area = RichMenuArea(RichMenuBounds(0, 0, 2500, 1686), MessageAction("Oi", "oi"))
    return RichMenu("Menu", "Abrir", [area])


class TestMessaging:
    @pytest.mark.asyncio
    async def test_push_message(self) -> None:
        recorder = Recorder()
        await recorder.client().push_message("U1", [TextMessage("Olá")])

        request = recorder.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v2/bot/message/push"
        assert json.loads(request.content) == {
            "to": "U1",
            "messages": [{"type": "text", "text": "Olá"}],
        }

    @pytest.mark.asyncio
    async def test_reply_message(self) -> None:
        recorder = Recorder()
        await recorder.client().reply_message("reply-1", [TextMessage("a"), TextMessage("b")])
        body = json.loads(recorder.requests[0].content)
        assert body["replyToken"] == "reply-1"
        assert len(body["messages"]) == 2

    @pytest.mark.asyncio
    async def test_multicast(self) -> None:
        recorder = Recorder()
        await recorder.client().multicast(["U1", "U2"], [TextMessage("a")])
        assert recorder.requests[0].url.path == "/v2/bot/message/multicast"

    @pytest.mark.asyncio
    async def test_invalid_message_sends_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        recorder = Recorder()
        with caplog.at_level(logging.WARNING, logger="line_bot.client"):
            with pytest.raises(InvalidStateError, match="The preview url cannot be null."):
                await recorder.client().push_message(
                    "U1", [VideoMessage("https://example.com/v.mp4")]
                )
        assert recorder.requests == []
        assert "Entidade inválida" in caplog.text

    @pytest.mark.asyncio
    async def test_argument_errors_before_io(self) -> None:
        recorder = Recorder()
        client = recorder.client()
        with pytest.raises(ValueError):
            await client.push_message("U1", [])
        with pytest.raises(ValueError):
            await client.reply_message("", [TextMessage("a")])
        with pytest.raises(ValueError):
            await client.get_profile(" ")
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_api_error_propagates(self) -> None:
        recorder = Recorder(400, {"message": "Invalid reply token"})
        with pytest.raises(LineApiRequestError, match="Invalid reply token"):
            await recorder.client().reply_message("expired", [TextMessage("a")])


class TestProfileAndGroups:
    @pytest.mark.asyncio
    async def test_get_profile(self) -> None:
        recorder = Recorder(200, {"userId": "U1", "displayName": "Ana", "language": "pt"})
        profile = await recorder.client().get_profile("U1")

        assert recorder.requests[0].url.path == "/v2/bot/profile/U1"
        assert profile.user_id == "U1"
        assert profile.display_name == "Ana"
        assert profile.picture_url is None

    @pytest.mark.asyncio
    async def test_leave_group_and_room(self) -> None:
        recorder = Recorder()
        client = recorder.client()
        await client.leave_group("G1")
        await client.leave_room("R1")
        assert [r.url.path for r in recorder.requests] == [
            "/v2/bot/group/G1/leave",
            "/v2/bot/room/R1/leave",
        ]


class TestRichMenus:
    @pytest.mark.asyncio
    async def test_create_rich_menu(self) -> None:
        recorder = Recorder(200, {"richMenuId": "richmenu-1"})
        rich_menu_id = await recorder.client().create_rich_menu(_menu())

        assert rich_menu_id == "richmenu-1"
        body = json.loads(recorder.requests[0].content)
        assert body["size"] == {"width": 2500, "height": 1686}
        assert body["areas"][0]["action"] == {"type": "message", "label": "Oi", "text": "oi"}

    @pytest.mark.asyncio
    async def test_create_rich_menu_without_id(self) -> None:
        recorder = Recorder(200, {})
        with pytest.raises(HttpError, match="richMenuId"):
            await recorder.client().create_rich_menu(_menu())

    @pytest.mark.asyncio
    async def test_invalid_rich_menu_sends_nothing(self) -> None:
        recorder = Recorder()
        with pytest.raises(InvalidStateError, match="The areas cannot be null."):
            await recorder.client().create_rich_menu(RichMenu("Menu", "Abrir"))
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_delete_and_link(self) -> None:
        recorder = Recorder()
        client = recorder.client()
        await client.delete_rich_menu("richmenu-1")
        await client.link_rich_menu_to_user("U1", "richmenu-1")

        delete, link = recorder.requests
        assert (delete.method, delete.url.path) == ("DELETE", "/v2/bot/richmenu/richmenu-1")
        assert (link.method, link.url.path) == ("POST", "/v2/bot/user/U1/richmenu/richmenu-1")
