"""Cliente de alto nível da LINE Messaging API.

Toda entidade é validada uma única vez, imediatamente antes da serialização;
se a validação falhar nenhuma requisição é feita.

Uso:
    client = LineBotClient.from_settings()
    await client.push_message(user_id, [TextMessage("Olá")])
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from line_bot.connectors.http_base import HttpError
from line_bot.connectors.http_client import LineHttpClient, create_line_http_client
from line_bot.connectors.webhook.events import UserProfile
from line_bot.errors import LineBotError
from line_bot.payload_builders import (
    build_multicast_payload,
    build_push_payload,
    build_reply_payload,
    build_rich_menu_payload,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    import httpx

    from line_bot.config.settings import LineSettings
    from line_bot.domain.messages import SendMessage
    from line_bot.domain.rich_menu import RichMenu

logger = logging.getLogger(__name__)

# Rotas da Messaging API (templates usados também como chave de log)
ROUTE_REPLY = "/v2/bot/message/reply"
ROUTE_PUSH = "/v2/bot/message/push"
ROUTE_MULTICAST = "/v2/bot/message/multicast"
ROUTE_PROFILE = "/v2/bot/profile/{user_id}"
ROUTE_RICH_MENU = "/v2/bot/richmenu"
ROUTE_RICH_MENU_ITEM = "/v2/bot/richmenu/{rich_menu_id}"
ROUTE_USER_RICH_MENU = "/v2/bot/user/{user_id}/richmenu/{rich_menu_id}"
ROUTE_LEAVE_GROUP = "/v2/bot/group/{group_id}/leave"
ROUTE_LEAVE_ROOM = "/v2/bot/room/{room_id}/leave"


class LineBotClient:
    """Fachada assíncrona para envio de mensagens e gestão de rich menus.

    Args:
        http_client: LineHttpClient já configurado
    """

    def __init__(self, http_client: LineHttpClient) -> None:
        self._http = http_client

    @classmethod
    def from_settings(
        cls,
        settings: LineSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> LineBotClient:
        """Cria cliente a partir de LineSettings (ou do ambiente)."""
        return cls(create_line_http_client(settings, transport=transport))

    async def reply_message(
        self,
        reply_token: str,
        messages: Sequence[SendMessage],
    ) -> None:
        """Responde a um evento usando o reply token (1 a 5 mensagens)."""
        payload = _build_or_log(build_reply_payload, ROUTE_REPLY, reply_token, messages)
        await self._http.call("POST", ROUTE_REPLY, payload)

    async def push_message(self, to: str, messages: Sequence[SendMessage]) -> None:
        """Envia mensagens para um usuário, grupo ou sala (1 a 5 mensagens)."""
        payload = _build_or_log(build_push_payload, ROUTE_PUSH, to, messages)
        await self._http.call("POST", ROUTE_PUSH, payload)

    async def multicast(self, to: Sequence[str], messages: Sequence[SendMessage]) -> None:
        """Envia as mesmas mensagens para até 150 usuários."""
        payload = _build_or_log(build_multicast_payload, ROUTE_MULTICAST, to, messages)
        await self._http.call("POST", ROUTE_MULTICAST, payload)

    async def get_profile(self, user_id: str) -> UserProfile:
        _require_id(user_id, "user_id")
        data = await self._http.call(
            "GET",
            ROUTE_PROFILE.format(user_id=user_id),
            route=ROUTE_PROFILE,
        )
        return UserProfile.model_validate(data)

    async def create_rich_menu(self, rich_menu: RichMenu) -> str:
        """Cria um rich menu e retorna o richMenuId gerado pela plataforma.

        Raises:
            InvalidStateError: Se o rich menu não estiver pronto para envio
            HttpError: Se a resposta não contiver richMenuId
        """
        payload = _build_or_log(build_rich_menu_payload, ROUTE_RICH_MENU, rich_menu)
        data = await self._http.call("POST", ROUTE_RICH_MENU, payload)
        rich_menu_id = data.get("richMenuId")
        if not isinstance(rich_menu_id, str) or not rich_menu_id:
            logger.error("richMenuId ausente na resposta", extra={"endpoint": ROUTE_RICH_MENU})
            raise HttpError("Resposta sem richMenuId")
        return rich_menu_id

    async def delete_rich_menu(self, rich_menu_id: str) -> None:
        _require_id(rich_menu_id, "rich_menu_id")
        await self._http.call(
            "DELETE",
            ROUTE_RICH_MENU_ITEM.format(rich_menu_id=rich_menu_id),
            route=ROUTE_RICH_MENU_ITEM,
        )

    async def link_rich_menu_to_user(self, user_id: str, rich_menu_id: str) -> None:
        _require_id(user_id, "user_id")
        _require_id(rich_menu_id, "rich_menu_id")
        await self._http.call(
            "POST",
            ROUTE_USER_RICH_MENU.format(user_id=user_id, rich_menu_id=rich_menu_id),
            route=ROUTE_USER_RICH_MENU,
        )

    async def leave_group(self, group_id: str) -> None:
        _require_id(group_id, "group_id")
        await self._http.call(
            "POST",
            ROUTE_LEAVE_GROUP.format(group_id=group_id),
            route=ROUTE_LEAVE_GROUP,
        )

    async def leave_room(self, room_id: str) -> None:
        _require_id(room_id, "room_id")
        await self._http.call(
            "POST",
            ROUTE_LEAVE_ROOM.format(room_id=room_id),
            route=ROUTE_LEAVE_ROOM,
        )


def _build_or_log(
    builder: Callable[..., dict[str, Any]],
    route: str,
    *args: Any,
) -> dict[str, Any]:
    """Constrói o corpo da requisição, logando falhas de validação sem PII."""
    try:
        return builder(*args)
    except LineBotError as exc:
        logger.warning(
            "Entidade inválida, requisição não enviada",
            extra={"endpoint": route, "field": exc.field, "error_type": type(exc).__name__},
        )
        raise


def _require_id(value: str, name: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{name} é obrigatório")
