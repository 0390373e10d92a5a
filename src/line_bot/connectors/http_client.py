"""Cliente HTTP especializado para a LINE Messaging API.

Estende HttpClient genérico com comportamentos específicos da LINE:
- Autenticação Bearer com channel access token (validado antes de usar)
- Tratamento de erros da API ({"message", "details"}) em LineApiRequestError
- Logging estruturado sem PII (rotas como template, nunca ids ou tokens)
- Correlação via header x-line-request-id
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from line_bot.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from line_bot.connectors.line_errors import LineApiError, parse_line_error
from line_bot.connectors.line_logging import log_line_error, log_success

if TYPE_CHECKING:
    import httpx

    from line_bot.config.settings import LineSettings

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.line.me"
REQUEST_ID_HEADER = "x-line-request-id"


class LineApiRequestError(HttpError):
    """Erro HTTP com o erro da API já interpretado."""

    def __init__(self, line_error: LineApiError) -> None:
        super().__init__(
            f"LINE API error: {line_error.error_message} ({line_error.status_code})",
            status_code=line_error.status_code,
            is_retryable=not line_error.is_permanent,
        )
        self.line_error = line_error


class LineHttpClient(HttpClient):
    """Cliente HTTP para a LINE Messaging API.

    Args:
        access_token: Channel access token (Bearer)
        config: Configuração HTTP base
        base_url: URL base da API
        transport: Transport httpx opcional
    """

    def __init__(
        self,
        access_token: str,
        config: HttpClientConfig | None = None,
        base_url: str = DEFAULT_API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport=transport)
        self._access_token = access_token
        self._base_url = base_url.rstrip("/")

    async def call(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        *,
        route: str | None = None,
    ) -> dict[str, Any]:
        """Executa uma chamada autenticada e retorna o JSON da resposta.

        Args:
            method: GET, POST ou DELETE
            path: Caminho já formatado (ex: /v2/bot/message/push)
            payload: Corpo JSON (apenas POST)
            route: Rota em formato template para logs (sem ids)

        Returns:
            JSON da resposta ({} quando o corpo é vazio)

        Raises:
            ValueError: Se access_token está vazio
            LineApiRequestError: Se a API retornar erro 4xx
            HttpError: Se erro HTTP/conexão após retries
        """
        endpoint = route or path
        headers = self._build_headers()
        url = f"{self._base_url}{path}"
        response = await self.request(method, url, json=payload, headers=headers)
        return self._process_response(response, method, endpoint)

    def _build_headers(self) -> dict[str, str]:
        # Validar access_token antes de usar
        if not self._access_token or not self._access_token.strip():
            logger.error("access_token ausente ou vazio")
            raise ValueError(
                "access_token é obrigatório. "
                "Verifique se LINE_CHANNEL_ACCESS_TOKEN está configurado."
            )
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._access_token}",
        }

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        endpoint: str,
    ) -> dict[str, Any]:
        request_id = response.headers.get(REQUEST_ID_HEADER)
        try:
            response_data = response.json() if response.content else {}
        except json.JSONDecodeError as e:
            logger.error("Response JSON inválido", extra={"endpoint": endpoint})
            raise HttpError("Response JSON inválido", status_code=response.status_code) from e

        line_error = parse_line_error(response.status_code, response_data)
        if line_error:
            log_line_error(line_error, method, endpoint, request_id)
            raise LineApiRequestError(line_error)

        log_success(method, endpoint, response.status_code, request_id)
        return response_data if isinstance(response_data, dict) else {"data": response_data}


def create_line_http_client(
    settings: LineSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> LineHttpClient:
    """Factory para criar cliente LINE com config padrão.

    Args:
        settings: LineSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional

    Returns:
        Cliente HTTP configurado.
    """
    # Import local para evitar dependência circular
    from line_bot.config.settings import get_line_settings

    line = settings or get_line_settings()
    config = HttpClientConfig(
        timeout_seconds=line.request_timeout_seconds,
        max_retries=line.max_retries,
    )
    return LineHttpClient(
        access_token=line.channel_access_token,
        config=config,
        base_url=line.api_base_url,
        transport=transport,
    )
