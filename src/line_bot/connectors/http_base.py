"""Cliente HTTP base para a LINE Messaging API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({429})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP simples com retry/backoff para chamadas externas.

    Args:
        config: Configuração HTTP
        transport: Transport httpx opcional (ex: httpx.MockTransport em testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("POST", url, json=json, headers=headers)

    async def delete(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("DELETE", url, headers=headers)

    async def request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição, repetindo em 429/5xx e falhas de conexão."""
        merged_headers = {**self._config.default_headers, **(headers or {})}
        for attempt in range(self._config.max_retries + 1):
            try:
                async with httpx.AsyncClient(
                    verify=self._config.verify_ssl,
                    transport=self._transport,
                ) as client:
                    response = await client.request(
                        method,
                        url,
                        json=json,
                        headers=merged_headers,
                        timeout=self._config.timeout_seconds,
                    )
                if response.status_code in _RETRYABLE_STATUS or response.status_code >= 500:
                    raise HttpError(
                        "http_retryable_status",
                        status_code=response.status_code,
                        is_retryable=True,
                    )
                return response
            except HttpError as exc:
                if not exc.is_retryable or attempt >= self._config.max_retries:
                    raise
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
        raise HttpError("http_retry_exhausted", is_retryable=True)


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)
