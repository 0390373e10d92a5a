"""Settings do canal LINE.

Configurações da Messaging API carregadas de variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Messaging API
LINE_API_BASE_URL: str = "https://api.line.me"


@dataclass(frozen=True)
class LineSettings:
    """Configurações do canal LINE.

    Attributes:
        channel_access_token: Token Bearer do canal
        channel_secret: Secret para validação HMAC dos webhooks
        api_base_url: URL base da Messaging API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em caso de erro transitório
    """

    # Credenciais
    channel_access_token: str = ""
    channel_secret: str = ""

    # API
    api_base_url: str = LINE_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    def get_endpoint(self, path: str) -> str:
        """Retorna URL completa para um caminho da API (ex: /v2/bot/message/push)."""
        return f"{self.api_base_url.rstrip('/')}/{path.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.channel_access_token:
            errors.append("LINE_CHANNEL_ACCESS_TOKEN não configurado")

        if not self.channel_secret:
            errors.append("LINE_CHANNEL_SECRET não configurado")

        if not self.api_base_url.startswith("https://"):
            errors.append("LINE_API_BASE_URL deve usar https")

        if self.request_timeout_seconds <= 0:
            errors.append("LINE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("LINE_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> LineSettings:
    """Carrega LineSettings a partir de variáveis de ambiente."""
    return LineSettings(
        channel_access_token=os.getenv("LINE_CHANNEL_ACCESS_TOKEN", ""),
        channel_secret=os.getenv("LINE_CHANNEL_SECRET", ""),
        api_base_url=os.getenv("LINE_API_BASE_URL", LINE_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("LINE_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("LINE_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_line_settings() -> LineSettings:
    """Retorna instância cacheada de LineSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
