"""Conector LINE - adapter de borda para a Messaging API.

Este módulo é o único ponto de IO do SDK.
Responsabilidades:
- HTTP client (retry/backoff, autenticação, erros da API)
- Webhook (assinatura, parsing de eventos)
"""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import LineApiRequestError, LineHttpClient, create_line_http_client
from .line_errors import LineApiError, is_permanent_error, parse_line_error
from .signature import SignatureResult, verify_line_signature

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "LineApiError",
    "LineApiRequestError",
    "LineHttpClient",
    "SignatureResult",
    "create_line_http_client",
    "is_permanent_error",
    "parse_line_error",
    "verify_line_signature",
]
