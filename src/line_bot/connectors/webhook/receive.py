"""Parse e validação inicial do webhook (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..signature import SignatureResult, verify_line_signature
from .events import WebhookPayload

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida do webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


class InvalidPayloadError(WebhookRequestError):
    """JSON válido, mas fora do formato de eventos esperado."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> tuple[WebhookPayload, SignatureResult]:
    """Valida assinatura e parseia os eventos do webhook.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Channel secret

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
        InvalidPayloadError: Se os eventos não seguirem o formato da API

    Returns:
        (WebhookPayload, SignatureResult)
    """
    signature_result = verify_line_signature(raw_body, headers, secret)
    if not signature_result.valid:
        reason = signature_result.error or "invalid_signature"
        raise InvalidSignatureError(reason)

    try:
        data = json.loads(raw_body or b"{}")
    except json.JSONDecodeError as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(data, dict):
        raise InvalidJsonError("payload_not_object")

    try:
        payload = WebhookPayload.model_validate(data)
    except ValidationError as exc:
        raise InvalidPayloadError("invalid_events") from exc

    return payload, signature_result
