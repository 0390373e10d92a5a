"""Validação de assinatura HMAC-SHA256 (base64) dos webhooks da LINE."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-line-signature"


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da verificação (error preenchido quando inválida)."""

    valid: bool
    error: str | None = None


def verify_line_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Compara a assinatura do header com o HMAC do corpo bruto.

    Args:
        raw_body: Corpo bruto do request (exatamente como recebido)
        headers: Headers recebidos (busca case-insensitive)
        secret: Channel secret

    Returns:
        SignatureResult
    """
    if not secret:
        return SignatureResult(valid=False, error="missing_channel_secret")

    signature = _get_header(headers, SIGNATURE_HEADER)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    try:
        received = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError):
        return SignatureResult(valid=False, error="malformed_signature")

    computed = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).digest()
    if not hmac.compare_digest(computed, received):
        return SignatureResult(valid=False, error="invalid_signature")
    return SignatureResult(valid=True)


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None
