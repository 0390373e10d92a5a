"""Exceções do SDK.

Duas categorias, ambas síncronas e nunca capturadas internamente:

- InvalidFieldError: levantada por um setter antes de armazenar o valor.
- InvalidStateError: levantada por validate() (ou conversões) quando o
  conjunto de campos atribuídos ainda não está pronto para envio.

As mensagens fazem parte do contrato público (consumidores comparam o texto).
"""

from __future__ import annotations


class LineBotError(Exception):
    """Base para erros de validação do SDK."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidFieldError(LineBotError):
    """Valor atribuído viola uma restrição do campo ou de campos irmãos."""


class InvalidStateError(LineBotError):
    """Entidade incompleta ou container fora da cardinalidade permitida."""


__all__ = ["InvalidFieldError", "InvalidStateError", "LineBotError"]
