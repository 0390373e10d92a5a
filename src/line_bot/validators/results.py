"""Tipos de resultado de validação.

Permitem compor falhas (modo agregado) sem depender de exceções; a fronteira
pública continua levantando InvalidFieldError/InvalidStateError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from line_bot.errors import InvalidFieldError, InvalidStateError

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class ValidationIssue:
    """Falha de validação com campo e mensagem literal."""

    field: str | None
    message: str

    def to_field_error(self) -> InvalidFieldError:
        return InvalidFieldError(self.message, field=self.field)

    def to_state_error(self) -> InvalidStateError:
        return InvalidStateError(self.message, field=self.field)


@dataclass(frozen=True)
class ValidationResult:
    """Resultado agregado (todas as falhas, na ordem em que foram encontradas)."""

    issues: tuple[ValidationIssue, ...] = ()

    @classmethod
    def from_issues(cls, issues: Iterable[ValidationIssue]) -> ValidationResult:
        return cls(tuple(issues))

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def first(self) -> ValidationIssue | None:
        return self.issues[0] if self.issues else None

    @property
    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]

    def raise_for_state(self) -> None:
        """Levanta InvalidStateError com a primeira falha, se houver."""
        if self.first is not None:
            raise self.first.to_state_error()
