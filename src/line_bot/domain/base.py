"""Base das entidades validáveis (mensagens, ações, templates, rich menu)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from line_bot.validators.results import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterator

    from line_bot.validators.results import ValidationIssue


class Validatable(ABC):
    """Entidade com checagem de prontidão no momento do envio.

    Subclasses implementam iter_issues() como gerador na ordem em que as
    regras devem ser avaliadas. validate() é fail-fast e sem efeitos
    colaterais; collect_issues() é o modo agregado opcional.
    """

    @abstractmethod
    def iter_issues(self) -> Iterator[ValidationIssue]:
        """Gera as falhas da entidade (e de seus filhos), em ordem."""

    def validate(self) -> None:
        """Valida a entidade.

        Raises:
            InvalidStateError: Com a primeira exigência não atendida
        """
        issue = next(self.iter_issues(), None)
        if issue is not None:
            raise issue.to_state_error()

    def collect_issues(self) -> ValidationResult:
        """Retorna todas as falhas em vez de parar na primeira."""
        return ValidationResult.from_issues(self.iter_issues())
