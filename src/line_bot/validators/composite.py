"""Validação de containers (colunas, ações, áreas).

Os geradores são preguiçosos: validate() consome apenas até a primeira
falha (fail-fast); collect_issues() consome tudo (modo agregado).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

from line_bot.validators.fields import field_label
from line_bot.validators.results import ValidationIssue

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sized

T = TypeVar("T")


class SupportsIssues(Protocol):
    def iter_issues(self) -> Iterator[ValidationIssue]: ...


def iter_cardinality_issues(
    items: Sized | None,
    field: str,
    minimum: int,
    maximum: int,
) -> Iterator[ValidationIssue]:
    """Checa referência não nula e limites de quantidade do container."""
    label = field_label(field)
    if items is None:
        yield ValidationIssue(field, f"The {label} cannot be null.")
        return

    count = len(items)
    if minimum == maximum:
        if count != minimum:
            yield ValidationIssue(field, f"The number of {label} must be {minimum}.")
    elif count < minimum:
        yield ValidationIssue(field, f"The minimum number of {label} is {minimum}.")
    elif count > maximum:
        yield ValidationIssue(field, f"The maximum number of {label} is {maximum}.")


def iter_child_issues(
    children: Iterable[SupportsIssues | None],
    field: str,
) -> Iterator[ValidationIssue]:
    """Propaga falhas de cada filho, na ordem do container."""
    label = field_label(field)
    for child in children:
        if child is None:
            yield ValidationIssue(field, f"The {label} cannot contain null items.")
            continue
        yield from child.iter_issues()


def require_items(
    items: Iterable[T] | None,
    field: str,
    maximum: int,
    item_type: type[T],
) -> list[T]:
    """Copia a sequência atribuída a um container (referência própria).

    Raises:
        InvalidFieldError: Se None, com itens nulos/de outro tipo ou acima
            do máximo permitido
    """
    label = field_label(field)
    if items is None:
        raise ValidationIssue(field, f"The {label} cannot be null.").to_field_error()

    owned = list(items)
    for item in owned:
        if item is None:
            raise ValidationIssue(
                field, f"The {label} cannot contain null items."
            ).to_field_error()
        if not isinstance(item, item_type):
            raise ValidationIssue(
                field, f"The {label} can only contain {item_type.__name__} items."
            ).to_field_error()

    if len(owned) > maximum:
        raise ValidationIssue(
            field, f"The maximum number of {label} is {maximum}."
        ).to_field_error()
    return owned
