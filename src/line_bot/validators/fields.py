"""Validadores de campo aplicados no momento da atribuição.

Cada regra existe em duas formas:
- check_*: retorna ValidationIssue | None (composição / modo agregado)
- require_*: levanta InvalidFieldError antes de qualquer mutação

Mensagens seguem o formato literal da plataforma, ex.:
"The label cannot be longer than 20 characters."
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar
from urllib.parse import urlsplit

from line_bot.validators.limits import MAX_URL_LENGTH, MEDIA_URL_SCHEMES
from line_bot.validators.results import ValidationIssue

if TYPE_CHECKING:
    from collections.abc import Collection
    from enum import Enum

T = TypeVar("T")
E = TypeVar("E", bound="Enum")


def field_label(field: str) -> str:
    """Nome legível do campo usado nas mensagens (package_id -> package id)."""
    return field.replace("_", " ")


def check_text(value: object, field: str, max_length: int | None) -> ValidationIssue | None:
    label = field_label(field)
    if value is None or (isinstance(value, str) and not value.strip()):
        return ValidationIssue(field, f"The {label} cannot be null or whitespace.")
    if not isinstance(value, str):
        return ValidationIssue(field, f"The {label} must be a string.")
    if max_length is not None and len(value) > max_length:
        return ValidationIssue(
            field, f"The {label} cannot be longer than {max_length} characters."
        )
    return None


def require_text(value: object, field: str, max_length: int | None) -> str:
    """Valida string obrigatória, não vazia e (opcionalmente) com tamanho máximo.

    Raises:
        InvalidFieldError: Se None, só espaços ou acima do limite
    """
    issue = check_text(value, field, max_length)
    if issue is not None:
        raise issue.to_field_error()
    return value  # type: ignore[return-value]


def require_optional_text(value: object, field: str, max_length: int) -> str | None:
    """Como require_text, mas aceita None (campo opcional sendo limpo)."""
    if value is None:
        return None
    return require_text(value, field, max_length)


def check_required(value: object, field: str) -> ValidationIssue | None:
    if value is None:
        return ValidationIssue(field, f"The {field_label(field)} cannot be null.")
    return None


def require_not_none(value: T | None, field: str) -> T:
    issue = check_required(value, field)
    if issue is not None:
        raise issue.to_field_error()
    return value  # type: ignore[return-value]


def check_url(
    value: object,
    field: str,
    *,
    schemes: Collection[str] = MEDIA_URL_SCHEMES,
    max_length: int = MAX_URL_LENGTH,
) -> ValidationIssue | None:
    label = field_label(field)
    issue = check_required(value, field)
    if issue is not None:
        return issue
    if not isinstance(value, str):
        return ValidationIssue(field, f"The {label} must be a string.")
    if len(value) > max_length:
        return ValidationIssue(
            field, f"The {label} cannot be longer than {max_length} characters."
        )

    parts = urlsplit(value)
    scheme = parts.scheme.lower()
    if scheme not in schemes:
        allowed = ", ".join(sorted(schemes))
        return ValidationIssue(field, f"The {label} should use one of these schemes: {allowed}.")
    if scheme in ("http", "https") and not parts.netloc:
        return ValidationIssue(field, f"The {label} is not a valid url.")
    return None


def require_url(
    value: object,
    field: str,
    *,
    schemes: Collection[str] = MEDIA_URL_SCHEMES,
    max_length: int = MAX_URL_LENGTH,
) -> str:
    """Valida URL obrigatória (esquema permitido e tamanho máximo)."""
    issue = check_url(value, field, schemes=schemes, max_length=max_length)
    if issue is not None:
        raise issue.to_field_error()
    return value  # type: ignore[return-value]


def require_optional_url(
    value: object,
    field: str,
    *,
    schemes: Collection[str] = MEDIA_URL_SCHEMES,
    max_length: int = MAX_URL_LENGTH,
) -> str | None:
    if value is None:
        return None
    return require_url(value, field, schemes=schemes, max_length=max_length)


def require_enum(value: object, enum_cls: type[E], field: str) -> E:
    """Converte o token para o enum; valores fora do conjunto são rejeitados."""
    try:
        return enum_cls(value)
    except ValueError as exc:
        issue = ValidationIssue(field, f"The {field_label(field)} is invalid.")
        raise issue.to_field_error() from exc


def require_number_range(
    value: object,
    field: str,
    minimum: float,
    maximum: float,
) -> float:
    label = field_label(field)
    number = require_not_none(value, field)
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise ValidationIssue(field, f"The {label} must be a number.").to_field_error()
    if not minimum <= number <= maximum:
        raise ValidationIssue(
            field, f"The {label} must be between {minimum:g} and {maximum:g}."
        ).to_field_error()
    return number


def require_int_at_least(value: object, field: str, minimum: int) -> int:
    label = field_label(field)
    number = require_not_none(value, field)
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValidationIssue(field, f"The {label} must be an integer.").to_field_error()
    if number < minimum:
        raise ValidationIssue(
            field, f"The {label} must be at least {minimum}."
        ).to_field_error()
    return number
