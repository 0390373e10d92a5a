"""Camada de validação e normalização das entidades outbound.

- fields: restrições por campo (setters)
- datetime_range: normalização por modo e validação cruzada min/max/initial
- composite: cardinalidade e propagação de falhas em containers
- results: ValidationIssue / ValidationResult
"""

from line_bot.validators.datetime_range import (
    INITIAL_OUT_OF_RANGE,
    MAX_NOT_GREATER_THAN_MIN,
    MIN_NOT_LESS_THAN_MAX,
    DateTimeRange,
    normalize_datetime,
)
from line_bot.validators.results import ValidationIssue, ValidationResult

__all__ = [
    "INITIAL_OUT_OF_RANGE",
    "MAX_NOT_GREATER_THAN_MIN",
    "MIN_NOT_LESS_THAN_MAX",
    "DateTimeRange",
    "ValidationIssue",
    "ValidationResult",
    "normalize_datetime",
]
