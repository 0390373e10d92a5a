"""Normalização e validação cruzada de min/max/initial do datetimepicker.

Os três campos vivem em um único objeto (DateTimeRange) que revalida a
tupla completa a cada atribuição, com o valor já normalizado pelo modo.
Não existe atualização em lote: o último valor atribuído é comparado com
o que já está armazenado.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Union

from line_bot.constants import DateTimePickerMode
from line_bot.validators.results import ValidationIssue

DateTimeValue = Union[datetime, date, time]

MIN_NOT_LESS_THAN_MAX = "The min must be less than the max."
MAX_NOT_GREATER_THAN_MIN = "The max must be greater than the min."
INITIAL_OUT_OF_RANGE = "The initial must be between the min and the max."

# Data fixa usada no modo TIME (ano/mês/dia de datetime.min)
_TIME_EPOCH = datetime.min.date()


def normalize_datetime(
    value: DateTimeValue | None,
    mode: DateTimePickerMode,
) -> datetime | None:
    """Trunca o valor para os componentes relevantes ao modo.

    - DATE: mantém ano/mês/dia, zera hora/minuto/segundo
    - TIME: mantém hora/minuto/segundo, data substituída por 0001-01-01
    - DATE_TIME: inalterado

    Objetos date e time são promovidos para datetime antes. Valores com
    timezone viram hora local ingênua (o formato da API não leva offset).
    None passa inalterado. A função é idempotente.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    elif isinstance(value, time):
        moment = datetime.combine(_TIME_EPOCH, value)
    else:
        raise TypeError(f"Unsupported date/time value: {type(value).__name__}")

    if moment.tzinfo is not None:
        moment = moment.replace(tzinfo=None)

    if mode is DateTimePickerMode.DATE:
        return moment.replace(hour=0, minute=0, second=0, microsecond=0)
    if mode is DateTimePickerMode.TIME:
        return moment.replace(
            year=_TIME_EPOCH.year,
            month=_TIME_EPOCH.month,
            day=_TIME_EPOCH.day,
            microsecond=0,
        )
    return moment


def check_range(
    minimum: datetime | None,
    maximum: datetime | None,
    initial: datetime | None,
    changed: str,
) -> ValidationIssue | None:
    """Verifica a tupla (min, max, initial); `changed` define a mensagem."""
    if minimum is not None and maximum is not None and minimum >= maximum:
        message = MAX_NOT_GREATER_THAN_MIN if changed == "max" else MIN_NOT_LESS_THAN_MAX
        return ValidationIssue(changed, message)

    if initial is not None and (
        (minimum is not None and initial < minimum)
        or (maximum is not None and initial > maximum)
    ):
        return ValidationIssue(changed, INITIAL_OUT_OF_RANGE)

    return None


class DateTimeRange:
    """Dono único de min, max e initial de um datetimepicker."""

    __slots__ = ("_initial", "_max", "_min", "_mode")

    def __init__(self, mode: DateTimePickerMode) -> None:
        self._mode = DateTimePickerMode(mode)
        self._initial: datetime | None = None
        self._min: datetime | None = None
        self._max: datetime | None = None

    @property
    def mode(self) -> DateTimePickerMode:
        return self._mode

    @property
    def initial(self) -> datetime | None:
        return self._initial

    @property
    def min(self) -> datetime | None:
        return self._min

    @property
    def max(self) -> datetime | None:
        return self._max

    def set_initial(self, value: DateTimeValue | None) -> None:
        candidate = self._normalize(value, "initial")
        self._raise_if_invalid(self._min, self._max, candidate, "initial")
        self._initial = candidate

    def set_min(self, value: DateTimeValue | None) -> None:
        candidate = self._normalize(value, "min")
        self._raise_if_invalid(candidate, self._max, self._initial, "min")
        self._min = candidate

    def set_max(self, value: DateTimeValue | None) -> None:
        candidate = self._normalize(value, "max")
        self._raise_if_invalid(self._min, candidate, self._initial, "max")
        self._max = candidate

    def _normalize(self, value: DateTimeValue | None, field: str) -> datetime | None:
        try:
            return normalize_datetime(value, self._mode)
        except TypeError as exc:
            raise ValidationIssue(field, f"The {field} is invalid.").to_field_error() from exc

    @staticmethod
    def _raise_if_invalid(
        minimum: datetime | None,
        maximum: datetime | None,
        initial: datetime | None,
        changed: str,
    ) -> None:
        issue = check_range(minimum, maximum, initial, changed)
        if issue is not None:
            raise issue.to_field_error()
