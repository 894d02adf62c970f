"""
Date Mapper: привязка волны к календарным датам

Волна разворачивается назад от zero_date: последняя точка получает дату
zero_date - days_per_step, т.е. zero point лежит на один шаг ПОСЛЕ последнего
элемента. Поведение сохранено намеренно.

ФОРМУЛЫ:
    total_days = len(wave) * days_per_step
    start_date = zero_date - total_days
    date[i] = start_date + i * days_per_step

Арифметика дат календарная (datetime.timedelta): учитываются длины месяцев
и високосные годы.
"""

import datetime as dt
from functools import lru_cache
from typing import Any, Iterable, Sequence, Union

from timewave.core.domain.dated_point import DatedPoint
from timewave.core.exceptions import InvalidArgument
from timewave.core.math.numerical_safeguards import validate_int, validate_wave_values

DateLike = Union[dt.date, dt.datetime, str]


def coerce_zero_date(zero_date: DateLike) -> dt.date:
    """
    Приведение zero_date к datetime.date.

    Принимает date, datetime (берётся календарная дата) или ISO-строку YYYY-MM-DD.

    Raises:
        InvalidArgument: Если значение не является валидной календарной датой

    Examples:
        >>> coerce_zero_date("2012-12-21")
        datetime.date(2012, 12, 21)
    """
    # datetime: подкласс date, проверяется первым
    if isinstance(zero_date, dt.datetime):
        return zero_date.date()

    if isinstance(zero_date, dt.date):
        return zero_date

    if isinstance(zero_date, str):
        try:
            return dt.datetime.strptime(zero_date, "%Y-%m-%d").date()
        except ValueError as e:
            raise InvalidArgument(f"zero_date must be a valid YYYY-MM-DD date, got {zero_date!r}") from e

    raise InvalidArgument(f"zero_date must be a date, datetime or ISO string, got {zero_date!r}")


@lru_cache(maxsize=16)
def _map(wave: tuple[float, ...], zero_date: dt.date, days_per_step: int) -> tuple[DatedPoint, ...]:
    total_days = len(wave) * days_per_step

    try:
        start_date = zero_date - dt.timedelta(days=total_days)
    except OverflowError as e:
        raise InvalidArgument(
            f"zero_date {zero_date.isoformat()} is too early for {len(wave)} steps "
            f"of {days_per_step} day(s)"
        ) from e

    return tuple(
        DatedPoint(date=start_date + dt.timedelta(days=i * days_per_step), value=value)
        for i, value in enumerate(wave)
    )


def map_wave_to_dates(
    wave: Iterable[float],
    zero_date: DateLike,
    days_per_step: int = 1,
) -> tuple[DatedPoint, ...]:
    """
    Привязка значений волны к датам, заканчивающимся за один шаг до zero_date.

    Args:
        wave: Значения волны (конечные числа)
        zero_date: Точка отсчёта (date, datetime или YYYY-MM-DD)
        days_per_step: Дней между соседними точками (> 0, default: 1)

    Returns:
        Кортеж DatedPoint той же длины, что и wave; даты строго возрастают
        с шагом days_per_step

    Raises:
        InvalidArgument: Если days_per_step не int или <= 0, zero_date
            невалидна, значение волны NaN/Inf, или start_date раньше 0001-01-01

    Examples:
        >>> points = map_wave_to_dates([1, 2, 3], "2020-01-10")
        >>> [p.date.isoformat() for p in points]
        ['2020-01-07', '2020-01-08', '2020-01-09']
    """
    validate_int(days_per_step, "days_per_step", min_value=1)
    values = validate_wave_values(wave)
    return _map(values, coerce_zero_date(zero_date), days_per_step)


def to_contract_series(points: Sequence[DatedPoint]) -> list[dict[str, Any]]:
    """Сериализация точек в список {"date": "YYYY-MM-DD", "value": number}."""
    return [point.to_contract() for point in points]
