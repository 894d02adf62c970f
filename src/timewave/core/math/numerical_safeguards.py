"""
Numerical Safeguards: проверки аргументов и значений волны

Модуль обеспечивает единые проверки для всех стадий pipeline:
- NaN/Inf детекция для значений волны
- Валидация целочисленных параметров (iterations, days_per_step)
- Валидация положительных float параметров (compression_constant)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в волну (InvalidArgument)
2. bool не принимается там, где ожидается int
3. Все ошибки поднимаются сразу, без подстановки fallback
"""

import math
from numbers import Real
from typing import Iterable

from timewave.core.exceptions import InvalidArgument

# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Examples:
        >>> is_valid_float(1.315)
        True
        >>> is_valid_float(float('nan'))
        False
    """
    return math.isfinite(value)


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def _to_finite_float(value: float, label: str) -> float:
    # int вне диапазона float: OverflowError при конвертации
    try:
        converted = float(value)
    except OverflowError as e:
        raise InvalidArgument(f"{label} is too large to convert to float") from e

    if not is_valid_float(converted):
        raise InvalidArgument(f"{label} must be a valid float (not NaN/Inf), got {value}")

    return converted


def validate_int(value: int, name: str, min_value: int) -> int:
    """
    Валидация целочисленного параметра с нижней границей.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (включительно)

    Returns:
        value без изменений

    Raises:
        InvalidArgument: Если value не int (bool не принимается) или < min_value
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int, got {value!r}")

    if value < min_value:
        raise InvalidArgument(f"{name} must be >= {min_value}, got {value}")

    return value


def validate_positive(value: float, name: str) -> float:
    """
    Валидация: значение должно быть конечным положительным числом.

    Raises:
        InvalidArgument: Если value не число, NaN/Inf, вне диапазона float или <= 0
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a real number, got {value!r}")

    converted = _to_finite_float(value, name)

    if converted <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")

    return converted


def validate_wave_values(values: Iterable[float], name: str = "wave") -> tuple[float, ...]:
    """
    Валидация значений волны: каждое значение должно быть конечным числом.

    Args:
        values: Значения волны
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Кортеж значений в исходном порядке (пригоден как ключ кэша)

    Raises:
        InvalidArgument: Если значение не число, NaN/Inf или вне диапазона float
    """
    checked = []
    for i, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidArgument(f"{name}[{i}] must be a real number, got {value!r}")
        _to_finite_float(value, f"{name}[{i}]")
        checked.append(value)
    return tuple(checked)
