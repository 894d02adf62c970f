"""
Recursive Wave: многомасштабная волна через interleave масштабированных копий

Базовая волна (difference wave, 63 значения) многократно перемежается
со своими копиями, уменьшенными в compression_constant^k раз.

АЛГОРИТМ:
    base = compute_base_wave()
    wave = base
    for k in 1 .. iterations - 1:
        scaled = base * compression_constant^(-k)
        wave = interleave_scaled(wave, scaled)

ИНВАРИАНТЫ:
1. len(wave) == 63 * iterations для iterations >= 1
2. iterations == 0 и iterations == 1 дают одинаковый результат
   (цикл выполняется iterations - 1 раз; поведение сохранено намеренно)
3. Значения неотрицательны: base >= 0, scale_factor > 0
4. Результат детерминирован и кэшируется по (iterations, compression_constant)
"""

import math
from functools import lru_cache
from typing import Final, Sequence

from timewave.core.exceptions import InvalidArgument
from timewave.core.math.difference_wave import compute_base_wave
from timewave.core.math.numerical_safeguards import is_valid_float, validate_int, validate_positive

# =============================================================================
# CONSTANTS
# =============================================================================

# Константа временного сжатия (McKenna). Параметр модели, не выводится.
SHELIAK_COMPRESSION_CONSTANT: Final[float] = 1.315

DEFAULT_ITERATIONS: Final[int] = 10


# =============================================================================
# PRIMITIVES
# =============================================================================


def scale_wave(base: Sequence[float], k: int, compression_constant: float = SHELIAK_COMPRESSION_CONSTANT) -> list[float]:
    """
    Копия base, умноженная на compression_constant^(-k).

    Examples:
        >>> scale_wave([2, 4], 0)
        [2.0, 4.0]
    """
    try:
        scale_factor = compression_constant ** (-k)
    except OverflowError as e:
        raise InvalidArgument(
            f"compression_constant {compression_constant!r} overflows float at layer {k}"
        ) from e

    scaled = [v * scale_factor for v in base]
    if not all(is_valid_float(v) for v in scaled):
        raise InvalidArgument(
            f"compression_constant {compression_constant!r} overflows float at layer {k}"
        )
    return scaled


def validate_compression_range(iterations: int, compression_constant: float) -> None:
    """
    Проверка, что самый крупный слой волны представим во float.

    Для compression_constant < 1 множитель растёт с k, максимум на k = iterations - 1;
    иначе максимум на k = 1.

    Raises:
        InvalidArgument: Если масштабированный слой выходит за диапазон float
    """
    if iterations < 2:
        return

    k_max = iterations - 1 if compression_constant < 1 else 1
    scale_wave([max(compute_base_wave())], k_max, compression_constant)


def interleave_scaled(original: Sequence[float], scaled: Sequence[float]) -> list[float]:
    """
    Детерминированное слияние original и scaled.

    Элементы scaled распределяются примерно равномерно между элементами
    original с шагом interval = len(original) / len(scaled). После original[i]
    вставляется scaled[insert_index], если floor(i / interval) == insert_index.
    Относительный порядок обеих последовательностей сохраняется.

    Если len(original) < len(scaled), хвост scaled, до которого не дошёл
    проход по original, отбрасывается.

    Examples:
        >>> interleave_scaled([1, 2, 3, 4], [10, 20])
        [1, 10, 2, 3, 20, 4]
    """
    if not scaled:
        return list(original)

    result: list[float] = []
    interval = len(original) / len(scaled)

    insert_index = 0
    for i, value in enumerate(original):
        result.append(value)
        if math.floor(i / interval) == insert_index and insert_index < len(scaled):
            result.append(scaled[insert_index])
            insert_index += 1

    return result


# =============================================================================
# RECURSIVE WAVE
# =============================================================================


@lru_cache(maxsize=32)
def _generate(iterations: int, compression_constant: float) -> tuple[float, ...]:
    base = [float(v) for v in compute_base_wave()]
    wave = list(base)

    for k in range(1, iterations):
        wave = interleave_scaled(wave, scale_wave(base, k, compression_constant))

    return tuple(wave)


def generate_recursive_wave(
    iterations: int = DEFAULT_ITERATIONS,
    compression_constant: float = SHELIAK_COMPRESSION_CONSTANT,
) -> tuple[float, ...]:
    """
    Многомасштабная (fractal) волна из difference wave King Wen.

    Args:
        iterations: Количество слоёв (>= 0, default: 10). 0 и 1 эквивалентны.
        compression_constant: Коэффициент сжатия амплитуды слоя (default: 1.315)

    Returns:
        Кортеж из 63 * max(iterations, 1) неотрицательных значений

    Raises:
        InvalidArgument: Если iterations не int или < 0, либо
            compression_constant не конечное положительное число или
            слой compression_constant^(-k) выходит за диапазон float

    Examples:
        >>> len(generate_recursive_wave(3))
        189
        >>> generate_recursive_wave(0) == generate_recursive_wave(1)
        True
    """
    validate_int(iterations, "iterations", min_value=0)
    compression_constant = validate_positive(compression_constant, "compression_constant")
    validate_compression_range(iterations, compression_constant)
    return _generate(iterations, compression_constant)
