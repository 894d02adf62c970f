"""
Difference Wave: Hamming distance между соседними символами

Элемент i волны: количество позиций (из 6), в которых различаются
коды символа i и символа i+1.

ФОРМУЛА:
    diff[i] = Σ_j [code_i[j] != code_{i+1}[j]],  j = 0..5

ИНВАРИАНТЫ:
1. len(diff) == len(sequence) - 1 (63 для King Wen)
2. 0 <= diff[i] <= 6
3. Чистая функция: одинаковый вход → одинаковый выход
"""

from functools import lru_cache
from typing import Sequence, Union

from timewave.core.domain.symbol import CODE_WIDTH, KING_WEN_SEQUENCE, Symbol
from timewave.core.exceptions import InvalidArgument

SymbolLike = Union[Symbol, str]


def _code_of(item: SymbolLike, index: int) -> str:
    code = item.code if isinstance(item, Symbol) else item
    if not isinstance(code, str) or len(code) != CODE_WIDTH or any(bit not in "01" for bit in code):
        raise InvalidArgument(
            f"sequence[{index}] must be {CODE_WIDTH} binary characters, got {code!r}"
        )
    return code


def hamming_distance(a: str, b: str) -> int:
    """
    Количество различающихся позиций двух кодов одинаковой длины.

    Examples:
        >>> hamming_distance("111111", "000000")
        6
        >>> hamming_distance("111111", "101111")
        1
    """
    if len(a) != len(b):
        raise InvalidArgument(f"codes must have equal length, got {len(a)} and {len(b)}")
    return sum(1 for x, y in zip(a, b) if x != y)


def compute_difference_wave(sequence: Sequence[SymbolLike]) -> tuple[int, ...]:
    """
    Difference wave для произвольной последовательности 6-битных кодов.

    Args:
        sequence: Символы (Symbol) или их коды (str), минимум 2 элемента

    Returns:
        Кортеж из len(sequence) - 1 целых в [0, 6]

    Raises:
        InvalidArgument: Если элементов меньше 2 или код не 6-битный

    Examples:
        >>> compute_difference_wave(["111111", "101111", "101110"])
        (1, 1)
    """
    if len(sequence) < 2:
        raise InvalidArgument(f"sequence must contain at least 2 entries, got {len(sequence)}")

    codes = [_code_of(item, i) for i, item in enumerate(sequence)]
    return tuple(hamming_distance(codes[i], codes[i + 1]) for i in range(len(codes) - 1))


@lru_cache(maxsize=1)
def compute_base_wave() -> tuple[int, ...]:
    """Difference wave эталонной последовательности King Wen (63 значения)."""
    return compute_difference_wave(KING_WEN_SEQUENCE)


def transition_at(
    index: int,
    sequence: Sequence[Symbol] = KING_WEN_SEQUENCE,
) -> tuple[Symbol, Symbol]:
    """
    Пара символов, между которыми измерен элемент difference wave с индексом index.

    Raises:
        InvalidArgument: Если index вне [0, len(sequence) - 2]
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgument(f"index must be an int, got {index!r}")

    last = len(sequence) - 2
    if not 0 <= index <= last:
        raise InvalidArgument(f"index must be in [0, {last}], got {index}")

    return sequence[index], sequence[index + 1]
