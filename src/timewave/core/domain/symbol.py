"""
Symbol: 64 гексаграммы в порядке King Wen

Фиксированная таблица 6-битных кодов (не вычисляется). Каждый код читается
слева направо снизу вверх: первый символ: нижняя линия, последний: верхняя.
"1": сплошная (yang) линия, "0": прерывистая (yin).

Порядок битов не влияет на difference wave: Hamming distance инвариантна
относительно одинаковой перестановки позиций в обоих кодах.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются при импорте модуля):
1. Ровно 64 символа
2. Все коды уникальны
3. Каждый код: ровно 6 символов из {0, 1}
"""

from collections import Counter
from typing import Final, Sequence

from pydantic import BaseModel, Field

from timewave.core.exceptions import DataIntegrityError


# =============================================================================
# CONSTANTS
# =============================================================================

SEQUENCE_LENGTH: Final[int] = 64
CODE_WIDTH: Final[int] = 6

# King Wen order, по 8 гексаграмм в строке (1-8, 9-16, ...)
KING_WEN_CODES: Final[tuple[str, ...]] = (
    "111111", "000000", "100010", "010001", "111010", "010111", "010000", "000010",
    "111011", "110111", "111000", "000111", "101111", "111101", "001000", "000100",
    "100110", "011001", "110000", "000011", "100101", "101001", "000001", "100000",
    "100111", "111001", "100001", "011110", "010010", "101101", "001110", "011100",
    "001111", "111100", "000101", "101000", "101011", "110101", "001010", "010100",
    "110001", "100011", "111110", "011111", "000110", "011000", "010110", "011010",
    "101110", "011101", "100100", "001001", "001011", "110100", "101100", "001101",
    "011011", "110110", "010011", "110010", "110011", "001100", "101010", "010101",
)


# =============================================================================
# MODEL
# =============================================================================


class Symbol(BaseModel):
    """
    Один элемент эталонной последовательности.

    position: порядковый номер в King Wen (1..64), code: 6-битный код.
    """

    position: int = Field(..., ge=1, le=SEQUENCE_LENGTH, description="Номер в последовательности (1..64)")
    code: str = Field(..., pattern=r"^[01]{6}$", description="6-битный код, нижняя линия первой")

    model_config = {"frozen": True}

    @property
    def value(self) -> int:
        """Код как целое число по основанию 2 (0..63)."""
        return int(self.code, 2)

    @property
    def lines(self) -> tuple[int, ...]:
        """Линии снизу вверх: 1: yang, 0: yin."""
        return tuple(int(bit) for bit in self.code)


# =============================================================================
# LOADING
# =============================================================================


def _is_binary_code(code: object) -> bool:
    return (
        isinstance(code, str)
        and len(code) == CODE_WIDTH
        and all(bit in "01" for bit in code)
    )


def load_symbol_sequence(codes: Sequence[str]) -> tuple[Symbol, ...]:
    """
    Построение последовательности символов из таблицы кодов с проверкой целостности.

    Args:
        codes: Упорядоченная таблица 6-битных кодов

    Returns:
        Кортеж Symbol с позициями 1..len(codes)

    Raises:
        DataIntegrityError: Если таблица не содержит ровно 64 уникальных
            6-битных кода
    """
    if len(codes) != SEQUENCE_LENGTH:
        raise DataIntegrityError(
            f"Symbol table must contain exactly {SEQUENCE_LENGTH} codes, got {len(codes)}"
        )

    for i, code in enumerate(codes):
        if not _is_binary_code(code):
            raise DataIntegrityError(
                f"Symbol table entry {i + 1} must be {CODE_WIDTH} binary characters, got {code!r}"
            )

    if len(set(codes)) != SEQUENCE_LENGTH:
        duplicates = sorted(code for code, count in Counter(codes).items() if count > 1)
        raise DataIntegrityError(f"Symbol table contains duplicate codes: {duplicates}")

    return tuple(Symbol(position=i + 1, code=code) for i, code in enumerate(codes))


# Проверка целостности выполняется при импорте
KING_WEN_SEQUENCE: Final[tuple[Symbol, ...]] = load_symbol_sequence(KING_WEN_CODES)


def symbol_sequence() -> tuple[Symbol, ...]:
    """
    Эталонная последовательность из 64 символов (King Wen order).

    Детерминирована: каждый вызов возвращает один и тот же кортеж.
    """
    return KING_WEN_SEQUENCE
