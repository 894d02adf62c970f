"""Timewave pipeline: SymbolSequence → Difference Wave → Recursive Wave → Dates

Линейный pipeline из чистых функций core.math, собранный в один объект
с frozen конфигурацией. Состояния между вызовами нет: повторный evaluate
с теми же параметрами возвращает идентичный результат (из кэша стадий).
"""

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any, Final

from timewave.core.contracts import validate_dated_series
from timewave.core.domain.dated_point import DatedPoint
from timewave.core.domain.symbol import Symbol, symbol_sequence
from timewave.core.math.date_mapper import DateLike, coerce_zero_date, map_wave_to_dates, to_contract_series
from timewave.core.math.difference_wave import compute_base_wave
from timewave.core.math.numerical_safeguards import validate_int, validate_positive
from timewave.core.math.recursive_wave import (
    DEFAULT_ITERATIONS,
    SHELIAK_COMPRESSION_CONSTANT,
    generate_recursive_wave,
    validate_compression_range,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Zero point по умолчанию (McKenna)
DEFAULT_ZERO_DATE: Final[dt.date] = dt.date(2012, 12, 21)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TimewaveConfig:
    """Конфигурация pipeline.

    Параметры проверяются при создании теми же правилами, что и в core.math.
    """

    iterations: int = DEFAULT_ITERATIONS
    compression_constant: float = SHELIAK_COMPRESSION_CONSTANT
    days_per_step: int = 1
    zero_date: dt.date = DEFAULT_ZERO_DATE

    def __post_init__(self) -> None:
        validate_int(self.iterations, "iterations", min_value=0)
        compression_constant = validate_positive(self.compression_constant, "compression_constant")
        validate_compression_range(self.iterations, compression_constant)
        validate_int(self.days_per_step, "days_per_step", min_value=1)
        # frozen dataclass: нормализация через object.__setattr__
        object.__setattr__(self, "zero_date", coerce_zero_date(self.zero_date))


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TimewaveResult:
    """Результат pipeline: все промежуточные стадии и итоговая серия."""

    symbols: tuple[Symbol, ...]
    difference_wave: tuple[int, ...]
    recursive_wave: tuple[float, ...]
    dated_points: tuple[DatedPoint, ...]
    zero_date: dt.date
    days_per_step: int = 1

    def to_contract(self) -> list[dict[str, Any]]:
        """Серия {"date", "value"}, проверенная по dated_series.json."""
        series = to_contract_series(self.dated_points)
        validate_dated_series(series)
        return series


# =============================================================================
# PIPELINE
# =============================================================================


class TimewavePipeline:
    """Pipeline построения timewave.

    Порядок стадий:
    1. symbol_sequence(): 64 символа King Wen
    2. compute_base_wave(): 63 Hamming distance
    3. generate_recursive_wave(): 63 * iterations значений
    4. map_wave_to_dates(): привязка к zero_date
    """

    def __init__(self, config: TimewaveConfig | None = None):
        """Инициализация pipeline.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or TimewaveConfig()

    def evaluate(self, zero_date: DateLike | None = None) -> TimewaveResult:
        """Запуск pipeline.

        Args:
            zero_date: zero point (опционально, иначе config.zero_date)

        Returns:
            TimewaveResult

        Raises:
            InvalidArgument: если zero_date невалидна или слишком ранняя
        """
        cfg = self.config
        anchor = cfg.zero_date if zero_date is None else coerce_zero_date(zero_date)

        symbols = symbol_sequence()
        difference_wave = compute_base_wave()
        logger.debug("difference wave: %d values from %d symbols", len(difference_wave), len(symbols))

        recursive_wave = generate_recursive_wave(cfg.iterations, cfg.compression_constant)
        logger.debug(
            "recursive wave: %d values (iterations=%d, compression_constant=%s)",
            len(recursive_wave),
            cfg.iterations,
            cfg.compression_constant,
        )

        dated_points = map_wave_to_dates(recursive_wave, anchor, cfg.days_per_step)
        logger.info(
            "timewave anchored to %s: %d points from %s to %s",
            anchor.isoformat(),
            len(dated_points),
            dated_points[0].date.isoformat(),
            dated_points[-1].date.isoformat(),
        )

        return TimewaveResult(
            symbols=symbols,
            difference_wave=difference_wave,
            recursive_wave=recursive_wave,
            dated_points=dated_points,
            zero_date=anchor,
            days_per_step=cfg.days_per_step,
        )
