"""
Timewave Zero: детерминированная novelty wave из последовательности King Wen.

Pipeline: SymbolSequence → Difference Wave → Recursive Wave → Date Mapper.
"""

from timewave.core.domain import DatedPoint, Symbol, symbol_sequence
from timewave.core.exceptions import DataIntegrityError, InvalidArgument
from timewave.core.math import (
    compute_base_wave,
    compute_difference_wave,
    generate_recursive_wave,
    map_wave_to_dates,
)
from timewave.pipeline import DEFAULT_ZERO_DATE, TimewaveConfig, TimewavePipeline, TimewaveResult

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "DataIntegrityError",
    "InvalidArgument",
    # Domain
    "DatedPoint",
    "Symbol",
    "symbol_sequence",
    # Operations
    "compute_base_wave",
    "compute_difference_wave",
    "generate_recursive_wave",
    "map_wave_to_dates",
    # Pipeline
    "DEFAULT_ZERO_DATE",
    "TimewaveConfig",
    "TimewavePipeline",
    "TimewaveResult",
]
