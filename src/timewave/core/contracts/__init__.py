"""
Contract Validation Module

Валидация JSON-контракта выходной серии (дата, значение).
"""

from .validators import (
    DatedSeriesValidator,
    SchemaLoader,
    validate_dated_series,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "DatedSeriesValidator",
    # Functions
    "validate_dated_series",
]
