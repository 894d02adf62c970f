"""
Domain models and value objects.

Contains the fixed symbol table (Symbol, King Wen order) and DatedPoint.
"""

from timewave.core.domain.dated_point import DatedPoint
from timewave.core.domain.symbol import (
    CODE_WIDTH,
    KING_WEN_CODES,
    KING_WEN_SEQUENCE,
    SEQUENCE_LENGTH,
    Symbol,
    load_symbol_sequence,
    symbol_sequence,
)

__all__ = [
    # Symbol table
    "CODE_WIDTH",
    "KING_WEN_CODES",
    "KING_WEN_SEQUENCE",
    "SEQUENCE_LENGTH",
    "Symbol",
    "load_symbol_sequence",
    "symbol_sequence",
    # Dated output
    "DatedPoint",
]
