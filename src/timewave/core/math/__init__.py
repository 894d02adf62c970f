"""
Core math modules для Timewave

Чистые функции pipeline: difference wave → recursive wave → даты.
"""

# Numerical Safeguards
from timewave.core.math.numerical_safeguards import (
    is_valid_float,
    validate_int,
    validate_positive,
    validate_wave_values,
)

# Difference Wave
from timewave.core.math.difference_wave import (
    compute_base_wave,
    compute_difference_wave,
    hamming_distance,
    transition_at,
)

# Recursive Wave
from timewave.core.math.recursive_wave import (
    DEFAULT_ITERATIONS,
    SHELIAK_COMPRESSION_CONSTANT,
    generate_recursive_wave,
    interleave_scaled,
    scale_wave,
    validate_compression_range,
)

# Date Mapper
from timewave.core.math.date_mapper import (
    coerce_zero_date,
    map_wave_to_dates,
    to_contract_series,
)

__all__ = [
    # Numerical Safeguards
    "is_valid_float",
    "validate_int",
    "validate_positive",
    "validate_wave_values",
    # Difference Wave
    "compute_base_wave",
    "compute_difference_wave",
    "hamming_distance",
    "transition_at",
    # Recursive Wave
    "DEFAULT_ITERATIONS",
    "SHELIAK_COMPRESSION_CONSTANT",
    "generate_recursive_wave",
    "interleave_scaled",
    "scale_wave",
    "validate_compression_range",
    # Date Mapper
    "coerce_zero_date",
    "map_wave_to_dates",
    "to_contract_series",
]
