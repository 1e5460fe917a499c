"""
Core math modules

Примитивы арифметики с фиксированной точкой (scaled integer).
"""

from src.core.math.fixed_point import (
    # Constants
    FIXED_FRACTION_DIGITS_DEFAULT,
    FIXED_INTEGER_DIGITS_DEFAULT,
    FIXED_TOTAL_DIGITS_MAX,
    # Layout
    fits_in_digits,
    max_units,
    scale_factor,
    validate_digits,
    # Overflow
    saturate_units,
    truncate_high_order,
    # Conversion
    decimal_to_units,
    units_to_decimal,
)

__all__ = [
    # Fixed Point — Constants
    "FIXED_FRACTION_DIGITS_DEFAULT",
    "FIXED_INTEGER_DIGITS_DEFAULT",
    "FIXED_TOTAL_DIGITS_MAX",
    # Fixed Point — Layout
    "fits_in_digits",
    "max_units",
    "scale_factor",
    "validate_digits",
    # Fixed Point — Overflow
    "saturate_units",
    "truncate_high_order",
    # Fixed Point — Conversion
    "decimal_to_units",
    "units_to_decimal",
]
