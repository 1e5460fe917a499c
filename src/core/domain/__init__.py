"""
Domain models and value objects.

Contains the fixed-point value type and the subroutine status codes.
"""

from src.core.domain.fixed_decimal import (
    FixedDecimal,
    FixedDecimalFormatError,
    FixedDecimalInput,
    FixedPointFormat,
)
from src.core.domain.status import (
    STATUS_CODE_DIGITS,
    STATUS_CODE_MAX,
    STATUS_CODE_MIN,
    StatusCode,
    validate_status_code,
)

__all__ = [
    # Fixed decimal
    "FixedDecimal",
    "FixedDecimalFormatError",
    "FixedDecimalInput",
    "FixedPointFormat",
    # Status codes
    "STATUS_CODE_DIGITS",
    "STATUS_CODE_MAX",
    "STATUS_CODE_MIN",
    "StatusCode",
    "validate_status_code",
]
