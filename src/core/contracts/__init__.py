"""
Contract Validation Module

Модуль для валидации JSON контрактов вызова ADDER.
"""

from .validators import (
    AdderRequestValidator,
    AdderResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_adder_request,
    validate_adder_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AdderRequestValidator",
    "AdderResultValidator",
    # Functions
    "validate_adder_request",
    "validate_adder_result",
]
