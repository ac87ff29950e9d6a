"""
Contract Validation Module

Модуль для валидации JSON контрактов входных данных.
"""

from .validators import (
    ContractValidator,
    MulDivNormalArgsValidator,
    SchemaLoader,
    describe_validation_error,
    validate_mul_div_normal_args,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MulDivNormalArgsValidator",
    # Functions
    "validate_mul_div_normal_args",
    "describe_validation_error",
]
