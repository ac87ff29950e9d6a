"""
FixedPointValue — Модель числа с двоичной экспонентой

Immutable Pydantic модели входа проверки mul-div:
- FixedPointValue: пара (coefficient, exponent) со сдвигом DEBT_FACTOR
- MulDivNormalRequest: полный набор типизированных аргументов проверки
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from src.core.math.fixed_point import DEBT_FACTOR, reconstruct


# =============================================================================
# FIXED POINT VALUE
# =============================================================================


class FixedPointValue(BaseModel):
    """
    Число вида coefficient × 2^(exponent − DEBT_FACTOR).

    Immutable модель (frozen=True). Хранит сырую экспоненту (со сдвигом),
    восстановленное значение вычисляется по запросу.
    """

    coefficient: Decimal = Field(..., description="Мантисса (знаковая, произвольной точности)")
    exponent: int = Field(..., description="Хранимая экспонента (со сдвигом DEBT_FACTOR)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("coefficient")
    @classmethod
    def validate_coefficient_finite(cls, v: Decimal) -> Decimal:
        """Мантисса должна быть конечной."""
        if not v.is_finite():
            raise ValueError(f"coefficient must be finite, got {v}")
        return v

    @property
    def binary_exponent(self) -> int:
        """Истинный показатель степени двойки (exponent − DEBT_FACTOR)."""
        return self.exponent - DEBT_FACTOR

    def to_decimal(self) -> Decimal:
        """
        Точное восстановленное значение.

        Returns:
            coefficient × 2^(exponent − DEBT_FACTOR)
        """
        return reconstruct(self.coefficient, self.exponent)


# =============================================================================
# REQUEST
# =============================================================================


class MulDivNormalRequest(BaseModel):
    """
    Типизированные аргументы проверки target × factor / divisor ≈ expected.

    Порядок позиционных аргументов командной строки:
    target_value, coefficient_a, exponent_a, coefficient_b, exponent_b,
    expected_result.
    """

    target_value: Decimal = Field(..., description="Базовый множитель")
    factor: FixedPointValue = Field(..., description="Первый множитель (coefficient_a, exponent_a)")
    divisor: FixedPointValue = Field(..., description="Делитель (coefficient_b, exponent_b)")
    expected_result: Decimal = Field(..., description="Ожидаемый результат")

    model_config = {"frozen": True}  # Immutable

    @field_validator("target_value", "expected_result")
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError(f"value must be finite, got {v}")
        return v
