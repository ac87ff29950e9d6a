"""
Тесты для Fixed Point — восстановление coefficient × 2^(exponent − DEBT_FACTOR)

Проверяемые инварианты:
1. Точная степень двойки для положительных и отрицательных показателей
2. Сдвиг экспоненты на DEBT_FACTOR
3. Ограничение диапазона экспонент
"""

from decimal import Decimal

import pytest

from src.core.math.fixed_point import (
    DEBT_FACTOR,
    MAX_BINARY_EXPONENT,
    parse_exponent,
    pow2_exact,
    reconstruct,
)
from src.core.math.numerical_safeguards import MalformedInputError, exact_multiply


# =============================================================================
# ТЕСТЫ: pow2_exact
# =============================================================================


class TestPow2Exact:
    """Тесты pow2_exact: точность для любых целых показателей."""

    def test_zero_power(self):
        assert pow2_exact(0) == 1

    def test_positive_powers(self):
        assert pow2_exact(1) == 2
        assert pow2_exact(10) == 1024
        assert pow2_exact(200) == Decimal(2**200)

    def test_negative_powers(self):
        assert pow2_exact(-1) == Decimal("0.5")
        assert pow2_exact(-3) == Decimal("0.125")

    def test_negative_power_has_exact_digits(self):
        """2^-k имеет ровно k дробных цифр"""
        value = pow2_exact(-100)
        assert value.as_tuple().exponent == -100
        assert exact_multiply(value, Decimal(2**100)) == 1

    def test_full_debt_factor_range(self):
        """2^-16384 вычисляется без округления"""
        value = pow2_exact(-DEBT_FACTOR)
        assert value.as_tuple().exponent == -DEBT_FACTOR
        assert value.adjusted() == -4933
        assert exact_multiply(value, Decimal(2**DEBT_FACTOR)) == 1


# =============================================================================
# ТЕСТЫ: reconstruct
# =============================================================================


class TestReconstruct:
    """Тесты reconstruct: сдвиг экспоненты и знак мантиссы."""

    def test_debt_factor_value(self):
        assert DEBT_FACTOR == 16384

    def test_zero_offset_is_identity(self):
        assert reconstruct(Decimal(3), DEBT_FACTOR) == 3
        assert reconstruct(Decimal("1.5"), DEBT_FACTOR) == Decimal("1.5")

    def test_positive_offset(self):
        assert reconstruct(Decimal(1), DEBT_FACTOR + 1) == 2
        assert reconstruct(Decimal("1.5"), DEBT_FACTOR + 4) == 24

    def test_negative_offset(self):
        assert reconstruct(Decimal(1), DEBT_FACTOR - 1) == Decimal("0.5")
        assert reconstruct(Decimal(6), DEBT_FACTOR - 2) == Decimal("1.5")

    def test_negative_coefficient(self):
        assert reconstruct(Decimal(-3), DEBT_FACTOR + 2) == -12

    def test_zero_coefficient(self):
        assert reconstruct(Decimal(0), DEBT_FACTOR + 50).is_zero()

    def test_zero_stored_exponent(self):
        """Хранимая экспонента 0 → показатель −16384, результат точный"""
        value = reconstruct(Decimal(3), 0)
        assert exact_multiply(value, Decimal(2**DEBT_FACTOR)) == 3

    def test_large_coefficient_not_rounded(self):
        coefficient = Decimal("123456789012345678901234567890123456789")
        value = reconstruct(coefficient, DEBT_FACTOR + 3)
        assert value == Decimal(123456789012345678901234567890123456789 * 8)


# =============================================================================
# ТЕСТЫ: диапазон экспонент
# =============================================================================


class TestExponentRange:
    """Тесты MAX_BINARY_EXPONENT и parse_exponent."""

    def test_bounds_accepted(self):
        assert pow2_exact(MAX_BINARY_EXPONENT) == Decimal(2**MAX_BINARY_EXPONENT)
        assert exact_multiply(
            pow2_exact(-MAX_BINARY_EXPONENT), Decimal(2**MAX_BINARY_EXPONENT)
        ) == 1

    def test_pow2_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            pow2_exact(MAX_BINARY_EXPONENT + 1)
        with pytest.raises(ValueError, match="out of range"):
            pow2_exact(-MAX_BINARY_EXPONENT - 1)

    def test_parse_exponent_in_range(self):
        assert parse_exponent("16384", "exponent_a") == DEBT_FACTOR
        assert parse_exponent("0", "exponent_a") == 0
        assert parse_exponent(str(DEBT_FACTOR + MAX_BINARY_EXPONENT), "exponent_a") == (
            DEBT_FACTOR + MAX_BINARY_EXPONENT
        )

    def test_parse_exponent_too_large(self):
        with pytest.raises(MalformedInputError, match="exponent_a must be <="):
            parse_exponent("1e12", "exponent_a")

    def test_parse_exponent_huge_literal(self):
        """Огромный литерал отклоняется без построения int"""
        with pytest.raises(MalformedInputError, match="exponent_b must be <="):
            parse_exponent("1e999999999", "exponent_b")

    def test_parse_exponent_too_small(self):
        with pytest.raises(MalformedInputError, match="exponent_a must be >="):
            parse_exponent("-1e12", "exponent_a")

    def test_parse_exponent_fraction(self):
        with pytest.raises(MalformedInputError, match="must be integral"):
            parse_exponent("16384.5", "exponent_a")
