"""
MulDivNormal — Проверка target × factor / divisor ≈ expected

Внешний оракул для тестов BigMath vault: восстанавливает два числа из
представления coefficient × 2^(exponent − DEBT_FACTOR), вычисляет
target × factor / divisor и сравнивает с ожидаемым значением.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Аргументы разбираются один раз, на границе (parse_arguments)
2. Восстановление множителей точное, умножение до деления
3. Толерантность абсолютная и включительная: |result − expected| <= 1
4. Нулевой делитель даёт отрицательный результат проверки, а не ошибку
"""

from decimal import Decimal
from typing import Final, NamedTuple, Optional, Sequence

from jsonschema import ValidationError
from loguru import logger

from src.core.contracts import describe_validation_error, validate_mul_div_normal_args
from src.core.domain import FixedPointValue, MulDivNormalRequest
from src.core.math.fixed_point import parse_exponent
from src.core.math.numerical_safeguards import (
    DIVISION_GUARD_DIGITS_DEFAULT,
    MalformedInputError,
    bounded_divide,
    exact_abs_diff,
    exact_multiply,
    is_quotient_within_tolerance,
    parse_decimal,
)

# =============================================================================
# КОНСТАНТЫ КОНТРАКТА
# =============================================================================

# Максимальное допустимое абсолютное отклонение (включительно)
TOLERANCE: Final[Decimal] = Decimal(1)

# Позиционный порядок аргументов
ARGUMENT_NAMES: Final[tuple[str, ...]] = (
    "target_value",
    "coefficient_a",
    "exponent_a",
    "coefficient_b",
    "exponent_b",
    "expected_result",
)


# =============================================================================
# РЕЗУЛЬТАТ
# =============================================================================


class VerificationOutcome(NamedTuple):
    """Результат проверки mul-div."""

    passed: bool  # точное |target × factor / divisor − expected| <= tolerance
    computed_result: Optional[Decimal]  # None при нулевом делителе
    expected_result: Decimal
    difference: Optional[Decimal]  # |computed_result − expected_result|, диагностика
    tolerance: Decimal
    divisor_is_zero: bool


# =============================================================================
# РАЗБОР АРГУМЕНТОВ
# =============================================================================


def parse_arguments(args: Sequence[str]) -> MulDivNormalRequest:
    """
    Преобразование позиционных аргументов в типизированный запрос.

    Порядок: target_value, coefficient_a, exponent_a, coefficient_b,
    exponent_b, expected_result.

    Args:
        args: Ровно шесть десятичных литералов

    Returns:
        MulDivNormalRequest

    Raises:
        MalformedInputError: Неверное число аргументов, нарушение контракта
            аргументов, нецелая экспонента или экспонента вне диапазона
    """
    if len(args) != len(ARGUMENT_NAMES):
        raise MalformedInputError(
            f"expected {len(ARGUMENT_NAMES)} arguments "
            f"({', '.join(ARGUMENT_NAMES)}), got {len(args)}"
        )

    record = dict(zip(ARGUMENT_NAMES, args))

    try:
        validate_mul_div_normal_args(record)
    except ValidationError as e:
        raise MalformedInputError(describe_validation_error(e)) from None

    return MulDivNormalRequest(
        target_value=parse_decimal(record["target_value"], "target_value"),
        factor=FixedPointValue(
            coefficient=parse_decimal(record["coefficient_a"], "coefficient_a"),
            exponent=parse_exponent(record["exponent_a"], "exponent_a"),
        ),
        divisor=FixedPointValue(
            coefficient=parse_decimal(record["coefficient_b"], "coefficient_b"),
            exponent=parse_exponent(record["exponent_b"], "exponent_b"),
        ),
        expected_result=parse_decimal(record["expected_result"], "expected_result"),
    )


# =============================================================================
# COMPARATOR
# =============================================================================


class FixedPointComparator:
    """
    Сравнение target × factor / divisor с ожидаемым значением.

    Args:
        tolerance: Абсолютная толерантность (по умолчанию TOLERANCE)
        guard_digits: Гарантированные дробные цифры частного
    """

    def __init__(
        self,
        tolerance: Decimal = TOLERANCE,
        guard_digits: int = DIVISION_GUARD_DIGITS_DEFAULT,
    ):
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        if guard_digits < 1:
            raise ValueError(f"guard_digits must be positive, got {guard_digits}")

        self.tolerance = tolerance
        self.guard_digits = guard_digits

    def _terms(self, request: MulDivNormalRequest) -> tuple[Decimal, Decimal]:
        """
        Точные произведение target × factor и делитель.

        Умножение выполняется до деления; оба значения без округления.
        """
        factor = request.factor.to_decimal()
        divisor = request.divisor.to_decimal()

        logger.debug(
            f"factor={request.factor.coefficient}*2^{request.factor.binary_exponent}, "
            f"divisor={request.divisor.coefficient}*2^{request.divisor.binary_exponent}"
        )

        return exact_multiply(request.target_value, factor), divisor

    def verify(self, request: MulDivNormalRequest) -> VerificationOutcome:
        """
        Проверка |target × factor / divisor − expected| <= tolerance.

        Решение принимается точно (is_quotient_within_tolerance), без деления.
        Частное computed_result округлено до guard_digits дробных цифр и
        служит только диагностикой.

        Args:
            request: Типизированный запрос (см. parse_arguments)

        Returns:
            VerificationOutcome
        """
        product, divisor = self._terms(request)

        if divisor.is_zero():
            logger.warning("Divisor reconstructs to zero; verification fails")
            return VerificationOutcome(
                passed=False,
                computed_result=None,
                expected_result=request.expected_result,
                difference=None,
                tolerance=self.tolerance,
                divisor_is_zero=True,
            )

        passed = is_quotient_within_tolerance(
            product, divisor, request.expected_result, self.tolerance
        )
        result = bounded_divide(product, divisor, self.guard_digits)
        diff = exact_abs_diff(result, request.expected_result)

        logger.debug(f"computed={result}, expected={request.expected_result}, diff={diff}")
        logger.info(f"mul-div verification {'passed' if passed else 'failed'}")

        return VerificationOutcome(
            passed=passed,
            computed_result=result,
            expected_result=request.expected_result,
            difference=diff,
            tolerance=self.tolerance,
            divisor_is_zero=False,
        )


def verify_mul_div_normal(
    args: Sequence[str],
    guard_digits: int = DIVISION_GUARD_DIGITS_DEFAULT,
) -> VerificationOutcome:
    """
    Разбор аргументов и проверка в одном вызове.

    Raises:
        MalformedInputError: Если аргументы невалидны
    """
    request = parse_arguments(args)
    return FixedPointComparator(guard_digits=guard_digits).verify(request)
