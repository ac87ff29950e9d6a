"""
Fixed Point — Reconstruction of coefficient × 2^(exponent − DEBT_FACTOR)

Модуль восстанавливает вещественные числа из нормализованного представления
с плавающей двоичной точкой, используемого в контрактах (BigMath vault):

    value = coefficient × 2^(exponent − DEBT_FACTOR)

Экспонента хранится со сдвигом DEBT_FACTOR, чтобы умещаться в беззнаковое поле;
после вычитания сдвига она может быть отрицательной.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Степень двойки вычисляется точно, в том числе для отрицательных показателей
2. Восстановление выполняется без округления (EXACT_CONTEXT)
3. |exponent − DEBT_FACTOR| <= MAX_BINARY_EXPONENT, иначе вход отклоняется

ФОРМУЛЫ:
    2^(-k) = 5^k × 10^(-k)           (точное конечное десятичное представление)
"""

from decimal import Decimal
from typing import Final

from src.core.math.numerical_safeguards import (
    EXACT_CONTEXT,
    exact_multiply,
    parse_integral,
)

# =============================================================================
# КОНСТАНТЫ КОНТРАКТА
# =============================================================================

# Сдвиг экспоненты: хранимая экспонента 16384 соответствует 2^0
DEBT_FACTOR: Final[int] = 16384

# Максимальный модуль истинного показателя степени двойки.
# 2^65536 содержит 19 729 десятичных цифр.
MAX_BINARY_EXPONENT: Final[int] = 4 * DEBT_FACTOR


# =============================================================================
# СТЕПЕНЬ ДВОЙКИ
# =============================================================================


def pow2_exact(power: int) -> Decimal:
    """
    Точное значение 2^power как Decimal.

    Для power < 0 используется тождество 2^(-k) = 5^k / 10^k: результат
    имеет ровно k дробных цифр и представим без округления.

    Args:
        power: Целый показатель, |power| <= MAX_BINARY_EXPONENT

    Returns:
        Точное Decimal значение 2^power

    Raises:
        ValueError: Если |power| > MAX_BINARY_EXPONENT

    Examples:
        >>> pow2_exact(10)
        Decimal('1024')
        >>> pow2_exact(-3)
        Decimal('0.125')
    """
    if abs(power) > MAX_BINARY_EXPONENT:
        raise ValueError(
            f"binary exponent {power} out of range [-{MAX_BINARY_EXPONENT}, {MAX_BINARY_EXPONENT}]"
        )

    if power >= 0:
        return Decimal(2**power)

    k = -power
    return EXACT_CONTEXT.scaleb(Decimal(5**k), -k)


# =============================================================================
# ВОССТАНОВЛЕНИЕ
# =============================================================================


def parse_exponent(raw: str, name: str) -> int:
    """
    Разбор хранимой экспоненты.

    Диапазон проверяется на Decimal до построения int, поэтому '1e12' и
    '1e999999999' отклоняются сразу.

    Returns:
        Хранимая экспонента (со сдвигом DEBT_FACTOR)

    Raises:
        MalformedInputError: Литерал невалиден, не целый или вне
            [DEBT_FACTOR − MAX_BINARY_EXPONENT, DEBT_FACTOR + MAX_BINARY_EXPONENT]
    """
    return parse_integral(
        raw,
        name,
        min_value=DEBT_FACTOR - MAX_BINARY_EXPONENT,
        max_value=DEBT_FACTOR + MAX_BINARY_EXPONENT,
    )


def reconstruct(coefficient: Decimal, exponent: int) -> Decimal:
    """
    Восстановление числа из пары (coefficient, exponent).

    Args:
        coefficient: Мантисса (произвольная точность, знаковая)
        exponent: Хранимая экспонента (со сдвигом DEBT_FACTOR)

    Returns:
        coefficient × 2^(exponent − DEBT_FACTOR), вычисленное точно

    Examples:
        >>> reconstruct(Decimal(3), DEBT_FACTOR)
        Decimal('3')
        >>> reconstruct(Decimal(3), DEBT_FACTOR + 2)
        Decimal('12')
        >>> reconstruct(Decimal(1), DEBT_FACTOR - 1)
        Decimal('0.5')
    """
    return exact_multiply(coefficient, pow2_exact(exponent - DEBT_FACTOR))
