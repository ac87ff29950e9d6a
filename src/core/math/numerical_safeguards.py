"""
Numerical Safeguards — Decimal Contexts & Safe Parsing

Модуль обеспечивает численную корректность всех операций над Decimal:
- Точный контекст: любое округление считается ошибкой (trap Inexact)
- Деление с гарантированной абсолютной погрешностью
- Явный разбор десятичных литералов в одной точке входа
- Точное сравнение частного с абсолютной толерантностью (включительно)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Умножение, вычитание и масштабирование степенями двойки выполняются точно
2. Единственная неточная операция — деление; её погрешность < 10^-guard_digits
   и на результат сравнения с толерантностью не влияет
3. Текущий контекст потока (decimal.getcontext) никогда не изменяется
4. NaN/Inf никогда не попадают в вычисления (отклоняются при разборе)
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)
from typing import Final

# =============================================================================
# КОНТЕКСТЫ
# =============================================================================

# Точный контекст: максимальная точность и диапазон экспонент.
# Inexact в ловушках — округление превращается в исключение.
EXACT_CONTEXT: Final[Context] = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)

# Минимальная точность деления (значащих цифр)
DIVISION_PREC_MIN: Final[int] = 28

# Количество дробных цифр, гарантированных делением по умолчанию
DIVISION_GUARD_DIGITS_DEFAULT: Final[int] = 64


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedInputError(ValueError):
    """
    Аргумент не является допустимым десятичным литералом.

    Единственный класс ошибок входа. Всегда фатальна: вывод не производится,
    процесс завершается с ненулевым статусом.
    """

    pass


# =============================================================================
# РАЗБОР ЛИТЕРАЛОВ
# =============================================================================


def parse_decimal(raw: str, name: str) -> Decimal:
    """
    Разбор десятичного литерала в Decimal.

    Конструктор Decimal из строки точен и не зависит от контекста,
    поэтому литерал сохраняется со всеми цифрами.

    Args:
        raw: Строковое представление (например, '-12.5', '3e4')
        name: Имя аргумента (для сообщения об ошибке)

    Returns:
        Конечное значение Decimal

    Raises:
        MalformedInputError: Если строка не разбирается или значение NaN/Inf

    Examples:
        >>> parse_decimal("2", "target_value")
        Decimal('2')
        >>> parse_decimal("abc", "coefficient_a")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        MalformedInputError: coefficient_a is not a decimal literal: 'abc'
    """
    if not isinstance(raw, str):
        raise MalformedInputError(f"{name} must be a string, got {type(raw).__name__}")

    if raw != raw.strip():
        raise MalformedInputError(f"{name} has surrounding whitespace: {raw!r}")

    try:
        value = EXACT_CONTEXT.create_decimal(raw)
    except DecimalException:
        raise MalformedInputError(f"{name} is not a decimal literal: {raw!r}") from None

    if not value.is_finite():
        raise MalformedInputError(f"{name} must be finite, got {raw!r}")

    return value


def parse_integral(
    raw: str,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """
    Разбор десятичного литерала с целым значением.

    Допускаются формы '16384', '16384.0', '1.6384e4'. Границы проверяются
    до преобразования в int, поэтому литералы вида '1e999999999' отклоняются
    без построения огромного целого.

    Args:
        raw: Строковое представление
        name: Имя аргумента (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        MalformedInputError: Если литерал невалиден, имеет дробную часть
            или выходит за границы
    """
    value = parse_decimal(raw, name)

    if value != value.to_integral_value(context=EXACT_CONTEXT):
        raise MalformedInputError(f"{name} must be integral, got {raw!r}")

    if min_value is not None and value < min_value:
        raise MalformedInputError(f"{name} must be >= {min_value}, got {raw!r}")

    if max_value is not None and value > max_value:
        raise MalformedInputError(f"{name} must be <= {max_value}, got {raw!r}")

    return int(value)


# =============================================================================
# ТОЧНАЯ АРИФМЕТИКА
# =============================================================================


def exact_multiply(a: Decimal, b: Decimal) -> Decimal:
    """Точное произведение (без округления)."""
    return EXACT_CONTEXT.multiply(a, b)


def exact_abs_diff(a: Decimal, b: Decimal) -> Decimal:
    """Точное |a - b|."""
    return EXACT_CONTEXT.abs(EXACT_CONTEXT.subtract(a, b))


# =============================================================================
# ДЕЛЕНИЕ С АБСОЛЮТНОЙ ПОГРЕШНОСТЬЮ
# =============================================================================


def division_context(
    numerator: Decimal,
    denominator: Decimal,
    guard_digits: int = DIVISION_GUARD_DIGITS_DEFAULT,
) -> Context:
    """
    Контекст деления с абсолютной погрешностью < 10^-guard_digits.

    Точность подбирается по величине частного: число цифр целой части
    частного не превышает numerator.adjusted() - denominator.adjusted() + 1,
    к нему добавляются guard_digits дробных цифр.

    Args:
        numerator: Делимое (конечное)
        denominator: Делитель (конечный, ненулевой)
        guard_digits: Количество гарантированных дробных цифр

    Returns:
        Новый Context (текущий контекст потока не затрагивается)

    Raises:
        ValueError: Если guard_digits < 1
    """
    if guard_digits < 1:
        raise ValueError(f"guard_digits must be positive, got {guard_digits}")

    integer_digits = numerator.adjusted() - denominator.adjusted() + 1
    prec = max(integer_digits + guard_digits, DIVISION_PREC_MIN)

    return Context(
        prec=prec,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )


def bounded_divide(
    numerator: Decimal,
    denominator: Decimal,
    guard_digits: int = DIVISION_GUARD_DIGITS_DEFAULT,
) -> Decimal:
    """
    Деление с гарантированной абсолютной погрешностью.

    Частные, укладывающиеся в точность контекста, получаются точно;
    остальные округляются и годятся только для диагностики.

    Raises:
        decimal.DivisionByZero: Если denominator == 0 и numerator != 0
        decimal.InvalidOperation: Если 0 / 0

    Examples:
        >>> bounded_divide(Decimal(10), Decimal(4))
        Decimal('2.5')
    """
    ctx = division_context(numerator, denominator, guard_digits)
    return ctx.divide(numerator, denominator)


# =============================================================================
# СРАВНЕНИЕ С ТОЛЕРАНТНОСТЬЮ
# =============================================================================


def is_quotient_within_tolerance(
    numerator: Decimal,
    denominator: Decimal,
    expected: Decimal,
    tol: Decimal,
) -> bool:
    """
    Точная проверка |numerator / denominator − expected| <= tol.

    Частное не вычисляется: обе части неравенства умножаются на |denominator|,
    и сравнение выполняется без округления:

        |numerator − expected × denominator| <= tol × |denominator|

    Граница включительна и не зависит от точности деления.

    Args:
        numerator: Делимое
        denominator: Делитель (ненулевой)
        expected: Ожидаемое частное
        tol: Абсолютная толерантность (неотрицательная)

    Raises:
        ValueError: Если tol отрицательная или denominator == 0

    Examples:
        >>> is_quotient_within_tolerance(Decimal(3), Decimal(1), Decimal(2), Decimal(1))
        True
        >>> is_quotient_within_tolerance(Decimal(1), Decimal(3), Decimal("1.3334"), Decimal(1))
        False
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    if denominator.is_zero():
        raise ValueError("denominator must be non-zero")

    scaled_diff = exact_abs_diff(numerator, exact_multiply(expected, denominator))
    scaled_tol = exact_multiply(tol, EXACT_CONTEXT.abs(denominator))

    return scaled_diff <= scaled_tol
