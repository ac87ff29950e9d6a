"""
Настройки mul-div-normal.

Значения берутся из переменных окружения; константы контракта
(DEBT_FACTOR, TOLERANCE) настройке не подлежат и живут в своих модулях.
"""

import os

from src.core.math.numerical_safeguards import DIVISION_GUARD_DIGITS_DEFAULT


class SettingsError(ValueError):
    """Переменная окружения задана, но её значение недопустимо."""

    pass


# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
# Уровень логирования loguru (stderr). stdout зарезервирован под ABI слово.
LOG_LEVEL = os.getenv("MULDIV_LOG_LEVEL", "WARNING").upper()

# Формат строки лога
LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"

# =============================================================================
# АРИФМЕТИКА
# =============================================================================
# Гарантированные дробные цифры диагностического частного
DIVISION_GUARD_DIGITS_ENV = "MULDIV_DIVISION_GUARD_DIGITS"


def division_guard_digits() -> int:
    """
    Значение MULDIV_DIVISION_GUARD_DIGITS (по умолчанию 64).

    Читается при вызове, а не при импорте, чтобы точка входа могла
    сообщить об ошибке настройки через логгер.

    Raises:
        SettingsError: Если значение не положительное целое
    """
    raw = os.getenv(DIVISION_GUARD_DIGITS_ENV)
    if raw is None:
        return DIVISION_GUARD_DIGITS_DEFAULT

    try:
        value = int(raw)
    except ValueError:
        raise SettingsError(
            f"{DIVISION_GUARD_DIGITS_ENV} must be a positive integer, got {raw!r}"
        ) from None

    if value < 1:
        raise SettingsError(
            f"{DIVISION_GUARD_DIGITS_ENV} must be a positive integer, got {raw!r}"
        )

    return value
