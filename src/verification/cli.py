#!/usr/bin/env python3
"""
Точка входа mul-div-normal.

Использование:
    mul-div-normal TARGET COEF_A EXP_A COEF_B EXP_B EXPECTED
    python -m src.verification TARGET COEF_A EXP_A COEF_B EXP_B EXPECTED

В stdout пишется ровно одно ABI слово bool (32 байта). Код возврата отражает
только успешность разбора и вычисления, но не результат проверки:
    0 — результат записан
    1 — невалидный аргумент (stdout пуст)
    2 — неверное число аргументов (stdout пуст)
    3 — недопустимая настройка окружения (stdout пуст)

Все аргументы позиционные: литералы со знаком вроде -5. и -1.5e3
не принимаются за опции.
"""

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from src.config import settings
from src.config.settings import SettingsError
from src.core.math.numerical_safeguards import MalformedInputError
from src.interop.abi import write_outcome
from src.verification.mul_div_normal import ARGUMENT_NAMES, verify_mul_div_normal

EXIT_OK = 0
EXIT_MALFORMED_INPUT = 1
EXIT_INVALID_SETTINGS = 3

HELP_FLAGS = (["-h"], ["--help"])


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    """Все логи в stderr: stdout зарезервирован под ABI слово."""
    logger.remove()
    logger.add(sys.stderr, format=settings.LOG_FORMAT, level=level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mul-div-normal",
        description=(
            "Check target * (coefficient_a * 2^(exponent_a - 16384)) / "
            "(coefficient_b * 2^(exponent_b - 16384)) against expected_result "
            "within an absolute tolerance of 1; writes an ABI-encoded bool to stdout."
        ),
    )
    for name in ARGUMENT_NAMES:
        parser.add_argument(name, help="decimal literal")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()

    argv = list(sys.argv[1:] if argv is None else argv)
    if argv not in HELP_FLAGS:
        # "--": знаковые литералы остаются позиционными
        argv = ["--", *argv]

    parsed = build_parser().parse_args(argv)
    args = [getattr(parsed, name) for name in ARGUMENT_NAMES]

    try:
        guard_digits = settings.division_guard_digits()
    except SettingsError as e:
        logger.error(f"Invalid settings: {e}")
        return EXIT_INVALID_SETTINGS

    try:
        outcome = verify_mul_div_normal(args, guard_digits=guard_digits)
    except MalformedInputError as e:
        logger.error(f"Malformed input: {e}")
        return EXIT_MALFORMED_INPUT

    write_outcome(outcome.passed, sys.stdout.buffer)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
