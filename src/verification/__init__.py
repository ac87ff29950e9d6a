"""
Verification scripts consumed by the contract test harness.
"""

from src.verification.mul_div_normal import (
    ARGUMENT_NAMES,
    TOLERANCE,
    FixedPointComparator,
    VerificationOutcome,
    parse_arguments,
    verify_mul_div_normal,
)

__all__ = [
    "ARGUMENT_NAMES",
    "TOLERANCE",
    "FixedPointComparator",
    "VerificationOutcome",
    "parse_arguments",
    "verify_mul_div_normal",
]
