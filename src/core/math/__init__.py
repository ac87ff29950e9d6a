"""
Core math modules

Математические примитивы над Decimal с гарантией точности.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Contexts
    DIVISION_GUARD_DIGITS_DEFAULT,
    DIVISION_PREC_MIN,
    EXACT_CONTEXT,
    # Exceptions
    MalformedInputError,
    # Parsing
    parse_decimal,
    parse_integral,
    # Arithmetic
    bounded_divide,
    division_context,
    exact_abs_diff,
    exact_multiply,
    # Comparisons
    is_quotient_within_tolerance,
)

# Fixed Point
from src.core.math.fixed_point import (
    DEBT_FACTOR,
    MAX_BINARY_EXPONENT,
    parse_exponent,
    pow2_exact,
    reconstruct,
)

__all__ = [
    # Numerical Safeguards — Contexts
    "DIVISION_GUARD_DIGITS_DEFAULT",
    "DIVISION_PREC_MIN",
    "EXACT_CONTEXT",
    # Numerical Safeguards — Exceptions
    "MalformedInputError",
    # Numerical Safeguards — Parsing
    "parse_decimal",
    "parse_integral",
    # Numerical Safeguards — Arithmetic
    "bounded_divide",
    "division_context",
    "exact_abs_diff",
    "exact_multiply",
    # Numerical Safeguards — Comparisons
    "is_quotient_within_tolerance",
    # Fixed Point — Constants
    "DEBT_FACTOR",
    "MAX_BINARY_EXPONENT",
    # Fixed Point — Functions
    "parse_exponent",
    "pow2_exact",
    "reconstruct",
]
