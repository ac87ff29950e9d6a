"""
Domain models and value objects.

Contains the fixed-point value object and the mul-div verification request.
"""

from src.core.domain.fixed_point_value import FixedPointValue, MulDivNormalRequest

__all__ = [
    "FixedPointValue",
    "MulDivNormalRequest",
]
