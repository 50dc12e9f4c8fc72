"""Decimal scale conversion.

Functions for moving a fixed-point integer between decimal scales,
e.g. from a 6-decimal token amount to an 18-decimal one.
"""

from __future__ import annotations

import structlog

from decimal_bn.errors import InvalidDecimalsError
from decimal_bn.safe_int import S, SafeInt

logger = structlog.get_logger()


def validate_decimals(**decimals: int) -> None:
    """Check that every named decimal scale is a non-negative int.

    Args:
        **decimals: Scales keyed by argument name (used in error messages)

    Raises:
        TypeError: If a scale is not an int
        InvalidDecimalsError: If a scale is negative
    """
    for name, value in decimals.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be int, got {type(value).__name__}")
        if value < 0:
            logger.warning("invalid_decimals", argument=name, decimals=value)
            raise InvalidDecimalsError(f"{name} must be non-negative, got {value}")


def scaling_factor(from_decimals: int, to_decimals: int) -> int:
    """Power of ten separating two decimal scales.

    Args:
        from_decimals: Source scale
        to_decimals: Target scale

    Returns:
        10 ** |to_decimals - from_decimals|

    Raises:
        InvalidDecimalsError: If either scale is negative
    """
    validate_decimals(from_decimals=from_decimals, to_decimals=to_decimals)
    return S.pow10(abs(to_decimals - from_decimals)).value


def convert_decimals(amount: int | SafeInt, from_decimals: int, to_decimals: int) -> int:
    """Rescale a fixed-point integer from one decimal scale to another.

    Upscaling is exact. Downscaling truncates toward zero and does not
    round; callers that need rounding add a padding term first.

    Args:
        amount: Fixed-point integer at from_decimals
        from_decimals: Scale of amount
        to_decimals: Scale of the result

    Returns:
        The same value expressed at to_decimals

    Raises:
        TypeError: If amount is not an int or SafeInt
        InvalidDecimalsError: If either scale is negative

    Examples:
        convert_decimals(1_500_000, 6, 18) = 1_500_000_000_000_000_000
        convert_decimals(1_999_999_999_999_999_999, 18, 6) = 1_999_999
    """
    factor = scaling_factor(from_decimals, to_decimals)
    if from_decimals > to_decimals:
        return (S(amount) // factor).value
    return (S(amount) * factor).value


__all__ = [
    "convert_decimals",
    "scaling_factor",
    "validate_decimals",
]
