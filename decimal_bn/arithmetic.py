"""Fixed-point multiplication and division across decimal scales.

Both operations take each operand's own decimal scale plus the scale the
caller wants the result in, and round half-up at the last retained digit
using integer arithmetic only.

Rounding is applied to the magnitude and the sign is restored afterwards,
so half-up means half away from zero for negative results. For
non-negative operands (and positive divisors) results match the usual
"add half a unit, then truncate" on-chain formulation exactly.
"""

from __future__ import annotations

import structlog

from decimal_bn.constants import DEFAULT_DECIMALS
from decimal_bn.errors import DivisionByZero
from decimal_bn.safe_int import S, SafeInt
from decimal_bn.scaling import convert_decimals, validate_decimals

logger = structlog.get_logger()


def rounding_padding(from_decimals: int, to_decimals: int) -> int:
    """Half a unit of the last digit kept when going from_decimals -> to_decimals.

    Adding this to a magnitude before a truncating downscale rounds it
    half-up. Returns 0 when no digits are discarded.

    Examples:
        rounding_padding(12, 6) = 500_000   # 0.5 at 6 decimals, seen at 12
        rounding_padding(6, 18) = 0
    """
    validate_decimals(from_decimals=from_decimals, to_decimals=to_decimals)
    if from_decimals <= to_decimals:
        return 0
    return (5 * S.pow10(from_decimals - to_decimals - 1)).value


def decimal_mul(
    a: int | SafeInt,
    b: int | SafeInt,
    a_decimals: int = DEFAULT_DECIMALS,
    b_decimals: int = DEFAULT_DECIMALS,
    out_decimals: int = DEFAULT_DECIMALS,
) -> int:
    """Multiply two fixed-point integers, rounding half-up to out_decimals.

    The raw product carries a_decimals + b_decimals fractional digits. If
    that is more than out_decimals, half a unit of the last kept digit is
    added before truncating down to out_decimals.

    Args:
        a: First factor at a_decimals
        b: Second factor at b_decimals
        a_decimals: Decimals of a (default 18)
        b_decimals: Decimals of b (default 18)
        out_decimals: Decimals of the result (default 18)

    Returns:
        The product at out_decimals

    Raises:
        TypeError: If an operand or scale has the wrong type
        InvalidDecimalsError: If any scale is negative

    Examples:
        # 1.0 * 0.333333 (6 decimals each) -> 18 decimals
        decimal_mul(1_000_000, 333_333, 6, 6, 18) = 333_333_000_000_000_000
    """
    validate_decimals(a_decimals=a_decimals, b_decimals=b_decimals, out_decimals=out_decimals)

    product = S(a) * S(b)
    product_decimals = a_decimals + b_decimals

    magnitude = abs(product) + rounding_padding(product_decimals, out_decimals)
    result = convert_decimals(magnitude, product_decimals, out_decimals)
    return -result if product < 0 else result


def decimal_div(
    a: int | SafeInt,
    b: int | SafeInt,
    a_decimals: int = DEFAULT_DECIMALS,
    b_decimals: int = DEFAULT_DECIMALS,
    out_decimals: int = DEFAULT_DECIMALS,
) -> int:
    """Divide two fixed-point integers, rounding half-up to out_decimals.

    The dividend is padded to out_decimals + b_decimals so that dividing
    by b (which still carries b_decimals) lands the quotient at
    out_decimals. Half the divisor is added before the truncating
    division to round the last digit.

    Args:
        a: Dividend at a_decimals
        b: Divisor at b_decimals (non-zero)
        a_decimals: Decimals of a (default 18)
        b_decimals: Decimals of b (default 18)
        out_decimals: Decimals of the result (default 18)

    Returns:
        The quotient at out_decimals

    Raises:
        DivisionByZero: If b is zero
        TypeError: If an operand or scale has the wrong type
        InvalidDecimalsError: If any scale is negative

    Examples:
        # 1.0 / 6.0 (6 decimals each) -> 18 decimals, last digit rounded up
        decimal_div(1_000_000, 6_000_000, 6, 6, 18) = 166_666_666_666_666_667
    """
    validate_decimals(a_decimals=a_decimals, b_decimals=b_decimals, out_decimals=out_decimals)

    dividend, divisor = S(a), S(b)
    if not divisor:
        logger.warning(
            "decimal_div_by_zero",
            dividend=str(dividend),
            a_decimals=a_decimals,
            b_decimals=b_decimals,
        )
        raise DivisionByZero(f"Division by zero: {dividend} / 0")

    padding_factor = out_decimals + b_decimals
    padded = convert_decimals(abs(dividend), a_decimals, padding_factor)

    magnitude = abs(divisor)
    quotient = (padded + magnitude // 2) // magnitude
    if dividend.sign() * divisor.sign() < 0:
        return (-quotient).value
    return quotient.value


__all__ = [
    "decimal_div",
    "decimal_mul",
    "rounding_padding",
]
