"""Fixed-point decimal arithmetic on arbitrary-precision integers.

Multiply, divide, compare and rescale integers that represent decimal
numbers at a given number of fractional digits (e.g. 6-decimal USDC vs
18-decimal WETH amounts), rounding half-up with integer arithmetic only.

Usage:
    from decimal_bn import convert_decimals, decimal_div, decimal_mul

    # 1.5 USDC (6 decimals) * 2.0 WETH (18 decimals) -> 18 decimals
    decimal_mul(1_500_000, 2 * 10**18, a_decimals=6, b_decimals=18)

    # 1 USDC as an 18-decimal amount
    convert_decimals(1_000_000, 6, 18)
"""

from decimal_bn.arithmetic import decimal_div, decimal_mul, rounding_padding
from decimal_bn.comparators import abs_difference, max_bn, min_bn
from decimal_bn.config import DEFAULT_DECIMAL_CONFIG, DecimalConfig
from decimal_bn.constants import DEFAULT_DECIMALS, ONE_6, ONE_18
from decimal_bn.errors import DecimalBNError, DivisionByZero, InvalidDecimalsError
from decimal_bn.fixed_point import FixedPoint
from decimal_bn.safe_int import S, SafeInt, div_trunc
from decimal_bn.scaling import convert_decimals, scaling_factor, validate_decimals

__version__ = "0.1.0"
__all__ = [
    # Arithmetic
    "decimal_mul",
    "decimal_div",
    "rounding_padding",
    # Scaling
    "convert_decimals",
    "scaling_factor",
    "validate_decimals",
    # Comparators
    "max_bn",
    "min_bn",
    "abs_difference",
    # Value types
    "FixedPoint",
    "SafeInt",
    "S",
    "div_trunc",
    # Config
    "DecimalConfig",
    "DEFAULT_DECIMAL_CONFIG",
    # Constants
    "DEFAULT_DECIMALS",
    "ONE_6",
    "ONE_18",
    # Errors
    "DecimalBNError",
    "DivisionByZero",
    "InvalidDecimalsError",
    "__version__",
]
