"""Scale-agnostic comparisons of fixed-point integers.

Both operands must already share a decimal scale; use convert_decimals
first if they do not.
"""

from __future__ import annotations

from decimal_bn.safe_int import S, SafeInt


def max_bn(a: int | SafeInt, b: int | SafeInt) -> int | SafeInt:
    """Return the larger of a and b (b on a tie)."""
    return a if S(a) > S(b) else b


def min_bn(a: int | SafeInt, b: int | SafeInt) -> int | SafeInt:
    """Return the smaller of a and b (b on a tie)."""
    return a if S(a) < S(b) else b


def abs_difference(a: int | SafeInt, b: int | SafeInt) -> int:
    """Absolute difference |a - b|, never negative."""
    sa, sb = S(a), S(b)
    return (sa - sb).value if sa > sb else (sb - sa).value


__all__ = [
    "abs_difference",
    "max_bn",
    "min_bn",
]
