"""Fixed-point value that carries its own decimal scale.

The function API in decimal_bn takes an integer and its scale as separate
arguments. FixedPoint bundles the two for callers that would rather pass
one object around; every operation delegates to those functions.

Example: 1.5 USDC is FixedPoint(1_500_000, 6)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from decimal_bn.arithmetic import decimal_div, decimal_mul
from decimal_bn.comparators import abs_difference
from decimal_bn.constants import DEFAULT_DECIMALS
from decimal_bn.safe_int import S
from decimal_bn.scaling import convert_decimals, validate_decimals


@dataclass(frozen=True)
class FixedPoint:
    """Immutable (value, decimals) pair meaning value / 10**decimals.

    Comparisons between values at different scales upscale both sides to
    the larger scale first, so they are exact.
    """

    value: int
    decimals: int = DEFAULT_DECIMALS

    def __post_init__(self) -> None:
        # Rejects non-int values early
        S(self.value)
        validate_decimals(decimals=self.decimals)

    @classmethod
    def from_int(cls, i: int, decimals: int = DEFAULT_DECIMALS) -> FixedPoint:
        """Create from a whole number (will be scaled by 10**decimals)."""
        validate_decimals(decimals=decimals)
        return cls((S(i) * S.pow10(decimals)).value, decimals)

    def to_decimals(self, decimals: int) -> FixedPoint:
        """Rescale to another scale; truncates toward zero when downscaling."""
        return FixedPoint(convert_decimals(self.value, self.decimals, decimals), decimals)

    def to_decimal(self) -> Decimal:
        """Convert to Decimal for display."""
        return Decimal(f"{self.value}E-{self.decimals}")

    def mul(self, other: FixedPoint, out_decimals: int | None = None) -> FixedPoint:
        """Multiply, rounding half-up to out_decimals (default: self.decimals)."""
        out = self.decimals if out_decimals is None else out_decimals
        product = decimal_mul(self.value, other.value, self.decimals, other.decimals, out)
        return FixedPoint(product, out)

    def div(self, other: FixedPoint, out_decimals: int | None = None) -> FixedPoint:
        """Divide, rounding half-up to out_decimals (default: self.decimals).

        Raises:
            DivisionByZero: If other is zero
        """
        out = self.decimals if out_decimals is None else out_decimals
        quotient = decimal_div(self.value, other.value, self.decimals, other.decimals, out)
        return FixedPoint(quotient, out)

    def abs_difference(self, other: FixedPoint) -> FixedPoint:
        """|self - other| at the larger of the two scales."""
        a, b = _align(self, other)
        return FixedPoint(abs_difference(a.value, b.value), a.decimals)

    def max(self, other: FixedPoint) -> FixedPoint:
        """Larger of self and other (other on a tie)."""
        return self if self > other else other

    def min(self, other: FixedPoint) -> FixedPoint:
        """Smaller of self and other (other on a tie)."""
        return self if self < other else other

    def _compare(self, other: object) -> int | None:
        if not isinstance(other, FixedPoint):
            return None
        a, b = _align(self, other)
        return (a.value > b.value) - (a.value < b.value)

    def __eq__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __hash__(self) -> int:
        # Equal values at different scales must hash alike
        return hash(self.to_decimal())

    def __lt__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def __str__(self) -> str:
        return str(self.to_decimal())


def _align(a: FixedPoint, b: FixedPoint) -> tuple[FixedPoint, FixedPoint]:
    """Upscale both operands to the larger scale (exact)."""
    decimals = max(a.decimals, b.decimals)
    return a.to_decimals(decimals), b.to_decimals(decimals)
