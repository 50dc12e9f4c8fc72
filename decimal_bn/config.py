"""Reusable decimal scale configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace

from decimal_bn.arithmetic import decimal_div, decimal_mul
from decimal_bn.constants import DEFAULT_DECIMALS
from decimal_bn.safe_int import SafeInt
from decimal_bn.scaling import validate_decimals


@dataclass(frozen=True)
class DecimalConfig:
    """Scales for a recurring multiply/divide pairing.

    Bundles the three decimal counts that decimal_mul and decimal_div
    take, so a call site combining e.g. USDC (6) and WETH (18) amounts
    can define the pairing once.

    Attributes:
        a_decimals: Decimals of the first operand (default: 18)
        b_decimals: Decimals of the second operand (default: 18)
        out_decimals: Decimals of the result (default: 18)

    Examples:
        usdc_per_weth = DecimalConfig(a_decimals=6, b_decimals=18, out_decimals=6)
        price = usdc_per_weth.div(2_500_000_000, 10**18)  # 2500.000000
    """

    a_decimals: int = DEFAULT_DECIMALS
    b_decimals: int = DEFAULT_DECIMALS
    out_decimals: int = DEFAULT_DECIMALS

    def __post_init__(self) -> None:
        validate_decimals(
            a_decimals=self.a_decimals,
            b_decimals=self.b_decimals,
            out_decimals=self.out_decimals,
        )

    def mul(self, a: int | SafeInt, b: int | SafeInt) -> int:
        """decimal_mul with this configuration's scales."""
        return decimal_mul(a, b, self.a_decimals, self.b_decimals, self.out_decimals)

    def div(self, a: int | SafeInt, b: int | SafeInt) -> int:
        """decimal_div with this configuration's scales."""
        return decimal_div(a, b, self.a_decimals, self.b_decimals, self.out_decimals)

    def with_out_decimals(self, out_decimals: int) -> DecimalConfig:
        """Return a copy with a different output scale."""
        return replace(self, out_decimals=out_decimals)


# Default configuration instance (18 x 18 -> 18)
DEFAULT_DECIMAL_CONFIG = DecimalConfig()
