"""Tests for DecimalConfig."""

import dataclasses

import pytest

from decimal_bn import DEFAULT_DECIMAL_CONFIG, DecimalConfig
from decimal_bn.errors import DivisionByZero, InvalidDecimalsError
from tests.helpers import ONE_6, ONE_18, ONE_SIXTH_6, ONE_SIXTH_18, ONE_THIRD_18, THREE_6


class TestDecimalConfig:
    """Tests for DecimalConfig."""

    def test_defaults(self):
        """Default config is 18 x 18 -> 18."""
        assert DEFAULT_DECIMAL_CONFIG == DecimalConfig(18, 18, 18)

    def test_default_mul(self):
        assert DEFAULT_DECIMAL_CONFIG.mul(ONE_SIXTH_18, ONE_SIXTH_18) == ONE_SIXTH_18 // 6 + 1

    def test_mixed_scale_div(self):
        """2500 USDC / 1 WETH = 2500 USDC per WETH."""
        usdc_per_weth = DecimalConfig(a_decimals=6, b_decimals=18, out_decimals=6)
        assert usdc_per_weth.div(2_500 * ONE_6, ONE_18) == 2_500 * ONE_6

    def test_mixed_scale_mul(self):
        config = DecimalConfig(a_decimals=6, b_decimals=18, out_decimals=6)
        assert config.mul(ONE_SIXTH_6, ONE_SIXTH_18) == ONE_SIXTH_6 // 6 + 1

    def test_div_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            DEFAULT_DECIMAL_CONFIG.div(ONE_18, 0)

    def test_with_out_decimals(self):
        """with_out_decimals returns a copy and leaves the original alone."""
        base = DecimalConfig(a_decimals=6, b_decimals=6, out_decimals=6)
        to_18 = base.with_out_decimals(18)
        assert to_18 == DecimalConfig(6, 6, 18)
        assert base.out_decimals == 6
        assert to_18.div(ONE_6, THREE_6 * 2) == ONE_THIRD_18 // 2 + 1

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_DECIMAL_CONFIG.out_decimals = 6  # type: ignore

    def test_negative_decimals_rejected(self):
        with pytest.raises(InvalidDecimalsError, match="a_decimals"):
            DecimalConfig(a_decimals=-1)

    def test_with_negative_out_decimals_rejected(self):
        with pytest.raises(InvalidDecimalsError, match="out_decimals"):
            DEFAULT_DECIMAL_CONFIG.with_out_decimals(-6)
