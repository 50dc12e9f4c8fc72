"""Fixed-point constants.

Centralizes the default decimal scale and common unit values.
"""

# Default number of fractional digits (ERC20 / ether convention)
DEFAULT_DECIMALS = 18

# 1.0 at common token scales
ONE_6 = 10**6  # USDC, USDT
ONE_18 = 10**18  # WETH, DAI
