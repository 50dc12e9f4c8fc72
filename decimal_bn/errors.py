"""Error classes for fixed-point decimal operations.

All errors derive from ArithmeticError so callers can catch the whole
family with a single handler.
"""


class DecimalBNError(ArithmeticError):
    """Base error for fixed-point decimal operations."""

    pass


class DivisionByZero(DecimalBNError, ZeroDivisionError):
    """Division or modulo by zero."""

    pass


class InvalidDecimalsError(DecimalBNError, ValueError):
    """Decimal scale must be a non-negative integer."""

    pass
