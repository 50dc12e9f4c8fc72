"""Safe integer wrapper for arithmetic on fixed-point amounts.

This module provides SafeInt, a lightweight wrapper over Python's
arbitrary-precision int that gives it big-number library semantics:
- Division truncates toward zero (not toward negative infinity)
- Division by zero raises DivisionByZero
- True division is rejected so float results can never leak in

Usage pattern:
    from decimal_bn.safe_int import SafeInt, S

    def calculate(a: int, b: int, c: int) -> int:
        # Wrap at entry
        sa, sb, sc = S(a), S(b), S(c)

        # Natural arithmetic - automatically safe
        result = (sa * sb) // sc  # Raises if sc == 0, truncates toward zero

        # Unwrap at exit
        return result.value
"""

from __future__ import annotations

from decimal_bn.errors import DivisionByZero, InvalidDecimalsError


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity, but big-number
    libraries truncate toward zero. This matters for negative numbers.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        DivisionByZero: If b is zero

    Examples:
        Python: -7 // 3 = -3 (rounds toward -inf)
        div_trunc(-7, 3) = -2 (truncates toward zero)
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {a} // 0")

    # Same sign: result is non-negative, so floor and truncate agree
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


class SafeInt:
    """Signed integer with big-number arithmetic semantics.

    Wraps an integer and provides arithmetic operators that match the
    behavior expected of a big-number library:
    - Floor division (//) truncates toward zero
    - Division or modulo by zero raises DivisionByZero
    - True division (/) raises TypeError

    Values may be negative; unlike unsigned token balances, fixed-point
    amounts flowing through the decimal helpers are signed.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Args:
            value: Integer value to wrap, or SafeInt to copy

        Raises:
            TypeError: If value is not an int or SafeInt
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(_extract_value(other) + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self. Result may be negative."""
        return SafeInt(self._value - _extract_value(other))

    def __rsub__(self, other: int) -> SafeInt:
        return SafeInt(_extract_value(other) - self._value)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(_extract_value(other) * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, truncating toward zero.

        Raises:
            DivisionByZero: If other is zero
        """
        return SafeInt(div_trunc(self._value, _extract_value(other)))

    def __rfloordiv__(self, other: int) -> SafeInt:
        """Integer division (other // self), truncating toward zero.

        Raises:
            DivisionByZero: If self is zero
        """
        return SafeInt(div_trunc(_extract_value(other), self._value))

    def __mod__(self, other: SafeInt | int) -> SafeInt:
        """Remainder of truncating division (takes the sign of self).

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Modulo by zero: {self._value} % 0")
        return SafeInt(self._value - other_val * div_trunc(self._value, other_val))

    def __rmod__(self, other: int) -> SafeInt:
        return SafeInt(other) % self

    def __truediv__(self, other: object) -> SafeInt:
        raise TypeError("SafeInt does not support true division; use floor division (//)")

    def __rtruediv__(self, other: object) -> SafeInt:
        raise TypeError("SafeInt does not support true division; use floor division (//)")

    def __neg__(self) -> SafeInt:
        return SafeInt(-self._value)

    def __pos__(self) -> SafeInt:
        return self

    def __abs__(self) -> SafeInt:
        return SafeInt(abs(self._value))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def sign(self) -> int:
        """Return -1, 0 or 1 according to the sign of the value."""
        return (self._value > 0) - (self._value < 0)

    @classmethod
    def zero(cls) -> SafeInt:
        """Create a SafeInt with value 0."""
        return cls(0)

    @classmethod
    def pow10(cls, exponent: int) -> SafeInt:
        """Create 10**exponent, i.e. one whole unit at `exponent` decimals.

        Raises:
            TypeError: If exponent is not an int
            InvalidDecimalsError: If exponent is negative
        """
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            raise TypeError(f"Exponent must be int, got {type(exponent).__name__}")
        if exponent < 0:
            raise InvalidDecimalsError(f"Exponent must be non-negative, got {exponent}")
        return cls(10**exponent)

    @classmethod
    def from_str(cls, s: str) -> SafeInt:
        """Parse SafeInt from a base-10 integer string.

        Raises:
            ValueError: If string is not a valid integer
        """
        return cls(int(s, 10))


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    if isinstance(x, int) and not isinstance(x, bool):
        return x
    raise TypeError(f"SafeInt operand must be int, got {type(x).__name__}")


# Convenience alias for concise code
S = SafeInt
