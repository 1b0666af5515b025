"""Arbitrary-precision integers with the bit-level operations used by SMT values."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

__all__ = ["Integer", "limb_hash"]

_LIMB_BITS = 64
_LIMB_MASK = (1 << _LIMB_BITS) - 1
_UINT_MAX = (1 << 32) - 1
_LOWER_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_MIXED_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

IntegerLike = Union["Integer", int]


def limb_hash(value: IntegerLike) -> int:
    """Hash the magnitude of ``value`` limb by limb, least significant first.

    Each 64-bit limb is folded in as ``hash = (hash * 2) ^ limb``, keeping the
    result within 64 bits.
    """
    magnitude = abs(int(value))
    result = 0
    while magnitude:
        limb = magnitude & _LIMB_MASK
        result = ((result * 2) & _LIMB_MASK) ^ limb
        magnitude >>= _LIMB_BITS
    return result


def _check_base(base: int) -> None:
    if not 2 <= base <= 62:
        raise ValueError(f"base must be between 2 and 62, got {base}")


def _parse(text: str, base: int) -> int:
    _check_base(base)
    body = text.strip()
    negative = body.startswith("-")
    if negative:
        body = body[1:]
    if not body or not body.isascii() or not body.isalnum():
        raise ValueError(f"invalid integer literal {text!r} in base {base}")
    if base <= 36:
        magnitude = int(body, base)
    else:
        magnitude = 0
        for ch in body:
            digit = _MIXED_DIGITS.find(ch)
            if digit < 0 or digit >= base:
                raise ValueError(f"invalid integer literal {text!r} in base {base}")
            magnitude = magnitude * base + digit
    return -magnitude if negative else magnitude


def _coerce(value: IntegerLike) -> int:
    if isinstance(value, Integer):
        return value._value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"expected Integer or int, got {type(value).__name__}")


@total_ordering
class Integer:
    """An immutable arbitrary-precision integer."""

    __slots__ = ("_value",)

    def __init__(self, value: Union["Integer", int, str] = 0, base: int = 10) -> None:
        if isinstance(value, str):
            self._value = _parse(value, base)
        else:
            self._value = _coerce(value)

    @property
    def value(self) -> int:
        """The value as a Python int."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Integer({self._value})"

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        return limb_hash(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "Integer") -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self._value < other._value

    def __neg__(self) -> "Integer":
        return Integer(-self._value)

    def __add__(self, other: IntegerLike) -> "Integer":
        return Integer(self._value + _coerce(other))

    __radd__ = __add__

    def __sub__(self, other: IntegerLike) -> "Integer":
        return Integer(self._value - _coerce(other))

    def __mul__(self, other: IntegerLike) -> "Integer":
        return Integer(self._value * _coerce(other))

    __rmul__ = __mul__

    def bitwise_or(self, other: IntegerLike) -> "Integer":
        """Two's-complement bitwise or."""
        return Integer(self._value | _coerce(other))

    def bitwise_and(self, other: IntegerLike) -> "Integer":
        """Two's-complement bitwise and."""
        return Integer(self._value & _coerce(other))

    def bitwise_xor(self, other: IntegerLike) -> "Integer":
        """Two's-complement bitwise exclusive or."""
        return Integer(self._value ^ _coerce(other))

    def bitwise_not(self) -> "Integer":
        """Two's-complement bitwise complement, i.e. ``-x - 1``."""
        return Integer(~self._value)

    def multiply_by_pow2(self, power: int) -> "Integer":
        """Return ``self * 2**power``."""
        if power < 0:
            raise ValueError("power must be non-negative")
        return Integer(self._value << power)

    def one_extend(self, size: int, amount: int) -> "Integer":
        """Set the ``amount`` bits starting at bit index ``size``."""
        if size < 0 or amount < 0:
            raise ValueError("size and amount must be non-negative")
        mask = ((1 << amount) - 1) << size
        return Integer(self._value | mask)

    def fits_unsigned_int(self) -> bool:
        """Whether the value fits in a 32-bit unsigned integer."""
        return 0 <= self._value <= _UINT_MAX

    def to_unsigned_int(self) -> int:
        """The low 32 bits of the magnitude."""
        return abs(self._value) & _UINT_MAX

    def extract_bit_range(self, bit_count: int, low: int) -> "Integer":
        """Bits ``low`` up to, not including, ``low + bit_count``."""
        if bit_count < 0 or low < 0:
            raise ValueError("bit_count and low must be non-negative")
        high = low + bit_count - 1
        remainder = self._value % (1 << (high + 1)) if high >= 0 else 0
        return Integer(remainder >> low)

    def floor_divide_quotient(self, other: IntegerLike) -> "Integer":
        """``floor(self / other)``."""
        return Integer(self._value // _coerce(other))

    def floor_divide_remainder(self, other: IntegerLike) -> "Integer":
        """``self - floor(self / other) * other``."""
        return Integer(self._value % _coerce(other))

    @staticmethod
    def euclidian_qr(x: IntegerLike, y: IntegerLike) -> tuple["Integer", "Integer"]:
        """Quotient and remainder with ``0 <= r < |y|`` and ``x == y*q + r``."""
        xv, yv = _coerce(x), _coerce(y)
        q, r = divmod(xv, yv)
        if r < 0:
            # floor remainder is negative only when y is negative
            q += 1
            r -= yv
        return Integer(q), Integer(r)

    def euclidian_divide_quotient(self, other: IntegerLike) -> "Integer":
        """Quotient under the Euclidean definition."""
        return Integer.euclidian_qr(self, other)[0]

    def euclidian_divide_remainder(self, other: IntegerLike) -> "Integer":
        """Remainder under the Euclidean definition."""
        return Integer.euclidian_qr(self, other)[1]

    def mod_by_pow2(self, exp: int) -> "Integer":
        """``self mod 2**exp``, always non-negative."""
        if exp < 0:
            raise ValueError("exponent must be non-negative")
        return Integer(self._value & ((1 << exp) - 1))

    def sgn(self) -> int:
        """1, 0 or -1 according to the sign."""
        return (self._value > 0) - (self._value < 0)

    def pow(self, exp: int) -> "Integer":
        """Raise to a non-negative power."""
        if exp < 0:
            raise ValueError("exponent must be non-negative")
        return Integer(self._value**exp)

    def to_string(self, base: int = 10) -> str:
        """Digits in ``base`` (2 to 62), with a leading ``-`` when negative."""
        _check_base(base)
        digits = _LOWER_DIGITS if base <= 36 else _MIXED_DIGITS
        magnitude = abs(self._value)
        if magnitude == 0:
            return "0"
        out = []
        while magnitude:
            magnitude, digit = divmod(magnitude, base)
            out.append(digits[digit])
        if self._value < 0:
            out.append("-")
        return "".join(reversed(out))

    def length(self) -> int:
        """Smallest n with ``2**(n-1) <= |x| < 2**n``; 1 for zero."""
        if self._value == 0:
            return 1
        return abs(self._value).bit_length()