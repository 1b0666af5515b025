"""Arbitrary-precision rationals kept in canonical form."""

from __future__ import annotations

from fractions import Fraction
from functools import total_ordering
from typing import Union

from smtvalues.integer import Integer, limb_hash

__all__ = ["Rational"]

RationalLike = Union["Rational", Integer, int, Fraction]


def _to_fraction(value: RationalLike) -> Fraction:
    if isinstance(value, Rational):
        return value._value
    if isinstance(value, Integer):
        return Fraction(int(value))
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction(value)
    raise TypeError(f"expected a rational value, got {type(value).__name__}")


@total_ordering
class Rational:
    """An immutable rational whose numerator and denominator are coprime."""

    __slots__ = ("_value",)

    def __init__(self, numerator: RationalLike = 0, denominator: RationalLike = 1) -> None:
        den = _to_fraction(denominator)
        if den == 0:
            raise ZeroDivisionError("rational with zero denominator")
        self._value = _to_fraction(numerator) / den

    @classmethod
    def from_string(cls, text: str, base: int = 10) -> "Rational":
        """Parse ``"n"`` or ``"n/d"`` with digits in ``base``."""
        num_text, sep, den_text = text.partition("/")
        numerator = Integer(num_text, base)
        denominator = Integer(den_text, base) if sep else Integer(1)
        return cls(numerator, denominator)

    @classmethod
    def from_decimal(cls, dec: str) -> "Rational":
        """Parse a decimal such as ``"1.5"``: ``xxx.yyy`` is ``xxxyyy / 10**3``."""
        point = dec.find(".")
        if point < 0:
            return cls.from_string(dec)
        numerator = Integer(dec[:point] + dec[point + 1 :])
        places = len(dec) - (point + 1)
        return cls(numerator, Integer(10).pow(places))

    @property
    def numerator(self) -> Integer:
        return Integer(self._value.numerator)

    @property
    def denominator(self) -> Integer:
        return Integer(self._value.denominator)

    def __repr__(self) -> str:
        return f"Rational({self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        return limb_hash(self._value.numerator) ^ limb_hash(self._value.denominator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self._value < other._value

    def __neg__(self) -> "Rational":
        return Rational(-self._value)

    def __add__(self, other: RationalLike) -> "Rational":
        return Rational(self._value + _to_fraction(other))

    __radd__ = __add__

    def __sub__(self, other: RationalLike) -> "Rational":
        return Rational(self._value - _to_fraction(other))

    def __mul__(self, other: RationalLike) -> "Rational":
        return Rational(self._value * _to_fraction(other))

    __rmul__ = __mul__

    def __truediv__(self, other: RationalLike) -> "Rational":
        return Rational(self._value, _to_fraction(other))

    def sgn(self) -> int:
        """1, 0 or -1 according to the sign."""
        return (self._value > 0) - (self._value < 0)

    def floor(self) -> Integer:
        """The greatest integer not above this value."""
        return Integer(self._value.numerator // self._value.denominator)

    def is_integral(self) -> bool:
        """Whether the denominator is one."""
        return self._value.denominator == 1

    def to_string(self, base: int = 10) -> str:
        """``"n"`` or ``"n/d"`` with digits in ``base``."""
        num = self.numerator.to_string(base)
        if self._value.denominator == 1:
            return num
        return f"{num}/{self.denominator.to_string(base)}"

    def to_string_decimal(self) -> str:
        """Decimal rendering; printed as a rational."""
        return self.to_string()