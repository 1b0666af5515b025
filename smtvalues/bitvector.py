"""Fixed-width bit-vector values with modular arithmetic."""

from __future__ import annotations

from typing import Union

from smtvalues.integer import Integer, limb_hash

__all__ = ["BitVector"]

_STRING_BASES = (2, 10, 16)


class BitVector:
    """An immutable bit-vector of a given width holding a non-negative value."""

    __slots__ = ("_size", "_value")

    def __init__(self, size: int = 0, value: Union[Integer, int] = 0) -> None:
        if size < 0:
            raise ValueError(f"bit-vector size must be non-negative, got {size}")
        self._size = size
        self._value = Integer(value).mod_by_pow2(size)

    @classmethod
    def from_string(cls, num: str, base: int = 2) -> "BitVector":
        """Parse a non-negative value in base 2, 10 or 16.

        The width is the number of digits in base 2, four times that in
        base 16, and the minimal width holding the value in base 10.
        """
        if base not in _STRING_BASES:
            raise ValueError(f"base must be one of {_STRING_BASES}, got {base}")
        if num.startswith("-"):
            raise ValueError(f"bit-vector literal must not be negative: {num!r}")
        value = Integer(num, base)
        if base == 10:
            size = value.length()
        elif base == 16:
            size = len(num) * 4
        else:
            size = len(num)
        return cls(size, value)

    @property
    def size(self) -> int:
        """The bit-width."""
        return self._size

    @property
    def value(self) -> Integer:
        """The unsigned value."""
        return self._value

    def to_integer(self) -> Integer:
        """The unsigned value as an Integer."""
        return self._value

    def to_string(self, base: int = 2) -> str:
        """Digits of the value; in base 2 padded with zeros to the full width."""
        text = self._value.to_string(base)
        if base == 2 and self._size > len(text):
            return "0" * (self._size - len(text)) + text
        if self._size == 0:
            return ""
        return text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BitVector({self._size}, {int(self._value)})"

    def __hash__(self) -> int:
        return limb_hash(self._value) ^ self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._size == other._size and self._value == other._value

    def _same_size(self, other: "BitVector") -> None:
        if self._size != other._size:
            raise ValueError(
                f"bit-vector sizes differ: {self._size} and {other._size}"
            )

    def concat(self, other: "BitVector") -> "BitVector":
        """This vector's bits followed by ``other``'s."""
        return BitVector(
            self._size + other._size,
            self._value.multiply_by_pow2(other._size) + other._value,
        )

    def extract(self, high: int, low: int) -> "BitVector":
        """Bits ``high`` down to ``low``, both inclusive."""
        if not 0 <= low <= high < self._size:
            raise ValueError(
                f"invalid extract [{high}:{low}] on bit-vector of size {self._size}"
            )
        width = high - low + 1
        return BitVector(width, self._value.extract_bit_range(width, low))

    def __xor__(self, other: "BitVector") -> "BitVector":
        self._same_size(other)
        return BitVector(self._size, self._value.bitwise_xor(other._value))

    def __or__(self, other: "BitVector") -> "BitVector":
        self._same_size(other)
        return BitVector(self._size, self._value.bitwise_or(other._value))

    def __and__(self, other: "BitVector") -> "BitVector":
        self._same_size(other)
        return BitVector(self._size, self._value.bitwise_and(other._value))

    def __invert__(self) -> "BitVector":
        return BitVector(self._size, self._value.bitwise_not())

    def __add__(self, other: "BitVector") -> "BitVector":
        self._same_size(other)
        return BitVector(self._size, self._value + other._value)

    def __neg__(self) -> "BitVector":
        return ~self + BitVector(self._size, 1)

    def __mul__(self, other: "BitVector") -> "BitVector":
        self._same_size(other)
        return BitVector(self._size, self._value * other._value)

    def unsigned_div_total(self, other: "BitVector") -> "BitVector":
        """Unsigned quotient; all ones when ``other`` is zero."""
        self._same_size(other)
        if other._value.sgn() == 0:
            return BitVector(self._size, -1)
        return BitVector(self._size, self._value.floor_divide_quotient(other._value))

    def unsigned_rem_total(self, other: "BitVector") -> "BitVector":
        """Unsigned remainder; this vector itself when ``other`` is zero."""
        self._same_size(other)
        if other._value.sgn() == 0:
            return BitVector(self._size, self._value)
        return BitVector(self._size, self._value.floor_divide_remainder(other._value))