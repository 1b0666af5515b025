"""Strings of Unicode code points as used by SMT-LIB string values."""

from __future__ import annotations

from typing import Iterable, Iterator

__all__ = ["SmtString", "NUM_CODES"]

NUM_CODES = 196608
"""Size of the alphabet: the first three Unicode planes (3 * 16**4)."""

_HASH_MASK = (1 << 64) - 1
_MAX_SIZE = (1 << 32) - 1


def _add_char(ch: str, out: list[int]) -> None:
    # Characters outside printable ASCII must be written as escape sequences
    # and are dropped here.
    code = ord(ch)
    if 32 <= code <= 127:
        out.append(code)


def _decode(text: str, use_escape_sequences: bool) -> list[int]:
    """Convert ``text`` to code points, optionally reading ``\\u`` escapes."""
    out: list[int] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != "\\" or not use_escape_sequences:
            _add_char(ch, out)
            i += 1
            continue
        # characters read so far, restored if this is not an escape sequence
        cache: list[int] = []
        _add_char(ch, cache)
        i += 1
        is_escape = True
        digits = ""
        if i >= n or text[i] != "u":
            is_escape = False
        else:
            _add_char(text[i], cache)
            i += 1
            is_start = True
            is_end = False
            has_brace = False
            while i < n:
                ch = text[i]
                if is_start:
                    is_start = False
                    if ch == "{":
                        has_brace = True
                        _add_char(ch, cache)
                        i += 1
                        continue
                elif ch == "}":
                    is_escape = has_brace and bool(digits)
                    is_end = True
                    _add_char(ch, cache)
                    i += 1
                    break
                if not SmtString.is_hex_digit(ord(ch)):
                    is_escape = False
                    break
                digits += ch
                _add_char(ch, cache)
                i += 1
                if not has_brace and len(digits) == 4:
                    is_end = True
                    break
                if has_brace and len(digits) > 5:
                    is_escape = False
                    break
            if not is_end:
                is_escape = False
        if is_escape:
            value = int(digits, 16)
            if value >= NUM_CODES:
                is_escape = False
            else:
                out.append(value)
        if not is_escape:
            out.extend(cache)
    return out


class SmtString:
    """An immutable sequence of code points below ``NUM_CODES``."""

    __slots__ = ("_codes",)

    NUM_CODES = NUM_CODES

    def __init__(self, codes: Iterable[int] = ()) -> None:
        values = tuple(codes)
        for code in values:
            if not 0 <= code < NUM_CODES:
                raise ValueError(f"code point {code} out of range [0, {NUM_CODES})")
        self._codes = values

    @classmethod
    def from_text(cls, text: str, use_escape_sequences: bool = False) -> "SmtString":
        """Build from text; non-printable characters are dropped.

        With ``use_escape_sequences``, ``\\ud3d2d1d0`` and ``\\u{d..}`` (one to
        five hex digits) are read as code points; malformed or out-of-range
        sequences are kept as written.
        """
        return cls(_decode(text, use_escape_sequences))

    @property
    def codes(self) -> tuple[int, ...]:
        """The code points."""
        return self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[int]:
        return iter(self._codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SmtString):
            return NotImplemented
        return self._codes == other._codes

    def __hash__(self) -> int:
        seed = len(self._codes)
        for code in self._codes:
            seed ^= (code + 0x9E3779B9 + (seed << 6) + (seed >> 2)) & _HASH_MASK
            seed &= _HASH_MASK
        return seed

    def __str__(self) -> str:
        return f'"{self.to_string()}"'

    def __repr__(self) -> str:
        return f"SmtString.from_text({self.to_string(True)!r}, True)"

    def __add__(self, other: "SmtString") -> "SmtString":
        return self.concat(other)

    def concat(self, other: "SmtString") -> "SmtString":
        """This string followed by ``other``."""
        return SmtString(self._codes + other._codes)

    def to_string(self, use_escape_sequences: bool = False) -> str:
        """Render as text; non-printables and backslash always use ``\\u{..}``.

        With ``use_escape_sequences`` every character is escaped.
        """
        parts = []
        for code in self._codes:
            if self.is_printable(code) and code != ord("\\") and not use_escape_sequences:
                parts.append(chr(code))
            else:
                parts.append(f"\\u{{{code:x}}}")
        return "".join(parts)

    def is_leq(self, other: "SmtString") -> bool:
        """Lexicographic less-than-or-equal on code points."""
        for index, code in enumerate(self._codes):
            if index >= len(other._codes):
                return False
            other_code = other._codes[index]
            if code > other_code:
                return False
            if code < other_code:
                return True
        return True

    def find(self, other: "SmtString", start: int = 0) -> int:
        """First index of ``other`` at or after ``start``, or -1."""
        size, sub = len(self._codes), len(other._codes)
        if size < sub + start:
            return -1
        if sub == 0:
            return start
        for pos in range(start, size - sub + 1):
            if self._codes[pos : pos + sub] == other._codes:
                return pos
        return -1

    def rfind(self, other: "SmtString", start: int = 0) -> int:
        """Search from the end, skipping ``start`` code points there.

        Returns the distance from the end of this string to the end of the
        last occurrence of ``other``, or -1.
        """
        reversed_self = SmtString(reversed(self._codes))
        reversed_other = SmtString(reversed(other._codes))
        return reversed_self.find(reversed_other, start)

    def update(self, index: int, other: "SmtString") -> "SmtString":
        """Overwrite from ``index`` with ``other``, keeping the length."""
        if index >= len(self._codes):
            return self
        remaining = len(self._codes) - index
        return SmtString(
            self._codes[:index]
            + other._codes[:remaining]
            + self._codes[index + len(other._codes) :]
        )

    def replace(self, old: "SmtString", new: "SmtString") -> "SmtString":
        """Replace the first occurrence of ``old`` with ``new``."""
        pos = self.find(old)
        if pos < 0:
            return self
        return SmtString(
            self._codes[:pos] + new._codes + self._codes[pos + len(old._codes) :]
        )

    def substr(self, index: int, length: int) -> "SmtString":
        """The ``length`` code points starting at ``index``."""
        if index < 0 or length < 0 or index + length > len(self._codes):
            raise ValueError(
                f"substring [{index}, {index}+{length}) out of range for length "
                f"{len(self._codes)}"
            )
        return SmtString(self._codes[index : index + length])

    def is_number(self) -> bool:
        """Whether the string is non-empty and all decimal digits."""
        return bool(self._codes) and all(self.is_digit(c) for c in self._codes)

    @staticmethod
    def is_digit(character: int) -> bool:
        """Whether the code point is ``0`` to ``9``."""
        return 48 <= character <= 57

    @staticmethod
    def is_hex_digit(character: int) -> bool:
        """Whether the code point is a hexadecimal digit."""
        return (
            SmtString.is_digit(character)
            or 65 <= character <= 70
            or 97 <= character <= 102
        )

    @staticmethod
    def is_printable(character: int) -> bool:
        """Whether the code point is in ``' '`` to ``'~'``."""
        return 32 <= character <= 126

    @staticmethod
    def max_size() -> int:
        """The maximum representable length."""
        return _MAX_SIZE