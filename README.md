# smtvalues

Immutable value types for working with SMT-LIB style terms.

- `smtvalues.integer`
  - `Integer`: arbitrary-precision integer. It supports bitwise operations,
    floor and Euclidean division, `mod_by_pow2`, `extract_bit_range` and
    `length`. It converts to and from text in bases 2 to 62.
  - `limb_hash`: folds the 64-bit limbs of a value into a 64-bit hash.
- `smtvalues.rational`
  - `Rational`: exact fraction, always kept in lowest terms.
  - It is built from a numerator and a denominator, or parsed with
    `from_string` (`"n"` or `"n/d"`) or `from_decimal` (`"1.25"`).
- `smtvalues.bitvector`
  - `BitVector`: fixed-width unsigned bit-vector.
  - Operations: `concat`, `extract`, the bitwise operators `& | ^ ~`, and
    modular `+`, unary `-` and `*`.
  - `unsigned_div_total` returns all ones when dividing by zero.
    `unsigned_rem_total` returns the dividend when dividing by zero.
  - Mixing widths in an operation raises `ValueError`.
- `smtvalues.smt_string`
  - `SmtString`: sequence of code points below `NUM_CODES` (196608, the first
    three Unicode planes).
  - It reads and writes `\u` escape sequences.
  - It has `find`, `rfind`, `update`, `replace`, `substr` and `is_leq`.
- `smtvalues.filesystem`
  - `Filepath`: Unix-style path with lexical `canonical()` and
    `parent_path()`.
  - Surrounding spaces are trimmed.
  - `append` joins two paths as text, with nothing inserted between them.
- `smtvalues.expr_trie`
  - `ExprTrie`: trie keyed by sequences of hashable terms.
  - `get` finds or creates the node for a key sequence.
  - `remove` clears that node's data and prunes the branch that leads only
    to it.

All the value types are immutable. Every operation returns a new object.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from smtvalues.integer import Integer
from smtvalues.rational import Rational
from smtvalues.bitvector import BitVector
from smtvalues.smt_string import SmtString
from smtvalues.filesystem import Filepath
from smtvalues.expr_trie import ExprTrie

Integer(-7).euclidian_divide_remainder(Integer(2))     # Integer(1)
Rational.from_decimal("1.50").to_string()               # "3/2"

bv = BitVector.from_string("1010", 2)
bv.concat(BitVector.from_string("01", 2)).to_string(2)  # "101001"
bv.extract(3, 2).to_string(2)                          # "10"
bv.unsigned_div_total(BitVector(4, 0)).to_string(2)    # "1111"

s = SmtString.from_text("a\\u{48}b", True)
s.to_string()                                          # "aHb"

Filepath("foo/./bar/../baz").canonical().raw_path      # "foo/baz"

trie = ExprTrie()
trie.get(["f", "a"]).data = 42
trie.get(["f", "a"]).data                              # 42
trie.remove(["f", "a"])
```

## Notes on behaviour

- `SmtString.from_text` drops characters outside printable ASCII. Such
  characters must be written as `\u` escapes, and are read as escapes only
  when `use_escape_sequences` is true.
- An escape sequence that is malformed, or out of range, is kept as the text
  it was written as.
- `SmtString.find` and `SmtString.rfind` return -1 when there is no match.

## What this package does not do

This package provides values only. It has no term or expression
representation, no parser for SMT-LIB input, and no type checker or
evaluator. It has no command-line program.