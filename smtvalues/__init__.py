"""Value types for SMT-LIB style terms: integers, rationals, bit-vectors and strings, plus path and trie helpers."""

__version__ = "0.1.0"
__all__ = ["bitvector", "expr_trie", "filesystem", "integer", "rational", "smt_string"]