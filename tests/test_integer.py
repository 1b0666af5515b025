import pytest
from hypothesis import given, strategies as st

from smtvalues.integer import Integer, limb_hash

ints = st.integers(min_value=-(2**200), max_value=2**200)
nonzero = ints.filter(lambda v: v != 0)
small = st.integers(min_value=0, max_value=300)


def test_parse_negative_matches_negation():
    assert Integer("-1") == -Integer(1)


@given(ints, st.integers(min_value=2, max_value=62))
def test_to_string_round_trip(x, base):
    text = Integer(x).to_string(base)
    assert Integer(text, base) == Integer(x)


def test_to_string_hex_lowercase():
    assert Integer(255).to_string(16) == "ff"


@given(ints)
def test_decimal_string_matches_python(x):
    assert str(Integer(x)) == str(x)


@pytest.mark.parametrize("text", ["", "-", "12x", "1_0", " + 3"])
def test_invalid_strings_rejected(text):
    with pytest.raises(ValueError):
        Integer(text)


def test_bad_base_rejected():
    with pytest.raises(ValueError):
        Integer(5).to_string(1)


@given(ints, ints)
def test_arithmetic_and_order(a, b):
    assert int(Integer(a) + Integer(b)) == a + b
    assert int(Integer(a) * Integer(b)) == a * b
    assert (Integer(a) > Integer(b)) == (a > b)
    assert (Integer(a) >= Integer(b)) == (a >= b)


@given(ints, ints)
def test_bitwise_ops(a, b):
    assert int(Integer(a).bitwise_or(b)) == a | b
    assert int(Integer(a).bitwise_and(b)) == a & b
    assert int(Integer(a).bitwise_xor(b)) == a ^ b
    assert Integer(a).bitwise_not().bitwise_not() == Integer(a)


@given(ints, small)
def test_multiply_by_pow2(x, k):
    assert Integer(x).multiply_by_pow2(k) == Integer(x) * Integer(2).pow(k)


@given(small)
def test_one_extend_from_zero_is_all_ones(n):
    assert Integer(0).one_extend(0, n) == Integer(-1).mod_by_pow2(n)


def test_one_extend_keeps_low_bits():
    assert Integer(1).one_extend(1, 7) == Integer(-1).mod_by_pow2(8)


def test_fits_unsigned_int_bounds():
    assert Integer((1 << 32) - 1).fits_unsigned_int()
    assert not Integer(1 << 32).fits_unsigned_int()
    assert not Integer(-1).fits_unsigned_int()


@given(ints)
def test_to_unsigned_int_wraps(x):
    value = Integer(x).to_unsigned_int()
    assert 0 <= value < 2**32
    assert value == Integer(abs(x)).mod_by_pow2(32).to_unsigned_int()


@given(st.integers(min_value=0, max_value=2**100), small, small)
def test_extract_bit_range_reassembles(x, count, low):
    part = Integer(x).extract_bit_range(count, low)
    assert 0 <= int(part) < 2**count
    below = Integer(x).mod_by_pow2(low)
    above = Integer(x).extract_bit_range(400, low + count)
    rebuilt = above.multiply_by_pow2(low + count) + part.multiply_by_pow2(low) + below
    assert rebuilt == Integer(x)


@given(ints, nonzero)
def test_floor_division(x, y):
    q = Integer(x).floor_divide_quotient(y)
    r = Integer(x).floor_divide_remainder(y)
    assert q * Integer(y) + r == Integer(x)
    assert abs(int(r)) < abs(y)
    assert r.sgn() in (0, Integer(y).sgn())


@given(ints, nonzero)
def test_euclidian_division(x, y):
    q, r = Integer.euclidian_qr(x, y)
    assert q * Integer(y) + r == Integer(x)
    assert 0 <= int(r) < abs(y)
    assert Integer(x).euclidian_divide_quotient(y) == q
    assert Integer(x).euclidian_divide_remainder(y) == r


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Integer(3).floor_divide_quotient(0)


@given(ints, small)
def test_mod_by_pow2(x, e):
    r = Integer(x).mod_by_pow2(e)
    assert 0 <= int(r) < 2**e
    assert int(r) == x % 2**e


@given(ints)
def test_sgn(x):
    assert Integer(x).sgn() == (x > 0) - (x < 0)


@given(st.integers(min_value=-1000, max_value=1000), st.integers(min_value=0, max_value=20))
def test_pow_recurrence(x, n):
    assert Integer(x).pow(0) == Integer(1)
    assert Integer(x).pow(n + 1) == Integer(x).pow(n) * Integer(x)


def test_pow_negative_exponent_rejected():
    with pytest.raises(ValueError):
        Integer(2).pow(-1)


def test_length_of_zero_is_one():
    assert Integer(0).length() == 1


@given(nonzero)
def test_length_bounds(x):
    n = Integer(x).length()
    assert 2 ** (n - 1) <= abs(x) < 2**n


def test_limb_hash_single_limb_is_value():
    assert limb_hash(12345) == 12345
    assert limb_hash(0) == 0


def test_limb_hash_two_limbs():
    assert limb_hash(2**64) == 1


@given(ints)
def test_hash_ignores_sign_and_matches_equality(x):
    assert limb_hash(x) == limb_hash(-x)
    assert hash(Integer(x)) == hash(Integer(str(x)))
    assert 0 <= limb_hash(x) < 2**64