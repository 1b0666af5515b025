import math
from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from smtvalues.integer import Integer
from smtvalues.rational import Rational

ints = st.integers(min_value=-(10**30), max_value=10**30)
nonzero = ints.filter(lambda v: v != 0)


@given(ints, nonzero)
def test_canonical_form(n, d):
    r = Rational(n, d)
    expected = Fraction(n, d)
    assert int(r.numerator) == expected.numerator
    assert int(r.denominator) == expected.denominator


@given(ints, nonzero)
def test_to_string_matches_fraction(n, d):
    assert Rational(n, d).to_string() == str(Fraction(n, d))


@given(ints, nonzero, st.integers(min_value=2, max_value=62))
def test_string_round_trip(n, d, base):
    r = Rational(Integer(n), Integer(d))
    assert Rational.from_string(r.to_string(base), base) == r


def test_from_decimal_example():
    assert Rational.from_decimal("1.5").to_string() == "3/2"


@pytest.mark.parametrize("text", ["1.5", "-0.25", "10", "3.", ".5", "007.100"])
def test_from_decimal_matches_fraction(text):
    r = Rational.from_decimal(text)
    assert (int(r.numerator), int(r.denominator)) == (
        Fraction(text).numerator,
        Fraction(text).denominator,
    )


@pytest.mark.parametrize("text", ["abc", "1.2.3", ""])
def test_from_decimal_rejects_garbage(text):
    with pytest.raises(ValueError):
        Rational.from_decimal(text)


def test_zero_denominator_rejected():
    with pytest.raises(ZeroDivisionError):
        Rational(1, 0)
    with pytest.raises(ZeroDivisionError):
        Rational.from_string("3/0")
    with pytest.raises(ZeroDivisionError):
        Rational(1) / Rational(0)


@given(ints, nonzero, ints, nonzero)
def test_arithmetic(a, b, c, d):
    x, y = Rational(a, b), Rational(c, d)
    fx, fy = Fraction(a, b), Fraction(c, d)
    assert (x + y).to_string() == str(fx + fy)
    assert (x * y).to_string() == str(fx * fy)
    assert (-x).to_string() == str(-fx)
    assert (x > y) == (fx > fy)
    if c != 0:
        assert (x / y).to_string() == str(fx / fy)


@given(ints, nonzero)
def test_floor_sgn_integral(n, d):
    r = Rational(n, d)
    f = Fraction(n, d)
    assert int(r.floor()) == math.floor(f)
    assert r.sgn() == (f > 0) - (f < 0)
    assert r.is_integral() == (f.denominator == 1)


@given(ints, nonzero)
def test_hash_consistent_with_equality(n, d):
    assert hash(Rational(n * 3, d * 3)) == hash(Rational(n, d))
    assert Rational(n * 3, d * 3) == Rational(n, d)


@given(ints, nonzero)
def test_decimal_string_is_rational_string(n, d):
    r = Rational(n, d)
    assert r.to_string_decimal() == r.to_string()


def test_integral_string_has_no_slash():
    r = Rational(Integer(12), Integer(4))
    assert r.is_integral()
    assert "/" not in r.to_string()
    assert Rational.from_string(r.to_string()) == r