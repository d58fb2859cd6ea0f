import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from aklib.checked import Checked, is_within_range

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


@pytest.mark.parametrize(
    "bits,signed,low,high",
    [
        (8, True, -(2**7), 2**7 - 1),
        (8, False, 0, 2**8 - 1),
        (16, True, -(2**15), 2**15 - 1),
        (32, False, 0, 2**32 - 1),
        (64, True, -(2**63), 2**63 - 1),
    ],
)
def test_range_bounds(bits, signed, low, high):
    assert is_within_range(low, bits, signed)
    assert is_within_range(high, bits, signed)
    assert not is_within_range(low - 1, bits, signed)
    assert not is_within_range(high + 1, bits, signed)


def test_unsupported_width_rejected():
    with pytest.raises(ValueError):
        is_within_range(0, 12, True)


def test_construct_out_of_range_sets_overflow_and_wraps():
    c = Checked(2**8, bits=8, signed=False)
    assert c.has_overflow()
    assert c.value_unchecked() == 0


def test_add_past_max_overflows_and_wraps():
    c = Checked(2**7 - 1, bits=8)
    c.add(1)
    assert c.has_overflow()
    assert c.value_unchecked() == -(2**7)
    with pytest.raises(OverflowError):
        c.value()


def test_overflow_is_sticky():
    c = Checked(0, bits=8, signed=False)
    c.sub(1)
    assert c.value_unchecked() == 2**8 - 1
    c.add(1)
    assert c.has_overflow()
    assert c.value_unchecked() == 0


@given(st.integers(-(2**15), 2**15), st.integers(-(2**15), 2**15))
def test_in_range_arithmetic_is_exact(a, b):
    for method, expected in (("add", a + b), ("sub", a - b), ("mul", a * b)):
        c = Checked(a)
        getattr(c, method)(b)
        assert not c.has_overflow()
        assert c.value() == expected


def test_division_by_zero_overflows():
    c = Checked(10)
    c.div(0)
    assert c.has_overflow()


def test_min_divided_by_minus_one_overflows():
    c = Checked(I32_MIN)
    c.div(-1)
    assert c.has_overflow()


def test_mod_by_zero_keeps_value_and_overflows():
    c = Checked(10)
    c.mod(0)
    assert c.has_overflow()
    assert c.value_unchecked() == 10


@given(st.integers(I32_MIN, I32_MAX), st.integers(I32_MIN, I32_MAX))
def test_truncating_division_invariant(a, b):
    assume(b != 0)
    assume(not (a == I32_MIN and b == -1))
    q = Checked(a)
    q.div(b)
    r = Checked(a)
    r.mod(b)
    assert q.value() * b + r.value() == a
    assert abs(r.value()) < abs(b)
    assert r.value() == 0 or (r.value() < 0) == (a < 0)


def test_floordiv_operator_truncates_toward_zero():
    assert (Checked(-7) // 2).value() == -(7 // 2)


def test_binary_operator_returns_new_object():
    a = Checked(5)
    b = Checked(7)
    c = a + b
    assert c.value() == 5 + 7
    assert a.value() == 5
    assert (b - a).value() == 7 - 5
    assert (a * b).value() == 5 * 7


def test_inplace_with_int():
    c = Checked(5)
    c += 3
    c *= 2
    assert c.value() == (5 + 3) * 2


def test_inplace_with_overflowed_checked_raises():
    bad = Checked(2**40)
    assert bad.has_overflow()
    c = Checked(1)
    with pytest.raises(OverflowError):
        c += bad
    assert bad.value_unchecked() == 0


def test_comparisons():
    c = Checked(5)
    assert c < 6
    assert c >= 5
    assert c != 4
    assert c == 5
    assert c == Checked(5)


def test_comparison_of_overflowed_raises():
    c = Checked(2**40)
    with pytest.raises(OverflowError):
        _ = c < 1
    assert c.has_overflow()
    assert c.value_unchecked() == 0


def test_truthiness():
    assert not Checked(0)
    assert Checked(3)
    with pytest.raises(OverflowError):
        bool(Checked(2**40))


def test_addition_would_overflow():
    assert Checked.addition_would_overflow(I32_MAX, 1)
    assert not Checked.addition_would_overflow(1, 1)
    assert Checked.addition_would_overflow(0, -1, bits=8, signed=False)


def test_multiplication_would_overflow_two_factors():
    assert Checked.multiplication_would_overflow(2**16, 2**16)
    assert not Checked.multiplication_would_overflow(2**15, 2**15)


def test_multiplication_would_overflow_three_factors_is_sticky():
    assert not Checked.multiplication_would_overflow(2, 3, 4, bits=8, signed=False)
    assert Checked.multiplication_would_overflow(16, 16, 0, bits=8, signed=False)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        Checked(1.5)