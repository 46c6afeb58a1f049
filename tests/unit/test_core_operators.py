from decimal import Decimal
from fractions import Fraction

import pytest

from mpfloat import BigFloat, Rounding, ArgumentError, local_context, set_precision_combiner


# -----------------------------
# Value preservation
# -----------------------------

def test_binary_operator_leaves_operands_untouched(three_and_two):
    x, y = three_and_two
    z = x + y
    print("[operator+] 3 + 2 ->", z, "; x ->", x, "; y ->", y)
    assert z.is_equal(5)
    assert x.is_equal(3) and y.is_equal(2)
    assert z is not x and z is not y


@pytest.mark.parametrize(
    "op,expected",
    [
        (lambda a, b: a + b, 5),
        (lambda a, b: a - b, 1),
        (lambda a, b: a * b, 6),
        (lambda a, b: a / b, 1.5),
        (lambda a, b: a ** b, 9),
    ],
)
def test_arithmetic_operators(op, expected, three_and_two):
    x, y = three_and_two
    z = op(x, y)
    assert z.is_equal(expected)
    assert z.precision == 64
    assert x.is_equal(3) and y.is_equal(2)


def test_three_over_two_at_64_bits():
    print("[div] 3/2 at 64 bits -> 1.5, exact")
    z = BigFloat(3, 64) / BigFloat(2, 64)
    assert z.is_equal(1.5)
    assert str(z) == "1.5"
    assert z.precision == 64


def test_unary_operators_are_fresh():
    x = BigFloat(-2.5, 64)
    for r in (+x, -x, abs(x)):
        assert r is not x
        assert r.precision == 64
    assert (-x).is_equal(2.5)
    assert abs(x).is_equal(2.5)
    assert (+x).is_equal(-2.5)
    assert x.is_equal(-2.5)


def test_increment_decrement_return_new_instances():
    x = BigFloat(10, 64)
    up = x.incremented()
    down = x.decremented()
    assert up.is_equal(11) and down.is_equal(9)
    assert x.is_equal(10)


def test_augmented_assignment_rebinds_to_new_instance():
    x = BigFloat(1, 64)
    alias = x
    x += 1
    assert x.is_equal(2)
    assert alias.is_equal(1)
    assert x is not alias


# -----------------------------
# Result precision
# -----------------------------

def test_result_precision_defaults_to_max():
    print("[combine] 64 + 128 -> 128 bits")
    z = BigFloat(1, 64) + BigFloat(2, 128)
    assert z.precision == 128
    z = BigFloat(1, 128) * BigFloat(2, 64)
    assert z.precision == 128


def test_custom_combiner_applies_to_operators():
    print("[combine-custom] sum policy: 10 + 20 -> 30 bits")
    set_precision_combiner(lambda a, b: a + b)
    z = BigFloat(1, 10) + BigFloat(2, 20)
    assert z.precision == 30
    assert z.is_equal(3)


def test_combiner_result_is_validated():
    with local_context(combine_precision=lambda a, b: 1):
        with pytest.raises(ArgumentError):
            BigFloat(1, 10) + BigFloat(2, 20)


def test_widening_keeps_left_value_exact():
    # A 200-bit product must see the full 0.1 stored in the 200-bit operand.
    x = BigFloat("0.1", 200)
    one = BigFloat(1, 8)
    z = one * x
    assert z.precision == 200
    assert z.is_equal(x)


def test_host_operand_coerced_at_default_precision():
    z = BigFloat(2, 20) + 1
    assert z.precision == 53
    assert z.is_equal(3)
    z = 1 + BigFloat(2, 100)
    assert z.precision == 100
    assert z.is_equal(3)


@pytest.mark.parametrize("other", [1, 1.0, Fraction(1, 1), Decimal("1")])
def test_reflected_operators_accept_host_numbers(other):
    x = BigFloat(4, 64)
    assert (other + x).is_equal(5)
    assert (other - x).is_equal(-3)
    assert (other * x).is_equal(4)
    assert (other / x).is_equal(0.25)


# -----------------------------
# Operator-specific semantics
# -----------------------------

@pytest.mark.parametrize(
    "a,b,expected",
    [
        (7, 2, 0.5),
        (-7, 2, -0.5),
        (9, 3, 0),
        (1, 8, 0.125),
    ],
)
def test_mod_is_fractional_part_of_quotient(a, b, expected):
    print(f"[mod] {a} % {b} -> frac({a}/{b}) = {expected}")
    z = BigFloat(a, 64) % BigFloat(b, 64)
    assert z.is_equal(expected)


def test_rmod():
    z = 7 % BigFloat(2, 64)
    assert z.is_equal(0.5)


def test_pow_is_exponentiation():
    assert (BigFloat(2, 64) ** 10).is_equal(1024)
    assert (2 ** BigFloat(0.5, 64)).is_equal(BigFloat(2, 64).sqrt())
    assert (BigFloat(4, 64) ** -0.5).is_equal(0.5)


def test_operator_with_none_raises():
    x = BigFloat(1, 64)
    with pytest.raises(ArgumentError):
        x + None
    with pytest.raises(ArgumentError):
        None + x
    with pytest.raises(ArgumentError):
        x.add(None)


def test_operator_with_unsupported_type_raises_type_error():
    x = BigFloat(1, 64)
    with pytest.raises(TypeError):
        x + "1"
    with pytest.raises(TypeError):
        [] * x


# -----------------------------
# Rounding directives
# -----------------------------

def test_rounding_directive_brackets_exact_result():
    lo = BigFloat(1, 8).div(3, Rounding.TOWARD_NEGATIVE)
    hi = BigFloat(1, 8).div(3, Rounding.TOWARD_POSITIVE)
    print("[rounding] 1/3 at 8 bits ->", lo, "<", hi)
    assert lo.is_less(hi)
    assert lo.to_fraction() < Fraction(1, 3) < hi.to_fraction()


def test_instance_rounding_override_used_by_operators():
    x = BigFloat(1, 8, rounding=Rounding.TOWARD_POSITIVE)
    z = x / BigFloat(3, 8)
    expected = BigFloat(1, 8).div(3, Rounding.TOWARD_POSITIVE)
    assert z.is_equal(expected)
    assert z.rounding is Rounding.TOWARD_POSITIVE


def test_call_rounding_beats_instance_override():
    x = BigFloat(1, 8, rounding=Rounding.TOWARD_POSITIVE)
    x.div(3, Rounding.TOWARD_NEGATIVE)
    assert x.to_fraction() < Fraction(1, 3)


# -----------------------------
# In-place arithmetic
# -----------------------------

def test_fluent_arithmetic_mutates_receiver():
    x = BigFloat(10, 64)
    x.add(5).sub(3).mul(2).div(8)
    assert x.is_equal(3)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (5, 3, 2),
        (3, 5, 0),
        (-1, -4, 3),
    ],
)
def test_dim_is_positive_difference(a, b, expected):
    z = BigFloat(a, 64).dim(b)
    assert z.is_equal(expected)
    if expected == 0:
        assert not z.is_signed()


def test_dim_with_nan_is_nan():
    assert BigFloat(1, 64).dim(BigFloat.nan(64)).is_nan()
    assert BigFloat.nan(64).dim(1).is_nan()


def test_fmod_and_remainder_differ():
    print("[remainder] fmod(7, 2) = 1 ; remainder(7, 2) = -1")
    assert BigFloat(7, 64).fmod(2).is_equal(1)
    assert BigFloat(7, 64).remainder(2).is_equal(-1)
    assert BigFloat(-7, 64).fmod(2).is_equal(-1)


def test_roots():
    assert BigFloat(16, 64).sqrt().is_equal(4)
    assert BigFloat(27, 64).cbrt().is_equal(3)
    assert BigFloat(32, 64).root(5).is_equal(2)
    assert BigFloat(4, 64).rec_sqrt().is_equal(0.5)
    assert BigFloat(-1, 64).sqrt().is_nan()
    with pytest.raises(ArgumentError):
        BigFloat(4, 64).root(0)


def test_division_by_zero_gives_signed_infinity():
    assert BigFloat(1, 64).div(0).is_infinity()
    assert not BigFloat(1, 64).div(0).is_signed()
    assert BigFloat(-1, 64).div(0).is_signed()
    assert BigFloat(0, 64).div(0).is_nan()


def test_decimal_and_fraction_operands():
    x = BigFloat(1, 64).add(Fraction(1, 2)).add(Decimal("0.25"))
    assert x.is_equal(1.75)
