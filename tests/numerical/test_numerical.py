"""
Tests for Numerical capabilities and capability resolution.

Validates:
    - NumericalNumber / NumericalInt / NumericalFraction arithmetic
    - Division by zero and negative square roots raise NumericalError
    - Element-type tagging
    - resolve_numerical: explicit, by name, inferred, missing
    - parse_fraction
"""

import math
from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core import codes
from pymatrix.core.exceptions import CapabilityError, NumericalError, ValidationError
from pymatrix.numerical import (
    NUMBER_TAG,
    Numerical,
    NumericalFraction,
    NumericalInt,
    NumericalNumber,
    element_tag,
    numerical_for,
    parse_fraction,
    resolve_numerical,
    tag_name,
)


ALL_NUMERICALS = [NumericalNumber(), NumericalInt(), NumericalFraction()]


# ═══════════════════════════════════════════════════════════════════════
# Shared contract
# ═══════════════════════════════════════════════════════════════════════


class TestContract:
    """Identities and sign hold for every capability."""

    @pytest.mark.parametrize("num", ALL_NUMERICALS, ids=lambda n: n.name)
    def test_identities(self, num):
        x = num.from_integral(7)
        assert num.add(x, num.zero) == x
        assert num.multiply(x, num.one) == x
        assert num.subtract(x, x) == num.zero

    @pytest.mark.parametrize("num", ALL_NUMERICALS, ids=lambda n: n.name)
    def test_sign(self, num):
        assert num.sign(num.from_integral(-3)) == -1
        assert num.sign(num.zero) == 0
        assert num.sign(num.from_integral(5)) == 1

    @pytest.mark.parametrize("num", ALL_NUMERICALS, ids=lambda n: n.name)
    def test_absolute(self, num):
        assert num.absolute(num.from_integral(-4)) == num.from_integral(4)

    @pytest.mark.parametrize("num", ALL_NUMERICALS, ids=lambda n: n.name)
    def test_integral_round_trip(self, num):
        assert num.to_integral(num.from_integral(12)) == 12

    @pytest.mark.parametrize("num", ALL_NUMERICALS, ids=lambda n: n.name)
    def test_division_by_zero(self, num):
        with pytest.raises(NumericalError) as exc_info:
            num.divide(num.one, num.zero)
        assert exc_info.value.code == codes.DIVISION_BY_ZERO

    @pytest.mark.parametrize("num", ALL_NUMERICALS, ids=lambda n: n.name)
    def test_negative_sqrt(self, num):
        with pytest.raises(NumericalError) as exc_info:
            num.sqrt(num.from_integral(-4))
        assert exc_info.value.code == codes.NEGATIVE_SQRT

    @pytest.mark.parametrize("num", ALL_NUMERICALS, ids=lambda n: n.name)
    def test_perfect_square_sqrt(self, num):
        assert num.sqrt(num.from_integral(9)) == num.from_integral(3)

    def test_abstract_base_cannot_instantiate(self):
        with pytest.raises(TypeError):
            Numerical()

    def test_equality_by_type(self):
        assert NumericalNumber() == NumericalNumber()
        assert NumericalNumber() != NumericalInt()


# ═══════════════════════════════════════════════════════════════════════
# Concrete behaviour
# ═══════════════════════════════════════════════════════════════════════


class TestNumericalNumber:

    def test_true_division(self):
        assert NumericalNumber().divide(1, 4) == 0.25

    def test_sqrt_irrational(self):
        assert NumericalNumber().sqrt(2) == pytest.approx(math.sqrt(2))

    def test_exact_division_flag(self):
        assert NumericalNumber().exact_division


class TestNumericalInt:

    def test_truncating_division(self):
        num = NumericalInt()
        assert num.divide(7, 2) == 3
        assert num.divide(-7, 2) == -3
        assert num.divide(7, -2) == -3

    def test_integer_sqrt(self):
        assert NumericalInt().sqrt(10) == 3

    def test_big_integers_stay_exact(self):
        num = NumericalInt()
        big = 10 ** 40 + 1
        assert num.multiply(big, big) == big * big

    def test_not_exact_division(self):
        assert not NumericalInt().exact_division


class TestNumericalFraction:

    def test_exact_division(self):
        num = NumericalFraction()
        assert num.divide(Fraction(1, 3), Fraction(2, 3)) == Fraction(1, 2)

    def test_lifts_ints(self):
        assert NumericalFraction().add(1, Fraction(1, 2)) == Fraction(3, 2)

    def test_sqrt_of_perfect_square_fraction(self):
        assert NumericalFraction().sqrt(Fraction(4, 9)) == Fraction(2, 3)

    def test_sqrt_approximation(self):
        root = NumericalFraction(max_denominator=10_000).sqrt(Fraction(2))
        assert isinstance(root, Fraction)
        assert root.denominator <= 10_000
        assert float(root) == pytest.approx(math.sqrt(2), abs=1e-7)

    def test_to_float(self):
        assert NumericalFraction().to_float(Fraction(1, 4)) == 0.25

    def test_to_integral_truncates(self):
        assert NumericalFraction().to_integral(Fraction(7, 2)) == 3


# ═══════════════════════════════════════════════════════════════════════
# Tags and resolution
# ═══════════════════════════════════════════════════════════════════════


class TestElementTag:

    @pytest.mark.parametrize("value", [1, 2.5, np.float64(1.0), np.int8(3)])
    def test_native_numbers(self, value):
        assert element_tag(value) == NUMBER_TAG

    def test_bool_is_not_number(self):
        assert element_tag(True) is bool

    def test_custom_type(self):
        assert element_tag(Fraction(1, 2)) is Fraction
        assert tag_name(Fraction) == "Fraction"

    def test_string(self):
        assert tag_name(element_tag("2")) == "str"


class TestResolveNumerical:

    def test_inferred_for_numbers(self):
        assert isinstance(resolve_numerical(None, NUMBER_TAG), NumericalNumber)

    def test_explicit_instance_returned(self):
        num = NumericalInt()
        assert resolve_numerical(num, NUMBER_TAG) is num

    @pytest.mark.parametrize("name, cls", [
        ("number", NumericalNumber),
        ("int", NumericalInt),
        ("FRACTION", NumericalFraction),
    ])
    def test_by_name(self, name, cls):
        assert isinstance(resolve_numerical(name), cls)

    def test_unknown_name(self):
        with pytest.raises(CapabilityError, match="Valid numericals") as exc_info:
            resolve_numerical("complex")
        assert exc_info.value.code == codes.UNKNOWN_NUMERICAL

    def test_missing_for_custom_type(self):
        with pytest.raises(CapabilityError, match="Fraction") as exc_info:
            resolve_numerical(None, Fraction)
        assert exc_info.value.code == codes.MISSING_NUMERICAL

    def test_wrong_type(self):
        with pytest.raises(ValidationError):
            resolve_numerical(42)

    def test_numerical_for_infers_from_first(self):
        assert isinstance(numerical_for([1.0, 2.0]), NumericalNumber)
        with pytest.raises(CapabilityError):
            numerical_for([Fraction(1, 2)])
        assert isinstance(numerical_for([Fraction(1, 2)], "fraction"), NumericalFraction)


class TestParseFraction:

    def test_basic(self):
        assert parse_fraction("3/4") == Fraction(3, 4)

    def test_whitespace_and_sign(self):
        assert parse_fraction(" -6 / 8 ") == Fraction(-3, 4)

    @pytest.mark.parametrize("text", ["3", "a/b", "1.5/2"])
    def test_malformed(self, text):
        with pytest.raises(ValidationError):
            parse_fraction(text)

    def test_zero_denominator(self):
        with pytest.raises(NumericalError) as exc_info:
            parse_fraction("1/0")
        assert exc_info.value.code == codes.DIVISION_BY_ZERO

    def test_non_string(self):
        with pytest.raises(ValidationError):
            parse_fraction(0.75)
