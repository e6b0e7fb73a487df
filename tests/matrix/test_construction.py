"""
Tests for Matrix construction, validation and derived metadata.
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Matrix, NumericalFraction, NumericalInt, NumericalNumber
from pymatrix.core import codes
from pymatrix.core.exceptions import CapabilityError, TypeMismatchError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Accepted input
# ═══════════════════════════════════════════════════════════════════════


class TestValidConstruction:

    def test_nested_rows(self):
        A = Matrix([[1, 2], [3, 4]])
        assert A.rows == 2
        assert A.columns == 2
        assert A.shape == "(2,2)"
        assert A.is_square
        assert A.elements == [1, 2, 3, 4]

    def test_flat_with_dimensions(self):
        A = Matrix([1, 2, 3, 4, 5, 6], rows=2, columns=3)
        assert A.to_list() == [[1, 2, 3], [4, 5, 6]]
        assert A.is_wide

    def test_flat_positional_dimensions(self):
        A = Matrix([1, 2, 3], 3, 1)
        assert A.is_tall
        assert A.shape == "(3,1)"

    def test_single_element_is_1x1(self):
        A = Matrix([7])
        assert (A.rows, A.columns, A.size) == (1, 1, 1)

    def test_tuples(self):
        assert Matrix(((1, 2), (3, 4))).to_list() == [[1, 2], [3, 4]]

    def test_numpy_2d(self, rng):
        data = rng.standard_normal((3, 4))
        A = Matrix(data)
        assert A.shape == "(3,4)"
        assert all(type(x) is float for x in A.elements)
        np.testing.assert_array_equal(A.to_numpy(), data)

    def test_numpy_1d_with_dimensions(self):
        A = Matrix(np.arange(6), rows=3, columns=2)
        assert A.to_list() == [[0, 1], [2, 3], [4, 5]]
        assert all(type(x) is int for x in A.elements)

    def test_numpy_scalars_in_lists_unwrapped(self):
        A = Matrix([[np.float64(1.5), np.int64(2)]])
        assert A.elements == [1.5, 2]
        assert A.dtype == "number"

    def test_mixed_int_and_float_are_one_type(self):
        assert Matrix([[1, 2.5]]).dtype == "number"

    def test_nested_with_matching_dimensions(self):
        assert Matrix([[1, 2]], rows=1, columns=2).shape == "(1,2)"

    def test_elements_is_a_copy(self):
        A = Matrix([[1, 2]])
        A.elements.append(3)
        assert A.size == 2


class TestCapability:

    def test_inferred_number(self):
        assert isinstance(Matrix([[1.0]]).numerical, NumericalNumber)

    def test_explicit_int(self):
        A = Matrix([[1, 2]], numerical=NumericalInt())
        assert isinstance(A.numerical, NumericalInt)
        assert A.dtype == "number"

    def test_fraction_by_name(self):
        A = Matrix([[Fraction(1, 2), Fraction(1, 3)]], numerical="fraction")
        assert A.dtype == "Fraction"
        assert isinstance(A.numerical, NumericalFraction)

    def test_fraction_strings_are_parsed(self):
        A = Matrix([["1/2", "1/3"]], numerical="fraction")
        assert A.dtype == "Fraction"
        assert A.to_list() == [[Fraction(1, 2), Fraction(1, 3)]]

    def test_parsed_strings_combine_with_fractions(self):
        A = Matrix([["1/2", "1/3"]], numerical="fraction")
        B = Matrix([[Fraction(1, 2), Fraction(2, 3)]], numerical="fraction")
        C = A.add(B)
        assert C.dtype == "Fraction"
        assert C.to_list() == [[Fraction(1), Fraction(1)]]

    def test_native_numbers_stored_as_fractions(self):
        A = Matrix([[1, 2]], numerical="fraction")
        assert A.dtype == "Fraction"
        assert all(isinstance(x, Fraction) for x in A.elements)

    def test_malformed_fraction_string(self):
        with pytest.raises(ValidationError):
            Matrix([["1.5", "2/3"]], numerical="fraction")

    def test_unrepresentable_fraction_entry(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            Matrix([[b"1/2"]], numerical="fraction")
        assert exc_info.value.code == codes.ELEMENT_TYPE_MISMATCH

    def test_custom_type_without_capability(self):
        with pytest.raises(CapabilityError) as exc_info:
            Matrix([[Fraction(1, 2)]])
        assert exc_info.value.code == codes.MISSING_NUMERICAL

    def test_bool_elements_have_no_capability(self):
        with pytest.raises(CapabilityError):
            Matrix([[True, False]])


# ═══════════════════════════════════════════════════════════════════════
# Rejected input
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidConstruction:

    @pytest.mark.parametrize("entries", ["abc", 5, None, {"a": 1}])
    def test_not_a_sequence(self, entries):
        with pytest.raises(ValidationError) as exc_info:
            Matrix(entries)
        assert exc_info.value.code == codes.NOT_A_SEQUENCE

    def test_mixed_types(self):
        with pytest.raises(ValidationError) as exc_info:
            Matrix([1, "2", 3], rows=1, columns=3)
        assert exc_info.value.code == codes.MIXED_ELEMENT_TYPES

    def test_mixed_custom_types(self):
        with pytest.raises(ValidationError) as exc_info:
            Matrix([[Fraction(1), 1]], numerical="fraction")
        assert exc_info.value.code == codes.MIXED_ELEMENT_TYPES

    def test_empty(self):
        with pytest.raises(ValidationError) as exc_info:
            Matrix([])
        assert exc_info.value.code == codes.INVALID_DIMENSIONS

    def test_zero_columns(self):
        with pytest.raises(ValidationError) as exc_info:
            Matrix([[], []])
        assert exc_info.value.code == codes.INVALID_DIMENSIONS

    def test_ragged_rows(self):
        with pytest.raises(ValidationError, match="row 1") as exc_info:
            Matrix([[1, 2], [3]])
        assert exc_info.value.code == codes.INVALID_ENTRIES

    def test_too_deep(self):
        with pytest.raises(ValidationError) as exc_info:
            Matrix([[[1]]])
        assert exc_info.value.code == codes.INVALID_ENTRIES

    def test_mixed_nesting(self):
        with pytest.raises(ValidationError) as exc_info:
            Matrix([1, [2]], rows=1, columns=2)
        assert exc_info.value.code == codes.INVALID_ENTRIES

    def test_flat_without_dimensions(self):
        with pytest.raises(ValidationError) as exc_info:
            Matrix([1, 2, 3, 4])
        assert exc_info.value.code == codes.INVALID_DIMENSIONS

    @pytest.mark.parametrize("rows, columns", [(0, 4), (2, -2), (2.0, 2), (3, 2)])
    def test_bad_dimensions(self, rows, columns):
        with pytest.raises(ValidationError) as exc_info:
            Matrix([1, 2, 3, 4], rows=rows, columns=columns)
        assert exc_info.value.code == codes.INVALID_DIMENSIONS

    def test_nested_with_conflicting_dimensions(self):
        with pytest.raises(ValidationError) as exc_info:
            Matrix([[1, 2]], rows=2, columns=1)
        assert exc_info.value.code == codes.INVALID_DIMENSIONS

    def test_three_dimensional_array(self):
        with pytest.raises(ValidationError):
            Matrix(np.zeros((2, 2, 2)))


# ═══════════════════════════════════════════════════════════════════════
# Shape invariant
# ═══════════════════════════════════════════════════════════════════════


class TestShapeInvariant:

    @pytest.mark.parametrize("rows, columns", [(1, 1), (1, 5), (5, 1), (3, 3), (4, 2), (2, 7)])
    def test_size_and_classification(self, rng, rows, columns):
        A = Matrix(rng.standard_normal((rows, columns)))
        assert A.rows * A.columns == A.size == len(A.elements)
        assert [A.is_square, A.is_tall, A.is_wide].count(True) == 1
        assert A.shape == f"({rows},{columns})"

    def test_transpose_updates_metadata(self):
        T = Matrix([[1, 2, 3]]).transpose()
        assert T.shape == "(3,1)"
        assert T.is_tall and not T.is_wide

    def test_repr(self):
        assert repr(Matrix([[1, 2]])) == "Matrix([[1, 2]], dtype='number')"
