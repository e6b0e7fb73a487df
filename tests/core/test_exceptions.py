"""
Tests for the pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Default and explicit error codes
    - timestamp/details/to_dict payload
    - Diagnostic attributes on SingularMatrixError
"""

from datetime import datetime

import pytest

from pymatrix.core import codes
from pymatrix.core.exceptions import (
    CapabilityError,
    DimensionError,
    IndexOutOfBoundsError,
    NumericalError,
    PyMatrixError,
    ShapeError,
    SingularMatrixError,
    TypeMismatchError,
    ValidationError,
    ZeroVectorError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionError,
        IndexOutOfBoundsError,
        ShapeError,
        TypeMismatchError,
        NumericalError,
        SingularMatrixError,
        ZeroVectorError,
        CapabilityError,
    ])
    def test_catchable_as_base(self, exc_type):
        with pytest.raises(PyMatrixError):
            raise exc_type("failure")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_shape_error_is_validation_error(self):
        assert issubclass(ShapeError, ValidationError)

    def test_index_error_is_validation_error(self):
        assert issubclass(IndexOutOfBoundsError, ValidationError)

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_zero_vector_error_is_numerical_error(self):
        assert issubclass(ZeroVectorError, NumericalError)

    def test_type_mismatch_is_not_validation_error(self):
        err = TypeMismatchError("wrong type")
        assert not isinstance(err, ValidationError)

    def test_capability_error_is_not_numerical_error(self):
        err = CapabilityError("no capability")
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Codes and payload
# ═══════════════════════════════════════════════════════════════════════


class TestCodes:
    """Each exception carries a symbolic code."""

    @pytest.mark.parametrize("exc_type, expected", [
        (PyMatrixError, codes.INVALID_ARGUMENT),
        (ValidationError, codes.INVALID_ARGUMENT),
        (DimensionError, codes.SHAPE_MISMATCH),
        (IndexOutOfBoundsError, codes.INDEX_OUT_OF_BOUNDS),
        (ShapeError, codes.NOT_SQUARE),
        (TypeMismatchError, codes.ELEMENT_TYPE_MISMATCH),
        (NumericalError, codes.SINGULAR_SYSTEM),
        (SingularMatrixError, codes.SINGULAR_SYSTEM),
        (ZeroVectorError, codes.ZERO_VECTOR),
        (CapabilityError, codes.MISSING_NUMERICAL),
    ])
    def test_default_code(self, exc_type, expected):
        assert exc_type("msg").code == expected

    def test_explicit_code_overrides_default(self):
        err = DimensionError("bad inner", code=codes.INNER_DIMENSION_MISMATCH)
        assert err.code == codes.INNER_DIMENSION_MISMATCH

    def test_every_default_code_is_registered(self):
        for exc_type in (ValidationError, DimensionError, ShapeError, NumericalError,
                         ZeroVectorError, CapabilityError, TypeMismatchError):
            assert exc_type.default_code in codes.ALL_CODES


class TestPayload:
    """message, timestamp, details and to_dict."""

    def test_message(self):
        err = ValidationError("entries: expected a sequence")
        assert err.message == "entries: expected a sequence"
        assert str(err) == err.message

    def test_timestamp_is_utc_iso(self):
        err = NumericalError("overflow")
        parsed = datetime.fromisoformat(err.timestamp)
        assert parsed.utcoffset().total_seconds() == 0

    def test_details_default_none(self):
        assert ValidationError("x").details is None

    def test_details_kept(self):
        err = DimensionError("mismatch", details={'left': '(2,2)', 'right': '(3,3)'})
        assert err.details == {'left': '(2,2)', 'right': '(3,3)'}

    def test_to_dict(self):
        err = ZeroVectorError("zero", details={'v': [0, 0]})
        payload = err.to_dict()
        assert payload['name'] == 'ZeroVectorError'
        assert payload['code'] == codes.ZERO_VECTOR
        assert payload['message'] == 'zero'
        assert payload['details'] == {'v': [0, 0]}
        assert payload['timestamp'] == err.timestamp


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            rank=2,
            expected_rank=3,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.rank == 2
        assert err.expected_rank == 3

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.rank is None
        assert err.expected_rank is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="U", rank=1)
        assert exc_info.value.matrix_name == "U"
        assert exc_info.value.code == codes.SINGULAR_SYSTEM
