"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Each exception carries a symbolic code from
pymatrix.core.codes so callers can branch on the kind of failure
without parsing messages.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pymatrix.core import codes


class PyMatrixError(Exception):
    """
    Base exception for all pymatrix errors.

    Attributes:
        code: Symbolic error code (see pymatrix.core.codes)
        timestamp: UTC time the error was raised, ISO-8601
        details: Structured payload describing the offending operands, or None
    """

    default_code: str = codes.INVALID_ARGUMENT

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code if code is not None else self.default_code
        self.timestamp = datetime.now(timezone.utc).isoformat()
        self.details = details

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> dict[str, Any]:
        """Structured view of the error, e.g. for reporting."""
        return {
            'name': type(self).__name__,
            'code': self.code,
            'message': self.message,
            'timestamp': self.timestamp,
            'details': self.details,
        }


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided entries or arguments fail validation checks:
    non-sequence input, ragged rows, mixed element types, bad counts.
    """

    default_code = codes.INVALID_ARGUMENT


class DimensionError(ValidationError):
    """
    Operand dimensions are incompatible.

    Raised for shape mismatch in add/subtract, inner-dimension mismatch
    in multiply, vector length mismatch and row-count mismatch in augment.
    """

    default_code = codes.SHAPE_MISMATCH


class IndexOutOfBoundsError(ValidationError):
    """Row, column or element index lies outside the matrix."""

    default_code = codes.INDEX_OUT_OF_BOUNDS


class ShapeError(ValidationError):
    """
    Operand does not have the required shape class.

    Raised when an operation needs a square or triangular matrix
    (pow, invert_square, back/forward substitution, ...).
    """

    default_code = codes.NOT_SQUARE


class TypeMismatchError(PyMatrixError):
    """
    Operand has the wrong type.

    Raised when an argument is not a Matrix, when two matrices carry
    different element-type tags, or when a scalar is not numeric.
    """

    default_code = codes.ELEMENT_TYPE_MISMATCH


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical infeasibility.
    """

    default_code = codes.SINGULAR_SYSTEM


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or the system has a zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(rows, columns))
    """

    default_code = codes.SINGULAR_SYSTEM

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message, code=code, details=details)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class ZeroVectorError(NumericalError):
    """
    Operation is undefined for a zero vector.

    Raised by normalize, project and angle.
    """

    default_code = codes.ZERO_VECTOR


class CapabilityError(PyMatrixError):
    """
    No Numerical capability is available for the element type.

    Raised when a generic operation runs on elements that are neither
    native numbers nor covered by an explicitly supplied Numerical.
    """

    default_code = codes.MISSING_NUMERICAL
