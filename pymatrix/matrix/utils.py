"""
Free functions around Matrix: factories, predicates and in-place helpers.

Factories (new matrices):
    identity, ones, zeros, random, reshape, clone, pad_matrix_to_power_of_two

Predicates (raise TypeMismatchError for a non-Matrix argument):
    is_upper_triangular, is_lower_triangular, is_int_matrix, is_empty,
    is_diagonal, is_symmetric, is_identity

In-place helpers (mutate their argument, return None):
    round_matrix_to_zero, to_fixed_matrix, nullify
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pymatrix import math_utils
from pymatrix.core import codes
from pymatrix.core.exceptions import TypeMismatchError, ValidationError
from pymatrix.core.tolerances import DELTA
from pymatrix.core.validation import check_non_negative_int, check_positive_int, check_sequence
from pymatrix.matrix import _structure
from pymatrix.matrix.matrix import Matrix
from pymatrix.numerical import NUMBER_TAG, Numerical, NumericalNumber, element_tag, resolve_numerical


def _check_matrix(A: Any, name: str = 'A') -> Matrix:
    if not isinstance(A, Matrix):
        raise TypeMismatchError(
            f"{name}: expected a Matrix, got {type(A).__name__}",
            code=codes.NOT_A_MATRIX,
            details={name: A},
        )
    return A


def _build(elements: list[Any], rows: int, columns: int, numerical: Numerical) -> Matrix:
    return Matrix._from_flat(elements, rows, columns, numerical, element_tag(elements[0]))


# =====================================================================
# Factories
# =====================================================================

def identity(dimension: int, numerical: str | Numerical | None = None) -> Matrix:
    """
    dimension x dimension identity.

    Raises:
        ValidationError: INVALID_ARGUMENT if dimension is not a positive integer
    """
    dimension = check_positive_int(dimension, 'dimension')
    num = resolve_numerical(numerical)
    return _build(_structure.identity(dimension, num), dimension, dimension, num)


def ones(rows: int, columns: int, numerical: str | Numerical | None = None) -> Matrix:
    """rows x columns matrix of the capability's one."""
    rows = check_positive_int(rows, 'rows')
    columns = check_positive_int(columns, 'columns')
    num = resolve_numerical(numerical)
    return _build([num.one] * (rows * columns), rows, columns, num)


def zeros(rows: int, columns: int, numerical: str | Numerical | None = None) -> Matrix:
    """rows x columns matrix of the capability's zero."""
    rows = check_positive_int(rows, 'rows')
    columns = check_positive_int(columns, 'columns')
    num = resolve_numerical(numerical)
    return _build([num.zero] * (rows * columns), rows, columns, num)


def random(
    rows: int,
    columns: int,
    numerical: str | Numerical | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> Matrix:
    """
    rows x columns matrix of random entries.

    Native numbers are uniform floats in [0, 100); other capabilities
    receive integers in [0, 100) through from_integral.

    Args:
        rows: Row count
        columns: Column count
        numerical: Capability of the entries (default: native numbers)
        rng: numpy Generator for reproducible draws (default: fresh generator)
    """
    rows = check_positive_int(rows, 'rows')
    columns = check_positive_int(columns, 'columns')
    num = resolve_numerical(numerical)
    if rng is None:
        rng = np.random.default_rng()
    size = rows * columns
    if isinstance(num, NumericalNumber):
        elements = rng.uniform(0.0, 100.0, size=size).tolist()
    else:
        elements = [num.from_integral(int(v)) for v in rng.integers(0, 100, size=size)]
    return _build(elements, rows, columns, num)


def reshape(
    source: Matrix | Any,
    rows: int,
    columns: int,
    numerical: str | Numerical | None = None,
) -> Matrix:
    """
    Row-major reinterpretation of a Matrix or flat sequence as rows x columns.

    Raises:
        ValidationError: INVALID_ARGUMENT for bad dimensions,
            RESHAPE_SIZE_MISMATCH if rows * columns differs from the element count
    """
    rows = check_positive_int(rows, 'rows')
    columns = check_positive_int(columns, 'columns')
    if isinstance(source, Matrix):
        elements = source.elements
        count = len(elements)
    else:
        count = len(check_sequence(source, 'source'))
    if rows * columns != count:
        raise ValidationError(
            f"reshape: cannot reshape {count} elements into ({rows},{columns})",
            code=codes.RESHAPE_SIZE_MISMATCH,
            details={'size': count, 'rows': rows, 'columns': columns},
        )
    if isinstance(source, Matrix):
        return Matrix._from_flat(elements, rows, columns, source.numerical, source._tag)
    return Matrix(source, rows, columns, numerical=numerical)


def clone(A: Matrix) -> Matrix:
    """Independent copy of A."""
    A = _check_matrix(A)
    return Matrix._from_flat(A.elements, A.rows, A.columns, A.numerical, A._tag)


def pad_matrix_to_power_of_two(A: Matrix) -> Matrix:
    """
    Copy of A zero-padded to an n x n square, n the next power of two of max(rows, columns).
    """
    A = _check_matrix(A)
    n = math_utils.next_power_of_two(max(A.rows, A.columns))
    elements = _structure.pad(A._elements, A.rows, A.columns, n, n, A.numerical.zero)
    return Matrix._from_flat(elements, n, n, A.numerical, A._tag)


# =====================================================================
# Predicates
# =====================================================================

def is_upper_triangular(A: Matrix) -> bool:
    """All entries below the main diagonal are zero."""
    A = _check_matrix(A)
    return _structure.is_upper_triangular(A._elements, A.rows, A.columns, A.numerical)


def is_lower_triangular(A: Matrix) -> bool:
    """All entries above the main diagonal are zero."""
    A = _check_matrix(A)
    return _structure.is_lower_triangular(A._elements, A.rows, A.columns, A.numerical)


def is_int_matrix(A: Matrix) -> bool:
    """Every entry has an integral value."""
    A = _check_matrix(A)
    num = A.numerical
    for x in A._elements:
        if isinstance(x, float):
            if not x.is_integer():
                return False
        elif x != num.to_integral(x):
            return False
    return True


def is_empty(A: Matrix) -> bool:
    """Every entry is zero."""
    A = _check_matrix(A)
    return all(A.numerical.sign(x) == 0 for x in A._elements)


def is_diagonal(A: Matrix) -> bool:
    """
    Off-diagonal entries are zero and the main diagonal is not all zero.

    A zero matrix is not considered diagonal.
    """
    A = _check_matrix(A)
    num, c = A.numerical, A.columns
    if all(num.sign(x) == 0 for x in A.diag()):
        return False
    return all(
        num.sign(x) == 0
        for k, x in enumerate(A._elements)
        if k // c != k % c
    )


def is_symmetric(A: Matrix) -> bool:
    A = _check_matrix(A)
    return A.is_square and A.equal(A.transpose())


def is_identity(A: Matrix) -> bool:
    A = _check_matrix(A)
    if not A.is_square:
        return False
    return A.equal(Matrix._from_flat(
        _structure.identity(A.rows, A.numerical), A.rows, A.rows, A.numerical, A._tag,
    ))


# =====================================================================
# In-place helpers
# =====================================================================

def round_matrix_to_zero(A: Matrix, threshold: float = DELTA) -> None:
    """Replace entries with magnitude below threshold by zero, in place."""
    A = _check_matrix(A)
    _structure.round_to_zero(A._elements, A.numerical, threshold)


def to_fixed_matrix(A: Matrix, digits: int, base: int = 10) -> None:
    """
    Round every entry to digits places in base, in place.

    Raises:
        TypeMismatchError: A does not hold native numbers
    """
    A = _check_matrix(A)
    if A._tag != NUMBER_TAG:
        raise TypeMismatchError(
            f"to_fixed_matrix: requires native numbers, got {A.dtype!r}",
            code=codes.ELEMENT_TYPE_MISMATCH,
            details={'dtype': A.dtype},
        )
    digits = check_non_negative_int(digits, 'digits')
    A._elements[:] = [math_utils.to_fixed_number(x, digits, base) for x in A._elements]


def nullify(A: Matrix) -> None:
    """Set every entry to zero, in place."""
    A = _check_matrix(A)
    A._elements[:] = [A.numerical.zero] * A.size


__all__ = [
    'identity',
    'ones',
    'zeros',
    'random',
    'reshape',
    'clone',
    'pad_matrix_to_power_of_two',
    'is_upper_triangular',
    'is_lower_triangular',
    'is_int_matrix',
    'is_empty',
    'is_diagonal',
    'is_symmetric',
    'is_identity',
    'round_matrix_to_zero',
    'to_fixed_matrix',
    'nullify',
]
