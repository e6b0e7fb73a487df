"""
Row-reduction and triangular-solve kernels.

Pivot selection is shared by Gaussian elimination and Gauss-Jordan: the
first entry with nonzero sign scanning down the current lead column. A
column with no pivot advances the lead without consuming a row.
Eliminated entries are stored as the exact zero and Gauss-Jordan pivots
as the exact one, so callers can test structure by sign alone.
"""

from __future__ import annotations

import warnings
from typing import Any, Sequence

from pymatrix.core import codes
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.matrix import _structure
from pymatrix.numerical import Numerical


def warn_inexact_division(numerical: Numerical, operation: str) -> None:
    """Warn when an algorithm that divides runs on truncating arithmetic."""
    if not numerical.exact_division:
        warnings.warn(
            f"{operation} with the {numerical.name!r} numerical uses truncating "
            f"division; the result may be inexact.",
            RuntimeWarning,
            stacklevel=3,
        )


def _find_pivot(
    m: list[Any],
    rows: int,
    columns: int,
    r: int,
    lead: int,
    numerical: Numerical,
) -> tuple[int, int] | None:
    """(pivot_row, lead) for row r, or None when every remaining column is zero."""
    while lead < columns:
        for i in range(r, rows):
            if numerical.sign(m[i * columns + lead]) != 0:
                return i, lead
        lead += 1
    return None


def row_echelon(
    elements: list[Any],
    rows: int,
    columns: int,
    numerical: Numerical,
) -> list[Any]:
    """
    Row-echelon form of a rows x columns matrix; the input is not modified.

    Rows whose elimination factor is zero are skipped. Under truncating
    division (NumericalInt) a factor such as 1 // 2 truncates to zero, so
    nonzero entries can remain below a pivot and the result need not be
    upper triangular.
    """
    sub, mul, div, zero = numerical.subtract, numerical.multiply, numerical.divide, numerical.zero
    m = list(elements)
    lead = 0
    for r in range(rows):
        found = _find_pivot(m, rows, columns, r, lead, numerical)
        if found is None:
            break
        pivot_row, lead = found
        _structure.swap_rows(m, columns, pivot_row, r)

        pivot = m[r * columns + lead]
        for i in range(r + 1, rows):
            factor = div(m[i * columns + lead], pivot)
            if numerical.sign(factor) == 0:
                continue
            for j in range(lead + 1, columns):
                m[i * columns + j] = sub(m[i * columns + j], mul(factor, m[r * columns + j]))
            m[i * columns + lead] = zero
        lead += 1
    return m


def reduced_row_echelon(
    elements: list[Any],
    rows: int,
    columns: int,
    numerical: Numerical,
) -> tuple[list[Any], list[int]]:
    """
    Reduced row-echelon form and the pivot columns, in row order.

    The input is not modified.
    """
    sub, mul, div = numerical.subtract, numerical.multiply, numerical.divide
    zero, one = numerical.zero, numerical.one
    m = list(elements)
    pivots: list[int] = []
    lead = 0
    for r in range(rows):
        found = _find_pivot(m, rows, columns, r, lead, numerical)
        if found is None:
            break
        pivot_row, lead = found
        _structure.swap_rows(m, columns, pivot_row, r)

        pivot = m[r * columns + lead]
        for j in range(lead + 1, columns):
            m[r * columns + j] = div(m[r * columns + j], pivot)
        m[r * columns + lead] = one

        for i in range(rows):
            if i == r:
                continue
            factor = m[i * columns + lead]
            if numerical.sign(factor) == 0:
                continue
            for j in range(lead + 1, columns):
                m[i * columns + j] = sub(m[i * columns + j], mul(factor, m[r * columns + j]))
            m[i * columns + lead] = zero

        pivots.append(lead)
        lead += 1
    return m, pivots


def back_substitution(
    elements: list[Any],
    n: int,
    b: Sequence[Any],
    numerical: Numerical,
) -> list[Any]:
    """
    Solve Ux = b for upper-triangular n x n U, bottom row first.

    Raises:
        SingularMatrixError: If a diagonal entry is zero
    """
    sub, mul = numerical.subtract, numerical.multiply
    x: list[Any] = [numerical.zero] * n
    for i in range(n - 1, -1, -1):
        diag = elements[i * n + i]
        if numerical.sign(diag) == 0:
            raise SingularMatrixError(
                f"Unsolvable system: zero on the diagonal at row {i}",
                code=codes.SINGULAR_SYSTEM,
                details={'row': i},
                matrix_name='U',
            )
        s = b[i]
        for j in range(i + 1, n):
            s = sub(s, mul(elements[i * n + j], x[j]))
        x[i] = numerical.divide(s, diag)
    return x


def forward_substitution(
    elements: list[Any],
    n: int,
    b: Sequence[Any],
    numerical: Numerical,
) -> list[Any]:
    """
    Solve Lx = b for lower-triangular n x n L, top row first.

    Raises:
        SingularMatrixError: If a diagonal entry is zero
    """
    sub, mul = numerical.subtract, numerical.multiply
    x: list[Any] = [numerical.zero] * n
    for i in range(n):
        diag = elements[i * n + i]
        if numerical.sign(diag) == 0:
            raise SingularMatrixError(
                f"Unsolvable system: zero on the diagonal at row {i}",
                code=codes.SINGULAR_SYSTEM,
                details={'row': i},
                matrix_name='L',
            )
        s = b[i]
        for j in range(i):
            s = sub(s, mul(elements[i * n + j], x[j]))
        x[i] = numerical.divide(s, diag)
    return x
