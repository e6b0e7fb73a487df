"""
LU decomposition with partial pivoting.
"""

from __future__ import annotations

from typing import Any

from pymatrix.core import codes
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.matrix import _structure
from pymatrix.numerical import Numerical


def lu_decompose(
    elements: list[Any],
    n: int,
    numerical: Numerical,
) -> tuple[list[Any], list[Any], list[Any], int]:
    """
    Factor an n x n matrix as P A = L U.

    The pivot for column i is the entry of largest magnitude in rows
    i..n-1 (first one on ties). L is unit lower triangular, U upper
    triangular and P a permutation matrix.

    Returns:
        (L, U, P, permutation_count) as flat lists plus the number of row swaps

    Raises:
        SingularMatrixError: If a pivot column is entirely zero
    """
    sub, mul, div = numerical.subtract, numerical.multiply, numerical.divide
    zero, one = numerical.zero, numerical.one

    u = list(elements)
    lower = [zero] * (n * n)
    order = list(range(n))
    permutation_count = 0

    for i in range(n):
        pivot_row = max(range(i, n), key=lambda k: numerical.to_float(numerical.absolute(u[k * n + i])))
        if numerical.sign(u[pivot_row * n + i]) == 0:
            raise SingularMatrixError(
                "Matrix is singular; LU decomposition cannot be performed",
                code=codes.SINGULAR_SYSTEM,
                details={'column': i},
                matrix_name='A',
                expected_rank=n,
            )
        if pivot_row != i:
            _structure.swap_rows(u, n, i, pivot_row)
            _structure.swap_rows(lower, n, i, pivot_row)
            order[i], order[pivot_row] = order[pivot_row], order[i]
            permutation_count += 1

        pivot = u[i * n + i]
        for j in range(i + 1, n):
            factor = div(u[j * n + i], pivot)
            lower[j * n + i] = factor
            for k in range(i + 1, n):
                u[j * n + k] = sub(u[j * n + k], mul(factor, u[i * n + k]))
            u[j * n + i] = zero

    for i in range(n):
        lower[i * n + i] = one

    permutation = [zero] * (n * n)
    for i, source in enumerate(order):
        permutation[i * n + source] = one

    return lower, u, permutation, permutation_count
