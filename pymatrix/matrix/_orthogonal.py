"""
Classical Gram-Schmidt orthonormalization of matrix columns.
"""

from __future__ import annotations

from typing import Any

from pymatrix import math_utils
from pymatrix.core import codes
from pymatrix.core.exceptions import NumericalError
from pymatrix.numerical import Numerical


def gram_schmidt(
    elements: list[Any],
    rows: int,
    columns: int,
    numerical: Numerical,
    epsilon: float,
) -> list[Any]:
    """
    Orthonormal columns spanning the column space, as a flat row-major list.

    Column i has its projections onto the orthogonal columns 0..i-1
    removed, then every orthogonal column is normalized.

    Raises:
        NumericalError: LINEARLY_DEPENDENT if an orthogonal column has
            Euclidean norm below epsilon
    """
    sub = numerical.subtract
    orthogonal: list[list[Any]] = []
    for j in range(columns):
        v = elements[j::columns]
        u = list(v)
        for q in orthogonal:
            projection = math_utils.project(v, q, numerical)
            u = [sub(x, p) for x, p in zip(u, projection)]
        length = numerical.to_float(math_utils.norm(u, numerical))
        if length < epsilon:
            raise NumericalError(
                f"Column {j} is nearly zero after orthogonalization "
                f"(norm {length:.3e} < {epsilon:.1e}); columns are not linearly independent",
                code=codes.LINEARLY_DEPENDENT,
                details={'column': j, 'norm': length, 'epsilon': epsilon},
            )
        orthogonal.append(u)

    normalized = [math_utils.normalize(u, numerical) for u in orthogonal]
    return [normalized[j][i] for i in range(rows) for j in range(columns)]
