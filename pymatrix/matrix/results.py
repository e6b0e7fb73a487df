"""
Immutable containers for decomposition results.

Both results unpack like tuples:

    Q, R = A.qr_decomposition()
    L, U, P, swaps = A.lu_decomposition()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


@dataclass(frozen=True)
class QRResult:
    """
    QR decomposition A = Q R.

    Attributes:
        Q: Matrix with orthonormal columns, same shape as A
        R: Upper triangular columns x columns matrix, Q^T A with
           near-zero entries rounded to zero
    """
    Q: Matrix
    R: Matrix

    def __iter__(self) -> Iterator[Matrix]:
        return iter((self.Q, self.R))


@dataclass(frozen=True)
class LUResult:
    """
    LU decomposition with partial pivoting, P A = L U.

    Attributes:
        L: Unit lower triangular matrix
        U: Upper triangular matrix
        P: Permutation matrix
        permutation_count: Number of row swaps performed (sign of det(P))
    """
    L: Matrix
    U: Matrix
    P: Matrix
    permutation_count: int

    def __iter__(self) -> Iterator[Any]:
        return iter((self.L, self.U, self.P, self.permutation_count))
