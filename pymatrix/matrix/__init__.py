"""
Dense matrices over a pluggable element type.

Usage:
    from pymatrix.matrix import Matrix, identity

    A = Matrix([[4, 3], [6, 3]])
    A.multiply(identity(2)).equal(A)     # True
    Q, R = A.qr_decomposition()
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.results import QRResult, LUResult
from pymatrix.matrix.utils import (
    identity,
    ones,
    zeros,
    random,
    reshape,
    clone,
    pad_matrix_to_power_of_two,
    is_upper_triangular,
    is_lower_triangular,
    is_int_matrix,
    is_empty,
    is_diagonal,
    is_symmetric,
    is_identity,
    round_matrix_to_zero,
    to_fixed_matrix,
    nullify,
)

__all__ = [
    "Matrix",
    "QRResult",
    "LUResult",
    "identity",
    "ones",
    "zeros",
    "random",
    "reshape",
    "clone",
    "pad_matrix_to_power_of_two",
    "is_upper_triangular",
    "is_lower_triangular",
    "is_int_matrix",
    "is_empty",
    "is_diagonal",
    "is_symmetric",
    "is_identity",
    "round_matrix_to_zero",
    "to_fixed_matrix",
    "nullify",
]
