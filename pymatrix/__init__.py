"""
PyMatrix: dense linear algebra over pluggable numeric element types.

A Matrix holds native numbers, exact integers, fractions or any type
with a Numerical capability, and the same elimination, decomposition,
inversion and multiplication algorithms run over all of them.

Submodules:
    matrix: The Matrix type and its free utility functions
    numerical: Numerical capabilities (number, int, fraction)
    math_utils: Scalar and vector helpers
    core: Error codes, exceptions, validation and tolerances
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    ShapeError,
    TypeMismatchError,
    NumericalError,
    SingularMatrixError,
    ZeroVectorError,
    CapabilityError,
)
from pymatrix.numerical import (
    Numerical,
    NumericalNumber,
    NumericalInt,
    NumericalFraction,
    parse_fraction,
)
from pymatrix import math_utils
from pymatrix.matrix import (
    Matrix,
    QRResult,
    LUResult,
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
    "__version__",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "ShapeError",
    "TypeMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "ZeroVectorError",
    "CapabilityError",
    # Numerical capabilities
    "Numerical",
    "NumericalNumber",
    "NumericalInt",
    "NumericalFraction",
    "parse_fraction",
    # Submodules
    "math_utils",
    # Matrix
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
