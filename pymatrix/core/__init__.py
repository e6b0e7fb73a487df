"""
Core infrastructure for pymatrix.

This module provides the shared abstractions used by the numerical
capabilities, the math utilities and the Matrix type.

Key components:
    codes: Symbolic error codes
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Comparison thresholds and tiers
"""

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
from pymatrix.core.tolerances import DELTA, STRICT, ACCUMULATED, ToleranceTier

__all__ = [
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
    # Tolerances
    "DELTA",
    "STRICT",
    "ACCUMULATED",
    "ToleranceTier",
]
