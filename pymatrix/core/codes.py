"""
Error code constants for pymatrix.

This module is the SINGLE SOURCE OF TRUTH for error codes.
Import from here, never use raw strings.

Usage:
    from pymatrix.core.codes import SHAPE_MISMATCH

    try:
        A.add(B)
    except DimensionError as err:
        if err.code == SHAPE_MISMATCH:
            ...
"""

# === Structural / validation ===

# Entries are not a sequence (list, tuple or numpy array)
NOT_A_SEQUENCE = 'not_a_sequence'

# Entries are ragged, nested too deeply, or otherwise malformed
INVALID_ENTRIES = 'invalid_entries'

# Elements do not all share one element type
MIXED_ELEMENT_TYPES = 'mixed_element_types'

# Row/column counts missing, non-integer, non-positive or inconsistent
INVALID_DIMENSIONS = 'invalid_dimensions'

# Submatrix bounds outside the matrix or empty
INVALID_SUBMATRIX_BOUNDS = 'invalid_submatrix_bounds'

# Reshape target does not hold the same number of elements
RESHAPE_SIZE_MISMATCH = 'reshape_size_mismatch'

# Row/column/element index outside the matrix
INDEX_OUT_OF_BOUNDS = 'index_out_of_bounds'

# Generic bad argument (wrong type, non-positive count, ...)
INVALID_ARGUMENT = 'invalid_argument'

# === Dimensional mismatch ===

# add/subtract on differently shaped matrices
SHAPE_MISMATCH = 'shape_mismatch'

# multiply with A.columns != B.rows
INNER_DIMENSION_MISMATCH = 'inner_dimension_mismatch'

# Vector length does not match (dot, cross, angle, distance, v_multiply, ...)
LENGTH_MISMATCH = 'length_mismatch'

# augment with differing row counts
ROW_COUNT_MISMATCH = 'row_count_mismatch'

# === Type mismatch ===

# Operand is not a Matrix
NOT_A_MATRIX = 'not_a_matrix'

# Operands carry different element-type tags
ELEMENT_TYPE_MISMATCH = 'element_type_mismatch'

# Scalar argument is not numeric
NON_NUMERIC_SCALAR = 'non_numeric_scalar'

# === Numerical infeasibility ===

# Zero pivot / zero diagonal while solving
SINGULAR_SYSTEM = 'singular_system'

# Gram-Schmidt found linearly dependent columns
LINEARLY_DEPENDENT = 'linearly_dependent'

# Division by zero inside a Numerical implementation
DIVISION_BY_ZERO = 'division_by_zero'

# Normalize/project/angle on a zero vector
ZERO_VECTOR = 'zero_vector'

# Square root of a negative value in an exact Numerical implementation
NEGATIVE_SQRT = 'negative_sqrt'

# === Shape-class precondition ===

NOT_SQUARE = 'not_square'
NOT_UPPER_TRIANGULAR = 'not_upper_triangular'
NOT_LOWER_TRIANGULAR = 'not_lower_triangular'

# === Capability ===

# Element type has no inferable Numerical and none was supplied
MISSING_NUMERICAL = 'missing_numerical'

# Numerical given by an unknown registry name
UNKNOWN_NUMERICAL = 'unknown_numerical'

# All codes as a frozenset for validation
ALL_CODES = frozenset({
    NOT_A_SEQUENCE,
    INVALID_ENTRIES,
    MIXED_ELEMENT_TYPES,
    INVALID_DIMENSIONS,
    INVALID_SUBMATRIX_BOUNDS,
    RESHAPE_SIZE_MISMATCH,
    INDEX_OUT_OF_BOUNDS,
    INVALID_ARGUMENT,
    SHAPE_MISMATCH,
    INNER_DIMENSION_MISMATCH,
    LENGTH_MISMATCH,
    ROW_COUNT_MISMATCH,
    NOT_A_MATRIX,
    ELEMENT_TYPE_MISMATCH,
    NON_NUMERIC_SCALAR,
    SINGULAR_SYSTEM,
    LINEARLY_DEPENDENT,
    DIVISION_BY_ZERO,
    ZERO_VECTOR,
    NEGATIVE_SQRT,
    NOT_SQUARE,
    NOT_UPPER_TRIANGULAR,
    NOT_LOWER_TRIANGULAR,
    MISSING_NUMERICAL,
    UNKNOWN_NUMERICAL,
})

__all__ = [
    'NOT_A_SEQUENCE',
    'INVALID_ENTRIES',
    'MIXED_ELEMENT_TYPES',
    'INVALID_DIMENSIONS',
    'INVALID_SUBMATRIX_BOUNDS',
    'RESHAPE_SIZE_MISMATCH',
    'INDEX_OUT_OF_BOUNDS',
    'INVALID_ARGUMENT',
    'SHAPE_MISMATCH',
    'INNER_DIMENSION_MISMATCH',
    'LENGTH_MISMATCH',
    'ROW_COUNT_MISMATCH',
    'NOT_A_MATRIX',
    'ELEMENT_TYPE_MISMATCH',
    'NON_NUMERIC_SCALAR',
    'SINGULAR_SYSTEM',
    'LINEARLY_DEPENDENT',
    'DIVISION_BY_ZERO',
    'ZERO_VECTOR',
    'NEGATIVE_SQRT',
    'NOT_SQUARE',
    'NOT_UPPER_TRIANGULAR',
    'NOT_LOWER_TRIANGULAR',
    'MISSING_NUMERICAL',
    'UNKNOWN_NUMERICAL',
    'ALL_CODES',
]
