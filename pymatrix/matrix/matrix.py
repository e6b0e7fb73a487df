"""
Dense matrix over a pluggable element type.

Matrix stores its entries as a flat row-major list together with its
dimensions, an element-type tag and the Numerical capability used for
arithmetic. All algorithms run through that capability, so the same
code serves floats, exact integers and fractions.

Conventions:
    - Indices are 0-based and every range is end-exclusive.
    - Operations return new matrices. The in-place ones are named for it
      (set_*, swap_*) or say so in their docstring (qr_decomposition).
    - Derived matrices keep the receiver's element-type tag and capability.
    - Binary operations reject a different element-type tag before any
      arithmetic is attempted.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np

from pymatrix.core import codes
from pymatrix.core.exceptions import (
    DimensionError,
    ShapeError,
    SingularMatrixError,
    TypeMismatchError,
    ValidationError,
)
from pymatrix.core.tolerances import GRAM_SCHMIDT_EPSILON, STRICT
from pymatrix.core.validation import check_index, check_sequence, is_integer
from pymatrix.math_utils import total
from pymatrix.matrix import _decompose, _elimination, _multiply, _orthogonal, _structure
from pymatrix.matrix.results import LUResult, QRResult
from pymatrix.numerical import NUMBER_TAG, Numerical, element_tag, resolve_numerical, tag_name


class Matrix:
    """
    Dense rows x columns matrix.

    Construction:
        Matrix([[1, 2], [3, 4]])                       # nested rows
        Matrix([1, 2, 3, 4], rows=2, columns=2)        # flat + dimensions
        Matrix(np.eye(3))                              # 2-D numpy array
        Matrix([[Fraction(1, 2)]], numerical='fraction')

    Args:
        entries: Nested rows, a flat sequence, or a numpy array
        rows: Row count, required for flat input of length > 1
        columns: Column count, required for flat input of length > 1
        numerical: Numerical instance or registered name. Inferred only
            for native numbers. The 'fraction' capability also accepts
            "a/b" strings and native numbers and stores them as Fractions.

    Raises:
        ValidationError: Malformed entries, bad dimensions or mixed element types
        CapabilityError: No Numerical for the element type
        TypeMismatchError: The capability cannot represent the entries
    """

    __slots__ = ('_elements', '_rows', '_columns', '_tag', '_numerical')

    def __init__(
        self,
        entries: Any,
        rows: int | None = None,
        columns: int | None = None,
        *,
        numerical: str | Numerical | None = None,
    ):
        elements, n_rows, n_cols = _structure.parse_entries(entries, rows, columns)
        tag = _structure.common_tag(elements)
        num = resolve_numerical(numerical, tag)
        # the capability may convert entries ("a/b" strings into Fractions)
        elements = [num.coerce(x) for x in elements]
        self._elements = elements
        self._rows = n_rows
        self._columns = n_cols
        self._tag = _structure.common_tag(elements)
        self._numerical = num

    @classmethod
    def _from_flat(
        cls,
        elements: list[Any],
        rows: int,
        columns: int,
        numerical: Numerical,
        tag: str | type,
    ) -> Matrix:
        """Trusted constructor for kernel output; skips validation."""
        obj = cls.__new__(cls)
        obj._elements = elements
        obj._rows = rows
        obj._columns = columns
        obj._tag = tag
        obj._numerical = numerical
        return obj

    def _derive(self, elements: list[Any], rows: int, columns: int) -> Matrix:
        return Matrix._from_flat(elements, rows, columns, self._numerical, self._tag)

    # =================================================================
    # Properties
    # =================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def size(self) -> int:
        return self._rows * self._columns

    @property
    def elements(self) -> list[Any]:
        """Copy of the flat row-major entries."""
        return list(self._elements)

    @property
    def shape(self) -> str:
        return f"({self._rows},{self._columns})"

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    @property
    def is_tall(self) -> bool:
        return self._rows > self._columns

    @property
    def is_wide(self) -> bool:
        return self._rows < self._columns

    @property
    def dtype(self) -> str:
        return tag_name(self._tag)

    @property
    def numerical(self) -> Numerical:
        return self._numerical

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r}, dtype={self.dtype!r})"

    # =================================================================
    # Validation helpers
    # =================================================================

    def _check_matrix(self, other: Any, operation: str) -> Matrix:
        if not isinstance(other, Matrix):
            raise TypeMismatchError(
                f"{operation}: expected a Matrix, got {type(other).__name__}",
                code=codes.NOT_A_MATRIX,
                details={'operand': other},
            )
        return other

    def _check_same_type(self, other: Matrix, operation: str) -> None:
        if other._tag != self._tag:
            raise TypeMismatchError(
                f"{operation}: element types differ ({self.dtype!r} vs {other.dtype!r})",
                code=codes.ELEMENT_TYPE_MISMATCH,
                details={'left': self.dtype, 'right': other.dtype},
            )

    def _check_square(self, operation: str) -> None:
        if not self.is_square:
            raise ShapeError(
                f"{operation} requires a square matrix, got shape {self.shape}",
                code=codes.NOT_SQUARE,
                details={'rows': self._rows, 'columns': self._columns},
            )

    def _check_value(self, value: Any, name: str) -> Any:
        if isinstance(value, np.generic):
            value = value.item()
        if element_tag(value) != self._tag:
            raise TypeMismatchError(
                f"{name}: expected element type {self.dtype!r}, "
                f"got {tag_name(element_tag(value))!r}",
                code=codes.ELEMENT_TYPE_MISMATCH,
                details={name: value},
            )
        return value

    def _check_values(self, values: Any, expected: int, name: str) -> list[Any]:
        values = check_sequence(values, name)
        if len(values) != expected:
            raise DimensionError(
                f"{name}: expected {expected} values, got {len(values)}",
                code=codes.LENGTH_MISMATCH,
                details={name: len(values), 'expected': expected},
            )
        return [self._check_value(v, name) for v in values]

    def _check_bounds(self, start_row: int, end_row: int, start_col: int, end_col: int) -> None:
        bounds = (start_row, end_row, start_col, end_col)
        valid = (
            all(is_integer(b) for b in bounds)
            and 0 <= start_row < end_row <= self._rows
            and 0 <= start_col < end_col <= self._columns
        )
        if not valid:
            raise ValidationError(
                f"Invalid submatrix bounds rows [{start_row}, {end_row}) "
                f"columns [{start_col}, {end_col}) for shape {self.shape}",
                code=codes.INVALID_SUBMATRIX_BOUNDS,
                details={
                    'start_row': start_row, 'end_row': end_row,
                    'start_col': start_col, 'end_col': end_col,
                },
            )

    # =================================================================
    # Element access
    # =================================================================

    def get_element(self, row: int, column: int) -> Any:
        row = check_index(row, self._rows, 'row')
        column = check_index(column, self._columns, 'column')
        return self._elements[row * self._columns + column]

    def set_element(self, row: int, column: int, value: Any) -> None:
        """Set one entry in place. value must share the matrix's element type."""
        row = check_index(row, self._rows, 'row')
        column = check_index(column, self._columns, 'column')
        self._elements[row * self._columns + column] = self._check_value(value, 'value')

    def get_row(self, index: int) -> list[Any]:
        index = check_index(index, self._rows, 'index')
        return self._elements[index * self._columns:(index + 1) * self._columns]

    def get_column(self, index: int) -> list[Any]:
        index = check_index(index, self._columns, 'index')
        return self._elements[index::self._columns]

    def set_row(self, index: int, values: Sequence[Any]) -> None:
        """Replace row index in place."""
        index = check_index(index, self._rows, 'index')
        values = self._check_values(values, self._columns, 'values')
        self._elements[index * self._columns:(index + 1) * self._columns] = values

    def set_column(self, index: int, values: Sequence[Any]) -> None:
        """Replace column index in place."""
        index = check_index(index, self._columns, 'index')
        values = self._check_values(values, self._rows, 'values')
        self._elements[index::self._columns] = values

    def swap_rows(self, first: int, second: int) -> None:
        """Swap two rows in place."""
        first = check_index(first, self._rows, 'first')
        second = check_index(second, self._rows, 'second')
        _structure.swap_rows(self._elements, self._columns, first, second)

    def swap_columns(self, first: int, second: int) -> None:
        """Swap two columns in place."""
        first = check_index(first, self._columns, 'first')
        second = check_index(second, self._columns, 'second')
        column = self._elements[first::self._columns]
        self._elements[first::self._columns] = self._elements[second::self._columns]
        self._elements[second::self._columns] = column

    def get_sub_matrix(self, start_row: int, end_row: int, start_col: int, end_col: int) -> Matrix:
        """
        Rows [start_row, end_row) and columns [start_col, end_col) as a new matrix.

        Raises:
            ValidationError: INVALID_SUBMATRIX_BOUNDS for empty or out-of-range bounds
        """
        self._check_bounds(start_row, end_row, start_col, end_col)
        elements = _structure.block(self._elements, self._columns, start_row, end_row, start_col, end_col)
        return self._derive(elements, end_row - start_row, end_col - start_col)

    def set_sub_matrix(
        self,
        start_row: int,
        end_row: int,
        start_col: int,
        end_col: int,
        sub: Matrix,
    ) -> None:
        """
        Overwrite rows [start_row, end_row) and columns [start_col, end_col) in place.

        Raises:
            ValidationError: INVALID_SUBMATRIX_BOUNDS for empty or out-of-range bounds
            TypeMismatchError: sub is not a Matrix or has another element type
            DimensionError: sub does not have the shape of the target block
        """
        self._check_bounds(start_row, end_row, start_col, end_col)
        sub = self._check_matrix(sub, 'set_sub_matrix')
        height, width = end_row - start_row, end_col - start_col
        if sub._rows != height or sub._columns != width:
            raise DimensionError(
                f"set_sub_matrix: target block is ({height},{width}), sub is {sub.shape}",
                code=codes.SHAPE_MISMATCH,
                details={'expected': (height, width), 'got': (sub._rows, sub._columns)},
            )
        self._check_same_type(sub, 'set_sub_matrix')
        for i in range(height):
            offset = (start_row + i) * self._columns + start_col
            self._elements[offset:offset + width] = sub._elements[i * width:(i + 1) * width]

    def diag(self, k: int = 0) -> list[Any]:
        """Entries of the k-th diagonal (k > 0 above, k < 0 below the main one)."""
        if not is_integer(k):
            raise ValidationError(f"k: expected an integer, got {type(k).__name__}", details={'k': k})
        return _structure.diagonal(self._elements, self._rows, self._columns, int(k))

    def remove_row(self, index: int) -> Matrix:
        index = check_index(index, self._rows, 'index')
        if self._rows == 1:
            raise ValidationError(
                "remove_row: cannot remove the only row",
                code=codes.INVALID_DIMENSIONS,
            )
        c = self._columns
        elements = self._elements[:index * c] + self._elements[(index + 1) * c:]
        return self._derive(elements, self._rows - 1, c)

    def remove_column(self, index: int) -> Matrix:
        index = check_index(index, self._columns, 'index')
        if self._columns == 1:
            raise ValidationError(
                "remove_column: cannot remove the only column",
                code=codes.INVALID_DIMENSIONS,
            )
        elements = [x for k, x in enumerate(self._elements) if k % self._columns != index]
        return self._derive(elements, self._rows, self._columns - 1)

    def to_list(self) -> list[list[Any]]:
        """Nested row lists."""
        c = self._columns
        return [self._elements[i * c:(i + 1) * c] for i in range(self._rows)]

    def to_numpy(self) -> np.ndarray:
        """
        2-D numpy array of the entries.

        Native numbers give an int or float array; other element types
        an object array.
        """
        if self._tag == NUMBER_TAG:
            return np.array(self.to_list())
        return np.array(self.to_list(), dtype=object)

    # =================================================================
    # Arithmetic
    # =================================================================

    def _elementwise(self, other: Any, operation: str, op) -> Matrix:
        other = self._check_matrix(other, operation)
        if other._rows != self._rows or other._columns != self._columns:
            raise DimensionError(
                f"{operation}: shapes differ ({self.shape} vs {other.shape})",
                code=codes.SHAPE_MISMATCH,
                details={'left': self.shape, 'right': other.shape},
            )
        self._check_same_type(other, operation)
        elements = [op(x, y) for x, y in zip(self._elements, other._elements)]
        return self._derive(elements, self._rows, self._columns)

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum."""
        return self._elementwise(other, 'add', self._numerical.add)

    def subtract(self, other: Matrix) -> Matrix:
        """Elementwise difference."""
        return self._elementwise(other, 'subtract', self._numerical.subtract)

    def scale(self, scalar: Any) -> Matrix:
        """
        Multiply every entry by scalar.

        scalar may be a value of the matrix's own element type or an
        integer, lifted into other element types with from_integral.
        Capabilities without exact division accept integers only.

        Raises:
            TypeMismatchError: NON_NUMERIC_SCALAR otherwise
        """
        factor = self._lift(scalar, 'scale', codes.NON_NUMERIC_SCALAR)
        mul = self._numerical.multiply
        return self._derive([mul(x, factor) for x in self._elements], self._rows, self._columns)

    def _lift(self, value: Any, operation: str, code: str) -> Any:
        """value as an entry of this matrix's element type, for raw operands."""
        if isinstance(value, np.generic):
            value = value.item()
        tag = element_tag(value)
        if tag == self._tag and (self._numerical.exact_division or is_integer(value)):
            return value
        if tag == NUMBER_TAG and is_integer(value):
            return self._numerical.from_integral(int(value))
        raise TypeMismatchError(
            f"{operation}: cannot combine a {self.dtype!r} matrix "
            f"({self._numerical.name} numerical) with {type(value).__name__} {value!r}",
            code=code,
            details={'value': value},
        )

    def v_multiply(self, vector: Sequence[Any]) -> Matrix:
        """
        Scale column j by vector[j].

        This is a per-column scaling, not a matrix-vector product. Entries
        follow the same rules as the scalar of scale().

        Raises:
            DimensionError: LENGTH_MISMATCH if len(vector) != columns
            TypeMismatchError: ELEMENT_TYPE_MISMATCH for an entry of another type
        """
        vector = check_sequence(vector, 'vector')
        if len(vector) != self._columns:
            raise DimensionError(
                f"v_multiply: vector has length {len(vector)}, matrix has {self._columns} columns",
                code=codes.LENGTH_MISMATCH,
                details={'vector': len(vector), 'columns': self._columns},
            )
        vector = [self._lift(v, 'v_multiply', codes.ELEMENT_TYPE_MISMATCH) for v in vector]
        mul, c = self._numerical.multiply, self._columns
        elements = [mul(x, vector[k % c]) for k, x in enumerate(self._elements)]
        return self._derive(elements, self._rows, c)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # =================================================================
    # Multiplication
    # =================================================================

    def _check_conformable(self, other: Any, operation: str) -> Matrix:
        other = self._check_matrix(other, operation)
        if self._columns != other._rows:
            raise DimensionError(
                f"{operation}: inner dimensions differ ({self.shape} x {other.shape})",
                code=codes.INNER_DIMENSION_MISMATCH,
                details={'left': self.shape, 'right': other.shape},
            )
        self._check_same_type(other, operation)
        return other

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self x other.

        Raises:
            TypeMismatchError: other is not a Matrix or has another element type
            DimensionError: INNER_DIMENSION_MISMATCH if self.columns != other.rows
        """
        other = self._check_conformable(other, 'multiply')
        elements = _multiply.blocked_multiply(
            self._elements, self._rows, self._columns,
            other._elements, other._columns, self._numerical,
        )
        return self._derive(elements, self._rows, other._columns)

    def strassen_multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product by Strassen's algorithm.

        Any conformable pair is accepted; operands are padded internally
        and the result has shape (self.rows, other.columns).
        """
        other = self._check_conformable(other, 'strassen_multiply')
        elements = _multiply.strassen_multiply(
            self._elements, self._rows, self._columns,
            other._elements, other._columns, self._numerical,
        )
        return self._derive(elements, self._rows, other._columns)

    def pow(self, exp: int) -> Matrix:
        """
        Integer power by repeated squaring.

        pow(0) is the identity and pow(1) a copy.

        Raises:
            ValidationError: exp is not an integer
            ShapeError: the matrix is not square
            NotImplementedError: exp is negative
        """
        if not is_integer(exp):
            raise ValidationError(f"exp: expected an integer, got {type(exp).__name__}", details={'exp': exp})
        if exp < 0:
            raise NotImplementedError("Negative matrix powers are not supported")
        self._check_square('pow')
        return self._pow(int(exp))

    def _pow(self, exp: int) -> Matrix:
        if exp == 0:
            return self._derive(_structure.identity(self._rows, self._numerical), self._rows, self._rows)
        if exp == 1:
            return self._derive(list(self._elements), self._rows, self._columns)
        if exp % 2 == 0:
            half = self._pow(exp // 2)
            return half.multiply(half)
        return self.multiply(self._pow(exp - 1))

    # =================================================================
    # Structure
    # =================================================================

    def transpose(self) -> Matrix:
        elements = _structure.transpose(self._elements, self._rows, self._columns)
        return self._derive(elements, self._columns, self._rows)

    def augment(self, other: Matrix) -> Matrix:
        """
        [self | other], side by side.

        Raises:
            DimensionError: ROW_COUNT_MISMATCH if the row counts differ
        """
        other = self._check_matrix(other, 'augment')
        if other._rows != self._rows:
            raise DimensionError(
                f"augment: row counts differ ({self._rows} vs {other._rows})",
                code=codes.ROW_COUNT_MISMATCH,
                details={'left': self._rows, 'right': other._rows},
            )
        self._check_same_type(other, 'augment')
        elements = _structure.hstack(self._elements, other._elements, self._rows, self._columns, other._columns)
        return self._derive(elements, self._rows, self._columns + other._columns)

    def equal(self, other: Matrix, tolerance: float = STRICT.atol) -> bool:
        """
        Same shape, same element type and equal entries.

        Native numbers compare with |a - b| < tolerance, other element
        types exactly.

        Raises:
            TypeMismatchError: NOT_A_MATRIX if other is not a Matrix
        """
        other = self._check_matrix(other, 'equal')
        if other._tag != self._tag or other._rows != self._rows or other._columns != self._columns:
            return False
        if self._tag == NUMBER_TAG:
            return all(abs(x - y) < tolerance for x, y in zip(self._elements, other._elements))
        return all(x == y for x, y in zip(self._elements, other._elements))

    # =================================================================
    # Orthogonalization and decomposition
    # =================================================================

    def gram_schmidt(self, epsilon: float = GRAM_SCHMIDT_EPSILON) -> Matrix:
        """
        Orthonormalize the columns by classical Gram-Schmidt.

        Args:
            epsilon: Minimum norm of an orthogonal column before normalization

        Returns:
            Matrix of the same shape with orthonormal columns

        Raises:
            NumericalError: LINEARLY_DEPENDENT if the columns are not independent
        """
        _elimination.warn_inexact_division(self._numerical, 'gram_schmidt')
        elements = _orthogonal.gram_schmidt(
            self._elements, self._rows, self._columns, self._numerical, epsilon,
        )
        return self._derive(elements, self._rows, self._columns)

    def qr_decomposition(self) -> QRResult:
        """
        QR decomposition by Gram-Schmidt: Q = gram_schmidt(), R = Q^T A.

        Near-zero entries of R are rounded to exact zero. As a side
        effect, near-zero entries of this matrix are also rounded to
        zero in place.
        """
        q = self.gram_schmidt()
        r = q.transpose().multiply(self)
        _structure.round_to_zero(r._elements, self._numerical, STRICT.atol)
        _structure.round_to_zero(self._elements, self._numerical, STRICT.atol)
        return QRResult(Q=q, R=r)

    def lu_decomposition(self) -> LUResult:
        """
        LU decomposition with partial pivoting, P A = L U.

        Raises:
            ShapeError: the matrix is not square
            SingularMatrixError: a pivot column is entirely zero
        """
        self._check_square('lu_decomposition')
        _elimination.warn_inexact_division(self._numerical, 'lu_decomposition')
        n = self._rows
        lower, upper, perm, swaps = _decompose.lu_decompose(self._elements, n, self._numerical)
        return LUResult(
            L=self._derive(lower, n, n),
            U=self._derive(upper, n, n),
            P=self._derive(perm, n, n),
            permutation_count=swaps,
        )

    # =================================================================
    # Linear systems
    # =================================================================

    def _check_rhs(self, b: Any) -> list[Any]:
        b = check_sequence(b, 'b')
        if len(b) != self._rows:
            raise DimensionError(
                f"b: expected length {self._rows}, got {len(b)}",
                code=codes.LENGTH_MISMATCH,
                details={'b': len(b), 'rows': self._rows},
            )
        return b

    def _check_upper(self, operation: str) -> None:
        self._check_square(operation)
        if not _structure.is_upper_triangular(self._elements, self._rows, self._columns, self._numerical):
            raise ShapeError(
                f"{operation} requires an upper triangular matrix",
                code=codes.NOT_UPPER_TRIANGULAR,
            )

    def _check_lower(self, operation: str) -> None:
        self._check_square(operation)
        if not _structure.is_lower_triangular(self._elements, self._rows, self._columns, self._numerical):
            raise ShapeError(
                f"{operation} requires a lower triangular matrix",
                code=codes.NOT_LOWER_TRIANGULAR,
            )

    def back_substitution(self, b: Sequence[Any]) -> list[Any]:
        """
        Solve self x = b for square upper triangular self.

        Raises:
            ShapeError: NOT_SQUARE / NOT_UPPER_TRIANGULAR
            DimensionError: LENGTH_MISMATCH if len(b) != rows
            SingularMatrixError: zero on the diagonal
        """
        self._check_upper('back_substitution')
        b = self._check_rhs(b)
        return _elimination.back_substitution(self._elements, self._rows, b, self._numerical)

    def forward_substitution(self, b: Sequence[Any]) -> list[Any]:
        """
        Solve self x = b for square lower triangular self.

        Raises:
            ShapeError: NOT_SQUARE / NOT_LOWER_TRIANGULAR
            DimensionError: LENGTH_MISMATCH if len(b) != rows
            SingularMatrixError: zero on the diagonal
        """
        self._check_lower('forward_substitution')
        b = self._check_rhs(b)
        return _elimination.forward_substitution(self._elements, self._rows, b, self._numerical)

    def _check_augmented_system(self, operation: str) -> None:
        if self._columns != self._rows + 1:
            raise ShapeError(
                f"{operation}(solve=True) needs an n x (n+1) augmented matrix, got {self.shape}",
                code=codes.NOT_SQUARE,
                details={'rows': self._rows, 'columns': self._columns},
            )

    def gaussian_elimination(self, solve: bool = False) -> Matrix | list[Any]:
        """
        Row-echelon form by Gaussian elimination.

        Entries with magnitude below STRICT.atol are rounded to zero afterwards.

        Args:
            solve: Treat the last column as the right-hand side of an
                n x (n+1) augmented system and return its solution

        Returns:
            The reduced matrix, or the solution list when solve is True

        Raises:
            ShapeError: solve=True on a matrix that is not n x (n+1)
            SingularMatrixError: solve=True on a singular system
        """
        if solve:
            self._check_augmented_system('gaussian_elimination')
        _elimination.warn_inexact_division(self._numerical, 'gaussian_elimination')
        reduced = _elimination.row_echelon(self._elements, self._rows, self._columns, self._numerical)
        _structure.round_to_zero(reduced, self._numerical, STRICT.atol)
        result = self._derive(reduced, self._rows, self._columns)
        if not solve:
            return result
        n = self._rows
        left = self._derive(_structure.block(reduced, self._columns, 0, n, 0, n), n, n)
        return left.back_substitution(result.get_column(n))

    def gauss_jordan(self, solve: bool = False) -> Matrix | list[Any]:
        """
        Reduced row-echelon form by Gauss-Jordan elimination.

        Pivots are scaled to exactly one and every other entry in a
        pivot column is eliminated. Entries with magnitude below STRICT.atol are
        rounded to zero afterwards.

        Args:
            solve: Return the last column of the result (the solution of
                an augmented system) instead of the matrix

        Returns:
            The RREF matrix, or its last column when solve is True
        """
        _elimination.warn_inexact_division(self._numerical, 'gauss_jordan')
        reduced, _ = _elimination.reduced_row_echelon(self._elements, self._rows, self._columns, self._numerical)
        _structure.round_to_zero(reduced, self._numerical, STRICT.atol)
        if solve:
            return reduced[self._columns - 1::self._columns]
        return self._derive(reduced, self._rows, self._columns)

    # =================================================================
    # Inversion
    # =================================================================

    def invert_square(self) -> Matrix:
        """
        Inverse by Gauss-Jordan on [A | I].

        Singularity is judged by rank(), so a float matrix whose
        elimination leaves only a rounding residue on the diagonal is
        rejected rather than inverted.

        Raises:
            ShapeError: the matrix is not square
            SingularMatrixError: the matrix is singular
        """
        self._check_square('invert_square')
        _elimination.warn_inexact_division(self._numerical, 'invert_square')
        num, n = self._numerical, self._rows
        rank = self.rank()
        if rank < n:
            raise SingularMatrixError(
                f"Matrix is singular (rank {rank} < {n}) and cannot be inverted",
                code=codes.SINGULAR_SYSTEM,
                matrix_name='A',
                rank=rank,
                expected_rank=n,
            )
        augmented = _structure.hstack(self._elements, _structure.identity(n, num), n, n, n)
        reduced, _ = _elimination.reduced_row_echelon(augmented, n, 2 * n, num)
        _structure.round_to_zero(reduced, num, STRICT.atol)
        return self._derive(_structure.block(reduced, 2 * n, 0, n, n, 2 * n), n, n)

    def _invert_triangular(self, solver) -> Matrix:
        num, n = self._numerical, self._rows
        _elimination.warn_inexact_division(num, 'triangular inversion')
        eye = _structure.identity(n, num)
        solutions: list[Any] = []
        for k in range(n):
            solutions.extend(solver(self._elements, n, eye[k * n:(k + 1) * n], num))
        return self._derive(solutions, n, n).transpose()

    def invert_upper(self) -> Matrix:
        """
        Inverse of an upper triangular matrix by back substitution per identity column.

        Raises:
            ShapeError: NOT_SQUARE / NOT_UPPER_TRIANGULAR
            SingularMatrixError: zero on the diagonal
        """
        self._check_upper('invert_upper')
        return self._invert_triangular(_elimination.back_substitution)

    def invert_lower(self) -> Matrix:
        """
        Inverse of a lower triangular matrix by forward substitution per identity column.

        Raises:
            ShapeError: NOT_SQUARE / NOT_LOWER_TRIANGULAR
            SingularMatrixError: zero on the diagonal
        """
        self._check_lower('invert_lower')
        return self._invert_triangular(_elimination.forward_substitution)

    # =================================================================
    # Reductions
    # =================================================================

    def det(self) -> Any:
        """
        Determinant.

        1x1 and 2x2 matrices use the closed form; larger ones the product
        of U's diagonal from lu_decomposition, negated for an odd number
        of row swaps. A singular matrix gives the exact zero.
        """
        self._check_square('det')
        num, m = self._numerical, self._elements
        if self._rows == 1:
            return m[0]
        if self._rows == 2:
            return num.subtract(num.multiply(m[0], m[3]), num.multiply(m[1], m[2]))
        _elimination.warn_inexact_division(num, 'det')
        n = self._rows
        try:
            _, upper, _, swaps = _decompose.lu_decompose(m, n, num)
        except SingularMatrixError:
            return num.zero
        result = num.one
        for i in range(n):
            result = num.multiply(result, upper[i * n + i])
        if swaps % 2:
            result = num.subtract(num.zero, result)
        return result

    def rank(self) -> int:
        """Number of nonzero rows in the row-echelon form."""
        num, c = self._numerical, self._columns
        reduced = _elimination.row_echelon(self._elements, self._rows, c, num)
        _structure.round_to_zero(reduced, num, STRICT.atol)
        return sum(
            1 for i in range(self._rows)
            if any(num.sign(x) != 0 for x in reduced[i * c:(i + 1) * c])
        )

    def trace(self) -> Any:
        self._check_square('trace')
        return total(self.diag(), self._numerical)

    def sum(self) -> Any:
        return total(self._elements, self._numerical)

    def max(self) -> Any:
        return max(self._elements, key=self._numerical.to_float)

    def min(self) -> Any:
        return min(self._elements, key=self._numerical.to_float)

    def norm(self) -> float:
        """Frobenius norm, as a float."""
        to_float = self._numerical.to_float
        return math.sqrt(sum(to_float(x) ** 2 for x in self._elements))

    def cond(self) -> float:
        """Condition number in the Frobenius norm, ||A|| ||A^-1||."""
        self._check_square('cond')
        return self.norm() * self.invert_square().norm()

    def cofactor_matrix(self) -> Matrix:
        """Matrix of signed minors (-1)^(i+j) det(M_ij)."""
        self._check_square('cofactor_matrix')
        num, n = self._numerical, self._rows
        if n == 1:
            return self._derive([num.one], 1, 1)
        cofactors: list[Any] = []
        for i in range(n):
            for j in range(n):
                minor = self.remove_row(i).remove_column(j).det()
                cofactors.append(num.subtract(num.zero, minor) if (i + j) % 2 else minor)
        return self._derive(cofactors, n, n)

    def adjugate(self) -> Matrix:
        """Transpose of the cofactor matrix."""
        self._check_square('adjugate')
        return self.cofactor_matrix().transpose()
