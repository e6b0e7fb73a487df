"""
Structural kernels on flat row-major element lists.

Every function here works on a plain list plus explicit dimensions and
never sees a Matrix, so both the Matrix class and the free utilities
in pymatrix.matrix.utils can share them.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pymatrix.core import codes
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_positive_int, check_sequence
from pymatrix.numerical import Numerical, element_tag, tag_name


def _unwrap(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


def parse_entries(
    entries: Any,
    rows: Any = None,
    columns: Any = None,
) -> tuple[list[Any], int, int]:
    """
    Flatten constructor input into (elements, rows, columns).

    Accepts a rectangular 2-D sequence, or a flat sequence with explicit
    rows and columns. A flat sequence of length one is a 1x1 matrix.

    Raises:
        ValidationError: On non-sequence input, ragged or over-nested
            rows, or missing/inconsistent dimensions
    """
    entries = check_sequence(entries, 'entries')
    if not entries:
        raise ValidationError(
            "entries: a matrix needs at least one row and one column",
            code=codes.INVALID_DIMENSIONS,
        )

    if isinstance(entries[0], (list, tuple)):
        n_rows = len(entries)
        n_cols = len(entries[0])
        if n_cols == 0:
            raise ValidationError(
                "entries: a matrix needs at least one row and one column",
                code=codes.INVALID_DIMENSIONS,
            )
        elements: list[Any] = []
        for i, row in enumerate(entries):
            if not isinstance(row, (list, tuple)):
                raise ValidationError(
                    f"entries: row {i} is not a sequence",
                    code=codes.INVALID_ENTRIES,
                    details={'row': i},
                )
            if len(row) != n_cols:
                raise ValidationError(
                    f"entries: row {i} has {len(row)} entries, expected {n_cols}",
                    code=codes.INVALID_ENTRIES,
                    details={'row': i, 'length': len(row), 'expected': n_cols},
                )
            for value in row:
                if isinstance(value, (list, tuple)):
                    raise ValidationError(
                        "entries: nesting deeper than two levels is not supported",
                        code=codes.INVALID_ENTRIES,
                    )
                elements.append(_unwrap(value))
        if (rows is not None and rows != n_rows) or (columns is not None and columns != n_cols):
            raise ValidationError(
                f"entries: explicit dimensions ({rows},{columns}) do not match "
                f"nested entries ({n_rows},{n_cols})",
                code=codes.INVALID_DIMENSIONS,
                details={'rows': rows, 'columns': columns},
            )
        return elements, n_rows, n_cols

    for value in entries:
        if isinstance(value, (list, tuple)):
            raise ValidationError(
                "entries: mixes nested rows and scalar entries",
                code=codes.INVALID_ENTRIES,
            )
    elements = [_unwrap(value) for value in entries]

    if rows is None and columns is None and len(elements) == 1:
        return elements, 1, 1
    if rows is None or columns is None:
        raise ValidationError(
            "entries: flat input requires explicit rows and columns",
            code=codes.INVALID_DIMENSIONS,
            details={'rows': rows, 'columns': columns},
        )
    rows = check_positive_int(rows, 'rows', code=codes.INVALID_DIMENSIONS)
    columns = check_positive_int(columns, 'columns', code=codes.INVALID_DIMENSIONS)
    if rows * columns != len(elements):
        raise ValidationError(
            f"entries: {len(elements)} elements cannot fill a {rows}x{columns} matrix",
            code=codes.INVALID_DIMENSIONS,
            details={'rows': rows, 'columns': columns, 'size': len(elements)},
        )
    return elements, rows, columns


def common_tag(elements: list[Any]) -> str | type:
    """
    Element-type tag shared by every element.

    Raises:
        ValidationError: If the elements do not share one tag
    """
    tag = element_tag(elements[0])
    for index, value in enumerate(elements):
        other = element_tag(value)
        if other != tag:
            raise ValidationError(
                f"entries: mixed element types {tag_name(tag)!r} and "
                f"{tag_name(other)!r} (flat index {index})",
                code=codes.MIXED_ELEMENT_TYPES,
                details={'expected': tag_name(tag), 'got': tag_name(other), 'index': index},
            )
    return tag


# =====================================================================
# Layout kernels
# =====================================================================

def transpose(elements: list[Any], rows: int, columns: int) -> list[Any]:
    return [elements[i * columns + j] for j in range(columns) for i in range(rows)]


def identity(n: int, numerical: Numerical) -> list[Any]:
    zero, one = numerical.zero, numerical.one
    return [one if i == j else zero for i in range(n) for j in range(n)]


def block(
    elements: list[Any],
    columns: int,
    start_row: int,
    end_row: int,
    start_col: int,
    end_col: int,
) -> list[Any]:
    """Rows [start_row, end_row) and columns [start_col, end_col) as a flat list."""
    result: list[Any] = []
    for i in range(start_row, end_row):
        offset = i * columns
        result.extend(elements[offset + start_col:offset + end_col])
    return result


def pad(
    elements: list[Any],
    rows: int,
    columns: int,
    new_rows: int,
    new_columns: int,
    zero: Any,
) -> list[Any]:
    """Embed a rows x columns block in the top-left of a zero new_rows x new_columns block."""
    result = [zero] * (new_rows * new_columns)
    for i in range(rows):
        result[i * new_columns:i * new_columns + columns] = elements[i * columns:(i + 1) * columns]
    return result


def hstack(
    left: list[Any],
    right: list[Any],
    rows: int,
    left_columns: int,
    right_columns: int,
) -> list[Any]:
    result: list[Any] = []
    for i in range(rows):
        result.extend(left[i * left_columns:(i + 1) * left_columns])
        result.extend(right[i * right_columns:(i + 1) * right_columns])
    return result


def swap_rows(elements: list[Any], columns: int, first: int, second: int) -> None:
    """Swap two rows in place."""
    if first == second:
        return
    a = slice(first * columns, (first + 1) * columns)
    b = slice(second * columns, (second + 1) * columns)
    elements[a], elements[b] = elements[b], elements[a]


# =====================================================================
# Element-wise helpers
# =====================================================================

def round_to_zero(elements: list[Any], numerical: Numerical, threshold: float) -> None:
    """Replace entries with |x| < threshold by the exact zero, in place."""
    zero = numerical.zero
    for index, value in enumerate(elements):
        if numerical.to_float(numerical.absolute(value)) < threshold:
            elements[index] = zero


def is_upper_triangular(elements: list[Any], rows: int, columns: int, numerical: Numerical) -> bool:
    for i in range(1, rows):
        for j in range(min(i, columns)):
            if numerical.sign(elements[i * columns + j]) != 0:
                return False
    return True


def is_lower_triangular(elements: list[Any], rows: int, columns: int, numerical: Numerical) -> bool:
    for i in range(rows):
        for j in range(i + 1, columns):
            if numerical.sign(elements[i * columns + j]) != 0:
                return False
    return True


def diagonal(elements: list[Any], rows: int, columns: int, k: int = 0) -> list[Any]:
    """k-th diagonal: k > 0 above the main diagonal, k < 0 below."""
    if k >= 0:
        return [elements[i * columns + i + k] for i in range(min(rows, columns - k))]
    return [elements[(i - k) * columns + i] for i in range(min(rows + k, columns))]
