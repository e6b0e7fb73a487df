"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except numpy arrays/scalars to Python values)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from pymatrix.core import codes
from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    TypeMismatchError,
    ValidationError,
)


def is_native_number(value: Any) -> bool:
    """
    True for Python int/float and numpy integer/floating scalars.

    bool is excluded even though it subclasses int.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def is_integer(value: Any) -> bool:
    """True for Python int and numpy integer scalars, excluding bool."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def check_sequence(entries: Any, name: str) -> list[Any]:
    """
    Validate that entries form a sequence and return them as a list.

    Accepts list, tuple and numpy arrays. numpy arrays are converted with
    tolist(), which also unwraps numpy scalars into Python scalars.

    Args:
        entries: Input to validate
        name: Parameter name for error messages

    Returns:
        A new list holding the entries (nested sequences are left as-is)

    Raises:
        ValidationError: If entries is not a list, tuple or ndarray
    """
    if isinstance(entries, np.ndarray) and entries.ndim > 0:
        return entries.tolist()
    if isinstance(entries, (list, tuple)):
        return list(entries)
    raise ValidationError(
        f"{name}: expected a sequence, got {type(entries).__name__}",
        code=codes.NOT_A_SEQUENCE,
        details={name: entries},
    )


def check_positive_int(value: Any, name: str, code: str = codes.INVALID_ARGUMENT) -> int:
    """
    Verify value is a strictly positive integer.

    Args:
        value: Value to check
        name: Parameter name for error messages
        code: Error code to attach on failure

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer or is <= 0
    """
    if not is_integer(value):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}",
            code=code,
            details={name: value},
        )
    if value <= 0:
        raise ValidationError(
            f"{name}: expected a positive integer, got {value}",
            code=code,
            details={name: value},
        )
    return int(value)


def check_non_negative_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 0.

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if not is_integer(value) or value < 0:
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {value!r}",
            details={name: value},
        )
    return int(value)


def check_index(index: Any, upper: int, name: str) -> int:
    """
    Verify 0 <= index < upper.

    Args:
        index: Index to check
        upper: Exclusive upper bound
        name: Parameter name for error messages

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfBoundsError: If index is outside [0, upper)
    """
    if not is_integer(index):
        raise ValidationError(
            f"{name}: expected an integer index, got {type(index).__name__}",
            details={name: index},
        )
    if index < 0 or index >= upper:
        raise IndexOutOfBoundsError(
            f"{name}: index {index} out of bounds for size {upper}",
            details={name: index, 'size': upper},
        )
    return int(index)


def check_consistent_length(
    first: Sequence[Any],
    second: Sequence[Any],
    names: tuple[str, str],
) -> None:
    """
    Verify two sequences have the same length.

    Raises:
        DimensionError: If lengths differ
    """
    if len(first) != len(second):
        raise DimensionError(
            f"Inconsistent lengths: {names[0]}={len(first)}, {names[1]}={len(second)}",
            code=codes.LENGTH_MISMATCH,
            details={names[0]: len(first), names[1]: len(second)},
        )


def check_native_number(value: Any, name: str) -> None:
    """
    Verify value is a native number (int or float, not bool).

    Raises:
        TypeMismatchError: If value is not numeric
    """
    if not is_native_number(value):
        raise TypeMismatchError(
            f"{name}: expected a number, got {type(value).__name__}",
            code=codes.NON_NUMERIC_SCALAR,
            details={name: value},
        )
