"""
Scalar and vector math utilities.

Vectors are plain sequences (list, tuple or 1-D numpy array). The vector
and scalar helpers are generic over a Numerical capability: pass
numerical= explicitly, or let it be inferred from the first element
(only native numbers have an inferred capability). dot() takes a numpy
fast path when every entry is a float.

The integer and rounding helpers (gcd, lcm, powers of two, to_fixed_number,
count_decimals, frac_part) work on native numbers only.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Sequence

import numpy as np

from pymatrix.core import codes
from pymatrix.core.exceptions import DimensionError, ValidationError, ZeroVectorError
from pymatrix.core.tolerances import DELTA
from pymatrix.core.validation import (
    check_consistent_length,
    check_native_number,
    check_non_negative_int,
    check_sequence,
    is_integer,
)
from pymatrix.numerical import Numerical, NumericalNumber, element_tag, numerical_for, resolve_numerical


def _vector(values: Any, name: str) -> list[Any]:
    values = check_sequence(values, name)
    if values and isinstance(values[0], (list, tuple)):
        raise ValidationError(
            f"{name}: expected a flat vector, got nested sequences",
            code=codes.INVALID_ENTRIES,
        )
    return values


def _pair(a: Any, b: Any, numerical: str | Numerical | None) -> tuple[list, list, Numerical]:
    a = _vector(a, 'a')
    b = _vector(b, 'b')
    check_consistent_length(a, b, ('a', 'b'))
    return a, b, numerical_for(a or b, numerical)


def _scalar_numerical(x: Any, numerical: str | Numerical | None) -> Numerical:
    if numerical is None:
        return resolve_numerical(None, element_tag(x))
    return resolve_numerical(numerical)


# =====================================================================
# Vector operations
# =====================================================================

def dot(a: Sequence[Any], b: Sequence[Any], numerical: str | Numerical | None = None) -> Any:
    """
    Dot product of two equal-length vectors.

    Raises:
        DimensionError: If the lengths differ
    """
    a, b, num = _pair(a, b, numerical)
    if (
        isinstance(num, NumericalNumber)
        and a
        and all(type(x) is float for x in a)
        and all(type(y) is float for y in b)
    ):
        return float(np.dot(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)))
    result = num.zero
    for x, y in zip(a, b):
        result = num.add(result, num.multiply(x, y))
    return result


def norm(v: Sequence[Any], numerical: str | Numerical | None = None) -> Any:
    """Euclidean norm."""
    v = _vector(v, 'v')
    num = numerical_for(v, numerical)
    return num.sqrt(dot(v, v, num))


def normalize(v: Sequence[Any], numerical: str | Numerical | None = None) -> list[Any]:
    """
    Scale v to unit length.

    Raises:
        ZeroVectorError: If v has zero norm
    """
    v = _vector(v, 'v')
    num = numerical_for(v, numerical)
    length = norm(v, num)
    if num.sign(length) == 0:
        raise ZeroVectorError("Cannot normalize a zero vector", details={'v': v})
    return [num.divide(x, length) for x in v]


def project(a: Sequence[Any], b: Sequence[Any], numerical: str | Numerical | None = None) -> list[Any]:
    """
    Projection of a onto b: b * (dot(a, b) / dot(b, b)).

    Raises:
        DimensionError: If the lengths differ
        ZeroVectorError: If b is the zero vector
    """
    a, b, num = _pair(a, b, numerical)
    denominator = dot(b, b, num)
    if num.sign(denominator) == 0:
        raise ZeroVectorError("Cannot project onto a zero vector", details={'b': b})
    factor = num.divide(dot(a, b, num), denominator)
    return [num.multiply(x, factor) for x in b]


def distance(a: Sequence[Any], b: Sequence[Any], numerical: str | Numerical | None = None) -> Any:
    """Euclidean distance between a and b."""
    a, b, num = _pair(a, b, numerical)
    return norm([num.subtract(x, y) for x, y in zip(a, b)], num)


def angle(a: Sequence[Any], b: Sequence[Any], numerical: str | Numerical | None = None) -> float:
    """
    Angle between a and b in radians.

    Raises:
        DimensionError: If the lengths differ
        ZeroVectorError: If either vector is zero
    """
    a, b, num = _pair(a, b, numerical)
    norm_a = num.to_float(norm(a, num))
    norm_b = num.to_float(norm(b, num))
    if norm_a == 0.0 or norm_b == 0.0:
        raise ZeroVectorError("Angle is undefined for a zero vector", details={'a': a, 'b': b})
    cosine = num.to_float(dot(a, b, num)) / (norm_a * norm_b)
    return math.acos(max(-1.0, min(1.0, cosine)))


def cross(a: Sequence[Any], b: Sequence[Any], numerical: str | Numerical | None = None) -> list[Any]:
    """
    Cross product of two 3-vectors.

    Raises:
        DimensionError: If either vector does not have length 3
    """
    a, b, num = _pair(a, b, numerical)
    if len(a) != 3:
        raise DimensionError(
            f"cross: vectors must have length 3, got {len(a)}",
            code=codes.LENGTH_MISMATCH,
            details={'a': len(a), 'b': len(b)},
        )
    mul, sub = num.multiply, num.subtract
    return [
        sub(mul(a[1], b[2]), mul(a[2], b[1])),
        sub(mul(a[2], b[0]), mul(a[0], b[2])),
        sub(mul(a[0], b[1]), mul(a[1], b[0])),
    ]


# =====================================================================
# Scalar operations
# =====================================================================

def absolute(x: Any, numerical: str | Numerical | None = None) -> Any:
    return _scalar_numerical(x, numerical).absolute(x)


def sqrt(x: Any, numerical: str | Numerical | None = None) -> Any:
    return _scalar_numerical(x, numerical).sqrt(x)


def sign(x: Any, numerical: str | Numerical | None = None) -> int:
    return _scalar_numerical(x, numerical).sign(x)


def total(values: Sequence[Any], numerical: str | Numerical | None = None) -> Any:
    """Sum of values; the capability's zero for an empty sequence."""
    values = _vector(values, 'values')
    num = numerical_for(values, numerical)
    result = num.zero
    for x in values:
        result = num.add(result, x)
    return result


def product(values: Sequence[Any], numerical: str | Numerical | None = None) -> Any:
    """Product of values; the capability's one for an empty sequence."""
    values = _vector(values, 'values')
    num = numerical_for(values, numerical)
    result = num.one
    for x in values:
        result = num.multiply(result, x)
    return result


# =====================================================================
# Integer helpers
# =====================================================================

def _check_integer(value: Any, name: str) -> int:
    if not is_integer(value):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}",
            details={name: value},
        )
    return int(value)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (non-negative)."""
    return math.gcd(_check_integer(a, 'a'), _check_integer(b, 'b'))


def lcm(a: int, b: int) -> int:
    """Least common multiple (non-negative); 0 if either argument is 0."""
    return math.lcm(_check_integer(a, 'a'), _check_integer(b, 'b'))


def is_power_of_two(n: Any) -> bool:
    """True for 1, 2, 4, 8, ...; False for non-integers and n <= 0."""
    if not is_integer(n) or n <= 0:
        return False
    n = int(n)
    return n & (n - 1) == 0


def next_power_of_two(n: int) -> int:
    """
    Smallest power of two >= n.

    next_power_of_two(0) is 1.

    Raises:
        ValidationError: If n is not a non-negative integer
    """
    n = check_non_negative_int(n, 'n')
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


# =====================================================================
# Floating-point helpers
# =====================================================================

def approx_equal(x: Any, y: Any, tolerance: float = DELTA) -> bool:
    """True when |x - y| < tolerance."""
    return abs(x - y) < tolerance


def to_fixed_number(x: float, digits: int, base: int = 10) -> float:
    """
    Round x to the given number of digits in base, halves rounding up.

    Args:
        x: Value to round
        digits: Number of fractional digits to keep
        base: Positional base (default 10)

    Returns:
        The rounded value as a float
    """
    check_native_number(x, 'x')
    digits = check_non_negative_int(digits, 'digits')
    scale = base ** digits
    return math.floor(x * scale + 0.5) / scale


def count_decimals(x: float) -> int:
    """Number of digits after the decimal point in the shortest repr of x."""
    check_native_number(x, 'x')
    if float(x).is_integer():
        return 0
    exponent = Decimal(repr(float(x))).normalize().as_tuple().exponent
    return max(0, -exponent)


def frac_part(x: float) -> float:
    """
    Fractional part of |x|, rounded to the decimals of x.

    frac_part(3.25) == 0.25 and frac_part(-1.5) == 0.5.
    """
    check_native_number(x, 'x')
    magnitude = abs(x)
    return round(magnitude - math.trunc(magnitude), count_decimals(magnitude))


__all__ = [
    'dot',
    'norm',
    'normalize',
    'project',
    'distance',
    'angle',
    'cross',
    'absolute',
    'sqrt',
    'sign',
    'total',
    'product',
    'gcd',
    'lcm',
    'is_power_of_two',
    'next_power_of_two',
    'approx_equal',
    'to_fixed_number',
    'count_decimals',
    'frac_part',
]
