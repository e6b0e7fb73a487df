"""
Numerical capabilities for matrix element types.

A Numerical bundles the arithmetic a matrix algorithm needs from its
elements: additive and multiplicative identities, the four operations,
square root, sign and integral conversion. Algorithms are written once
against this interface and run unchanged over floats, exact integers or
fractions.

Capabilities provided:
    number   - NumericalNumber: Python int/float, true division
    int      - NumericalInt: exact integers, truncating division
    fraction - NumericalFraction: fractions.Fraction, exact rational arithmetic

Element-type tags:
    Native numbers (int, float, numpy scalars, never bool) are tagged
    "number". Every other element is tagged with its class, compared by
    identity. Only "number" has an inferred default capability.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any

from pymatrix.core import codes
from pymatrix.core.exceptions import CapabilityError, NumericalError, TypeMismatchError, ValidationError
from pymatrix.core.validation import is_native_number

NUMBER_TAG = 'number'


# =====================================================================
# Element-type tags
# =====================================================================

def element_tag(value: Any) -> str | type:
    """Element-type tag of a single value."""
    if is_native_number(value):
        return NUMBER_TAG
    return type(value)


def tag_name(tag: str | type) -> str:
    """Printable name of an element-type tag."""
    if isinstance(tag, str):
        return tag
    return tag.__name__


# =====================================================================
# Numerical base class
# =====================================================================

class Numerical(ABC):
    """
    Arithmetic capability for one element type.

    Subclasses implement the primitive operations; absolute() and
    to_float() have generic defaults built on sign() and float().
    """

    # False when divide() truncates (integer arithmetic)
    exact_division: bool = True

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def zero(self) -> Any:
        """Additive identity."""
        ...

    @property
    @abstractmethod
    def one(self) -> Any:
        """Multiplicative identity."""
        ...

    @abstractmethod
    def add(self, x: Any, y: Any) -> Any:
        ...

    @abstractmethod
    def subtract(self, x: Any, y: Any) -> Any:
        ...

    @abstractmethod
    def multiply(self, x: Any, y: Any) -> Any:
        ...

    @abstractmethod
    def divide(self, x: Any, y: Any) -> Any:
        """x / y. Raises NumericalError(DIVISION_BY_ZERO) when y is zero."""
        ...

    @abstractmethod
    def sqrt(self, x: Any) -> Any:
        """Principal square root. Raises NumericalError(NEGATIVE_SQRT) for x < 0."""
        ...

    @abstractmethod
    def from_integral(self, n: int) -> Any:
        ...

    @abstractmethod
    def to_integral(self, x: Any) -> int:
        ...

    @abstractmethod
    def sign(self, x: Any) -> int:
        """-1, 0 or 1."""
        ...

    def coerce(self, x: Any) -> Any:
        """Normalize a constructor entry to this capability's element type."""
        return x

    def to_float(self, x: Any) -> float:
        return float(x)

    def absolute(self, x: Any) -> Any:
        if self.sign(x) < 0:
            return self.subtract(self.zero, x)
        return x

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


def _division_by_zero(x: Any) -> NumericalError:
    return NumericalError(
        f"Division by zero: {x!r} / 0",
        code=codes.DIVISION_BY_ZERO,
        details={'dividend': x},
    )


def _negative_sqrt(x: Any) -> NumericalError:
    return NumericalError(
        f"Square root of negative value {x!r}",
        code=codes.NEGATIVE_SQRT,
        details={'value': x},
    )


def _sign(x: Any) -> int:
    return (x > 0) - (x < 0)


# =====================================================================
# Concrete capabilities
# =====================================================================

class NumericalNumber(Numerical):
    """Native Python numbers with float true division."""

    @property
    def name(self) -> str:
        return 'number'

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def add(self, x, y):
        return x + y

    def subtract(self, x, y):
        return x - y

    def multiply(self, x, y):
        return x * y

    def divide(self, x, y):
        if y == 0:
            raise _division_by_zero(x)
        return x / y

    def sqrt(self, x):
        if x < 0:
            raise _negative_sqrt(x)
        return math.sqrt(x)

    def from_integral(self, n: int):
        return n

    def to_integral(self, x) -> int:
        return int(x)

    def sign(self, x) -> int:
        return _sign(x)

    def absolute(self, x):
        return abs(x)


class NumericalInt(Numerical):
    """
    Exact integer arithmetic on Python int.

    Division truncates toward zero and sqrt is the integer square root,
    so algorithms that divide (elimination, inversion, Gram-Schmidt)
    only give exact answers when every quotient is integral.
    """

    exact_division = False

    @property
    def name(self) -> str:
        return 'int'

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def add(self, x, y):
        return x + y

    def subtract(self, x, y):
        return x - y

    def multiply(self, x, y):
        return x * y

    def divide(self, x, y):
        if y == 0:
            raise _division_by_zero(x)
        q = abs(x) // abs(y)
        return q if (x < 0) == (y < 0) else -q

    def sqrt(self, x):
        if x < 0:
            raise _negative_sqrt(x)
        return math.isqrt(int(x))

    def from_integral(self, n: int) -> int:
        return int(n)

    def to_integral(self, x) -> int:
        return int(x)

    def sign(self, x) -> int:
        return _sign(x)

    def absolute(self, x):
        return abs(x)


class NumericalFraction(Numerical):
    """
    Exact rational arithmetic on fractions.Fraction.

    Square roots are exact when numerator and denominator are perfect
    squares; otherwise the float root is approximated by the closest
    fraction with denominator at most max_denominator.
    """

    def __init__(self, max_denominator: int = 1_000_000):
        self.max_denominator = max_denominator

    @property
    def name(self) -> str:
        return 'fraction'

    @property
    def zero(self) -> Fraction:
        return Fraction(0)

    @property
    def one(self) -> Fraction:
        return Fraction(1)

    def add(self, x, y):
        return Fraction(x) + Fraction(y)

    def subtract(self, x, y):
        return Fraction(x) - Fraction(y)

    def multiply(self, x, y):
        return Fraction(x) * Fraction(y)

    def divide(self, x, y):
        if y == 0:
            raise _division_by_zero(x)
        return Fraction(x) / Fraction(y)

    def sqrt(self, x):
        x = Fraction(x)
        if x < 0:
            raise _negative_sqrt(x)
        num_root = math.isqrt(x.numerator)
        den_root = math.isqrt(x.denominator)
        if num_root * num_root == x.numerator and den_root * den_root == x.denominator:
            return Fraction(num_root, den_root)
        return Fraction(math.sqrt(x)).limit_denominator(self.max_denominator)

    def from_integral(self, n: int) -> Fraction:
        return Fraction(n)

    def coerce(self, x):
        """
        Fractions pass through; "a/b" strings and native numbers are converted.

        Raises:
            TypeMismatchError: For any other element type
        """
        if isinstance(x, Fraction):
            return x
        if isinstance(x, str):
            return parse_fraction(x)
        if is_native_number(x):
            return Fraction(x)
        raise TypeMismatchError(
            f"Cannot represent {type(x).__name__} as a Fraction",
            code=codes.ELEMENT_TYPE_MISMATCH,
            details={'value': x},
        )

    def to_integral(self, x) -> int:
        return int(x)

    def sign(self, x) -> int:
        return _sign(x)

    def absolute(self, x):
        return abs(Fraction(x))

    def __repr__(self) -> str:
        return f"NumericalFraction(max_denominator={self.max_denominator})"


def parse_fraction(text: str) -> Fraction:
    """
    Build a Fraction from an "a/b" string.

    Args:
        text: String of the form "numerator/denominator" (whitespace allowed)

    Returns:
        The reduced Fraction

    Raises:
        ValidationError: If text is not a string or is malformed
        NumericalError: If the denominator is zero
    """
    if not isinstance(text, str):
        raise ValidationError(
            f"text: expected a string, got {type(text).__name__}",
            details={'text': text},
        )
    if '/' not in text:
        raise ValidationError(
            f"text: expected 'numerator/denominator', got {text!r}",
            details={'text': text},
        )
    numerator, _, denominator = text.partition('/')
    try:
        num = int(numerator.strip())
        den = int(denominator.strip())
    except ValueError:
        raise ValidationError(
            f"text: numerator and denominator must be integers, got {text!r}",
            details={'text': text},
        ) from None
    if den == 0:
        raise _division_by_zero(num)
    return Fraction(num, den)


# =====================================================================
# Resolution
# =====================================================================

_NUMERICAL_CLASSES: dict[str, type[Numerical]] = {
    'number': NumericalNumber,
    'int': NumericalInt,
    'fraction': NumericalFraction,
}


def resolve_numerical(
    numerical: str | Numerical | None,
    tag: str | type | None = None,
) -> Numerical:
    """
    Resolve a numerical argument to a Numerical instance.

    Args:
        numerical: A Numerical instance, a registered name, or None
        tag: Element-type tag used for inference when numerical is None

    Returns:
        The resolved capability

    Raises:
        CapabilityError: If the name is unknown, or numerical is None and
            the element type is not a native number
        ValidationError: If numerical has an unsupported type
    """
    if numerical is None:
        if tag is None or tag == NUMBER_TAG:
            return NumericalNumber()
        raise CapabilityError(
            f"No Numerical capability for element type {tag_name(tag)!r}; "
            f"pass numerical= explicitly",
            details={'dtype': tag_name(tag)},
        )
    if isinstance(numerical, Numerical):
        return numerical
    if isinstance(numerical, str):
        cls = _NUMERICAL_CLASSES.get(numerical.lower())
        if cls is None:
            valid = ', '.join(sorted(_NUMERICAL_CLASSES.keys()))
            raise CapabilityError(
                f"Unknown numerical: {numerical!r}. Valid numericals: {valid}",
                code=codes.UNKNOWN_NUMERICAL,
                details={'numerical': numerical},
            )
        return cls()
    raise ValidationError(
        f"numerical must be str or Numerical, got {type(numerical).__name__}",
        details={'numerical': numerical},
    )


def numerical_for(values: list[Any], numerical: str | Numerical | None = None) -> Numerical:
    """Resolve a capability for a list of values, inferring from the first element."""
    if numerical is not None or not values:
        return resolve_numerical(numerical)
    return resolve_numerical(None, element_tag(values[0]))


__all__ = [
    'NUMBER_TAG',
    'element_tag',
    'tag_name',
    'Numerical',
    'NumericalNumber',
    'NumericalInt',
    'NumericalFraction',
    'parse_fraction',
    'resolve_numerical',
    'numerical_for',
]
