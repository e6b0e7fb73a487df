"""
Tolerance tiers for numerical comparison.

Defines the thresholds used when floating-point results are compared or
cleaned up:
- STRICT: single operations and exact identities (the library default)
- ACCUMULATED: results of long chains of products and sums (multiply,
  Strassen, inversion, QR) on moderately sized inputs

Used by Matrix.equal, round_matrix_to_zero, Gram-Schmidt and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


# Default absolute threshold for equality and zero-rounding
DELTA = 1e-12

STRICT = ToleranceTier(
    atol=DELTA,
    name='strict',
    description='Absolute 1e-12, matches exact results of single operations',
)

ACCUMULATED = ToleranceTier(
    atol=1e-8,
    name='accumulated',
    description='Absolute 1e-8, allows rounding drift across O(n^3) operations',
)

# Gram-Schmidt rejects orthogonal columns whose norm falls below this
GRAM_SCHMIDT_EPSILON = DELTA

# Inner block size for the blocked multiply kernel
MULTIPLY_BLOCK_SIZE = 16
