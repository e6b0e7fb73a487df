"""
Tests for tolerance tiers and error-code registry.
"""

import dataclasses

import pytest

from pymatrix.core import codes
from pymatrix.core.tolerances import (
    ACCUMULATED,
    DELTA,
    GRAM_SCHMIDT_EPSILON,
    MULTIPLY_BLOCK_SIZE,
    STRICT,
    ToleranceTier,
)


class TestToleranceTiers:

    def test_strict_matches_delta(self):
        assert STRICT.atol == DELTA == 1e-12

    def test_accumulated_is_looser(self):
        assert ACCUMULATED.atol > STRICT.atol

    def test_tiers_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            STRICT.atol = 1.0

    def test_tier_fields(self):
        tier = ToleranceTier(atol=1e-6, name='loose', description='test tier')
        assert tier.name == 'loose'

    def test_constants(self):
        assert GRAM_SCHMIDT_EPSILON == DELTA
        assert MULTIPLY_BLOCK_SIZE == 16


class TestCodes:

    def test_all_codes_listed_in_all(self):
        for name in codes.__all__:
            if name != 'ALL_CODES':
                assert getattr(codes, name) in codes.ALL_CODES

    def test_codes_are_unique(self):
        values = [getattr(codes, name) for name in codes.__all__ if name != 'ALL_CODES']
        assert len(values) == len(set(values)) == len(codes.ALL_CODES)
