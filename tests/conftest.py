"""Pytest fixtures for mprsa tests."""
import random

import pytest

from mprsa.core.config import RADIX_16, RADIX_32
from mprsa.core.samples import sample_vectors


@pytest.fixture
def rng():
    """Deterministic random source so failures reproduce."""
    return random.Random(0x5EED)


@pytest.fixture
def radix():
    """Default 16-bit radix."""
    return RADIX_16


@pytest.fixture(params=[RADIX_16, RADIX_32], ids=['w16', 'w32'])
def any_radix(request):
    """Both supported production word widths."""
    return request.param


@pytest.fixture
def sample():
    """Sample modulus, exponent and plaintext as 16-bit word arrays."""
    return sample_vectors(RADIX_16)


@pytest.fixture
def random_value(rng):
    """Factory for random n-word ints, optionally with a non-zero top word."""
    def make(n, radix=RADIX_16, top_nonzero=False):
        low = 1 << (radix.bits * (n - 1)) if top_nonzero else 0
        return rng.randrange(low, 1 << (radix.bits * n))
    return make
